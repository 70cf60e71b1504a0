"""
Exceptions raised by the gesture pointer system.
"""


class ConfigError(ValueError):
    """Raised when configuration values cannot produce a working pointer."""
