"""
Gesture Pointer

A Python service that reads webcam frames, detects hand landmarks using MediaPipe,
and turns a pointing index finger into a cursor and an index+middle pinch into clicks.
"""

__version__ = "0.1.0"

from .types import ClickCommand, CursorState, GestureReading, PointerMode, PointerSinkProto
from .errors import ConfigError
from .config import load_config, Cfg, PointerConfig
from .geometry import ActiveRegion, map_range, distance
from .smoothing import ExponentialSmoother
from .gestures import GestureInterpreter, ClickEdgeDetector, PointerController
from .session import PointerSession
from .controller_mock import MockController

__all__ = [
    "ClickCommand",
    "CursorState",
    "GestureReading",
    "PointerMode",
    "PointerSinkProto",
    "ConfigError",
    "load_config",
    "Cfg",
    "PointerConfig",
    "ActiveRegion",
    "map_range",
    "distance",
    "ExponentialSmoother",
    "GestureInterpreter",
    "ClickEdgeDetector",
    "PointerController",
    "PointerSession",
    "MockController",
]
