"""Cursor smoothing filters."""
from typing import Tuple

from .errors import ConfigError


def check_smoothing_factor(factor: int) -> int:
    """Return `factor` if it is a usable smoothing divisor, raise otherwise."""
    if isinstance(factor, bool) or not isinstance(factor, int) or factor < 1:
        raise ConfigError(f"smoothing_factor must be an integer >= 1, got {factor!r}")
    return factor


class ExponentialSmoother:
    """
    Moves the held point a fixed fraction of the way towards each new target.

    Each update blends by 1/factor: a factor of 1 snaps to the target, larger
    factors converge more slowly. The blend never overshoots and the held
    point only changes when a new target is given.
    """

    def __init__(self, factor: int = 5, x: float = 0.0, y: float = 0.0):
        self._factor = check_smoothing_factor(factor)
        self.x = x
        self.y = y

    @property
    def factor(self) -> int:
        return self._factor

    @factor.setter
    def factor(self, value: int) -> None:
        # Held position is kept; the new factor applies from the next update.
        self._factor = check_smoothing_factor(value)

    def __call__(self, x: float, y: float) -> Tuple[float, float]:
        self.x = self.x + (x - self.x) / self._factor
        self.y = self.y + (y - self.y) / self._factor
        return self.x, self.y

    def reset(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = x
        self.y = y
