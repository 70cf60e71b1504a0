"""
Coordinate mapping between camera space and screen space.
"""
import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .errors import ConfigError


def map_range(value: float, in_min: float, in_max: float,
              out_min: float, out_max: float) -> float:
    """
    Map a value from one range to another, clamping to the input range first.

    Args:
        value: Value in the source range
        in_min: Lower bound of the source range
        in_max: Upper bound of the source range, must be greater than in_min
        out_min: Lower bound of the destination range
        out_max: Upper bound of the destination range

    Returns:
        Linearly interpolated destination value
    """
    if not in_max > in_min:
        raise ValueError(f"Empty source range: [{in_min}, {in_max}]")
    # np.interp holds the end values outside [in_min, in_max]
    return float(np.interp(value, (in_min, in_max), (out_min, out_max)))


def distance(p1: Tuple[float, float], p2: Tuple[float, float]) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2[0] - p1[0], p2[1] - p1[1])


@dataclass(frozen=True)
class ActiveRegion:
    """Inset rectangle of the camera frame that maps 1:1 onto the screen."""
    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_frame(cls, frame_width: float, frame_height: float, margin: float) -> "ActiveRegion":
        """
        Build the region left after removing `margin` pixels on every side.

        Raises:
            ConfigError: if the remaining region has no width or height
        """
        region = cls(left=margin, top=margin,
                     right=frame_width - margin, bottom=frame_height - margin)
        if not (region.width > 0 and region.height > 0):
            raise ConfigError(
                f"Active region is empty: margin {margin}px on a "
                f"{frame_width}x{frame_height} frame"
            )
        return region

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def to_screen(self, x_px: float, y_px: float,
                  screen_width: float, screen_height: float) -> Tuple[float, float]:
        """Map a camera pixel position to a screen position."""
        return (
            map_range(x_px, self.left, self.right, 0, screen_width),
            map_range(y_px, self.top, self.bottom, 0, screen_height),
        )
