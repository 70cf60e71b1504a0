"""
Type definitions for the gesture pointer system.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Sequence, Tuple, runtime_checkable


# One landmark is (x, y, z) in normalized [0..1] camera space; z is unused.
Landmark = Sequence[float]
LandmarkFrame = Sequence[Landmark]

NUM_LANDMARKS = 21


class PointerMode(Enum):
    """Interaction mode classified from the finger configuration of a frame."""
    IDLE = "idle"                # index down, position held
    MOVING = "moving"            # index up
    CLICK_READY = "click_ready"  # index + middle up, tips apart
    CLICKING = "clicking"        # index + middle up, tips pinched


@dataclass
class CursorState:
    """Published pointer state in screen pixels (origin top-left)."""
    x: float = 0.0
    y: float = 0.0
    is_clicking: bool = False  # level signal, true every frame the pinch holds


@dataclass
class ClickCommand:
    """Command to click once at a screen position."""
    x: float
    y: float


@dataclass
class GestureReading:
    """Per-frame interpretation result, mostly useful for the debug overlay."""
    mode: PointerMode
    cursor: CursorState
    index_tip_px: Tuple[float, float]
    middle_tip_px: Tuple[float, float]
    pinch_distance_px: Optional[float] = None


@runtime_checkable
class PointerSinkProto(Protocol):
    """Abstract protocol for sinks that receive pointer updates."""

    async def on_frame(self, x: float, y: float, is_clicking: bool) -> None:
        """Receive the cursor state of a processed frame."""
        ...

    async def click(self, x: float, y: float) -> None:
        """Perform a single click at the given screen position."""
        ...
