"""
Mock pointer sink for exercising gesture commands without touching the OS.
"""
import logging
from typing import List, Tuple

logger = logging.getLogger(__name__)


class MockController:
    """Mock sink that logs and records pointer updates instead of executing them."""

    def __init__(self):
        """Initialize the mock controller."""
        self.frame_count = 0
        self.click_count = 0
        self.frames: List[Tuple[float, float, bool]] = []
        self.clicks: List[Tuple[float, float]] = []

    async def on_frame(self, x: float, y: float, is_clicking: bool) -> None:
        """Record the cursor state of a frame."""
        self.frame_count += 1
        self.frames.append((x, y, is_clicking))
        logger.debug(f"[MockController] Cursor: x={x:.1f} y={y:.1f} clicking={is_clicking}")

    async def click(self, x: float, y: float) -> None:
        """Record a click instead of performing it."""
        self.click_count += 1
        self.clicks.append((x, y))
        logger.info(f"[MockController] Click: ({x:.0f}, {y:.0f}) (call #{self.click_count})")

    def reset_counters(self) -> None:
        """Reset action counters for testing."""
        self.frame_count = 0
        self.click_count = 0
        self.frames.clear()
        self.clicks.clear()
