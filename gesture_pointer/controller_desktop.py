"""
Pointer sink that drives the real OS cursor with pyautogui.
"""
import logging
from typing import Tuple

import pyautogui

logger = logging.getLogger(__name__)

# The pointer is driven every frame; pyautogui's per-call sleep would stall the loop
pyautogui.PAUSE = 0
pyautogui.FAILSAFE = False


def screen_size() -> Tuple[int, int]:
    """Size of the primary display in pixels."""
    width, height = pyautogui.size()
    return int(width), int(height)


class DesktopController:
    """Moves the system cursor and injects left clicks."""

    def __init__(self):
        self.screen_width, self.screen_height = screen_size()
        logger.info(f"Desktop controller on a {self.screen_width}x{self.screen_height} screen")

    def _clamp(self, x: float, y: float) -> Tuple[int, int]:
        # pyautogui addresses pixels 0..size-1
        return (min(int(x), self.screen_width - 1), min(int(y), self.screen_height - 1))

    async def on_frame(self, x: float, y: float, is_clicking: bool) -> None:
        """Move the system cursor to the given position."""
        pyautogui.moveTo(*self._clamp(x, y))

    async def click(self, x: float, y: float) -> None:
        """Left click at the given position."""
        px, py = self._clamp(x, y)
        pyautogui.click(px, py)
        logger.debug(f"[DesktopController] Clicked at ({px}, {py})")
