"""
Activation lifecycle and sink dispatch for the pointer controller.
"""
import logging
from typing import Optional, Tuple

from .config import PointerConfig, validate_pointer_config, validate_screen
from .geometry import ActiveRegion
from .gestures import PointerController
from .smoothing import check_smoothing_factor
from .types import CursorState, GestureReading, LandmarkFrame, PointerSinkProto

logger = logging.getLogger(__name__)


class PointerSession:
    """
    Feeds landmark frames to a PointerController and forwards the results.

    While active, every processed frame is sent to the sink with on_frame(),
    followed by click() when the frame starts a pinch. Exceptions raised by
    the sink propagate to the caller of handle_frame().
    """

    def __init__(self, cfg: PointerConfig, sink: PointerSinkProto,
                 frame_wh: Tuple[int, int], screen_wh: Tuple[int, int]):
        """
        Initialize an inactive session.

        Raises:
            ConfigError: if the settings cannot produce a working pointer
        """
        validate_pointer_config(cfg)
        validate_screen(*screen_wh)
        ActiveRegion.from_frame(frame_wh[0], frame_wh[1], cfg.frame_reduction_margin)
        self.cfg = cfg
        self.sink = sink
        self.frame_wh = frame_wh
        self.screen_wh = screen_wh
        self.smoothing_factor = cfg.smoothing_factor
        self.controller: Optional[PointerController] = None
        self.last_reading: Optional[GestureReading] = None

    @property
    def is_active(self) -> bool:
        return self.controller is not None

    @property
    def cursor(self) -> Optional[CursorState]:
        """Current cursor state, or None while inactive."""
        if self.controller is None:
            return None
        return self.controller.cursor

    def activate(self) -> None:
        """Start a new session from a neutral cursor state."""
        self.controller = PointerController(self.cfg, self.frame_wh, self.screen_wh)
        self.controller.smoothing_factor = self.smoothing_factor
        self.last_reading = None
        logger.info("Gesture pointer activated")

    def deactivate(self) -> None:
        """Discard all session state."""
        self.controller = None
        self.last_reading = None
        logger.info("Gesture pointer deactivated")

    def toggle(self) -> bool:
        """Flip the activation state and return the new one."""
        if self.is_active:
            self.deactivate()
        else:
            self.activate()
        return self.is_active

    def set_smoothing_factor(self, value: int) -> None:
        """Change smoothing from the next frame on, keeping the held position."""
        self.smoothing_factor = check_smoothing_factor(value)
        if self.controller is not None:
            self.controller.smoothing_factor = value
        logger.info(f"Smoothing factor set to {value}")

    async def handle_frame(self, landmarks: Optional[LandmarkFrame]) -> Optional[GestureReading]:
        """
        Process one tracker callback.

        Args:
            landmarks: Hand landmarks (None if no hand detected)

        Returns:
            GestureReading if the frame was processed, None otherwise
        """
        if self.controller is None:
            return None

        reading, click_cmd = self.controller.process_frame(landmarks)
        if reading is None:
            return None
        self.last_reading = reading

        cursor = reading.cursor
        await self.sink.on_frame(cursor.x, cursor.y, cursor.is_clicking)
        if click_cmd:
            logger.info(f"Click at ({click_cmd.x:.0f}, {click_cmd.y:.0f})")
            await self.sink.click(click_cmd.x, click_cmd.y)
        return reading
