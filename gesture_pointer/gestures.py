"""
Gesture interpretation that turns hand landmarks into pointer updates.
"""
import logging
from dataclasses import replace
from typing import Optional, Tuple

from .config import PointerConfig, validate_pointer_config, validate_screen
from .geometry import ActiveRegion, distance
from .landmarks import (
    INDEX_TIP, MIDDLE_TIP, is_index_up, is_middle_up, to_pixels, validate_frame,
)
from .smoothing import ExponentialSmoother
from .types import ClickCommand, CursorState, GestureReading, LandmarkFrame, PointerMode

logger = logging.getLogger(__name__)


class GestureInterpreter:
    """
    Converts one hand's landmarks into a smoothed cursor and a pinch level.

    Features:
    - Index finger up moves the cursor through the active region
    - Index finger down holds the last position
    - Index + middle up with tips closer than the threshold sets is_clicking
    - Frames without a usable hand leave the cursor untouched
    """

    def __init__(self, cfg: PointerConfig, frame_wh: Tuple[int, int], screen_wh: Tuple[int, int]):
        """
        Initialize the interpreter.

        Args:
            cfg: Pointer settings (margin, smoothing factor, pinch threshold)
            frame_wh: Camera frame dimensions (width, height) in pixels
            screen_wh: Screen dimensions (width, height) in pixels

        Raises:
            ConfigError: if the settings leave no usable active region
        """
        validate_pointer_config(cfg)
        validate_screen(*screen_wh)
        self.frame_wh = frame_wh
        self.screen_wh = screen_wh
        self.region = ActiveRegion.from_frame(frame_wh[0], frame_wh[1], cfg.frame_reduction_margin)
        self.pinch_threshold_px = cfg.pinch_threshold_px
        self.smoother = ExponentialSmoother(cfg.smoothing_factor)
        self.cursor = CursorState()
        self.mode = PointerMode.IDLE

    @property
    def smoothing_factor(self) -> int:
        return self.smoother.factor

    @smoothing_factor.setter
    def smoothing_factor(self, value: int) -> None:
        self.smoother.factor = value

    def update(self, landmarks: Optional[LandmarkFrame]) -> Optional[GestureReading]:
        """
        Interpret one frame.

        Args:
            landmarks: 21 hand landmarks in [0..1] range, or None if no hand detected

        Returns:
            GestureReading for the frame, or None if the frame was not processed
        """
        if landmarks is None:
            return None
        if not validate_frame(landmarks):
            logger.debug("Rejected malformed landmark frame")
            return None

        index_up = is_index_up(landmarks)
        middle_up = is_middle_up(landmarks)
        index_tip = to_pixels(landmarks, INDEX_TIP, self.frame_wh)
        middle_tip = to_pixels(landmarks, MIDDLE_TIP, self.frame_wh)

        if index_up:
            target_x, target_y = self.region.to_screen(index_tip[0], index_tip[1], *self.screen_wh)
            self.cursor.x, self.cursor.y = self.smoother(target_x, target_y)

        pinch_distance = None
        is_clicking = False
        if index_up and middle_up:
            pinch_distance = distance(index_tip, middle_tip)
            is_clicking = pinch_distance < self.pinch_threshold_px
        self.cursor.is_clicking = is_clicking

        if not index_up:
            self.mode = PointerMode.IDLE
        elif is_clicking:
            self.mode = PointerMode.CLICKING
        elif middle_up:
            self.mode = PointerMode.CLICK_READY
        else:
            self.mode = PointerMode.MOVING

        return GestureReading(
            mode=self.mode,
            cursor=replace(self.cursor),
            index_tip_px=index_tip,
            middle_tip_px=middle_tip,
            pinch_distance_px=pinch_distance
        )


class ClickEdgeDetector:
    """Turns the is_clicking level signal into one click per rising edge."""

    def __init__(self):
        self.prev_clicking = False

    def update(self, cursor: CursorState) -> Optional[ClickCommand]:
        """
        Process the cursor state of a frame.

        Returns:
            ClickCommand on a False -> True transition of is_clicking, None otherwise
        """
        rising = cursor.is_clicking and not self.prev_clicking
        self.prev_clicking = cursor.is_clicking
        if rising:
            return ClickCommand(x=cursor.x, y=cursor.y)
        return None


class PointerController:
    """
    Per-session pointer state: one interpreter and one edge detector.

    A new controller is built for every activation so that no position or
    click state carries over from a previous session.
    """

    def __init__(self, cfg: PointerConfig, frame_wh: Tuple[int, int], screen_wh: Tuple[int, int]):
        self.interpreter = GestureInterpreter(cfg, frame_wh, screen_wh)
        self.click_detector = ClickEdgeDetector()

    @property
    def cursor(self) -> CursorState:
        return replace(self.interpreter.cursor)

    @property
    def smoothing_factor(self) -> int:
        return self.interpreter.smoothing_factor

    @smoothing_factor.setter
    def smoothing_factor(self, value: int) -> None:
        self.interpreter.smoothing_factor = value

    def process_frame(self, landmarks: Optional[LandmarkFrame]
                      ) -> Tuple[Optional[GestureReading], Optional[ClickCommand]]:
        """
        Process a frame and return the reading and any click command.

        Args:
            landmarks: Hand landmarks (None if no hand detected)

        Returns:
            Tuple of (reading, click_command); both None if the frame was not processed
        """
        reading = self.interpreter.update(landmarks)
        if reading is None:
            return None, None

        click_cmd = self.click_detector.update(reading.cursor)
        return reading, click_cmd
