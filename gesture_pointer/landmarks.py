"""
Hand landmark helpers for the pointing and pinching gestures.
"""
import math
from typing import Optional, Tuple

from .types import LandmarkFrame, NUM_LANDMARKS

# MediaPipe hand landmark indices
INDEX_PIP = 6
INDEX_TIP = 8
MIDDLE_PIP = 10
MIDDLE_TIP = 12


def validate_frame(landmarks: Optional[LandmarkFrame]) -> bool:
    """
    Check that a landmark frame can be interpreted.

    Args:
        landmarks: Hand landmarks, or None if no hand detected

    Returns:
        True if there are 21 landmarks with finite x and y coordinates
    """
    if landmarks is None:
        return False
    try:
        if len(landmarks) < NUM_LANDMARKS:
            return False
        for landmark in landmarks[:NUM_LANDMARKS]:
            if not (math.isfinite(float(landmark[0])) and math.isfinite(float(landmark[1]))):
                return False
    except (TypeError, IndexError, KeyError, ValueError, OverflowError):
        return False
    return True


def finger_up(landmarks: LandmarkFrame, tip_idx: int, pip_idx: int) -> bool:
    """
    Check whether a finger is raised.

    Image y grows downwards, so a raised finger has its tip above
    (numerically smaller than) its PIP joint.
    """
    return landmarks[tip_idx][1] < landmarks[pip_idx][1]


def is_index_up(landmarks: LandmarkFrame) -> bool:
    """Check if the index finger is raised (pointing)."""
    return finger_up(landmarks, INDEX_TIP, INDEX_PIP)


def is_middle_up(landmarks: LandmarkFrame) -> bool:
    """Check if the middle finger is raised."""
    return finger_up(landmarks, MIDDLE_TIP, MIDDLE_PIP)


def to_pixels(landmarks: LandmarkFrame, idx: int, frame_wh: Tuple[int, int]) -> Tuple[float, float]:
    """
    Convert a normalized landmark to camera pixel coordinates.

    Args:
        landmarks: Hand landmarks in [0..1] range
        idx: Landmark index
        frame_wh: Frame dimensions (width, height)

    Returns:
        (x, y) in pixels
    """
    frame_width, frame_height = frame_wh
    return (landmarks[idx][0] * frame_width, landmarks[idx][1] * frame_height)
