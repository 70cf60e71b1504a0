"""
Debug overlay drawn on the camera preview.
"""
from typing import Optional

import cv2
import numpy as np

from .geometry import ActiveRegion
from .types import GestureReading, LandmarkFrame, PointerMode

MAGENTA = (255, 0, 255)
GREEN = (0, 255, 0)
WHITE = (255, 255, 255)


def draw_landmarks(frame: np.ndarray, landmarks: LandmarkFrame) -> np.ndarray:
    """
    Draw hand landmarks on the frame.

    Args:
        frame: Input frame
        landmarks: List of (x, y[, z]) coordinates in [0..1] range

    Returns:
        Frame with landmarks drawn
    """
    height, width = frame.shape[:2]

    for i, landmark in enumerate(landmarks):
        px = int(landmark[0] * width)
        py = int(landmark[1] * height)
        cv2.circle(frame, (px, py), 3, GREEN, -1)
        cv2.putText(frame, str(i), (px + 5, py - 5), cv2.FONT_HERSHEY_SIMPLEX, 0.3, WHITE, 1)

    return frame


def draw_active_region(frame: np.ndarray, region: ActiveRegion) -> np.ndarray:
    """Outline the part of the frame that maps onto the screen."""
    cv2.rectangle(frame, (int(region.left), int(region.top)),
                  (int(region.right), int(region.bottom)), MAGENTA, 2)
    return frame


def draw_pinch(frame: np.ndarray, reading: GestureReading) -> np.ndarray:
    """Mark the fingertip midpoint while a pinch is held."""
    if reading.mode is not PointerMode.CLICKING:
        return frame
    cx = int((reading.index_tip_px[0] + reading.middle_tip_px[0]) / 2)
    cy = int((reading.index_tip_px[1] + reading.middle_tip_px[1]) / 2)
    cv2.circle(frame, (cx, cy), 15, GREEN, -1)
    return frame


def draw_status(frame: np.ndarray, active: bool, reading: Optional[GestureReading],
                smoothing_factor: int) -> np.ndarray:
    """Draw the activation state, mode and cursor readout."""
    if not active:
        lines = ["Pointer OFF - press SPACE to start"]
    elif reading is None:
        lines = ["No hand detected"]
    else:
        cursor = reading.cursor
        lines = [
            f"Mode: {reading.mode.value}",
            f"Cursor: x={cursor.x:.0f}px y={cursor.y:.0f}px",
            "CLICKING" if cursor.is_clicking else "HOVERING",
        ]
    lines.append(f"Smoothing: {smoothing_factor}")

    y = 30
    for line in lines:
        color = GREEN if line == "CLICKING" else WHITE
        cv2.putText(frame, line, (10, y), cv2.FONT_HERSHEY_SIMPLEX, 0.6, color, 2)
        y += 25

    # Instructions
    cv2.putText(frame, "SPACE = start/stop  +/- = smoothing  q = quit",
                (10, frame.shape[0] - 20), cv2.FONT_HERSHEY_SIMPLEX, 0.5, WHITE, 1)
    return frame
