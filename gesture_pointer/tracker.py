"""
Hand landmark detection using MediaPipe.
"""
from typing import List, Optional, Tuple

import cv2
import mediapipe as mp
import numpy as np

from .config import MediaPipeConfig


class HandsTracker:
    """Hand landmark tracker using MediaPipe Hands."""

    def __init__(self, cfg: MediaPipeConfig):
        """
        Initialize the hands tracker.

        Args:
            cfg: MediaPipe settings (max hands, model complexity, confidences)
        """
        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=cfg.max_num_hands,
            model_complexity=cfg.model_complexity,
            min_detection_confidence=cfg.min_detection_confidence,
            min_tracking_confidence=cfg.min_tracking_confidence
        )

    def process(self, frame_bgr: np.ndarray) -> Optional[List[Tuple[float, float, float]]]:
        """
        Process a frame and return hand landmarks.

        Args:
            frame_bgr: Input frame in BGR format

        Returns:
            List of 21 (x, y, z) coordinates, x and y in [0..1] range,
            or None if no hand detected
        """
        # MediaPipe expects RGB
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        results = self.hands.process(frame_rgb)

        if not results.multi_hand_landmarks:
            return None

        # Only the first hand drives the pointer
        hand_landmarks = results.multi_hand_landmarks[0]
        return [(lm.x, lm.y, lm.z) for lm in hand_landmarks.landmark]

    def close(self) -> None:
        """Release the MediaPipe graph."""
        self.hands.close()
