"""
Synthetic landmark frames for gesture tests.
"""
from typing import List, Tuple

FRAME_WH = (640, 480)
SCREEN_WH = (1920, 1080)


def make_frame(index_px: Tuple[float, float] = (320.0, 240.0),
               middle_px: Tuple[float, float] = (400.0, 240.0),
               index_up: bool = True,
               middle_up: bool = False,
               frame_wh: Tuple[int, int] = FRAME_WH) -> List[Tuple[float, float, float]]:
    """
    Build a 21-landmark frame with the index and middle fingertips at the
    given camera pixel positions.

    Each PIP joint is placed 0.1 below (finger up) or above (finger down) its tip.
    """
    width, height = frame_wh
    landmarks = [(0.5, 0.5, 0.0)] * 21

    def place(tip_idx: int, pip_idx: int, tip_px: Tuple[float, float], up: bool) -> None:
        tip_x, tip_y = tip_px[0] / width, tip_px[1] / height
        pip_y = tip_y + 0.1 if up else tip_y - 0.1
        landmarks[tip_idx] = (tip_x, tip_y, 0.0)
        landmarks[pip_idx] = (tip_x, pip_y, 0.0)

    place(8, 6, index_px, index_up)
    place(12, 10, middle_px, middle_up)
    return landmarks


def pinch_frame(index_px: Tuple[float, float] = (300.0, 200.0),
                middle_px: Tuple[float, float] = (310.0, 205.0)) -> List[Tuple[float, float, float]]:
    """Index and middle raised with the tips close together."""
    return make_frame(index_px=index_px, middle_px=middle_px, index_up=True, middle_up=True)


def release_frame(index_px: Tuple[float, float] = (300.0, 200.0)) -> List[Tuple[float, float, float]]:
    """Index raised alone."""
    return make_frame(index_px=index_px, index_up=True, middle_up=False)
