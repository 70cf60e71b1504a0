"""
Main application for the gesture pointer.
"""
import argparse
import asyncio
import logging

import cv2

from .config import Cfg, load_config
from .controller_mock import MockController
from .geometry import ActiveRegion
from .overlay import draw_active_region, draw_landmarks, draw_pinch, draw_status
from .session import PointerSession
from .tracker import HandsTracker

logger = logging.getLogger(__name__)


class GesturePointerApp:
    """Main application class: camera, hand tracker, pointer session and preview."""

    def __init__(self, config: Cfg, use_desktop: bool = False):
        """Initialize the application with a loaded configuration."""
        self.config = config
        self.cap = None
        self.tracker = None
        try:
            self._setup(use_desktop)
        except Exception:
            self.close()
            raise

    def _setup(self, use_desktop: bool) -> None:
        # Initialize camera
        self.cap = cv2.VideoCapture(self.config.camera.index)
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.config.camera.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.config.camera.height)
        self.cap.set(cv2.CAP_PROP_FPS, self.config.camera.fps)

        if not self.cap.isOpened():
            raise RuntimeError(f"Failed to open camera {self.config.camera.index}")

        # Choose sink type
        if use_desktop:
            from .controller_desktop import DesktopController
            self.controller = DesktopController()
            screen_wh = (self.controller.screen_width, self.controller.screen_height)
        else:
            self.controller = MockController()
            screen_wh = (self.config.screen.width, self.config.screen.height)

        # The driver may not honour the requested size
        frame_wh = (int(self.cap.get(cv2.CAP_PROP_FRAME_WIDTH)) or self.config.camera.width,
                    int(self.cap.get(cv2.CAP_PROP_FRAME_HEIGHT)) or self.config.camera.height)
        logger.info(f"Camera {self.config.camera.index} at {frame_wh[0]}x{frame_wh[1]}, "
                    f"screen {screen_wh[0]}x{screen_wh[1]}")

        self.region = ActiveRegion.from_frame(frame_wh[0], frame_wh[1],
                                              self.config.pointer.frame_reduction_margin)
        self.session = PointerSession(self.config.pointer, self.controller, frame_wh, screen_wh)

        # MediaPipe graph last, once everything that can reject the setup has run
        self.tracker = HandsTracker(self.config.mediapipe)

    def _adjust_smoothing(self, step: int) -> None:
        pointer = self.config.pointer
        value = self.session.smoothing_factor + step
        if pointer.smoothing_min <= value <= pointer.smoothing_max:
            self.session.set_smoothing_factor(value)

    async def run(self):
        """Run the main application loop."""
        logger.info(f"Starting {self.config.display.window_name}")
        logger.info("Index finger up = move, index + middle pinch = click")
        logger.info("SPACE to start/stop, +/- to change smoothing, 'q' to quit")

        self.session.activate()
        try:
            while True:
                ret, frame = self.cap.read()
                if not ret:
                    logger.error("Failed to read frame from camera")
                    break

                if self.config.camera.mirror:
                    frame = cv2.flip(frame, 1)

                landmarks = self.tracker.process(frame)
                reading = await self.session.handle_frame(landmarks)

                if self.config.display.show_active_region:
                    draw_active_region(frame, self.region)
                if landmarks and self.config.display.show_landmarks:
                    draw_landmarks(frame, landmarks)
                if reading is not None:
                    draw_pinch(frame, reading)
                draw_status(frame, self.session.is_active, reading, self.session.smoothing_factor)

                cv2.imshow(self.config.display.window_name, frame)

                key = cv2.waitKey(1) & 0xFF
                if key == ord('q'):
                    break
                elif key == ord(' '):
                    self.session.toggle()
                elif key in (ord('+'), ord('=')):
                    self._adjust_smoothing(1)
                elif key in (ord('-'), ord('_')):
                    self._adjust_smoothing(-1)
        finally:
            self.session.deactivate()
            self.close()

    def close(self):
        """Release camera, tracker and windows."""
        if self.cap is not None and self.cap.isOpened():
            self.cap.release()
        if self.tracker is not None:
            self.tracker.close()
        cv2.destroyAllWindows()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Drive the pointer with hand gestures")
    parser.add_argument("--config", help="Path to a YAML config file (default: config.default.yaml)")
    parser.add_argument("--desktop", action="store_true",
                        help="Move the real system cursor instead of the mock controller")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


async def main(argv=None):
    """Entry point for the application."""
    args = parse_args(argv)

    config = load_config(args.config)
    level = logging.DEBUG if args.debug else getattr(logging, config.logging.level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S"
    )

    try:
        app = GesturePointerApp(config, use_desktop=args.desktop)
        await app.run()
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")


def run():
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
