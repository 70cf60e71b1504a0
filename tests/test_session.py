"""
Test cases for the pointer session and its sink dispatch.
"""
import unittest
import sys
from pathlib import Path

# Add project root and tests dir to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from gesture_pointer.config import PointerConfig
from gesture_pointer.controller_mock import MockController
from gesture_pointer.errors import ConfigError
from gesture_pointer.session import PointerSession
from gesture_pointer.types import CursorState, PointerSinkProto
from landmark_factory import FRAME_WH, SCREEN_WH, make_frame, pinch_frame, release_frame


class FailingSink:
    """Sink whose on_frame always raises."""

    async def on_frame(self, x: float, y: float, is_clicking: bool) -> None:
        raise RuntimeError("sink broken")

    async def click(self, x: float, y: float) -> None:
        pass


class OrderSink(MockController):
    """Mock sink that also records the order of calls."""

    def __init__(self):
        super().__init__()
        self.calls = []

    async def on_frame(self, x: float, y: float, is_clicking: bool) -> None:
        await super().on_frame(x, y, is_clicking)
        self.calls.append("on_frame")

    async def click(self, x: float, y: float) -> None:
        await super().click(x, y)
        self.calls.append("click")


class TestPointerSession(unittest.IsolatedAsyncioTestCase):
    """Test activation lifecycle and sink calls."""

    def setUp(self):
        self.cfg = PointerConfig(frame_reduction_margin=100, smoothing_factor=1, pinch_threshold_px=40)
        self.sink = OrderSink()
        self.session = PointerSession(self.cfg, self.sink, FRAME_WH, SCREEN_WH)

    def test_mock_controller_implements_protocol(self):
        self.assertIsInstance(MockController(), PointerSinkProto)

    async def test_inactive_session_ignores_frames(self):
        self.assertFalse(self.session.is_active)
        self.assertIsNone(await self.session.handle_frame(pinch_frame()))
        self.assertEqual(self.sink.frame_count, 0)
        self.assertIsNone(self.session.cursor)

    async def test_frames_reach_sink(self):
        self.session.activate()
        await self.session.handle_frame(make_frame(index_px=(320.0, 240.0)))

        self.assertEqual(self.sink.frame_count, 1)
        x, y, is_clicking = self.sink.frames[0]
        self.assertAlmostEqual(x, 960.0)
        self.assertFalse(is_clicking)
        self.assertEqual(self.sink.click_count, 0)

    async def test_click_follows_on_frame_once_per_pinch(self):
        self.session.activate()
        for frame in [pinch_frame(), pinch_frame(), pinch_frame(), release_frame()]:
            await self.session.handle_frame(frame)

        self.assertEqual(self.sink.calls, ["on_frame", "click", "on_frame", "on_frame", "on_frame"])
        self.assertEqual(self.sink.click_count, 1)
        x, y, _ = self.sink.frames[0]
        self.assertEqual(self.sink.clicks[0], (x, y))
        self.assertEqual([f[2] for f in self.sink.frames], [True, True, True, False])

    async def test_no_hand_skips_sink(self):
        self.session.activate()
        await self.session.handle_frame(make_frame(index_px=(320.0, 240.0)))
        before = self.session.cursor

        self.assertIsNone(await self.session.handle_frame(None))
        self.assertEqual(self.sink.frame_count, 1)
        self.assertEqual(self.session.cursor, before)

    async def test_reactivation_starts_neutral(self):
        self.session.activate()
        await self.session.handle_frame(pinch_frame())
        self.session.deactivate()
        self.assertIsNone(self.session.cursor)

        self.session.activate()
        self.assertEqual(self.session.cursor, CursorState())
        # Pinch state does not leak: the first pinch of the new session clicks again
        await self.session.handle_frame(pinch_frame())
        self.assertEqual(self.sink.click_count, 2)

    async def test_toggle(self):
        self.assertTrue(self.session.toggle())
        self.assertFalse(self.session.toggle())

    async def test_smoothing_change_survives_reactivation(self):
        self.session.set_smoothing_factor(2)
        self.session.activate()
        await self.session.handle_frame(make_frame(index_px=(540.0, 380.0)))

        self.assertAlmostEqual(self.session.cursor.x, 960.0)

    async def test_smoothing_change_keeps_position(self):
        self.session.activate()
        await self.session.handle_frame(make_frame(index_px=(320.0, 240.0)))
        self.session.set_smoothing_factor(4)

        self.assertAlmostEqual(self.session.cursor.x, 960.0)
        with self.assertRaises(ConfigError):
            self.session.set_smoothing_factor(0)
        self.assertEqual(self.session.smoothing_factor, 4)

    async def test_sink_errors_propagate(self):
        session = PointerSession(self.cfg, FailingSink(), FRAME_WH, SCREEN_WH)
        session.activate()
        with self.assertRaises(RuntimeError):
            await session.handle_frame(make_frame())

    def test_degenerate_region_fails_at_construction(self):
        cfg = PointerConfig(frame_reduction_margin=320, smoothing_factor=1, pinch_threshold_px=40)
        with self.assertRaises(ConfigError):
            PointerSession(cfg, MockController(), FRAME_WH, SCREEN_WH)


if __name__ == '__main__':
    unittest.main()
