#!/usr/bin/env python3
"""Tests for the frame driver and input mode switching."""

import sys
sys.path.insert(0, '.')

import pytest

from tesseract_viewer.config.settings import TesseractConfig
from tesseract_viewer.core.controller import TesseractController
from tesseract_viewer.sources.drag_source import DragInertiaSource, DragState
from tesseract_viewer.utils.logger import TesseractLogger

from test_drag_source import FakeClock, FakeTicker


def make_controller(gyroscope=True):
    config = TesseractConfig()
    ticker = FakeTicker()
    drag = DragInertiaSource(config, clock=FakeClock(), ticker=ticker)
    controller = TesseractController(config, drag_source=drag,
                                     event_logger=TesseractLogger(verbose=False))
    controller.set_gyroscope_mode(gyroscope)
    return controller, ticker


def test_defaults_to_gyroscope_mode():
    controller = TesseractController()
    assert controller.gyroscope_mode is True
    assert controller.current_angles() == (0.0, 0.0)
    controller.shutdown()


def test_frame_at_rest():
    controller, _ = make_controller()
    segments = controller.frame(800, 600)
    assert len(segments) == 32
    # Last edge joins vertex 14 to vertex 15 = (100, 100, 100, 100)
    start, end = segments[-1]
    assert tuple(end) == pytest.approx((400 + 300, 300 + 300))


def test_frame_follows_active_source():
    controller, _ = make_controller(gyroscope=True)
    at_rest = controller.frame(800, 600)
    controller.on_sensor_sample(1.0, 0.5)
    assert controller.frame(800, 600) != at_rest


def test_sensor_filter_keeps_running_in_drag_mode():
    controller, _ = make_controller(gyroscope=False)
    assert controller.on_sensor_sample(1.0, 1.0) is False
    assert controller.on_gravity_sample(0, 1, 0) is False
    assert controller.sensor_source.sample_count == 2
    # Drag mode still shows the drag pair
    assert controller.current_angles() == (0.0, 0.0)

    background = controller.sensor_source.angles
    assert background != (0.0, 0.0)
    controller.set_gyroscope_mode(True)
    assert controller.current_angles() == background
    assert controller.on_sensor_sample(0.0, 0.0) is True


def test_gestures_ignored_in_gyroscope_mode():
    controller, _ = make_controller(gyroscope=True)
    assert controller.on_gesture_start() is False
    assert controller.on_gesture_move(100, 100) is False
    assert controller.on_gesture_end() is False
    assert controller.drag_source.angles == (0.0, 0.0)
    assert controller.drag_source.state is DragState.IDLE


def test_drag_mode_rotates():
    controller, _ = make_controller(gyroscope=False)
    controller.on_gesture_start()
    controller.on_gesture_move(20, -10, timestamp=5)
    assert controller.current_angles() == pytest.approx((0.1, -0.05))


def test_switch_does_not_touch_either_angle_pair():
    controller, _ = make_controller(gyroscope=True)
    controller.on_sensor_sample(1.0, -1.0)
    sensor_angles = controller.current_angles()

    controller.set_gyroscope_mode(False)
    assert controller.sensor_source.angles == sensor_angles
    controller.on_gesture_start()
    controller.on_gesture_move(30, 30, timestamp=3)
    controller.on_gesture_end()
    drag_angles = controller.drag_source.angles

    controller.set_gyroscope_mode(True)
    assert controller.current_angles() == sensor_angles
    assert controller.drag_source.angles == drag_angles

    controller.set_gyroscope_mode(False)
    assert controller.current_angles() == drag_angles


def test_switch_discards_momentum():
    controller, ticker = make_controller(gyroscope=False)
    controller.on_gesture_start()
    controller.on_gesture_move(100, 0, timestamp=1)
    controller.on_gesture_end()
    assert controller.drag_source.is_decelerating

    controller.set_gyroscope_mode(True)
    drag = controller.drag_source
    assert drag.state is DragState.IDLE
    assert drag.momentum == (0.0, 0.0)
    assert ticker.stops >= 1
    angles = drag.angles
    assert ticker.fire() is False
    assert drag.angles == angles


def test_toggle_mode():
    controller, _ = make_controller(gyroscope=True)
    assert controller.toggle_mode() is False
    assert controller.toggle_mode() is True


def test_invalid_config_rejected():
    class BadDistance(TesseractConfig):
        VIEWER_DISTANCE_4D = 0.0

    with pytest.raises(ValueError):
        TesseractController(BadDistance())


if __name__ == "__main__":
    test_frame_at_rest()
    test_switch_does_not_touch_either_angle_pair()
    print("Controller tests passed")
