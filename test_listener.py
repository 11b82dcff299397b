#!/usr/bin/env python3
"""Tests for evdev event handling, using synthetic events."""

import sys
from collections import namedtuple
sys.path.insert(0, '.')

import pytest

evdev = pytest.importorskip("evdev")
from evdev import ecodes

from tesseract_viewer.core.controller import TesseractController
from tesseract_viewer.core.listener import InputListener
from tesseract_viewer.sources.drag_source import DragInertiaSource, DragState

from test_drag_source import FakeClock, FakeTicker

Event = namedtuple("Event", "type code value")
SYN = Event(ecodes.EV_SYN, ecodes.SYN_REPORT, 0)


def abs_event(code, value):
    return Event(ecodes.EV_ABS, code, value)


class NoDevices:
    def find_touchscreen(self):
        return None

    def find_accelerometer(self):
        return None


def make_listener(gyroscope):
    drag = DragInertiaSource(clock=FakeClock(), ticker=FakeTicker())
    controller = TesseractController(drag_source=drag)
    controller.set_gyroscope_mode(gyroscope)
    return InputListener(controller, device_manager=NoDevices()), controller


def test_single_finger_drag():
    listener, controller = make_listener(gyroscope=False)
    listener._process_touch_batch([
        abs_event(ecodes.ABS_MT_SLOT, 0),
        abs_event(ecodes.ABS_MT_TRACKING_ID, 7),
        abs_event(ecodes.ABS_MT_POSITION_X, 100),
        abs_event(ecodes.ABS_MT_POSITION_Y, 200),
        SYN,
    ])
    assert controller.drag_source.state is DragState.DRAGGING
    assert controller.current_angles() == (0.0, 0.0)

    listener._process_touch_batch([
        abs_event(ecodes.ABS_MT_POSITION_X, 120),
        abs_event(ecodes.ABS_MT_POSITION_Y, 190),
        SYN,
    ])
    assert controller.current_angles() == pytest.approx((20 * 0.005, -10 * 0.005))

    listener._process_touch_batch([abs_event(ecodes.ABS_MT_TRACKING_ID, -1), SYN])
    assert controller.drag_source.state is not DragState.DRAGGING
    assert listener.tracked_slot is None


def test_second_finger_is_ignored():
    listener, controller = make_listener(gyroscope=False)
    listener._process_touch_batch([
        abs_event(ecodes.ABS_MT_SLOT, 0),
        abs_event(ecodes.ABS_MT_TRACKING_ID, 1),
        abs_event(ecodes.ABS_MT_POSITION_X, 10),
        abs_event(ecodes.ABS_MT_POSITION_Y, 10),
        abs_event(ecodes.ABS_MT_SLOT, 1),
        abs_event(ecodes.ABS_MT_TRACKING_ID, 2),
        abs_event(ecodes.ABS_MT_POSITION_X, 500),
        abs_event(ecodes.ABS_MT_POSITION_Y, 500),
        SYN,
    ])
    listener._process_touch_batch([
        abs_event(ecodes.ABS_MT_POSITION_X, 900),
        abs_event(ecodes.ABS_MT_TRACKING_ID, -1),
        SYN,
    ])
    assert listener.tracked_slot == 0
    assert controller.current_angles() == (0.0, 0.0)


def test_accelerometer_batch_feeds_sensor_source():
    listener, controller = make_listener(gyroscope=True)
    listener._process_sensor_batch([
        abs_event(ecodes.ABS_X, 0),
        abs_event(ecodes.ABS_Y, 512),
        abs_event(ecodes.ABS_Z, 0),
        SYN,
    ])
    assert controller.sensor_source.sample_count == 1
    assert controller.current_angles().angle_yz > 0


def test_start_without_devices_fails():
    listener, _ = make_listener(gyroscope=True)
    assert listener.start() is False
    assert listener.running is False


class WideTouchscreen(NoDevices):
    screen_width = 4000
    screen_height = 2000


def test_touch_deltas_scaled_to_window_pixels():
    drag = DragInertiaSource(clock=FakeClock(), ticker=FakeTicker())
    controller = TesseractController(drag_source=drag)
    controller.set_gyroscope_mode(False)
    listener = InputListener(controller, device_manager=WideTouchscreen(), window_size=(800, 600))
    listener._configure_touch_scale()
    assert listener.touch_scale == pytest.approx((0.2, 0.3))

    listener._process_touch_batch([
        abs_event(ecodes.ABS_MT_SLOT, 0),
        abs_event(ecodes.ABS_MT_TRACKING_ID, 3),
        abs_event(ecodes.ABS_MT_POSITION_X, 1000),
        abs_event(ecodes.ABS_MT_POSITION_Y, 1000),
        SYN,
    ])
    listener._process_touch_batch([
        abs_event(ecodes.ABS_MT_POSITION_X, 1100),
        abs_event(ecodes.ABS_MT_POSITION_Y, 900),
        SYN,
    ])
    # 100 units -> 20 px, -100 units -> -30 px
    assert controller.current_angles() == pytest.approx((20 * 0.005, -30 * 0.005))


def test_no_window_size_keeps_raw_deltas():
    listener, _ = make_listener(gyroscope=False)
    listener._configure_touch_scale()
    assert listener.touch_scale == (1.0, 1.0)


if __name__ == "__main__":
    test_single_finger_drag()
    print("Listener tests passed")
