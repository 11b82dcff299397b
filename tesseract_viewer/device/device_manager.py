"""
Device management for touchscreen and accelerometer discovery.
"""

import evdev
from evdev import ecodes
import logging

logger = logging.getLogger(__name__)


class DeviceManager:
    """Finds the input devices that feed the angle sources."""

    def __init__(self):
        self.touch_device = None
        self.sensor_device = None
        # Touchscreen ABS range, used to scale touch deltas to window pixels
        self.screen_width = 1920  # Default
        self.screen_height = 1080   # Default

    def _list_devices(self):
        return [evdev.InputDevice(path) for path in evdev.list_devices()]

    def find_touchscreen(self):
        """Find and configure a multitouch screen."""
        for device in self._list_devices():
            caps = device.capabilities()
            if ecodes.EV_ABS not in caps:
                continue
            abs_info = {code: info for code, info in caps.get(ecodes.EV_ABS, [])}

            if ecodes.ABS_MT_SLOT in abs_info:
                if ecodes.ABS_MT_POSITION_X in abs_info:
                    self.screen_width = abs_info[ecodes.ABS_MT_POSITION_X].max + 1
                if ecodes.ABS_MT_POSITION_Y in abs_info:
                    self.screen_height = abs_info[ecodes.ABS_MT_POSITION_Y].max + 1

                self.touch_device = device
                logger.info(f"Found touchscreen: {device.name}")
                logger.info(f"Screen resolution: {self.screen_width}x{self.screen_height}")
                return device

        logger.error("No touchscreen device found")
        return None

    def find_accelerometer(self):
        """Find a device reporting itself as an accelerometer."""
        for device in self._list_devices():
            if ecodes.INPUT_PROP_ACCELEROMETER not in device.input_props():
                continue
            abs_codes = {code for code, _ in device.capabilities().get(ecodes.EV_ABS, [])}
            if {ecodes.ABS_X, ecodes.ABS_Y, ecodes.ABS_Z} <= abs_codes:
                self.sensor_device = device
                logger.info(f"Found accelerometer: {device.name}")
                return device

        logger.error("No accelerometer device found")
        return None
