"""
evdev listener that feeds touchscreen drags and accelerometer readings to the controller.
"""

import logging
import threading
from typing import Dict, Optional, Tuple

from evdev import ecodes

from ..device.device_manager import DeviceManager
from .controller import TesseractController

logger = logging.getLogger(__name__)


class InputListener:
    """
    Reads raw input devices on background threads.

    Touch: the first finger down starts a gesture, its position changes are
    scaled from the touchscreen's ABS range to window pixels and sent once
    per SYN_REPORT, and lifting it ends the gesture. Other fingers are
    ignored.

    Accelerometer: ABS_X/Y/Z are collected per SYN_REPORT and forwarded as
    one gravity sample.
    """

    def __init__(self, controller: TesseractController,
                 device_manager: Optional[DeviceManager] = None,
                 window_size: Optional[Tuple[int, int]] = None):
        self.controller = controller
        self.device_manager = device_manager or DeviceManager()
        self.window_size = window_size
        self.touch_scale = (1.0, 1.0)

        # State management
        self.running = False
        self.current_slot = 0
        self.tracked_slot: Optional[int] = None
        self.last_position: Dict[str, Optional[int]] = {'x': None, 'y': None}
        self.pending_delta = [0, 0]
        self.gravity = [0, 0, 0]

        # Thread management
        self.touch_thread = None
        self.sensor_thread = None
        self.state_lock = threading.Lock()

    def start(self) -> bool:
        """Start listening. Returns False if no usable device was found."""
        touch = self.device_manager.find_touchscreen()
        sensor = self.device_manager.find_accelerometer()
        if not touch and not sensor:
            logger.error("No input devices found, nothing to listen to")
            return False

        self.running = True
        if touch:
            self._configure_touch_scale()
            self.touch_thread = threading.Thread(target=self._event_loop, args=(touch, self._process_touch_batch))
            self.touch_thread.daemon = True
            self.touch_thread.start()
        if sensor:
            self.sensor_thread = threading.Thread(target=self._event_loop, args=(sensor, self._process_sensor_batch))
            self.sensor_thread.daemon = True
            self.sensor_thread.start()
        return True

    def stop(self):
        """Stop the listener."""
        self.running = False
        if self.touch_thread:
            self.touch_thread.join(timeout=1)
        if self.sensor_thread:
            self.sensor_thread.join(timeout=1)

    def _configure_touch_scale(self):
        """Map touchscreen units to window pixels. Without a window size, deltas stay raw."""
        if not self.window_size:
            self.touch_scale = (1.0, 1.0)
            return
        width, height = self.window_size
        dm = self.device_manager
        self.touch_scale = (width / dm.screen_width, height / dm.screen_height)
        logger.info(f"Touch scale {self.touch_scale[0]:.3f}x{self.touch_scale[1]:.3f} "
                    f"for {dm.screen_width}x{dm.screen_height} -> {width}x{height}")

    def _event_loop(self, device, process_batch):
        """Device read loop, batching events up to each SYN_REPORT."""
        try:
            event_batch = []
            for event in device.read_loop():
                if not self.running:
                    break

                event_batch.append(event)

                if event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
                    with self.state_lock:
                        process_batch(event_batch)
                    event_batch = []

        except KeyboardInterrupt:
            pass
        except Exception as e:
            logging.error(f"Error in event loop for {getattr(device, 'name', device)}: {e}")

    # Touch handling
    def _process_touch_batch(self, event_batch):
        for ev in event_batch:
            if ev.type == ecodes.EV_ABS:
                self._handle_touch_abs(ev)

        dx, dy = self.pending_delta
        if self.tracked_slot is not None and (dx or dy):
            sx, sy = self.touch_scale
            self.controller.on_gesture_move(dx * sx, dy * sy)
        self.pending_delta = [0, 0]

    def _handle_touch_abs(self, ev):
        if ev.code == ecodes.ABS_MT_SLOT:
            self.current_slot = ev.value
        elif ev.code == ecodes.ABS_MT_TRACKING_ID:
            self._handle_tracking_id(ev.value)
        elif ev.code == ecodes.ABS_MT_POSITION_X:
            self._handle_position('x', ev.value)
        elif ev.code == ecodes.ABS_MT_POSITION_Y:
            self._handle_position('y', ev.value)

    def _handle_tracking_id(self, value: int):
        slot = self.current_slot
        if value == -1:
            # Finger lifted
            if slot == self.tracked_slot:
                self.tracked_slot = None
                self.pending_delta = [0, 0]
                self.controller.on_gesture_end()
        elif self.tracked_slot is None:
            # First finger placed
            self.tracked_slot = slot
            self.last_position = {'x': None, 'y': None}
            self.controller.on_gesture_start()

    def _handle_position(self, axis: str, value: int):
        if self.current_slot != self.tracked_slot:
            return
        last = self.last_position[axis]
        if last is not None:
            index = 0 if axis == 'x' else 1
            self.pending_delta[index] += value - last
        self.last_position[axis] = value

    # Sensor handling
    def _process_sensor_batch(self, event_batch):
        for ev in event_batch:
            if ev.type != ecodes.EV_ABS:
                continue
            if ev.code == ecodes.ABS_X:
                self.gravity[0] = ev.value
            elif ev.code == ecodes.ABS_Y:
                self.gravity[1] = ev.value
            elif ev.code == ecodes.ABS_Z:
                self.gravity[2] = ev.value

        if any(self.gravity):
            self.controller.on_gravity_sample(*self.gravity)
