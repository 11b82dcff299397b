"""
Logging utilities for input events and rotation state changes.
"""

import datetime
import logging
from typing import Optional, Tuple

module_logger = logging.getLogger(__name__)


class TesseractLogger:
    """Handles logging of gestures, inertia and mode changes."""

    def __init__(self, debug_file: Optional[str] = None, verbose: bool = True):
        self.verbose = verbose
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w', encoding='utf-8')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                module_logger.warning(f"Could not open debug file {debug_file}: {e}")

    def _timestamp(self) -> str:
        return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]

    def _emit(self, message: str):
        line = f"[{self._timestamp()}] {message}"
        if self.verbose:
            print(line)
        module_logger.debug(message)
        if self.debug_file:
            try:
                self.debug_file.write(line + "\n")
                self.debug_file.flush()
            except (OSError, UnicodeError) as e:
                module_logger.warning(f"Debug file write failed: {e}")
                self.debug_file = None

    def log_gesture_start(self, interrupted_deceleration: bool):
        """Log the start of a drag gesture."""
        if interrupted_deceleration:
            self._emit("✋ DRAG START (momentum discarded)")
        else:
            self._emit("👆 DRAG START")

    def log_gesture_end(self, momentum: Tuple[float, float], angles: Tuple[float, float]):
        """Log a release and the momentum it seeds."""
        mx, my = momentum
        self._emit(f"👋 DRAG END: momentum ({mx:+.5f}, {my:+.5f}) rad/tick")
        self._emit(f"   Angles: xw={angles[0]:+.3f} yz={angles[1]:+.3f}")

    def log_deceleration_end(self, ticks: int, angles: Tuple[float, float]):
        """Log the end of an inertial coast."""
        self._emit(f"🛑 INERTIA STOPPED after {ticks} tick(s)")
        self._emit(f"   Angles: xw={angles[0]:+.3f} yz={angles[1]:+.3f}")

    def log_mode_switch(self, gyroscope_mode: bool):
        """Log an input mode change."""
        if gyroscope_mode:
            self._emit("🧭 MODE: gyroscope")
        else:
            self._emit("🖐️ MODE: drag")

    def log_sensor_unavailable(self):
        self._emit("⚠️ No orientation sensor, holding last angles")

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
