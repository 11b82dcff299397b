"""
Orientation sensor angle source with low-pass filtering.
"""

import threading
from typing import Optional

from ..config.settings import TesseractConfig
from ..utils.gesture_utils import FilterUtils, OrientationUtils
from .base import AngleState


class SensorFilteredSource:
    """
    Smooths a stream of raw orientation angles.

    Each raw sample is blended into the previous filtered value per axis:
    filtered = alpha * raw + (1 - alpha) * filtered. With the default
    alpha of 0.1 history dominates, which hides sensor jitter at the cost
    of some lag. Values are accepted as-is; the upstream sensor already
    bounds them to [-pi, pi].

    If no sample ever arrives the source keeps exposing (0, 0).
    """

    def __init__(self, config: Optional[TesseractConfig] = None):
        self.config = (config or TesseractConfig()).validate()
        self.alpha = self.config.FILTER_ALPHA
        self._state = AngleState()
        self.sample_count = 0
        self._lock = threading.Lock()

    @property
    def angles(self) -> AngleState:
        """Current filtered angle pair."""
        return self._state

    def push_sample(self, raw_xw: float, raw_yz: float) -> AngleState:
        """Feed one raw orientation sample and return the new filtered pair."""
        with self._lock:
            previous = self._state
            self._state = AngleState(
                FilterUtils.low_pass(raw_xw, previous.angle_xw, self.alpha),
                FilterUtils.low_pass(raw_yz, previous.angle_yz, self.alpha)
            )
            self.sample_count += 1
            return self._state

    def push_gravity(self, ax: float, ay: float, az: float) -> AngleState:
        """Feed a raw accelerometer reading, converted to pitch and roll."""
        pitch, roll = OrientationUtils.orientation_from_gravity(ax, ay, az)
        return self.push_sample(pitch, roll)

    def reset(self):
        """Forget the filter history."""
        with self._lock:
            self._state = AngleState()
            self.sample_count = 0

    def samples_to_converge(self, target: float, tolerance: float = 1e-3,
                            start: Optional[float] = None) -> int:
        """Constant samples of target needed to get within tolerance of it."""
        if start is None:
            start = self._state.angle_xw
        return FilterUtils.samples_to_converge(start, target, tolerance, self.alpha)
