"""
Frame driver that wires the active angle source to the projection pipeline.
"""

import logging
from typing import List, Optional

from ..config.settings import TesseractConfig
from ..geometry.projection import Segment, build_segments, project
from ..geometry.tesseract import generate_tesseract
from ..sources.base import AngleState
from ..sources.drag_source import DragInertiaSource
from ..sources.sensor_source import SensorFilteredSource
from ..utils.logger import TesseractLogger

logger = logging.getLogger(__name__)


class TesseractController:
    """Owns the geometry and both angle sources, and produces segments per frame."""

    def __init__(self, config: Optional[TesseractConfig] = None,
                 sensor_source: Optional[SensorFilteredSource] = None,
                 drag_source: Optional[DragInertiaSource] = None,
                 event_logger: Optional[TesseractLogger] = None):
        self.config = (config or TesseractConfig()).validate()
        self.event_logger = event_logger
        self.vertices, self.edges = generate_tesseract(self.config.HALF_EDGE)

        self.sensor_source = sensor_source or SensorFilteredSource(self.config)
        self.drag_source = drag_source or DragInertiaSource(self.config, event_logger=event_logger)

        self._gyroscope_mode = self.config.GYROSCOPE_MODE_DEFAULT

    @property
    def gyroscope_mode(self) -> bool:
        return self._gyroscope_mode

    def set_gyroscope_mode(self, enabled: bool):
        """
        Select the angle source.

        Leaving drag mode stops any coast so no momentum survives the switch.
        Neither source's angle pair changes here.
        """
        enabled = bool(enabled)
        if enabled == self._gyroscope_mode:
            return
        self.drag_source.cancel()
        self._gyroscope_mode = enabled
        if self.event_logger:
            self.event_logger.log_mode_switch(enabled)
        logger.debug(f"Input mode switched, gyroscope={enabled}")

    def toggle_mode(self) -> bool:
        self.set_gyroscope_mode(not self._gyroscope_mode)
        return self._gyroscope_mode

    def current_angles(self) -> AngleState:
        """Angle pair of the active source."""
        if self._gyroscope_mode:
            return self.sensor_source.angles
        return self.drag_source.angles

    # Sensor input
    def on_sensor_sample(self, raw_xw: float, raw_yz: float) -> bool:
        """
        Feed a raw orientation sample to the filter.

        The filter keeps running in drag mode so gyroscope mode resumes from
        the current orientation. Returns True when the sample is on screen.
        """
        self.sensor_source.push_sample(raw_xw, raw_yz)
        return self._gyroscope_mode

    def on_gravity_sample(self, ax: float, ay: float, az: float) -> bool:
        """Feed a raw accelerometer reading. Returns True when it is on screen."""
        self.sensor_source.push_gravity(ax, ay, az)
        return self._gyroscope_mode

    # Gesture input
    def on_gesture_start(self) -> bool:
        if self._gyroscope_mode:
            return False
        self.drag_source.gesture_start()
        return True

    def on_gesture_move(self, dx: float, dy: float, timestamp: Optional[float] = None) -> bool:
        if self._gyroscope_mode:
            return False
        self.drag_source.gesture_move(dx, dy, timestamp)
        return True

    def on_gesture_end(self) -> bool:
        if self._gyroscope_mode:
            return False
        self.drag_source.gesture_end()
        return True

    def frame(self, width: float, height: float) -> List[Segment]:
        """Project the tesseract for a surface of the given size."""
        angles = self.current_angles()
        cfg = self.config
        screen_points = project(
            self.vertices,
            angles.angle_xw,
            angles.angle_yz,
            cfg.VIEWER_DISTANCE_4D,
            cfg.VIEWER_DISTANCE_3D,
            (width / 2, height / 2),
            cfg.DIVISOR_EPSILON
        )
        return build_segments(screen_points, self.edges)

    def shutdown(self):
        """Stop background ticking."""
        self.drag_source.cancel()
