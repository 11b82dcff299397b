"""
Drag gesture angle source with inertial deceleration after release.
"""

import enum
import threading
import time
from typing import Callable, Optional, Tuple

from ..config.settings import TesseractConfig
from ..core.ticker import DecayTicker
from ..utils.gesture_utils import VelocityCalculator, DecayUtils
from ..utils.logger import TesseractLogger
from .base import AngleState


def monotonic_ms() -> float:
    """Monotonic clock in milliseconds."""
    return time.monotonic() * 1000.0


class DragState(enum.Enum):
    """Drag source lifecycle."""
    IDLE = "idle"
    DRAGGING = "dragging"
    DECELERATING = "decelerating"


class DragInertiaSource:
    """
    Turns drag gestures into rotation angles, with momentum after release.

    IDLE -> DRAGGING on gesture start, DRAGGING -> DECELERATING on gesture
    end, DECELERATING -> IDLE once momentum drops below the stop threshold.
    A gesture start while decelerating discards the remaining momentum.

    Every mutation happens under one lock. A decay tick re-checks the state
    under that lock, so no tick changes the angles once gesture_start() has
    returned.
    """

    def __init__(self, config: Optional[TesseractConfig] = None,
                 clock: Optional[Callable[[], float]] = None,
                 ticker: Optional[DecayTicker] = None,
                 event_logger: Optional[TesseractLogger] = None):
        self.config = (config or TesseractConfig()).validate()
        self.clock = clock or monotonic_ms
        self.ticker = ticker if ticker is not None else DecayTicker(self.config.TICK_INTERVAL_MS)
        self.event_logger = event_logger

        self._lock = threading.Lock()
        self._angles = AngleState()
        self.state = DragState.IDLE

        # Inertia state
        self.velocity: Tuple[float, float] = (0.0, 0.0)
        self.momentum: Tuple[float, float] = (0.0, 0.0)
        self.last_update_time = 0.0
        self.tick_count = 0
        self._generation = 0

    @property
    def angles(self) -> AngleState:
        """Current accumulated angle pair."""
        return self._angles

    @property
    def is_decelerating(self) -> bool:
        return self.state is DragState.DECELERATING

    def gesture_start(self):
        """Begin a drag, cancelling any deceleration in progress."""
        with self._lock:
            interrupted = self.state is DragState.DECELERATING
            self._halt_inertia()
            self.state = DragState.DRAGGING
            self.velocity = (0.0, 0.0)
            self.last_update_time = self.clock()
        self.ticker.stop()
        if self.event_logger:
            self.event_logger.log_gesture_start(interrupted)

    def gesture_move(self, dx: float, dy: float, timestamp: Optional[float] = None) -> AngleState:
        """
        Apply a drag delta in pixels.

        Args:
            dx: horizontal delta, drives the X-W angle
            dy: vertical delta, drives the Y-Z angle
            timestamp: event time in ms, the core's monotonic clock if omitted

        Returns:
            The updated angle pair.
        """
        if self.state is not DragState.DRAGGING:
            self.gesture_start()

        cfg = self.config
        with self._lock:
            now = self.clock() if timestamp is None else timestamp
            dt = VelocityCalculator.clamp_delta_time(now - self.last_update_time, cfg.MIN_DELTA_TIME_MS)
            self.last_update_time = now

            vx = VelocityCalculator.calculate_velocity(dx, dt, cfg.DRAG_SENSITIVITY, cfg.MIN_DELTA_TIME_MS)
            vy = VelocityCalculator.calculate_velocity(dy, dt, cfg.DRAG_SENSITIVITY, cfg.MIN_DELTA_TIME_MS)
            prev_vx, prev_vy = self.velocity
            self.velocity = (
                VelocityCalculator.smooth_velocity(vx, prev_vx, cfg.VELOCITY_BLEND),
                VelocityCalculator.smooth_velocity(vy, prev_vy, cfg.VELOCITY_BLEND)
            )

            # Angles follow the raw delta; smoothed velocity only seeds momentum
            self._angles = AngleState(
                self._angles.angle_xw + dx * cfg.DRAG_SENSITIVITY,
                self._angles.angle_yz + dy * cfg.DRAG_SENSITIVITY
            )
            return self._angles

    def gesture_end(self):
        """Release the drag and let the last velocity coast."""
        cfg = self.config
        with self._lock:
            if self.state is not DragState.DRAGGING:
                return
            vx, vy = self.velocity
            self.momentum = (vx * cfg.RELEASE_MOMENTUM_SCALE, vy * cfg.RELEASE_MOMENTUM_SCALE)
            self.tick_count = 0
            self._generation += 1
            generation = self._generation
            if self._below_threshold(self.momentum):
                self._halt_inertia()
                self.state = DragState.IDLE
                coasting = False
            else:
                self.state = DragState.DECELERATING
                coasting = True
            momentum, angles = self.momentum, self._angles

        if self.event_logger:
            self.event_logger.log_gesture_end(momentum, angles)
        if coasting:
            self.ticker.start(lambda: self.tick(generation))

    def tick(self, generation: Optional[int] = None) -> bool:
        """
        Advance the deceleration by one step.

        Returns:
            True while momentum remains, False once idle.
        """
        cfg = self.config
        with self._lock:
            if self.state is not DragState.DECELERATING:
                return False
            if generation is not None and generation != self._generation:
                return False

            mx, my = self.momentum
            self._angles = AngleState(self._angles.angle_xw + mx, self._angles.angle_yz + my)
            self.momentum = (mx * cfg.DECAY_RATE, my * cfg.DECAY_RATE)
            self.tick_count += 1

            if not self._below_threshold(self.momentum):
                return True

            self._halt_inertia()
            self.state = DragState.IDLE
            ticks, angles = self.tick_count, self._angles

        if self.event_logger:
            self.event_logger.log_deceleration_end(ticks, angles)
        return False

    def cancel(self):
        """Drop any momentum and go idle, keeping the current angles."""
        with self._lock:
            self._halt_inertia()
            self.state = DragState.IDLE
            self.velocity = (0.0, 0.0)
        self.ticker.stop()

    def ticks_to_stop(self) -> int:
        """Upper bound on the ticks left before the coast ends."""
        mx, my = self.momentum
        cfg = self.config
        return max(DecayUtils.ticks_to_stop(mx, cfg.DECAY_RATE, cfg.STOP_THRESHOLD),
                   DecayUtils.ticks_to_stop(my, cfg.DECAY_RATE, cfg.STOP_THRESHOLD))

    def _below_threshold(self, momentum: Tuple[float, float]) -> bool:
        threshold = self.config.STOP_THRESHOLD
        return abs(momentum[0]) < threshold and abs(momentum[1]) < threshold

    def _halt_inertia(self):
        # Caller holds the lock. Bumping the generation orphans pending ticks.
        self.momentum = (0.0, 0.0)
        self._generation += 1
