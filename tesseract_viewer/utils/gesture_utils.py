"""
Shared numeric utilities for the input pipelines.

This module holds the small pieces of math used by both angle sources
(velocity estimation, smoothing, decay bounds) and by the device layer
(orientation from a gravity vector), so each lives in exactly one place.
"""

import math
from typing import Tuple


class VelocityCalculator:
    """Utility class for drag velocity calculations."""

    @staticmethod
    def clamp_delta_time(dt: float, min_dt: float = 1.0) -> float:
        """Floor elapsed time so zero or negative intervals never divide."""
        return max(dt, min_dt)

    @staticmethod
    def calculate_velocity(delta: float, dt: float, sensitivity: float,
                           min_dt: float = 1.0) -> float:
        """Angular velocity (radians per ms) for a pixel delta over dt."""
        dt = VelocityCalculator.clamp_delta_time(dt, min_dt)
        return delta * sensitivity / dt

    @staticmethod
    def smooth_velocity(current: float, previous: float, blend: float = 0.7) -> float:
        """One-pole blend of the newest sample with the previous smoothed one."""
        return blend * current + (1.0 - blend) * previous


class FilterUtils:
    """Utility class for the sensor low-pass filter."""

    @staticmethod
    def low_pass(raw: float, previous: float, alpha: float) -> float:
        """Blend a raw sample into the filtered value."""
        return alpha * raw + (1.0 - alpha) * previous

    @staticmethod
    def samples_to_converge(start: float, target: float, tolerance: float,
                            alpha: float) -> int:
        """
        Number of constant samples needed to bring the filter within tolerance.

        The error shrinks by (1 - alpha) per sample, so after n samples it is
        |start - target| * (1 - alpha) ** n.
        """
        error = abs(start - target)
        if error <= tolerance:
            return 0
        if alpha >= 1.0:
            return 1
        return math.ceil(math.log(tolerance / error) / math.log(1.0 - alpha))


class DecayUtils:
    """Utility class for momentum decay bounds."""

    @staticmethod
    def ticks_to_stop(momentum: float, rate: float, threshold: float) -> int:
        """
        Upper bound on decay ticks before |momentum| drops below threshold.
        """
        magnitude = abs(momentum)
        if magnitude < threshold:
            return 0
        return math.floor(math.log(threshold / magnitude) / math.log(rate)) + 1


class OrientationUtils:
    """Utility class for turning raw motion sensor readings into angles."""

    @staticmethod
    def orientation_from_gravity(ax: float, ay: float, az: float) -> Tuple[float, float]:
        """
        Pitch and roll (radians) of a device from its gravity vector.

        A device lying flat (gravity along +z) reports (0, 0). Both angles
        come from atan2 and stay within [-pi, pi]. The result is scale free,
        so raw accelerometer counts can be passed directly.
        """
        pitch = math.atan2(-ax, math.sqrt(ay * ay + az * az))
        roll = math.atan2(ay, az)
        return pitch, roll
