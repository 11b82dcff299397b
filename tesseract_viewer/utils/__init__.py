"""
Utilities package for angle input processing.

This package provides shared numeric helpers and event logging used by
the angle sources, the controller and the device listeners.
"""

from .gesture_utils import (
    VelocityCalculator,
    FilterUtils,
    DecayUtils,
    OrientationUtils
)

__all__ = [
    'VelocityCalculator',
    'FilterUtils',
    'DecayUtils',
    'OrientationUtils'
]
