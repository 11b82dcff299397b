"""
Angle sources.

Each source owns one angle pair and is its only writer: the sensor source
low-pass filters orientation samples, the drag source integrates drag
deltas and coasts on momentum after release.
"""

from .base import AngleState
from .sensor_source import SensorFilteredSource
from .drag_source import DragInertiaSource, DragState

__all__ = [
    'AngleState',
    'SensorFilteredSource',
    'DragInertiaSource',
    'DragState'
]
