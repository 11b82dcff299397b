"""
Types shared by the angle sources.
"""

from typing import NamedTuple


class AngleState(NamedTuple):
    """Rotation angles (radians) consumed by the projection pipeline."""
    angle_xw: float = 0.0
    angle_yz: float = 0.0
