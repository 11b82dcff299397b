"""
Rendering of projected tesseract segments.
"""

from .pygame_renderer import SegmentRenderer

__all__ = ['SegmentRenderer']
