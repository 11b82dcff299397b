"""
Tesseract geometry and projection.

This module provides the fixed hypercube topology and the pure functions
that rotate and project it onto a 2D surface.
"""

from .tesseract import (
    Vertex4D,
    Vertex3D,
    ScreenPoint,
    Edge,
    count_differences,
    generate_tesseract,
    vertex_degrees
)
from .projection import Segment, project, project_vertices_3d, build_segments, safe_divisor

__all__ = [
    'Vertex4D',
    'Vertex3D',
    'ScreenPoint',
    'Edge',
    'Segment',
    'count_differences',
    'generate_tesseract',
    'vertex_degrees',
    'project',
    'project_vertices_3d',
    'build_segments',
    'safe_divisor'
]
