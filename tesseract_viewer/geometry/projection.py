"""
Rotation and perspective projection of 4D points onto the screen.

All functions are pure and operate on numpy arrays of shape (n, 4) or (n, 3).
The pipeline per frame is:

1. rotate in the X-W plane, then in the Y-Z plane
2. 4D to 3D perspective division by (d4 - w)
3. 3D to 2D perspective division by (d3 - z), then centre on the surface
"""

from typing import List, Sequence, Tuple

import numpy as np

from .tesseract import Edge, ScreenPoint, Vertex3D, Vertex4D

Segment = Tuple[ScreenPoint, ScreenPoint]


def safe_divisor(divisor, epsilon: float = 1e-6):
    """
    Clamp divisor magnitudes below epsilon to +/- epsilon.

    Zero is mapped to +epsilon. Works on scalars and arrays.
    """
    divisor = np.asarray(divisor, dtype=float)
    sign = np.where(divisor < 0, -1.0, 1.0)
    return np.where(np.abs(divisor) < epsilon, sign * epsilon, divisor)


def rotate_xw(points: np.ndarray, theta: float) -> np.ndarray:
    """Rotate (n, 4) points in the X-W plane; y and z are unchanged."""
    points = np.array(points, dtype=float)
    cos_t, sin_t = np.cos(theta), np.sin(theta)
    x = points[:, 0].copy()
    w = points[:, 3].copy()
    points[:, 0] = x * cos_t - w * sin_t
    points[:, 3] = x * sin_t + w * cos_t
    return points


def rotate_yz(points: np.ndarray, phi: float) -> np.ndarray:
    """Rotate (n, 4) points in the Y-Z plane; x and w are unchanged."""
    points = np.array(points, dtype=float)
    cos_p, sin_p = np.cos(phi), np.sin(phi)
    y = points[:, 1].copy()
    z = points[:, 2].copy()
    points[:, 1] = y * cos_p - z * sin_p
    points[:, 2] = y * sin_p + z * cos_p
    return points


def rotate(points: np.ndarray, angle_xw: float, angle_yz: float) -> np.ndarray:
    """
    Apply the X-W rotation followed by the Y-Z rotation.

    The X-W step only touches x and w, so the Y-Z step sees the original
    y and z and the two rotations commute.
    """
    return rotate_yz(rotate_xw(points, angle_xw), angle_yz)


def project_to_3d(points: np.ndarray, d4: float, epsilon: float = 1e-6) -> np.ndarray:
    """Perspective-divide (n, 4) points by d4 - w, returning (n, 3)."""
    points = np.asarray(points, dtype=float)
    factor = d4 / safe_divisor(d4 - points[:, 3], epsilon)
    return points[:, :3] * factor[:, np.newaxis]


def project_to_2d(points3d: np.ndarray, d3: float, center: Tuple[float, float],
                  epsilon: float = 1e-6) -> np.ndarray:
    """Perspective-divide (n, 3) points by d3 - z and offset by center."""
    points3d = np.asarray(points3d, dtype=float)
    factor = d3 / safe_divisor(d3 - points3d[:, 2], epsilon)
    return points3d[:, :2] * factor[:, np.newaxis] + np.asarray(center, dtype=float)


def project_vertices_3d(vertices: Sequence[Vertex4D], angle_xw: float, angle_yz: float,
                        d4: float, epsilon: float = 1e-6) -> List[Vertex3D]:
    """Rotate and project to 3D only, as Vertex3D values."""
    rotated = rotate(np.asarray(vertices, dtype=float), angle_xw, angle_yz)
    return [Vertex3D(float(x), float(y), float(z)) for x, y, z in project_to_3d(rotated, d4, epsilon)]


def project(vertices: Sequence[Vertex4D], angle_xw: float, angle_yz: float,
            d4: float, d3: float, center: Tuple[float, float],
            epsilon: float = 1e-6) -> List[ScreenPoint]:
    """
    Run the full pipeline for one frame.

    Args:
        vertices: 4D vertices, output keeps their order
        angle_xw: rotation angle in the X-W plane (radians)
        angle_yz: rotation angle in the Y-Z plane (radians)
        d4: 4D viewer distance
        d3: 3D viewer distance
        center: pixel offset added to every projected point
        epsilon: smallest allowed perspective divisor magnitude

    Returns:
        One ScreenPoint per vertex.
    """
    rotated = rotate(np.asarray(vertices, dtype=float), angle_xw, angle_yz)
    projected = project_to_2d(project_to_3d(rotated, d4, epsilon), d3, center, epsilon)
    return [ScreenPoint(float(x), float(y)) for x, y in projected]


def build_segments(screen_points: Sequence[ScreenPoint], edges: Sequence[Edge]) -> List[Segment]:
    """Line segments for every edge, in edge order."""
    return [(screen_points[edge.i], screen_points[edge.j]) for edge in edges]
