"""
Tesseract topology.

Builds the 16 vertices of a hypercube centred on the origin and the 32 edges
joining vertices whose coordinates differ along exactly one axis.
"""

import functools
import itertools
from typing import List, NamedTuple, Sequence, Tuple

from ..config.settings import TesseractConfig


class Vertex4D(NamedTuple):
    """A point in 4D space."""
    x: float
    y: float
    z: float
    w: float


class Vertex3D(NamedTuple):
    """A point in 3D space, produced by the 4D to 3D projection."""
    x: float
    y: float
    z: float


class ScreenPoint(NamedTuple):
    """A point in device pixel space."""
    x: float
    y: float


class Edge(NamedTuple):
    """Indices of the two vertices an edge connects, with i < j."""
    i: int
    j: int


def count_differences(v1: Sequence[float], v2: Sequence[float]) -> int:
    """Number of coordinates that differ between two vertices."""
    return sum(1 for a, b in zip(v1, v2) if a != b)


def generate_vertices(half_edge: float) -> List[Vertex4D]:
    """Vertices in nested (x, y, z, w) product order over {-s, +s}."""
    signs = (-half_edge, half_edge)
    return [Vertex4D(*coords) for coords in itertools.product(signs, repeat=4)]


def generate_edges(vertices: Sequence[Vertex4D]) -> List[Edge]:
    """Pairs of vertices that differ in exactly one coordinate."""
    edges = []
    for i, j in itertools.combinations(range(len(vertices)), 2):
        if count_differences(vertices[i], vertices[j]) == 1:
            edges.append(Edge(i, j))
    return edges


@functools.lru_cache(maxsize=None)
def generate_tesseract(half_edge: float = TesseractConfig.HALF_EDGE
                       ) -> Tuple[Tuple[Vertex4D, ...], Tuple[Edge, ...]]:
    """
    Generate the tesseract once per half-edge length.

    Returns:
        (vertices, edges) as tuples so the cached geometry cannot be mutated.
    """
    vertices = generate_vertices(float(half_edge))
    edges = generate_edges(vertices)
    return tuple(vertices), tuple(edges)


def vertex_degrees(edges: Sequence[Edge], vertex_count: int) -> List[int]:
    """Number of edges touching each vertex."""
    degrees = [0] * vertex_count
    for edge in edges:
        degrees[edge.i] += 1
        degrees[edge.j] += 1
    return degrees
