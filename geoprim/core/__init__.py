"""Core data types for geoprim: vectors, primitives, results and errors."""

from .errors import PrimitiveShapeError
from .vectors import as_vector, as_points, as_square_matrix, perp
from .results import ClosestPointResult, SegmentSegmentResult, EigenResult, RectangleResult
from .primitives import Segment, Rectangle, Triangle, Tetrahedron, AABB

__all__ = [
    "PrimitiveShapeError",
    "as_vector",
    "as_points",
    "as_square_matrix",
    "perp",
    "ClosestPointResult",
    "SegmentSegmentResult",
    "EigenResult",
    "RectangleResult",
    "Segment",
    "Rectangle",
    "Triangle",
    "Tetrahedron",
    "AABB",
]
