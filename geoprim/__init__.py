"""
geoprim - Computational geometry primitives for collision detection.

This package provides the narrow-phase building blocks consumed by
collision-detection and physics code: closest-point and distance queries
between points, segments, rectangles, triangles, tetrahedra and boxes;
separating-axis and extreme-point helpers; point-set statistics; and a
Jacobi eigen solver for principal axes.

Main Entry Points:
    - closest_points_segment_segment(): Nearest points between two segments
    - closest_point_in_triangle(): Seven-region triangle query
    - closest_point_in_tetrahedron(): Face-by-face tetrahedron query
    - jacobi_eigen(): Eigen-decomposition of a symmetric matrix
    - OBB.from_points(): Principal-axis bounding box

Example:
    >>> from geoprim import Triangle, jacobi_eigen, covariance_matrix
    >>>
    >>> tri = Triangle((0, 0, 0), (1, 0, 0), (0, 1, 0))
    >>> hit = tri.closest_point((0.25, 0.25, 1.0))
    >>> hit.sq_distance
    1.0
    >>>
    >>> result = jacobi_eigen(covariance_matrix([(-1, 0, 0), (0, 0, 0), (1, 0, 0)]))
"""

from .core import (
    PrimitiveShapeError,
    ClosestPointResult,
    SegmentSegmentResult,
    EigenResult,
    RectangleResult,
    Segment,
    Rectangle,
    Triangle,
    Tetrahedron,
    AABB,
)
from .ops import (
    closest_point_on_segment,
    sq_dist_point_segment,
    closest_points_segment_segment,
    closest_point_on_rectangle,
    closest_point_in_triangle,
    is_point_outside_plane,
    closest_point_in_tetrahedron,
    aabb_overlap,
    update_aabb,
    closest_point_aabb_point,
    sq_dist_aabb_point,
    barycentric,
    BarycentricCache,
    is_point_in_triangle,
    triangle_area_from_lengths,
    signed_distance_to_triangle_plane,
    extreme_points_along_direction,
    point_farthest_from_edge,
    most_separated_points_on_aabb,
    is_convex_quad,
    minimum_area_rectangle,
    minimum_area_bounding_rectangle,
)
from .analysis import (
    centroid,
    covariance_matrix,
    variance,
    sym_schur2,
    jacobi_eigen,
    sort_eigenpairs,
    principal_axes,
)
from .geometry import OBB, compute_mesh_obb, closest_point_on_mesh

__version__ = "0.1.0"

__all__ = [
    # Types
    "PrimitiveShapeError",
    "ClosestPointResult",
    "SegmentSegmentResult",
    "EigenResult",
    "RectangleResult",
    "Segment",
    "Rectangle",
    "Triangle",
    "Tetrahedron",
    "AABB",
    "OBB",
    # Closest-point engine
    "closest_point_on_segment",
    "sq_dist_point_segment",
    "closest_points_segment_segment",
    "closest_point_on_rectangle",
    "closest_point_in_triangle",
    "is_point_outside_plane",
    "closest_point_in_tetrahedron",
    "closest_point_on_mesh",
    # AABB
    "aabb_overlap",
    "update_aabb",
    "closest_point_aabb_point",
    "sq_dist_aabb_point",
    # Triangle
    "barycentric",
    "BarycentricCache",
    "is_point_in_triangle",
    "triangle_area_from_lengths",
    "signed_distance_to_triangle_plane",
    # Separating axis / extreme points
    "extreme_points_along_direction",
    "point_farthest_from_edge",
    "most_separated_points_on_aabb",
    "is_convex_quad",
    "minimum_area_rectangle",
    "minimum_area_bounding_rectangle",
    # Statistics and eigen solver
    "centroid",
    "covariance_matrix",
    "variance",
    "sym_schur2",
    "jacobi_eigen",
    "sort_eigenpairs",
    "principal_axes",
    "compute_mesh_obb",
]
