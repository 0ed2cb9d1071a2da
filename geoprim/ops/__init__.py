"""
Query operations for geoprim.

- closest: closest-point engine (segments, rectangles, triangles, tetrahedra)
- aabb: axis-aligned box overlap, transform update and distance
- triangle: barycentric coordinates and triangle measures
- separating: extreme points, convexity and minimum-area rectangles
"""

from .closest import (
    closest_point_on_segment,
    sq_dist_point_segment,
    closest_points_segment_segment,
    closest_point_on_rectangle,
    closest_point_in_triangle,
    is_point_outside_plane,
    closest_point_in_tetrahedron,
)
from .aabb import (
    aabb_overlap,
    update_aabb,
    closest_point_aabb_point,
    sq_dist_aabb_point,
)
from .triangle import (
    barycentric,
    BarycentricCache,
    is_point_in_triangle,
    triangle_area_from_lengths,
    signed_distance_to_triangle_plane,
)
from .separating import (
    extreme_points_along_direction,
    point_farthest_from_edge,
    most_separated_points_on_aabb,
    is_convex_quad,
    minimum_area_rectangle,
    minimum_area_bounding_rectangle,
)

__all__ = [
    # Closest-point engine
    "closest_point_on_segment",
    "sq_dist_point_segment",
    "closest_points_segment_segment",
    "closest_point_on_rectangle",
    "closest_point_in_triangle",
    "is_point_outside_plane",
    "closest_point_in_tetrahedron",
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
]
