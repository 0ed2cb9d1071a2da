"""
Geometric primitives for closest-point queries.

This module provides value classes for the primitives the query engine
works on:
- Segment: ordered endpoints (p, q); zero length is valid
- Rectangle: corner a with edges ab and ac
- Triangle: ordered vertices (a, b, c)
- Tetrahedron: ordered vertices (a, b, c, d)
- AABB: center and half extents, any dimension

Each primitive supports:
- closest_point: Closest point and squared distance to a query point
- to_dict / from_dict: JSON-friendly serialization

The query methods delegate to geoprim.ops, which holds the canonical
implementations.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
import numpy as np

from .vectors import as_vector
from .results import ClosestPointResult, SegmentSegmentResult


def _sq_dist(a: np.ndarray, b: np.ndarray) -> float:
    d = a - b
    return float(np.dot(d, d))


@dataclass
class Segment:
    """
    Line segment S(t) = p + t * (q - p), t in [0, 1].

    Parameters
    ----------
    p, q : array-like
        Endpoints (2D or 3D).
    """

    p: np.ndarray
    q: np.ndarray

    def __post_init__(self):
        self.p = as_vector(self.p)
        self.q = as_vector(self.q, self.p.shape[0])

    @property
    def direction(self) -> np.ndarray:
        return self.q - self.p

    @property
    def length(self) -> float:
        return float(np.linalg.norm(self.q - self.p))

    def point_at(self, t: float) -> np.ndarray:
        return self.p + t * (self.q - self.p)

    def closest_point(self, point) -> ClosestPointResult:
        """Closest point on the segment, with its parameter t."""
        from ..ops.closest import closest_point_on_segment
        point = as_vector(point, self.p.shape[0])
        t, closest = closest_point_on_segment(self.p, self.q, point)
        return ClosestPointResult(point=closest, sq_distance=_sq_dist(closest, point), params=(t,))

    def sq_distance_to(self, point) -> float:
        from ..ops.closest import sq_dist_point_segment
        return sq_dist_point_segment(self.p, self.q, point)

    def closest_points_to(self, other: "Segment", policy=None) -> SegmentSegmentResult:
        """Closest points between this segment and another."""
        from ..ops.closest import closest_points_segment_segment
        return closest_points_segment_segment(self.p, self.q, other.p, other.q, policy=policy)

    def to_dict(self) -> dict:
        return {"type": "segment", "p": self.p.tolist(), "q": self.q.tolist()}

    @classmethod
    def from_dict(cls, d: dict) -> "Segment":
        return cls(p=d["p"], q=d["q"])


@dataclass
class Rectangle:
    """
    Rectangle with corner a spanned by the perpendicular edges ab and ac.
    """

    a: np.ndarray
    b: np.ndarray
    c: np.ndarray

    def __post_init__(self):
        self.a = as_vector(self.a, 3)
        self.b = as_vector(self.b, 3)
        self.c = as_vector(self.c, 3)

    def closest_point(self, point) -> ClosestPointResult:
        from ..ops.closest import closest_point_on_rectangle
        point = as_vector(point, 3)
        closest = closest_point_on_rectangle(point, self.a, self.b, self.c)
        return ClosestPointResult(point=closest, sq_distance=_sq_dist(closest, point))

    def to_dict(self) -> dict:
        return {
            "type": "rectangle",
            "a": self.a.tolist(),
            "b": self.b.tolist(),
            "c": self.c.tolist(),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Rectangle":
        return cls(a=d["a"], b=d["b"], c=d["c"])


@dataclass
class Triangle:
    """
    Triangle with ordered vertices a, b, c.

    Orientation only matters for plane queries (signed distance); closest
    point queries ignore it.
    """

    a: np.ndarray
    b: np.ndarray
    c: np.ndarray

    def __post_init__(self):
        self.a = as_vector(self.a, 3)
        self.b = as_vector(self.b, 3)
        self.c = as_vector(self.c, 3)

    @property
    def normal(self) -> np.ndarray:
        """Unnormalized right-handed normal (b - a) x (c - a)."""
        return np.cross(self.b - self.a, self.c - self.a)

    @property
    def area(self) -> float:
        return 0.5 * float(np.linalg.norm(self.normal))

    def closest_point(self, point) -> ClosestPointResult:
        """Closest point in or on the triangle, with its barycentric coordinates."""
        from ..ops.closest import closest_point_in_triangle
        from ..ops.triangle import barycentric
        point = as_vector(point, 3)
        closest = closest_point_in_triangle(point, self.a, self.b, self.c)
        return ClosestPointResult(
            point=closest,
            sq_distance=_sq_dist(closest, point),
            params=barycentric(self.a, self.b, self.c, closest),
        )

    def barycentric(self, point):
        from ..ops.triangle import barycentric
        return barycentric(self.a, self.b, self.c, point)

    def contains(self, point) -> bool:
        """True if point, projected onto the triangle's plane, is inside."""
        from ..ops.triangle import is_point_in_triangle
        return is_point_in_triangle(point, self.a, self.b, self.c)

    def signed_distance(self, point) -> float:
        from ..ops.triangle import signed_distance_to_triangle_plane
        return signed_distance_to_triangle_plane(point, self.a, self.b, self.c)

    def to_dict(self) -> dict:
        return {
            "type": "triangle",
            "a": self.a.tolist(),
            "b": self.b.tolist(),
            "c": self.c.tolist(),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Triangle":
        return cls(a=d["a"], b=d["b"], c=d["c"])


@dataclass
class Tetrahedron:
    """Tetrahedron with ordered vertices a, b, c, d."""

    a: np.ndarray
    b: np.ndarray
    c: np.ndarray
    d: np.ndarray

    def __post_init__(self):
        self.a = as_vector(self.a, 3)
        self.b = as_vector(self.b, 3)
        self.c = as_vector(self.c, 3)
        self.d = as_vector(self.d, 3)

    @property
    def centroid(self) -> np.ndarray:
        return (self.a + self.b + self.c + self.d) / 4.0

    def closest_point(self, point) -> ClosestPointResult:
        from ..ops.closest import closest_point_in_tetrahedron
        point = as_vector(point, 3)
        closest = closest_point_in_tetrahedron(point, self.a, self.b, self.c, self.d)
        return ClosestPointResult(point=closest, sq_distance=_sq_dist(closest, point))

    def contains(self, point) -> bool:
        """True if point lies in or on the tetrahedron."""
        return self.closest_point(point).sq_distance == 0.0

    def to_dict(self) -> dict:
        return {
            "type": "tetrahedron",
            "a": self.a.tolist(),
            "b": self.b.tolist(),
            "c": self.c.tolist(),
            "d": self.d.tolist(),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Tetrahedron":
        return cls(a=d["a"], b=d["b"], c=d["c"], d=d["d"])


@dataclass
class AABB:
    """
    Axis-aligned bounding box stored as center and half extents.

    Parameters
    ----------
    center : array-like
        Box center (2D or 3D).
    radius : array-like, optional
        Non-negative half extent per axis. Defaults to zero (a point box).
    """

    center: np.ndarray
    radius: Optional[np.ndarray] = None

    def __post_init__(self):
        self.center = as_vector(self.center)
        if self.radius is None:
            self.radius = np.zeros_like(self.center)
        else:
            self.radius = as_vector(self.radius, self.center.shape[0])
        if np.any(self.radius < 0):
            raise ValueError(f"radius ({self.radius.tolist()}) must be non-negative")

    @classmethod
    def from_min_max(cls, min_corner, max_corner) -> "AABB":
        lo = as_vector(min_corner)
        hi = as_vector(max_corner, lo.shape[0])
        return cls(center=(lo + hi) / 2.0, radius=(hi - lo) / 2.0)

    @property
    def min_corner(self) -> np.ndarray:
        return self.center - self.radius

    @property
    def max_corner(self) -> np.ndarray:
        return self.center + self.radius

    def overlaps(self, other: "AABB") -> bool:
        from ..ops.aabb import aabb_overlap
        return aabb_overlap(self, other)

    def closest_point(self, point) -> ClosestPointResult:
        from ..ops.aabb import closest_point_aabb_point, sq_dist_aabb_point
        return ClosestPointResult(
            point=closest_point_aabb_point(self, point),
            sq_distance=sq_dist_aabb_point(self, point),
        )

    def get_bounds(self) -> tuple:
        """Get bounds as (min_x, max_x, min_y, max_y[, min_z, max_z])."""
        bounds = []
        for lo, hi in zip(self.min_corner, self.max_corner):
            bounds.extend([float(lo), float(hi)])
        return tuple(bounds)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "aabb",
            "center": self.center.tolist(),
            "radius": self.radius.tolist(),
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "AABB":
        return cls(center=d["center"], radius=d.get("radius"))


__all__ = [
    "Segment",
    "Rectangle",
    "Triangle",
    "Tetrahedron",
    "AABB",
]
