"""
Triangle helpers: barycentric coordinates, point-in-triangle, area from
edge lengths and signed distance to a triangle's plane.

Degenerate (zero-area) triangles are not rejected. Their barycentric
denominator is zero and the resulting coordinates are inf/NaN.
"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np

from ..core.vectors import as_vector


def barycentric(a, b, c, p) -> Tuple[float, float, float]:
    """
    Barycentric coordinates (u, v, w) of p with respect to triangle abc.
    
    p is implicitly projected onto the triangle's plane. The weights
    satisfy u + v + w = 1 and p' = u*a + v*b + w*c, so they can be used to
    interpolate per-vertex attributes (normals, texture coordinates, colors).
    """
    return BarycentricCache.from_triangle(a, b, c).query(p)


@dataclass(frozen=True)
class BarycentricCache:
    """
    Precomputed per-triangle data for repeated barycentric queries.
    
    Use it when the same triangle is queried many times; only two dot
    products remain per query.
    """
    a: np.ndarray
    v0: np.ndarray
    v1: np.ndarray
    d00: float
    d01: float
    d11: float
    inv_denom: float
    
    @classmethod
    def from_triangle(cls, a, b, c) -> "BarycentricCache":
        a = as_vector(a)
        v0 = as_vector(b) - a
        v1 = as_vector(c) - a
        d00 = np.dot(v0, v0)
        d01 = np.dot(v0, v1)
        d11 = np.dot(v1, v1)
        # Zero for degenerate triangles; numpy yields inf rather than raising
        inv_denom = np.float64(1.0) / (d00 * d11 - d01 * d01)
        return cls(a=a, v0=v0, v1=v1, d00=d00, d01=d01, d11=d11, inv_denom=inv_denom)
    
    def query(self, p) -> Tuple[float, float, float]:
        """Barycentric coordinates (u, v, w) of p."""
        v2 = as_vector(p) - self.a
        d20 = np.dot(v2, self.v0)
        d21 = np.dot(v2, self.v1)
        v = (self.d11 * d20 - self.d01 * d21) * self.inv_denom
        w = (self.d00 * d21 - self.d01 * d20) * self.inv_denom
        u = 1.0 - v - w
        return float(u), float(v), float(w)


def is_point_in_triangle(p, a, b, c) -> bool:
    """True if p, projected onto the plane of abc, lies in or on triangle abc."""
    _, v, w = barycentric(a, b, c, p)
    return v >= 0.0 and w >= 0.0 and (v + w) <= 1.0


def triangle_area_from_lengths(la: float, lb: float, lc: float) -> float:
    """
    Area of a triangle with the given edge lengths (Heron's formula).
    
    Returns NaN when the lengths violate the triangle inequality.
    """
    half = (la + lb + lc) / 2.0
    return float(np.sqrt(np.float64(half * (half - la) * (half - lb) * (half - lc))))


def signed_distance_to_triangle_plane(p, a, b, c) -> float:
    """
    Signed distance of p to the plane of triangle abc.
    
    The plane normal is (c - a) x (b - a), so the distance is positive on
    the side from which a, b, c appear in clockwise order.
    """
    a = as_vector(a, 3)
    n = np.cross(as_vector(c, 3) - a, as_vector(b, 3) - a)
    n = n / np.linalg.norm(n)
    return float(np.dot(n, as_vector(p, 3) - a))


__all__ = [
    "barycentric",
    "BarycentricCache",
    "is_point_in_triangle",
    "triangle_area_from_lengths",
    "signed_distance_to_triangle_plane",
]
