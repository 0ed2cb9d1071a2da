"""
Separating-axis and extreme-point utilities.

Linear scans over point sets used when building bounding volumes and
convex hulls, the convex-quad test, and the minimum-area rectangle search
over a convex polygon.

Empty point sets return -1 index sentinels instead of raising.
"""

from typing import Tuple
import logging
import numpy as np

from ..core.results import RectangleResult
from ..core.vectors import as_points, as_vector, perp

logger = logging.getLogger(__name__)


def extreme_points_along_direction(direction, points) -> Tuple[int, int]:
    """
    Indices of the least and most distant points along a direction.

    Works for 2D and 3D point sets. When several points share an extreme
    projection the first one wins.

    Returns
    -------
    (imin, imax) : tuple of int
        (-1, -1) when ``points`` is empty.
    """
    direction = as_vector(direction)
    pts = as_points(points, direction.shape[0])
    if len(pts) == 0:
        return -1, -1

    # Project every point along the direction
    proj = pts @ direction
    return int(np.argmin(proj)), int(np.argmax(proj))


def point_farthest_from_edge(a, b, points) -> int:
    """
    Index of the point farthest to the left of the directed 2D edge a -> b.

    Ties in perpendicular distance go to the point farthest along the edge
    direction (the rightmost one), which keeps quickhull-style hull
    construction deterministic.

    Returns -1 when no point lies to the left of the edge or on its line
    ahead of a.
    """
    a = as_vector(a, 2)
    e = as_vector(b, 2) - a
    e_perp = perp(e)
    pts = as_points(points, 2)

    index = -1
    max_val = 0.0
    right_most_val = 0.0

    for n, point in enumerate(pts):
        d = float(np.dot(point - a, e_perp))
        r = float(np.dot(point - a, e))
        if d > max_val or (d == max_val and r > right_most_val):
            max_val = d
            index = n
            right_most_val = r

    return index


def most_separated_points_on_aabb(points) -> Tuple[int, int]:
    """
    Indices of the two most separated points among the per-axis extremes.

    For each axis the minimum and maximum points are found; the axis pair
    with the greatest squared separation wins, earlier axes winning ties.

    Returns
    -------
    (imin, imax) : tuple of int
        (-1, -1) when ``points`` is empty.
    """
    pts = as_points(points)
    if len(pts) == 0:
        return -1, -1

    # Most extreme points along the principal axes
    mins = np.argmin(pts, axis=0)
    maxs = np.argmax(pts, axis=0)

    best_axis = 0
    best_sq = -1.0
    for axis in range(pts.shape[1]):
        delta = pts[maxs[axis]] - pts[mins[axis]]
        sq = float(np.dot(delta, delta))
        if sq > best_sq:
            best_sq = sq
            best_axis = axis

    return int(mins[best_axis]), int(maxs[best_axis])


def is_convex_quad(a, b, c, d) -> bool:
    """
    True if the quadrilateral abcd is convex.

    The quad is convex iff each diagonal separates the other two vertices:
    the diagonal bd must split a from c and the diagonal ac must split d
    from b.
    """
    a = as_vector(a, 3)
    b = as_vector(b, 3)
    c = as_vector(c, 3)
    d = as_vector(d, 3)

    # Quad is nonconvex if Dot(Cross(bd, ba), Cross(bd, bc)) >= 0
    dmb = d - b
    bda = np.cross(dmb, a - b)
    bdc = np.cross(dmb, c - b)
    if np.dot(bda, bdc) >= 0.0:
        return False

    # Quad is now convex iff Dot(Cross(ac, ad), Cross(ac, ab)) < 0
    cma = c - a
    acd = np.cross(cma, d - a)
    acb = np.cross(cma, b - a)
    return bool(np.dot(acd, acb) < 0.0)


def minimum_area_rectangle(points) -> RectangleResult:
    """
    Minimum-area rectangle enclosing a convex polygon.

    Every edge of the polygon is tried as a rectangle side: all points are
    projected onto the edge direction and its perpendicular and the extents
    give a candidate area. O(n^2).

    Parameters
    ----------
    points : array-like
        (N, 2) vertices of a convex polygon, in boundary order.

    Returns
    -------
    RectangleResult
        Area, center, axes (rows: edge direction, perpendicular) and half
        extents of the best rectangle. Area is inf when no edge has
        non-zero length.
    """
    pts = as_points(points, 2)
    n = len(pts)

    best = RectangleResult(
        area=np.inf,
        center=pts.mean(axis=0) if n else np.zeros(2),
        axes=np.eye(2),
        extents=np.zeros(2),
    )

    # Loop through all edges; j trails i by 1, modulo n
    j = n - 1
    for i in range(n):
        e0 = pts[i] - pts[j]
        length = float(np.linalg.norm(e0))
        if length == 0.0:
            logger.debug("Skipping zero-length edge %d-%d", j, i)
            j = i
            continue
        e0 = e0 / length
        # Axis orthogonal to e0
        e1 = perp(e0)

        # Project onto both axes relative to the edge origin; pts[j]
        # projects to 0, so zero is a valid starting extent
        d = pts - pts[j]
        dot0 = d @ e0
        dot1 = d @ e1
        min0 = min(0.0, float(dot0.min()))
        max0 = max(0.0, float(dot0.max()))
        min1 = min(0.0, float(dot1.min()))
        max1 = max(0.0, float(dot1.max()))
        area = (max0 - min0) * (max1 - min1)

        # If best so far, remember area, center, and axes
        if area < best.area:
            center = pts[j] + 0.5 * ((min0 + max0) * e0 + (min1 + max1) * e1)
            best = RectangleResult(
                area=area,
                center=center,
                axes=np.array([e0, e1]),
                extents=np.array([(max0 - min0) / 2.0, (max1 - min1) / 2.0]),
            )

        j = i

    return best


def minimum_area_bounding_rectangle(points) -> RectangleResult:
    """
    Minimum-area rectangle enclosing an arbitrary 2D point set.

    The convex hull is computed first with scipy, then searched with
    minimum_area_rectangle. Requires at least three non-collinear points.
    """
    from scipy.spatial import ConvexHull

    pts = as_points(points, 2)
    hull = ConvexHull(pts)
    # For 2D hulls scipy lists vertices in counter-clockwise order
    return minimum_area_rectangle(pts[hull.vertices])


__all__ = [
    "extreme_points_along_direction",
    "point_farthest_from_edge",
    "most_separated_points_on_aabb",
    "is_convex_quad",
    "minimum_area_rectangle",
    "minimum_area_bounding_rectangle",
]
