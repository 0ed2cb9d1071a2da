"""
Closest-point and distance queries between points, segments, rectangles,
triangles and tetrahedra.

This module is the single source of truth for narrow-phase distance
computations. All functions are pure: inputs are never mutated and
returned arrays are fresh.

Degenerate inputs do not raise. Zero-length segments are handled
explicitly; other degeneracies (zero-area triangles, flat tetrahedra)
produce mathematically defined results or NaN, and callers that cannot
accept non-finite values must pre-validate their geometry.
"""

from typing import Optional, Tuple
import numpy as np

from gp_policies.tolerance import ToleranceParams
from ..core.vectors import as_vector
from ..core.results import SegmentSegmentResult


def closest_point_on_segment(a, b, c) -> Tuple[float, np.ndarray]:
    """
    Compute the point on segment ab closest to c.

    Works for 2D and 3D inputs.

    Parameters
    ----------
    a, b : array-like
        Segment endpoints.
    c : array-like
        Query point.

    Returns
    -------
    t : float
        Parameter of the closest point, d(t) = a + t * (b - a), in [0, 1].
    point : np.ndarray
        The closest point.
    """
    a = as_vector(a)
    b = as_vector(b)
    c = as_vector(c)
    ab = b - a

    # Project c onto ab, deferring the division by ab.ab
    t = float(np.dot(c - a, ab))
    if t <= 0.0:
        # c projects outside the [a, b] interval on the a side
        return 0.0, a

    denom = float(np.dot(ab, ab))
    if t >= denom:
        # c projects outside the [a, b] interval on the b side
        return 1.0, b

    # c projects inside the interval; do the deferred divide now
    t = t / denom
    return t, a + t * ab


def sq_dist_point_segment(a, b, c) -> float:
    """
    Squared distance between point c and segment ab.

    The closest point is never materialized and no square root is taken.
    A point lying on the segment, endpoints included, yields 0.
    """
    a = as_vector(a)
    b = as_vector(b)
    c = as_vector(c)
    ab = b - a
    ac = c - a
    bc = c - b
    e = float(np.dot(ac, ab))

    # c projects outside ab on the a side
    if e <= 0.0:
        return float(np.dot(ac, ac))

    f = float(np.dot(ab, ab))
    # c projects outside ab on the b side
    if e >= f:
        return float(np.dot(bc, bc))

    # c projects onto ab; clamp round-off below zero
    return max(float(np.dot(ac, ac)) - e * e / f, 0.0)


def closest_points_segment_segment(
    p1,
    q1,
    p2,
    q2,
    policy: Optional[ToleranceParams] = None,
) -> SegmentSegmentResult:
    """
    Compute closest points C1 and C2 of S1(s) = p1 + s*(q1 - p1) and
    S2(t) = p2 + t*(q2 - p2).

    Handles degenerate segments (points) in either or both positions,
    parallel segments and intersecting segments (squared distance 0).

    Parameters
    ----------
    p1, q1 : array-like
        Endpoints of segment 1.
    p2, q2 : array-like
        Endpoints of segment 2.
    policy : ToleranceParams, optional
        Degeneracy and parallelism thresholds. Defaults to ToleranceParams().

    Returns
    -------
    SegmentSegmentResult
        Parameters s and t in [0, 1], squared distance, and the closest
        points c1 (on segment 1) and c2 (on segment 2).

    Examples
    --------
    >>> r = closest_points_segment_segment((0, 0, 0), (1, 0, 0), (0, 1, 0), (1, 1, 0))
    >>> r.sq_distance
    1.0
    """
    if policy is None:
        policy = ToleranceParams()
    eps = policy.degeneracy_epsilon

    p1 = as_vector(p1)
    q1 = as_vector(q1)
    p2 = as_vector(p2)
    q2 = as_vector(q2)

    d1 = q1 - p1  # Direction of segment 1
    d2 = q2 - p2  # Direction of segment 2
    r = p1 - p2
    a = float(np.dot(d1, d1))  # |d1|^2
    e = float(np.dot(d2, d2))  # |d2|^2
    f = float(np.dot(d2, r))

    # Both segments degenerate into points
    if a <= eps and e <= eps:
        return SegmentSegmentResult(
            s=0.0, t=0.0, sq_distance=float(np.dot(r, r)), c1=p1, c2=p2,
        )

    if a <= eps:
        # First segment degenerates into a point
        s = 0.0
        t = float(np.clip(f / e, 0.0, 1.0))
    else:
        c = float(np.dot(d1, r))
        if e <= eps:
            # Second segment degenerates into a point
            t = 0.0
            s = float(np.clip(-c / a, 0.0, 1.0))
        else:
            # The general non-degenerate case starts here
            b = float(np.dot(d1, d2))
            denom = a * e - b * b  # Always >= 0

            # If segments are not parallel, compute closest point on L1 to L2
            # and clamp to S1. Else pick arbitrary s (here 0).
            if denom > policy.parallel_epsilon:
                s = float(np.clip((b * f - c * e) / denom, 0.0, 1.0))
            else:
                s = 0.0

            # Point on L2 closest to S1(s)
            t = (b * s + f) / e

            # If t is outside [0, 1], clamp t and recompute s
            if t < 0.0:
                t = 0.0
                s = float(np.clip(-c / a, 0.0, 1.0))
            elif t > 1.0:
                t = 1.0
                s = float(np.clip((b - c) / a, 0.0, 1.0))

    c1 = p1 + s * d1
    c2 = p2 + t * d2
    diff = c1 - c2
    return SegmentSegmentResult(
        s=s, t=t, sq_distance=float(np.dot(diff, diff)), c1=c1, c2=c2,
    )


def closest_point_on_rectangle(p, a, b, c) -> np.ndarray:
    """
    Closest point to p on the rectangle spanned by edges ab and ac from
    corner a.

    The projection of p - a is clamped independently along each edge, so
    ab and ac are expected to be perpendicular.
    """
    p = as_vector(p, 3)
    a = as_vector(a, 3)
    ab = as_vector(b, 3) - a
    ac = as_vector(c, 3) - a
    d = p - a

    # Start at corner a and step along each edge
    closest = a.copy()

    for edge in (ab, ac):
        dist = float(np.dot(d, edge))
        max_dist = float(np.dot(edge, edge))
        if dist >= max_dist:
            closest += edge
        elif dist > 0.0:
            closest += (dist / max_dist) * edge

    return closest


def closest_point_in_triangle(p, a, b, c) -> np.ndarray:
    """
    Closest point to p in or on triangle abc.

    Classifies p against the seven Voronoi regions of the triangle (three
    vertices, three edges, the face) using six dot products. Regions are
    tested in a fixed order, vertex A, vertex B, edge AB, vertex C, edge AC,
    edge BC, face, so that points on a region boundary resolve to the
    lower-dimensional feature.
    """
    p = as_vector(p, 3)
    a = as_vector(a, 3)
    b = as_vector(b, 3)
    c = as_vector(c, 3)
    ab = b - a
    ac = c - a

    # Vertex region outside A
    ap = p - a
    d1 = np.dot(ab, ap)
    d2 = np.dot(ac, ap)
    if d1 <= 0.0 and d2 <= 0.0:
        return a  # barycentric (1, 0, 0)

    # Vertex region outside B
    bp = p - b
    d3 = np.dot(ab, bp)
    d4 = np.dot(ac, bp)
    if d3 >= 0.0 and d4 <= d3:
        return b  # barycentric (0, 1, 0)

    # Edge region of AB
    vc = d1 * d4 - d3 * d2
    if vc <= 0.0 and d1 >= 0.0 and d3 <= 0.0:
        v = d1 / (d1 - d3)
        return a + v * ab  # barycentric (1 - v, v, 0)

    # Vertex region outside C
    cp = p - c
    d5 = np.dot(ab, cp)
    d6 = np.dot(ac, cp)
    if d6 >= 0.0 and d5 <= d6:
        return c  # barycentric (0, 0, 1)

    # Edge region of AC
    vb = d5 * d2 - d1 * d6
    if vb <= 0.0 and d2 >= 0.0 and d6 <= 0.0:
        w = d2 / (d2 - d6)
        return a + w * ac  # barycentric (1 - w, 0, w)

    # Edge region of BC
    va = d3 * d6 - d5 * d4
    if va <= 0.0 and (d4 - d3) >= 0.0 and (d5 - d6) >= 0.0:
        w = (d4 - d3) / ((d4 - d3) + (d5 - d6))
        return b + w * (c - b)  # barycentric (0, 1 - w, w)

    # Inside face region; blend through the signed sub-areas
    denom = 1.0 / (va + vb + vc)
    v = vb * denom
    w = vc * denom
    return a + ab * v + ac * w


def is_point_outside_plane(p, a, b, c, d) -> bool:
    """
    True if p and the reference point d lie strictly on opposite sides of
    the plane through a, b, c.
    """
    p = as_vector(p, 3)
    a = as_vector(a, 3)
    n = np.cross(as_vector(b, 3) - a, as_vector(c, 3) - a)
    sign_p = float(np.dot(p - a, n))
    sign_d = float(np.dot(as_vector(d, 3) - a, n))
    return sign_p * sign_d < 0.0


# Each face of tetrahedron (a, b, c, d) as (face vertices, opposite vertex),
# indexed into the vertex tuple.
_TETRA_FACES = (
    ((0, 1, 2), 3),
    ((0, 2, 3), 1),
    ((0, 3, 1), 2),
    ((1, 3, 2), 0),
)


def closest_point_in_tetrahedron(p, a, b, c, d) -> np.ndarray:
    """
    Closest point to p in or on tetrahedron abcd.

    Every face whose plane separates p from the opposite vertex is a
    candidate; the nearest face point wins. A point outside no face plane is
    interior and is returned unchanged.
    """
    p = as_vector(p, 3)
    verts = (as_vector(a, 3), as_vector(b, 3), as_vector(c, 3), as_vector(d, 3))

    # Start out assuming p is inside all halfspaces, so closest to itself
    closest = p
    best_sq_dist = np.inf

    for (i, j, k), opposite in _TETRA_FACES:
        if not is_point_outside_plane(p, verts[i], verts[j], verts[k], verts[opposite]):
            continue
        q = closest_point_in_triangle(p, verts[i], verts[j], verts[k])
        pq = q - p
        sq_dist = float(np.dot(pq, pq))
        if sq_dist < best_sq_dist:
            best_sq_dist = sq_dist
            closest = q

    return closest


__all__ = [
    "closest_point_on_segment",
    "sq_dist_point_segment",
    "closest_points_segment_segment",
    "closest_point_on_rectangle",
    "closest_point_in_triangle",
    "is_point_outside_plane",
    "closest_point_in_tetrahedron",
]
