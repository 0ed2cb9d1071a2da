"""
Axis-aligned bounding box queries.

Boxes are stored as center + half extents (see geoprim.core.primitives.AABB)
and may be 2D or 3D. The transform update returns a new box rather than
writing into an output argument.
"""

import numpy as np

from ..core.errors import PrimitiveShapeError
from ..core.primitives import AABB
from ..core.vectors import as_vector


def aabb_overlap(a: AABB, b: AABB) -> bool:
    """
    True if the two boxes overlap. Touching boxes count as overlapping.
    
    The test is symmetric in its arguments.
    """
    return bool(np.all(np.abs(a.center - b.center) <= a.radius + b.radius))


def update_aabb(base: AABB, transform) -> AABB:
    """
    Compute the AABB enclosing ``base`` after an affine transform.
    
    Parameters
    ----------
    base : AABB
        Source box in local coordinates.
    transform : array-like
        Affine transform of shape (D, D + 1) laid out as [R | t], so a point
        maps as x' = R @ x + t.
        
    Returns
    -------
    AABB
        New box with center R @ c + t and half extents |R| @ r.
    """
    m = np.array(transform, dtype=np.float64)
    dim = base.center.shape[0]
    if m.shape != (dim, dim + 1):
        raise PrimitiveShapeError(
            f"Expected a ({dim}, {dim + 1}) affine transform, got shape {m.shape}"
        )
    rot = m[:, :dim]
    return AABB(
        center=rot @ base.center + m[:, dim],
        radius=np.abs(rot) @ base.radius,
    )


def closest_point_aabb_point(box: AABB, p) -> np.ndarray:
    """The point in or on the box closest to p."""
    p = as_vector(p, box.center.shape[0])
    return np.clip(p, box.center - box.radius, box.center + box.radius)


def sq_dist_aabb_point(box: AABB, p) -> float:
    """Squared distance from p to the box; zero inside."""
    p = as_vector(p, box.center.shape[0])
    lo = box.center - box.radius
    hi = box.center + box.radius

    # For each axis count any excess distance outside box extents
    below = np.maximum(lo - p, 0.0)
    above = np.maximum(p - hi, 0.0)
    return float(np.sum(below * below + above * above))


__all__ = [
    "aabb_overlap",
    "update_aabb",
    "closest_point_aabb_point",
    "sq_dist_aabb_point",
]
