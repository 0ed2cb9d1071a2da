"""
Closest-point queries against triangle meshes.

Brute-force scan of every mesh triangle with the seven-region triangle
test. No acceleration structure is built; callers with large meshes are
expected to cull triangles first.
"""

from typing import TYPE_CHECKING
import numpy as np

from ..core.results import ClosestPointResult
from ..core.vectors import as_vector
from ..ops.closest import closest_point_in_triangle

if TYPE_CHECKING:
    import trimesh


def closest_point_on_mesh(mesh: "trimesh.Trimesh", point) -> ClosestPointResult:
    """
    Closest point to ``point`` on the surface of a triangle mesh.
    
    Parameters
    ----------
    mesh : trimesh.Trimesh
        Mesh to query.
    point : array-like
        Query point (3D).
    
    Returns
    -------
    ClosestPointResult
        Closest surface point, squared distance, and ``params == (face_index,)``.
        An empty mesh yields a NaN point, infinite distance and face -1.
    """
    point = as_vector(point, 3)
    best = ClosestPointResult(point=np.full(3, np.nan), sq_distance=np.inf, params=(-1,))
    
    for face_index, (a, b, c) in enumerate(np.asarray(mesh.triangles)):
        q = closest_point_in_triangle(point, a, b, c)
        diff = q - point
        sq_dist = float(np.dot(diff, diff))
        if sq_dist < best.sq_distance:
            best = ClosestPointResult(point=q, sq_distance=sq_dist, params=(face_index,))
    
    return best


__all__ = ["closest_point_on_mesh"]
