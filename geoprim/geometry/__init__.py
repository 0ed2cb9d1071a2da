"""Bounding-volume and mesh utilities built on the geoprim query engine."""

from .obb import OBB, compute_mesh_obb
from .mesh import closest_point_on_mesh

__all__ = [
    "OBB",
    "compute_mesh_obb",
    "closest_point_on_mesh",
]
