"""
Oriented Bounding Box (OBB) utilities.

This module builds OBBs from the principal axes of a point cloud: the
covariance matrix of the points is diagonalized with the Jacobi solver and
the points are projected onto the resulting axes to find the extents.
"""

from dataclasses import dataclass
from typing import Optional
import logging
import warnings
import numpy as np

from gp_policies.eigen import JacobiPolicy
from ..analysis.eigen import principal_axes
from ..core.results import ClosestPointResult
from ..core.vectors import as_points, as_vector

logger = logging.getLogger(__name__)


@dataclass
class OBB:
    """
    Oriented Bounding Box computed from a point cloud.
    
    Attributes
    ----------
    center : np.ndarray
        Center of the OBB in world coordinates.
    axes : np.ndarray
        (D, D) matrix where each row is a unit axis direction.
        axes[0] is the axis of greatest variance.
    extents : np.ndarray
        Half-extents along each axis.
    """
    
    center: np.ndarray
    axes: np.ndarray
    extents: np.ndarray
    
    @classmethod
    def from_points(cls, points, policy: Optional[JacobiPolicy] = None) -> "OBB":
        """
        Compute an OBB from points using their principal axes.
        
        Parameters
        ----------
        points : array-like
            (N, D) point positions, D = 2 or 3, N >= 1.
        policy : JacobiPolicy, optional
            Solver policy for the eigen decomposition.
        
        Returns
        -------
        OBB
            Oriented bounding box.
        """
        pts = as_points(points)
        mean, variances, eigenvectors = principal_axes(pts, policy=policy)
        
        if np.any(variances <= 0.0):
            warnings.warn(
                "Point set is degenerate (zero variance along at least one axis); "
                "OBB axes in the flat directions are arbitrary."
            )
        
        # Project onto the principal axes (columns of eigenvectors)
        projected = (pts - mean) @ eigenvectors
        
        min_proj = np.min(projected, axis=0)
        max_proj = np.max(projected, axis=0)
        
        extents = (max_proj - min_proj) / 2
        
        center_offset = (max_proj + min_proj) / 2
        center = mean + eigenvectors @ center_offset
        
        logger.debug("OBB from %d points: extents %s", len(pts), extents.tolist())
        return cls(center=center, axes=eigenvectors.T, extents=extents)
    
    def to_local(self, point) -> np.ndarray:
        """Coordinates of a world point along the box axes, relative to the center."""
        point = as_vector(point, self.center.shape[0])
        return self.axes @ (point - self.center)
    
    def contains(self, point) -> bool:
        """True if point lies in or on the box."""
        return bool(np.all(np.abs(self.to_local(point)) <= self.extents))
    
    def closest_point(self, point) -> ClosestPointResult:
        """
        Closest point in or on the box.
        
        The offset from the center is projected onto each axis and clamped
        to that axis' extent, the same clamped-projection idea used for
        rectangles.
        """
        point = as_vector(point, self.center.shape[0])
        local = np.clip(self.to_local(point), -self.extents, self.extents)
        closest = self.center + self.axes.T @ local
        diff = closest - point
        return ClosestPointResult(point=closest, sq_distance=float(np.dot(diff, diff)))
    
    def corners(self) -> np.ndarray:
        """All 2^D corners of the box."""
        dim = self.center.shape[0]
        signs = np.array(np.meshgrid(*([[-1.0, 1.0]] * dim), indexing="ij")).reshape(dim, -1).T
        return self.center + (signs * self.extents) @ self.axes
    
    @property
    def volume(self) -> float:
        """Volume (area in 2D) of the box."""
        return float(np.prod(2.0 * self.extents))
    
    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "center": self.center.tolist(),
            "axes": self.axes.tolist(),
            "extents": self.extents.tolist(),
        }
    
    @classmethod
    def from_dict(cls, d: dict) -> "OBB":
        """Create from dictionary."""
        return cls(
            center=np.array(d["center"], dtype=np.float64),
            axes=np.array(d["axes"], dtype=np.float64),
            extents=np.array(d["extents"], dtype=np.float64),
        )


def compute_mesh_obb(mesh, policy: Optional[JacobiPolicy] = None) -> OBB:
    """
    Compute OBB for a trimesh mesh.
    
    Parameters
    ----------
    mesh : trimesh.Trimesh
        The mesh to compute OBB for.
    policy : JacobiPolicy, optional
        Solver policy for the eigen decomposition.
    
    Returns
    -------
    OBB
        Oriented bounding box of the mesh vertices.
    """
    return OBB.from_points(np.asarray(mesh.vertices), policy=policy)


__all__ = [
    "OBB",
    "compute_mesh_obb",
]
