"""
Result types returned by geoprim queries.

All results are short-lived value objects. Array fields are fresh copies and
never alias caller inputs.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
import numpy as np

from gp_policies.base import OperationReport


@dataclass
class ClosestPointResult:
    """
    Closest point in or on a primitive.
    
    Attributes
    ----------
    point : np.ndarray
        The closest point.
    sq_distance : float
        Squared distance from the query point to ``point``.
    params : tuple
        Parametric coordinates locating ``point`` on the primitive: the
        segment parameter ``(t,)``, barycentric ``(u, v, w)``, or empty.
    """
    point: np.ndarray
    sq_distance: float
    params: Tuple[float, ...] = ()
    
    @property
    def distance(self) -> float:
        return float(np.sqrt(self.sq_distance))
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "point": self.point.tolist(),
            "sq_distance": self.sq_distance,
            "params": list(self.params),
        }


@dataclass
class SegmentSegmentResult:
    """
    Closest points between S1(s) = p1 + s*(q1 - p1) and S2(t) = p2 + t*(q2 - p2).
    
    ``c1`` always lies on the first segment and ``c2`` on the second.
    """
    s: float
    t: float
    sq_distance: float
    c1: np.ndarray
    c2: np.ndarray
    
    @property
    def distance(self) -> float:
        return float(np.sqrt(self.sq_distance))
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "s": self.s,
            "t": self.t,
            "sq_distance": self.sq_distance,
            "c1": self.c1.tolist(),
            "c2": self.c2.tolist(),
        }


@dataclass
class EigenResult:
    """
    Output of the Jacobi eigen solver.
    
    Attributes
    ----------
    eigenvectors : np.ndarray
        Orthonormal matrix V holding eigenvectors as columns.
    diagonal : np.ndarray
        The working matrix after diagonalization; its diagonal holds the
        eigenvalue matching each column of V. Small off-diagonal residue may
        remain for ill-conditioned input.
    iterations : int
        Number of rotations applied.
    off_norm : float
        Sum of squares of the off-diagonal entries of ``diagonal``.
    stop_reason : str
        "stalled" when the off-diagonal norm stopped decreasing,
        "max_iterations" when the iteration cap was reached.
    report : OperationReport, optional
        Requested vs effective policy and run metrics.
    
    Eigenvalue ordering is unspecified; use
    ``geoprim.analysis.eigen.sort_eigenpairs`` for ordered axes.
    """
    eigenvectors: np.ndarray
    diagonal: np.ndarray
    iterations: int = 0
    off_norm: float = 0.0
    stop_reason: str = "max_iterations"
    report: Optional[OperationReport] = None
    
    @property
    def eigenvalues(self) -> np.ndarray:
        return np.diag(self.diagonal).copy()
    
    def reconstruct(self) -> np.ndarray:
        """
        Return V * diag(eigenvalues) * V^T.

        Off-diagonal residue left in ``diagonal`` is dropped, so the error
        against the input matrix measures how far the solver converged.
        """
        v = self.eigenvectors
        return v @ np.diag(self.eigenvalues) @ v.T


@dataclass
class RectangleResult:
    """
    Minimum-area bounding rectangle of a planar point set.
    
    ``axes`` holds the two unit axis directions as rows; ``extents`` the
    half-lengths along them.
    """
    area: float
    center: np.ndarray
    axes: np.ndarray
    extents: np.ndarray = field(default_factory=lambda: np.zeros(2))
    
    def corners(self) -> np.ndarray:
        """Rectangle corners in counter-clockwise order."""
        u = self.axes[0] * self.extents[0]
        v = self.axes[1] * self.extents[1]
        return np.array([
            self.center - u - v,
            self.center + u - v,
            self.center + u + v,
            self.center - u + v,
        ])
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "area": self.area,
            "center": self.center.tolist(),
            "axes": self.axes.tolist(),
            "extents": self.extents.tolist(),
        }


__all__ = [
    "ClosestPointResult",
    "SegmentSegmentResult",
    "EigenResult",
    "RectangleResult",
]
