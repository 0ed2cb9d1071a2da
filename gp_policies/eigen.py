"""
Policy for the Jacobi eigenvalue solver.

The solver runs a fixed iteration budget and stops early once the
off-diagonal energy stops decreasing. See
geoprim.analysis.eigen.jacobi_eigen.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any

from .base import alias_fields, coerce_float, coerce_int


@dataclass
class JacobiPolicy:
    """
    Policy for Jacobi diagonalization of symmetric matrices.
    
    JSON Schema:
    {
        "max_iterations": int,
        "min_iterations": int,
        "rotation_threshold": float
    }
    
    Attributes:
        max_iterations: Hard cap on the number of rotations applied.
        min_iterations: Number of iterations that must complete before the
            monotonicity stop is allowed to fire.
        rotation_threshold: Off-diagonal magnitudes at or below this value
            produce the identity rotation (c=1, s=0).
    """
    max_iterations: int = 50
    min_iterations: int = 3
    rotation_threshold: float = 1e-4
    
    def __post_init__(self):
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations ({self.max_iterations}) must be >= 1")
        if self.min_iterations < 0:
            raise ValueError(f"min_iterations ({self.min_iterations}) must be >= 0")
        if self.rotation_threshold < 0:
            raise ValueError(
                f"rotation_threshold ({self.rotation_threshold}) must be non-negative"
            )
    
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
    
    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "JacobiPolicy":
        d = alias_fields(d, {"max_sweeps": "max_iterations", "threshold": "rotation_threshold"})
        defaults = cls()
        return cls(
            max_iterations=coerce_int(d.get("max_iterations"), defaults.max_iterations),
            min_iterations=coerce_int(d.get("min_iterations"), defaults.min_iterations),
            rotation_threshold=coerce_float(d.get("rotation_threshold"), defaults.rotation_threshold),
        )


__all__ = ["JacobiPolicy"]
