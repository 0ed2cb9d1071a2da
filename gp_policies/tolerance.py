"""
Numeric tolerances for closest-point queries.

The segment-segment solver needs two thresholds: one deciding when a segment
has collapsed into a point, and one deciding when two segments are parallel
so the 2x2 system is not solved. Both act on squared quantities.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any

from .base import alias_fields, coerce_float


@dataclass
class ToleranceParams:
    """
    Tolerances for degenerate-input detection.
    
    JSON Schema:
    {
        "degeneracy_epsilon": float,
        "parallel_epsilon": float
    }
    
    Attributes:
        degeneracy_epsilon: A segment whose squared length is <= this value
            is treated as a point.
        parallel_epsilon: Two segments whose determinant |d1|^2 |d2|^2 - (d1.d2)^2
            is <= this value are treated as parallel.
    """
    degeneracy_epsilon: float = 1e-10
    parallel_epsilon: float = 1e-10
    
    def __post_init__(self):
        if self.degeneracy_epsilon < 0:
            raise ValueError(
                f"degeneracy_epsilon ({self.degeneracy_epsilon}) must be non-negative"
            )
        if self.parallel_epsilon < 0:
            raise ValueError(
                f"parallel_epsilon ({self.parallel_epsilon}) must be non-negative"
            )
    
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
    
    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ToleranceParams":
        d = alias_fields(d, {"epsilon": "degeneracy_epsilon"})
        defaults = cls()
        return cls(
            degeneracy_epsilon=coerce_float(d.get("degeneracy_epsilon"), defaults.degeneracy_epsilon),
            parallel_epsilon=coerce_float(d.get("parallel_epsilon"), defaults.parallel_epsilon),
        )


__all__ = ["ToleranceParams"]
