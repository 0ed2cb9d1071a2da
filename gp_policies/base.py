"""
Shared helpers for geoprim policies.

Policies arrive as dataclass instances or as plain dicts loaded from JSON
config. The coercion helpers below turn loosely typed dict values into the
numeric fields the policies expect, and OperationReport records what an
iterative operation was asked to do versus what it actually did.
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, Any, List
import json


def coerce_float(value: Any, default: float = 0.0) -> float:
    """
    Convert a config value to float.

    Parameters
    ----------
    value : Any
        Raw value, typically from a JSON dict (may be a string or None).
    default : float
        Returned when ``value`` is None or not numeric.

    Returns
    -------
    float
    """
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def coerce_int(value: Any, default: int = 0) -> int:
    """Convert a config value to int; ``default`` on None or bad input."""
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def alias_fields(d: Dict[str, Any], aliases: Dict[str, str]) -> Dict[str, Any]:
    """
    Rename legacy config keys to their current names.

    A legacy key is only moved when the current key is absent, so an
    explicit current value always wins. The input dict is not modified.

    Parameters
    ----------
    d : dict
        Raw policy dict.
    aliases : dict
        Mapping of old key -> current key.

    Returns
    -------
    dict
        Copy of ``d`` with aliases resolved.
    """
    out = dict(d)
    for old, new in aliases.items():
        if old in out and new not in out:
            out[new] = out.pop(old)
    return out


@dataclass
class OperationReport:
    """
    Outcome of a policy-driven geoprim operation.

    ``requested_policy`` is the policy the caller passed in and
    ``effective_policy`` the one actually applied; they only differ when an
    operation adjusts its settings at runtime. ``metrics`` carries
    operation-specific numbers such as the Jacobi iteration count,
    off-diagonal residue and stop reason.
    """
    operation: str = "unknown"
    requested_policy: Dict[str, Any] = field(default_factory=dict)
    effective_policy: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)


__all__ = [
    "OperationReport",
    "coerce_float",
    "coerce_int",
    "alias_fields",
]
