"""
GP Policies - Centralized policy definitions for geoprim.

This package provides the policy dataclasses consumed by the closest-point
engine and the eigen solver. All policies are JSON-serializable and support
the "requested vs effective" pattern for tracking runtime adjustments.

Usage:
    from gp_policies import ToleranceParams, JacobiPolicy, OperationReport
"""

from .base import (
    OperationReport,
    coerce_float,
    coerce_int,
    alias_fields,
)

from .tolerance import (
    ToleranceParams,
)

from .eigen import (
    JacobiPolicy,
)

__all__ = [
    # Base
    "OperationReport",
    "coerce_float",
    "coerce_int",
    "alias_fields",
    # Tolerance policies
    "ToleranceParams",
    # Solver policies
    "JacobiPolicy",
]
