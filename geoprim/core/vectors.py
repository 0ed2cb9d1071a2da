"""
Vector and matrix coercion helpers.

All geoprim operations accept plain sequences (tuples, lists) or numpy
arrays and work on float64 numpy arrays internally. Matrices use numpy's
row-major ``m[row, col]`` convention throughout the package.
"""

from typing import Any, Optional
import numpy as np

from .errors import PrimitiveShapeError


def as_vector(value: Any, dim: Optional[int] = None) -> np.ndarray:
    """
    Coerce a value to a 1D float64 vector.
    
    Parameters
    ----------
    value : array-like
        Sequence of coordinates.
    dim : int, optional
        Required number of components. If None, 2 or 3 are accepted.
        
    Returns
    -------
    np.ndarray
        Fresh float64 array of shape (dim,).
    """
    arr = np.array(value, dtype=np.float64)
    if arr.ndim != 1:
        raise PrimitiveShapeError(f"Expected a 1D vector, got shape {arr.shape}")
    if dim is None:
        if arr.shape[0] not in (2, 3):
            raise PrimitiveShapeError(f"Expected a 2D or 3D vector, got {arr.shape[0]} components")
    elif arr.shape[0] != dim:
        raise PrimitiveShapeError(f"Expected a {dim}D vector, got {arr.shape[0]} components")
    return arr


def as_points(value: Any, dim: Optional[int] = None) -> np.ndarray:
    """
    Coerce a point set to an (N, D) float64 array.
    
    An empty input yields an array of shape (0, dim), with dim defaulting
    to 3.
    """
    arr = np.array(value, dtype=np.float64)
    if arr.size == 0:
        return arr.reshape(0, dim if dim is not None else 3)
    if arr.ndim != 2:
        raise PrimitiveShapeError(f"Expected an (N, D) point array, got shape {arr.shape}")
    if dim is not None and arr.shape[1] != dim:
        raise PrimitiveShapeError(f"Expected {dim}D points, got {arr.shape[1]}D")
    return arr


def as_square_matrix(value: Any) -> np.ndarray:
    """Coerce a value to a fresh float64 square matrix."""
    arr = np.array(value, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise PrimitiveShapeError(f"Expected a square matrix, got shape {arr.shape}")
    return arr


def perp(v: np.ndarray) -> np.ndarray:
    """Counter-clockwise perpendicular of a 2D vector."""
    return np.array([-v[1], v[0]])


__all__ = [
    "as_vector",
    "as_points",
    "as_square_matrix",
    "perp",
]
