"""Point-set statistics and the Jacobi eigen solver."""

from .statistics import centroid, covariance_matrix, variance
from .eigen import sym_schur2, jacobi_eigen, sort_eigenpairs, principal_axes

__all__ = [
    "centroid",
    "covariance_matrix",
    "variance",
    "sym_schur2",
    "jacobi_eigen",
    "sort_eigenpairs",
    "principal_axes",
]
