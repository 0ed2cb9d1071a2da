"""
Point-set statistics for bounding-volume construction.

The covariance matrix computed here feeds the Jacobi eigen solver, whose
eigenvectors give the principal axes of the point cloud.

No emptiness check is performed: an empty point set divides by zero and
yields NaN entries (with a numpy RuntimeWarning).
"""

import numpy as np

from ..core.vectors import as_points


def centroid(points) -> np.ndarray:
    """Arithmetic mean (center of mass) of a 2D or 3D point set."""
    pts = as_points(points)
    oon = np.float64(1.0) / len(pts)
    return pts.sum(axis=0) * oon


def covariance_matrix(points) -> np.ndarray:
    """
    Covariance matrix of a point set.
    
    Computes the population second central moment about the centroid
    (normalized by N, not N - 1), so a single point yields the zero matrix.
    
    Parameters
    ----------
    points : array-like
        (N, D) point positions, D = 2 or 3.
        
    Returns
    -------
    np.ndarray
        Symmetric (D, D) matrix.
    """
    pts = as_points(points)
    oon = np.float64(1.0) / len(pts)

    # Translate points so the center of mass is at the origin
    centered = pts - pts.sum(axis=0) * oon

    # e[i, j] = sum over points of p_i * p_j
    e = centered.T @ centered
    cov = e * oon

    # Mirror the upper triangle so the result is exactly symmetric
    upper = np.triu(cov)
    return upper + np.triu(cov, 1).T


def variance(values) -> float:
    """Population variance of a set of 1D values."""
    x = np.asarray(values, dtype=np.float64).ravel()
    oon = np.float64(1.0) / len(x)
    u = x.sum() * oon
    return float(np.sum((x - u) * (x - u)) * oon)


__all__ = [
    "centroid",
    "covariance_matrix",
    "variance",
]
