"""
Jacobi eigen-decomposition of symmetric matrices.

The classic Jacobi method repeatedly applies a plane rotation
J = J(p, q, theta) chosen to annihilate the largest off-diagonal entry,
updating A <- J^T A J and accumulating V <- V J. On exit V holds the
eigenvectors as columns and the diagonal of the working matrix holds the
matching eigenvalues.

The loop runs a fixed iteration budget and stops early once the
off-diagonal energy stops decreasing. This is a monotonicity stop, not an
absolute tolerance: pathological matrices may keep a small off-diagonal
residue.

See Golub, Van Loan, Matrix Computations, 3rd ed, p428.
"""

from dataclasses import replace
from typing import Optional, Tuple
import logging
import numpy as np

from gp_policies.base import OperationReport
from gp_policies.eigen import JacobiPolicy
from ..core.results import EigenResult
from ..core.vectors import as_square_matrix

logger = logging.getLogger(__name__)


def sym_schur2(a: np.ndarray, p: int, q: int, threshold: float = 1e-4) -> Tuple[float, float]:
    """
    2-by-2 symmetric Schur decomposition.

    Given a symmetric matrix and indices p != q, computes the cosine-sine
    pair (c, s) of the Jacobi rotation that zeroes a[p, q]. Off-diagonal
    magnitudes at or below ``threshold`` give the identity rotation.
    """
    apq = float(a[p, q])
    if abs(apq) <= threshold:
        return 1.0, 0.0

    r = (float(a[q, q]) - float(a[p, p])) / (2.0 * apq)
    # Take the smaller-magnitude root of t^2 + 2rt - 1 = 0 to avoid cancellation
    if r >= 0.0:
        t = 1.0 / (r + np.sqrt(1.0 + r * r))
    else:
        t = -1.0 / (-r + np.sqrt(1.0 + r * r))
    c = 1.0 / np.sqrt(1.0 + t * t)
    return float(c), float(t * c)


def _largest_off_diagonal(a: np.ndarray) -> Tuple[int, int]:
    n = a.shape[0]
    p, q = 0, 1
    for i in range(n):
        for j in range(n):
            if i == j:
                continue
            if abs(a[i, j]) > abs(a[p, q]):
                p, q = i, j
    return p, q


def _off_norm(a: np.ndarray) -> float:
    """Sum of squares of the off-diagonal entries."""
    off = a - np.diag(np.diag(a))
    return float(np.sum(off * off))


def jacobi_eigen(a, policy: Optional[JacobiPolicy] = None) -> EigenResult:
    """
    Eigenvalues and eigenvectors of a symmetric matrix by Jacobi rotations.

    The input is copied; the caller's matrix is left untouched.

    Parameters
    ----------
    a : array-like
        Symmetric (N, N) matrix, N >= 2. Symmetry is the caller's
        responsibility and is not checked.
    policy : JacobiPolicy, optional
        Iteration budget and rotation threshold. Defaults to JacobiPolicy().

    Returns
    -------
    EigenResult
        Eigenvectors (columns of V), the diagonalized working matrix, and
        run metrics. Eigenvalue order is unspecified.
    """
    if policy is None:
        policy = JacobiPolicy()

    work = as_square_matrix(a)
    n = work.shape[0]
    v = np.eye(n)

    report = OperationReport(
        operation="jacobi_eigen",
        requested_policy=policy.to_dict(),
        effective_policy=policy.to_dict(),
    )

    if n < 2:
        report.metrics = {"iterations": 0, "off_norm": 0.0, "stop_reason": "trivial"}
        return EigenResult(
            eigenvectors=v, diagonal=work, iterations=0, off_norm=0.0,
            stop_reason="trivial", report=report,
        )

    prev_off = 0.0
    off = _off_norm(work)
    stop_reason = "max_iterations"
    iterations = 0

    for iteration in range(policy.max_iterations):
        # Find largest off-diagonal absolute element a[p, q]
        p, q = _largest_off_diagonal(work)

        # Compute the Jacobi rotation matrix J(p, q, theta)
        c, s = sym_schur2(work, p, q, policy.rotation_threshold)
        jac = np.eye(n)
        jac[p, p] = c
        jac[p, q] = s
        jac[q, p] = -s
        jac[q, q] = c

        # Accumulate rotations into what will contain the eigenvectors
        v = v @ jac
        # Make the working matrix more diagonal
        work = jac.T @ work @ jac
        iterations = iteration + 1

        off = _off_norm(work)

        # Stop when the norm is no longer decreasing
        if iteration >= policy.min_iterations and off >= prev_off:
            stop_reason = "stalled"
            break
        prev_off = off

    logger.debug(
        "Jacobi stopped after %d iterations (%s), off-diagonal norm %.3e",
        iterations, stop_reason, off,
    )
    if stop_reason == "max_iterations" and off > policy.rotation_threshold ** 2:
        report.add_warning(
            f"Iteration cap {policy.max_iterations} reached with off-diagonal norm {off:.3e}"
        )

    report.metrics = {
        "iterations": iterations,
        "off_norm": off,
        "stop_reason": stop_reason,
    }
    return EigenResult(
        eigenvectors=v,
        diagonal=work,
        iterations=iterations,
        off_norm=off,
        stop_reason=stop_reason,
        report=report,
    )


def sort_eigenpairs(result: EigenResult, descending: bool = True) -> Tuple[np.ndarray, np.ndarray]:
    """
    Eigenvalues and matching eigenvector columns sorted by eigenvalue.

    Returns
    -------
    (values, vectors) : tuple of np.ndarray
        ``vectors[:, i]`` is the eigenvector of ``values[i]``.
    """
    values = result.eigenvalues
    order = np.argsort(values)
    if descending:
        order = order[::-1]
    return values[order], result.eigenvectors[:, order]


def principal_axes(points, policy: Optional[JacobiPolicy] = None) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Principal axes of a point cloud.

    Covariance of the points is diagonalized with jacobi_eigen and the
    eigenpairs are sorted by decreasing variance. The policy's
    ``rotation_threshold`` is taken relative to the largest covariance
    entry, so the axes do not depend on the scale of the cloud.

    Returns
    -------
    center : np.ndarray
        Centroid of the points.
    variances : np.ndarray
        Eigenvalues in decreasing order.
    axes : np.ndarray
        Unit axes as columns, matching ``variances``.
    """
    from .statistics import centroid, covariance_matrix

    if policy is None:
        policy = JacobiPolicy()

    cov = covariance_matrix(points)
    scale = float(np.max(np.abs(cov)))
    scaled = replace(policy, rotation_threshold=policy.rotation_threshold * scale)
    logger.debug("Principal axes rotation threshold %.3e (covariance scale %.3e)",
                 scaled.rotation_threshold, scale)

    result = jacobi_eigen(cov, policy=scaled)
    variances, axes = sort_eigenpairs(result, descending=True)
    return centroid(points), variances, axes


__all__ = [
    "sym_schur2",
    "jacobi_eigen",
    "sort_eigenpairs",
    "principal_axes",
]
