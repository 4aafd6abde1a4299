"""Symmetric eigen-decomposition kernel.

Delegates to LAPACK's symmetric divide-and-conquer driver (``syevd``) through
``numpy.linalg.eigh``: Householder tridiagonalization followed by a stable
tridiagonal eigensolver. No power iteration or other approximate scheme is
used.

Conventions:
- Only the lower triangle of the input is read.
- Eigenvalues are returned in ascending order.
- Column j of the eigenvector matrix pairs with eigenvalue j.

References:
- Golub & Van Loan: "Matrix Computations" (4th ed.), §8.3, §8.4
- Cuppen, "A divide and conquer method for the symmetric tridiagonal
  eigenproblem" (1981)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from iprior_kernels.data.dense import MATRIX_ORDER, as_dense_matrix
from iprior_kernels.data.settings import DEFAULT_SETTINGS
from iprior_kernels.errors import NonSquareInput, NotConverged

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EigenResult:
    """Eigenvalues and orthonormal eigenvectors of a symmetric matrix."""

    values: NDArray[np.float64]
    """Eigenvalues, ascending."""

    vectors: NDArray[np.float64]
    """n×n matrix whose columns are the matching orthonormal eigenvectors."""

    @property
    def n(self) -> int:
        """Matrix dimension."""
        return int(self.values.shape[0])

    def reconstruct(self) -> NDArray[np.float64]:
        """Return V @ diag(λ) @ V^T."""
        return (self.vectors * self.values) @ self.vectors.T

    def to_dict(self) -> dict:
        """Named-field form expected by the host layer."""
        return {"values": self.values, "vectors": self.vectors}

    def __iter__(self) -> Iterator[NDArray[np.float64]]:
        yield self.values
        yield self.vectors


def eigen_decompose(
    M: ArrayLike,
    *,
    check_finite: bool | None = None,
) -> EigenResult:
    """Compute the eigen-decomposition of a symmetric matrix.

    The matrix is assumed symmetric. Symmetry is not enforced: a matrix
    whose asymmetry exceeds the configured tolerance is logged and then
    decomposed from its lower triangle.

    Args:
        M: n×n symmetric matrix.
        check_finite: Reject NaN/inf entries (None uses the settings default).

    Returns:
        EigenResult with ascending eigenvalues.

    Raises:
        NonSquareInput: If M is 2-D but not square.
        DimensionMismatch: If M is not 2-D.
        NonFiniteInput: If M contains NaN/inf and checking is enabled.
        NonRealInput: If M has a complex dtype.
        NotConverged: If LAPACK fails to converge.

    Example:
        >>> result = eigen_decompose(np.eye(3))
        >>> result.values
        array([1., 1., 1.])
    """
    A = as_dense_matrix(M, name="M", check_finite=check_finite)
    rows, cols = A.shape
    if rows != cols:
        msg = f"Eigen-decomposition requires a square matrix, got {rows}×{cols}"
        raise NonSquareInput(msg)

    logger.debug("eigen_decompose: n=%d", rows)

    if rows == 0:
        return EigenResult(
            values=np.empty(0, dtype=np.float64),
            vectors=np.empty((0, 0), dtype=np.float64, order=MATRIX_ORDER),
        )

    _warn_if_asymmetric(A)

    try:
        values, vectors = np.linalg.eigh(A, UPLO="L")
    except np.linalg.LinAlgError as exc:
        logger.error("Symmetric eigensolver failed for n=%d: %s", rows, exc)
        msg = f"Symmetric eigensolver did not converge for {rows}×{cols} input"
        raise NotConverged(msg) from exc

    return EigenResult(
        values=values,
        vectors=np.asfortranarray(vectors),
    )


def _warn_if_asymmetric(A: NDArray[np.float64]) -> None:
    # The n² scan only runs when the warning could be emitted.
    if not logger.isEnabledFor(logging.WARNING):
        return

    defect, scale = _asymmetry(A)
    if defect > DEFAULT_SETTINGS.symmetry_tol * scale:
        logger.warning(
            "Input to eigen_decompose is not symmetric "
            "(max |M - M^T| = %.3e, max |M| = %.3e); using lower triangle",
            defect,
            scale,
        )


def _asymmetry(A: NDArray[np.float64]) -> tuple[float, float]:
    """Return (max |M - M^T|, max |M|) without allocating M - M^T."""
    scale = max(float(A.max()), -float(A.min()))
    if scale == 0.0:
        return 0.0, 0.0

    defect = 0.0
    for j in range(A.shape[0] - 1):
        column = A[j + 1 :, j]
        row = A[j, j + 1 :]
        defect = max(defect, float(np.max(np.abs(column - row))))
    return defect, scale


__all__ = [
    "EigenResult",
    "eigen_decompose",
]
