"""Self-crossproduct kernel ("fast square").

Computes A^T A for an m×n matrix A. The result is symmetric, so only the
entries with j <= k are computed; each one is written to both [j, k] and
[k, j]. This halves the multiply-add work of a full matrix product and makes
the output exactly symmetric.

Each row of the upper triangle is a single matrix-vector product against the
trailing columns of the (column-major) input, so the inner loop runs in BLAS.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from iprior_kernels.data.dense import allocate_square, as_dense_matrix

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

logger = logging.getLogger(__name__)


def triangle_crossproduct(
    left: NDArray[np.float64],
    right: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Compute left^T right assuming the product is symmetric.

    Only the upper triangle is evaluated: entry [j, k] for k >= j is
    left[:, j] · right[:, k]. It is then copied into [k, j].

    Args:
        left: m×n matrix.
        right: m×n matrix with the same shape as left.

    Returns:
        n×n symmetric matrix (column-major).
    """
    n = right.shape[1]
    out = allocate_square(n)

    for j in range(n):
        upper = left[:, j] @ right[:, j:]
        out[j, j:] = upper
        out[j:, j] = upper

    return out


def fast_square(
    A: ArrayLike,
    *,
    check_finite: bool | None = None,
) -> NDArray[np.float64]:
    """Compute the self-crossproduct A^T A.

    Args:
        A: m×n matrix.
        check_finite: Reject NaN/inf entries (None uses the settings default).

    Returns:
        n×n symmetric matrix. A zero-row input gives an n×n zero matrix and
        a zero-column input gives a 0×0 matrix.

    Raises:
        DimensionMismatch: If A is not 2-D.
        NonFiniteInput: If A contains NaN/inf and checking is enabled.
        NonRealInput: If A has a complex dtype.

    Example:
        >>> fast_square([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        array([[35., 44.],
               [44., 56.]])
    """
    X = as_dense_matrix(A, name="A", check_finite=check_finite)
    logger.debug("fast_square: shape=%s", X.shape)
    return triangle_crossproduct(X, X)


__all__ = [
    "fast_square",
    "triangle_crossproduct",
]
