"""Dense matrix and vector representation shared by all kernels.

Storage convention:
    DenseMatrix is a 2-D float64 ndarray in column-major (Fortran) order,
    matching the R/LAPACK host layout. The crossproduct kernels read the
    input one column at a time, so columns must be contiguous.

    DenseVector is a 1-D float64 ndarray.

Inputs are exposed to the kernels as read-only views so a kernel can never
mutate a caller's buffer. Outputs are freshly allocated per call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from iprior_kernels.data.settings import resolve_check_finite
from iprior_kernels.errors import DimensionMismatch, NonFiniteInput, NonRealInput

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray


MATRIX_ORDER: str = "F"
"""Memory layout for every DenseMatrix (column-major)."""


def as_dense_matrix(
    data: ArrayLike,
    *,
    name: str = "matrix",
    check_finite: bool | None = None,
) -> NDArray[np.float64]:
    """Convert caller data into a read-only column-major float64 matrix.

    Args:
        data: Any 2-D array-like of real numbers.
        name: Argument name used in error messages.
        check_finite: Reject NaN/inf entries (None uses the settings default).

    Returns:
        Read-only (m, n) float64 array in Fortran order.

    Raises:
        DimensionMismatch: If data is not exactly 2-D.
        NonFiniteInput: If finiteness checking is on and data has NaN/inf.
        NonRealInput: If data has a complex dtype.
    """
    arr = _as_real_array(data, name)
    if arr.ndim != 2:
        msg = f"{name} must be 2-D, got shape {arr.shape}"
        raise DimensionMismatch(msg)

    arr = np.asfortranarray(arr)
    _check_finite(arr, name, check_finite)
    return _readonly(arr)


def as_dense_vector(
    data: ArrayLike,
    *,
    name: str = "vector",
    check_finite: bool | None = None,
) -> NDArray[np.float64]:
    """Convert caller data into a read-only float64 vector.

    Raises:
        DimensionMismatch: If data is not exactly 1-D.
        NonFiniteInput: If finiteness checking is on and data has NaN/inf.
        NonRealInput: If data has a complex dtype.
    """
    arr = _as_real_array(data, name)
    if arr.ndim != 1:
        msg = f"{name} must be 1-D, got shape {arr.shape}"
        raise DimensionMismatch(msg)

    arr = np.ascontiguousarray(arr)
    _check_finite(arr, name, check_finite)
    return _readonly(arr)


def allocate_square(n: int) -> NDArray[np.float64]:
    """Allocate a zeroed n×n result buffer in the shared layout."""
    return np.zeros((n, n), dtype=np.float64, order=MATRIX_ORDER)


def require_matching_rows(
    X: NDArray[Any],
    y: NDArray[Any],
) -> None:
    """Raise DimensionMismatch unless len(y) equals the row count of X."""
    if y.shape[0] != X.shape[0]:
        msg = (
            f"Weight vector length {y.shape[0]} does not match "
            f"matrix rows {X.shape[0]} (matrix shape {X.shape})"
        )
        raise DimensionMismatch(msg)


# =============================================================================
# INTERNAL HELPERS
# =============================================================================


def _as_real_array(data: ArrayLike, name: str) -> NDArray[np.float64]:
    arr = np.asarray(data)
    if np.iscomplexobj(arr):
        msg = f"{name} must be real-valued, got dtype {arr.dtype}"
        raise NonRealInput(msg)
    return arr.astype(np.float64, copy=False)


def _check_finite(arr: NDArray[np.float64], name: str, flag: bool | None) -> None:
    if resolve_check_finite(flag) and not np.isfinite(arr).all():
        bad = int(np.size(arr) - np.count_nonzero(np.isfinite(arr)))
        msg = f"{name} contains {bad} non-finite entries"
        raise NonFiniteInput(msg)


def _readonly(arr: NDArray[np.float64]) -> NDArray[np.float64]:
    view = arr.view()
    view.flags.writeable = False
    return view


__all__ = [
    "MATRIX_ORDER",
    "as_dense_matrix",
    "as_dense_vector",
    "allocate_square",
    "require_matching_rows",
]
