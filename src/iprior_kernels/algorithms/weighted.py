"""Diagonally-weighted crossproduct strategies.

Both strategies compute X^T D X with D = diag(y) for an m×n matrix X and a
length-m weight vector y. Neither ever materializes the m×m matrix D.

Key Strategies:
- ScaledCrossproduct ("scaled", FastVdiag): scales the rows of X by y into an
  m×n intermediate, then forms the triangle-only crossproduct of the scaled
  matrix against X. Costs one extra m×n buffer and m·n weight multiplications.
- OuterProductCrossproduct ("outer", FastVdiag2): walks the rows of X in
  order and accumulates y[i] times the upper triangle of the outer product
  x_i x_i^T. No m×n intermediate, but the weight is multiplied into every
  entry of every outer product.

The two strategies differ only in summation order, so their results agree to
floating-point rounding. Weights may be negative; the result is not assumed
to be positive semi-definite.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

from iprior_kernels.algorithms.crossprod import triangle_crossproduct
from iprior_kernels.data.dense import (
    allocate_square,
    as_dense_matrix,
    as_dense_vector,
    require_matching_rows,
)

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

logger = logging.getLogger(__name__)


class WeightedCrossproduct(ABC):
    """Abstract base class for X^T diag(y) X strategies.

    All implementations must:
    1. Set a unique ``name``
    2. Implement ``_accumulate()`` on validated, dense inputs
    """

    name: str = ""

    def compute(
        self,
        X: ArrayLike,
        y: ArrayLike,
        *,
        check_finite: bool | None = None,
    ) -> NDArray[np.float64]:
        """Compute X^T diag(y) X.

        Args:
            X: m×n matrix.
            y: Length-m weight vector (any sign).
            check_finite: Reject NaN/inf entries (None uses the settings default).

        Returns:
            n×n symmetric matrix (exactly symmetric, column-major).

        Raises:
            DimensionMismatch: If len(y) != rows of X, or inputs have the
                wrong dimensionality.
            NonFiniteInput: If inputs contain NaN/inf and checking is enabled.
            NonRealInput: If X or y has a complex dtype.
        """
        X_dense = as_dense_matrix(X, name="X", check_finite=check_finite)
        y_dense = as_dense_vector(y, name="y", check_finite=check_finite)
        require_matching_rows(X_dense, y_dense)

        logger.debug("%s: shape=%s", self.name, X_dense.shape)
        return self._accumulate(X_dense, y_dense)

    @abstractmethod
    def _accumulate(
        self,
        X: NDArray[np.float64],
        y: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        """Strategy-specific computation on validated inputs."""

    def __call__(
        self,
        X: ArrayLike,
        y: ArrayLike,
        *,
        check_finite: bool | None = None,
    ) -> NDArray[np.float64]:
        return self.compute(X, y, check_finite=check_finite)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class ScaledCrossproduct(WeightedCrossproduct):
    """Pre-scale rows by the weights, then take the triangle crossproduct."""

    name = "scaled"

    def _accumulate(
        self,
        X: NDArray[np.float64],
        y: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        # Same column-major layout as X so column access stays contiguous
        scaled = np.asfortranarray(X * y[:, np.newaxis])
        return triangle_crossproduct(scaled, X)


class OuterProductCrossproduct(WeightedCrossproduct):
    """Accumulate weighted row outer products, upper triangle only."""

    name = "outer"

    def _accumulate(
        self,
        X: NDArray[np.float64],
        y: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        n = X.shape[1]
        upper_rows, upper_cols = np.triu_indices(n)
        acc = np.zeros(upper_rows.shape[0], dtype=np.float64)

        for i in range(X.shape[0]):
            row = X[i]
            acc += y[i] * (row[upper_rows] * row[upper_cols])

        out = allocate_square(n)
        out[upper_rows, upper_cols] = acc
        out[upper_cols, upper_rows] = acc
        return out


_STRATEGIES: dict[str, type[WeightedCrossproduct]] = {
    ScaledCrossproduct.name: ScaledCrossproduct,
    OuterProductCrossproduct.name: OuterProductCrossproduct,
}


def create_weighted_crossproduct(kind: str = "scaled") -> WeightedCrossproduct:
    """Factory function to create weighted crossproduct strategies.

    Args:
        kind: Strategy name ('scaled' or 'outer').

    Returns:
        WeightedCrossproduct instance.

    Example:
        >>> strategy = create_weighted_crossproduct("outer")
        >>> strategy([[1.0, 2.0], [3.0, 4.0]], [1.0, 1.0])
        array([[10., 14.],
               [14., 20.]])
    """
    if kind not in _STRATEGIES:
        msg = f"Unknown weighted crossproduct: {kind}. Available: {list(_STRATEGIES.keys())}"
        raise ValueError(msg)

    return _STRATEGIES[kind]()


def list_weighted_strategies() -> list[str]:
    """Names accepted by create_weighted_crossproduct."""
    return list(_STRATEGIES.keys())


def fast_vdiag(
    X: ArrayLike,
    y: ArrayLike,
    *,
    check_finite: bool | None = None,
) -> NDArray[np.float64]:
    """X^T diag(y) X via a pre-scaled intermediate (ScaledCrossproduct)."""
    return ScaledCrossproduct().compute(X, y, check_finite=check_finite)


def fast_vdiag2(
    X: ArrayLike,
    y: ArrayLike,
    *,
    check_finite: bool | None = None,
) -> NDArray[np.float64]:
    """X^T diag(y) X via row outer-product accumulation (OuterProductCrossproduct)."""
    return OuterProductCrossproduct().compute(X, y, check_finite=check_finite)


__all__ = [
    "WeightedCrossproduct",
    "ScaledCrossproduct",
    "OuterProductCrossproduct",
    "create_weighted_crossproduct",
    "list_weighted_strategies",
    "fast_vdiag",
    "fast_vdiag2",
]
