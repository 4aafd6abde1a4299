"""Black-box property checks for kernel outputs.

Each metric is computed in float64 from the kernel's public outputs only.
``check_kernels`` evaluates the full set of properties on one input triple
and is shared by the test-suite and the ``check`` CLI command.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from iprior_kernels.algorithms.crossprod import fast_square
from iprior_kernels.algorithms.eigen import EigenResult, eigen_decompose
from iprior_kernels.algorithms.weighted import fast_vdiag, fast_vdiag2
from iprior_kernels.data.settings import get_tolerance

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray


@dataclass(frozen=True, slots=True)
class PropertyCheck:
    """Outcome of one property check."""

    name: str
    """Property identifier."""

    value: float
    """Measured error (0.0 is perfect)."""

    tolerance: float
    """Largest acceptable value."""

    passed: bool
    """True if value <= tolerance."""


def reconstruction_error(M: ArrayLike, result: EigenResult) -> float:
    """Max absolute entry of V @ diag(λ) @ V^T - M."""
    M = np.asarray(M, dtype=np.float64)
    if M.size == 0:
        return 0.0
    return float(np.max(np.abs(result.reconstruct() - M)))


def orthonormality_error(vectors: NDArray[np.float64]) -> float:
    """Max absolute entry of V^T V - I."""
    if vectors.size == 0:
        return 0.0
    gram = vectors.T @ vectors
    return float(np.max(np.abs(gram - np.eye(gram.shape[0]))))


def symmetry_defect(S: NDArray[np.float64]) -> float:
    """Max absolute entry of S - S^T (exactly 0.0 for mirrored outputs)."""
    if S.size == 0:
        return 0.0
    return float(np.max(np.abs(S - S.T)))


def relative_discrepancy(a: NDArray[np.float64], b: NDArray[np.float64]) -> float:
    """max|a - b| scaled by the largest magnitude in a or b."""
    if a.shape != b.shape:
        msg = f"Cannot compare shapes {a.shape} and {b.shape}"
        raise ValueError(msg)
    if a.size == 0:
        return 0.0

    scale = max(float(np.max(np.abs(a))), float(np.max(np.abs(b))))
    diff = float(np.max(np.abs(a - b)))
    if scale == 0.0:
        return diff
    return diff / scale


def _check(name: str, value: float, tolerance: float) -> PropertyCheck:
    return PropertyCheck(
        name=name,
        value=value,
        tolerance=tolerance,
        passed=bool(value <= tolerance),
    )


def check_kernels(
    X: ArrayLike,
    y: ArrayLike,
    M: ArrayLike,
) -> list[PropertyCheck]:
    """Run every kernel property on one set of inputs.

    Args:
        X: m×n design matrix for the crossproduct kernels.
        y: Length-m weight vector.
        M: Symmetric n×n matrix for the eigen-decomposition.

    Returns:
        One PropertyCheck per property, in a fixed order.
    """
    X = np.asarray(X, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    eigen = eigen_decompose(M)
    square = fast_square(X)
    scaled = fast_vdiag(X, y)
    outer = fast_vdiag2(X, y)
    unit = fast_vdiag(X, np.ones(X.shape[0]))

    variant_rtol = get_tolerance("variant_rtol")
    ascending = float(np.max(-np.diff(eigen.values), initial=0.0))

    return [
        _check(
            "eigen_reconstruction",
            reconstruction_error(M, eigen),
            get_tolerance("reconstruction_tol"),
        ),
        _check(
            "eigen_orthonormality",
            orthonormality_error(eigen.vectors),
            get_tolerance("orthonormality_tol"),
        ),
        _check("eigen_ascending", ascending, 0.0),
        _check("square_symmetry", symmetry_defect(square), 0.0),
        _check("scaled_symmetry", symmetry_defect(scaled), 0.0),
        _check("outer_symmetry", symmetry_defect(outer), 0.0),
        _check("scaled_vs_outer", relative_discrepancy(scaled, outer), variant_rtol),
        _check("unit_weights_vs_square", relative_discrepancy(unit, square), variant_rtol),
    ]


__all__ = [
    "PropertyCheck",
    "reconstruction_error",
    "orthonormality_error",
    "symmetry_defect",
    "relative_discrepancy",
    "check_kernels",
]
