"""Matrix generation utilities for kernel experiments.

This module provides functions for creating symmetric matrices with
controlled eigenvalue distributions, random design matrices and weight
vectors, for exercising and benchmarking the dense kernels.

Key Features:
- Reproducible generation with seed control
- Multiple eigenvalue spectrum types (linear, geometric, clustered, indefinite)
- Matrix fingerprinting for experiment verification

References:
- Golub & Van Loan: "Matrix Computations" (4th ed.), Section 8.1
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from iprior_kernels.algorithms.eigen import eigen_decompose
from iprior_kernels.data.dense import MATRIX_ORDER

if TYPE_CHECKING:
    from numpy.typing import NDArray


DEFAULT_SEED: int = 42
"""Default random seed for reproducible experiments."""


@dataclass(frozen=True, slots=True)
class MatrixFingerprint:
    """Fingerprint for matrix identification and verification.

    Used to verify that different runs use identical matrices.
    """

    eigenvalue_signature: tuple[float, ...]
    """Smallest eigenvalues (ascending)."""

    condition_number: float
    """max|λ| / min|λ| (inf for singular matrices)."""

    matrix_size: int
    """Matrix dimension n."""

    frobenius_norm: float
    """||A||_F for additional verification."""

    seed: int
    """Random seed used for generation."""

    kind: str
    """Spectrum kind: 'linear', 'geometric', 'clustered' or 'indefinite'."""

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "eigenvalue_signature": list(self.eigenvalue_signature),
            "condition_number": self.condition_number,
            "matrix_size": self.matrix_size,
            "frobenius_norm": self.frobenius_norm,
            "random_seed": self.seed,
            "kind": self.kind,
        }


def _from_spectrum(
    eigenvalues: NDArray[np.float64],
    rng: np.random.Generator,
) -> NDArray[np.float64]:
    """Build Q @ diag(λ) @ Q^T for a random orthogonal Q."""
    n = eigenvalues.shape[0]
    Q, _ = np.linalg.qr(rng.standard_normal((n, n)))
    A = (Q * eigenvalues) @ Q.T
    # Average with the transpose so the matrix is exactly symmetric
    return np.asfortranarray(0.5 * (A + A.T))


def create_linear_spectrum_matrix(
    n: int,
    condition_number: float,
    *,
    seed: int | None = None,
) -> NDArray[np.float64]:
    """Create symmetric positive definite matrix with linearly spaced eigenvalues.

    Eigenvalue distribution: [1.0, ..., κ] (linearly spaced)

    Args:
        n: Matrix dimension.
        condition_number: Desired condition number κ = λ_max / λ_min.
        seed: Random seed for reproducibility.

    Returns:
        n×n symmetric positive definite matrix.

    Example:
        >>> A = create_linear_spectrum_matrix(100, condition_number=100, seed=42)
        >>> eigenvalues = np.linalg.eigvalsh(A)
        >>> print(f"κ = {eigenvalues[-1]/eigenvalues[0]:.2f}")
        κ = 100.00
    """
    rng = np.random.default_rng(seed)
    return _from_spectrum(np.linspace(1.0, condition_number, n), rng)


def create_geometric_spectrum_matrix(
    n: int,
    condition_number: float,
    *,
    seed: int | None = None,
) -> NDArray[np.float64]:
    """Create symmetric positive definite matrix with geometrically spaced eigenvalues.

    Eigenvalue distribution: [1.0, ..., κ] (geometrically spaced)

    Args:
        n: Matrix dimension.
        condition_number: Desired condition number κ = λ_max / λ_min.
        seed: Random seed for reproducibility.

    Returns:
        n×n symmetric positive definite matrix.
    """
    rng = np.random.default_rng(seed)
    return _from_spectrum(np.geomspace(1.0, condition_number, n), rng)


def create_clustered_spectrum_matrix(
    n: int,
    condition_number: float,
    *,
    cluster_gap: float = 1e-6,
    seed: int | None = None,
) -> NDArray[np.float64]:
    """Create symmetric matrix whose two largest eigenvalues nearly coincide.

    Eigenvalue distribution:
        λ_n = κ (largest)
        λ_{n-1} = κ * (1 - cluster_gap)
        remaining = geometric decay from λ_{n-1} down to 1.0

    Nearly repeated eigenvalues make the individual eigenvectors poorly
    determined, which stresses orthogonality of the computed basis.

    Args:
        n: Matrix dimension (>= 2).
        condition_number: Desired condition number κ.
        cluster_gap: Relative gap between the two largest eigenvalues.
        seed: Random seed for reproducibility.

    Returns:
        n×n symmetric positive definite matrix.
    """
    if n < 2:
        msg = f"Clustered spectrum needs n >= 2, got {n}"
        raise ValueError(msg)

    rng = np.random.default_rng(seed)

    eigenvalues = np.zeros(n)
    eigenvalues[-1] = condition_number
    eigenvalues[:-1] = np.geomspace(1.0, condition_number * (1.0 - cluster_gap), n - 1)

    return _from_spectrum(eigenvalues, rng)


def create_indefinite_matrix(
    n: int,
    *,
    scale: float = 1.0,
    seed: int | None = None,
) -> NDArray[np.float64]:
    """Create symmetric matrix with eigenvalues spread over [-scale, scale].

    Args:
        n: Matrix dimension.
        scale: Largest eigenvalue magnitude.
        seed: Random seed for reproducibility.

    Returns:
        n×n symmetric indefinite matrix (for n >= 2).
    """
    rng = np.random.default_rng(seed)
    return _from_spectrum(np.linspace(-scale, scale, n), rng)


def create_symmetric_matrix(
    n: int,
    condition_number: float = 100.0,
    *,
    kind: str = "linear",
    seed: int = DEFAULT_SEED,
) -> NDArray[np.float64]:
    """Create a symmetric test matrix of the requested spectrum kind.

    Args:
        n: Matrix dimension.
        condition_number: Spectrum spread (used as scale for 'indefinite').
        kind: "linear", "geometric", "clustered" or "indefinite".
        seed: Random seed (default: 42 for reproducibility).

    Returns:
        n×n symmetric matrix.
    """
    if kind == "linear":
        return create_linear_spectrum_matrix(n, condition_number, seed=seed)
    if kind == "geometric":
        return create_geometric_spectrum_matrix(n, condition_number, seed=seed)
    if kind == "clustered":
        return create_clustered_spectrum_matrix(n, condition_number, seed=seed)
    if kind == "indefinite":
        return create_indefinite_matrix(n, scale=condition_number, seed=seed)

    msg = f"Unknown spectrum kind: {kind}"
    raise ValueError(msg)


def create_design_matrix(
    m: int,
    n: int,
    *,
    seed: int | None = None,
) -> NDArray[np.float64]:
    """Create an m×n standard normal design matrix (column-major)."""
    rng = np.random.default_rng(seed)
    return np.asarray(rng.standard_normal((m, n)), order=MATRIX_ORDER)


def create_weights(
    m: int,
    *,
    signed: bool = False,
    seed: int | None = None,
) -> NDArray[np.float64]:
    """Create a length-m weight vector.

    Args:
        m: Vector length.
        signed: If True, draw standard normal weights (mixed sign);
            otherwise draw uniform weights in [0.1, 2.0).
        seed: Random seed for reproducibility.
    """
    rng = np.random.default_rng(seed)
    if signed:
        return rng.standard_normal(m)
    return rng.uniform(0.1, 2.0, size=m)


def compute_fingerprint(
    matrix: NDArray[np.float64],
    *,
    num_eigenvalues: int = 5,
    seed: int = DEFAULT_SEED,
    kind: str = "unknown",
) -> MatrixFingerprint:
    """Compute fingerprint for matrix identification.

    Args:
        matrix: Symmetric input matrix.
        num_eigenvalues: Number of smallest eigenvalues to include.
        seed: Random seed used for generation.
        kind: Spectrum kind identifier.

    Returns:
        MatrixFingerprint for verification.
    """
    eigenvalues = eigen_decompose(matrix).values
    magnitudes = np.abs(eigenvalues)
    smallest = float(magnitudes.min())

    return MatrixFingerprint(
        eigenvalue_signature=tuple(eigenvalues[:num_eigenvalues].tolist()),
        condition_number=float(magnitudes.max() / smallest) if smallest > 0 else float("inf"),
        matrix_size=int(matrix.shape[0]),
        frobenius_norm=float(np.linalg.norm(matrix, "fro")),
        seed=seed,
        kind=kind,
    )


__all__ = [
    "DEFAULT_SEED",
    "MatrixFingerprint",
    "create_linear_spectrum_matrix",
    "create_geometric_spectrum_matrix",
    "create_clustered_spectrum_matrix",
    "create_indefinite_matrix",
    "create_symmetric_matrix",
    "create_design_matrix",
    "create_weights",
    "compute_fingerprint",
]
