"""Numerical kernels module.

This module contains implementations of:
- Symmetric eigen-decomposition (ascending eigenvalues)
- Self-crossproduct A^T A ("fast square") with triangle-only evaluation
- Diagonally-weighted crossproduct X^T diag(y) X as two strategies
- Matrix generation, property diagnostics and timing utilities
"""

from iprior_kernels.algorithms.crossprod import (
    fast_square,
    triangle_crossproduct,
)
from iprior_kernels.algorithms.diagnostics import (
    PropertyCheck,
    check_kernels,
    orthonormality_error,
    reconstruction_error,
    relative_discrepancy,
    symmetry_defect,
)
from iprior_kernels.algorithms.eigen import (
    EigenResult,
    eigen_decompose,
)
from iprior_kernels.algorithms.matrices import (
    DEFAULT_SEED,
    MatrixFingerprint,
    compute_fingerprint,
    create_clustered_spectrum_matrix,
    create_design_matrix,
    create_geometric_spectrum_matrix,
    create_indefinite_matrix,
    create_linear_spectrum_matrix,
    create_symmetric_matrix,
    create_weights,
)
from iprior_kernels.algorithms.timing import (
    TimingResult,
    compare_weighted_strategies,
    time_kernel,
)
from iprior_kernels.algorithms.weighted import (
    OuterProductCrossproduct,
    ScaledCrossproduct,
    WeightedCrossproduct,
    create_weighted_crossproduct,
    fast_vdiag,
    fast_vdiag2,
    list_weighted_strategies,
)

__all__ = [
    # Eigen-decomposition
    "EigenResult",
    "eigen_decompose",
    # Crossproducts
    "fast_square",
    "triangle_crossproduct",
    "OuterProductCrossproduct",
    "ScaledCrossproduct",
    "WeightedCrossproduct",
    "create_weighted_crossproduct",
    "fast_vdiag",
    "fast_vdiag2",
    "list_weighted_strategies",
    # Matrix generation
    "DEFAULT_SEED",
    "MatrixFingerprint",
    "compute_fingerprint",
    "create_clustered_spectrum_matrix",
    "create_design_matrix",
    "create_geometric_spectrum_matrix",
    "create_indefinite_matrix",
    "create_linear_spectrum_matrix",
    "create_symmetric_matrix",
    "create_weights",
    # Diagnostics
    "PropertyCheck",
    "check_kernels",
    "orthonormality_error",
    "reconstruction_error",
    "relative_discrepancy",
    "symmetry_defect",
    # Timing
    "TimingResult",
    "compare_weighted_strategies",
    "time_kernel",
]
