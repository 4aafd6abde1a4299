"""iprior-kernels: Dense linear-algebra kernels for I-prior model fitting."""

__version__ = "0.1.0"

from iprior_kernels.algorithms.crossprod import fast_square
from iprior_kernels.algorithms.eigen import EigenResult, eigen_decompose
from iprior_kernels.algorithms.weighted import (
    create_weighted_crossproduct,
    fast_vdiag,
    fast_vdiag2,
)
from iprior_kernels.errors import (
    DimensionMismatch,
    KernelError,
    NonFiniteInput,
    NonRealInput,
    NonSquareInput,
    NotConverged,
)

__all__ = [
    "__version__",
    "EigenResult",
    "eigen_decompose",
    "fast_square",
    "fast_vdiag",
    "fast_vdiag2",
    "create_weighted_crossproduct",
    "DimensionMismatch",
    "KernelError",
    "NonFiniteInput",
    "NonRealInput",
    "NonSquareInput",
    "NotConverged",
]
