"""Error taxonomy for the dense kernels.

Every failure is detected synchronously from the shapes or values of the
input and raised to the caller. Nothing is reshaped, padded or truncated.
"""

import numpy as np


class KernelError(Exception):
    """Base class for all kernel failures."""


class DimensionMismatch(KernelError, ValueError):
    """Input shapes are inconsistent with the operation's contract."""


class NonSquareInput(DimensionMismatch):
    """Eigen-decomposition was given a matrix with rows != cols."""


class NonFiniteInput(KernelError, ValueError):
    """Input contains NaN or infinite entries."""


class NonRealInput(KernelError, ValueError):
    """Input has a complex dtype; imaginary parts are never discarded."""


class NotConverged(KernelError, np.linalg.LinAlgError):
    """Symmetric eigensolver failed to converge."""


__all__ = [
    "KernelError",
    "DimensionMismatch",
    "NonSquareInput",
    "NonFiniteInput",
    "NonRealInput",
    "NotConverged",
]
