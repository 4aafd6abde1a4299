"""Data module for the dense representation and kernel settings."""

from iprior_kernels.data.dense import (
    MATRIX_ORDER,
    allocate_square,
    as_dense_matrix,
    as_dense_vector,
    require_matching_rows,
)
from iprior_kernels.data.settings import (
    DEFAULT_SETTINGS,
    KernelSettings,
    get_tolerance,
    list_tolerances,
    resolve_check_finite,
)

__all__ = [
    "DEFAULT_SETTINGS",
    "KernelSettings",
    "MATRIX_ORDER",
    "allocate_square",
    "as_dense_matrix",
    "as_dense_vector",
    "get_tolerance",
    "list_tolerances",
    "require_matching_rows",
    "resolve_check_finite",
]
