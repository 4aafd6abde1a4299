"""
Kernel Settings and Property Tolerances - Single Source of Truth

This module holds the defaults shared by every kernel (input validation
behaviour) and the numerical tolerances used when checking kernel outputs
against their mathematical properties.

References:
    - Golub & Van Loan: "Matrix Computations" (4th ed.), Section 8.1
    - Higham: "Accuracy and Stability of Numerical Algorithms" (2nd ed.)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class KernelSettings:
    """Defaults applied when a kernel argument is left as None."""

    check_finite: bool = True
    """Reject NaN/inf entries before any arithmetic."""

    symmetry_tol: float = 1e-8
    """Relative asymmetry above which eigen_decompose logs a warning."""


DEFAULT_SETTINGS = KernelSettings()


# =============================================================================
# PROPERTY TOLERANCES
# =============================================================================
# Bounds for well-conditioned float64 input.
# variant_rtol compares the two weighted crossproduct strategies, which only
# differ in summation order. The eigen symmetry threshold is a kernel setting
# (KernelSettings.symmetry_tol), not a property tolerance.

_PROPERTY_TOLERANCES: dict[str, float] = {
    "reconstruction_tol": 1e-9,
    "orthonormality_tol": 1e-10,
    "variant_rtol": 1e-12,
}


# =============================================================================
# PUBLIC API
# =============================================================================


def resolve_check_finite(check_finite: bool | None) -> bool:
    """Return the effective finiteness flag, falling back to the default."""
    if check_finite is None:
        return DEFAULT_SETTINGS.check_finite
    return bool(check_finite)


def get_tolerance(tolerance_type: str) -> float:
    """
    Get a property tolerance by name.

    Args:
        tolerance_type: One of 'reconstruction_tol', 'orthonormality_tol',
            'variant_rtol'

    Returns:
        Tolerance value

    Raises:
        ValueError: If the name is unknown

    Example:
        >>> get_tolerance("variant_rtol")
        1e-12
    """
    if tolerance_type not in _PROPERTY_TOLERANCES:
        valid = list(_PROPERTY_TOLERANCES.keys())
        raise ValueError(f"Unknown tolerance type: {tolerance_type}. Valid: {valid}")

    return _PROPERTY_TOLERANCES[tolerance_type]


def list_tolerances() -> list[str]:
    """List the names of all known property tolerances."""
    return list(_PROPERTY_TOLERANCES.keys())


__all__ = [
    "KernelSettings",
    "DEFAULT_SETTINGS",
    "resolve_check_finite",
    "get_tolerance",
    "list_tolerances",
]
