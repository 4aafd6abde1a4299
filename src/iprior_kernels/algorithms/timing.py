"""Self-timing helpers for comparing kernel strategies.

The two weighted crossproduct strategies trade memory traffic (a scaled m×n
intermediate) against instruction count (a weight multiply per outer-product
entry). Which one wins depends on the shape of X, so both are timed on the
caller's actual inputs.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from iprior_kernels.algorithms.weighted import (
    create_weighted_crossproduct,
    list_weighted_strategies,
)

if TYPE_CHECKING:
    from numpy.typing import ArrayLike


@dataclass(frozen=True, slots=True)
class TimingResult:
    """Wall-clock timings for repeated calls of one kernel."""

    name: str
    """Kernel or strategy name."""

    repeats: int
    """Number of timed calls."""

    best: float
    """Fastest call (seconds)."""

    mean: float
    """Mean call time (seconds)."""


def time_kernel(
    name: str,
    fn: Callable[..., Any],
    *args: Any,
    repeats: int = 5,
) -> TimingResult:
    """Time ``fn(*args)`` over several calls.

    Args:
        name: Label for the result.
        fn: Kernel to call.
        *args: Positional arguments passed to fn on every call.
        repeats: Number of timed calls (>= 1).

    Returns:
        TimingResult with best and mean wall-clock time.
    """
    if repeats < 1:
        msg = f"repeats must be >= 1, got {repeats}"
        raise ValueError(msg)

    times: list[float] = []
    for _ in range(repeats):
        start = time.perf_counter()
        fn(*args)
        times.append(time.perf_counter() - start)

    return TimingResult(
        name=name,
        repeats=repeats,
        best=min(times),
        mean=sum(times) / len(times),
    )


def compare_weighted_strategies(
    X: ArrayLike,
    y: ArrayLike,
    *,
    repeats: int = 5,
) -> list[TimingResult]:
    """Time every registered weighted crossproduct strategy on (X, y)."""
    return [
        time_kernel(kind, create_weighted_crossproduct(kind), X, y, repeats=repeats)
        for kind in list_weighted_strategies()
    ]


__all__ = [
    "TimingResult",
    "time_kernel",
    "compare_weighted_strategies",
]
