"""
Command-line interface for iprior-kernels.

Usage:
    iprior-kernels info           Show the kernels and their conventions
    iprior-kernels check          Verify kernel properties on random inputs
    iprior-kernels bench          Time the weighted crossproduct strategies
"""

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from iprior_kernels import __version__
from iprior_kernels.algorithms import (
    DEFAULT_SEED,
    check_kernels,
    compare_weighted_strategies,
    create_design_matrix,
    create_symmetric_matrix,
    create_weights,
    eigen_decompose,
    fast_square,
    time_kernel,
)
from iprior_kernels.errors import (
    DimensionMismatch,
    KernelError,
    NonFiniteInput,
    NonRealInput,
    NonSquareInput,
    NotConverged,
)

app = typer.Typer(
    name="iprior-kernels",
    help="Dense linear-algebra kernels for I-prior model fitting",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"iprior-kernels version {__version__}")
        raise typer.Exit()


@app.callback()  # type: ignore[misc]
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging."),
    ] = False,
) -> None:
    """iprior-kernels - Dense symmetric kernels."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


KERNEL_ERRORS: dict[str, tuple[type[KernelError], ...]] = {
    "eigen_decompose": (
        DimensionMismatch,
        NonSquareInput,
        NonFiniteInput,
        NonRealInput,
        NotConverged,
    ),
    "fast_square": (DimensionMismatch, NonFiniteInput, NonRealInput),
    "fast_vdiag": (DimensionMismatch, NonFiniteInput, NonRealInput),
    "fast_vdiag2": (DimensionMismatch, NonFiniteInput, NonRealInput),
}
"""Every error each kernel can raise, as shown by ``info``."""


def _error_names(kernel: str) -> str:
    return ", ".join(error.__name__ for error in KERNEL_ERRORS[kernel])


@app.command()  # type: ignore[misc]
def info() -> None:
    """Display the available kernels and their conventions."""
    table = Table(title="Dense Kernels")

    table.add_column("Kernel", style="cyan", no_wrap=True)
    table.add_column("Input")
    table.add_column("Output")
    table.add_column("Errors")

    table.add_row(
        "eigen_decompose",
        "M (n×n, symmetric)",
        "values ascending, orthonormal vectors",
        _error_names("eigen_decompose"),
    )
    table.add_row("fast_square", "A (m×n)", "AᵗA (n×n)", _error_names("fast_square"))
    table.add_row(
        "fast_vdiag",
        "X (m×n), y (m)",
        "XᵗDX via scaled rows",
        _error_names("fast_vdiag"),
    )
    table.add_row(
        "fast_vdiag2",
        "X (m×n), y (m)",
        "XᵗDX via row outer products",
        _error_names("fast_vdiag2"),
    )

    console.print(table)
    console.print(
        "\n[dim]Matrices are float64, column-major. Complex input is never "
        "reduced to its real part.[/]"
    )


@app.command()  # type: ignore[misc]
def check(
    rows: Annotated[
        int,
        typer.Option("--rows", "-m", help="Rows of the design matrix", min=1),
    ] = 50,
    cols: Annotated[
        int,
        typer.Option("--cols", "-n", help="Columns of the design matrix", min=1),
    ] = 8,
    seed: Annotated[
        int,
        typer.Option("--seed", "-s", help="Random seed"),
    ] = DEFAULT_SEED,
    signed: Annotated[
        bool,
        typer.Option("--signed", help="Use mixed-sign weights"),
    ] = False,
) -> None:
    """Verify kernel properties on randomly generated inputs."""
    X = create_design_matrix(rows, cols, seed=seed)
    y = create_weights(rows, signed=signed, seed=seed + 1)
    M = create_symmetric_matrix(cols, seed=seed + 2)

    results = check_kernels(X, y, M)

    table = Table(title=f"Kernel Properties (m={rows}, n={cols}, seed={seed})")
    table.add_column("Property", style="bold")
    table.add_column("Error", justify="right")
    table.add_column("Tolerance", justify="right")
    table.add_column("Status", justify="center")

    for result in results:
        table.add_row(
            result.name,
            f"{result.value:.2e}",
            f"{result.tolerance:.0e}",
            "[green]✓[/]" if result.passed else "[red]✗[/]",
        )

    console.print(table)

    if not all(result.passed for result in results):
        raise typer.Exit(code=1)


@app.command()  # type: ignore[misc]
def bench(
    rows: Annotated[
        int,
        typer.Option("--rows", "-m", help="Rows of the design matrix", min=1),
    ] = 2000,
    cols: Annotated[
        int,
        typer.Option("--cols", "-n", help="Columns of the design matrix", min=1),
    ] = 50,
    repeats: Annotated[
        int,
        typer.Option("--repeats", "-r", help="Timed calls per kernel", min=1),
    ] = 5,
    seed: Annotated[
        int,
        typer.Option("--seed", "-s", help="Random seed"),
    ] = DEFAULT_SEED,
) -> None:
    """Time the weighted crossproduct strategies against fast_square."""
    X = create_design_matrix(rows, cols, seed=seed)
    y = create_weights(rows, seed=seed + 1)
    M = create_symmetric_matrix(cols, seed=seed + 2)

    timings = [
        time_kernel("fast_square", fast_square, X, repeats=repeats),
        *compare_weighted_strategies(X, y, repeats=repeats),
        time_kernel("eigen_decompose", eigen_decompose, M, repeats=repeats),
    ]

    table = Table(title=f"Kernel Timings (m={rows}, n={cols}, repeats={repeats})")
    table.add_column("Kernel", style="cyan")
    table.add_column("Best (ms)", justify="right")
    table.add_column("Mean (ms)", justify="right")

    for timing in timings:
        table.add_row(
            timing.name,
            f"{timing.best * 1e3:.3f}",
            f"{timing.mean * 1e3:.3f}",
        )

    console.print(table)


if __name__ == "__main__":
    app()
