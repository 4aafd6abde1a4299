"""Tests for the weighted crossproduct strategies."""

import numpy as np
import pytest

from iprior_kernels.algorithms.crossprod import fast_square
from iprior_kernels.algorithms.diagnostics import relative_discrepancy
from iprior_kernels.algorithms.matrices import create_design_matrix, create_weights
from iprior_kernels.algorithms.weighted import (
    OuterProductCrossproduct,
    ScaledCrossproduct,
    WeightedCrossproduct,
    create_weighted_crossproduct,
    fast_vdiag,
    fast_vdiag2,
    list_weighted_strategies,
)
from iprior_kernels.errors import DimensionMismatch, NonFiniteInput, NonRealInput

KERNELS = [fast_vdiag, fast_vdiag2]


@pytest.mark.parametrize("kernel", KERNELS, ids=["scaled", "outer"])
class TestWeightedContract:
    """Contract shared by both strategies."""

    def test_known_value(self, kernel) -> None:
        """Unit weights on the 3×2 example give X^T X."""
        X = [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]
        assert np.array_equal(kernel(X, [1.0, 1.0, 1.0]), [[35.0, 44.0], [44.0, 56.0]])

    def test_matches_explicit_diagonal(self, kernel) -> None:
        """Result equals X^T diag(y) X."""
        X = create_design_matrix(40, 5, seed=0)
        y = create_weights(40, seed=1)
        assert np.allclose(kernel(X, y), X.T @ np.diag(y) @ X)

    def test_exactly_symmetric(self, kernel) -> None:
        """Mirrored entries are bit-for-bit equal."""
        X = create_design_matrix(60, 9, seed=3)
        y = create_weights(60, signed=True, seed=4)
        S = kernel(X, y)
        assert np.array_equal(S, S.T)

    def test_negative_weights(self, kernel) -> None:
        """Negative weights are allowed and may give an indefinite result."""
        S = kernel(np.eye(2), [-1.0, 2.0])
        assert np.array_equal(S, np.diag([-1.0, 2.0]))

    def test_zero_weights(self, kernel) -> None:
        """All-zero weights give a zero matrix."""
        X = create_design_matrix(10, 3, seed=0)
        assert np.array_equal(kernel(X, np.zeros(10)), np.zeros((3, 3)))

    def test_zero_rows(self, kernel) -> None:
        """m=0 gives an n×n zero matrix."""
        S = kernel(np.empty((0, 4)), np.empty(0))
        assert np.array_equal(S, np.zeros((4, 4)))

    def test_zero_columns(self, kernel) -> None:
        """n=0 gives a 0×0 matrix."""
        assert kernel(np.empty((3, 0)), np.ones(3)).shape == (0, 0)

    def test_output_column_major(self, kernel) -> None:
        """Output uses the shared layout."""
        assert kernel(np.ones((3, 2)), np.ones(3)).flags.f_contiguous

    def test_length_mismatch_raises(self, kernel) -> None:
        """len(y) != rows of X is a DimensionMismatch."""
        with pytest.raises(DimensionMismatch, match="does not match"):
            kernel(np.ones((3, 2)), np.ones(2))

    def test_longer_weights_raise(self, kernel) -> None:
        """Extra weights are not silently truncated."""
        with pytest.raises(DimensionMismatch):
            kernel(np.ones((3, 2)), np.ones(4))

    def test_matrix_weights_raise(self, kernel) -> None:
        """A 2-D weight array is rejected."""
        with pytest.raises(DimensionMismatch, match="must be 1-D"):
            kernel(np.ones((3, 2)), np.ones((3, 1)))

    def test_nan_weight_raises(self, kernel) -> None:
        """NaN weights are rejected."""
        with pytest.raises(NonFiniteInput):
            kernel(np.ones((2, 2)), [1.0, np.nan])

    def test_complex_matrix_raises(self, kernel) -> None:
        """A complex design matrix is rejected."""
        X = np.array([[1.0 + 2.0j, 0.0], [0.0, 1.0]])
        with pytest.raises(NonRealInput, match="X must be real-valued"):
            kernel(X, [1.0, 1.0])

    def test_complex_weights_raise(self, kernel) -> None:
        """Complex weights are rejected."""
        with pytest.raises(NonRealInput, match="y must be real-valued"):
            kernel(np.eye(2), np.array([1.0, 1.0j]))

    def test_inputs_not_modified(self, kernel) -> None:
        """Neither X nor y is written to."""
        X = create_design_matrix(8, 3, seed=0)
        y = create_weights(8, seed=1)
        X_before, y_before = X.copy(), y.copy()
        kernel(X, y)
        assert np.array_equal(X, X_before)
        assert np.array_equal(y, y_before)


class TestStrategyEquivalence:
    """The two strategies must agree to rounding."""

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_positive_weights_agree(self, seed: int) -> None:
        """Relative difference below 1e-12 for positive weights."""
        X = create_design_matrix(200, 12, seed=seed)
        y = create_weights(200, seed=seed + 100)
        assert relative_discrepancy(fast_vdiag(X, y), fast_vdiag2(X, y)) < 1e-12

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_signed_weights_agree(self, seed: int) -> None:
        """Mixed-sign weights also agree."""
        X = create_design_matrix(150, 7, seed=seed)
        y = create_weights(150, signed=True, seed=seed + 100)
        np.testing.assert_allclose(
            fast_vdiag(X, y),
            fast_vdiag2(X, y),
            rtol=1e-12,
            atol=1e-12 * np.abs(fast_vdiag(X, y)).max(),
        )

    @pytest.mark.parametrize("kernel", KERNELS, ids=["scaled", "outer"])
    def test_unit_weights_match_fast_square(self, kernel) -> None:
        """Weighting by ones degenerates to the unweighted crossproduct."""
        X = create_design_matrix(50, 6, seed=11)
        assert relative_discrepancy(kernel(X, np.ones(50)), fast_square(X)) < 1e-12


class TestStrategyClasses:
    """Tests for the strategy interface and factory."""

    def test_abstract_base(self) -> None:
        """WeightedCrossproduct cannot be instantiated."""
        with pytest.raises(TypeError):
            WeightedCrossproduct()  # type: ignore[abstract]

    def test_names(self) -> None:
        """Each strategy has a unique name."""
        assert ScaledCrossproduct.name == "scaled"
        assert OuterProductCrossproduct.name == "outer"

    def test_repr(self) -> None:
        """__repr__ should be descriptive."""
        assert repr(ScaledCrossproduct()) == "ScaledCrossproduct()"
        assert repr(OuterProductCrossproduct()) == "OuterProductCrossproduct()"

    def test_callable(self) -> None:
        """Strategies can be called directly."""
        strategy = OuterProductCrossproduct()
        X = [[1.0, 2.0], [3.0, 4.0]]
        assert np.array_equal(strategy(X, [1.0, 1.0]), strategy.compute(X, [1.0, 1.0]))

    def test_create_scaled(self) -> None:
        """Should create ScaledCrossproduct."""
        assert isinstance(create_weighted_crossproduct("scaled"), ScaledCrossproduct)

    def test_create_outer(self) -> None:
        """Should create OuterProductCrossproduct."""
        assert isinstance(create_weighted_crossproduct("outer"), OuterProductCrossproduct)

    def test_default_is_scaled(self) -> None:
        """Default factory strategy is the pre-scaled variant."""
        assert isinstance(create_weighted_crossproduct(), ScaledCrossproduct)

    def test_unknown_strategy_raises(self) -> None:
        """Unknown strategy should raise ValueError."""
        with pytest.raises(ValueError, match="Unknown weighted crossproduct"):
            create_weighted_crossproduct("cholesky")

    def test_list_strategies(self) -> None:
        """Both strategies are registered."""
        assert list_weighted_strategies() == ["scaled", "outer"]
