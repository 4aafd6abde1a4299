"""Tests for matrix generation utilities."""

import numpy as np
import pytest

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


class TestCreateLinearSpectrumMatrix:
    """Tests for create_linear_spectrum_matrix function."""

    def test_creates_correct_shape(self) -> None:
        """Matrix should be n×n."""
        n = 50
        A = create_linear_spectrum_matrix(n, condition_number=100, seed=42)
        assert A.shape == (n, n)

    def test_exactly_symmetric(self) -> None:
        """Matrix should be exactly symmetric."""
        A = create_linear_spectrum_matrix(50, condition_number=100, seed=42)
        assert np.array_equal(A, A.T)

    def test_positive_definite(self) -> None:
        """Matrix should be positive definite (all eigenvalues > 0)."""
        A = create_linear_spectrum_matrix(50, condition_number=100, seed=42)
        eigenvalues = np.linalg.eigvalsh(A)
        assert np.all(eigenvalues > 0)

    def test_condition_number(self) -> None:
        """Condition number should match specified value."""
        kappa = 100.0
        A = create_linear_spectrum_matrix(50, condition_number=kappa, seed=42)
        eigenvalues = np.linalg.eigvalsh(A)
        actual_kappa = eigenvalues.max() / eigenvalues.min()
        assert np.isclose(actual_kappa, kappa, rtol=1e-10)

    def test_reproducibility(self) -> None:
        """Same seed should produce identical matrix."""
        A1 = create_linear_spectrum_matrix(50, condition_number=100, seed=42)
        A2 = create_linear_spectrum_matrix(50, condition_number=100, seed=42)
        assert np.array_equal(A1, A2)

    def test_different_seeds_produce_different_matrices(self) -> None:
        """Different seeds should produce different matrices."""
        A1 = create_linear_spectrum_matrix(50, condition_number=100, seed=42)
        A2 = create_linear_spectrum_matrix(50, condition_number=100, seed=43)
        assert not np.allclose(A1, A2)


class TestCreateGeometricSpectrumMatrix:
    """Tests for create_geometric_spectrum_matrix function."""

    def test_condition_number(self) -> None:
        """Condition number should match specified value."""
        kappa = 100.0
        A = create_geometric_spectrum_matrix(50, condition_number=kappa, seed=42)
        eigenvalues = np.linalg.eigvalsh(A)
        actual_kappa = eigenvalues.max() / eigenvalues.min()
        assert np.isclose(actual_kappa, kappa, rtol=1e-10)


class TestCreateClusteredSpectrumMatrix:
    """Tests for create_clustered_spectrum_matrix function."""

    def test_top_pair_clustered(self) -> None:
        """Two largest eigenvalues differ by the requested relative gap."""
        A = create_clustered_spectrum_matrix(
            20, condition_number=100, cluster_gap=1e-4, seed=42
        )
        eigenvalues = np.linalg.eigvalsh(A)
        assert np.isclose(eigenvalues[-2] / eigenvalues[-1], 1.0 - 1e-4, rtol=1e-9)

    def test_too_small_raises(self) -> None:
        """n < 2 cannot hold a cluster."""
        with pytest.raises(ValueError, match="n >= 2"):
            create_clustered_spectrum_matrix(1, condition_number=10)


class TestCreateIndefiniteMatrix:
    """Tests for create_indefinite_matrix function."""

    def test_mixed_signs(self) -> None:
        """Spectrum contains both signs."""
        A = create_indefinite_matrix(10, scale=3.0, seed=0)
        eigenvalues = np.linalg.eigvalsh(A)
        assert eigenvalues.min() < 0 < eigenvalues.max()
        assert np.isclose(eigenvalues.max(), 3.0)


class TestCreateSymmetricMatrix:
    """Tests for create_symmetric_matrix dispatcher."""

    @pytest.mark.parametrize("kind", ["linear", "geometric", "clustered", "indefinite"])
    def test_kinds(self, kind: str) -> None:
        """All spectrum kinds produce symmetric matrices."""
        A = create_symmetric_matrix(12, kind=kind)
        assert A.shape == (12, 12)
        assert np.array_equal(A, A.T)

    def test_unknown_kind_raises(self) -> None:
        """Unknown spectrum kind should raise ValueError."""
        with pytest.raises(ValueError, match="Unknown spectrum kind"):
            create_symmetric_matrix(5, kind="invalid")

    def test_default_seed(self) -> None:
        """Default seed is DEFAULT_SEED."""
        assert np.array_equal(
            create_symmetric_matrix(6),
            create_linear_spectrum_matrix(6, 100.0, seed=DEFAULT_SEED),
        )


class TestDesignInputs:
    """Tests for design matrices and weights."""

    def test_design_matrix(self) -> None:
        """Design matrix has the requested shape and column-major layout."""
        X = create_design_matrix(30, 4, seed=0)
        assert X.shape == (30, 4)
        assert X.flags.f_contiguous

    def test_positive_weights(self) -> None:
        """Default weights are strictly positive."""
        y = create_weights(100, seed=0)
        assert y.shape == (100,)
        assert np.all(y >= 0.1)

    def test_signed_weights(self) -> None:
        """Signed weights include negatives."""
        y = create_weights(100, signed=True, seed=0)
        assert (y < 0).any()
        assert (y > 0).any()


class TestComputeFingerprint:
    """Tests for compute_fingerprint function."""

    def test_returns_fingerprint(self) -> None:
        """Should return MatrixFingerprint instance."""
        A = create_linear_spectrum_matrix(50, condition_number=100, seed=42)
        fp = compute_fingerprint(A, seed=42, kind="linear")
        assert isinstance(fp, MatrixFingerprint)

    def test_fingerprint_fields(self) -> None:
        """Fingerprint should have all required fields."""
        A = create_linear_spectrum_matrix(50, condition_number=100, seed=42)
        fp = compute_fingerprint(A, seed=42, kind="linear")

        assert len(fp.eigenvalue_signature) == 5
        assert list(fp.eigenvalue_signature) == sorted(fp.eigenvalue_signature)
        assert np.isclose(fp.eigenvalue_signature[0], 1.0)
        assert np.isclose(fp.condition_number, 100.0, rtol=1e-10)
        assert fp.matrix_size == 50
        assert fp.frobenius_norm > 0
        assert fp.seed == 42
        assert fp.kind == "linear"

    def test_singular_condition_number(self) -> None:
        """Singular matrices have infinite condition number."""
        fp = compute_fingerprint(np.zeros((3, 3)))
        assert fp.condition_number == float("inf")

    def test_fingerprint_to_dict(self) -> None:
        """to_dict() should return serializable dictionary."""
        A = create_linear_spectrum_matrix(50, condition_number=100, seed=42)
        d = compute_fingerprint(A, seed=42, kind="linear").to_dict()

        assert isinstance(d, dict)
        assert set(d) == {
            "eigenvalue_signature",
            "condition_number",
            "matrix_size",
            "frobenius_norm",
            "random_seed",
            "kind",
        }

    def test_identical_matrices_same_fingerprint(self) -> None:
        """Identical matrices should have identical fingerprints."""
        A1 = create_linear_spectrum_matrix(50, condition_number=100, seed=42)
        A2 = create_linear_spectrum_matrix(50, condition_number=100, seed=42)
        fp1 = compute_fingerprint(A1, seed=42, kind="linear")
        fp2 = compute_fingerprint(A2, seed=42, kind="linear")

        assert fp1.eigenvalue_signature == fp2.eigenvalue_signature
        assert fp1.frobenius_norm == fp2.frobenius_norm
