"""
Tests for determinant, inverse and pseudo-inverse.

Validates:
    - Cofactor determinant against known values and numpy
    - Adjugate inverse identities and singularity detection
    - Pseudo-inverse for full-rank input and the Tikhonov fallback
"""

import logging

import numpy as np
import pytest

from pylinsys.core.exceptions import DimensionError, RegularizationWarning, SingularMatrixError
from pylinsys.dense import Matrix


# ═══════════════════════════════════════════════════════════════════════
# Determinant
# ═══════════════════════════════════════════════════════════════════════


class TestDeterminant:

    @pytest.mark.parametrize("n", range(1, 7))
    def test_identity(self, n):
        assert Matrix.identity(n).determinant() == 1.0

    def test_one_by_one(self):
        assert Matrix.from_rows([[-3.5]]).determinant() == -3.5

    def test_two_by_two(self, general_system):
        A, _, _ = general_system
        assert A.determinant() == 5.0

    def test_three_by_three_known(self):
        A = Matrix.from_rows([[6.0, 1.0, 1.0], [4.0, -2.0, 5.0], [2.0, 8.0, 7.0]])
        assert A.determinant() == pytest.approx(-306.0)

    def test_zero_row(self):
        A = Matrix.from_rows([[1.0, 2.0, 3.0], [0.0, 0.0, 0.0], [4.0, 5.0, 6.0]])
        assert A.determinant() == 0.0

    @pytest.mark.parametrize("n", [3, 4, 5])
    def test_matches_numpy(self, rng, n):
        a = rng.standard_normal((n, n))
        assert Matrix.from_array(a).determinant() == pytest.approx(np.linalg.det(a), rel=1e-9)

    def test_non_square(self):
        with pytest.raises(DimensionError, match="square"):
            Matrix(2, 3).determinant()

    def test_large_matrix_logs_cost(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pylinsys.dense.matrix"):
            assert Matrix.identity(9).determinant() == 1.0
        assert "cofactor determinant" in caplog.text


# ═══════════════════════════════════════════════════════════════════════
# Inverse
# ═══════════════════════════════════════════════════════════════════════


class TestInverse:

    def test_product_is_identity(self, random_general):
        a, _ = random_general
        A = Matrix.from_array(a[:4, :4])
        assert (A * A.inverse()).allclose(Matrix.identity(4), atol=1e-9)
        assert (A.inverse() * A).allclose(Matrix.identity(4), atol=1e-9)

    def test_inverse_of_inverse(self, general_system):
        A, _, _ = general_system
        assert A.inverse().inverse().allclose(A, atol=1e-12)

    def test_two_by_two_known(self, general_system):
        A, _, _ = general_system
        expected = np.array([[3.0, -1.0], [-1.0, 2.0]]) / 5.0
        np.testing.assert_allclose(A.inverse().to_numpy(), expected, rtol=1e-12)

    def test_one_by_one(self):
        assert Matrix.from_rows([[4.0]]).inverse()[1, 1] == 0.25

    def test_singular(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            Matrix.from_rows([[1.0, 2.0], [2.0, 4.0]]).inverse()
        err = exc_info.value
        assert err.magnitude == 0.0
        assert err.tol == 1e-10

    def test_tolerance_is_absolute(self):
        A = Matrix.from_rows([[1e-6, 0.0], [0.0, 1e-6]])
        with pytest.raises(SingularMatrixError):
            A.inverse()

    def test_custom_tolerance(self):
        A = Matrix.from_rows([[1e-6, 0.0], [0.0, 1e-6]])
        np.testing.assert_allclose(A.inverse(tol=1e-14).to_numpy(), np.eye(2) * 1e6)

    def test_non_square(self):
        with pytest.raises(DimensionError):
            Matrix(3, 2).inverse()


# ═══════════════════════════════════════════════════════════════════════
# Pseudo-inverse
# ═══════════════════════════════════════════════════════════════════════


class TestPseudoInverse:

    def test_full_rank_matches_numpy(self, rng):
        a = rng.standard_normal((6, 3))
        pinv = Matrix.from_array(a).pseudo_inverse()
        assert pinv.shape == (3, 6)
        np.testing.assert_allclose(pinv.to_numpy(), np.linalg.pinv(a), atol=1e-10)

    def test_full_rank_flag(self, rng):
        A = Matrix.from_array(rng.standard_normal((5, 2)))
        _, regularized = A.pseudo_inverse(return_regularized=True)
        assert regularized is False

    def test_square_invertible_equals_inverse(self, general_system):
        A, _, _ = general_system
        assert A.pseudo_inverse().allclose(A.inverse(), atol=1e-12)

    def test_rank_deficient_regularizes(self, collinear_data):
        X, _ = collinear_data
        with pytest.warns(RegularizationWarning, match="Tikhonov"):
            pinv, regularized = Matrix.from_array(X).pseudo_inverse(return_regularized=True)
        assert regularized is True
        assert pinv.shape == (3, 5)
        assert np.all(np.isfinite(pinv.to_numpy()))

    def test_zero_matrix_regularizes(self):
        # A'A = 0, so det(A'A + ridge*I) = 1e-12 is below the inverse tolerance
        with pytest.warns(RegularizationWarning):
            pinv, regularized = Matrix(4, 3).pseudo_inverse(return_regularized=True)
        assert regularized is True
        assert pinv.shape == (3, 4)
        np.testing.assert_array_equal(pinv.to_numpy(), np.zeros((3, 4)))

    def test_small_scale_duplicate_columns(self):
        x = np.linspace(0.0, 0.01, 6)
        A = Matrix.from_array(np.column_stack([x, x, x, x]))
        with pytest.warns(RegularizationWarning):
            pinv = A.pseudo_inverse()
        assert pinv.shape == (4, 6)
        assert np.all(np.isfinite(pinv.to_numpy()))

    def test_wide_matrix_uses_column_identity(self):
        # 2x3: A'A is 3x3 with rank 2, so the ridge must be 3x3
        A = Matrix.from_rows([[1.0, 0.0, 1.0], [0.0, 1.0, 1.0]])
        with pytest.warns(RegularizationWarning):
            pinv = A.pseudo_inverse()
        assert pinv.shape == (3, 2)
        np.testing.assert_allclose(
            pinv.to_numpy(), np.linalg.pinv(A.to_numpy()), atol=1e-3
        )
