"""
Tests for LinearSystem (Gaussian elimination with partial pivoting).

Validates:
    - Known small systems and random systems against numpy
    - Row swaps when the leading pivot is zero
    - Singularity detection with the failing pivot column
    - Operands are never modified
    - Construction-time shape checks
"""

import copy

import numpy as np
import pytest

from pylinsys.core.exceptions import DimensionError, SingularMatrixError
from pylinsys.dense import Matrix, Vector
from pylinsys.linsys import LinearSystem
from pylinsys.linsys.backends import GaussianEliminationBackend
from pylinsys.linsys.design import SystemDesign


# ═══════════════════════════════════════════════════════════════════════
# Solutions
# ═══════════════════════════════════════════════════════════════════════


class TestSolve:

    def test_two_by_two(self, general_system):
        A, b, x_true = general_system
        x = LinearSystem(A, b).solve()
        assert isinstance(x, Vector)
        assert x.allclose(x_true, atol=1e-12)

    def test_requires_swap(self):
        A = Matrix.from_rows([[0.0, 1.0], [1.0, 0.0]])
        b = Vector.from_array([2.0, 3.0])
        assert list(LinearSystem(A, b).solve()) == [3.0, 2.0]

    def test_one_by_one(self):
        A = Matrix.from_rows([[4.0]])
        b = Vector.from_array([2.0])
        assert list(LinearSystem(A, b).solve()) == [0.5]

    def test_matches_numpy(self, random_general):
        a, b = random_general
        x = LinearSystem(Matrix.from_array(a), Vector.from_array(b)).solve()
        np.testing.assert_allclose(x.to_numpy(), np.linalg.solve(a, b), rtol=1e-10)

    def test_residual_small(self, random_general):
        a, b = random_general
        A, bv = Matrix.from_array(a), Vector.from_array(b)
        x = LinearSystem(A, bv).solve()
        assert (bv - A * x).norm() < 1e-10

    def test_repeated_solve_same_answer(self, general_system):
        A, b, _ = general_system
        system = LinearSystem(A, b)
        assert system.solve().allclose(system.solve(), atol=0.0)


# ═══════════════════════════════════════════════════════════════════════
# Operand integrity
# ═══════════════════════════════════════════════════════════════════════


class TestOperandsUnchanged:

    def test_swap_case_leaves_inputs(self):
        A = Matrix.from_rows([[0.0, 1.0], [1.0, 0.0]])
        b = Vector.from_array([2.0, 3.0])
        LinearSystem(A, b).solve()
        np.testing.assert_array_equal(A.to_numpy(), [[0.0, 1.0], [1.0, 0.0]])
        assert list(b) == [2.0, 3.0]

    def test_random_case_leaves_inputs(self, random_general):
        a, b = random_general
        A, bv = Matrix.from_array(a), Vector.from_array(b)
        LinearSystem(A, bv).solve()
        np.testing.assert_array_equal(A.to_numpy(), a)
        np.testing.assert_array_equal(bv.to_numpy(), b)

    def test_solution_is_new_object(self, general_system):
        A, b, _ = general_system
        x = LinearSystem(A, b).solve()
        assert x is not b

    def test_system_cannot_be_copied(self, general_system):
        A, b, _ = general_system
        system = LinearSystem(A, b)
        with pytest.raises(TypeError):
            copy.copy(system)
        with pytest.raises(TypeError):
            copy.deepcopy(system)


# ═══════════════════════════════════════════════════════════════════════
# Singular systems
# ═══════════════════════════════════════════════════════════════════════


class TestSingular:

    def test_dependent_rows(self):
        A = Matrix.from_rows([[1.0, 2.0], [2.0, 4.0]])
        b = Vector.from_array([1.0, 2.0])
        with pytest.raises(SingularMatrixError) as exc_info:
            LinearSystem(A, b).solve()
        assert exc_info.value.pivot_index == 2
        assert exc_info.value.matrix_name == 'A'

    def test_zero_column(self):
        A = Matrix.from_rows([[0.0, 1.0], [0.0, 2.0]])
        b = Vector.from_array([1.0, 2.0])
        with pytest.raises(SingularMatrixError) as exc_info:
            LinearSystem(A, b).solve()
        assert exc_info.value.pivot_index == 1

    def test_one_by_one_zero(self):
        A = Matrix.from_rows([[0.0]])
        b = Vector.from_array([1.0])
        with pytest.raises(SingularMatrixError):
            LinearSystem(A, b).solve()

    def test_pivot_tolerance(self, general_system):
        A, b, _ = general_system
        with pytest.raises(SingularMatrixError):
            LinearSystem(A, b, pivot_tol=5.0).solve()


# ═══════════════════════════════════════════════════════════════════════
# Construction and backend
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_non_square(self):
        with pytest.raises(DimensionError, match="square"):
            LinearSystem(Matrix(2, 3), Vector(2))

    def test_rhs_length_mismatch(self):
        with pytest.raises(DimensionError, match="does not match"):
            LinearSystem(Matrix.identity(3), Vector(2))

    def test_wrong_types(self):
        with pytest.raises(TypeError):
            LinearSystem(np.eye(2), Vector(2))
        with pytest.raises(TypeError):
            LinearSystem(Matrix.identity(2), [1.0, 2.0])

    def test_symmetry_recorded_without_rejection(self):
        A = Matrix.from_rows([[2.0, 1.0], [1.0 + 1e-6, 3.0]])
        b = Vector.from_array([1.0, 1.0])
        assert not LinearSystem(A, b).design.is_symmetric
        assert LinearSystem(A, b, symmetry_tol=1e-5).design.is_symmetric

    def test_holds_references(self, general_system):
        A, b, _ = general_system
        system = LinearSystem(A, b)
        assert system.A is A
        assert system.b is b
        assert system.size == 2


class TestGaussianEliminationBackend:

    def test_result_envelope(self):
        A = Matrix.from_rows([[0.0, 1.0], [1.0, 0.0]])
        b = Vector.from_array([2.0, 3.0])
        result = GaussianEliminationBackend().solve(SystemDesign.build(A, b))
        assert result.backend_name == 'cpu_gauss'
        assert result.info['method'] == 'gaussian_elimination'
        assert result.info['row_swaps'] == 1
        assert result.params.iterations == 0
        assert result.params.converged is True
        assert result.params.residual_norm == 0.0
        assert {'eliminate', 'back_substitute', 'total_seconds'} <= set(result.timing)
