"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinsys.dense import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def general_system():
    """Non-symmetric-solver reference: A=[[2,1],[1,3]], b=[3,5], x=[0.8,1.4]."""
    A = Matrix.from_rows([[2.0, 1.0], [1.0, 3.0]])
    b = Vector.from_array([3.0, 5.0])
    x_true = np.array([0.8, 1.4])
    return A, b, x_true


@pytest.fixture
def spd_system():
    """Symmetric positive-definite 2x2: A=[[4,1],[1,3]], b=[1,2]."""
    A = Matrix.from_rows([[4.0, 1.0], [1.0, 3.0]])
    b = Vector.from_array([1.0, 2.0])
    x_true = np.array([1.0 / 11.0, 7.0 / 11.0])
    return A, b, x_true


@pytest.fixture
def random_spd(rng):
    """Well-conditioned 5x5 SPD matrix M M' + 5I with a random rhs."""
    M = rng.standard_normal((5, 5))
    A = M @ M.T + 5.0 * np.eye(5)
    b = rng.standard_normal(5)
    return A, b


@pytest.fixture
def random_general(rng):
    """Well-conditioned 6x6 non-symmetric matrix with a random rhs."""
    A = rng.standard_normal((6, 6)) + 6.0 * np.eye(6)
    b = rng.standard_normal(6)
    return A, b


@pytest.fixture
def collinear_data():
    """Integer design with col3 = col1 + col2, so X'X is exactly singular."""
    X = np.array([
        [1.0, 2.0, 3.0],
        [2.0, 1.0, 3.0],
        [3.0, 5.0, 8.0],
        [4.0, 0.0, 4.0],
        [1.0, 1.0, 2.0],
    ])
    y = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
    return X, y
