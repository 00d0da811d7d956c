"""
Regression test fixtures.
"""

import numpy as np
import pytest


@pytest.fixture
def simple_regression_data(rng):
    """n=50 design with an intercept column, low-noise response."""
    n = 50
    X = np.column_stack([
        np.ones(n),
        rng.standard_normal(n),
        rng.standard_normal(n),
    ])
    beta_true = np.array([1.0, 2.0, -0.5])
    y = X @ beta_true + rng.standard_normal(n) * 0.1
    return X, y, beta_true


@pytest.fixture
def exact_line():
    """Points on y = 1 + 2x exactly."""
    x = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
    X = np.column_stack([np.ones_like(x), x])
    y = 1.0 + 2.0 * x
    return X, y
