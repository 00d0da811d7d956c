"""
Solver dispatch for least-squares regression.

Public API:
    fit(X, y) -> LeastSquaresSolution
    train_test_split(X, y, train_fraction=0.8, rng=None)
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike

from pylinsys.core.exceptions import ValidationError
from pylinsys.core.tolerances import TIKHONOV_LAMBDA
from pylinsys.dense.matrix import Matrix
from pylinsys.dense.vector import Vector
from pylinsys.regression.backends.pinv import PseudoInverseBackend
from pylinsys.regression.design import RegressionDesign
from pylinsys.regression.solution import LeastSquaresSolution

logger = logging.getLogger(__name__)


def fit(
    X_or_design: Matrix | RegressionDesign | ArrayLike,
    y: Vector | ArrayLike | None = None,
    *,
    ridge: float = TIKHONOV_LAMBDA,
) -> LeastSquaresSolution:
    """
    Fit y ~ X by least squares through the pseudo-inverse.

    Accepts EITHER:
        1. A RegressionDesign (y must be omitted)
        2. X and y as Matrix/Vector or array-likes

    No intercept column is added; include a column of ones in X if one is
    wanted.

    Args:
        X_or_design: Design matrix (n x p) or a RegressionDesign
        y: Response (n,), required unless a design is given
        ridge: Lambda for the fallback when X'X is singular

    Returns:
        LeastSquaresSolution

    Raises:
        ValidationError: If inputs are invalid
        DimensionError: If X and y have inconsistent lengths

    Example:
        >>> result = fit(X, y)
        >>> print(result.coefficients)
        >>> print(result.rmse(X_test, y_test))
    """
    if isinstance(X_or_design, RegressionDesign):
        if y is not None:
            raise ValueError("y must not be given together with a RegressionDesign")
        design = X_or_design
    else:
        if y is None:
            raise ValueError("y required when X is not a RegressionDesign")
        if isinstance(X_or_design, Matrix) and isinstance(y, Vector):
            design = RegressionDesign.from_matrix(X_or_design, y)
        else:
            design = RegressionDesign.from_arrays(X_or_design, y)

    backend = PseudoInverseBackend(ridge=ridge)
    result = backend.solve(design)
    return LeastSquaresSolution(_result=result, _design=design)


def train_test_split(
    X: Matrix | ArrayLike,
    y: Vector | ArrayLike,
    *,
    train_fraction: float = 0.8,
    rng: np.random.Generator | int | None = None,
) -> tuple[Matrix, Matrix, Vector, Vector]:
    """
    Shuffle rows and split them into training and test sets.

    The first int(train_fraction * n) shuffled rows go to training, the
    rest to test.

    Args:
        X: Design matrix (n x p)
        y: Response (n,)
        train_fraction: Share of rows used for training, in (0, 1)
        rng: Generator or seed for the shuffle; None draws fresh entropy

    Returns:
        (X_train, X_test, y_train, y_test)

    Raises:
        ValidationError: If either side of the split would be empty
        DimensionError: If X and y have inconsistent lengths
    """
    design = (
        RegressionDesign.from_matrix(X, y)
        if isinstance(X, Matrix) and isinstance(y, Vector)
        else RegressionDesign.from_arrays(X, y)
    )
    if not 0.0 < train_fraction < 1.0:
        raise ValidationError(
            f"train_fraction: must be in (0, 1), got {train_fraction}"
        )

    n = design.n
    n_train = int(train_fraction * n)
    if n_train < 1 or n_train >= n:
        raise ValidationError(
            f"train_fraction={train_fraction} on {n} rows leaves "
            f"{n_train} training and {n - n_train} test rows; both must be >= 1"
        )

    order = np.random.default_rng(rng).permutation(n)
    train_idx, test_idx = order[:n_train], order[n_train:]
    logger.debug("split %d rows into %d train / %d test", n, n_train, n - n_train)

    X_all = design.X.to_numpy()
    y_all = design.y.to_numpy()
    return (
        Matrix.from_array(X_all[train_idx]),
        Matrix.from_array(X_all[test_idx]),
        Vector.from_array(y_all[train_idx]),
        Vector.from_array(y_all[test_idx]),
    )
