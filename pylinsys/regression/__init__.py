"""
Least-squares regression on top of the dense kernel.

Public API:
    fit(X, y, ...) -> LeastSquaresSolution
    train_test_split(X, y, ...) -> (X_train, X_test, y_train, y_test)

Example:
    >>> from pylinsys.regression import fit, train_test_split
    >>> X_train, X_test, y_train, y_test = train_test_split(X, y, rng=42)
    >>> result = fit(X_train, y_train)
    >>> print(result.rmse(X_test, y_test))
    >>> print(result.summary())
"""

from pylinsys.regression.design import RegressionDesign
from pylinsys.regression.solution import LeastSquaresSolution, LeastSquaresParams
from pylinsys.regression.solvers import fit, train_test_split

__all__ = [
    "fit",
    "train_test_split",
    "RegressionDesign",
    "LeastSquaresSolution",
    "LeastSquaresParams",
]
