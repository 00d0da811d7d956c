"""
Regression Design.

Holds the n x p design matrix X and the length-n response y as the
package's own Matrix and Vector types, validated once at the boundary.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike

from pylinsys.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
)
from pylinsys.dense.matrix import Matrix
from pylinsys.dense.vector import Vector


@dataclass(frozen=True)
class RegressionDesign:
    """
    Least-squares design specification.

    Construction:
        RegressionDesign.from_arrays(X, y)   # any array-likes
        RegressionDesign.from_matrix(X, y)   # Matrix and Vector
    """
    _X: Matrix
    _y: Vector
    _n: int
    _p: int

    @classmethod
    def from_arrays(cls, X: ArrayLike, y: ArrayLike) -> RegressionDesign:
        """Build a design from array-likes (values are copied)."""
        X_arr = check_array(X, 'X')
        y_arr = check_array(y, 'y')
        return cls._build(X_arr, y_arr)

    @classmethod
    def from_matrix(cls, X: Matrix, y: Vector) -> RegressionDesign:
        """Build a design from existing containers (values are copied)."""
        if not isinstance(X, Matrix):
            raise TypeError(f"X must be a Matrix, got {type(X).__name__}")
        if not isinstance(y, Vector):
            raise TypeError(f"y must be a Vector, got {type(y).__name__}")
        return cls._build(X.to_numpy(), y.to_numpy())

    @classmethod
    def _build(cls, X: np.ndarray, y: np.ndarray) -> RegressionDesign:
        """Internal builder with validation."""
        if X.ndim == 1:
            X = X.reshape(-1, 1)
        if y.ndim == 2 and y.shape[1] == 1:
            y = y.ravel()

        check_2d(X, 'X')
        check_1d(y, 'y')
        check_finite(X, 'X')
        check_finite(y, 'y')
        check_consistent_length(X, y, names=('X', 'y'))
        check_min_samples(X, 1, 'X')

        n, p = X.shape
        return cls(_X=Matrix.from_array(X), _y=Vector.from_array(y), _n=n, _p=p)

    # === Properties ===

    @property
    def X(self) -> Matrix:
        """Design matrix (n x p)."""
        return self._X

    @property
    def y(self) -> Vector:
        """Response vector (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def p(self) -> int:
        """Number of predictors."""
        return self._p
