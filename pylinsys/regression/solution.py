"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

import math
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from numpy.typing import ArrayLike

from pylinsys.core.exceptions import DimensionError
from pylinsys.core.result import Result
from pylinsys.dense.matrix import Matrix
from pylinsys.dense.vector import Vector

if TYPE_CHECKING:
    from pylinsys.regression.design import RegressionDesign


@dataclass(frozen=True)
class LeastSquaresParams:
    """
    Parameter payload for least squares.

    This is the immutable data computed by backends.
    """
    coefficients: Vector
    fitted_values: Vector
    residuals: Vector
    rss: float
    tss: float
    regularized: bool


@dataclass
class LeastSquaresSolution:
    """
    User-facing least-squares results.

    Wraps the backend Result; adds prediction and error metrics.
    """
    _result: Result[LeastSquaresParams]
    _design: 'RegressionDesign'

    @property
    def coefficients(self) -> Vector:
        return self._result.params.coefficients

    @property
    def fitted_values(self) -> Vector:
        return self._result.params.fitted_values

    @property
    def residuals(self) -> Vector:
        return self._result.params.residuals

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def regularized(self) -> bool:
        """Whether the Tikhonov fallback was used."""
        return self._result.params.regularized

    @property
    def r_squared(self) -> float:
        if self.tss == 0:
            return 1.0 if self.rss == 0 else 0.0
        return 1.0 - (self.rss / self.tss)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def predict(self, X_new: Matrix | ArrayLike) -> Vector:
        """
        Predicted responses X_new @ coefficients.

        Raises:
            DimensionError: If X_new does not have p columns
        """
        if not isinstance(X_new, Matrix):
            X_new = Matrix.from_array(X_new)
        if X_new.cols != self._design.p:
            raise DimensionError(
                f"X_new: expected {self._design.p} columns, got {X_new.cols}"
            )
        return X_new * self.coefficients

    def rmse(self, X_test: Matrix | ArrayLike, y_test: Vector | ArrayLike) -> float:
        """
        Root mean squared prediction error on held-out data.

        Raises:
            DimensionError: If X_test and y_test disagree in length
        """
        if not isinstance(y_test, Vector):
            y_test = Vector.from_array(y_test)
        predicted = self.predict(X_test)
        if predicted.size != y_test.size:
            raise DimensionError(
                f"Inconsistent lengths: X_test={predicted.size}, y_test={y_test.size}"
            )
        error = predicted - y_test
        return math.sqrt(error.dot(error) / y_test.size)

    def summary(self) -> str:
        """Plain-text report of the fit."""
        lines = [
            "Least Squares Results",
            "=" * 60,
            f"Observations: {self._design.n}",
            f"Predictors: {self._design.p}",
            f"R-squared: {self.r_squared:.6f}",
            f"RSS: {self.rss:.6f}",
            f"Regularized: {self.regularized}",
            "",
            "Coefficients:",
            "-" * 60,
        ]
        for i, coef in enumerate(self.coefficients, start=1):
            lines.append(f"  x{i}: {coef:16.8f}")

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LeastSquaresSolution(n={self._design.n}, p={self._design.p}, "
            f"r_squared={self.r_squared:.4f}, regularized={self.regularized})"
        )
