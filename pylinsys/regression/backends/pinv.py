"""
Pseudo-inverse backend for least squares.

Coefficients are pinv(X) y with pinv(X) = (X'X)^-1 X', falling back to
(X'X + lambda I)^-1 X' when X'X is singular.
"""

import logging
from typing import Any

from pylinsys.core.result import Result
from pylinsys.core.timing import Timer
from pylinsys.core.tolerances import TIKHONOV_LAMBDA
from pylinsys.regression.design import RegressionDesign
from pylinsys.regression.solution import LeastSquaresParams

logger = logging.getLogger(__name__)


class PseudoInverseBackend:
    """
    CPU backend solving least squares through Matrix.pseudo_inverse().

    Args:
        ridge: Lambda used if X'X turns out singular
    """

    def __init__(self, ridge: float = TIKHONOV_LAMBDA):
        self.ridge = ridge

    @property
    def name(self) -> str:
        return 'cpu_pinv'

    def solve(self, design: RegressionDesign) -> Result[LeastSquaresParams]:
        """Fit y ~ X by least squares."""
        timer = Timer()
        timer.start()

        X = design.X
        y = design.y

        with timer.section('pseudo_inverse'):
            pinv, regularized = X.pseudo_inverse(ridge=self.ridge, return_regularized=True)

        with timer.section('solve'):
            coefficients = pinv * y

        with timer.section('residuals'):
            fitted_values = X * coefficients
            residuals = y - fitted_values
            rss = residuals.dot(residuals)
            y_values = y.to_numpy()
            tss = float(((y_values - y_values.mean()) ** 2).sum())

        timer.stop()
        logger.debug(
            "least squares: n=%d, p=%d, regularized=%s", design.n, design.p, regularized
        )

        params = LeastSquaresParams(
            coefficients=coefficients,
            fitted_values=fitted_values,
            residuals=residuals,
            rss=rss,
            tss=tss,
            regularized=regularized,
        )

        info: dict[str, Any] = {
            'method': 'pseudo_inverse',
            'regularized': regularized,
            'ridge': self.ridge if regularized else 0.0,
        }

        warnings: tuple[str, ...] = ()
        if regularized:
            warnings = (f"X'X singular; Tikhonov regularization with lambda={self.ridge:g}",)

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=warnings,
        )
