"""
Iterative backend: conjugate gradient.

Starts from x = 0 and touches A and b only through matrix-vector and dot
products, so nothing is copied or modified. Exact arithmetic converges in
at most n steps for a symmetric positive-definite A; in floating point the
step limit is a best-effort bound and the last iterate is returned either
way.
"""

import logging
import math
from typing import Any

from pylinsys.core.exceptions import BreakdownError
from pylinsys.core.result import Result
from pylinsys.core.timing import Timer
from pylinsys.core.tolerances import CG_RESIDUAL_TOL
from pylinsys.dense.vector import Vector
from pylinsys.linsys.design import SystemDesign
from pylinsys.linsys.solution import SolveParams

logger = logging.getLogger(__name__)


class ConjugateGradientBackend:
    """
    CPU backend using the conjugate gradient method.

    Args:
        tol: Stop once ||r|| < tol
        max_iter: Iteration cap; None means n (the system size)
    """

    def __init__(self, tol: float = CG_RESIDUAL_TOL, max_iter: int | None = None):
        if max_iter is not None and max_iter < 0:
            raise ValueError(f"max_iter must be >= 0, got {max_iter}")
        self.tol = tol
        self.max_iter = max_iter

    @property
    def name(self) -> str:
        return 'cpu_cg'

    def solve(self, design: SystemDesign) -> Result[SolveParams]:
        """
        Solve A x = b for symmetric positive-definite A.

        Algorithm:
            r = b, p = r, rs_old = r'r
            repeat: Ap = A p; alpha = rs_old / p'Ap; x += alpha p;
                    r -= alpha Ap; rs_new = r'r; stop if sqrt(rs_new) < tol;
                    p = r + (rs_new / rs_old) p

        Raises:
            BreakdownError: If p'Ap is exactly zero
        """
        timer = Timer()
        timer.start()

        A = design.A
        n = design.n
        max_iter = n if self.max_iter is None else self.max_iter

        x = Vector(n)
        r = design.b - A * x
        p = r.copy()
        rs_old = r.dot(r)
        residual_norm = math.sqrt(rs_old)
        converged = residual_norm < self.tol
        iterations = 0

        with timer.section('iterate'):
            while not converged and iterations < max_iter:
                Ap = A * p
                denominator = p.dot(Ap)
                if denominator == 0.0:
                    raise BreakdownError(
                        f"Conjugate gradient breakdown: p'Ap = 0 at iteration {iterations + 1}",
                        iterations=iterations,
                        denominator=denominator,
                    )

                alpha = rs_old / denominator
                x = x + alpha * p
                r = r - alpha * Ap
                rs_new = r.dot(r)
                iterations += 1
                residual_norm = math.sqrt(rs_new)

                if residual_norm < self.tol:
                    converged = True
                    break

                p = r + (rs_new / rs_old) * p
                rs_old = rs_new

        timer.stop()

        warnings: tuple[str, ...] = ()
        if converged:
            logger.debug("conjugate gradient converged in %d iterations", iterations)
        else:
            logger.warning(
                "conjugate gradient stopped after %d iterations with ||r|| = %.3g (tol %.3g)",
                iterations, residual_norm, self.tol,
            )
            warnings = (
                f"conjugate gradient did not converge: ||r|| = {residual_norm:.3g} "
                f"after {iterations} iterations",
            )

        params = SolveParams(
            x=x,
            residual_norm=residual_norm,
            iterations=iterations,
            converged=converged,
        )

        info: dict[str, Any] = {
            'method': 'conjugate_gradient',
            'max_iter': max_iter,
            'tol': self.tol,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=warnings,
        )
