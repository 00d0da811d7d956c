"""
Direct backend: Gaussian elimination with partial pivoting.

Works on private copies of A and b, reduces A to upper-triangular form
and back-substitutes. The caller's Matrix and Vector are only read.
"""

import logging
from typing import Any

import numpy as np
from scipy.linalg import solve_triangular

from pylinsys.core.exceptions import SingularMatrixError
from pylinsys.core.result import Result
from pylinsys.core.timing import Timer
from pylinsys.core.tolerances import SINGULARITY_TOL
from pylinsys.dense.vector import Vector
from pylinsys.linsys.design import SystemDesign
from pylinsys.linsys.solution import SolveParams

logger = logging.getLogger(__name__)


class GaussianEliminationBackend:
    """
    CPU backend using Gaussian elimination with partial pivoting.

    Args:
        tol: A pivot whose magnitude is below this marks A as singular
    """

    def __init__(self, tol: float = SINGULARITY_TOL):
        self.tol = tol

    @property
    def name(self) -> str:
        return 'cpu_gauss'

    def solve(self, design: SystemDesign) -> Result[SolveParams]:
        """
        Solve A x = b.

        Algorithm:
            1. For each column k < n-1, pick the row in k..n-1 with the
               largest |A[row, k]| (first one on ties)
            2. Swap it into row k, together with b[k]
            3. Subtract multiples of row k to zero column k below the pivot
            4. Back-substitute on the resulting upper-triangular system

        Raises:
            SingularMatrixError: If a pivot magnitude falls below tol
        """
        timer = Timer()
        timer.start()

        n = design.n
        A = design.A.to_numpy()
        b = design.b.to_numpy()
        row_swaps = 0

        # === Forward elimination ===
        with timer.section('eliminate'):
            for k in range(n - 1):
                pivot_row = k + int(np.argmax(np.abs(A[k:, k])))
                pivot = abs(A[pivot_row, k])
                if pivot < self.tol:
                    raise SingularMatrixError(
                        f"Matrix is singular: largest pivot candidate in column {k + 1} "
                        f"is {pivot:.3g} < {self.tol:.3g}",
                        matrix_name='A',
                        magnitude=float(pivot),
                        tol=self.tol,
                        pivot_index=k + 1,
                    )

                if pivot_row != k:
                    A[[k, pivot_row], k:] = A[[pivot_row, k], k:]
                    b[[k, pivot_row]] = b[[pivot_row, k]]
                    row_swaps += 1

                factors = A[k + 1:, k] / A[k, k]
                A[k + 1:, k:] -= np.outer(factors, A[k, k:])
                b[k + 1:] -= factors * b[k]

            last = abs(A[n - 1, n - 1])
            if last < self.tol:
                raise SingularMatrixError(
                    f"Matrix is singular: final pivot is {last:.3g} < {self.tol:.3g}",
                    matrix_name='A',
                    magnitude=float(last),
                    tol=self.tol,
                    pivot_index=n,
                )

        # === Back substitution ===
        with timer.section('back_substitute'):
            x = solve_triangular(A, b, lower=False)

        solution = Vector.from_array(x)

        with timer.section('residual'):
            residual_norm = (design.b - design.A * solution).norm()

        timer.stop()
        logger.debug("gaussian elimination: n=%d, row swaps=%d", n, row_swaps)

        params = SolveParams(
            x=solution,
            residual_norm=residual_norm,
            iterations=0,
            converged=True,
        )

        info: dict[str, Any] = {
            'method': 'gaussian_elimination',
            'row_swaps': row_swaps,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
