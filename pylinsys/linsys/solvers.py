"""
Solver dispatch for linear systems.

Two system classes fix the algorithm at construction:
    LinearSystem(A, b).solve()     -> Vector   (Gaussian elimination)
    PosSymLinSystem(A, b).solve()  -> Vector   (conjugate gradient)

The solve() function picks one from the structure of A and returns a
SystemSolution with diagnostics.
"""

import logging
from typing import Literal

import numpy as np

from pylinsys.core.result import Result
from pylinsys.core.tolerances import CG_RESIDUAL_TOL, SINGULARITY_TOL, SYMMETRY_TOL
from pylinsys.dense.matrix import Matrix
from pylinsys.dense.vector import Vector
from pylinsys.linsys.backends.direct import GaussianEliminationBackend
from pylinsys.linsys.backends.iterative import ConjugateGradientBackend
from pylinsys.linsys.design import SystemDesign
from pylinsys.linsys.solution import SolveParams, SystemSolution

logger = logging.getLogger(__name__)


MethodChoice = Literal['auto', 'direct', 'cg']


class LinearSystem:
    """
    A x = b with a square A, solved by Gaussian elimination.

    A and b are held by reference; every solve() works on fresh copies so
    the caller's objects are never modified. They must stay alive (and
    should stay unchanged) for as long as the system is used.

    Args:
        A: Square coefficient matrix (N x N)
        b: Right-hand side (length N)
        pivot_tol: Pivot magnitude below which A is reported singular
        symmetry_tol: Tolerance used to record whether A is symmetric

    Raises:
        DimensionError: If A is not square or len(b) != N

    Example:
        >>> A = Matrix.from_rows([[2.0, 1.0], [1.0, 3.0]])
        >>> b = Vector.from_array([3.0, 5.0])
        >>> LinearSystem(A, b).solve()
        Vector([0.8, 1.4])
    """

    # Subclasses whose backend needs a symmetric A set this to True
    _require_symmetric = False

    def __init__(
        self,
        A: Matrix,
        b: Vector,
        *,
        pivot_tol: float = SINGULARITY_TOL,
        symmetry_tol: float = SYMMETRY_TOL,
    ):
        self._design = SystemDesign.build(
            A, b, require_symmetric=self._require_symmetric, symmetry_tol=symmetry_tol
        )
        self._pivot_tol = pivot_tol

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} objects cannot be copied")

    __deepcopy__ = __copy__

    @property
    def A(self) -> Matrix:
        return self._design.A

    @property
    def b(self) -> Vector:
        return self._design.b

    @property
    def size(self) -> int:
        return self._design.n

    @property
    def design(self) -> SystemDesign:
        return self._design

    def _backend(self):
        return GaussianEliminationBackend(tol=self._pivot_tol)

    def run(self) -> Result[SolveParams]:
        """Solve and return the full backend Result."""
        backend = self._backend()
        logger.debug("solving %dx%d system with %s", self.size, self.size, backend.name)
        return backend.solve(self._design)

    def solve(self) -> Vector:
        """
        Solve the system.

        Returns:
            New Vector x of length N with A x = b

        Raises:
            SingularMatrixError: If elimination finds no usable pivot
        """
        return self.run().params.x

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={self.size})"


class PosSymLinSystem(LinearSystem):
    """
    A x = b with a symmetric positive-definite A, solved by conjugate gradient.

    Symmetry is checked at construction; positive-definiteness is the
    caller's responsibility (the iteration may not converge without it).

    Args:
        A: Symmetric coefficient matrix (N x N)
        b: Right-hand side (length N)
        symmetry_tol: Largest accepted |A[i,j] - A[j,i]|
        tol: Residual norm at which the iteration stops
        max_iter: Iteration cap, defaults to N

    Raises:
        DimensionError: If A is not square or len(b) != N
        NotSymmetricError: If A is not symmetric within symmetry_tol
    """

    _require_symmetric = True

    def __init__(
        self,
        A: Matrix,
        b: Vector,
        *,
        symmetry_tol: float = SYMMETRY_TOL,
        tol: float = CG_RESIDUAL_TOL,
        max_iter: int | None = None,
    ):
        super().__init__(A, b, symmetry_tol=symmetry_tol)
        self._tol = tol
        self._max_iter = max_iter

    def _backend(self):
        return ConjugateGradientBackend(tol=self._tol, max_iter=self._max_iter)

    def solve(self) -> Vector:
        """
        Solve the system by conjugate gradient.

        Returns:
            New Vector x of length N (the last iterate if the step limit
            was reached before convergence)

        Raises:
            BreakdownError: If a search direction gives p'Ap = 0
        """
        return self.run().params.x


def solve(
    A: Matrix,
    b: Vector,
    *,
    method: MethodChoice = 'auto',
    tol: float | None = None,
    max_iter: int | None = None,
) -> SystemSolution:
    """
    Solve A x = b.

    Args:
        A: Square coefficient matrix
        b: Right-hand side
        method: Algorithm to use:
            - 'auto': conjugate gradient if A is symmetric positive-definite,
              Gaussian elimination otherwise
            - 'direct': Gaussian elimination with partial pivoting
            - 'cg': conjugate gradient (A must be symmetric)
        tol: Pivot tolerance for 'direct', residual tolerance for 'cg'
        max_iter: Iteration cap for 'cg' (ignored by 'direct')

    Returns:
        SystemSolution with x and solve diagnostics

    Raises:
        ValueError: If method is unknown
        DimensionError: If A and b do not form a square system
        NotSymmetricError: If method='cg' and A is not symmetric
        SingularMatrixError: If the direct solve meets a singular matrix
        BreakdownError: If conjugate gradient breaks down

    Example:
        >>> result = solve(A, b)
        >>> print(result.x)
        >>> print(result.summary())
    """
    if method not in ('auto', 'direct', 'cg'):
        raise ValueError(
            f"Unknown method: {method!r}. Use 'auto', 'direct' or 'cg'."
        )

    if method == 'auto':
        method = _select_method(A, b)

    if method == 'cg':
        system = PosSymLinSystem(
            A, b,
            tol=CG_RESIDUAL_TOL if tol is None else tol,
            max_iter=max_iter,
        )
    else:
        system = LinearSystem(
            A, b,
            pivot_tol=SINGULARITY_TOL if tol is None else tol,
        )

    result = system.run()
    return SystemSolution(_result=result, _design=system.design)


def _select_method(A: Matrix, b: Vector) -> str:
    """
    Pick 'cg' for symmetric positive-definite A, 'direct' otherwise.

    Shape problems are left for the system constructor to report.
    """
    design = SystemDesign.build(A, b)
    if not design.is_symmetric:
        logger.debug("auto: A not symmetric, using direct solver")
        return 'direct'
    try:
        np.linalg.cholesky(A.to_numpy())
    except np.linalg.LinAlgError:
        logger.debug("auto: A symmetric but not positive-definite, using direct solver")
        return 'direct'
    logger.debug("auto: A symmetric positive-definite, using conjugate gradient")
    return 'cg'
