"""
Dense linear systems.

Public API:
    LinearSystem(A, b).solve() -> Vector
    PosSymLinSystem(A, b).solve() -> Vector
    solve(A, b, method='auto') -> SystemSolution

Example:
    >>> from pylinsys.dense import Matrix, Vector
    >>> from pylinsys.linsys import solve
    >>> A = Matrix.from_rows([[4.0, 1.0], [1.0, 3.0]])
    >>> b = Vector.from_array([1.0, 2.0])
    >>> result = solve(A, b)
    >>> print(result.method)
    conjugate_gradient
"""

from pylinsys.linsys.design import SystemDesign
from pylinsys.linsys.solution import SystemSolution, SolveParams
from pylinsys.linsys.solvers import LinearSystem, PosSymLinSystem, solve

__all__ = [
    "LinearSystem",
    "PosSymLinSystem",
    "solve",
    "SystemDesign",
    "SystemSolution",
    "SolveParams",
]
