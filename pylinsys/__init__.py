"""
pylinsys: a small dense linear-algebra kernel.

Fixed-size Matrix and Vector containers, Gaussian elimination and
conjugate gradient solvers, cofactor determinant and inverse, and a
least-squares pseudo-inverse.

Submodules:
    core: Exceptions, validation, tolerances, result envelope
    dense: Vector and Matrix
    linsys: LinearSystem, PosSymLinSystem, solve()
    regression: Least-squares fit via the pseudo-inverse
"""

import logging

__version__ = "0.1.0"

from pylinsys.dense import Matrix, Vector
from pylinsys.linsys import LinearSystem, PosSymLinSystem, solve
from pylinsys import regression

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Matrix",
    "Vector",
    "LinearSystem",
    "PosSymLinSystem",
    "solve",
    "regression",
]
