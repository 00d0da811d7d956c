"""
Linear system backends.

    cpu_gauss: Gaussian elimination with partial pivoting
    cpu_cg:    conjugate gradient for symmetric positive-definite A
"""

from pylinsys.linsys.backends.direct import GaussianEliminationBackend
from pylinsys.linsys.backends.iterative import ConjugateGradientBackend

__all__ = [
    "GaussianEliminationBackend",
    "ConjugateGradientBackend",
]
