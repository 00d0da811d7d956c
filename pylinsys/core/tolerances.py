"""
Numerical tolerances and defaults.

Every threshold the kernels use lives here so a single import shows the
whole configuration. Functions take keyword overrides that default to
these values.

Residual tiers describe what a solve is expected to achieve:
- Direct elimination (FP64): residual at the level of rounding error
- Conjugate gradient (FP64): bounded by the stopping tolerance

Used by the solvers, SystemSolution.check_residual() and the test suite.
"""

from dataclasses import dataclass


# Pivot magnitude / |determinant| below which a matrix is singular
SINGULARITY_TOL: float = 1e-10

# Max |A[i,j] - A[j,i]| accepted by the symmetric solver
SYMMETRY_TOL: float = 1e-10

# Conjugate gradient stops once ||r|| drops below this
CG_RESIDUAL_TOL: float = 1e-10

# Ridge added to A'A when the pseudo-inverse falls back
TIKHONOV_LAMBDA: float = 1e-4

# Cofactor expansion is O(n!); larger requests are logged
COFACTOR_WARN_SIZE: int = 8


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for residual checks."""
    rtol: float
    atol: float
    name: str
    description: str


# Gaussian elimination with partial pivoting
DIRECT_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-10,
    name='direct_fp64',
    description='Direct elimination, residual at rounding level',
)

# Conjugate gradient, finite-precision best effort
ITERATIVE_FP64 = ToleranceTier(
    rtol=1e-6,
    atol=1e-8,
    name='iterative_fp64',
    description='Conjugate gradient, residual bounded by stopping rule',
)


def select_tolerance(backend_name: str) -> ToleranceTier:
    """Select the residual tier for a given backend."""
    if 'cg' in backend_name:
        return ITERATIVE_FP64
    return DIRECT_FP64
