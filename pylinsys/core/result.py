"""
Generic result container for pylinsys solvers.

Every backend returns a Result wrapping its own parameter payload, so
timing, diagnostics and warnings are reported the same way whether the
system was solved by elimination, conjugate gradient or a pseudo-inverse.

Design decisions:
    - Generic over parameter payload P
    - info dict for method-specific metadata (row swaps, iterations, ...)
    - timing is optional (tests may build results by hand)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a solver run.

    Attributes:
        params: Backend-specific payload (solution vector, coefficients, ...)
        info: Structured metadata (method, iterations, convergence)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> # Direct method
        >>> Result(
        ...     params=SolveParams(x=x, residual_norm=1e-15, iterations=0, converged=True),
        ...     info={'method': 'gaussian_elimination', 'row_swaps': 1},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_gauss'
        ... )

        >>> # Iterative method
        >>> Result(
        ...     params=SolveParams(x=x, residual_norm=3e-11, iterations=2, converged=True),
        ...     info={'method': 'conjugate_gradient', 'max_iter': 2},
        ...     timing={'total_seconds': 0.0002, 'iterate': 0.0001},
        ...     backend_name='cpu_cg'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
