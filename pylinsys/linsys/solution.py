"""
Linear system solution types.

Contains the parameter payload produced by backends and the user-facing
solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pylinsys.core.result import Result
from pylinsys.core.tolerances import ToleranceTier, select_tolerance
from pylinsys.dense.vector import Vector

if TYPE_CHECKING:
    from pylinsys.linsys.design import SystemDesign


@dataclass(frozen=True)
class SolveParams:
    """
    Parameter payload for a linear solve.

    Direct backends report iterations=0 and converged=True.
    """
    x: Vector
    residual_norm: float
    iterations: int
    converged: bool


@dataclass
class SystemSolution:
    """
    User-facing solve results.

    Wraps the backend Result and exposes the solution vector together
    with the diagnostics of the run.
    """
    _result: Result[SolveParams]
    _design: 'SystemDesign'

    @property
    def x(self) -> Vector:
        return self._result.params.x

    @property
    def residual_norm(self) -> float:
        """Residual norm reported by the backend (recursive residual for CG)."""
        return self._result.params.residual_norm

    @property
    def iterations(self) -> int:
        return self._result.params.iterations

    @property
    def converged(self) -> bool:
        return self._result.params.converged

    @property
    def method(self) -> str:
        return self._result.info['method']

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

    def residual(self) -> Vector:
        """b - A x, recomputed against the caller's A and b."""
        return self._design.b - self._design.A * self.x

    def check_residual(self, tier: ToleranceTier | None = None) -> bool:
        """
        Whether ||b - A x|| <= atol + rtol * ||b|| for the backend's tier.

        Args:
            tier: Override the tier chosen from the backend name
        """
        if tier is None:
            tier = select_tolerance(self.backend_name)
        bound = tier.atol + tier.rtol * self._design.b.norm()
        return self.residual().norm() <= bound

    def summary(self) -> str:
        """Human-readable report of the solve."""
        lines = [
            "Linear System Solution",
            "=" * 60,
            f"Unknowns: {self._design.n}",
            f"Method: {self.method}",
            f"Symmetric: {self._design.is_symmetric}",
            f"Iterations: {self.iterations}",
            f"Converged: {self.converged}",
            f"Residual norm: {self.residual_norm:.3e}",
            "",
            "Solution:",
            "-" * 60,
        ]
        for i, value in enumerate(self.x, start=1):
            lines.append(f"  x[{i}]: {value:16.8f}")

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for message in self.warnings:
            lines.append(f"Warning: {message}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SystemSolution(n={self._design.n}, method={self.method!r}, "
            f"converged={self.converged}, residual_norm={self.residual_norm:.3e})"
        )
