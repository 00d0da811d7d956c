"""
Core infrastructure for pylinsys.

Shared abstractions used by the dense containers, the linear-system
solvers and the regression layer.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Numerical thresholds and residual tiers
    timing: Section timer used by backends
"""

from pylinsys.core.result import Result
from pylinsys.core.exceptions import (
    PyLinSysError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
    NotSymmetricError,
    NumericalError,
    SingularMatrixError,
    BreakdownError,
    RegularizationWarning,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyLinSysError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
    "NotSymmetricError",
    "NumericalError",
    "SingularMatrixError",
    "BreakdownError",
    "RegularizationWarning",
]
