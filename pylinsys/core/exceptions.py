"""
Exception hierarchy for pylinsys.

All exceptions inherit from PyLinSysError so callers can catch any
library-specific failure in one place. Arithmetic and solvers raise the
most specific subclass available.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages state actual vs expected values
    - Operands are never modified before an exception is raised
"""


class PyLinSysError(Exception):
    """Base exception for all pylinsys errors."""
    pass


class ValidationError(PyLinSysError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand shapes are incompatible.

    Raised when vector lengths or matrix shapes do not agree for the
    requested operation (addition, products, dot product, building a
    linear system from a non-square matrix, ...).
    """
    pass


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Element index outside the valid range.

    Subclasses IndexError as well so generic sequence handling keeps
    working.

    Attributes:
        index: The offending index (int or tuple for matrices)
        bounds: Inclusive (low, high) range that was allowed
    """

    def __init__(
        self,
        message: str,
        index: int | tuple[int, ...] | None = None,
        bounds: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bounds = bounds


class NotSymmetricError(ValidationError):
    """
    Matrix is not symmetric within tolerance.

    Raised when constructing a symmetric positive-definite system from a
    matrix whose off-diagonal entries disagree.

    Attributes:
        max_asymmetry: Largest |A[i,j] - A[j,i]| found
        position: 1-based (i, j) where the largest asymmetry occurs
        tol: Tolerance that was exceeded
    """

    def __init__(
        self,
        message: str,
        max_asymmetry: float | None = None,
        position: tuple[int, int] | None = None,
        tol: float | None = None,
    ):
        super().__init__(message)
        self.max_asymmetry = max_asymmetry
        self.position = position
        self.tol = tol


class NumericalError(PyLinSysError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when elimination finds no usable pivot or when a determinant
    falls below the singularity tolerance.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        magnitude: Offending pivot magnitude or |determinant|
        tol: Singularity tolerance that was not met
        pivot_index: 1-based elimination step, for pivot failures
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        magnitude: float | None = None,
        tol: float | None = None,
        pivot_index: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.magnitude = magnitude
        self.tol = tol
        self.pivot_index = pivot_index


class BreakdownError(NumericalError):
    """
    Conjugate gradient hit a degenerate search direction.

    Raised when p'Ap is exactly zero, which would otherwise turn the step
    length into a division by zero.

    Attributes:
        iterations: Number of iterations completed before breakdown
        denominator: The value of p'Ap
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        denominator: float | None = None,
    ):
        super().__init__(message)
        self.iterations = iterations
        self.denominator = denominator


class RegularizationWarning(UserWarning):
    """Emitted when pseudo_inverse falls back to Tikhonov regularization."""
    pass
