"""
Linear system design.

A SystemDesign pairs a square coefficient Matrix A with a right-hand side
Vector b after checking that they fit together. It keeps references to
the caller's objects; backends copy what they need to modify.
"""

from __future__ import annotations

from dataclasses import dataclass

from pylinsys.core.tolerances import SYMMETRY_TOL
from pylinsys.core.exceptions import DimensionError
from pylinsys.core.validation import check_square, check_symmetric
from pylinsys.dense.matrix import Matrix
from pylinsys.dense.vector import Vector


@dataclass(frozen=True)
class SystemDesign:
    """
    Validated A x = b specification.

    Construction:
        SystemDesign.build(A, b)                          # square, len(b) == rows(A)
        SystemDesign.build(A, b, require_symmetric=True)  # additionally symmetric
    """
    _A: Matrix
    _b: Vector
    _n: int
    _symmetric: bool

    @classmethod
    def build(
        cls,
        A: Matrix,
        b: Vector,
        *,
        require_symmetric: bool = False,
        symmetry_tol: float = SYMMETRY_TOL,
    ) -> SystemDesign:
        """
        Validate A and b and wrap them.

        Args:
            A: Coefficient matrix (N x N)
            b: Right-hand side (length N)
            require_symmetric: Reject A unless symmetric within symmetry_tol
            symmetry_tol: Largest accepted |A[i,j] - A[j,i]|

        Raises:
            TypeError: If A is not a Matrix or b is not a Vector
            DimensionError: If A is not square or len(b) != rows(A)
            NotSymmetricError: If require_symmetric and A is not symmetric
        """
        if not isinstance(A, Matrix):
            raise TypeError(f"A must be a Matrix, got {type(A).__name__}")
        if not isinstance(b, Vector):
            raise TypeError(f"b must be a Vector, got {type(b).__name__}")

        check_square(A.shape, 'A')
        if b.size != A.rows:
            raise DimensionError(
                f"b: length {b.size} does not match A with {A.rows} rows"
            )

        if require_symmetric:
            check_symmetric(A.to_numpy(), symmetry_tol, 'A')
            symmetric = True
        else:
            symmetric = A.is_symmetric(symmetry_tol)

        return cls(_A=A, _b=b, _n=A.rows, _symmetric=symmetric)

    # === Properties ===

    @property
    def A(self) -> Matrix:
        """Coefficient matrix (the caller's object, not a copy)."""
        return self._A

    @property
    def b(self) -> Vector:
        """Right-hand side (the caller's object, not a copy)."""
        return self._b

    @property
    def n(self) -> int:
        """Number of unknowns."""
        return self._n

    @property
    def is_symmetric(self) -> bool:
        """Whether A was symmetric within tolerance when the design was built."""
        return self._symmetric
