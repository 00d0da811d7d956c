"""
Fixed-size dense matrix.

A Matrix owns a contiguous row-major float64 buffer of shape (rows, cols),
both at least 1. Element access is 1-based only:

    A[i, j]           read / write
    A(i, j)           read
    A.get(i, j)       read
    A.set(i, j, x)    write

Arithmetic returns new matrices; operands are never modified.
"""

from __future__ import annotations

import logging
import warnings
from numbers import Real
from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsys.core.exceptions import DimensionError, RegularizationWarning, SingularMatrixError
from pylinsys.core.tolerances import (
    COFACTOR_WARN_SIZE,
    SINGULARITY_TOL,
    SYMMETRY_TOL,
    TIKHONOV_LAMBDA,
)
from pylinsys.core.validation import (
    check_2d,
    check_array,
    check_index,
    check_same_shape,
    check_size,
    check_square,
)
from pylinsys.dense._cofactor import adjugate_inverse, cofactor_determinant
from pylinsys.dense.vector import Vector

logger = logging.getLogger(__name__)


class Matrix:
    """
    Dense rows x cols matrix of float64 values.

    Matrix(r, c) creates a zero matrix. Use from_rows(), from_array() or
    identity() to build one from values.

    Examples:
        >>> A = Matrix.from_rows([[2.0, 1.0], [1.0, 3.0]])
        >>> A[1, 2]
        1.0
        >>> A.determinant()
        5.0
    """

    # Make numpy defer to our reflected operators (float64 * Matrix -> __rmul__)
    __array_ufunc__ = None

    def __init__(self, rows: int, cols: int):
        n_rows = check_size(rows, 1, 'rows')
        n_cols = check_size(cols, 1, 'cols')
        self._data: NDArray[np.float64] = np.zeros((n_rows, n_cols), dtype=np.float64)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """
        Build a Matrix from a sequence of equal-length rows.

        Raises:
            DimensionError: If rows are ragged
            ValidationError: If there are no rows/columns or values are not numeric
        """
        lengths = {len(row) for row in rows}
        if len(lengths) > 1:
            raise DimensionError(
                f"rows: ragged input, found row lengths {sorted(lengths)}"
            )
        return cls.from_array(rows)

    @classmethod
    def from_array(cls, values: ArrayLike) -> Matrix:
        """Build a Matrix from a 2D array-like (values are copied)."""
        data = check_array(values, 'values')
        check_2d(data, 'values')
        check_size(data.shape[0], 1, 'rows')
        check_size(data.shape[1], 1, 'cols')
        return cls._wrap(data)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        n = check_size(n, 1, 'n')
        return cls._wrap(np.eye(n, dtype=np.float64))

    @classmethod
    def _wrap(cls, data: NDArray[np.float64]) -> Matrix:
        """Adopt a buffer the caller has just allocated. No copy."""
        mat = cls.__new__(cls)
        mat._data = data
        return mat

    # === Shape and conversion ===

    @property
    def rows(self) -> int:
        return int(self._data.shape[0])

    @property
    def cols(self) -> int:
        return int(self._data.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def to_numpy(self) -> NDArray[np.float64]:
        """Return a copy of the values as a numpy array."""
        return self._data.copy()

    def __array__(self, dtype=None, copy=None) -> NDArray[Any]:
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    def copy(self) -> Matrix:
        return Matrix._wrap(self._data.copy())

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> Matrix:
        return self.copy()

    # === Element access (1-based) ===

    def _position(self, key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a pair (i, j)")
        i = check_index(key[0], self.rows, 'Matrix row', base=1)
        j = check_index(key[1], self.cols, 'Matrix column', base=1)
        return i, j

    def __getitem__(self, key: tuple[int, int]) -> float:
        return float(self._data[self._position(key)])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self._data[self._position(key)] = value

    def get(self, i: int, j: int) -> float:
        return self[i, j]

    def set(self, i: int, j: int, value: float) -> None:
        self[i, j] = value

    def __call__(self, i: int, j: int) -> float:
        return self[i, j]

    def row(self, i: int) -> Vector:
        """Copy of row ``i`` (1-based)."""
        r = check_index(i, self.rows, 'Matrix row', base=1)
        return Vector._wrap(self._data[r, :].copy())

    def column(self, j: int) -> Vector:
        """Copy of column ``j`` (1-based)."""
        c = check_index(j, self.cols, 'Matrix column', base=1)
        return Vector._wrap(self._data[:, c].copy())

    # === Arithmetic ===

    def __neg__(self) -> Matrix:
        return Matrix._wrap(-self._data)

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, 'Matrix addition')
        return Matrix._wrap(self._data + other._data)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, 'Matrix subtraction')
        return Matrix._wrap(self._data - other._data)

    def __mul__(self, other):
        if isinstance(other, Real):
            return Matrix._wrap(self._data * float(other))
        if isinstance(other, (Matrix, Vector)):
            return self.__matmul__(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Matrix._wrap(self._data * float(other))
        return NotImplemented

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            if self.cols != other.rows:
                raise DimensionError(
                    f"Matrix product: inner dimensions differ, "
                    f"{self.rows}x{self.cols} times {other.rows}x{other.cols}"
                )
            return Matrix._wrap(self._data @ other._data)
        if isinstance(other, Vector):
            if self.cols != other.size:
                raise DimensionError(
                    f"Matrix-vector product: matrix has {self.cols} columns, "
                    f"vector has length {other.size}"
                )
            return Vector._wrap(self._data @ other._data)
        return NotImplemented

    def transpose(self) -> Matrix:
        return Matrix._wrap(self._data.T.copy())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    # === Structure ===

    def is_symmetric(self, tol: float = SYMMETRY_TOL) -> bool:
        """True if square and |A[i,j] - A[j,i]| <= tol everywhere."""
        if not self.is_square:
            return False
        return bool(np.all(np.abs(self._data - self._data.T) <= tol))

    # === Determinant and inverses ===

    def determinant(self) -> float:
        """
        Determinant by cofactor expansion along the first row.

        Cost grows as O(n!), which is fine for the handful of unknowns this
        package is meant for and prohibitive beyond roughly ten.

        Raises:
            DimensionError: If the matrix is not square
        """
        check_square(self.shape, 'determinant')
        if self.rows > COFACTOR_WARN_SIZE:
            logger.warning(
                "cofactor determinant on a %dx%d matrix; cost grows factorially",
                self.rows, self.cols,
            )
        return cofactor_determinant(self._data)

    def inverse(self, tol: float = SINGULARITY_TOL) -> Matrix:
        """
        Inverse via the adjugate (transposed cofactor matrix).

        Args:
            tol: |det| below this is treated as singular

        Raises:
            DimensionError: If the matrix is not square
            SingularMatrixError: If |det| < tol
        """
        det = self.determinant()
        if abs(det) < tol:
            raise SingularMatrixError(
                f"Matrix is singular: |det| = {abs(det):.3g} < {tol:.3g}",
                matrix_name='A',
                magnitude=abs(det),
                tol=tol,
            )
        return Matrix._wrap(adjugate_inverse(self._data, det))

    def pseudo_inverse(
        self,
        *,
        ridge: float = TIKHONOV_LAMBDA,
        tol: float = SINGULARITY_TOL,
        return_regularized: bool = False,
    ) -> Matrix | tuple[Matrix, bool]:
        """
        Least-squares pseudo-inverse (A'A)^-1 A'.

        If A'A is singular (its inverse raises SingularMatrixError) the
        Tikhonov-regularized form (A'A + ridge*I)^-1 A' is used instead and a
        RegularizationWarning is emitted. A'A + ridge*I has every eigenvalue
        >= ridge, so it is inverted without the absolute determinant check
        and the fallback never raises.

        Args:
            ridge: Multiple of the identity added on the fallback path
            tol: Singularity tolerance passed to inverse()
            return_regularized: Also return whether the fallback was taken

        Returns:
            The cols x rows pseudo-inverse, or (pseudo-inverse, regularized)
        """
        At = self.transpose()
        AtA = At * self
        try:
            pinv = AtA.inverse(tol=tol) * At
            regularized = False
        except SingularMatrixError as e:
            logger.debug("A'A singular (%s); regularizing with ridge=%g", e, ridge)
            warnings.warn(
                f"A'A is singular, using Tikhonov regularization with lambda={ridge:g}",
                RegularizationWarning,
                stacklevel=2,
            )
            pinv = (AtA + ridge * Matrix.identity(self.cols)).inverse(tol=0.0) * At
            regularized = True

        if return_regularized:
            return pinv, regularized
        return pinv

    # === Comparison ===

    def allclose(self, other: Matrix | ArrayLike, rtol: float = 1e-9, atol: float = 1e-12) -> bool:
        """Element-wise closeness; False when shapes differ."""
        values = other._data if isinstance(other, Matrix) else np.asarray(other, dtype=np.float64)
        if values.shape != self._data.shape:
            return False
        return bool(np.allclose(self._data, values, rtol=rtol, atol=atol))

    def __repr__(self) -> str:
        body = ",\n        ".join(
            "[" + ", ".join(f"{v:.6g}" for v in row) + "]" for row in self._data
        )
        return f"Matrix([{body}])"
