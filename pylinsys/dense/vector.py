"""
Fixed-length dense vector.

A Vector owns a contiguous float64 buffer whose length is set at
construction. Arithmetic never mutates an operand; every result is a
freshly allocated Vector.

Two indexing conventions are supported:
    v[i]            0-based, read and write
    v(i), v.get(i)  1-based, read
    v.set(i, x)     1-based, write
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsys.core.exceptions import DimensionError
from pylinsys.core.validation import (
    check_1d,
    check_array,
    check_index,
    check_same_shape,
    check_size,
)


class Vector:
    """
    Dense vector of N float64 values, N >= 0.

    Vector(n) creates a zero vector; use Vector.from_array() to build one
    from existing values.

    Examples:
        >>> v = Vector(3)
        >>> v.set(1, 2.0)
        >>> v[2] = -1.0
        >>> (2 * v).dot(v)
        10.0
    """

    # Make numpy defer to our reflected operators (float64 * Vector -> __rmul__)
    __array_ufunc__ = None

    def __init__(self, size: int):
        n = check_size(size, 0, 'size')
        self._data: NDArray[np.float64] = np.zeros(n, dtype=np.float64)

    @classmethod
    def from_array(cls, values: ArrayLike) -> Vector:
        """Build a Vector from any 1D array-like (values are copied)."""
        data = check_array(values, 'values')
        check_1d(data, 'values')
        return cls._wrap(data)

    @classmethod
    def _wrap(cls, data: NDArray[np.float64]) -> Vector:
        """Adopt a buffer the caller has just allocated. No copy."""
        vec = cls.__new__(cls)
        vec._data = data
        return vec

    # === Size and conversion ===

    @property
    def size(self) -> int:
        return int(self._data.shape[0])

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[float]:
        return (float(value) for value in self._data)

    def to_numpy(self) -> NDArray[np.float64]:
        """Return a copy of the values as a numpy array."""
        return self._data.copy()

    def __array__(self, dtype=None, copy=None) -> NDArray[Any]:
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    def copy(self) -> Vector:
        return Vector._wrap(self._data.copy())

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> Vector:
        return self.copy()

    # === Element access ===

    def __getitem__(self, index: int) -> float:
        return float(self._data[check_index(index, self.size, 'Vector', base=0)])

    def __setitem__(self, index: int, value: float) -> None:
        self._data[check_index(index, self.size, 'Vector', base=0)] = value

    def get(self, index: int) -> float:
        """Read element ``index`` (1-based)."""
        return float(self._data[check_index(index, self.size, 'Vector', base=1)])

    def set(self, index: int, value: float) -> None:
        """Write element ``index`` (1-based)."""
        self._data[check_index(index, self.size, 'Vector', base=1)] = value

    __call__ = get

    # === Arithmetic ===

    def __neg__(self) -> Vector:
        return Vector._wrap(-self._data)

    def __pos__(self) -> Vector:
        return self.copy()

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        check_same_shape(self._data.shape, other._data.shape, 'Vector addition')
        return Vector._wrap(self._data + other._data)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        check_same_shape(self._data.shape, other._data.shape, 'Vector subtraction')
        return Vector._wrap(self._data - other._data)

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector._wrap(self._data * float(scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector._wrap(self._data / float(scalar))

    def dot(self, other: Vector) -> float:
        """
        Inner product with another vector of the same length.

        Raises:
            DimensionError: If lengths differ
        """
        if not isinstance(other, Vector):
            raise TypeError(f"dot expects a Vector, got {type(other).__name__}")
        if self.size != other.size:
            raise DimensionError(
                f"Vector dot product: length mismatch, {self.size} vs {other.size}"
            )
        return float(np.dot(self._data, other._data))

    def norm(self) -> float:
        """Euclidean length."""
        return float(np.sqrt(self.dot(self)))

    # === Comparison ===

    def allclose(self, other: Vector | ArrayLike, rtol: float = 1e-9, atol: float = 1e-12) -> bool:
        """Element-wise closeness; False when lengths differ."""
        values = other._data if isinstance(other, Vector) else np.asarray(other, dtype=np.float64)
        if values.shape != self._data.shape:
            return False
        return bool(np.allclose(self._data, values, rtol=rtol, atol=atol))

    def __repr__(self) -> str:
        values = ", ".join(f"{v:.6g}" for v in self._data)
        return f"Vector([{values}])"
