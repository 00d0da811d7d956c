"""
Dense containers.

Vector and Matrix own contiguous float64 buffers with fixed shapes set at
construction. All arithmetic returns new objects.

Public API:
    Vector(size), Vector.from_array(values)
    Matrix(rows, cols), Matrix.from_rows(rows), Matrix.from_array(values),
    Matrix.identity(n)
"""

from pylinsys.dense.vector import Vector
from pylinsys.dense.matrix import Matrix

__all__ = [
    "Vector",
    "Matrix",
]
