"""
Cofactor-expansion kernels.

Determinant by Laplace expansion along the first row and inverse by the
classical adjugate. Both are O(n!) and only meant for the small matrices
this package targets.
"""

import numpy as np
from numpy.typing import NDArray


def minor(a: NDArray[np.float64], row: int, col: int) -> NDArray[np.float64]:
    """Copy of ``a`` without ``row`` and ``col`` (0-based)."""
    n_rows, n_cols = a.shape
    keep_rows = [r for r in range(n_rows) if r != row]
    keep_cols = [c for c in range(n_cols) if c != col]
    return a[np.ix_(keep_rows, keep_cols)]


def cofactor_determinant(a: NDArray[np.float64]) -> float:
    """
    Determinant of a square array by recursive cofactor expansion.

    Base cases: 1x1 returns the element, 2x2 returns ad - bc. Otherwise
    term j contributes (+1 if j even else -1) * a[0, j] * det(minor(0, j)).
    """
    n = a.shape[0]
    if n == 1:
        return float(a[0, 0])
    if n == 2:
        return float(a[0, 0]) * float(a[1, 1]) - float(a[0, 1]) * float(a[1, 0])

    det = 0.0
    for j in range(n):
        sign = 1.0 if j % 2 == 0 else -1.0
        det += sign * float(a[0, j]) * cofactor_determinant(minor(a, 0, j))
    return det


def adjugate_inverse(a: NDArray[np.float64], det: float) -> NDArray[np.float64]:
    """
    Inverse of ``a`` given its (non-zero) determinant.

    inverse[j, i] = (+1 if (i + j) even else -1) * det(minor(i, j)) / det.
    The cofactor of a 1x1 matrix is 1.
    """
    n = a.shape[0]
    result = np.empty((n, n), dtype=np.float64)
    if n == 1:
        result[0, 0] = 1.0 / det
        return result

    for i in range(n):
        for j in range(n):
            sign = 1.0 if (i + j) % 2 == 0 else -1.0
            result[j, i] = sign * cofactor_determinant(minor(a, i, j)) / det
    return result
