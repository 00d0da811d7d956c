"""
Input validation utilities for pylinsys.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsys.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    NotSymmetricError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like. Rejects inputs that result in object dtype
    (indicating ragged, mixed or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype (always a fresh copy)

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_size(value: Any, minimum: int, name: str) -> int:
    """
    Validate a container dimension.

    Args:
        value: Requested size (any integral type)
        minimum: Smallest allowed value
        name: Parameter name for error messages

    Returns:
        The size as a plain int

    Raises:
        ValidationError: If value is not integral or is below minimum
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected an integer, got bool")
    try:
        size = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        ) from e
    if size < minimum:
        raise ValidationError(f"{name}: must be >= {minimum}, got {size}")
    return size


def check_index(index: Any, size: int, name: str, *, base: int) -> int:
    """
    Validate a single element index against [base, size - 1 + base].

    Args:
        index: Requested index
        size: Length of the indexed dimension
        name: What is being indexed, for error messages
        base: 0 for raw indexing, 1 for mathematical indexing

    Returns:
        The zero-based position into the underlying buffer

    Raises:
        TypeError: If index is not an integer
        IndexOutOfRangeError: If index is outside the valid range
    """
    if isinstance(index, bool):
        raise TypeError(f"{name} index must be an integer, got bool")
    try:
        i = operator.index(index)
    except TypeError:
        raise TypeError(
            f"{name} index must be an integer, got {type(index).__name__}"
        ) from None
    low, high = base, size - 1 + base
    if i < low or i > high:
        suffix = " (1-based)" if base == 1 else ""
        raise IndexOutOfRangeError(
            f"{name} index {i} out of range [{low}, {high}]{suffix}",
            index=i,
            bounds=(low, high),
        )
    return i - base


def check_same_shape(
    left: tuple[int, ...],
    right: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        DimensionError: If the shapes differ
    """
    if left != right:
        raise DimensionError(
            f"{operation}: shape mismatch, left operand is {left}, right operand is {right}"
        )


def check_square(shape: tuple[int, int], name: str) -> None:
    """
    Verify a matrix shape is square.

    Raises:
        DimensionError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise DimensionError(
            f"{name}: expected a square matrix, got {rows}x{cols}"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        ValidationError: If array has fewer than min_samples rows
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_symmetric(array: NDArray[np.floating[Any]], tol: float, name: str) -> None:
    """
    Verify a square array is symmetric within an absolute tolerance.

    Every off-diagonal pair must satisfy |A[i,j] - A[j,i]| <= tol.

    Args:
        array: Square 2D array to check
        tol: Largest accepted asymmetry
        name: Parameter name for error messages

    Raises:
        NotSymmetricError: If any pair differs by more than tol
    """
    asymmetry = np.abs(array - array.T)
    # NaN compares False, so it counts as a violation and ranks first
    violations = ~(asymmetry <= tol)
    if violations.any():
        ranked = np.where(violations, np.nan_to_num(asymmetry, nan=np.inf), -np.inf)
        i, j = np.unravel_index(int(np.argmax(ranked)), asymmetry.shape)
        worst = float(asymmetry[i, j])
        i, j = sorted((int(i) + 1, int(j) + 1))
        raise NotSymmetricError(
            f"{name}: matrix is not symmetric, |A[{i},{j}] - A[{j},{i}]| = {worst:.3g} "
            f"exceeds tolerance {tol:.3g}",
            max_asymmetry=worst,
            position=(i, j),
            tol=tol,
        )
