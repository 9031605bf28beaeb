"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    DimensionError,
    InvalidArgumentError,
    NotSquareError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types, ragged rows or
    non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    if hasattr(array, 'values') and not isinstance(array, np.ndarray):
        array = array.values

    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # bool is deliberately accepted and promoted below
    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype} is not supported")

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


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
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            left_shape=array.shape,
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_rectangular(rows: Any, name: str) -> None:
    """
    Verify a nested sequence of rows is not ragged.

    numpy refuses ragged input with a generic message; this check runs
    first so the caller learns which row broke the grid.

    Args:
        rows: Sequence of row sequences (ndarrays pass trivially)
        name: Parameter name for error messages

    Raises:
        DimensionError: If any row length differs from the first row's
    """
    if isinstance(rows, np.ndarray) or not isinstance(rows, (list, tuple)):
        return
    if not rows or not all(isinstance(r, (list, tuple, np.ndarray)) for r in rows):
        return

    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise DimensionError(
                f"{name}: ragged rows, row 0 has {width} elements but row {i} has {len(row)}",
                left_shape=(len(rows), width),
                right_shape=(i, len(row)),
            )


def check_same_length(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    operation: str,
) -> None:
    """
    Verify two vectors (or a matrix and a vector) agree in first dimension.

    Raises:
        DimensionError: If lengths differ
    """
    if a.shape[0] != b.shape[0]:
        raise DimensionError(
            f"{operation}: lengths differ ({a.shape[0]} != {b.shape[0]})",
            operation=operation,
            left_shape=a.shape,
            right_shape=b.shape,
        )


def check_same_shape(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    operation: str,
) -> None:
    """
    Verify two grids have identical shape.

    Raises:
        DimensionError: If shapes differ
    """
    if a.shape != b.shape:
        raise DimensionError(
            f"not compatible for {operation}: shape {a.shape} vs {b.shape}",
            operation=operation,
            left_shape=a.shape,
            right_shape=b.shape,
        )


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array is square.

    Raises:
        NotSquareError: If row count differs from column count
    """
    rows, cols = array.shape
    if rows != cols:
        raise NotSquareError(
            f"{name}: cannot invert non-square matrix of shape ({rows}, {cols})",
            shape=(rows, cols),
            operation='invert',
        )


def check_size(n: int, name: str) -> int:
    """
    Verify a grid dimension is a non-negative integer.

    Returns:
        n as a plain int

    Raises:
        InvalidArgumentError: If n is not integral or is negative
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise InvalidArgumentError(
            f"{name}: expected a non-negative integer, got {type(n).__name__}",
            name=name,
            value=n,
        )
    if n < 0:
        raise InvalidArgumentError(
            f"{name}: must be non-negative, got {n}",
            name=name,
            value=n,
        )
    return int(n)


def check_bounds(lower: float, upper: float) -> None:
    """
    Verify a (lower, upper) interval is strictly increasing.

    Raises:
        InvalidArgumentError: If upper <= lower
    """
    if upper <= lower:
        raise InvalidArgumentError(
            f"upper bound {upper} is not greater than lower bound {lower}",
            name='upper_bound',
            value=(lower, upper),
        )
