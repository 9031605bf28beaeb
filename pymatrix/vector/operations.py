"""
Vector operations.

Free functions over one-dimensional numeric sequences. Inputs are any
array-like; they are converted at the boundary with check_array and
must be 1D. The in-place operators mutate their first argument (a numpy
array or a list) and return it. An integer array cannot hold a float
result and is rejected rather than truncated.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import InvalidArgumentError, ValidationError
from pymatrix.core.validation import check_1d, check_array, check_same_length

if TYPE_CHECKING:
    from pymatrix.matrix.matrix import Matrix


def as_vector(v: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Convert an array-like to a validated 1D float array."""
    arr = check_array(v, name)
    check_1d(arr, name)
    return arr


def _write_back(target, values: NDArray[np.floating[Any]], name: str):
    """Store values into a mutable vector in place and return it."""
    if isinstance(target, np.ndarray):
        if not np.can_cast(values.dtype, target.dtype, 'same_kind'):
            raise ValidationError(
                f"{name}: cannot store a {values.dtype} result in a "
                f"{target.dtype} array in place; convert it to float first"
            )
        target[...] = values
    elif isinstance(target, list):
        target[:] = values.tolist()
    else:
        raise ValidationError(
            f"{name}: in-place operation needs a list or numpy array, "
            f"got {type(target).__name__}"
        )
    return target


def inner_product(v1: ArrayLike, v2: ArrayLike) -> float:
    """
    Sum of elementwise products.

    Raises:
        DimensionError: If the vectors differ in length
    """
    a = as_vector(v1, 'v1')
    b = as_vector(v2, 'v2')
    check_same_length(a, b, 'inner_product')
    return float(np.dot(a, b))


def outer_product(v1: ArrayLike, v2: ArrayLike) -> Matrix:
    """
    Matrix whose (i, j) entry is v1[i] * v2[j].

    Both vectors must have the same length.

    Raises:
        DimensionError: If the vectors differ in length
    """
    from pymatrix.matrix.matrix import Matrix

    return Matrix.from_outer(v1, v2)


def square_dist(v1: ArrayLike, v2: ArrayLike) -> float:
    """Sum of squared elementwise differences."""
    a = as_vector(v1, 'v1')
    b = as_vector(v2, 'v2')
    check_same_length(a, b, 'square_dist')
    diff = a - b
    return float(np.dot(diff, diff))


def euclidean_dist(v1: ArrayLike, v2: ArrayLike) -> float:
    return float(np.sqrt(square_dist(v1, v2)))


def norm(v: ArrayLike, p: float = 2) -> float:
    """
    p-norm, (sum |x|^p)^(1/p).

    Args:
        v: Vector
        p: Order of the norm, p >= 1 (np.inf gives the max norm)

    Raises:
        InvalidArgumentError: If p < 1
    """
    if p < 1:
        raise InvalidArgumentError(
            f"norm of vector is not defined for p < 1, got p={p}",
            name='p',
            value=p,
        )
    arr = as_vector(v, 'v')
    if arr.size == 0:
        return 0.0
    return float(np.linalg.norm(arr, ord=p))


def make_vector_set(v: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Sort ascending and drop duplicates.

    Returns the strictly increasing set form as a new array. A list
    argument is also rewritten in place, since numpy arrays cannot
    shrink.
    """
    unique = np.unique(as_vector(v, 'v'))
    if isinstance(v, list):
        v[:] = unique.tolist()
    return unique


def scale_vector(v, scalar: float):
    """v *= scalar, in place."""
    arr = as_vector(v, 'v')
    return _write_back(v, arr * scalar, 'v')


def divide_vector(v, scalar: float):
    """
    v /= scalar, in place.

    Elements equal to zero are left untouched so that a negative scalar
    never turns 0.0 into -0.0.
    """
    arr = as_vector(v, 'v')
    out = arr.copy()
    np.divide(arr, scalar, out=out, where=arr != 0)
    return _write_back(v, out, 'v')


def add_vector(v1, v2: ArrayLike):
    """v1 += v2, in place."""
    a = as_vector(v1, 'v1')
    b = as_vector(v2, 'v2')
    check_same_length(a, b, 'add_vector')
    return _write_back(v1, a + b, 'v1')


def subtract_vector(v1, v2: ArrayLike):
    """v1 -= v2, in place."""
    a = as_vector(v1, 'v1')
    b = as_vector(v2, 'v2')
    check_same_length(a, b, 'subtract_vector')
    return _write_back(v1, a - b, 'v1')


def format_vector(v: ArrayLike) -> str:
    """Elements separated by single spaces, for diagnostics."""
    return " ".join(f"{x:g}" for x in as_vector(v, 'v'))
