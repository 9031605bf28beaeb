"""
Column composition combinators.

Build a new matrix by treating vectors as extra columns:

    zip_columns(v1, v2)     -> [v1 | v2]
    append_column(m, v)     -> [m | v]
    prepend_column(v, m)    -> [v | m]

None of them modify their operands.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike

from pymatrix.core.validation import check_same_length
from pymatrix.vector.operations import as_vector

if TYPE_CHECKING:
    from pymatrix.matrix.matrix import Matrix


def zip_columns(v1: ArrayLike, v2: ArrayLike) -> Matrix:
    """Two-column matrix whose row i is (v1[i], v2[i])."""
    from pymatrix.matrix.matrix import Matrix

    a = as_vector(v1, 'v1')
    b = as_vector(v2, 'v2')
    check_same_length(a, b, 'zip_columns')
    return Matrix._adopt(np.column_stack([a, b]))


def append_column(m: Matrix | ArrayLike, v: ArrayLike) -> Matrix:
    """Copy of m with v[i] appended as the trailing element of row i."""
    from pymatrix.matrix.matrix import Matrix

    m = m if isinstance(m, Matrix) else Matrix(m)
    col = as_vector(v, 'v')
    check_same_length(m.data, col, 'append_column')
    return Matrix._adopt(np.column_stack([m.data, col]))


def prepend_column(v: ArrayLike, m: Matrix | ArrayLike) -> Matrix:
    """Copy of m with v[i] inserted as the leading element of row i."""
    from pymatrix.matrix.matrix import Matrix

    m = m if isinstance(m, Matrix) else Matrix(m)
    col = as_vector(v, 'v')
    check_same_length(col, m.data, 'prepend_column')
    return Matrix._adopt(np.column_stack([col, m.data]))
