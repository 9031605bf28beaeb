"""
InversionDesign: validated input for matrix inversion.

Wraps a square grid and its metadata. Follows the Design pattern: all
validation happens here, backends trust what they receive.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.validation import check_finite, check_square
from pymatrix.matrix.matrix import Matrix


@dataclass(frozen=True)
class InversionDesign:
    """
    Design for matrix inversion.

    Holds a private float copy of an n x n grid. Immutable after
    construction.

    Construction:
        InversionDesign.from_matrix(m)
    """
    _data: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_matrix(cls, matrix: Matrix | ArrayLike) -> InversionDesign:
        """
        Build InversionDesign from a Matrix or 2D array-like.

        Raises
        ------
        NotSquareError
            If row_count != col_count.
        ValidationError
            If the grid contains NaN or Inf.
        """
        if not isinstance(matrix, Matrix):
            matrix = Matrix(matrix)

        data = matrix.to_array()
        check_square(data, 'matrix')
        check_finite(data, 'matrix')

        return cls(_data=data, _n=data.shape[0])

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Grid to invert (n x n)."""
        return self._data

    @property
    def n(self) -> int:
        """Order of the matrix."""
        return self._n

    def __repr__(self) -> str:
        return f"InversionDesign(n={self._n})"
