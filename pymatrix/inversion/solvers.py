"""
Solver dispatch for matrix inversion.

This module provides the invert() function (public API) and backend selection.
"""

from typing import Literal
import warnings

from numpy.typing import ArrayLike

from pymatrix.core.exceptions import ValidationError
from pymatrix.inversion.backends.cpu import CPUGaussJordanBackend
from pymatrix.inversion.design import InversionDesign
from pymatrix.inversion.solution import InverseSolution
from pymatrix.matrix.matrix import Matrix


BackendChoice = Literal['auto', 'cpu', 'cpu_gauss_jordan']


def _get_backend(backend: BackendChoice, pivoting: bool) -> CPUGaussJordanBackend:
    """Select backend based on preference."""
    if backend in ('auto', 'cpu', 'cpu_gauss_jordan'):
        return CPUGaussJordanBackend(pivoting=pivoting)

    raise ValidationError(f"Unknown backend: {backend!r}")


def invert(
    matrix: Matrix | ArrayLike,
    *,
    pivoting: bool = False,
    backend: BackendChoice = 'auto',
) -> InverseSolution:
    """
    Invert a square matrix by Gauss-Jordan elimination.

    Args:
        matrix: Square Matrix or 2D array-like
        pivoting: If True, swap the largest remaining entry of each column
            into the pivot position before eliminating it. The default
            keeps the natural row order and fails on any zero pivot.
        backend: 'auto', 'cpu' or 'cpu_gauss_jordan' (all the same
            CPU implementation)

    Returns:
        InverseSolution with the inverse and elimination diagnostics

    Raises:
        NotSquareError: If the matrix is not square
        ValidationError: If the matrix contains NaN/Inf or backend is unknown
        SingularMatrixError: If a pivot is exactly zero when used

    Example:
        >>> from pymatrix import Matrix
        >>> from pymatrix.inversion import invert
        >>>
        >>> result = invert(Matrix([[2.0, 0.0], [0.0, 2.0]]))
        >>> print(result.inverse)
        >>> print(result.summary())
    """
    # This is the boundary - validate here, trust everywhere else
    design = InversionDesign.from_matrix(matrix)

    backend_impl = _get_backend(backend, pivoting)
    result = backend_impl.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    return InverseSolution(_result=result, _design=design)
