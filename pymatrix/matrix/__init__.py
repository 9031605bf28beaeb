"""
Matrix module.

Public API:
    Matrix            - Dense row-major matrix
    zip_columns       - Two vectors as a two-column matrix
    append_column     - Matrix with a trailing column added
    prepend_column    - Matrix with a leading column added
    generate_random_row, generate_random_row_zero_biased
                      - Row generators behind Matrix.random_init*
"""

from pymatrix.matrix.matrix import Matrix
from pymatrix.matrix._compose import append_column, prepend_column, zip_columns
from pymatrix.matrix.random_rows import (
    generate_random_row,
    generate_random_row_zero_biased,
)

__all__ = [
    "Matrix",
    "zip_columns",
    "append_column",
    "prepend_column",
    "generate_random_row",
    "generate_random_row_zero_biased",
]
