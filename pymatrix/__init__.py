"""
PyMatrix: dense matrix and vector arithmetic.

Dense, owned, row-major matrices and one-dimensional vectors on top of
NumPy: construction, elementwise arithmetic, inner/outer products,
matrix multiplication (including a transposed-operand variant), min-max
column scaling and Gauss-Jordan inversion.

Submodules:
    vector: Vector operations
    matrix: The Matrix type and column composition
    inversion: Gauss-Jordan inversion with diagnostics
    core: Exceptions, validation, result envelope, timing
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    NotSquareError,
    InvalidArgumentError,
    NumericalError,
    SingularMatrixError,
)
from pymatrix.matrix import (
    Matrix,
    append_column,
    prepend_column,
    zip_columns,
)
from pymatrix.vector import (
    add_vector,
    divide_vector,
    euclidean_dist,
    format_vector,
    inner_product,
    make_vector_set,
    norm,
    outer_product,
    scale_vector,
    square_dist,
    subtract_vector,
)
from pymatrix.inversion import invert

__all__ = [
    "__version__",
    # Matrix
    "Matrix",
    "zip_columns",
    "append_column",
    "prepend_column",
    "invert",
    # Vector
    "inner_product",
    "outer_product",
    "square_dist",
    "euclidean_dist",
    "norm",
    "make_vector_set",
    "scale_vector",
    "divide_vector",
    "add_vector",
    "subtract_vector",
    "format_vector",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "NotSquareError",
    "InvalidArgumentError",
    "NumericalError",
    "SingularMatrixError",
]
