"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand shapes are incompatible for the requested operation.

    Raised when a vector or matrix has the wrong number of dimensions,
    when two operands disagree in length or shape, or when a grid would
    become ragged.

    Attributes:
        operation: Name of the operation that rejected the operands
        left_shape: Shape of the first (or only) operand, if known
        right_shape: Shape of the second operand, if known
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(DimensionError):
    """
    Matrix is not square.

    Raised when an operation that is only defined for square matrices
    (inversion) receives a rectangular one.

    Attributes:
        shape: (row_count, col_count) of the offending matrix
    """

    def __init__(
        self,
        message: str,
        shape: tuple[int, int] | None = None,
        operation: str | None = None,
    ):
        super().__init__(message, operation=operation, left_shape=shape)
        self.shape = shape


class InvalidArgumentError(ValidationError):
    """
    A scalar argument is outside its valid domain.

    Examples: p < 1 for a vector norm, non-increasing bounds for min-max
    scaling, an empty matrix given to a transform that infers its width.

    Attributes:
        name: Parameter name
        value: The rejected value
    """

    def __init__(self, message: str, name: str | None = None, value=None):
        super().__init__(message)
        self.name = name
        self.value = value


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when inversion meets a pivot that is exactly zero at the time
    it is used.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Row/column index of the zero pivot
        pivot_value: The pivot value that stopped elimination
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value
