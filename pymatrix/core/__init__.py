"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the
vector, matrix and inversion modules.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, precision constants and tolerance tiers
"""

from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    NotSquareError,
    InvalidArgumentError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "NotSquareError",
    "InvalidArgumentError",
    "NumericalError",
    "SingularMatrixError",
]
