"""
Tests for PyMatrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatrixError)
    - Diagnostic attributes on DimensionError, NotSquareError,
      InvalidArgumentError, SingularMatrixError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pymatrix.core.exceptions import (
    DimensionError,
    InvalidArgumentError,
    NotSquareError,
    NumericalError,
    PyMatrixError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatrixError."""

    def test_validation_error_is_pymatrix_error(self):
        with pytest.raises(PyMatrixError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_not_square_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise NotSquareError("not square", shape=(2, 3))

    def test_invalid_argument_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise InvalidArgumentError("p < 1", name="p", value=0.5)

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_matrix_error_is_not_validation_error(self):
        """A singular matrix is a valid input that fails numerically."""
        err = SingularMatrixError("singular")
        assert not isinstance(err, ValidationError)

    def test_numerical_error_is_pymatrix_error(self):
        with pytest.raises(PyMatrixError):
            raise NumericalError("overflow")


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionError:

    def test_all_attributes(self):
        err = DimensionError(
            "inner_product: lengths differ (2 != 3)",
            operation="inner_product",
            left_shape=(2,),
            right_shape=(3,),
        )
        assert "lengths differ" in str(err)
        assert err.operation == "inner_product"
        assert err.left_shape == (2,)
        assert err.right_shape == (3,)

    def test_defaults_are_none(self):
        err = DimensionError("wrong shape")
        assert err.operation is None
        assert err.left_shape is None
        assert err.right_shape is None


class TestNotSquareError:

    def test_shape_is_recorded(self):
        err = NotSquareError("cannot invert", shape=(2, 3), operation="invert")
        assert err.shape == (2, 3)
        assert err.left_shape == (2, 3)
        assert err.operation == "invert"


class TestInvalidArgumentError:

    def test_name_and_value(self):
        err = InvalidArgumentError("norm undefined", name="p", value=0.5)
        assert err.name == "p"
        assert err.value == 0.5

    def test_defaults_are_none(self):
        err = InvalidArgumentError("bad")
        assert err.name is None
        assert err.value is None


class TestSingularMatrixError:

    def test_all_attributes(self):
        err = SingularMatrixError(
            "matrix cannot be inverted: pivot 1 is zero",
            matrix_name="A",
            pivot_index=1,
            pivot_value=0.0,
        )
        assert str(err) == "matrix cannot be inverted: pivot 1 is zero"
        assert err.matrix_name == "A"
        assert err.pivot_index == 1
        assert err.pivot_value == 0.0

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.pivot_index is None
        assert err.pivot_value is None
