"""
Tests for column composition: zip_columns, append_column, prepend_column.
"""

import numpy as np
import pytest

from pymatrix import Matrix, append_column, prepend_column, zip_columns
from pymatrix.core.exceptions import DimensionError


class TestZipColumns:

    def test_concrete(self):
        assert zip_columns([1, 2], [3, 4]).tolist() == [[1.0, 3.0], [2.0, 4.0]]

    def test_empty(self):
        assert zip_columns([], []).shape == (0, 2)

    def test_length_mismatch(self):
        with pytest.raises(DimensionError, match="zip_columns"):
            zip_columns([1, 2], [3])


class TestAppendColumn:

    def test_concrete(self):
        assert append_column(Matrix([[1, 2]]), [9]).tolist() == [[1.0, 2.0, 9.0]]

    def test_xor_operator(self):
        assert (Matrix([[1, 2]]) ^ [9]).tolist() == [[1.0, 2.0, 9.0]]

    def test_operand_unchanged(self):
        m = Matrix([[1, 2], [3, 4]])
        result = m ^ np.array([5, 6])
        assert result.shape == (2, 3)
        assert m.shape == (2, 2)

    def test_array_like_matrix_operand(self):
        assert append_column([[1.0, 2.0]], [9.0]).tolist() == [[1.0, 2.0, 9.0]]

    def test_length_mismatch(self):
        with pytest.raises(DimensionError, match="append_column"):
            Matrix([[1, 2]]) ^ [1, 2]


class TestPrependColumn:

    def test_concrete(self):
        m = Matrix([[1, 2], [3, 4]])
        assert prepend_column([7, 8], m).tolist() == [[7.0, 1.0, 2.0], [8.0, 3.0, 4.0]]

    def test_reflected_xor_with_list(self):
        assert ([0] ^ Matrix([[1, 2]])).tolist() == [[0.0, 1.0, 2.0]]

    def test_reflected_xor_with_ndarray(self):
        result = np.array([5.0]) ^ Matrix([[1.0]])
        assert isinstance(result, Matrix)
        assert result.tolist() == [[5.0, 1.0]]

    def test_array_like_matrix_operand(self):
        assert prepend_column([0.0], np.array([[1.0, 2.0]])).tolist() == [[0.0, 1.0, 2.0]]

    def test_length_mismatch(self):
        with pytest.raises(DimensionError, match="prepend_column"):
            [1, 2, 3] ^ Matrix([[1, 2]])

    def test_append_then_prepend(self):
        m = Matrix([[1.0], [2.0]])
        result = [0, 0] ^ m ^ [9, 9]
        assert result.tolist() == [[0.0, 1.0, 9.0], [0.0, 2.0, 9.0]]
