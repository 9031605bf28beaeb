"""
Tests for row transforms and random initialization.
"""

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.core.exceptions import DimensionError, InvalidArgumentError
from pymatrix.matrix import generate_random_row, generate_random_row_zero_biased


def _with_bias(row):
    return np.concatenate([[1.0], row])


class TestTransform:

    def test_same_width(self):
        m = Matrix([[1, 2], [3, 4]])
        result = m.transform(lambda row: row * 2)
        assert result.tolist() == [[2.0, 4.0], [6.0, 8.0]]
        assert m.tolist() == [[1.0, 2.0], [3.0, 4.0]]

    def test_width_taken_from_first_row(self):
        result = Matrix([[1, 2], [3, 4]]).transform(_with_bias)
        assert result.col_count == 3
        assert result.tolist() == [[1.0, 1.0, 2.0], [1.0, 3.0, 4.0]]

    def test_get_transformed_alias(self):
        m = Matrix([[1.0, 2.0]])
        assert m.get_transformed(_with_bias) == m.transform(_with_bias)

    def test_none_returns_copy(self):
        m = Matrix([[1.0]])
        result = m.transform(None)
        assert result == m
        assert result is not m

    def test_empty_matrix(self):
        with pytest.raises(InvalidArgumentError, match="no rows"):
            Matrix.zeros(0, 2).transform(_with_bias)

    def test_inconsistent_widths(self):
        m = Matrix([[1.0], [2.0]])
        with pytest.raises(DimensionError, match="row 1 has 2"):
            m.transform(lambda row: np.repeat(row, int(row[0])))

    def test_rows_passed_as_copies(self):
        m = Matrix([[1.0, 2.0]])

        def clobber(row):
            row[:] = 0.0
            return row + 1.0

        result = m.transform(clobber)
        assert m.tolist() == [[1.0, 2.0]]
        assert result.tolist() == [[1.0, 1.0]]


class TestTransformSelf:

    def test_in_place_width_change(self):
        m = Matrix([[1, 2], [3, 4]])
        result = m.transform_self(_with_bias)
        assert result is m
        assert m.shape == (2, 3)
        assert m.col_count == 3

    def test_none_is_noop(self):
        m = Matrix([[1.0]])
        assert m.transform_self(None) is m
        assert m.tolist() == [[1.0]]

    def test_empty_matrix(self):
        with pytest.raises(InvalidArgumentError):
            Matrix.zeros(0, 2).transform_self(_with_bias)


class TestRandomInit:

    def test_fills_every_row(self):
        m = Matrix.zeros(5, 3)
        result = m.random_init(rng=0)
        assert result is m
        assert m.shape == (5, 3)
        data = m.to_array()
        assert np.all(data >= -1.0) and np.all(data < 1.0)
        assert np.any(data != 0.0)

    def test_reproducible_with_seed(self):
        a = Matrix.zeros(3, 4).random_init(rng=7)
        b = Matrix.zeros(3, 4).random_init(rng=7)
        assert a == b

    def test_accepts_generator(self, rng):
        m = Matrix.zeros(2, 2).random_init(rng=rng)
        assert m.shape == (2, 2)

    def test_zero_biased_range(self, rng):
        m = Matrix.zeros(200, 5).random_init_zero_biased(rng=rng)
        data = m.to_array()
        assert np.all(data >= 0.0) and np.all(data < 1.0)
        # E[u^2] = 1/3 for u ~ U(0, 1)
        assert data.mean() == pytest.approx(1.0 / 3.0, abs=0.05)


class TestRowGenerators:

    @pytest.mark.parametrize("generator", [
        generate_random_row,
        generate_random_row_zero_biased,
    ])
    def test_length(self, generator, rng):
        for dim in (0, 1, 7):
            row = generator(dim, rng)
            assert row.shape == (dim,)
            assert row.dtype == np.float64

    def test_negative_dimension(self):
        with pytest.raises(InvalidArgumentError):
            generate_random_row(-2)

    def test_fresh_allocation(self, rng):
        a = generate_random_row(3, rng)
        b = generate_random_row(3, rng)
        assert a is not b
        assert not np.array_equal(a, b)
