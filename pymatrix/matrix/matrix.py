"""
Matrix: owned, dense, row-major grid of numbers.

A Matrix wraps a private 2D numpy array that it never shares: every
constructor copies its input and every operation that returns a matrix
returns a freshly allocated one. In-place operations mutate the receiver
and return it so that calls can be chained.

Construction:
    Matrix(rows)                        from a 2D array-like
    Matrix.zeros(row_count, col_count)
    Matrix.square(n)
    Matrix.from_outer(v1, v2)
    Matrix.from_column_fill(col_count, values)
    Matrix.diag(n, value) / Matrix.identity(n)

Operators:
    m1 + m2, m1 - m2, m1 += m2, m1 -= m2    same shape
    m * s, s * m, m / s, m *= s, m /= s     scalar
    m1 @ m2, m @ v                          matrix product
    m ^ v, v ^ m                            append / prepend a column
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Callable, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.precision import is_close
from pymatrix.core.compute.tolerances import select_tolerance
from pymatrix.core.exceptions import DimensionError, InvalidArgumentError, ValidationError
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_bounds,
    check_rectangular,
    check_same_length,
    check_same_shape,
    check_size,
)
from pymatrix.matrix._compose import append_column, prepend_column
from pymatrix.matrix._scaling import minmax_scale_columns
from pymatrix.matrix.random_rows import (
    RandomState,
    generate_random_row,
    generate_random_row_zero_biased,
    resolve_rng,
)
from pymatrix.vector.operations import as_vector, format_vector


RowTransform = Callable[[NDArray[np.floating[Any]]], ArrayLike]


def _as_grid(data: Matrix | ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Validated 2D array view of a Matrix or array-like (not copied)."""
    if isinstance(data, Matrix):
        return data._data
    check_rectangular(data, name)
    arr = check_array(data, name)
    check_2d(arr, name)
    return arr


def _check_scalar(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (Real, np.integer, np.floating)):
        raise ValidationError(
            f"{name}: expected a real scalar, got {type(value).__name__}"
        )


class Matrix:
    """
    Dense row-major matrix.

    Attributes:
        row_count: Number of rows
        col_count: Number of columns (length of every row)

    The grid is rectangular by construction; ragged input raises
    DimensionError. Integral input is stored as float64, float32 input
    is kept as float32.
    """

    __slots__ = ('_data',)

    # numpy operands defer to our reflected operators (v ^ m, s * m)
    __array_ufunc__ = None

    def __init__(self, data: Matrix | ArrayLike):
        self._data = np.array(_as_grid(data, 'data'), order='C', copy=True)

    @classmethod
    def _adopt(cls, array: NDArray[np.floating[Any]]) -> Matrix:
        """Wrap a freshly computed 2D array without copying it."""
        obj = cls.__new__(cls)
        obj._data = array
        return obj

    # --- Construction ---

    @classmethod
    def from_array(cls, data: Matrix | ArrayLike) -> Matrix:
        """
        Build a Matrix from array-like data.

        Parameters
        ----------
        data : array-like
            2D data: nested lists, numpy array, pandas DataFrame or any
            object with a .values attribute. The data is copied.
        """
        return cls(data)

    @classmethod
    def zeros(cls, row_count: int, col_count: int) -> Matrix:
        """All-zero grid of the given shape."""
        rows = check_size(row_count, 'row_count')
        cols = check_size(col_count, 'col_count')
        return cls._adopt(np.zeros((rows, cols), dtype=np.float64))

    @classmethod
    def square(cls, n: int) -> Matrix:
        """n x n zero grid."""
        return cls.zeros(n, n)

    @classmethod
    def from_outer(cls, v1: ArrayLike, v2: ArrayLike) -> Matrix:
        """
        Outer-product constructor: entry (i, j) = v1[i] * v2[j].

        Raises:
            DimensionError: If |v1| != |v2|
        """
        a = as_vector(v1, 'v1')
        b = as_vector(v2, 'v2')
        check_same_length(a, b, 'outer_product')
        return cls._adopt(np.outer(a, b))

    @classmethod
    def from_column_fill(cls, col_count: int, values: ArrayLike) -> Matrix:
        """Grid with one row per value, row i filled with values[i]."""
        cols = check_size(col_count, 'col_count')
        column = as_vector(values, 'values')
        return cls._adopt(np.repeat(column.reshape(-1, 1), cols, axis=1))

    @classmethod
    def diag(cls, n: int, value: float = 1.0) -> Matrix:
        """n x n grid with `value` on the main diagonal, zero elsewhere."""
        _check_scalar(value, 'value')
        m = cls.square(n)
        np.fill_diagonal(m._data, value)
        return m

    @classmethod
    def identity(cls, n: int) -> Matrix:
        return cls.diag(n, 1.0)

    # --- Shape and element access ---

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only view of the grid."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    @property
    def row_count(self) -> int:
        return self._data.shape[0]

    @property
    def col_count(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def is_square(self) -> bool:
        return self.row_count == self.col_count

    def is_empty(self) -> bool:
        """True when the matrix has no rows."""
        return self.row_count == 0

    def __len__(self) -> int:
        return self.row_count

    def __iter__(self) -> Iterator[NDArray[np.floating[Any]]]:
        for row in self._data:
            yield row.copy()

    def __getitem__(self, key):
        """m[i] returns a copy of row i, m[i, j] returns the element."""
        value = self._data[key]
        if np.ndim(value) == 0:
            return value.item()
        return np.array(value, copy=True)

    def __setitem__(self, key, value) -> None:
        if isinstance(key, tuple):
            self._data[key] = value
            return
        row = as_vector(value, 'row')
        if row.shape[0] != self.col_count:
            raise DimensionError(
                f"row assignment: expected {self.col_count} elements, got {row.shape[0]}",
                operation='__setitem__',
                left_shape=self.shape,
                right_shape=row.shape,
            )
        self._data[key] = row

    def copy(self) -> Matrix:
        return Matrix._adopt(self._data.copy())

    def transpose(self) -> Matrix:
        return Matrix._adopt(np.ascontiguousarray(self._data.T))

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Independent copy of the grid as a numpy array."""
        return self._data.copy()

    def tolist(self) -> list[list[float]]:
        return self._data.tolist()

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def allclose(
        self,
        other: Matrix | ArrayLike,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Same shape and every element within |a - b| <= atol + rtol * |b|.

        Tolerances left as None come from the tier for this grid's dtype
        (CPU_FP64, or CPU_FP32 for float32 grids).
        """
        tier = select_tolerance(str(self.dtype))
        rtol = tier.rtol if rtol is None else rtol
        atol = tier.atol if atol is None else atol
        grid = _as_grid(other, 'other')
        if grid.shape != self.shape:
            return False
        return bool(np.all(is_close(self._data, grid, rtol=rtol, atol=atol)))

    # --- Elementwise arithmetic ---

    def add(self, other: Matrix | ArrayLike) -> Matrix:
        return self.copy().add_in_place(other)

    def subtract(self, other: Matrix | ArrayLike) -> Matrix:
        return self.copy().subtract_in_place(other)

    def add_in_place(self, other: Matrix | ArrayLike) -> Matrix:
        """
        Elementwise self += other.

        Raises:
            DimensionError: If the shapes differ
        """
        grid = _as_grid(other, 'other')
        check_same_shape(self._data, grid, "operator '+='")
        self._promote(grid.dtype)
        self._data += grid
        return self

    def subtract_in_place(self, other: Matrix | ArrayLike) -> Matrix:
        """
        Elementwise self -= other.

        Raises:
            DimensionError: If the shapes differ
        """
        grid = _as_grid(other, 'other')
        check_same_shape(self._data, grid, "operator '-='")
        self._promote(grid.dtype)
        self._data -= grid
        return self

    def scale_in_place(self, scalar: float) -> Matrix:
        """Multiply every element by scalar."""
        _check_scalar(scalar, 'scalar')
        self._data *= scalar
        return self

    def divide_in_place(self, scalar: float) -> Matrix:
        """Divide every element by scalar."""
        _check_scalar(scalar, 'scalar')
        self._data /= scalar
        return self

    def _promote(self, dtype: np.dtype) -> None:
        # float32 += float64 would silently truncate the operand
        result = np.result_type(self._data.dtype, dtype)
        if result != self._data.dtype:
            self._data = self._data.astype(result)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __iadd__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add_in_place(other)

    def __isub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract_in_place(other)

    def __mul__(self, scalar):
        if isinstance(scalar, Matrix):
            return NotImplemented
        return self.copy().scale_in_place(scalar)

    __rmul__ = __mul__

    def __imul__(self, scalar):
        if isinstance(scalar, Matrix):
            return NotImplemented
        return self.scale_in_place(scalar)

    def __truediv__(self, scalar):
        if isinstance(scalar, Matrix):
            return NotImplemented
        return self.copy().divide_in_place(scalar)

    def __itruediv__(self, scalar):
        if isinstance(scalar, Matrix):
            return NotImplemented
        return self.divide_in_place(scalar)

    # --- Multiplication family ---

    def multiply(self, other: Matrix | ArrayLike) -> Matrix:
        """
        Matrix product.

        With a matrix operand the result is row_count x other.col_count.
        With a vector operand the result is a row_count x 1 column whose
        entry r is the inner product of row r with the vector.

        Raises:
            DimensionError: If the inner dimensions differ
        """
        if not isinstance(other, Matrix):
            arr = check_array(other, 'other')
            if arr.ndim == 1:
                return self._multiply_vector(arr)
            other = Matrix(arr)

        if self.col_count != other.row_count:
            raise DimensionError(
                f"multiply: inner dimensions differ, {self.shape} x {other.shape}",
                operation='multiply',
                left_shape=self.shape,
                right_shape=other.shape,
            )
        return Matrix._adopt(self._data @ other._data)

    def _multiply_vector(self, v: NDArray[np.floating[Any]]) -> Matrix:
        if v.shape[0] != self.col_count:
            raise DimensionError(
                f"multiply: vector length {v.shape[0]} != col_count {self.col_count}",
                operation='multiply',
                left_shape=self.shape,
                right_shape=v.shape,
            )
        return Matrix._adopt((self._data @ v).reshape(-1, 1))

    def __matmul__(self, other):
        return self.multiply(other)

    def multiply_by_transposed(self, other: Matrix | ArrayLike) -> Matrix:
        """
        self . other^T, entry (m, n) = sum_k self[m][k] * other[n][k].

        No transposed copy of `other` is made; rows of both operands are
        paired directly.

        Raises:
            DimensionError: If the column counts differ
        """
        grid = _as_grid(other, 'other')
        if self.col_count != grid.shape[1]:
            raise DimensionError(
                f"multiply_by_transposed: column counts differ, {self.shape} vs {grid.shape}",
                operation='multiply_by_transposed',
                left_shape=self.shape,
                right_shape=grid.shape,
            )
        return Matrix._adopt(self._data @ grid.T)

    def xtx(self) -> Matrix:
        """X^T . X, a symmetric col_count x col_count matrix."""
        return Matrix._adopt(self._data.T @ self._data)

    # --- Column composition ---

    def __xor__(self, other):
        if isinstance(other, Matrix):
            return NotImplemented
        return append_column(self, other)

    def __rxor__(self, other):
        return prepend_column(other, self)

    # --- Scaling, transform, randomization ---

    def scale(self, lower_bound: float = 0.0, upper_bound: float = 1.0) -> Matrix:
        """
        Min-max scale every column into [lower_bound, upper_bound], in place.

        Constant columns are left unchanged. The row holding a column's
        minimum becomes exactly lower_bound, the row holding its maximum
        exactly upper_bound.

        Raises:
            InvalidArgumentError: If upper_bound <= lower_bound
        """
        check_bounds(lower_bound, upper_bound)
        minmax_scale_columns(self._data, lower_bound, upper_bound)
        return self

    def transform(self, f: RowTransform | None) -> Matrix:
        """
        New matrix whose row i is f(row i).

        The output width is taken from the first transformed row and may
        differ from col_count. `f=None` returns an unchanged copy.

        Raises:
            InvalidArgumentError: If the matrix has no rows
            DimensionError: If transformed rows differ in width
        """
        if f is None:
            return self.copy()
        return Matrix._adopt(self._apply_rows(f))

    get_transformed = transform

    def transform_self(self, f: RowTransform | None) -> Matrix:
        """In-place variant of transform(); `f=None` leaves the matrix as is."""
        if f is None:
            return self
        self._data = self._apply_rows(f)
        return self

    def _apply_rows(self, f: RowTransform) -> NDArray[np.floating[Any]]:
        if self.is_empty():
            raise InvalidArgumentError(
                "transform: cannot infer column count of a matrix with no rows",
                name='matrix',
                value=self.shape,
            )

        rows = [as_vector(f(row.copy()), f'transformed row {i}')
                for i, row in enumerate(self._data)]
        width = rows[0].shape[0]
        for i, row in enumerate(rows):
            if row.shape[0] != width:
                raise DimensionError(
                    f"transform: row 0 has width {width} but row {i} has {row.shape[0]}",
                    operation='transform',
                    left_shape=(len(rows), width),
                    right_shape=row.shape,
                )
        return np.vstack(rows)

    def random_init(self, rng: RandomState = None) -> Matrix:
        """Fill every row with generate_random_row(col_count)."""
        return self._fill_rows(generate_random_row, rng)

    def random_init_zero_biased(self, rng: RandomState = None) -> Matrix:
        """Fill every row with generate_random_row_zero_biased(col_count)."""
        return self._fill_rows(generate_random_row_zero_biased, rng)

    def _fill_rows(self, generator, rng: RandomState) -> Matrix:
        gen = resolve_rng(rng)
        for r in range(self.row_count):
            self[r] = generator(self.col_count, gen)
        return self

    # --- Inversion ---

    def invert(self, *, pivoting: bool = False) -> Matrix:
        """
        Inverse by Gauss-Jordan elimination.

        See pymatrix.inversion.invert for the full solution object with
        diagnostics.

        Raises:
            NotSquareError: If row_count != col_count
            SingularMatrixError: If a pivot is exactly zero when used
        """
        from pymatrix.inversion.solvers import invert

        return invert(self, pivoting=pivoting).inverse

    # --- Rendering ---

    def __str__(self) -> str:
        return "\n".join(format_vector(row) for row in self._data)

    def __repr__(self) -> str:
        return (
            f"Matrix(row_count={self.row_count}, col_count={self.col_count}, "
            f"dtype={self._data.dtype})"
        )
