"""
Dense two-dimensional Matrix value type.

A Matrix has a fixed shape chosen at construction and mutable float64
contents stored row-major in a private NumPy array. Every derived matrix
(transpose, clone, map, arithmetic result, identity, inverse, submatrix)
owns freshly allocated storage.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Callable, Iterable, Iterator, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, PrivateAttr

from ..core.config import settings
from ..core.errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    MatrixTypeError,
    RowRangeError,
)
from .value import fuzzy_compare

DTYPE = np.float64


def _format_value(value: float) -> str:
    """Render integral floats without a fractional part ("2" rather than "2.0")."""
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def _as_array(values: Any) -> np.ndarray:
    """Convert a flat or nested sequence of numbers to a float64 array."""
    if isinstance(values, Matrix):
        return values.to_numpy()
    if not isinstance(values, np.ndarray):
        values = [list(item) if isinstance(item, Iterable) else item for item in values]
    try:
        return np.array(values, dtype=DTYPE)
    except ValueError as exc:
        raise DimensionMismatchError(
            f"Matrix values must form a rectangular grid of numbers: {exc}"
        ) from exc


class Matrix(BaseModel):
    """
    Rectangular grid of floating-point values.

    Construct with ``Matrix(rows, columns)``, ``Matrix(size)`` for a square
    matrix, or ``Matrix()`` for a square matrix of ``settings.DEFAULT_SIZE``
    (4 unless configured). All elements start at 0.0.

    Examples:
        >>> m = Matrix.from_rows([[1, 2], [3, 4]])
        >>> m.get_determinant()
        -2.0
        >>> print(m.get_inverse())
        -2,1
        1.5,-0.5
    """

    model_config = ConfigDict(frozen=True)

    rows: PositiveInt = Field(description="Number of rows")
    columns: PositiveInt = Field(description="Number of columns")

    _slots: np.ndarray = PrivateAttr()

    # Keep NumPy scalars from broadcasting over a Matrix (np.float64(2) * m)
    __array_ufunc__ = None

    def __init__(self, rows: int | None = None, columns: int | None = None, **kwargs: Any) -> None:
        if rows is None:
            rows = settings.DEFAULT_SIZE
        if columns is None:
            columns = rows
        super().__init__(rows=rows, columns=columns, **kwargs)
        self._slots = np.zeros((self.rows, self.columns), dtype=DTYPE)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]] | np.ndarray) -> Matrix:
        """
        Build a matrix from a rectangular nested sequence.

        Args:
            rows: Nested rows of numbers (lists, tuples, or a 2-D ndarray)

        Returns:
            New Matrix holding a copy of the values

        Raises:
            DimensionMismatchError: If the rows are ragged, empty or not 2-D
        """
        grid = _as_array(rows)
        if grid.ndim != 2 or 0 in grid.shape:
            raise DimensionMismatchError(
                "Matrix rows must be a non-empty two-dimensional grid",
                actual=list(grid.shape),
            )
        return cls._from_array(grid)

    @classmethod
    def _from_array(cls, array: np.ndarray) -> Matrix:
        matrix = cls(array.shape[0], array.shape[1])
        matrix._slots[:, :] = array
        return matrix

    # Shape

    @property
    def size(self) -> int:
        """Total number of elements."""
        return self.rows * self.columns

    @property
    def shape(self) -> tuple[int, int]:
        """Matrix dimensions (rows, columns)."""
        return (self.rows, self.columns)

    @property
    def is_square(self) -> bool:
        return self.rows == self.columns

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self.rows:
            raise IndexOutOfRangeError("row", row, self.rows)

    def _check_column(self, column: int) -> None:
        if not 0 <= column < self.columns:
            raise IndexOutOfRangeError("column", column, self.columns)

    def _check_row_operand(self, row: int) -> None:
        if not 0 <= row < self.rows:
            raise RowRangeError(row, self.rows)

    # Element access

    def __getitem__(self, index: tuple[int, int] | int) -> float | list[float]:
        """Get element by (row, column), or a copy of a row by row index."""
        if isinstance(index, tuple):
            row, column = index
            self._check_row(row)
            self._check_column(column)
            return float(self._slots[row, column])
        return self.get_row(index)

    def __setitem__(self, index: tuple[int, int] | int, value: Any) -> None:
        """Set element by (row, column), or overwrite a whole row by row index."""
        if not isinstance(index, tuple):
            self.set_row(index, value)
            return
        row, column = index
        self._check_row(row)
        self._check_column(column)
        self._slots[row, column] = float(value)

    def get_row(self, row: int) -> list[float]:
        """Return a copy of the values in ``row``."""
        self._check_row(row)
        return self._slots[row, :].tolist()

    def get_column(self, column: int) -> list[float]:
        """Return a copy of the values in ``column``."""
        self._check_column(column)
        return self._slots[:, column].tolist()

    def set_row(self, row: int, values: Iterable[float]) -> None:
        """
        Overwrite a row.

        Raises:
            IndexOutOfRangeError: If ``row`` is outside the matrix
            DimensionMismatchError: If ``values`` does not hold exactly
                ``columns`` numbers; the matrix is left untouched
        """
        self._check_row(row)
        row_values = [float(value) for value in values]
        if len(row_values) != self.columns:
            raise DimensionMismatchError(
                "The number of values must be equal to the number of values in that row",
                expected=self.columns,
                actual=len(row_values),
            )
        self._slots[row, :] = row_values

    def set_column(self, column: int, values: Iterable[float]) -> None:
        """
        Overwrite a column.

        Raises:
            IndexOutOfRangeError: If ``column`` is outside the matrix
            DimensionMismatchError: If ``values`` does not hold exactly
                ``rows`` numbers; the matrix is left untouched
        """
        self._check_column(column)
        column_values = [float(value) for value in values]
        if len(column_values) != self.rows:
            raise DimensionMismatchError(
                "The number of values must be equal to the number of values in that column",
                expected=self.rows,
                actual=len(column_values),
            )
        self._slots[:, column] = column_values

    def set_values(self, *values: Any) -> None:
        """
        Overwrite every element.

        Accepts either a flat row-major sequence of ``size`` numbers (passed as
        one sequence or as separate arguments) or a nested grid whose shape is
        exactly ``(rows, columns)``.

        Raises:
            DimensionMismatchError: If the number of values or the grid shape
                does not match; nothing is written
        """
        if len(values) == 1 and not isinstance(values[0], numbers.Real):
            values = values[0]
        grid = _as_array(values)

        if grid.ndim == 1:
            if grid.size != self.size:
                raise DimensionMismatchError(
                    "The number of values must be equal to the number of elements in the Matrix",
                    expected=self.size,
                    actual=int(grid.size),
                )
            self._slots[:, :] = grid.reshape(self.rows, self.columns)
        elif grid.ndim == 2:
            if grid.shape != self.shape:
                raise DimensionMismatchError(
                    "The dimensions of values must be equal to the dimensions of the Matrix",
                    expected=list(self.shape),
                    actual=list(grid.shape),
                )
            self._slots[:, :] = grid
        else:
            raise DimensionMismatchError(
                "Matrix values must be a flat sequence or a two-dimensional grid",
                actual=list(grid.shape),
            )

    def get_values(self) -> list[float]:
        """Return a flat row-major copy of every element."""
        return self._slots.ravel().tolist()

    def clear(self) -> None:
        """Reset every element to 0.0."""
        self._slots.fill(0.0)

    # Row operations

    def swap_rows(self, row1: int, row2: int) -> None:
        """Exchange the contents of two rows."""
        self._check_row_operand(row1)
        self._check_row_operand(row2)
        self._slots[[row1, row2], :] = self._slots[[row2, row1], :]

    def multiply_row(self, row: int, scale_value: float) -> None:
        """Scale every element of ``row`` by ``scale_value``."""
        self._check_row_operand(row)
        self._slots[row, :] *= float(scale_value)

    def add_rows(self, from_row: int, to_row: int) -> None:
        """Add the values of ``from_row`` into ``to_row``, column by column."""
        self._check_row_operand(from_row)
        self._check_row_operand(to_row)
        self._slots[to_row, :] += self._slots[from_row, :]

    # Derived matrices

    def get_transposed(self) -> Matrix:
        """Return a new ``columns x rows`` matrix with rows and columns swapped."""
        return Matrix._from_array(self._slots.T)

    @property
    def transpose(self) -> Matrix:
        """Transpose as a property; same as get_transposed()."""
        return self.get_transposed()

    def clone(self) -> Matrix:
        """Return an independent copy with identical shape and values."""
        return Matrix._from_array(self._slots)

    def __copy__(self) -> Matrix:
        return self.clone()

    def __deepcopy__(self, memo: dict | None = None) -> Matrix:
        return self.clone()

    def map(self, func: Callable[[float], float]) -> Matrix:
        """
        Apply ``func`` to every element.

        Args:
            func: Pure function from value to value

        Returns:
            New matrix of the same shape holding ``func(value)`` for each element
        """
        result = Matrix(self.rows, self.columns)
        for row, column in np.ndindex(self.shape):
            result._slots[row, column] = float(func(float(self._slots[row, column])))
        return result

    def get_identity(self) -> Optional[Matrix]:
        """Identity matrix of the same order, or None if this matrix is not square."""
        if not self.is_square:
            return None
        return identity(self.rows)

    def get_determinant(self) -> Optional[float]:
        """Determinant by cofactor expansion, or None if not square."""
        from .cofactor import determinant

        return determinant(self)

    def is_singular(self) -> bool:
        """True when the determinant is exactly 0.0."""
        from .cofactor import is_singular

        return is_singular(self)

    def get_adjugate(self) -> Optional[Matrix]:
        """Transpose of the cofactor matrix, or None if not square."""
        from .cofactor import adjugate

        return adjugate(self)

    def get_inverse(self) -> Optional[Matrix]:
        """Inverse via the adjugate, or None if not square or singular."""
        from .cofactor import inverse

        return inverse(self)

    # Traversal

    def __iter__(self) -> Iterator[float]:  # type: ignore[override]
        """Yield every element lazily in row-major order."""
        for value in self._slots.flat:
            yield float(value)

    def __len__(self) -> int:
        return self.size

    def for_each(self, action: Callable[[float], Any]) -> None:
        """Call ``action`` once per element in row-major order."""
        for value in self:
            action(value)

    # Comparison

    def __eq__(self, other: Any) -> bool:
        """
        Exact structural equality.

        Raises:
            MatrixTypeError: If ``other`` is not a Matrix
        """
        if not isinstance(other, Matrix):
            raise MatrixTypeError(other)
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self._slots, other._slots))

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        # Sum of elements, each truncated toward zero; NaN and inf add 0
        return sum(int(value) if math.isfinite(value) else 0 for value in self)

    def is_close(
        self,
        other: Any,
        tolerance: float | None = None,
        mode: str | None = None,
    ) -> bool:
        """
        Compare element-wise within a tolerance.

        Unlike ``==`` this never raises: a non-matrix or a different shape
        simply compares unequal.

        Args:
            other: Value to compare against
            tolerance: Tolerance (defaults to settings.COMPARE_TOLERANCE)
            mode: ToleranceMode value (defaults to settings.COMPARE_MODE)
        """
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        tolerance = settings.COMPARE_TOLERANCE if tolerance is None else tolerance
        mode = settings.COMPARE_MODE if mode is None else mode
        return all(
            fuzzy_compare(a, b, tolerance, mode) for a, b in zip(self, other)
        )

    # Conversions

    def to_string(self) -> str:
        """Comma-separated values per row, newline-separated rows."""
        return "\n".join(
            ",".join(_format_value(value) for value in row)
            for row in self._slots.tolist()
        )

    def to_tex(self) -> str:
        """Convert to LaTeX (pmatrix)."""
        rows_tex = " \\\\ ".join(
            " & ".join(_format_value(value) for value in row)
            for row in self._slots.tolist()
        )
        return f"\\begin{{pmatrix}} {rows_tex} \\end{{pmatrix}}"

    def to_python(self) -> list[list[float]]:
        """Convert to a nested Python list."""
        return self._slots.tolist()

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the values as a NumPy array."""
        return self._slots.copy()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_python()})"

    # Arithmetic operators

    def _require_same_shape(self, other: Matrix) -> None:
        if self.shape != other.shape:
            raise DimensionMismatchError(
                "Matrices with incompatible dimensions cannot be operated upon",
                expected=list(self.shape),
                actual=list(other.shape),
            )

    def __add__(self, other: Any) -> Matrix:
        """Element-wise addition."""
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        return Matrix._from_array(self._slots + other._slots)

    def __sub__(self, other: Any) -> Matrix:
        """Element-wise subtraction."""
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        return Matrix._from_array(self._slots - other._slots)

    def __mul__(self, other: Any) -> Matrix:
        """Matrix multiplication or scalar multiplication."""
        if isinstance(other, Matrix):
            return self.__matmul__(other)
        if isinstance(other, numbers.Real):
            return Matrix._from_array(self._slots * float(other))
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        """Scalar on the left."""
        if isinstance(other, numbers.Real):
            return Matrix._from_array(float(other) * self._slots)
        return NotImplemented

    def __matmul__(self, other: Any) -> Matrix:
        """
        Standard matrix product.

        Raises:
            DimensionMismatchError: Unless ``self.columns == other.rows``
        """
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.columns != other.rows:
            raise DimensionMismatchError(
                f"Cannot multiply {self.shape} by {other.shape} matrices",
                expected=self.columns,
                actual=other.rows,
            )
        return Matrix._from_array(np.matmul(self._slots, other._slots))

    def __truediv__(self, other: Any) -> Matrix:
        """Scalar division."""
        if not isinstance(other, numbers.Real):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("Matrix division by zero")
        return Matrix._from_array(self._slots / float(other))

    def __neg__(self) -> Matrix:
        return Matrix._from_array(-self._slots)


def identity(dimensions: int | None = None) -> Matrix:
    """
    Identity matrix with ones on the diagonal.

    Args:
        dimensions: Order of the matrix (defaults to settings.DEFAULT_SIZE)
    """
    result = Matrix(dimensions)
    np.fill_diagonal(result._slots, 1.0)
    return result
