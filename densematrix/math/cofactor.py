"""
Cofactor algorithms: submatrix extraction, determinant, minors, adjugate
and inverse.

The determinant is computed by recursive cofactor expansion along the first
row, so cost grows factorially with the matrix order. No pivoting is done
and singularity is an exact ``== 0.0`` test; a nearly singular matrix still
yields an inverse, with large and unreliable values.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from ..core.config import settings
from ..core.errors import DimensionMismatchError
from ..core.logging import get_context_logger
from .matrix import Matrix

logger = get_context_logger(__name__, component="cofactor")

CopyHook = Callable[[int, int, float], None]


def _check_removal(indices: Sequence[int], limit: int, axis: str) -> None:
    """Removal indices must be strictly increasing and inside [0, limit)."""
    previous = -1
    for index in indices:
        if not previous < index < limit:
            raise ValueError(
                f"{axis} indices to remove must be strictly increasing and in range "
                f"0..{limit - 1}, got {list(indices)}"
            )
        previous = index


def submatrix(
    matrix: Matrix,
    rows_to_remove: Sequence[int],
    columns_to_remove: Sequence[int],
    on_copy: Optional[CopyHook] = None,
) -> Matrix:
    """
    Copy of ``matrix`` with the given rows and columns removed.

    Each axis is scanned once with a cursor over its removal list, so both
    lists must be sorted ascending without duplicates.

    Args:
        matrix: Source matrix
        rows_to_remove: Ascending row indices to drop
        columns_to_remove: Ascending column indices to drop
        on_copy: Optional hook called as ``on_copy(row, column, value)`` with
            the destination position of every copied value

    Returns:
        New ``(rows - len(rows_to_remove)) x (columns - len(columns_to_remove))``
        matrix

    Raises:
        ValueError: If an index list is unsorted, repeats or is out of range
        DimensionMismatchError: If every row or every column would be removed
    """
    rows_to_remove = list(rows_to_remove)
    columns_to_remove = list(columns_to_remove)
    _check_removal(rows_to_remove, matrix.rows, "Row")
    _check_removal(columns_to_remove, matrix.columns, "Column")

    result_rows = matrix.rows - len(rows_to_remove)
    result_columns = matrix.columns - len(columns_to_remove)
    if result_rows < 1 or result_columns < 1:
        raise DimensionMismatchError(
            "A submatrix must keep at least one row and one column",
            expected=[1, 1],
            actual=[result_rows, result_columns],
        )

    result = Matrix(result_rows, result_columns)
    trace = settings.TRACE_SUBMATRIX

    row_cursor = 0
    target_row = 0
    for row in range(matrix.rows):
        if row_cursor < len(rows_to_remove) and row == rows_to_remove[row_cursor]:
            row_cursor += 1
            continue

        column_cursor = 0
        target_column = 0
        for column in range(matrix.columns):
            if column_cursor < len(columns_to_remove) and column == columns_to_remove[column_cursor]:
                column_cursor += 1
                continue

            value = matrix[row, column]
            if trace:
                logger.debug(
                    "submatrix copy",
                    extra_data={"row": target_row, "column": target_column, "value": value},
                )
            if on_copy is not None:
                on_copy(target_row, target_column, value)
            result[target_row, target_column] = value
            target_column += 1

        target_row += 1

    return result


def determinant(matrix: Matrix) -> Optional[float]:
    """
    Determinant by cofactor expansion along the first row.

    Returns:
        The determinant, or None if the matrix is not square
    """
    if not matrix.is_square:
        return None

    order = matrix.rows
    if order == 1:
        return matrix[0, 0]
    if order == 2:
        return matrix[0, 0] * matrix[1, 1] - matrix[0, 1] * matrix[1, 0]

    total = 0.0
    for column in range(order):
        term = matrix[0, column] * determinant(submatrix(matrix, [0], [column]))
        if column % 2 == 0:
            total += term
        else:
            total -= term
    return total


def is_singular(matrix: Matrix) -> bool:
    """True iff the determinant is exactly 0.0 (False for non-square matrices)."""
    return determinant(matrix) == 0.0


def _require_cofactor_order(matrix: Matrix) -> None:
    if not matrix.is_square or matrix.rows < 2:
        raise DimensionMismatchError(
            "Minors are defined for square matrices of order 2 or more",
            actual=list(matrix.shape),
        )


def minor(matrix: Matrix, row: int, column: int) -> float:
    """
    Determinant of ``matrix`` with ``row`` and ``column`` deleted.

    Raises:
        DimensionMismatchError: If the matrix is not square or is 1x1
        ValueError: If ``row`` or ``column`` is out of range
    """
    _require_cofactor_order(matrix)
    return determinant(submatrix(matrix, [row], [column]))


def cofactor_matrix(matrix: Matrix) -> Matrix:
    """
    Matrix of minors with the checkerboard sign ``(-1) ** (row + column)`` applied.

    Raises:
        DimensionMismatchError: If the matrix is not square or is 1x1
    """
    _require_cofactor_order(matrix)
    order = matrix.rows
    result = Matrix(order)
    for row in range(order):
        for column in range(order):
            value = minor(matrix, row, column)
            if (row + column) % 2 != 0:
                value = -value
            result[row, column] = value
    return result


def adjugate(matrix: Matrix) -> Optional[Matrix]:
    """
    Transpose of the cofactor matrix.

    Returns:
        The adjugate, or None if the matrix is not square
    """
    if not matrix.is_square:
        return None

    if matrix.rows == 1:
        return Matrix.from_rows([[1.0]])
    if matrix.rows == 2:
        return Matrix.from_rows([
            [matrix[1, 1], -matrix[0, 1]],
            [-matrix[1, 0], matrix[0, 0]],
        ])
    return cofactor_matrix(matrix).get_transposed()


def inverse(matrix: Matrix) -> Optional[Matrix]:
    """
    Inverse as ``adjugate * (1 / determinant)``.

    Returns:
        The inverse, or None if the matrix is not square or is singular
    """
    if not matrix.is_square:
        return None

    det = determinant(matrix)
    if det == 0.0:
        logger.debug("Matrix is singular; no inverse", extra_data={"shape": list(matrix.shape)})
        return None

    return (1.0 / det) * adjugate(matrix)
