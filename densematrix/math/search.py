"""
Predicate and search utilities over a Matrix.

All functions scan in row-major order and stop at the first decisive element.
"""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from .matrix import Matrix

Predicate = Callable[[float], bool]


def exists(matrix: Matrix, predicate: Predicate) -> bool:
    """True if any element satisfies ``predicate``."""
    return any(predicate(value) for value in matrix)


def true_for_all(matrix: Matrix, predicate: Predicate) -> bool:
    """True if every element satisfies ``predicate``."""
    return all(predicate(value) for value in matrix)


def find(matrix: Matrix, predicate: Predicate) -> Optional[float]:
    """First element satisfying ``predicate``, or None."""
    return next((value for value in matrix if predicate(value)), None)


def find_all(matrix: Matrix, predicate: Predicate) -> list[float]:
    """Every element satisfying ``predicate``, in scan order."""
    return [value for value in matrix if predicate(value)]


def index_of(matrix: Matrix, value: float) -> Optional[list[int]]:
    """
    Position of the first element exactly equal to ``value``.

    Returns:
        ``[row, column]``, or None if no element matches
    """
    for row, column in np.ndindex(matrix.shape):
        if matrix[row, column] == value:
            return [row, column]
    return None
