"""
densematrix - a small dense matrix value type

- Arithmetic: +, -, scalar and matrix multiplication
- Row operations: swap, scale, add-into
- Transpose, identity, submatrix, determinant (cofactor expansion),
  inverse (adjugate method)
- Predicate search helpers and row-major iteration
"""

from .core.errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    MatrixError,
    MatrixTypeError,
    RowRangeError,
)
from .core.logging import setup_logging
from .math import (
    Matrix,
    ToleranceMode,
    adjugate,
    cofactor_matrix,
    determinant,
    exists,
    find,
    find_all,
    identity,
    index_of,
    inverse,
    is_singular,
    minor,
    submatrix,
    true_for_all,
)

__version__ = "1.0.0"

__all__ = [
    "Matrix",
    "identity",
    "submatrix",
    "determinant",
    "is_singular",
    "minor",
    "cofactor_matrix",
    "adjugate",
    "inverse",
    "exists",
    "true_for_all",
    "find",
    "find_all",
    "index_of",
    "ToleranceMode",
    "MatrixError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    "RowRangeError",
    "MatrixTypeError",
    "setup_logging",
]
