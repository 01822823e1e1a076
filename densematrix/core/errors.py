"""
Matrix exceptions.

Each error also derives from the builtin exception a caller would expect
(ValueError, IndexError, TypeError) so either can be caught.
"""

from typing import Any, Dict, Optional


class MatrixError(Exception):
    """Base exception for densematrix errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DimensionMismatchError(MatrixError, ValueError):
    """Raised when operand or argument shapes disagree"""

    def __init__(self, message: str, expected: Any = None, actual: Any = None):
        details = {}
        if expected is not None:
            details["expected"] = expected
        if actual is not None:
            details["actual"] = actual
        super().__init__(message=message, details=details)


class IndexOutOfRangeError(MatrixError, IndexError):
    """Raised when a row or column index is outside the matrix"""

    def __init__(self, axis: str, index: int, limit: int):
        super().__init__(
            message=f"The {axis} {index} does not exist in the matrix (valid range 0..{limit - 1})",
            details={"axis": axis, "index": index, "limit": limit}
        )


class RowRangeError(IndexOutOfRangeError):
    """Raised by row operations (swap, scale, add) for an invalid row"""

    def __init__(self, row: int, rows: int):
        super().__init__(axis="row", index=row, limit=rows)


class MatrixTypeError(MatrixError, TypeError):
    """Raised when a Matrix is compared against a non-matrix value"""

    def __init__(self, other: Any):
        super().__init__(
            message=f"Cannot compare Matrix and {type(other).__name__}",
            details={"other_type": type(other).__name__}
        )
