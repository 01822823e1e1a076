"""
Core infrastructure: configuration, logging and error types.
"""

from .config import Settings, get_settings, settings
from .errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    MatrixError,
    MatrixTypeError,
    RowRangeError,
)
from .logging import get_context_logger, get_logger, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "MatrixError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    "RowRangeError",
    "MatrixTypeError",
    "get_logger",
    "get_context_logger",
    "setup_logging",
]
