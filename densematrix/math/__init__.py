"""
Matrix value type and the algorithms built on it.
"""

from .cofactor import adjugate, cofactor_matrix, determinant, inverse, is_singular, minor, submatrix
from .matrix import DTYPE, Matrix, identity
from .search import exists, find, find_all, index_of, true_for_all
from .value import ToleranceMode, fuzzy_compare

__all__ = [
    "DTYPE",
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
    "fuzzy_compare",
]
