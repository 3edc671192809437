"""
Domain models and value objects.

Contains the Matrix value object and the typed error taxonomy.
"""

from matcalc.core.domain.errors import (
    DimensionMismatch,
    IndexOutOfRange,
    InvalidDimensions,
    MatrixError,
    MatrixFormatError,
    NotSquare,
    Singular,
)
from matcalc.core.domain.matrix import Matrix, allocate, identity

__all__ = [
    # Matrix model
    "Matrix",
    "allocate",
    "identity",
    # Errors
    "MatrixError",
    "InvalidDimensions",
    "IndexOutOfRange",
    "DimensionMismatch",
    "NotSquare",
    "Singular",
    "MatrixFormatError",
]
