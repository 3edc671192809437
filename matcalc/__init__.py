"""
matcalc — dense matrix algebra engine.

Arithmetic, recursive Laplace determinant, Gauss-Jordan inversion with
partial pivoting, and a sparsity classifier over an immutable Matrix model.
"""

from matcalc.core.domain import (
    DimensionMismatch,
    IndexOutOfRange,
    InvalidDimensions,
    Matrix,
    MatrixError,
    MatrixFormatError,
    NotSquare,
    Singular,
    allocate,
    identity,
)
from matcalc.core.math import (
    add,
    cofactor,
    determinant,
    invert,
    is_sparse,
    laplace_expansion,
    minor,
    multiply,
    scalar_multiply,
    subtract,
    transpose,
    zero_fraction,
)

__version__ = "0.1.0"

__all__ = [
    # Model
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
    # Operations
    "add",
    "subtract",
    "multiply",
    "scalar_multiply",
    "transpose",
    "minor",
    "determinant",
    "cofactor",
    "laplace_expansion",
    "invert",
    "is_sparse",
    "zero_fraction",
]
