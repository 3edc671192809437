"""
Contract Validation Module

Модуль для валидации JSON контрактов matcalc.
"""

from .validators import (
    ContractValidator,
    MatrixContractValidator,
    SchemaLoader,
    matrix_from_payload,
    matrix_to_payload,
    validate_matrix_payload,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MatrixContractValidator",
    # Functions
    "validate_matrix_payload",
    "matrix_to_payload",
    "matrix_from_payload",
]
