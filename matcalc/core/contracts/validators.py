"""
JSON Schema Contract Validators

Модуль для валидации JSON представления матриц согласно формальному
JSON Schema контракту. Использует библиотеку jsonschema.

Схемы:
- matrix.json (rows, cols, data как вложенные массивы строк)

JSON Schema не выражает связь между rows/cols и фактической длиной data,
поэтому matrix_from_payload дополнительно проверяет согласованность формы.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from matcalc.core.domain.errors import MatrixFormatError
from matcalc.core.domain.matrix import Matrix


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'matrix')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class MatrixContractValidator(ContractValidator):
    """Валидатор для matrix контракта."""

    def __init__(self):
        super().__init__("matrix")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_matrix_payload(data: Dict[str, Any]) -> None:
    """
    Валидация matrix payload против схемы.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MatrixContractValidator().validate(data)


def matrix_to_payload(matrix: Matrix) -> Dict[str, Any]:
    """
    Сериализация Matrix в JSON-совместимый dict.

    Returns:
        {"rows": int, "cols": int, "data": [[...], ...]}
    """
    return {
        "rows": matrix.rows,
        "cols": matrix.cols,
        "data": matrix.to_rows(),
    }


def matrix_from_payload(data: Dict[str, Any]) -> Matrix:
    """
    Построение Matrix из dict, прошедшего валидацию контракта.

    Raises:
        ValidationError: Если данные не соответствуют схеме
        MatrixFormatError: Если rows/cols не согласованы с data
    """
    validate_matrix_payload(data)

    rows, cols, values = data["rows"], data["cols"], data["data"]
    if len(values) != rows:
        raise MatrixFormatError(
            f"header declares {rows} rows, data has {len(values)}",
            operation="matrix_from_payload",
        )
    for i, row in enumerate(values):
        if len(row) != cols:
            raise MatrixFormatError(
                f"header declares {cols} cols, row {i} has {len(row)}",
                operation="matrix_from_payload",
            )

    return Matrix.from_rows(values)
