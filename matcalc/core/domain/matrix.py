"""
Matrix — Модель плотной матрицы

Immutable Pydantic модель прямоугольной матрицы вещественных чисел.
Хранение: плоский row-major кортеж, элемент (i, j) лежит по индексу i*cols + j.

ИНВАРИАНТЫ:
1. rows >= 1, cols >= 1
2. len(data) == rows * cols (прямоугольность)
3. NaN/Inf допустимы на входе и пропагируют через операции (без clamp)
4. Матрица никогда не мутирует: любое изменение создаёт новый экземпляр
"""

import math
from typing import Sequence

from pydantic import BaseModel, Field, model_validator

from .errors import IndexOutOfRange, InvalidDimensions


# =============================================================================
# MATRIX MODEL
# =============================================================================


class Matrix(BaseModel):
    """
    Прямоугольная матрица double значений.

    Immutable модель (frozen=True). Все операции движка возвращают новые
    экземпляры, входные матрицы никогда не изменяются.
    """

    rows: int = Field(..., ge=1, description="Число строк")
    cols: int = Field(..., ge=1, description="Число столбцов")
    data: tuple[float, ...] = Field(..., description="Элементы в row-major порядке")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_rectangular(self) -> "Matrix":
        """Длина буфера должна совпадать с rows * cols."""
        expected = self.rows * self.cols
        if len(self.data) != expected:
            raise ValueError(
                f"data has {len(self.data)} elements, expected {expected} "
                f"for {self.rows}x{self.cols} matrix"
            )
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_flat(cls, rows: int, cols: int, data: Sequence[float]) -> "Matrix":
        """
        Быстрый конструктор для внутреннего использования алгоритмами.

        Пропускает pydantic валидацию: вызывающий код гарантирует
        rows, cols >= 1 и len(data) == rows * cols.
        """
        return cls.model_construct(rows=rows, cols=cols, data=tuple(data))

    @classmethod
    def from_rows(cls, values: Sequence[Sequence[float]]) -> "Matrix":
        """
        Построение матрицы из вложенных последовательностей.

        Raises:
            InvalidDimensions: Если вход пустой или строки разной длины
        """
        rows = len(values)
        cols = len(values[0]) if rows else 0
        if rows == 0 or cols == 0:
            raise InvalidDimensions(rows, cols, operation="from_rows")

        flat: list[float] = []
        for i, row in enumerate(values):
            if len(row) != cols:
                raise InvalidDimensions(
                    rows,
                    cols,
                    operation="from_rows",
                    reason=f"row {i} has {len(row)} elements",
                )
            flat.extend(float(v) for v in row)

        return cls.from_flat(rows, cols, flat)

    # -------------------------------------------------------------------------
    # Доступ к элементам
    # -------------------------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def _check_index(self, i: int, j: int, operation: str) -> None:
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexOutOfRange((i, j), self.shape, operation=operation)

    def get(self, i: int, j: int) -> float:
        """
        Элемент (i, j).

        Raises:
            IndexOutOfRange: Если i вне [0, rows) или j вне [0, cols)
        """
        self._check_index(i, j, "get")
        return self.data[i * self.cols + j]

    def with_value(self, i: int, j: int, value: float) -> "Matrix":
        """
        Копия матрицы с заменённым элементом (i, j).

        Raises:
            IndexOutOfRange: Если индекс вне диапазона
        """
        self._check_index(i, j, "with_value")
        data = list(self.data)
        data[i * self.cols + j] = float(value)
        return Matrix.from_flat(self.rows, self.cols, data)

    def row(self, i: int) -> tuple[float, ...]:
        """Строка i как кортеж."""
        if not 0 <= i < self.rows:
            raise IndexOutOfRange((i,), self.shape, operation="row")
        start = i * self.cols
        return self.data[start:start + self.cols]

    def to_rows(self) -> list[list[float]]:
        """Вложенные списки (копия), удобно для сравнения в тестах и сериализации."""
        return [list(self.row(i)) for i in range(self.rows)]

    def clone(self) -> "Matrix":
        """Глубокая копия: равная по значению, но отдельный объект."""
        return Matrix.from_flat(self.rows, self.cols, list(self.data))

    def is_finite(self) -> bool:
        """True если нет NaN/Inf элементов."""
        return all(math.isfinite(v) for v in self.data)


# =============================================================================
# ФАБРИКИ
# =============================================================================


def allocate(rows: int, cols: int, fill: float = 0.0) -> Matrix:
    """
    Выделение матрицы rows x cols, заполненной значением fill.

    Args:
        rows: Число строк (>= 1)
        cols: Число столбцов (>= 1)
        fill: Начальное значение элементов (default: 0.0)

    Returns:
        Новая матрица

    Raises:
        InvalidDimensions: Если rows <= 0 или cols <= 0

    Examples:
        >>> allocate(2, 3).shape
        (2, 3)
        >>> allocate(0, 3)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidDimensions: allocate: invalid dimensions 0x3
    """
    if rows <= 0 or cols <= 0:
        raise InvalidDimensions(rows, cols, operation="allocate")
    return Matrix.from_flat(rows, cols, [float(fill)] * (rows * cols))


def identity(n: int) -> Matrix:
    """Единичная матрица n x n."""
    if n <= 0:
        raise InvalidDimensions(n, n, operation="identity")
    data = [0.0] * (n * n)
    for i in range(n):
        data[i * n + i] = 1.0
    return Matrix.from_flat(n, n, data)
