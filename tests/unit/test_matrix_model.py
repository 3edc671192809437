"""
Тесты для модели Matrix

Проверяет:
1. allocate / identity / from_rows и ошибки размеров
2. Доступ к элементам с проверкой границ
3. Immutability (frozen=True) и value-семантику (with_value, clone)
4. Валидацию прямоугольности pydantic моделью
5. Допустимость NaN/Inf на входе
"""

import math

import pytest
from pydantic import ValidationError

from matcalc.core.domain import (
    IndexOutOfRange,
    InvalidDimensions,
    Matrix,
    MatrixError,
    allocate,
    identity,
)


# =============================================================================
# ТЕСТЫ КОНСТРУКТОРОВ
# =============================================================================


class TestAllocate:
    """Тесты allocate"""

    def test_zero_filled_by_default(self) -> None:
        """По умолчанию матрица заполнена нулями"""
        m = allocate(2, 3)
        assert m.shape == (2, 3)
        assert m.data == (0.0,) * 6

    def test_custom_fill(self) -> None:
        """Значение fill применяется ко всем элементам"""
        m = allocate(3, 2, fill=1.5)
        assert all(v == 1.5 for v in m.data)
        assert len(m.data) == 6

    @pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-1, 2), (0, 0)])
    def test_non_positive_dimensions_raise(self, rows: int, cols: int) -> None:
        """rows <= 0 или cols <= 0 → InvalidDimensions"""
        with pytest.raises(InvalidDimensions, match="invalid dimensions") as exc_info:
            allocate(rows, cols)

        assert exc_info.value.rows == rows
        assert exc_info.value.cols == cols
        assert exc_info.value.operation == "allocate"

    def test_invalid_dimensions_is_value_error(self) -> None:
        """InvalidDimensions ловится как ValueError и MatrixError"""
        with pytest.raises(ValueError):
            allocate(0, 1)
        with pytest.raises(MatrixError):
            allocate(0, 1)


class TestIdentity:
    """Тесты identity"""

    @pytest.mark.parametrize("n", [1, 2, 3, 5])
    def test_diagonal_ones(self, n: int) -> None:
        """Единицы на диагонали, нули вне её"""
        m = identity(n)
        for i in range(n):
            for j in range(n):
                assert m.get(i, j) == (1.0 if i == j else 0.0)

    def test_zero_size_raises(self) -> None:
        with pytest.raises(InvalidDimensions):
            identity(0)


class TestFromRows:
    """Тесты Matrix.from_rows"""

    def test_nested_lists(self) -> None:
        """Вложенные списки → row-major буфер"""
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        assert m.shape == (2, 3)
        assert m.data == (1.0, 2.0, 3.0, 4.0, 5.0, 6.0)

    def test_values_converted_to_float(self) -> None:
        """Целые значения приводятся к float"""
        m = Matrix.from_rows([[1, 2]])
        assert all(isinstance(v, float) for v in m.data)

    def test_ragged_rows_raise(self) -> None:
        """Строки разной длины → InvalidDimensions"""
        with pytest.raises(InvalidDimensions, match="row 1 has 1 elements"):
            Matrix.from_rows([[1, 2], [3]])

    @pytest.mark.parametrize("values", [[], [[]]])
    def test_empty_raises(self, values) -> None:
        """Пустой вход → InvalidDimensions"""
        with pytest.raises(InvalidDimensions):
            Matrix.from_rows(values)

    def test_to_rows_roundtrip(self) -> None:
        rows = [[1.0, -2.5], [0.0, 4.0], [7.0, 8.0]]
        assert Matrix.from_rows(rows).to_rows() == rows


class TestPydanticValidation:
    """Тесты валидации при прямом создании модели"""

    def test_valid_direct_construction(self) -> None:
        m = Matrix(rows=2, cols=2, data=(1, 2, 3, 4))
        assert m.data == (1.0, 2.0, 3.0, 4.0)

    def test_data_length_mismatch_rejected(self) -> None:
        """len(data) != rows * cols → ValidationError"""
        with pytest.raises(ValidationError, match="expected 4"):
            Matrix(rows=2, cols=2, data=(1.0, 2.0, 3.0))

    def test_non_positive_rows_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Matrix(rows=0, cols=2, data=())

    def test_nan_and_inf_allowed(self) -> None:
        """NaN/Inf — допустимые входные значения"""
        m = Matrix(rows=1, cols=2, data=(float("nan"), float("inf")))
        assert math.isnan(m.get(0, 0))
        assert math.isinf(m.get(0, 1))
        assert not m.is_finite()

    def test_finite_matrix(self) -> None:
        assert allocate(2, 2, fill=3.0).is_finite()


# =============================================================================
# ТЕСТЫ ДОСТУПА К ЭЛЕМЕНТАМ
# =============================================================================


@pytest.fixture
def sample() -> Matrix:
    """Матрица 2x3 с различимыми элементами."""
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6]])


class TestElementAccess:
    """Тесты get / row / with_value"""

    def test_get_row_major(self, sample: Matrix) -> None:
        assert sample.get(0, 0) == 1.0
        assert sample.get(0, 2) == 3.0
        assert sample.get(1, 0) == 4.0
        assert sample.get(1, 2) == 6.0

    @pytest.mark.parametrize("i,j", [(2, 0), (0, 3), (-1, 0), (0, -1), (5, 5)])
    def test_get_out_of_range(self, sample: Matrix, i: int, j: int) -> None:
        """Индексы вне [0, rows) x [0, cols) → IndexOutOfRange"""
        with pytest.raises(IndexOutOfRange) as exc_info:
            sample.get(i, j)

        assert exc_info.value.index == (i, j)
        assert exc_info.value.shape == (2, 3)

    def test_index_out_of_range_is_index_error(self, sample: Matrix) -> None:
        with pytest.raises(IndexError):
            sample.get(9, 9)

    def test_row(self, sample: Matrix) -> None:
        assert sample.row(1) == (4.0, 5.0, 6.0)
        with pytest.raises(IndexOutOfRange):
            sample.row(2)

    def test_with_value_returns_new_matrix(self, sample: Matrix) -> None:
        """with_value не изменяет исходную матрицу"""
        updated = sample.with_value(1, 1, 50.0)

        assert updated.get(1, 1) == 50.0
        assert sample.get(1, 1) == 5.0
        assert updated is not sample

    def test_with_value_out_of_range(self, sample: Matrix) -> None:
        with pytest.raises(IndexOutOfRange, match="with_value"):
            sample.with_value(0, 3, 1.0)


# =============================================================================
# ТЕСТЫ IMMUTABILITY
# =============================================================================


class TestImmutability:
    """Тесты frozen модели и clone"""

    def test_frozen(self, sample: Matrix) -> None:
        """Присваивание атрибутов запрещено"""
        with pytest.raises(ValidationError):
            sample.rows = 5

    def test_clone_equal_but_distinct(self, sample: Matrix) -> None:
        copy = sample.clone()
        assert copy == sample
        assert copy is not sample

    def test_shape_and_square(self) -> None:
        assert allocate(3, 3).is_square
        assert not allocate(2, 3).is_square
        assert allocate(2, 3).shape == (2, 3)
