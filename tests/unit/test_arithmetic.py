"""
Тесты для Arithmetic Operations

Проверяет:
1. add / subtract: поэлементно, DimensionMismatch при разных формах
2. scalar_multiply
3. multiply: форма результата, порядок накопления, DimensionMismatch
4. transpose: форма, transpose(transpose(A)) == A точно
5. Входные матрицы не изменяются
"""

import pytest

from matcalc.core.domain import DimensionMismatch, Matrix
from matcalc.core.math.arithmetic import (
    add,
    multiply,
    scalar_multiply,
    subtract,
    transpose,
)


@pytest.fixture
def a() -> Matrix:
    return Matrix.from_rows([[2, 0], [0, 2]])


@pytest.fixture
def b() -> Matrix:
    return Matrix.from_rows([[1, 1], [1, 1]])


# =============================================================================
# ТЕСТЫ: add / subtract
# =============================================================================


class TestAddSubtract:
    """Тесты поэлементных операций"""

    def test_add_scenario(self, a: Matrix, b: Matrix) -> None:
        """[[2,0],[0,2]] + [[1,1],[1,1]] = [[3,1],[1,3]]"""
        assert add(a, b).to_rows() == [[3.0, 1.0], [1.0, 3.0]]

    def test_subtract(self, a: Matrix, b: Matrix) -> None:
        assert subtract(a, b).to_rows() == [[1.0, -1.0], [-1.0, 1.0]]

    def test_add_rectangular(self) -> None:
        x = Matrix.from_rows([[1, 2, 3]])
        y = Matrix.from_rows([[10, 20, 30]])
        assert add(x, y).to_rows() == [[11.0, 22.0, 33.0]]

    @pytest.mark.parametrize("op,name", [(add, "add"), (subtract, "subtract")])
    def test_shape_mismatch(self, op, name: str) -> None:
        """Разные формы → DimensionMismatch с контекстом"""
        x = Matrix.from_rows([[1, 2], [3, 4]])
        y = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])

        with pytest.raises(DimensionMismatch, match=name) as exc_info:
            op(x, y)

        assert exc_info.value.left_shape == (2, 2)
        assert exc_info.value.right_shape == (2, 3)
        assert exc_info.value.operation == name

    def test_transposed_shape_is_mismatch(self) -> None:
        """2x3 и 3x2 имеют одинаковое число элементов, но не совместимы"""
        x = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        with pytest.raises(DimensionMismatch):
            add(x, transpose(x))

    def test_inputs_unchanged(self, a: Matrix, b: Matrix) -> None:
        a_before, b_before = a.clone(), b.clone()
        add(a, b)
        subtract(a, b)
        assert a == a_before
        assert b == b_before


# =============================================================================
# ТЕСТЫ: scalar_multiply
# =============================================================================


class TestScalarMultiply:
    """Тесты умножения на скаляр"""

    def test_scale(self) -> None:
        m = Matrix.from_rows([[1, -2], [3.5, 0]])
        assert scalar_multiply(m, 2.0).to_rows() == [[2.0, -4.0], [7.0, 0.0]]

    def test_zero_scalar(self) -> None:
        m = Matrix.from_rows([[1, 2, 3]])
        assert scalar_multiply(m, 0.0).to_rows() == [[0.0, 0.0, 0.0]]

    def test_shape_preserved(self) -> None:
        m = Matrix.from_rows([[1], [2], [3]])
        assert scalar_multiply(m, -1.0).shape == (3, 1)


# =============================================================================
# ТЕСТЫ: multiply
# =============================================================================


class TestMultiply:
    """Тесты матричного произведения"""

    def test_known_product(self) -> None:
        x = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        y = Matrix.from_rows([[7, 8], [9, 10], [11, 12]])

        result = multiply(x, y)

        assert result.shape == (2, 2)
        assert result.to_rows() == [[58.0, 64.0], [139.0, 154.0]]

    def test_result_shape(self) -> None:
        """(m x p) · (p x n) → m x n"""
        x = Matrix.from_rows([[1, 2, 3]])
        y = Matrix.from_rows([[1], [2], [3]])
        assert multiply(x, y).to_rows() == [[14.0]]
        assert multiply(y, x).shape == (3, 3)

    def test_mismatch_2x3_by_4x2(self) -> None:
        """2x3 · 4x2 → DimensionMismatch"""
        x = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        y = Matrix.from_rows([[1, 2], [3, 4], [5, 6], [7, 8]])

        with pytest.raises(DimensionMismatch, match="multiply") as exc_info:
            multiply(x, y)

        assert exc_info.value.left_shape == (2, 3)
        assert exc_info.value.right_shape == (4, 2)

    def test_plain_accumulation_order(self) -> None:
        """
        Накопление в порядке возрастания k обычным сложением double.

        ((1 + 1e100) + 1) - 1e100 = 0.0 при последовательном сложении;
        компенсированное суммирование дало бы 2.0.
        """
        row = Matrix.from_rows([[1.0, 1e100, 1.0, -1e100]])
        ones = Matrix.from_rows([[1.0], [1.0], [1.0], [1.0]])
        assert multiply(row, ones).get(0, 0) == 0.0

    def test_identity_is_neutral(self) -> None:
        from matcalc.core.domain import identity

        m = Matrix.from_rows([[1.5, -2.0, 3.25], [0.0, 4.0, -1.0]])
        assert multiply(m, identity(3)) == m
        assert multiply(identity(2), m) == m


# =============================================================================
# ТЕСТЫ: transpose
# =============================================================================


class TestTranspose:
    """Тесты транспонирования"""

    def test_shape_and_values(self) -> None:
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        t = transpose(m)
        assert t.shape == (3, 2)
        assert t.to_rows() == [[1.0, 4.0], [2.0, 5.0], [3.0, 6.0]]

    def test_double_transpose_exact(self) -> None:
        """transpose(transpose(A)) == A без дрейфа"""
        m = Matrix.from_rows([[0.1, 1 / 3, -2.7e-8], [1e300, float("inf"), 42.0]])
        assert transpose(transpose(m)) == m

    def test_single_element(self) -> None:
        m = Matrix.from_rows([[7.0]])
        assert transpose(m) == m
