"""
Тесты для Sparsity Classifier

Проверяет:
1. Порог 0.6 (строгое >)
2. Порог нулевого элемента 1e-12 (строгое <)
3. NaN не считается нулём
4. Настраиваемые threshold и tol
"""

import pytest

from matcalc.core.domain import Matrix, allocate
from matcalc.core.math.sparsity import is_sparse, zero_fraction


def _matrix_with_zeros(n: int, zero_count: int) -> Matrix:
    """Матрица n x n: первые zero_count элементов нули, остальные единицы."""
    data = [0.0] * zero_count + [1.0] * (n * n - zero_count)
    return Matrix(rows=n, cols=n, data=tuple(data))


class TestIsSparse:
    """Тесты is_sparse"""

    def test_70_of_100_zeros_is_sparse(self) -> None:
        assert is_sparse(_matrix_with_zeros(10, 70))

    def test_50_of_100_zeros_is_not_sparse(self) -> None:
        assert not is_sparse(_matrix_with_zeros(10, 50))

    def test_exactly_threshold_is_not_sparse(self) -> None:
        """60% нулей: zero_fraction == 0.6, сравнение строгое"""
        assert not is_sparse(_matrix_with_zeros(10, 60))

    def test_just_above_threshold(self) -> None:
        assert is_sparse(_matrix_with_zeros(10, 61))

    def test_all_zero(self) -> None:
        assert is_sparse(allocate(3, 4))

    def test_no_zeros(self) -> None:
        assert not is_sparse(allocate(3, 4, fill=2.0))

    def test_custom_threshold(self) -> None:
        m = _matrix_with_zeros(10, 50)
        assert is_sparse(m, threshold=0.4)
        assert not is_sparse(m, threshold=0.5)


class TestZeroFraction:
    """Тесты zero_fraction"""

    def test_fraction(self) -> None:
        assert zero_fraction(_matrix_with_zeros(10, 70)) == 0.7

    def test_near_zero_counts(self) -> None:
        """|v| < 1e-12 считается нулём, |v| == 1e-12 — нет"""
        m = Matrix.from_rows([[1e-13, -1e-13, 1e-12, 1.0]])
        assert zero_fraction(m) == 0.5

    def test_nan_is_not_zero(self) -> None:
        m = Matrix.from_rows([[float("nan"), 0.0]])
        assert zero_fraction(m) == 0.5

    def test_custom_tol(self) -> None:
        m = Matrix.from_rows([[0.01, 0.5]])
        assert zero_fraction(m, tol=0.1) == 0.5

    @pytest.mark.parametrize("rows,cols", [(1, 1), (1, 7), (7, 1)])
    def test_degenerate_shapes(self, rows: int, cols: int) -> None:
        assert zero_fraction(allocate(rows, cols)) == 1.0
