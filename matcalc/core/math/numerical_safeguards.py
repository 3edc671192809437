"""
Numerical Safeguards — Epsilon-параметры и сравнения float

Модуль задаёт все численные пороги движка и примитивы сравнения:
- Epsilon-пороги для pivot, нулевых элементов и determinant pre-check
- Epsilon-сравнения float с учётом машинной точности
- Поэлементное сравнение матриц
- Валидация параметров конфигурации

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf не подменяются: они пропагируют через операции движка
2. Проверка "близко к нулю" строгая: abs(value) < eps
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

from matcalc.core.domain.matrix import Matrix

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Минимальный допустимый |pivot| при Gauss-Jordan обращении
# |pivot| < EPS_PIVOT → матрица вырождена (Singular)
EPS_PIVOT: Final[float] = 1e-12

# Порог "нулевого" элемента для классификатора разреженности
EPS_ZERO: Final[float] = 1e-12

# Порог determinant pre-check перед обращением
EPS_DETERMINANT: Final[float] = 1e-12

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Доля нулевых элементов, выше которой матрица считается разреженной
SPARSITY_THRESHOLD: Final[float] = 0.6


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def is_near_zero(value: float, eps: float = EPS_ZERO) -> bool:
    """
    Строгая проверка близости к нулю: abs(value) < eps.

    NaN никогда не считается нулём (сравнение с NaN всегда False).

    Examples:
        >>> is_near_zero(1e-13)
        True
        >>> is_near_zero(1e-12)
        False
        >>> is_near_zero(float('nan'))
        False
    """
    return abs(value) < eps


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def matrices_close(
    a: Matrix,
    b: Matrix,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Поэлементное сравнение матриц с толерантностью.

    Матрицы разной формы никогда не равны.

    Args:
        a: Первая матрица
        b: Вторая матрица
        rel_tol: Относительная толерантность
        abs_tol: Абсолютная толерантность (например, 1e-9 для проверки A·A⁻¹ = I)

    Returns:
        True если формы совпадают и все элементы близки
    """
    if a.shape != b.shape:
        return False
    return all(
        is_close(x, y, rel_tol=rel_tol, abs_tol=abs_tol)
        for x, y in zip(a.data, b.data)
    )


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение положительное и конечное.

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Валидация, что значение в заданном диапазоне.

    Raises:
        ValueError: Если value вне диапазона или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
