"""
Determinant Engine — Рекурсивное разложение Лапласа

Определитель вычисляется cofactor expansion по строке 0:

    det(A) = Σ_{c=0}^{n-1} (-1)^c · A[0][c] · det(minor(A, 0, c))

Базовые случаи:
    n = 1: det = A[0][0]
    n = 2: det = A[0][0]·A[1][1] - A[0][1]·A[1][0]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Суммирование строго в порядке возрастания c (фиксирует округление)
2. Знак cofactor по чётности столбца: строка разложения всегда 0
3. Сложность O(n!): на практике не более ~10x10 в интерактивном режиме
4. Единственная ошибка — NotSquare на входе; minor всегда квадратный

Для разложения по произвольной строке r (laplace_expansion) знак
становится (-1)^(r+c).
"""

import logging
from typing import Optional

from matcalc.core.domain.errors import IndexOutOfRange, NotSquare
from matcalc.core.domain.matrix import Matrix
from matcalc.core.math.minor import minor
from matcalc.core.math.tracing import TraceEvent, TraceEventKind, TraceObserver

logger = logging.getLogger(__name__)


# =============================================================================
# DETERMINANT
# =============================================================================


def determinant(a: Matrix, observer: Optional[TraceObserver] = None) -> float:
    """
    Определитель квадратной матрицы (рекурсивный Laplace по строке 0).

    Args:
        a: Квадратная матрица n x n
        observer: Необязательный callback для контрольных точек
            (MINOR_EXTRACTED, COFACTOR_ACCUMULATED)

    Returns:
        det(A); NaN/Inf во входе пропагируют в результат

    Raises:
        NotSquare: Если a.rows != a.cols

    Examples:
        >>> determinant(Matrix.from_rows([[2, 0], [0, 2]]))
        4.0
        >>> determinant(Matrix.from_rows([[1, 2, 3], [0, 1, 4], [5, 6, 0]]))
        1.0
    """
    if not a.is_square:
        raise NotSquare(a.shape, "determinant")

    logger.debug("determinant: n=%d", a.rows)
    return _laplace_row0(a, 0, observer)


def _laplace_row0(a: Matrix, depth: int, observer: Optional[TraceObserver]) -> float:
    n = a.rows
    d = a.data

    if n == 1:
        return d[0]
    if n == 2:
        return d[0] * d[3] - d[1] * d[2]

    det = 0.0
    for c in range(n):
        m = minor(a, 0, c)
        if observer is not None:
            observer(TraceEvent(TraceEventKind.MINOR_EXTRACTED, depth=depth, row=0, column=c))

        sub_det = _laplace_row0(m, depth + 1, observer)
        sign = 1.0 if c % 2 == 0 else -1.0
        term = sign * d[c] * sub_det
        det += term

        if observer is not None:
            observer(
                TraceEvent(
                    TraceEventKind.COFACTOR_ACCUMULATED,
                    depth=depth,
                    row=0,
                    column=c,
                    value=term,
                    details=f"partial={det!r}",
                )
            )

    return det


# =============================================================================
# COFACTOR / ПРОИЗВОЛЬНАЯ СТРОКА
# =============================================================================


def cofactor(a: Matrix, row: int, col: int) -> float:
    """
    Алгебраическое дополнение C[row][col] = (-1)^(row+col) · det(minor(A, row, col)).

    Для матрицы 1x1 minor пуст, и cofactor по соглашению равен 1.0.

    Raises:
        NotSquare: Если A не квадратная
        IndexOutOfRange: Если row или col вне [0, n)
    """
    if not a.is_square:
        raise NotSquare(a.shape, "cofactor")
    if not (0 <= row < a.rows and 0 <= col < a.cols):
        raise IndexOutOfRange((row, col), a.shape, operation="cofactor")
    if a.rows == 1:
        return 1.0

    sign = 1.0 if (row + col) % 2 == 0 else -1.0
    return sign * determinant(minor(a, row, col))


def laplace_expansion(a: Matrix, row: int) -> float:
    """
    Определитель разложением по фиксированной строке row.

        det(A) = Σ_c (-1)^(row+c) · A[row][c] · det(minor(A, row, c))

    Для row = 0 совпадает с determinant(). Используется для перекрёстной
    проверки результата по разным строкам.

    Raises:
        NotSquare: Если A не квадратная
        IndexOutOfRange: Если row вне [0, n)
    """
    if not a.is_square:
        raise NotSquare(a.shape, "laplace_expansion")
    n = a.rows
    if not 0 <= row < n:
        raise IndexOutOfRange((row,), a.shape, operation="laplace_expansion")
    if n == 1:
        return a.data[0]

    det = 0.0
    for c in range(n):
        sign = 1.0 if (row + c) % 2 == 0 else -1.0
        det += sign * a.data[row * n + c] * determinant(minor(a, row, c))
    return det
