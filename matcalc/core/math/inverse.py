"""
Inverse Engine — Обращение Gauss-Jordan с частичным выбором ведущего элемента

Рабочий буфер — augmented матрица [A | I] размера n x 2n, локальная для вызова.
Для каждого столбца col = 0..n-1:

1. Pivot search: строка r в [col, n) с максимальным |aug[r][col]|
   (строгое сравнение >, при равенстве остаётся строка с меньшим индексом)
2. Singularity check: |pivot| < tol → Singular, буфер отбрасывается
3. Row swap: строка col ↔ строка pivot (перестановка ссылок на строки)
4. Normalization: вся строка col (2n элементов) делится на pivot
5. Elimination: для каждой строки r != col с ненулевым factor = aug[r][col]
   row_r -= factor · row_col по всем 2n столбцам

Результат — правая половина буфера: inv[i][j] = aug[i][j + n].
Правый блок начинается с I и получает те же преобразования, что и левый,
поэтому результат — полная обратная матрица.
"""

import logging
from typing import Optional

from matcalc.core.domain.errors import NotSquare, Singular
from matcalc.core.domain.matrix import Matrix
from matcalc.core.math.numerical_safeguards import EPS_PIVOT
from matcalc.core.math.tracing import TraceEvent, TraceEventKind, TraceObserver

logger = logging.getLogger(__name__)


def _augment_identity(a: Matrix) -> list[list[float]]:
    n = a.rows
    aug = []
    for i in range(n):
        row = list(a.data[i * n:(i + 1) * n])
        row.extend(1.0 if j == i else 0.0 for j in range(n))
        aug.append(row)
    return aug


def invert(
    a: Matrix,
    tol: float = EPS_PIVOT,
    observer: Optional[TraceObserver] = None,
) -> Matrix:
    """
    Обратная матрица методом Gauss-Jordan с partial pivoting.

    Вырожденность определяется самостоятельно по величине pivot, независимо
    от determinant pre-check вызывающего кода. На пограничных матрицах эти
    две проверки могут расходиться.

    Args:
        a: Квадратная матрица n x n
        tol: Минимальный допустимый |pivot| (default: EPS_PIVOT = 1e-12)
        observer: Необязательный callback для контрольных точек
            (PIVOT_SELECTED, ROW_SWAPPED, ROW_NORMALIZED, ROW_ELIMINATED)

    Returns:
        Новая матрица A⁻¹

    Raises:
        NotSquare: Если a.rows != a.cols
        Singular: Если на каком-либо шаге |pivot| < tol

    Examples:
        >>> invert(Matrix.from_rows([[2, 0], [0, 2]])).to_rows()
        [[0.5, 0.0], [0.0, 0.5]]
    """
    if not a.is_square:
        raise NotSquare(a.shape, "invert")

    n = a.rows
    width = 2 * n
    aug = _augment_identity(a)
    logger.debug("invert: n=%d tol=%g", n, tol)

    for col in range(n):
        # 1. Pivot search
        pivot_row = col
        max_abs = abs(aug[col][col])
        for r in range(col + 1, n):
            value = abs(aug[r][col])
            if value > max_abs:
                max_abs = value
                pivot_row = r

        pivot = aug[pivot_row][col]
        if observer is not None:
            observer(TraceEvent(TraceEventKind.PIVOT_SELECTED, row=pivot_row, column=col, value=pivot))

        # 2. Singularity check
        # NaN pivot не проходит abs(pivot) < tol и пропагирует в результат
        if abs(pivot) < tol:
            logger.debug("invert: singular at column %d, pivot=%r", col, pivot)
            raise Singular(col, pivot, tol)

        # 3. Row swap
        if pivot_row != col:
            aug[col], aug[pivot_row] = aug[pivot_row], aug[col]
            if observer is not None:
                observer(
                    TraceEvent(
                        TraceEventKind.ROW_SWAPPED,
                        row=pivot_row,
                        column=col,
                        details=f"swap rows {col} <-> {pivot_row}",
                    )
                )

        # 4. Normalization
        pivot_vals = aug[col]
        for j in range(width):
            pivot_vals[j] /= pivot
        if observer is not None:
            observer(TraceEvent(TraceEventKind.ROW_NORMALIZED, row=col, column=col, value=pivot))

        # 5. Elimination
        for r in range(n):
            if r == col:
                continue
            target = aug[r]
            factor = target[col]
            if factor == 0.0:
                continue
            for j in range(width):
                target[j] -= factor * pivot_vals[j]
            if observer is not None:
                observer(TraceEvent(TraceEventKind.ROW_ELIMINATED, row=r, column=col, value=factor))

    result: list[float] = []
    for i in range(n):
        result.extend(aug[i][n:])
    return Matrix.from_flat(n, n, result)
