"""
Arithmetic — Поэлементные операции, умножение и транспонирование

Чистые функции над Matrix: входные матрицы не изменяются, результат всегда
новая матрица.

ФОРМУЛЫ:
    add:       C[i][j] = A[i][j] + B[i][j]
    subtract:  C[i][j] = A[i][j] - B[i][j]
    scalar:    C[i][j] = A[i][j] * k
    multiply:  C[i][j] = Σ_{k=0}^{A.cols-1} A[i][k] * B[k][j]
    transpose: C[j][i] = A[i][j]
"""

from matcalc.core.domain.errors import DimensionMismatch
from matcalc.core.domain.matrix import Matrix


def _require_same_shape(a: Matrix, b: Matrix, operation: str) -> None:
    if a.shape != b.shape:
        raise DimensionMismatch(a.shape, b.shape, operation)


def add(a: Matrix, b: Matrix) -> Matrix:
    """
    Поэлементная сумма A + B.

    Raises:
        DimensionMismatch: Если формы A и B различаются
    """
    _require_same_shape(a, b, "add")
    return Matrix.from_flat(a.rows, a.cols, [x + y for x, y in zip(a.data, b.data)])


def subtract(a: Matrix, b: Matrix) -> Matrix:
    """
    Поэлементная разность A - B.

    Raises:
        DimensionMismatch: Если формы A и B различаются
    """
    _require_same_shape(a, b, "subtract")
    return Matrix.from_flat(a.rows, a.cols, [x - y for x, y in zip(a.data, b.data)])


def scalar_multiply(a: Matrix, k: float) -> Matrix:
    """Умножение на скаляр k. Всегда успешно."""
    return Matrix.from_flat(a.rows, a.cols, [x * k for x in a.data])


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Матричное произведение A · B.

    Сумма накапливается с 0.0 в порядке возрастания k обычным сложением
    double: результат воспроизводим бит-в-бит. Встроенный sum() не
    используется, так как начиная с Python 3.12 он компенсирует ошибку
    округления для float.

    Args:
        a: Матрица m x p
        b: Матрица p x n

    Returns:
        Матрица m x n

    Raises:
        DimensionMismatch: Если a.cols != b.rows
    """
    if a.cols != b.rows:
        raise DimensionMismatch(a.shape, b.shape, "multiply")

    m, p, n = a.rows, a.cols, b.cols
    a_data, b_data = a.data, b.data
    result = [0.0] * (m * n)

    for i in range(m):
        a_row = i * p
        for j in range(n):
            acc = 0.0
            for k in range(p):
                acc += a_data[a_row + k] * b_data[k * n + j]
            result[i * n + j] = acc

    return Matrix.from_flat(m, n, result)


def transpose(a: Matrix) -> Matrix:
    """
    Транспонирование: результат cols x rows.

    Только перестановка элементов, поэтому transpose(transpose(A)) == A точно.
    """
    rows, cols = a.rows, a.cols
    data = a.data
    return Matrix.from_flat(
        cols,
        rows,
        [data[i * cols + j] for j in range(cols) for i in range(rows)],
    )
