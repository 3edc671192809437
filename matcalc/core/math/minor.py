"""
Minor Extraction — Построение подматрицы без одной строки и одного столбца

Используется Determinant Engine (cofactor expansion).
Относительный порядок оставшихся строк и столбцов сохраняется: строки ниже
skip_row сдвигаются вверх, столбцы правее skip_col сдвигаются влево.
"""

from matcalc.core.domain.errors import IndexOutOfRange, InvalidDimensions
from matcalc.core.domain.matrix import Matrix


def minor(a: Matrix, skip_row: int, skip_col: int) -> Matrix:
    """
    Minor матрицы A: (n-1) x (n-1) подматрица без строки skip_row и столбца skip_col.

    Args:
        a: Квадратная матрица n x n, n >= 2
        skip_row: Удаляемая строка, 0 <= skip_row < n
        skip_col: Удаляемый столбец, 0 <= skip_col < n

    Returns:
        Новая матрица (n-1) x (n-1)

    Raises:
        InvalidDimensions: Если A не квадратная или n < 2
        IndexOutOfRange: Если skip_row или skip_col вне [0, n)

    Examples:
        >>> m = Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        >>> minor(m, 0, 1).to_rows()
        [[4.0, 6.0], [7.0, 9.0]]
    """
    n = a.rows
    if a.cols != n or n < 2:
        raise InvalidDimensions(
            a.rows,
            a.cols,
            operation="minor",
            reason="minor requires a square matrix of at least 2x2",
        )
    if not (0 <= skip_row < n and 0 <= skip_col < n):
        raise IndexOutOfRange((skip_row, skip_col), a.shape, operation="minor")

    data = a.data
    result: list[float] = []
    for i in range(n):
        if i == skip_row:
            continue
        base = i * n
        for j in range(n):
            if j == skip_col:
                continue
            result.append(data[base + j])

    return Matrix.from_flat(n - 1, n - 1, result)
