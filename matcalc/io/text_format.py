"""
Text Format — Текстовое представление матрицы

Формат (пробелы и переводы строк взаимозаменяемы):

    rows cols
    a00 a01 ... a0(cols-1)
    ...

При записи значения форматируются как %0.10g, по одной строке матрицы
на строку текста. nan/inf записываются и читаются как есть.
"""

import logging
from pathlib import Path
from typing import Union

from matcalc.core.domain.errors import InvalidDimensions, MatrixFormatError
from matcalc.core.domain.matrix import Matrix

logger = logging.getLogger(__name__)

VALUE_FORMAT = "%0.10g"

PathLike = Union[str, Path]


def parse_matrix(text: str) -> Matrix:
    """
    Разбор текста "rows cols" + rows*cols значений.

    Raises:
        MatrixFormatError: Нет заголовка, нечисловые/недостающие/лишние токены
        InvalidDimensions: rows <= 0 или cols <= 0
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise MatrixFormatError("missing 'rows cols' header", operation="parse_matrix")

    try:
        rows, cols = int(tokens[0]), int(tokens[1])
    except ValueError:
        raise MatrixFormatError(
            f"header must be two integers, got {tokens[0]!r} {tokens[1]!r}",
            operation="parse_matrix",
        ) from None

    if rows <= 0 or cols <= 0:
        raise InvalidDimensions(rows, cols, operation="parse_matrix")

    expected = rows * cols
    values = tokens[2:]
    if len(values) < expected:
        raise MatrixFormatError(
            f"expected {expected} values for {rows}x{cols} matrix, got {len(values)}",
            operation="parse_matrix",
        )
    if len(values) > expected:
        raise MatrixFormatError(
            f"unexpected trailing data after {expected} values",
            operation="parse_matrix",
            position=2 + expected,
        )

    data: list[float] = []
    for offset, token in enumerate(values):
        try:
            data.append(float(token))
        except ValueError:
            raise MatrixFormatError(
                f"invalid number {token!r}",
                operation="parse_matrix",
                position=2 + offset,
            ) from None

    return Matrix.from_flat(rows, cols, data)


def format_matrix(matrix: Matrix) -> str:
    """
    Сериализация в текстовый формат (заголовок + строки, %0.10g).

    Examples:
        >>> format_matrix(Matrix.from_rows([[1, 0.5], [2, 3]]))
        '2 2\\n1 0.5\\n2 3\\n'
    """
    lines = [f"{matrix.rows} {matrix.cols}"]
    for i in range(matrix.rows):
        lines.append(" ".join(VALUE_FORMAT % v for v in matrix.row(i)))
    return "\n".join(lines) + "\n"


def load_matrix(path: PathLike) -> Matrix:
    """Чтение матрицы из файла в текстовом формате."""
    path = Path(path)
    matrix = parse_matrix(path.read_text(encoding="utf-8"))
    logger.info("Loaded %dx%d matrix from %s", matrix.rows, matrix.cols, path)
    return matrix


def save_matrix(matrix: Matrix, path: PathLike) -> None:
    """Запись матрицы в файл в текстовом формате."""
    path = Path(path)
    path.write_text(format_matrix(matrix), encoding="utf-8")
    logger.info("Saved %dx%d matrix to %s", matrix.rows, matrix.cols, path)
