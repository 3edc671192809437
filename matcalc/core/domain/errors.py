"""
Matrix Errors — Типизированная таксономия ошибок

Каждая ошибка движка сообщается вызывающему коду как типизированное исключение
с контекстом (имя операции, размеры), достаточным для человекочитаемого
сообщения. Частично посчитанная матрица при ошибке никогда не возвращается.

Иерархия:
    MatrixError
    ├── InvalidDimensions   (ValueError)      — rows/cols <= 0, неквадратный minor
    ├── IndexOutOfRange     (IndexError)      — доступ за границами
    ├── DimensionMismatch   (ValueError)      — несовместимые формы для +, -, *
    ├── NotSquare           (ValueError)      — det/inverse на неквадратной матрице
    ├── Singular            (ArithmeticError) — pivot < tol при обращении
    └── MatrixFormatError   (ValueError)      — некорректный текст/JSON payload
"""

from typing import Optional


Shape = tuple[int, int]


class MatrixError(Exception):
    """Базовый класс всех ошибок matcalc."""

    def __init__(self, message: str, operation: str = ""):
        super().__init__(message)
        self.operation = operation


class InvalidDimensions(MatrixError, ValueError):
    """Недопустимые размеры матрицы (rows <= 0 или cols <= 0)."""

    def __init__(self, rows: int, cols: int, operation: str = "allocate", reason: str = ""):
        message = f"{operation}: invalid dimensions {rows}x{cols}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, operation)
        self.rows = rows
        self.cols = cols


class IndexOutOfRange(MatrixError, IndexError):
    """Индекс элемента вне диапазона [0, rows) x [0, cols)."""

    def __init__(self, index: tuple[int, ...], shape: Shape, operation: str = "get"):
        super().__init__(
            f"{operation}: index {index} out of range for {shape[0]}x{shape[1]} matrix",
            operation,
        )
        self.index = index
        self.shape = shape


class DimensionMismatch(MatrixError, ValueError):
    """Формы операндов несовместимы для операции."""

    def __init__(self, left_shape: Shape, right_shape: Shape, operation: str):
        super().__init__(
            f"{operation}: incompatible shapes "
            f"{left_shape[0]}x{left_shape[1]} and {right_shape[0]}x{right_shape[1]}",
            operation,
        )
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquare(MatrixError, ValueError):
    """Операция определена только для квадратных матриц."""

    def __init__(self, shape: Shape, operation: str):
        super().__init__(
            f"{operation}: requires a square matrix, got {shape[0]}x{shape[1]}",
            operation,
        )
        self.shape = shape


class Singular(MatrixError, ArithmeticError):
    """
    Матрица вырождена: |pivot| < tol в столбце column.

    Рабочий augmented буфер при этом полностью отбрасывается.
    """

    def __init__(self, column: int, pivot: float, tol: float, operation: str = "invert"):
        super().__init__(
            f"{operation}: matrix is singular "
            f"(|pivot|={abs(pivot):.3e} < {tol:.1e} in column {column})",
            operation,
        )
        self.column = column
        self.pivot = pivot
        self.tol = tol


class MatrixFormatError(MatrixError, ValueError):
    """Некорректное текстовое или JSON представление матрицы."""

    def __init__(self, message: str, operation: str = "parse", position: Optional[int] = None):
        if position is not None:
            message = f"{message} (token {position})"
        super().__init__(f"{operation}: {message}", operation)
        self.position = position
