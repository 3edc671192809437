"""Render — табличный вывод матрицы для терминала.

Каждый элемент форматируется как %10.4g с пробелом после него, по одной
строке матрицы на строку текста. Цветовые полосы по модулю значения
чисто косметические:

    |v| > 100 → HUGE
    |v| > 10  → LARGE
    |v| > 1   → MEDIUM
    иначе     → SMALL
"""

from enum import Enum

from matcalc.core.domain.matrix import Matrix

CELL_FORMAT = "%10.4g"

_ANSI_RESET = "\033[0m"


class MagnitudeBand(str, Enum):
    """Полоса модуля значения."""

    HUGE = "HUGE"
    LARGE = "LARGE"
    MEDIUM = "MEDIUM"
    SMALL = "SMALL"


_BAND_COLORS = {
    MagnitudeBand.HUGE: "\033[31m",    # red
    MagnitudeBand.LARGE: "\033[33m",   # yellow
    MagnitudeBand.MEDIUM: "\033[32m",  # green
    MagnitudeBand.SMALL: "\033[36m",   # cyan
}


def classify_magnitude(value: float) -> MagnitudeBand:
    """Полоса для значения; NaN попадает в SMALL."""
    magnitude = abs(value)
    if magnitude > 100:
        return MagnitudeBand.HUGE
    if magnitude > 10:
        return MagnitudeBand.LARGE
    if magnitude > 1:
        return MagnitudeBand.MEDIUM
    return MagnitudeBand.SMALL


def render_matrix(matrix: Matrix, color: bool = False) -> str:
    """Табличное представление; color=True оборачивает ячейки в ANSI цвета."""
    lines = []
    for i in range(matrix.rows):
        cells = []
        for value in matrix.row(i):
            cell = CELL_FORMAT % value
            if color:
                cell = f"{_BAND_COLORS[classify_magnitude(value)]}{cell}{_ANSI_RESET}"
            cells.append(cell + " ")
        lines.append("".join(cells))
    return "\n".join(lines) + "\n"
