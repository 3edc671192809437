"""I/O boundary — текстовый формат матриц и табличный вывод."""

from .render import MagnitudeBand, classify_magnitude, render_matrix
from .text_format import format_matrix, load_matrix, parse_matrix, save_matrix

__all__ = [
    "MagnitudeBand",
    "classify_magnitude",
    "render_matrix",
    "parse_matrix",
    "format_matrix",
    "load_matrix",
    "save_matrix",
]
