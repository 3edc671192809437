"""
Sparsity Classifier — Доля нулевых элементов

    zero_fraction = #{ |a_ij| < tol } / (rows * cols)
    is_sparse     = zero_fraction > threshold   (строго, threshold = 0.6)

NaN не считается нулём.
"""

from matcalc.core.domain.matrix import Matrix
from matcalc.core.math.numerical_safeguards import EPS_ZERO, SPARSITY_THRESHOLD, is_near_zero


def zero_fraction(a: Matrix, tol: float = EPS_ZERO) -> float:
    """Доля элементов с |value| < tol."""
    zero_count = sum(1 for v in a.data if is_near_zero(v, tol))
    return zero_count / (a.rows * a.cols)


def is_sparse(a: Matrix, threshold: float = SPARSITY_THRESHOLD, tol: float = EPS_ZERO) -> bool:
    """
    Классификация матрицы как разреженной.

    Args:
        a: Любая матрица
        threshold: Порог доли нулей (default: 0.6)
        tol: Порог нулевого элемента (default: 1e-12)

    Returns:
        True если zero_fraction(a) > threshold

    Examples:
        >>> is_sparse(Matrix.from_rows([[0, 0], [0, 1]]))
        True
        >>> is_sparse(Matrix.from_rows([[0, 1], [1, 0]]))
        False
    """
    return zero_fraction(a, tol) > threshold
