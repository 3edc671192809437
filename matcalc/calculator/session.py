"""Calculator Session — регистры A/B и операции калькулятора.

Вместо глобальных "текущих" матриц состояние держит вызывающий код
в явном объекте CalculatorSession с двумя слотами A и B.

Каждая операция возвращает OperationResult:
- ok=True и результат (matrix / scalar / flag)
- ok=False и block_reason при невыполненном предусловии или ошибке движка

Коды block_reason:
- slot_a_empty / slot_b_empty — нужный слот не заполнен
- dimension_mismatch — формы A и B несовместимы
- not_square — операция требует квадратную матрицу
- singular_determinant — |det(A)| < determinant_tol на pre-check
- singular — Inverse Engine обнаружил |pivot| < pivot_tol
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from matcalc.core.domain.errors import DimensionMismatch, MatrixError, NotSquare, Singular
from matcalc.core.domain.matrix import Matrix
from matcalc.core.math import arithmetic
from matcalc.core.math.determinant import determinant
from matcalc.core.math.inverse import invert
from matcalc.core.math.numerical_safeguards import (
    EPS_DETERMINANT,
    EPS_PIVOT,
    EPS_ZERO,
    SPARSITY_THRESHOLD,
    validate_in_range,
    validate_positive,
)
from matcalc.core.math.sparsity import is_sparse
from matcalc.core.math.tracing import TraceObserver

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================


class Slot(str, Enum):
    """Регистр калькулятора."""

    A = "A"
    B = "B"


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация калькулятора.

    determinant_precheck — проверять |det(A)| перед обращением;
    precheck_max_dim — pre-check пропускается для n > precheck_max_dim,
    так как determinant имеет сложность O(n!).
    """

    pivot_tol: float = EPS_PIVOT
    zero_tol: float = EPS_ZERO
    determinant_tol: float = EPS_DETERMINANT
    sparsity_threshold: float = SPARSITY_THRESHOLD
    determinant_precheck: bool = True
    precheck_max_dim: int = 10

    def __post_init__(self):
        validate_positive(self.pivot_tol, "pivot_tol")
        validate_positive(self.zero_tol, "zero_tol")
        validate_positive(self.determinant_tol, "determinant_tol")
        validate_in_range(self.sparsity_threshold, "sparsity_threshold", 0.0, 1.0)
        if self.precheck_max_dim < 1:
            raise ValueError(f"precheck_max_dim must be >= 1, got {self.precheck_max_dim}")


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class OperationResult:
    """Результат операции калькулятора."""

    ok: bool
    operation: str
    block_reason: str = ""

    # Результат (заполнено не более одного поля)
    matrix: Optional[Matrix] = None
    scalar: Optional[float] = None
    flag: Optional[bool] = None

    # Диагностика
    details: str = ""
    error: Optional[MatrixError] = None


_ERROR_REASONS: tuple[tuple[type[MatrixError], str], ...] = (
    (DimensionMismatch, "dimension_mismatch"),
    (NotSquare, "not_square"),
    (Singular, "singular"),
)


# =============================================================================
# SESSION
# =============================================================================


class CalculatorSession:
    """Калькулятор с двумя регистрами матриц.

    Бинарные операции (add, subtract, multiply) работают как A op B,
    унарные (scalar_multiply, transpose, determinant, invert, is_sparse) — над A.
    Операции не изменяют содержимое регистров.
    """

    def __init__(
        self,
        config: CalculatorConfig | None = None,
        observer: Optional[TraceObserver] = None,
    ):
        """Initialize session.

        Args:
            config: Конфигурация (default: CalculatorConfig())
            observer: Необязательный trace observer для determinant/invert
        """
        self.config = config or CalculatorConfig()
        self.observer = observer
        self._slots: dict[Slot, Optional[Matrix]] = {Slot.A: None, Slot.B: None}

    # -------------------------------------------------------------------------
    # Регистры
    # -------------------------------------------------------------------------

    def store(self, slot: Slot, matrix: Matrix) -> None:
        """Записать матрицу в регистр (перезаписывает прежнее значение)."""
        self._slots[Slot(slot)] = matrix
        logger.debug("store %s: %dx%d", Slot(slot).value, matrix.rows, matrix.cols)

    def get(self, slot: Slot) -> Optional[Matrix]:
        return self._slots[Slot(slot)]

    def clear(self, slot: Slot) -> None:
        self._slots[Slot(slot)] = None

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    def add(self) -> OperationResult:
        return self._binary("add", arithmetic.add)

    def subtract(self) -> OperationResult:
        return self._binary("subtract", arithmetic.subtract)

    def multiply(self) -> OperationResult:
        return self._binary("multiply", arithmetic.multiply)

    def scalar_multiply(self, k: float) -> OperationResult:
        a = self._slots[Slot.A]
        if a is None:
            return self._blocked("scalar_multiply", "slot_a_empty")
        result = arithmetic.scalar_multiply(a, k)
        return OperationResult(
            ok=True,
            operation="scalar_multiply",
            matrix=result,
            details=f"k={k!r}",
        )

    def transpose(self) -> OperationResult:
        a = self._slots[Slot.A]
        if a is None:
            return self._blocked("transpose", "slot_a_empty")
        result = arithmetic.transpose(a)
        return OperationResult(
            ok=True,
            operation="transpose",
            matrix=result,
            details=f"{a.rows}x{a.cols} -> {result.rows}x{result.cols}",
        )

    def determinant(self) -> OperationResult:
        a = self._slots[Slot.A]
        if a is None:
            return self._blocked("determinant", "slot_a_empty")
        try:
            det = determinant(a, observer=self.observer)
        except MatrixError as e:
            return self._from_error("determinant", e)
        return OperationResult(ok=True, operation="determinant", scalar=det, details=f"det={det:.10g}")

    def invert(self) -> OperationResult:
        """Обращение A.

        Порядок проверок:
        1. Слот A заполнен
        2. A квадратная
        3. Determinant pre-check (если включён и n <= precheck_max_dim)
        4. Inverse Engine с собственной проверкой pivot
        """
        a = self._slots[Slot.A]
        if a is None:
            return self._blocked("invert", "slot_a_empty")
        if not a.is_square:
            return self._from_error("invert", NotSquare(a.shape, "invert"))

        cfg = self.config
        if cfg.determinant_precheck and a.rows <= cfg.precheck_max_dim:
            det = determinant(a)
            if abs(det) < cfg.determinant_tol:
                logger.info("invert: determinant pre-check rejected matrix, det=%r", det)
                return self._blocked(
                    "invert",
                    "singular_determinant",
                    details=f"|det|={abs(det):.3e} < {cfg.determinant_tol:.1e}",
                )

        try:
            inverse = invert(a, tol=cfg.pivot_tol, observer=self.observer)
        except Singular as e:
            if cfg.determinant_precheck and a.rows <= cfg.precheck_max_dim:
                logger.warning("invert: determinant pre-check passed but pivot check failed: %s", e)
            return self._from_error("invert", e)

        return OperationResult(ok=True, operation="invert", matrix=inverse, details=f"n={a.rows}")

    def is_sparse(self) -> OperationResult:
        a = self._slots[Slot.A]
        if a is None:
            return self._blocked("is_sparse", "slot_a_empty")
        flag = is_sparse(a, threshold=self.config.sparsity_threshold, tol=self.config.zero_tol)
        return OperationResult(ok=True, operation="is_sparse", flag=flag)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _binary(self, operation: str, fn: Callable[[Matrix, Matrix], Matrix]) -> OperationResult:
        a, b = self._slots[Slot.A], self._slots[Slot.B]
        if a is None:
            return self._blocked(operation, "slot_a_empty")
        if b is None:
            return self._blocked(operation, "slot_b_empty")
        try:
            result = fn(a, b)
        except MatrixError as e:
            return self._from_error(operation, e)
        return OperationResult(
            ok=True,
            operation=operation,
            matrix=result,
            details=f"{a.rows}x{a.cols} {operation} {b.rows}x{b.cols}",
        )

    @staticmethod
    def _blocked(operation: str, reason: str, details: str = "") -> OperationResult:
        return OperationResult(ok=False, operation=operation, block_reason=reason, details=details)

    @staticmethod
    def _from_error(operation: str, error: MatrixError) -> OperationResult:
        reason = next(
            (code for error_type, code in _ERROR_REASONS if isinstance(error, error_type)),
            "error",
        )
        return OperationResult(
            ok=False,
            operation=operation,
            block_reason=reason,
            details=str(error),
            error=error,
        )
