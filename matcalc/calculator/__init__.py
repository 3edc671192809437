"""Calculator — сессия с регистрами A/B поверх движка matcalc."""

from .session import CalculatorConfig, CalculatorSession, OperationResult, Slot

__all__ = [
    "CalculatorConfig",
    "CalculatorSession",
    "OperationResult",
    "Slot",
]
