"""Tracing — наблюдатель за контрольными точками алгоритмов.

Пошаговая трассировка вынесена из алгоритмов в необязательный callback:
движок вызывает observer(event) в фиксированных точках и ничего не печатает сам.

Контрольные точки:
- Determinant: каждое извлечение minor, каждое накопление cofactor
- Inverse: выбор pivot, перестановка строк, нормализация, исключение строки
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional


class TraceEventKind(str, Enum):
    """Тип контрольной точки."""

    MINOR_EXTRACTED = "MINOR_EXTRACTED"
    COFACTOR_ACCUMULATED = "COFACTOR_ACCUMULATED"
    PIVOT_SELECTED = "PIVOT_SELECTED"
    ROW_SWAPPED = "ROW_SWAPPED"
    ROW_NORMALIZED = "ROW_NORMALIZED"
    ROW_ELIMINATED = "ROW_ELIMINATED"


@dataclass(frozen=True)
class TraceEvent:
    """Событие трассировки.

    depth — глубина рекурсии determinant (0 для верхнего уровня);
    column/row — индексы в текущей матрице или augmented буфере;
    value — числовая величина шага (cofactor, pivot, factor).
    """

    kind: TraceEventKind
    depth: int = 0
    column: Optional[int] = None
    row: Optional[int] = None
    value: Optional[float] = None
    details: str = ""


TraceObserver = Callable[[TraceEvent], None]


@dataclass
class RecordingObserver:
    """Observer, накапливающий события в списке (для тестов и отладки)."""

    events: list[TraceEvent] = field(default_factory=list)

    def __call__(self, event: TraceEvent) -> None:
        self.events.append(event)

    def of_kind(self, kind: TraceEventKind) -> list[TraceEvent]:
        return [e for e in self.events if e.kind == kind]


class LoggingObserver:
    """Observer, пересылающий события в logger на уровне DEBUG."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def __call__(self, event: TraceEvent) -> None:
        self.logger.debug(
            "%s depth=%d row=%s col=%s value=%s %s",
            event.kind.value,
            event.depth,
            event.row,
            event.column,
            event.value,
            event.details,
        )
