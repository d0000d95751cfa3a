# wtc/core/capacity_solver.py
"""Подбор минимальной ёмкости бака методом двоичного поиска.

Кандидат *c* проверяется симуляцией ``simulate(schedule, rate, c, c)`` –
бак стартует полным и не может вместить больше *c*.  Признак дефицита
как функция *c* не возрастает: больший запас на старте и больший
потолок могут только помочь.  Поэтому наименьшую «бездефицитную»
ёмкость на отрезке ``[low, high]`` можно искать бисекцией за
``O(log(high - low))`` прогонов.

Если ни одна ёмкость до ``high`` включительно не подходит, результатом
будет ``None``.  Потолок поиска никогда не выдаётся за найденное
решение – подстановку делает вызывающий код.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..constants import SEARCH_CEILING
from ..domain.refill_schedule import RefillSchedule
from .tank_simulator import simulate

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CapacitySearch:
    """Итог поиска: найденная ёмкость (или None) и журнал проб."""

    capacity: Optional[int]
    probes: Tuple[Tuple[int, bool], ...] = ()  # (кандидат, был ли дефицит)

    @property
    def found(self) -> bool:
        return self.capacity is not None


def has_deficit_at(schedule: RefillSchedule, consumption_rate: int, capacity: int) -> bool:
    """Есть ли дефицит за год при стартовом объёме = ёмкости = *capacity*."""
    return simulate(schedule, consumption_rate, capacity, capacity).has_deficit


def search_capacity(
    schedule: RefillSchedule,
    consumption_rate: int,
    search_low: Optional[int] = None,
    search_high: int = SEARCH_CEILING,
) -> CapacitySearch:
    """Бисекция по целым ёмкостям с сохранением журнала проб.

    ``search_low`` по умолчанию равен норме забора: меньший бак не
    покрывает даже первый забор в феврале.
    """
    low = consumption_rate if search_low is None else search_low
    high = search_high
    answer: Optional[int] = None
    probes: list[Tuple[int, bool]] = []

    while low <= high:
        mid = (low + high) // 2
        deficit = has_deficit_at(schedule, consumption_rate, mid)
        probes.append((mid, deficit))
        logger.debug("probe capacity=%d deficit=%s", mid, deficit)

        if not deficit:
            answer = mid  # подходит – ищем меньше
            high = mid - 1
        else:
            low = mid + 1

    return CapacitySearch(capacity=answer, probes=tuple(probes))


def find_minimum_capacity(
    schedule: RefillSchedule,
    consumption_rate: int,
    search_low: Optional[int] = None,
    search_high: int = SEARCH_CEILING,
) -> Optional[int]:
    """Наименьшая ёмкость без дефицита или ``None``, если её нет до ``search_high``."""
    return search_capacity(schedule, consumption_rate, search_low, search_high).capacity
