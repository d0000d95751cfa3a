# wtc/solvers/linear.py
"""Полный перебор ёмкостей снизу вверх.

Не опирается на монотонность и поэтому служит эталоном для проверки
двоичного поиска.  Число прогонов – до ``high - low + 1``, так что для
рабочих расчётов стоит выбирать ``"bisection"``.
"""

from __future__ import annotations

import logging

from . import AbstractCapacitySolver
from ..core.capacity_solver import CapacitySearch, has_deficit_at
from ..domain.refill_schedule import RefillSchedule

logger = logging.getLogger(__name__)


class LinearScanSolver(AbstractCapacitySolver):
    """Перебор с остановкой на первой бездефицитной ёмкости."""

    name = "linear"

    def solve(
        self,
        schedule: RefillSchedule,
        consumption_rate: int,
        low: int,
        high: int,
    ) -> CapacitySearch:
        probes: list[tuple[int, bool]] = []
        for capacity in range(low, high + 1):
            deficit = has_deficit_at(schedule, consumption_rate, capacity)
            probes.append((capacity, deficit))
            if not deficit:
                return CapacitySearch(capacity=capacity, probes=tuple(probes))

        logger.debug("linear scan exhausted [%d, %d]", low, high)
        return CapacitySearch(capacity=None, probes=tuple(probes))
