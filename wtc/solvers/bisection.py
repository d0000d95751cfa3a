# wtc/solvers/bisection.py

from __future__ import annotations

from . import AbstractCapacitySolver
from ..core.capacity_solver import CapacitySearch, search_capacity
from ..domain.refill_schedule import RefillSchedule


class BisectionSolver(AbstractCapacitySolver):
    """Двоичный поиск; опирается на монотонность дефицита по ёмкости."""

    name = "bisection"

    def solve(
        self,
        schedule: RefillSchedule,
        consumption_rate: int,
        low: int,
        high: int,
    ) -> CapacitySearch:
        return search_capacity(schedule, consumption_rate, low, high)
