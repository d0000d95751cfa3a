# wtc/facade/analyzer.py
"""Высокоуровневый *facade* для запуска расчётов и построения графиков.

Класс **TankAnalyzer** инкапсулирует последовательность вызовов:
1. Симуляция при заданном начальном объёме (выявление дефицита).
2. Подбор минимальной ёмкости выбранной стратегией (``wtc.solvers``).
3. Проверочная симуляция при найденной ёмкости.  Если ёмкость не
   найдена, проверка выполняется при потолке поиска – только для
   демонстрации, в отчёте ``capacity`` остаётся ``None``.
4. (опц.) Визуализация результатов через модуль *visualization.plots*.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..core.capacity_solver import CapacitySearch
from ..core.tank_simulator import SimulationResult, simulate
from ..domain.refill_schedule import RefillSchedule
from ..domain.tank_settings import TankSettings
from ..solvers import AbstractCapacitySolver, get as get_solver
from ..visualization import plots

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TankReport:
    """Результаты полного расчёта для вывода пользователю."""

    deficit_run: SimulationResult
    search: CapacitySearch
    verification_capacity: int
    verification_run: SimulationResult

    @property
    def capacity(self) -> Optional[int]:
        return self.search.capacity


class TankAnalyzer:
    """Единая точка входа для внешних пользователей библиотеки WTC."""

    # ------------------------------------------------------------------
    # Конструктор
    # ------------------------------------------------------------------

    def __init__(
        self,
        schedule: RefillSchedule,
        settings: TankSettings | None = None,
        solver: AbstractCapacitySolver | str = "bisection",
    ) -> None:
        self.schedule = schedule
        self.settings = settings if settings is not None else TankSettings()
        # Позволяем передавать либо строку‑алиас, либо уже созданный объект
        self.solver = get_solver(solver) if isinstance(solver, str) else solver

    # ------------------------------------------------------------------
    # Отдельные шаги
    # ------------------------------------------------------------------

    def identify_deficits(self) -> SimulationResult:
        """Год при начальном объёме = ёмкости из настроек."""
        volume = self.settings.initial_volume
        return simulate(self.schedule, self.settings.consumption, volume, volume)

    def search_capacity(self) -> CapacitySearch:
        s = self.settings
        return self.solver.solve(self.schedule, s.consumption, s.search_low, s.search_ceiling)

    def verify(self, capacity: int) -> SimulationResult:
        return simulate(self.schedule, self.settings.consumption, capacity, capacity)

    # ------------------------------------------------------------------
    # Основной публичный метод
    # ------------------------------------------------------------------

    def run(self) -> TankReport:
        """Выявить дефицит, подобрать ёмкость и проверить её."""
        logger.info(
            "Starting tank analysis (consumption=%d, initial volume=%d, solver=%s) …",
            self.settings.consumption,
            self.settings.initial_volume,
            self.solver.name,
        )
        deficit_run = self.identify_deficits()
        search = self.search_capacity()

        if search.found:
            verification_capacity = search.capacity
            logger.info(
                "Minimum capacity %d found after %d probes",
                search.capacity,
                len(search.probes),
            )
        else:
            verification_capacity = self.settings.search_ceiling
            logger.warning(
                "No capacity up to %d avoids a deficit; demonstrating at the ceiling",
                verification_capacity,
            )

        return TankReport(
            deficit_run=deficit_run,
            search=search,
            verification_capacity=verification_capacity,
            verification_run=self.verify(verification_capacity),
        )

    # ------------------------------------------------------------------
    # Быстрые обёртки для графиков
    # ------------------------------------------------------------------

    def plot_refill_schedule(self):
        """График пополнений."""
        plots.plot_refill_schedule(self.schedule)

    def plot_monthly_flows(self, result: SimulationResult):
        """График забора/пополнения по результатам симуляции."""
        plots.plot_monthly_flows(result)

    def plot_tank_levels(self, report: TankReport):
        """График объёма в баке для проверочного прогона."""
        plots.plot_tank_levels(report.verification_run, report.verification_capacity)
