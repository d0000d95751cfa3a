# wtc/solvers/__init__.py
"""Базовые абстракции и фабрика стратегий подбора ёмкости.

*Модуль объединяет:*
1. **AbstractCapacitySolver** — абстрактный базовый класс (ABC),
   определяющий единый интерфейс ``solve`` для всех стратегий поиска
   минимальной ёмкости бака.
2. Функцию‑фабрику **get(name)**, возвращающую экземпляр стратегии по
   строковому алиасу ("bisection", "linear").  Это упрощает выбор
   стратегии из CLI‑аргументов.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..core.capacity_solver import CapacitySearch
from ..domain.refill_schedule import RefillSchedule

# ---------------------------------------------------------------------------
# Абстрактный базовый класс стратегий
# ---------------------------------------------------------------------------


class AbstractCapacitySolver(ABC):
    """Интерфейс любой стратегии подбора ёмкости.

    Метод ``solve`` возвращает **CapacitySearch**: наименьшую ёмкость на
    отрезке ``[low, high]``, при которой за год нет дефицита (или
    ``None``), и журнал проверенных кандидатов.
    """

    name: str = "abstract"

    @abstractmethod
    def solve(
        self,
        schedule: RefillSchedule,
        consumption_rate: int,
        low: int,
        high: int,
    ) -> CapacitySearch:
        ...


# ---------------------------------------------------------------------------
# Фабрика стратегий по строковому имени
# ---------------------------------------------------------------------------


def get(name: str = "bisection") -> AbstractCapacitySolver:
    """Вернуть готовый объект‑стратегию по алиасу *name*.

    Parameters
    ----------
    name : str
        Допустимые значения:
        * ``"bisection"`` – BisectionSolver (двоичный поиск),
        * ``"linear"``    – LinearScanSolver (полный перебор).

    Raises
    ------
    ValueError
        Если передано неизвестное имя стратегии.
    """
    if name == "bisection":
        from .bisection import BisectionSolver

        return BisectionSolver()
    if name == "linear":
        from .linear import LinearScanSolver

        return LinearScanSolver()

    raise ValueError(f"Unknown capacity solver '{name}'")
