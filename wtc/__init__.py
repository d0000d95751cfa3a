# wtc/__init__.py
"""Пакет **WTC** (Water Tank Calculations).

Инициализационный модуль упрощает импорт «ключевых сущностей»
библиотеки для внешних пользователей:

--- from wtc import TankAnalyzer, RefillSchedule, TankSettings, simulate ---

Экспортируемые объекты перечислены в ``__all__`` — это служит
*public API* пакета.
"""

from __future__ import annotations

from .facade.analyzer import TankAnalyzer, TankReport
from .domain.refill_schedule import RefillSchedule
from .domain.tank_settings import TankSettings
from .core.tank_simulator import MonthRecord, SimulationResult, simulate
from .core.capacity_solver import find_minimum_capacity

__all__ = [
    "TankAnalyzer",       # фасад для расчётов и графиков
    "TankReport",         # итог полного расчёта
    "RefillSchedule",     # пополнения по месяцам
    "TankSettings",       # норма забора, начальный объём, границы поиска
    "MonthRecord",
    "SimulationResult",
    "simulate",           # годовая симуляция
    "find_minimum_capacity",  # двоичный поиск ёмкости
]
