# wtc/core/tank_simulator.py
"""Модуль пошаговой (месячной) симуляции бака.

* Принимает на вход:
  - график пополнения (месяц → литры),
  - норму забора, которая списывается в каждый **чётный** месяц
    (Feb, Apr, …, Dec),
  - начальный объём и максимальную ёмкость бака.
* На выходе формируется **SimulationResult**: 12 строк по месяцам
  (объём на начало, забор, пополнение, объём на конец, дефицит) и
  сводные величины: конечный объём и наибольший месячный дефицит.

Порядок операций внутри месяца фиксирован: сначала забор, затем
пополнение.  Забор никогда не уводит объём ниже нуля, недостача
фиксируется как дефицит.  После пополнения объём обрезается по
ёмкости, излишек теряется.

Симуляция является чистой функцией: состояние (*TankState*) сворачивается по
месяцам как аккумулятор, результат после построения не меняется.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import pandas as pd

from ..constants import MONTHS
from ..domain.refill_schedule import RefillSchedule

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Состояние бака между месяцами
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TankState:
    """Аккумулятор свёртки: текущий объём и наибольший дефицит."""

    volume: int  # л – объём на начало очередного месяца
    max_deficit: int = 0


# ---------------------------------------------------------------------------
# Результаты
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class MonthRecord:
    """Строка отчёта за один месяц."""

    month: str
    begin_volume: int
    withdrawn: int
    received: int
    end_volume: int
    deficit: Optional[int] = None  # None – дефицита нет, иначе недостача (л)


@dataclass(frozen=True, slots=True)
class SimulationResult:
    """Годовой результат: 12 записей Jan…Dec и сводка."""

    records: Tuple[MonthRecord, ...]
    final_volume: int
    max_deficit: int

    @property
    def has_deficit(self) -> bool:
        return any(r.deficit is not None for r in self.records)

    @property
    def deficit_months(self) -> list[str]:
        return [r.month for r in self.records if r.deficit is not None]

    def to_frame(self) -> pd.DataFrame:
        """Записи в виде DataFrame (по строке на месяц)."""
        return pd.DataFrame.from_records(
            [
                {
                    "month": r.month,
                    "begin_volume": r.begin_volume,
                    "withdrawn": r.withdrawn,
                    "received": r.received,
                    "end_volume": r.end_volume,
                    "deficit": r.deficit,
                }
                for r in self.records
            ]
        )


# ---------------------------------------------------------------------------
# Один шаг свёртки
# ---------------------------------------------------------------------------


def _process_month(
    state: TankState,
    position: int,
    month: str,
    schedule: RefillSchedule,
    consumption_rate: int,
    max_capacity: int,
) -> Tuple[TankState, MonthRecord]:
    """Обработать месяц с порядковым номером *position* (1…12)."""
    volume = state.volume
    max_deficit = state.max_deficit
    begin = volume

    withdrawn = 0
    deficit: Optional[int] = None

    # 1) Забор – только в чётные месяцы
    if position % 2 == 0:
        if volume >= consumption_rate:
            withdrawn = consumption_rate
            volume -= consumption_rate
        else:
            shortfall = consumption_rate - volume
            withdrawn = volume  # забираем только то, что есть
            volume = 0
            deficit = shortfall
            max_deficit = max(max_deficit, shortfall)

    # 2) Пополнение с обрезкой по ёмкости
    received = schedule.get(month)
    volume += received
    surplus = max(0, volume - max_capacity)
    volume = min(volume, max_capacity)

    logger.debug(
        "month=%s begin=%d out=%d in=%d end=%d deficit=%s surplus=%d",
        month,
        begin,
        withdrawn,
        received,
        volume,
        deficit,
        surplus,
    )

    record = MonthRecord(
        month=month,
        begin_volume=begin,
        withdrawn=withdrawn,
        received=received,
        end_volume=volume,
        deficit=deficit,
    )
    return TankState(volume=volume, max_deficit=max_deficit), record


# ---------------------------------------------------------------------------
# Главная точка входа симуляции
# ---------------------------------------------------------------------------


def simulate(
    schedule: RefillSchedule,
    consumption_rate: int,
    starting_volume: int,
    max_capacity: int,
) -> SimulationResult:
    """Прогнать годовой цикл и вернуть помесячные записи со сводкой.

    Parameters
    ----------
    schedule : RefillSchedule
        Пополнения по месяцам; отсутствующие месяцы дают 0.
    consumption_rate : int
        Забор (л) в каждый чётный месяц.
    starting_volume : int
        Объём на начало января.  Может превышать ``max_capacity`` – тогда
        объём обрезается на шаге пополнения первого месяца.
    max_capacity : int
        Ёмкость бака; объём на конец месяца никогда её не превышает.
    """
    state = TankState(volume=starting_volume)
    records: list[MonthRecord] = []

    for position, month in enumerate(MONTHS, start=1):
        state, record = _process_month(
            state, position, month, schedule, consumption_rate, max_capacity
        )
        records.append(record)

    return SimulationResult(
        records=tuple(records),
        final_volume=state.volume,
        max_deficit=state.max_deficit,
    )
