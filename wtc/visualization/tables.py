# wtc/visualization/tables.py
"""Текстовые таблицы и итоговый отчёт для консоли.

Таблица строится через pandas: записи симуляции переводятся в
``DataFrame`` с шестью колонками и печатаются ``to_string``.  Дефицит
отображается только здесь – в ядре он хранится как ``None`` или число.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import pandas as pd

from ..core.tank_simulator import SimulationResult

if TYPE_CHECKING:
    from ..facade.analyzer import TankReport

COLUMNS = ["Month", "Beginning", "Discharge", "Inlet", "End", "Deficit"]
NO_DEFICIT = "—"


def format_deficit(deficit: Optional[int]) -> str:
    return NO_DEFICIT if deficit is None else f"-{deficit}"


def result_table(result: SimulationResult) -> pd.DataFrame:
    """Шесть колонок отчёта, по строке на месяц."""
    rows = [
        [
            r.month,
            r.begin_volume,
            r.withdrawn,
            r.received,
            r.end_volume,
            format_deficit(r.deficit),
        ]
        for r in result.records
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def render_table(result: SimulationResult) -> str:
    return result_table(result).to_string(index=False)


def render_report(report: "TankReport") -> str:
    """Полный текст отчёта: обе таблицы и вывод о ёмкости."""
    lines = [
        "",
        "DEFICIT IDENTIFICATION:",
        render_table(report.deficit_run),
        "Note: withdrawal occurs before topping up.",
        "Note: optimal volume is determined by the binary search method.",
        "",
        "TEST ITERATION WITH OPTIMAL VOLUME:",
        render_table(report.verification_run),
    ]
    if report.capacity is None:
        lines += [
            "",
            f"Even with the maximum tank volume ({report.verification_capacity:,} liters), "
            "it is impossible to avoid a deficit.",
            "The manual refilling will be required.",
        ]
    else:
        lines.append(f"Minimum sufficient volume of the tank: {report.capacity} liters")
    return "\n".join(lines)
