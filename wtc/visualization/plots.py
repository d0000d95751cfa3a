# wtc/visualization/plots.py
"""Мини‑обёртки над matplotlib для отображения ключевых графиков.

Функции строят *интерактивные* графики (``plt.show()``) и не возвращают
объекты Figure/Axes, чтобы оставить API как можно более простым.
"""

from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np

from ..constants import MONTHS
from ..core.tank_simulator import SimulationResult
from ..domain.refill_schedule import RefillSchedule

# ---------------------------------------------------------------------------
# 1) График пополнений
# ---------------------------------------------------------------------------

def plot_refill_schedule(schedule: RefillSchedule) -> None:
    """Гистограмма пополнений по месяцам."""
    plt.figure()
    plt.bar(list(MONTHS), schedule.as_list())
    plt.title("Пополнение бака по месяцам")
    plt.xlabel("Месяц")
    plt.ylabel("Пополнение, л")
    plt.grid(True)
    plt.show()

# ---------------------------------------------------------------------------
# 2) Забор и пополнение рядом
# ---------------------------------------------------------------------------

def plot_monthly_flows(result: SimulationResult) -> None:
    """Сгруппированные столбцы: забор / пополнение / дефицит."""
    plt.figure()
    x = np.arange(len(result.records))
    width = 0.3

    withdrawn = [r.withdrawn for r in result.records]
    received = [r.received for r in result.records]
    deficit = [r.deficit or 0 for r in result.records]

    plt.bar(x - width, withdrawn, width, label="Забор")
    plt.bar(x, received, width, label="Пополнение")
    plt.bar(x + width, deficit, width, color="red", label="Дефицит")
    plt.xticks(x, [r.month for r in result.records])

    plt.title("Забор и пополнение по месяцам")
    plt.xlabel("Месяц")
    plt.ylabel("Объём, л")
    plt.grid(True)
    plt.legend()
    plt.show()

# ---------------------------------------------------------------------------
# 3) График объёма в баке
# ---------------------------------------------------------------------------

def plot_tank_levels(result: SimulationResult, capacity: int) -> None:
    """Объём на начало каждого месяца + конец года и линия ёмкости."""
    plt.figure()
    x = range(len(result.records) + 1)
    y = [r.begin_volume for r in result.records] + [result.final_volume]
    months = [r.month for r in result.records] + [result.records[0].month]

    plt.plot(x, y, marker="o")
    plt.xticks(x, months)

    plt.axhline(capacity, ls="--", color="red", label="Ёмкость")

    plt.title(
        "Объём воды в баке\n"
        "на годовом интервале (шаг = 1 месяц)"
    )
    plt.xlabel("Месяц")
    plt.ylabel("V, л")
    plt.grid(True)
    plt.legend()
    plt.show()
