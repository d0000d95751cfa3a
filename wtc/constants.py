# wtc/constants.py
"""Константы годового цикла и значения по умолчанию."""

from __future__ import annotations

# Календарные метки месяцев; порядок списка = порядок симуляции
MONTHS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

DEFAULT_CONSUMPTION = 2000     # л, забор в каждый чётный месяц
DEFAULT_INITIAL_VOLUME = 2000  # л, начальный (и максимальный) объём бака
SEARCH_CEILING = 10000         # л, верхняя граница поиска ёмкости
