# wtc/domain/refill_schedule.py
"""График пополнения бака по месяцам.

Хранит отображение *метка месяца → объём пополнения* (л).  Месяцы,
отсутствующие в графике, считаются месяцами без пополнения (0 л).
Ключи сверяются с фиксированным списком ``MONTHS`` с учётом регистра.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from ..constants import MONTHS


@dataclass(frozen=True, slots=True)
class RefillSchedule:
    """Неизменяемый контейнер помесячных пополнений."""

    amounts: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        unknown = [m for m in self.amounts if m not in MONTHS]
        if unknown:
            raise ValueError(f"Unknown month labels in refill schedule: {unknown}")
        # Копия в read-only обёртке: внешний dict может меняться после создания
        object.__setattr__(self, "amounts", MappingProxyType(dict(self.amounts)))

    def get(self, month: str) -> int:
        """Пополнение за месяц *month* (0, если месяц не указан)."""
        return self.amounts.get(month, 0)

    def as_list(self) -> list[int]:
        """Пополнения в календарном порядке Jan…Dec."""
        return [self.get(m) for m in MONTHS]

    @property
    def total(self) -> int:
        return sum(self.amounts.values())
