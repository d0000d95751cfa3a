# wtc/domain/tank_settings.py

from dataclasses import dataclass
from typing import Optional

from ..constants import DEFAULT_CONSUMPTION, DEFAULT_INITIAL_VOLUME, SEARCH_CEILING


@dataclass(slots=True)
class TankSettings:
    """Run parameters; values are taken as given, without range checks."""
    consumption: int = DEFAULT_CONSUMPTION  # л за чётный месяц
    initial_volume: int = DEFAULT_INITIAL_VOLUME  # л, стартовый объём = ёмкость
    search_floor: Optional[int] = None  # None -> consumption
    search_ceiling: int = SEARCH_CEILING  # л

    @property
    def search_low(self) -> int:
        return self.consumption if self.search_floor is None else self.search_floor
