# wtc/io/input_parser.py
"""Разбор текстового входного файла формата ``ключ: значение``.

Пример файла::

    # норма забора каждые два месяца
    consumption: 2000
    Initial Tank Volume: 2500
    Jun: 1000
    Sep: 3000   # после сезона дождей

Правила:

* всё после ``#`` – комментарий; пустые строки пропускаются;
* ключи ``consumption`` и ``initial tank volume`` сравниваются без
  учёта регистра;
* прочие ключи должны *точно* совпадать с меткой месяца (``Jan``…``Dec``),
  иначе строка игнорируется;
* значение читается как ведущее целое (``"1500 l"`` → 1500);
* строки без двоеточия, с пустым ключом/значением или без числа
  пропускаются – это не ошибка.

Отсутствующий или нечитаемый файл – ошибка вызывающего кода
(``OSError`` пробрасывается без перехвата).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..constants import MONTHS
from ..domain.refill_schedule import RefillSchedule
from ..domain.tank_settings import TankSettings

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^[+-]?\d+")

CONSUMPTION_KEY = "consumption"
INITIAL_VOLUME_KEY = "initial tank volume"


@dataclass(slots=True)
class TankInput:
    """Разобранный вход: график пополнения + параметры расчёта."""

    schedule: RefillSchedule = field(default_factory=RefillSchedule)
    settings: TankSettings = field(default_factory=TankSettings)


def _parse_int(raw: str) -> Optional[int]:
    """Ведущее целое из строки или None."""
    match = _LEADING_INT.match(raw.strip())
    return int(match.group()) if match else None


def parse_input_text(text: str) -> TankInput:
    """Разобрать содержимое входного файла."""
    settings = TankSettings()
    refills: dict[str, int] = {}

    for lineno, line in enumerate(text.splitlines(), start=1):
        clean = line.split("#", 1)[0].strip()
        if not clean:
            continue

        parts = clean.split(":")
        key_raw = parts[0].strip()
        value_raw = parts[1].strip() if len(parts) > 1 else ""
        if not key_raw or not value_raw:
            logger.debug("line %d skipped: no key/value pair: %r", lineno, line)
            continue

        value = _parse_int(value_raw)
        if value is None:
            logger.debug("line %d skipped: not an integer: %r", lineno, value_raw)
            continue

        key = key_raw.lower()
        if key == CONSUMPTION_KEY:
            settings.consumption = value
        elif key == INITIAL_VOLUME_KEY:
            settings.initial_volume = value
        elif key_raw in MONTHS:
            refills[key_raw] = value
        else:
            logger.debug("line %d ignored: unknown key %r", lineno, key_raw)

    return TankInput(schedule=RefillSchedule(refills), settings=settings)


def parse_input_file(path: str | Path) -> TankInput:
    """Прочитать файл *path* (UTF‑8) и разобрать его."""
    text = Path(path).read_text(encoding="utf-8")
    logger.info("Loaded input from %s", path)
    return parse_input_text(text)
