import importlib
import os
import sys

import matplotlib
import pytest

matplotlib.use("Agg")

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

RefillSchedule = importlib.import_module('wtc.domain.refill_schedule').RefillSchedule
TankSettings = importlib.import_module('wtc.domain.tank_settings').TankSettings


@pytest.fixture
def june_schedule():
    """Single June refill; too little water for a 2000 l consumption."""
    return RefillSchedule({"Jun": 1000})


@pytest.fixture
def wet_schedule():
    return RefillSchedule({
        "Jan": 1500, "Mar": 2500, "May": 500,
        "Jul": 3000, "Sep": 1000, "Nov": 2000,
    })


@pytest.fixture
def default_settings():
    return TankSettings()


@pytest.fixture
def input_text():
    return """
# household tank
consumption: 1000
Initial Tank Volume: 1500   # litres

Jan: 500
Mar: 3000
bogus line without colon
Apr: lots
jun: 700
Foo: 10
"""
