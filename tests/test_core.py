import importlib

import pytest

simulator = importlib.import_module('wtc.core.tank_simulator')
RefillSchedule = importlib.import_module('wtc.domain.refill_schedule').RefillSchedule
MONTHS = importlib.import_module('wtc.constants').MONTHS

simulate = simulator.simulate


def test_june_refill_regression(june_schedule):
    result = simulate(june_schedule, 2000, 2000, 2000)
    by_month = {r.month: r for r in result.records}

    assert by_month["Jan"].begin_volume == 2000 and by_month["Jan"].end_volume == 2000
    assert by_month["Feb"].withdrawn == 2000 and by_month["Feb"].deficit is None
    assert by_month["Feb"].end_volume == 0

    jun = by_month["Jun"]
    assert (jun.begin_volume, jun.withdrawn, jun.received, jun.end_volume) == (0, 0, 1000, 1000)
    assert jun.deficit == 2000

    aug = by_month["Aug"]
    assert (aug.begin_volume, aug.withdrawn, aug.end_volume, aug.deficit) == (1000, 1000, 0, 1000)

    assert [(r.month, r.deficit) for r in result.records if r.deficit] == [
        ("Apr", 2000), ("Jun", 2000), ("Aug", 1000), ("Oct", 2000), ("Dec", 2000),
    ]
    assert result.final_volume == 0
    assert result.max_deficit == 2000
    assert result.has_deficit
    assert result.deficit_months == ["Apr", "Jun", "Aug", "Oct", "Dec"]


def test_twelve_records_in_calendar_order(wet_schedule):
    result = simulate(wet_schedule, 1800, 0, 4000)
    assert [r.month for r in result.records] == list(MONTHS)


@pytest.mark.parametrize("rate,start,cap", [(0, 0, 0), (1000, 500, 3000), (2500, 9000, 4000), (700, 2000, 2000)])
def test_withdrawal_only_on_even_months(wet_schedule, rate, start, cap):
    result = simulate(wet_schedule, rate, start, cap)
    for position, r in enumerate(result.records, start=1):
        if position % 2:
            assert r.withdrawn == 0 and r.deficit is None
        else:
            assert r.withdrawn <= rate
            if r.withdrawn < rate:
                assert r.deficit == rate - r.withdrawn
            else:
                assert r.deficit is None
        assert 0 <= r.end_volume <= cap


def test_refill_is_capped(wet_schedule):
    result = simulate(wet_schedule, 1000, 0, 2000)
    jan, mar = result.records[0], result.records[2]
    assert jan.received == 1500 and jan.end_volume == 1500
    # 1500 - 1000 in Feb, + 2500 in Mar -> capped at 2000
    assert mar.begin_volume == 500 and mar.received == 2500 and mar.end_volume == 2000


def test_starting_volume_above_capacity_is_clamped():
    result = simulate(RefillSchedule(), 100, 5000, 1000)
    assert result.records[0].begin_volume == 5000
    assert result.records[0].end_volume == 1000


def test_no_deficit_max_deficit_zero():
    result = simulate(RefillSchedule({"Jan": 600}), 100, 0, 1000)
    assert not result.has_deficit
    assert result.max_deficit == 0
    assert result.final_volume == 0


def test_negative_rate_does_not_raise():
    result = simulate(RefillSchedule(), -100, 0, 300)
    assert not result.has_deficit
    assert result.final_volume == 300


def test_simulate_is_idempotent(wet_schedule):
    first = simulate(wet_schedule, 1800, 1000, 3000)
    second = simulate(wet_schedule, 1800, 1000, 3000)
    assert first == second


def test_to_frame(june_schedule):
    df = simulate(june_schedule, 2000, 2000, 2000).to_frame()
    assert list(df.columns) == ["month", "begin_volume", "withdrawn", "received", "end_volume", "deficit"]
    assert len(df) == 12
    assert max(df["end_volume"]) <= 2000


def test_schedule_rejects_unknown_month():
    with pytest.raises(ValueError):
        RefillSchedule({"June": 100})


def test_schedule_defaults_and_is_read_only():
    amounts = {"Mar": 10}
    schedule = RefillSchedule(amounts)
    amounts["Mar"] = 99
    assert schedule.get("Mar") == 10
    assert schedule.get("Apr") == 0
    assert schedule.as_list()[2] == 10
    with pytest.raises(TypeError):
        schedule.amounts["Apr"] = 1
