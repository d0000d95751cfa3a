import importlib

import pytest

TankAnalyzer = importlib.import_module('wtc.facade.analyzer').TankAnalyzer
TankSettings = importlib.import_module('wtc.domain.tank_settings').TankSettings
RefillSchedule = importlib.import_module('wtc.domain.refill_schedule').RefillSchedule
tables = importlib.import_module('wtc.visualization.tables')
plots = importlib.import_module('wtc.visualization.plots')
cli = importlib.import_module('wtc.cli.main')
simulate = importlib.import_module('wtc.core.tank_simulator').simulate


def test_analyzer_not_found_uses_ceiling(june_schedule, default_settings):
    report = TankAnalyzer(june_schedule, default_settings).run()
    assert report.capacity is None
    assert report.verification_capacity == 10000
    assert report.deficit_run.has_deficit
    assert report.verification_run.has_deficit
    assert report.verification_run.records[0].begin_volume == 10000


def test_analyzer_found(wet_schedule):
    settings = TankSettings(consumption=1800, initial_volume=1000)
    report = TankAnalyzer(wet_schedule, settings, solver="linear").run()
    assert report.capacity is not None
    assert report.verification_capacity == report.capacity
    assert not report.verification_run.has_deficit
    assert report.deficit_run.has_deficit


def test_search_floor_overrides_consumption():
    settings = TankSettings(consumption=100, search_floor=0, search_ceiling=50)
    report = TankAnalyzer(RefillSchedule(), settings).run()
    assert report.capacity is None
    assert report.verification_capacity == 50


def test_result_table_columns(june_schedule):
    df = tables.result_table(simulate(june_schedule, 2000, 2000, 2000))
    assert list(df.columns) == ["Month", "Beginning", "Discharge", "Inlet", "End", "Deficit"]
    assert list(df["Deficit"])[:4] == ["—", "—", "—", "-2000"]


def test_format_deficit():
    assert tables.format_deficit(None) == "—"
    assert tables.format_deficit(250) == "-250"


def test_render_report_success():
    report = TankAnalyzer(RefillSchedule(), TankSettings(consumption=1000)).run()
    text = tables.render_report(report)
    assert "DEFICIT IDENTIFICATION:" in text
    assert "TEST ITERATION WITH OPTIMAL VOLUME:" in text
    assert text.endswith("Minimum sufficient volume of the tank: 6000 liters")


def test_render_report_failure(june_schedule):
    text = tables.render_report(TankAnalyzer(june_schedule).run())
    assert "10,000 liters" in text
    assert "manual refilling will be required" in text


def test_plots_do_not_raise(monkeypatch, june_schedule):
    monkeypatch.setattr(plots.plt, "show", lambda: None)
    analyzer = TankAnalyzer(june_schedule)
    report = analyzer.run()
    analyzer.plot_refill_schedule()
    analyzer.plot_monthly_flows(report.deficit_run)
    analyzer.plot_tank_levels(report)
    plots.plt.close("all")


def test_cli_prints_report(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("consumption: 1000\n", encoding="utf-8")
    assert cli.main([str(path)]) == 0
    assert "Minimum sufficient volume of the tank: 6000 liters" in capsys.readouterr().out


def test_cli_missing_file(tmp_path):
    assert cli.main([str(tmp_path / "nope.txt")]) == 1
