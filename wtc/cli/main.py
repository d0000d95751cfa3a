# cli/main.py   (внешний скрипт запуска)

from __future__ import annotations

import argparse
import logging
import sys

from wtc import TankAnalyzer
from wtc.io.input_parser import parse_input_file
from wtc.visualization.tables import render_report

logger = logging.getLogger("wtc.cli")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wtc",
        description="Monthly tank balance and minimum tank capacity.",
    )
    parser.add_argument("input", nargs="?", default="input.txt", help="key: value input file")
    parser.add_argument(
        "--solver",
        choices=["bisection", "linear"],
        default="bisection",
        help="capacity search strategy",
    )
    parser.add_argument("--plot", action="store_true", help="show matplotlib charts")
    parser.add_argument("-v", "--verbose", action="store_true", help="DEBUG logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        data = parse_input_file(args.input)
    except OSError as exc:
        logger.error("Cannot read input file %s: %s", args.input, exc)
        return 1

    analyzer = TankAnalyzer(data.schedule, data.settings, solver=args.solver)
    report = analyzer.run()
    print(render_report(report))

    if args.plot:
        analyzer.plot_refill_schedule()
        analyzer.plot_monthly_flows(report.deficit_run)
        analyzer.plot_tank_levels(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
