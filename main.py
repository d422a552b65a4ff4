#!/usr/bin/env python3
"""
Weather Analyzer: daily observation report.

Loads a CSV of daily observations (date, °C, humidity %, precipitation mm),
prints one table row per day with its weather category, then the August
average temperature, the rainy-day count and the number of days above 86°F.

Usage: python main.py [PATH]   (defaults to WEATHER_DATA_PATH)
"""
from __future__ import annotations

import logging
import sys

import config
from services.reporter import print_weather_report
from utils.weather_csv import RecordFormatError, load_records

logger = logging.getLogger("weather_analyzer")


def _configure_logging() -> None:
    # stderr only, stdout carries the report
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else config.WEATHER_DATA_PATH

    try:
        store = load_records(path)
    except OSError as exc:
        logger.error("Could not read weather data from %s: %s", path, exc)
        return 1
    except RecordFormatError as exc:
        logger.error("Malformed weather data in %s: %s", path, exc)
        return 1

    print_weather_report(store)
    return 0


def run() -> None:
    _configure_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
