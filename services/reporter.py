from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TextIO

import config
from models.record import WeatherRecord
from models.summary import WeatherSummary
from services.aggregator import categorize_weather, summarize

logger = logging.getLogger("weather_analyzer.reporter")

# (title, minimum inner width, alignment)
_COLUMNS: tuple[tuple[str, int, str], ...] = (
    ("Date", 10, "<"),
    ("Temperature", 11, ">"),
    ("Humidity", 8, ">"),
    ("Precipitation", 13, ">"),
    ("Category", 8, "<"),
)


def _border(widths: Sequence[int], left: str, mid: str, right: str) -> str:
    return left + mid.join("─" * (w + 2) for w in widths) + right


def _row(cells: Sequence[str]) -> str:
    return "│" + "│".join(f" {c} " for c in cells) + "│"


def _record_cells(record: WeatherRecord) -> list[str]:
    temp_f = record.temperature_f
    return [
        record.date,
        f"{temp_f:.1f}°F",
        f"{record.humidity:.0f}%",
        f"{record.precipitation:.1f} mm",
        categorize_weather(temp_f),
    ]


def format_weather_table(store: Sequence[WeatherRecord]) -> str:
    """Render one box-drawn row per record, in store order."""
    rows = [_record_cells(r) for r in store]
    # Columns widen to fit their content, nothing is truncated
    widths = [
        max([minimum, len(title), *(len(row[i]) for row in rows)])
        for i, (title, minimum, _) in enumerate(_COLUMNS)
    ]

    lines = [
        _border(widths, "┌", "┬", "┐"),
        _row([f"{title:^{w}}" for (title, _, _), w in zip(_COLUMNS, widths)]),
        _border(widths, "├", "┼", "┤"),
    ]
    for row in rows:
        lines.append(_row([
            f"{cell:{align}{w}}"
            for cell, (_, _, align), w in zip(row, _COLUMNS, widths)
        ]))
    lines.append(_border(widths, "└", "┴", "┘"))
    return "\n".join(lines)


def _format_threshold(threshold_f: float) -> str:
    if float(threshold_f).is_integer():
        return str(int(threshold_f))
    return f"{threshold_f:.1f}"


def format_summary(summary: WeatherSummary) -> list[str]:
    return [
        f"Average Temperature for {summary.month_name}: "
        f"{summary.average_temperature_f:.2f}°F",
        f"Total Rainy Days: {summary.rainy_days}",
        f"Days Above {_format_threshold(summary.threshold_f)}°F: "
        f"{summary.days_above_threshold}",
    ]


def print_weather_report(
    store: Sequence[WeatherRecord], out: TextIO | None = None
) -> None:
    """Print the weather table followed by the August / 86°F statistics."""
    print(format_weather_table(store), file=out)
    print(file=out)
    summary = summarize(store, config.REPORT_MONTH, config.HOT_DAY_THRESHOLD_F)
    for line in format_summary(summary):
        print(line, file=out)
    logger.debug("Report printed for %d records", len(store))
