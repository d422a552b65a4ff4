from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import config
from models.record import RecordStore, WeatherRecord

logger = logging.getLogger("weather_analyzer.csv")


class RecordFormatError(ValueError):
    """A data line that cannot be turned into a WeatherRecord."""

    def __init__(self, message: str, line: str, line_number: int | None = None) -> None:
        self.line = line
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


def _parse_number(field: str) -> float:
    # float() also takes "1_000", which is not a CSV number
    if "_" in field:
        raise ValueError(f"could not convert string to float: {field!r}")
    return float(field)


def parse_line(line: str, line_number: int | None = None) -> WeatherRecord:
    """
    Parse "date,temperatureC,humidity,precipitation" into a WeatherRecord.

    Raises RecordFormatError on a wrong field count or a non-numeric value.
    An unrecognized date is only logged; the record is still returned.
    """
    raw = line.rstrip("\r\n")
    parts = raw.split(config.CSV_DELIMITER)
    if len(parts) != config.EXPECTED_FIELD_COUNT:
        raise RecordFormatError(
            f"expected {config.EXPECTED_FIELD_COUNT} fields, got {len(parts)}: {raw!r}",
            raw,
            line_number,
        )

    date, temp_c, humidity, precipitation = parts
    try:
        record = WeatherRecord(
            date=date,
            temperature_c=_parse_number(temp_c),
            humidity=_parse_number(humidity),
            precipitation=_parse_number(precipitation),
        )
    except ValueError as exc:
        raise RecordFormatError(f"non-numeric field in {raw!r}", raw, line_number) from exc

    if not record.month.parsed:
        logger.warning("Invalid date format: %s", record.date)
    return record


def parse_lines(lines: Iterable[str], source: str | None = None) -> RecordStore:
    """Build a RecordStore from raw lines; the first line is the header and is skipped."""
    records = []
    for line_number, line in enumerate(lines, start=1):
        if line_number == 1:
            continue
        records.append(parse_line(line, line_number))
    return RecordStore(records, source=source)


def load_records(path: Path | str) -> RecordStore:
    """
    Read every observation from a CSV file.

    OSError propagates unchanged; bytes that are not UTF-8 raise RecordFormatError.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            store = parse_lines(f, source=str(path))
        except UnicodeDecodeError as exc:
            raise RecordFormatError(f"not valid UTF-8 text: {exc}", "") from exc
    logger.info("Loaded %d weather records from %s", len(store), path)
    unparsed = store.unparsed_dates()
    if unparsed:
        logger.info(
            "%d records have an unrecognized date and are excluded from monthly averages",
            len(unparsed),
        )
    return store
