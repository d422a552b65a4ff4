"""
Weather observation records and the in-memory record store.

A record keeps the date exactly as it appeared in the input.  Fahrenheit
temperature and month are derived on every access, never stored.
"""
from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import ClassVar, overload

MONTH_SENTINEL = -1

# YYYY-MM-DD
_ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
# M/D/YY or MM/DD/YY
_US_DATE_RE = re.compile(r"[0-9]{1,2}/[0-9]{1,2}/[0-9]{2}")


def celsius_to_f(temperature_c: float) -> float:
    return (temperature_c * 9 / 5) + 32


@dataclass(frozen=True)
class MonthResult:
    """Month extracted from a record date, or the unparsed variant."""

    value: int | None

    UNPARSED: ClassVar[MonthResult]

    @property
    def parsed(self) -> bool:
        return self.value is not None

    @property
    def number(self) -> int:
        """Month as an integer, MONTH_SENTINEL when the date was not understood."""
        return self.value if self.value is not None else MONTH_SENTINEL


MonthResult.UNPARSED = MonthResult(None)


def extract_month(date: str) -> MonthResult:
    """
    Extract the month from one of the two accepted date shapes.

    No calendar validation: "2024-13-01" yields 13.
    """
    if _ISO_DATE_RE.fullmatch(date):
        return MonthResult(int(date[5:7]))
    if _US_DATE_RE.fullmatch(date):
        return MonthResult(int(date.split("/")[0]))
    return MonthResult.UNPARSED


@dataclass(frozen=True)
class WeatherRecord:
    """One daily observation, as read from a single input line."""

    date: str  # raw, "YYYY-MM-DD" or "M/D/YY"
    temperature_c: float
    humidity: float  # percent
    precipitation: float  # millimetres

    @property
    def temperature_f(self) -> float:
        return celsius_to_f(self.temperature_c)

    @property
    def month(self) -> MonthResult:
        return extract_month(self.date)

    @property
    def month_number(self) -> int:
        return self.month.number

    @property
    def is_rainy(self) -> bool:
        return self.precipitation > 0


class RecordStore(Sequence[WeatherRecord]):
    """Ordered, read-only collection of every record loaded for one run."""

    def __init__(
        self, records: Iterable[WeatherRecord] = (), source: str | None = None
    ) -> None:
        self._records: tuple[WeatherRecord, ...] = tuple(records)
        self.source = source

    @overload
    def __getitem__(self, index: int) -> WeatherRecord: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[WeatherRecord, ...]: ...

    def __getitem__(self, index):
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[WeatherRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"RecordStore({len(self._records)} records, source={self.source!r})"

    def unparsed_dates(self) -> list[str]:
        """Dates whose month could not be extracted, in input order."""
        return [r.date for r in self._records if not r.month.parsed]
