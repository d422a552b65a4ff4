from __future__ import annotations

import calendar
from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherSummary:
    """Headline statistics printed under the weather table."""

    month: int
    average_temperature_f: float  # 0.0 when the month has no records
    rainy_days: int
    threshold_f: float
    days_above_threshold: int

    @property
    def month_name(self) -> str:
        if 1 <= self.month <= 12:
            return calendar.month_name[self.month]
        return "Unknown"
