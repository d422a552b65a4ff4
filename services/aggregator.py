"""
Aggregations over a RecordStore.

Every function takes the store explicitly, reads it, and returns a new value.
Nothing here keeps state between calls.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np

import config
from models.record import WeatherRecord
from models.summary import WeatherSummary

logger = logging.getLogger("weather_analyzer.aggregator")

# Ordered (decades, label) table over the truncated temperature decade.
# Anything not listed, including negative decades and 11+, is "Cold".
CATEGORY_BUCKETS: tuple[tuple[frozenset[int], str], ...] = (
    (frozenset({9, 10}), "Very Hot"),
    (frozenset({8}), "Hot"),
    (frozenset({7}), "Warm"),
    (frozenset({5, 6}), "Cool"),
)
DEFAULT_CATEGORY = "Cold"


def average_temperature_for_month(
    store: Sequence[WeatherRecord], month: int
) -> float:
    """Mean °F over records dated in *month*; 0.0 when there are none."""
    temps = np.array(
        [r.temperature_f for r in store if r.month.value == month],
        dtype=np.float64,
    )
    if temps.size == 0:
        logger.debug("No records for month %d", month)
        return 0.0
    return float(temps.mean())


def count_rainy_days(store: Sequence[WeatherRecord]) -> int:
    rainy = np.array([r.is_rainy for r in store], dtype=bool)
    return int(np.count_nonzero(rainy))


def days_above_temperature(
    store: Sequence[WeatherRecord], threshold_f: float
) -> tuple[WeatherRecord, ...]:
    """Records strictly warmer than *threshold_f* (°F), in store order."""
    return tuple(r for r in store if r.temperature_f > threshold_f)


def temperature_decade(temp_f: float) -> int:
    """Whole degrees truncated toward zero, then divided by 10 toward zero."""
    return int(math.trunc(temp_f) / 10)


def categorize_weather(temp_f: float) -> str:
    if not math.isfinite(temp_f):
        return DEFAULT_CATEGORY
    decade = temperature_decade(temp_f)
    for decades, label in CATEGORY_BUCKETS:
        if decade in decades:
            return label
    return DEFAULT_CATEGORY


def summarize(
    store: Sequence[WeatherRecord],
    month: int = config.REPORT_MONTH,
    threshold_f: float = config.HOT_DAY_THRESHOLD_F,
) -> WeatherSummary:
    summary = WeatherSummary(
        month=month,
        average_temperature_f=average_temperature_for_month(store, month),
        rainy_days=count_rainy_days(store),
        threshold_f=threshold_f,
        days_above_threshold=len(days_above_temperature(store, threshold_f)),
    )
    logger.debug("Summary: %s", summary)
    return summary
