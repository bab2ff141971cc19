"""Reduce multi-year archive windows into a monthly summary.

Pure functions, no I/O. Upstream samples are noisy: any value may be
``null`` or missing, and whole years may be absent. Every mean is taken over
the valid samples only, and an empty sample set yields 0 rather than NaN.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from dateclash.datasources.weather.client import RAIN_THRESHOLD_MM
from dateclash.datasources.weather.models import (
    CacheScope,
    MonthlyWeatherSummary,
    WeatherHistoryDay,
    YearSummary,
)

logger = logging.getLogger(__name__)


@dataclass
class YearWindow:
    """Parsed daily arrays for one year's sample window."""

    year: int
    start: date
    end: date
    days: list[date] = field(default_factory=list)
    highs: list[float | None] = field(default_factory=list)
    lows: list[float | None] = field(default_factory=list)
    precipitation: list[float | None] = field(default_factory=list)
    humidity: list[float | None] = field(default_factory=list)
    sunsets: list[str | None] = field(default_factory=list)

    @property
    def label(self) -> str:
        return window_label(self.start, self.end)


# =============================================================================
# Helpers
# =============================================================================


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if not math.isfinite(value):
        return None
    return float(value)


def valid_numbers(values: Iterable[Any]) -> list[float]:
    """Drop nulls, non-numbers and non-finite values."""
    return [n for n in (_as_number(v) for v in values) if n is not None]


def safe_mean(values: Iterable[Any]) -> float:
    """Mean of the valid values, or 0.0 when there are none."""
    valid = valid_numbers(values)
    if not valid:
        return 0.0
    return sum(valid) / len(valid)


def most_frequent(values: Iterable[str | None]) -> str:
    """Most common non-empty value; ties go to the first one seen."""
    counts = Counter(v for v in values if v)
    if not counts:
        return ""
    # most_common is stable for equal counts, so insertion order breaks ties
    return counts.most_common(1)[0][0]


def sunset_clock_time(value: Any) -> str | None:
    """``"2024-06-15T21:32"`` -> ``"21:32"``."""
    if not isinstance(value, str) or not value:
        return None
    return value.split("T", 1)[1] if "T" in value else value


def window_label(start: date, end: date) -> str:
    """Human-readable window, e.g. ``"Jun 8 - Jun 22, 2024"``."""
    return f"{start:%b} {start.day} - {end:%b} {end.day}, {end.year}"


def finite_or_zero(name: str, value: float) -> float:
    """Replace NaN/inf with 0 before the value is persisted."""
    if math.isfinite(value):
        return value
    logger.warning("Weather aggregate %s was %r; storing 0 instead", name, value)
    return 0.0


def _pick(values: list[Any], i: int) -> Any:
    return values[i] if i < len(values) else None


# =============================================================================
# Parsing
# =============================================================================


def parse_year_window(year: int, start: date, end: date, daily: dict[str, Any]) -> YearWindow:
    """Build a YearWindow from an archive ``daily`` block.

    Arrays are aligned on ``daily["time"]``; a short or missing array reads
    as nulls for the affected days.
    """
    times = daily.get("time") or []
    highs = daily.get("temperature_2m_max") or []
    lows = daily.get("temperature_2m_min") or []
    precipitation = daily.get("precipitation_sum") or []
    humidity = daily.get("relative_humidity_2m_mean") or []
    sunsets = daily.get("sunset") or []

    window = YearWindow(year=year, start=start, end=end)
    for i, t in enumerate(times):
        window.days.append(date.fromisoformat(t))
        window.highs.append(_as_number(_pick(highs, i)))
        window.lows.append(_as_number(_pick(lows, i)))
        window.precipitation.append(_as_number(_pick(precipitation, i)))
        window.humidity.append(_as_number(_pick(humidity, i)))
        window.sunsets.append(sunset_clock_time(_pick(sunsets, i)))
    return window


# =============================================================================
# Reductions
# =============================================================================


def count_rain_days(precipitation: Iterable[Any], threshold_mm: float = RAIN_THRESHOLD_MM) -> int:
    """Number of days with precipitation strictly above ``threshold_mm``."""
    return sum(1 for p in valid_numbers(precipitation) if p > threshold_mm)


def summarize_year(window: YearWindow, threshold_mm: float = RAIN_THRESHOLD_MM) -> YearSummary:
    """Per-year reduction: rain-day count, mean humidity, typical sunset."""
    return YearSummary(
        year=window.year,
        sample_count=len(window.days),
        rain_days=count_rain_days(window.precipitation, threshold_mm),
        avg_humidity_pct=round(finite_or_zero("year_humidity", safe_mean(window.humidity)), 1),
        typical_sunset=most_frequent(window.sunsets),
    )


def history_for_window(window: YearWindow) -> list[WeatherHistoryDay]:
    """Retained daily samples for one year, labelled with their window."""
    label = window.label
    history: list[WeatherHistoryDay] = []
    for i, day in enumerate(window.days):
        high, low, rain, hum = (
            window.highs[i],
            window.lows[i],
            window.precipitation[i],
            window.humidity[i],
        )
        history.append(
            WeatherHistoryDay(
                date=day,
                year=window.year,
                temp_max_c=round(high, 1) if high is not None else None,
                temp_min_c=round(low, 1) if low is not None else None,
                rain_mm=round(rain, 2) if rain is not None else None,
                humidity_pct=round(hum, 1) if hum is not None else None,
                sunset=window.sunsets[i],
                window_label=label,
            )
        )
    return history


def combine_years(
    city: str,
    month: int,
    scope: CacheScope,
    windows: list[YearWindow],
    threshold_mm: float = RAIN_THRESHOLD_MM,
) -> MonthlyWeatherSummary:
    """Cross-year reduction into a MonthlyWeatherSummary.

    Highs, lows and humidity are pooled across all years before averaging.
    Rain days are the mean of the per-year counts, not a pooled day count.
    The typical sunset is the most frequent clock time across all years.
    """
    years = [summarize_year(w, threshold_mm) for w in windows]
    highs = [v for w in windows for v in w.highs]
    lows = [v for w in windows for v in w.lows]
    humidity = [v for w in windows for v in w.humidity]
    sunsets = [v for w in windows for v in w.sunsets]

    history: list[WeatherHistoryDay] = []
    for w in windows:
        history.extend(history_for_window(w))

    return MonthlyWeatherSummary(
        city=city,
        month=month,
        scope=scope,
        avg_high_c=round(finite_or_zero("avg_high_c", safe_mean(highs)), 1),
        avg_low_c=round(finite_or_zero("avg_low_c", safe_mean(lows)), 1),
        avg_rain_days=round(
            finite_or_zero("avg_rain_days", safe_mean(y.rain_days for y in years)), 1
        ),
        avg_humidity_pct=round(finite_or_zero("avg_humidity_pct", safe_mean(humidity)), 1),
        typical_sunset=most_frequent(sunsets),
        history=tuple(history),
        years=tuple(years),
    )
