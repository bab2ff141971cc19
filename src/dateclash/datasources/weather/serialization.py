"""JSON serialization for cached monthly weather summaries.

Row layout (under the store envelope's ``data`` key)::

    {
      "city": "Berlin", "month": 6, "target_year": 2026 | null,
      "avg_temp_high_c": 23.4, "avg_temp_low_c": 13.1,
      "rain_days_count": 4.5, "humidity_pct": 66.0, "sunset_time": "21:32",
      "history_data": [{"date": "2024-06-08", "year": 2024, ...}, ...],
      "years": [{"year": 2024, "rain_days": 5, ...}, ...]
    }

Rows are read leniently: scalars and counts that are missing or not
finite numbers come back as 0, and a ``history_data`` value that is not a
list is treated as absent.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Any

from dateclash.datasources.weather.models import (
    MonthlyWeatherSummary,
    WeatherCacheKey,
    WeatherHistoryDay,
    YearSummary,
)

logger = logging.getLogger(__name__)


def summary_to_dict(summary: MonthlyWeatherSummary) -> dict[str, Any]:
    """Serialize a MonthlyWeatherSummary to a JSON-compatible dict."""
    return {
        "city": summary.city,
        "month": summary.month,
        "target_year": summary.target_year,
        "avg_temp_high_c": summary.avg_high_c,
        "avg_temp_low_c": summary.avg_low_c,
        "rain_days_count": summary.avg_rain_days,
        "humidity_pct": summary.avg_humidity_pct,
        "sunset_time": summary.typical_sunset,
        "history_data": [
            {
                "date": h.date.isoformat(),
                "year": h.year,
                "temp_max": h.temp_max_c,
                "temp_min": h.temp_min_c,
                "rain_sum": h.rain_mm,
                "humidity": h.humidity_pct,
                "sunset": h.sunset,
                "window_label": h.window_label,
            }
            for h in summary.history
        ],
        "years": [
            {
                "year": y.year,
                "sample_count": y.sample_count,
                "rain_days": y.rain_days,
                "avg_humidity_pct": y.avg_humidity_pct,
                "typical_sunset": y.typical_sunset,
            }
            for y in summary.years
        ],
    }


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float) or not math.isfinite(value):
        return 0.0
    return float(value)


def _optional_number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, int | float) or not math.isfinite(value):
        return None
    return float(value)


def _integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int | float) or not math.isfinite(value):
        return 0
    return int(value)


def _history_from_rows(rows: list[Any]) -> tuple[WeatherHistoryDay, ...]:
    history: list[WeatherHistoryDay] = []
    for row in rows:
        if not isinstance(row, dict):
            continue
        try:
            day = date.fromisoformat(str(row.get("date")))
        except ValueError:
            continue
        history.append(
            WeatherHistoryDay(
                date=day,
                year=_integer(row.get("year")) or day.year,
                temp_max_c=_optional_number(row.get("temp_max")),
                temp_min_c=_optional_number(row.get("temp_min")),
                rain_mm=_optional_number(row.get("rain_sum")),
                humidity_pct=_optional_number(row.get("humidity")),
                sunset=row.get("sunset") if isinstance(row.get("sunset"), str) else None,
                window_label=str(row.get("window_label") or ""),
            )
        )
    return tuple(history)


def _years_from_rows(rows: Any) -> tuple[YearSummary, ...]:
    if not isinstance(rows, list):
        return ()
    return tuple(
        YearSummary(
            year=row["year"],
            sample_count=_integer(row.get("sample_count")),
            rain_days=_integer(row.get("rain_days")),
            avg_humidity_pct=_number(row.get("avg_humidity_pct")),
            typical_sunset=str(row.get("typical_sunset") or ""),
        )
        for row in rows
        if isinstance(row, dict) and isinstance(row.get("year"), int)
    )


def summary_from_dict(data: dict[str, Any], key: WeatherCacheKey) -> MonthlyWeatherSummary:
    """Rebuild a summary from a cached row, sanitizing malformed history."""
    history_rows = data.get("history_data")
    if history_rows is not None and not isinstance(history_rows, list):
        logger.warning(
            "Cached weather row %s has malformed history_data (%s); ignoring it",
            key.path(),
            type(history_rows).__name__,
        )
        history_rows = None

    return MonthlyWeatherSummary(
        city=str(data.get("city") or key.city),
        month=key.month,
        scope=key.scope,
        avg_high_c=_number(data.get("avg_temp_high_c")),
        avg_low_c=_number(data.get("avg_temp_low_c")),
        avg_rain_days=_number(data.get("rain_days_count")),
        avg_humidity_pct=_number(data.get("humidity_pct")),
        typical_sunset=str(data.get("sunset_time") or ""),
        history=_history_from_rows(history_rows or []),
        years=_years_from_rows(data.get("years")),
    )
