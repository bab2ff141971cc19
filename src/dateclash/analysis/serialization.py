"""JSON-compatible views of a timeline.

Output is fully determined by the timeline: days in date order, per-day
collections already sorted, so ``json.dumps`` of the result is byte-identical
across re-runs with the same inputs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dateclash.analysis.conflicts import global_observances
from dateclash.reference.strategic import strategic_events_for_date

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from datetime import date

    from dateclash.analysis.conflicts import WatchlistSnapshot
    from dateclash.analysis.risk import RiskLevel
    from dateclash.analysis.timeline import DayRecord, Timeline
    from dateclash.datasources.weather.models import MonthlyWeatherSummary


def weather_for_day(summary: MonthlyWeatherSummary, day: date) -> dict[str, Any]:
    """Month-level aggregates plus the past-year samples for this calendar day."""
    return {
        "city": summary.city,
        "month": summary.month,
        "target_year": summary.target_year,
        "avg_temp_high_c": summary.avg_high_c,
        "avg_temp_low_c": summary.avg_low_c,
        "rain_days_count": summary.avg_rain_days,
        "humidity_pct": summary.avg_humidity_pct,
        "sunset_time": summary.typical_sunset,
        "history": [
            {
                "date": h.date.isoformat(),
                "temp_max": h.temp_max_c,
                "temp_min": h.temp_min_c,
                "rain_sum": h.rain_mm,
                "humidity": h.humidity_pct,
                "sunset": h.sunset,
            }
            for h in summary.history_for(day)
        ],
    }


def day_to_dict(
    record: DayRecord,
    risk: RiskLevel | None = None,
    snapshots: Iterable[WatchlistSnapshot] = (),
) -> dict[str, Any]:
    row: dict[str, Any] = {
        "date": record.date.isoformat(),
        "holidays": [h.to_dict() for h in record.holidays],
        "industry_events": [e.to_dict() for e in record.industry_events],
        "school_holiday": record.school_holiday,
        "weather": weather_for_day(record.weather, record.date) if record.weather else None,
        "observances": [o.name for o in global_observances(record, snapshots)],
        "strategic_events": [e.name for e in strategic_events_for_date(record.date)],
    }
    if risk is not None:
        row["risk"] = str(risk)
    return row


def timeline_to_dict(
    days: Timeline,
    risk_levels: Mapping[date, RiskLevel] | None = None,
    snapshots: Iterable[WatchlistSnapshot] = (),
) -> dict[str, dict[str, Any]]:
    """Map ISO date -> day row, in date order."""
    levels = risk_levels or {}
    watched = list(snapshots)
    return {
        day.isoformat(): day_to_dict(record, levels.get(day), watched)
        for day, record in days.items()
    }
