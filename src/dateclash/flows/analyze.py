"""
Prefect flow running one strategic date analysis.

All independent fetches are submitted as tasks up front and joined once
every one of them has been issued:

- public holidays per year          (primary, failure fails the run)
- industry events for the country   (primary, failure fails the run)
- industry events per radar country (degrades to none)
- school holidays per year          (adapter degrades to none)
- region lookup                     (degrades to unknown)
- weather per calendar month        (degrades to unavailable)
- each watchlist location           (degrades to left out)

Merging happens only after the join, so tasks never share mutable state.

Run locally:
    python -m dateclash.flows.analyze DE 2026-06-01 2026-06-14
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Any

from prefect import flow, task

from dateclash.analysis.conflicts import ConflictSummary, conflict_days, resolve_conflicts
from dateclash.analysis.metadata import build_metadata
from dateclash.analysis.risk import RiskLevel, classify_timeline
from dateclash.analysis.serialization import timeline_to_dict
from dateclash.analysis.timeline import DateRange, Timeline, build_timeline
from dateclash.config import get_settings
from dateclash.datasources.holidays import Holiday, get_holidays
from dateclash.datasources.industry_events import (
    EventQuery,
    IndustryEvent,
    query_industry_events,
)
from dateclash.datasources.school_holidays import Region, SchoolHoliday, find_region, get_school_holidays
from dateclash.datasources.weather import (
    Coordinates,
    MonthlyWeatherSummary,
    geocode_city,
    resolve_monthly_weather,
)
from dateclash.flows.watchlist import collect_snapshots, submit_watchlist
from dateclash.schemas import AnalysisMetadata, AnalysisRequest
from dateclash.services.isolation import degrade_on_failure, propagate_failure
from dateclash.store import DataStore

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dateclash.analysis.conflicts import WatchlistSnapshot

# Data store with tiered directories
store = DataStore(get_settings().data_dir)

SUCCESS_MESSAGE = "Strategic analysis completed successfully."
FAILURE_PREFIX = "Failed to perform strategic analysis"


@dataclass
class AnalysisResult:
    """Outcome of one run. Failed runs carry only ``success`` and ``message``."""

    success: bool
    message: str
    date_range: DateRange | None = None
    days: Timeline = field(default_factory=dict)
    risk: dict[date, RiskLevel] = field(default_factory=dict)
    metadata: AnalysisMetadata | None = None
    conflicts: ConflictSummary | None = None
    watchlist: list[WatchlistSnapshot] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        if not self.success or self.date_range is None:
            return {"success": self.success, "message": self.message}
        start, end = self.date_range.isoformat()
        return {
            "success": True,
            "message": self.message,
            "start_date": start,
            "end_date": end,
            "metadata": self.metadata.model_dump(mode="json") if self.metadata else None,
            "conflicts": {
                "count": self.conflicts.count if self.conflicts else 0,
                "impacted_locations": self.conflicts.impacted_locations if self.conflicts else [],
            },
            "days": timeline_to_dict(self.days, self.risk, self.watchlist),
        }


# =============================================================================
# Fetch tasks
# =============================================================================


@task(name="load-public-holidays")
@propagate_failure("public-holidays")
def load_public_holidays(country_code: str, year: int) -> list[Holiday]:
    """Public holidays for the target country and one year."""
    return get_holidays(store, country_code, year)


@task(name="load-industry-events")
@propagate_failure("industry-events")
def load_industry_events(
    start: date,
    end: date,
    country_code: str,
    industries: Sequence[str],
    audiences: Sequence[str],
    scales: Sequence[str],
) -> EventQuery:
    """Target-country and Global events matching the filters."""
    return query_industry_events(store, start, end, country_code, industries, audiences, scales)


@task(name="load-radar-events")
@degrade_on_failure("radar-events", fallback=list)
def load_radar_events(
    start: date,
    end: date,
    country_code: str,
    industries: Sequence[str],
    audiences: Sequence[str],
    scales: Sequence[str],
) -> list[IndustryEvent]:
    """Events in one monitored country, tagged as radar occurrences."""
    result = query_industry_events(
        store, start, end, country_code, industries, audiences, scales, include_global=False
    )
    return [event.as_radar() for event in result.events]


@task(name="load-school-holidays")
def load_school_holidays(country_code: str, region_code: str, year: int) -> list[SchoolHoliday]:
    """School holidays for the subdivision and one year."""
    return get_school_holidays(store, country_code, region_code, year)


@task(name="lookup-region")
@degrade_on_failure("regions", fallback=lambda: None)
def lookup_region(country_code: str, region_code: str) -> Region | None:
    """Region record used for verification metadata."""
    return find_region(store, country_code, region_code)


@task(name="locate-city")
@degrade_on_failure("geocoding", fallback=lambda: None)
def locate_city(city: str, country_code: str) -> Coordinates | None:
    """Geocode the event city; None skips weather."""
    return geocode_city(city, country_code)


@task(name="load-weather-month")
@degrade_on_failure("weather", fallback=lambda: None)
def load_weather_month(
    city: str,
    month: int,
    lat: float,
    lon: float,
    target_year: int,
    target_date: date,
) -> MonthlyWeatherSummary | None:
    """Cached or freshly sampled weather summary for one calendar month."""
    return resolve_monthly_weather(store, city, month, lat, lon, target_year, target_date)


def resolve_coordinates(request: AnalysisRequest) -> Coordinates | None:
    """Explicit coordinates win; otherwise geocode the city, if any."""
    if request.has_coordinates:
        return Coordinates(
            city_name=request.city or "Unknown",
            lat=request.lat,  # type: ignore[arg-type]
            lon=request.lon,  # type: ignore[arg-type]
            country_code=request.country_code,
        )
    if request.city:
        print(f"Geocoding {request.city} in {request.country_code}...")
        return locate_city(request.city, request.country_code)
    print("No city given, weather will be skipped.")
    return None


# =============================================================================
# Flow
# =============================================================================


def _analyze(request: AnalysisRequest) -> AnalysisResult:  # noqa: PLR0914
    settings = get_settings()
    hubs = settings.proxy_hubs
    date_range = request.date_range(settings.analysis_padding_days)
    start, end = date_range.start, date_range.end
    years = date_range.years()
    filters = (request.industries, request.audiences, request.scales)

    coords = resolve_coordinates(request)

    # Issue every independent fetch before joining any of them
    holiday_futures = [load_public_holidays.submit(request.country_code, y) for y in years]
    events_future = load_industry_events.submit(start, end, request.country_code, *filters)
    radar_futures = [
        load_radar_events.submit(start, end, code, *filters)
        for code in request.radar_countries
        if code != request.country_code
    ]
    school_futures = []
    region_future = None
    if request.subdivision_code:
        school_futures = [
            load_school_holidays.submit(request.country_code, request.subdivision_code, y)
            for y in years
        ]
        region_future = lookup_region.submit(request.country_code, request.subdivision_code)
    weather_futures = {}
    if coords is not None:
        weather_futures = {
            month: load_weather_month.submit(
                coords.city_name,
                month,
                coords.lat,
                coords.lon,
                request.target_start.year,
                request.target_start,
            )
            for month in date_range.months()
        }
    watchlist_futures = submit_watchlist(store, request.watchlist, years)

    # Join
    holidays = [h for future in holiday_futures for h in future.result()]
    primary = events_future.result()
    radar_events = [e for future in radar_futures for e in future.result()]
    school_holidays = [s for future in school_futures for s in future.result()]
    region = region_future.result() if region_future is not None else None
    weather_by_month = {
        month: summary
        for month, future in weather_futures.items()
        if (summary := future.result()) is not None
    }
    snapshots = collect_snapshots(watchlist_futures)

    relevant_holidays = [h for h in holidays if date_range.contains(h.date)]
    print(
        f"Fetched {len(relevant_holidays)} holidays, {len(primary.events)} events "
        f"({primary.total_tracked} tracked), {len(radar_events)} radar events, "
        f"{len(school_holidays)} school holiday ranges, {len(weather_by_month)} weather months"
    )

    days = build_timeline(
        date_range,
        relevant_holidays,
        [*primary.events, *radar_events],
        school_holidays,
        weather_by_month,
    )
    risk = classify_timeline(days, hubs, conflict_days(snapshots, date_range))

    metadata = build_metadata(
        request.country_code,
        date_range,
        weather_city=coords.city_name if coords else None,
        weather_available=coords is not None and bool(weather_by_month),
        public_holiday_count=len(relevant_holidays),
        subdivision_code=request.subdivision_code,
        school_holidays=school_holidays,
        region=region,
        primary_events=primary,
        radar_events=radar_events,
    )

    return AnalysisResult(
        success=True,
        message=SUCCESS_MESSAGE,
        date_range=date_range,
        days=days,
        risk=risk,
        metadata=metadata,
        conflicts=resolve_conflicts(snapshots, date_range),
        watchlist=snapshots,
    )


@flow(name="strategic-analysis", log_prints=True, validate_parameters=False)
def run_analysis(request: AnalysisRequest | dict[str, Any]) -> AnalysisResult:
    """
    Run one analysis. Never raises.

    Invalid input, a missing API key or a failing primary source all come
    back as ``AnalysisResult(success=False)`` with a readable message.
    """
    try:
        if not isinstance(request, AnalysisRequest):
            request = AnalysisRequest.model_validate(request)
        print(
            f"Analyzing {request.country_code} {request.target_start} -> {request.target_end}"
        )
        result = _analyze(request)
    except Exception as e:  # noqa: BLE001
        print(f"Analysis failed: {e}")
        return AnalysisResult(success=False, message=f"{FAILURE_PREFIX}: {e}")

    print(f"Analysis complete: {len(result.days)} days")
    return result


if __name__ == "__main__":
    country, start_arg, end_arg = sys.argv[1:4]
    outcome = run_analysis(
        {"country_code": country, "target_start": start_arg, "target_end": end_arg}
    )
    print(f"Flow complete: {outcome.message}")
