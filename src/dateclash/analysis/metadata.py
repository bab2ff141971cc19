"""Derive the metadata block that accompanies an analysis result."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dateclash.analysis.risk import classify_confidence
from dateclash.analysis.timeline import DateRange
from dateclash.schemas import (
    AnalysisMetadata,
    IndustryEventMetadata,
    PublicHolidayMetadata,
    SchoolHolidayMetadata,
    WeatherMetadata,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from datetime import date

    from dateclash.datasources.industry_events.models import EventQuery, IndustryEvent
    from dateclash.datasources.school_holidays.models import Region, SchoolHoliday


def school_holiday_dates(
    school_holidays: Iterable[SchoolHoliday], date_range: DateRange
) -> set[date]:
    """Distinct days inside ``date_range`` covered by any school break."""
    days: set[date] = set()
    for school_holiday in school_holidays:
        clipped = date_range.clip(school_holiday.start, school_holiday.end)
        if clipped is not None:
            days.update(DateRange(*clipped).days())
    return days


def build_metadata(
    country_code: str,
    date_range: DateRange,
    *,
    weather_city: str | None,
    weather_available: bool,
    public_holiday_count: int,
    subdivision_code: str | None,
    school_holidays: Sequence[SchoolHoliday],
    region: Region | None,
    primary_events: EventQuery,
    radar_events: Sequence[IndustryEvent],
) -> AnalysisMetadata:
    """
    Assemble AnalysisMetadata for one run.

    When the requested subdivision isn't among the known regions, the raw
    code stands in for both the region name and code and verification is
    left unknown.
    """
    checked = bool(subdivision_code)
    if region is not None:
        school = SchoolHolidayMetadata(
            checked=checked,
            region_name=region.name,
            region_code=region.code,
            is_verified=region.is_verified,
            source_url=region.source_url,
        )
    else:
        school = SchoolHolidayMetadata(
            checked=checked,
            region_name=subdivision_code or None,
            region_code=subdivision_code or None,
        )
    school.count = len(school_holiday_dates(school_holidays, date_range))

    return AnalysisMetadata(
        weather=WeatherMetadata(available=weather_available, city=weather_city),
        public_holidays=PublicHolidayMetadata(
            count=public_holiday_count, country_code=country_code
        ),
        school_holidays=school,
        industry_events=IndustryEventMetadata(
            match_count=len(primary_events.events),
            radar_count=len(radar_events),
            total_tracked=primary_events.total_tracked,
            confidence=classify_confidence(primary_events.total_tracked),
        ),
    )
