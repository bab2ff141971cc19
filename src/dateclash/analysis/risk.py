"""Per-day risk classification and industry-event confidence.

Risk is a strict priority order, not a score:

1. ``high``    at least one local holiday (country not a proxy hub)
2. ``caution`` a global-impact holiday, a watchlist conflict, a school
               holiday or any industry event
3. ``safe``    none of the above

Holidays fetched for proxy-hub countries (Israel, UAE, China by default)
stand in for globally observed dates; they inform but never block.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from dateclash.reference.hubs import DEFAULT_PROXY_HUBS

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable
    from datetime import date

    from dateclash.analysis.timeline import DayRecord, Timeline
    from dateclash.datasources.holidays.models import Holiday

HIGH_CONFIDENCE_MIN = 50
MEDIUM_CONFIDENCE_MIN = 10


class RiskLevel(StrEnum):
    """Day risk classification."""

    SAFE = "safe"
    CAUTION = "caution"
    HIGH = "high"


class Confidence(StrEnum):
    """How much industry-event coverage backs the analysis."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    NONE = "NONE"


def is_global_impact(holiday: Holiday, hubs: Collection[str] = DEFAULT_PROXY_HUBS) -> bool:
    """True if the holiday comes from a proxy-hub country."""
    return holiday.country_code in hubs


def split_holidays(
    holidays: Iterable[Holiday], hubs: Collection[str] = DEFAULT_PROXY_HUBS
) -> tuple[list[Holiday], list[Holiday]]:
    """Partition holidays into (local, global_impact)."""
    local: list[Holiday] = []
    global_impact: list[Holiday] = []
    for holiday in holidays:
        (global_impact if is_global_impact(holiday, hubs) else local).append(holiday)
    return local, global_impact


def classify_day(
    record: DayRecord,
    hubs: Collection[str] = DEFAULT_PROXY_HUBS,
    watchlist_conflict: bool = False,
) -> RiskLevel:
    local, global_impact = split_holidays(record.holidays, hubs)
    if local:
        return RiskLevel.HIGH
    if global_impact or watchlist_conflict or record.school_holiday or record.industry_events:
        return RiskLevel.CAUTION
    return RiskLevel.SAFE


def classify_confidence(total_tracked: int) -> Confidence:
    """
    Map the date-unfiltered event count onto the confidence ladder.

    >>> classify_confidence(49), classify_confidence(50)
    (<Confidence.MEDIUM: 'MEDIUM'>, <Confidence.HIGH: 'HIGH'>)
    """
    if total_tracked >= HIGH_CONFIDENCE_MIN:
        return Confidence.HIGH
    if total_tracked >= MEDIUM_CONFIDENCE_MIN:
        return Confidence.MEDIUM
    if total_tracked > 0:
        return Confidence.LOW
    return Confidence.NONE


def classify_timeline(
    days: Timeline,
    hubs: Collection[str] = DEFAULT_PROXY_HUBS,
    conflict_days: Collection[date] = frozenset(),
) -> dict[date, RiskLevel]:
    """Risk level for every day of a timeline, in date order."""
    return {
        day: classify_day(record, hubs, watchlist_conflict=day in conflict_days)
        for day, record in days.items()
    }
