"""Watchlist conflict aggregation.

A watchlist location (another country or region the organizer cares about)
conflicts with a date range when one of its public holidays falls inside the
range or one of its school breaks overlaps it. Watchlist data is evaluated
on demand and never merged into the primary timeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from dateclash.analysis.timeline import DateRange
from dateclash.reference.cultural import get_global_impact

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from datetime import date

    from dateclash.analysis.timeline import DayRecord
    from dateclash.datasources.holidays.models import Holiday
    from dateclash.datasources.school_holidays.models import SchoolHoliday
    from dateclash.reference.cultural import CulturalObservance


@dataclass(frozen=True)
class WatchlistSnapshot:
    """A watchlist location with its resolved holidays and school breaks."""

    label: str
    country_code: str
    region_code: str | None = None
    holidays: tuple[Holiday, ...] = ()
    school_holidays: tuple[SchoolHoliday, ...] = ()

    def conflict_count(self, date_range: DateRange) -> int:
        in_range = sum(1 for h in self.holidays if date_range.contains(h.date))
        overlapping = sum(
            1 for s in self.school_holidays if date_range.overlaps(s.start, s.end)
        )
        return in_range + overlapping


@dataclass
class ConflictSummary:
    """Total conflicts and the labels of the locations that have any."""

    count: int = 0
    impacted_locations: list[str] = field(default_factory=list)

    @property
    def has_conflicts(self) -> bool:
        return self.count > 0


def resolve_conflicts(snapshots: Iterable[WatchlistSnapshot], date_range: DateRange) -> ConflictSummary:
    """
    Aggregate conflicts across all watchlist locations for a range.

    ``count`` sums conflicts over every location; ``impacted_locations`` lists
    each impacted label once, in first-seen order.
    """
    summary = ConflictSummary()
    for snapshot in snapshots:
        count = snapshot.conflict_count(date_range)
        if count == 0:
            continue
        summary.count += count
        if snapshot.label not in summary.impacted_locations:
            summary.impacted_locations.append(snapshot.label)
    return summary


def day_conflicts(snapshots: Iterable[WatchlistSnapshot], day: date) -> ConflictSummary:
    """Conflicts for a single day."""
    return resolve_conflicts(snapshots, DateRange(day, day))


def conflict_days(snapshots: Sequence[WatchlistSnapshot], date_range: DateRange) -> frozenset[date]:
    """Days of ``date_range`` on which at least one location conflicts."""
    days: set[date] = set()
    for snapshot in snapshots:
        days.update(h.date for h in snapshot.holidays if date_range.contains(h.date))
        for school_holiday in snapshot.school_holidays:
            clipped = date_range.clip(school_holiday.start, school_holiday.end)
            if clipped is not None:
                days.update(DateRange(*clipped).days())
    return frozenset(days)


def global_observances(
    record: DayRecord, snapshots: Iterable[WatchlistSnapshot] = ()
) -> list[CulturalObservance]:
    """Major cultural observances on a day, from the timeline or the watchlist."""
    holidays: list[Holiday] = list(record.holidays)
    for snapshot in snapshots:
        holidays.extend(h for h in snapshot.holidays if h.date == record.date)

    found: list[CulturalObservance] = []
    for holiday in holidays:
        observance = get_global_impact(holiday.name)
        if observance is not None and observance not in found:
            found.append(observance)
    return found
