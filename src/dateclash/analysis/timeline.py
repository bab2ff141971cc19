"""Project holidays, events, school breaks and weather onto a day-indexed map.

The timeline is a ``dict[date, DayRecord]`` holding exactly one record per
calendar day of an inclusive ``DateRange``, in date order. Every merge is
keyed by date and idempotent, so the merged state doesn't depend on the order
sources were fetched in or how many times they were applied:

- holidays land on their single date; out-of-range holidays are dropped
- intervals (industry events, school holidays) are clipped to the range,
  then expanded day by day
- per-day holiday and event collections are deduplicated by identity and
  kept sorted
- the first school-holiday name placed on a day is kept
- every day adopts its calendar month's weather summary
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import TYPE_CHECKING

from dateclash.errors import InvalidRangeError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from dateclash.datasources.holidays.models import Holiday
    from dateclash.datasources.industry_events.models import IndustryEvent
    from dateclash.datasources.school_holidays.models import SchoolHoliday
    from dateclash.datasources.weather.models import MonthlyWeatherSummary


def days_between(start: date, end: date) -> int:
    """Signed number of days from ``start`` to ``end``."""
    return (end - start).days


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar date range."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end < self.start:
            msg = f"Range end {self.end} is before start {self.start}"
            raise InvalidRangeError(msg)

    def __len__(self) -> int:
        return days_between(self.start, self.end) + 1

    def __iter__(self) -> Iterator[date]:
        return self.days()

    def days(self) -> Iterator[date]:
        for offset in range(len(self)):
            yield self.start + timedelta(days=offset)

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def overlaps(self, start: date, end: date) -> bool:
        return start <= self.end and end >= self.start

    def clip(self, start: date, end: date) -> tuple[date, date] | None:
        """Intersect ``[start, end]`` with this range, or None if disjoint."""
        if not self.overlaps(start, end):
            return None
        return max(start, self.start), min(end, self.end)

    def years(self) -> list[int]:
        return list(range(self.start.year, self.end.year + 1))

    def months(self) -> list[int]:
        """Distinct calendar months touched, in order of first appearance."""
        months: list[int] = []
        for day in self.days():
            if day.month not in months:
                months.append(day.month)
            if len(months) == 12:
                break
        return months

    def padded(self, days: int) -> DateRange:
        """Widen the range by ``days`` on both sides."""
        delta = timedelta(days=days)
        return DateRange(self.start - delta, self.end + delta)

    def isoformat(self) -> tuple[str, str]:
        return self.start.isoformat(), self.end.isoformat()


def _holiday_order(holiday: Holiday) -> tuple[str, str]:
    return (holiday.country_code, holiday.name)


def _event_order(event: IndustryEvent) -> tuple[int, date, str, str, bool]:
    return (-event.risk_rank, event.start, event.name, event.id, event.is_radar)


@dataclass
class DayRecord:
    """Everything known about one calendar day of the analysis range."""

    date: date
    holidays: list[Holiday] = field(default_factory=list)
    industry_events: list[IndustryEvent] = field(default_factory=list)
    weather: MonthlyWeatherSummary | None = None
    school_holiday: str | None = None

    def add_holiday(self, holiday: Holiday) -> None:
        if any(h.identity == holiday.identity for h in self.holidays):
            return
        self.holidays.append(holiday)
        self.holidays.sort(key=_holiday_order)

    def add_event(self, event: IndustryEvent) -> None:
        if any(e.identity == event.identity for e in self.industry_events):
            return
        self.industry_events.append(event)
        self.industry_events.sort(key=_event_order)

    def set_school_holiday(self, name: str) -> bool:
        """Record a school holiday unless one is already set. Returns True if set."""
        if self.school_holiday is not None:
            return False
        self.school_holiday = name
        return True

    @property
    def is_empty(self) -> bool:
        return not (self.holidays or self.industry_events or self.school_holiday)


Timeline = dict[date, DayRecord]


# =============================================================================
# Merge passes
# =============================================================================


def empty_timeline(date_range: DateRange) -> Timeline:
    """One empty DayRecord per day, in date order."""
    return {day: DayRecord(date=day) for day in date_range.days()}


def _range_of(days: Timeline) -> DateRange | None:
    if not days:
        return None
    keys = list(days)
    return DateRange(keys[0], keys[-1])


def place_holidays(days: Timeline, holidays: Iterable[Holiday]) -> int:
    """Put each holiday on its date. Returns the number placed."""
    placed = 0
    for holiday in holidays:
        record = days.get(holiday.date)
        if record is not None:
            record.add_holiday(holiday)
            placed += 1
    return placed


def place_industry_events(days: Timeline, events: Iterable[IndustryEvent]) -> int:
    """Expand each event over its clipped interval. Returns event-day associations."""
    span = _range_of(days)
    if span is None:
        return 0
    placed = 0
    for event in events:
        clipped = span.clip(event.start, event.end)
        if clipped is None:
            continue
        for day in DateRange(*clipped).days():
            days[day].add_event(event)
            placed += 1
    return placed


def place_school_holidays(days: Timeline, school_holidays: Iterable[SchoolHoliday]) -> int:
    """Expand school breaks over their clipped intervals, first name wins per day."""
    span = _range_of(days)
    if span is None:
        return 0
    placed = 0
    for school_holiday in school_holidays:
        clipped = span.clip(school_holiday.start, school_holiday.end)
        if clipped is None:
            continue
        for day in DateRange(*clipped).days():
            if days[day].set_school_holiday(school_holiday.name):
                placed += 1
    return placed


def place_weather(days: Timeline, weather_by_month: Mapping[int, MonthlyWeatherSummary]) -> None:
    """Attach each month's summary to every day of that month."""
    for day, record in days.items():
        summary = weather_by_month.get(day.month)
        if summary is not None:
            record.weather = summary


def build_timeline(
    date_range: DateRange,
    holidays: Iterable[Holiday] = (),
    industry_events: Iterable[IndustryEvent] = (),
    school_holidays: Iterable[SchoolHoliday] = (),
    weather_by_month: Mapping[int, MonthlyWeatherSummary] | None = None,
) -> Timeline:
    """
    Build the day map for ``date_range`` from all sources.

    Args:
        date_range: Inclusive analysis range.
        holidays: Public holidays, any years; out-of-range ones are dropped.
        industry_events: Primary and radar events (radar tag travels on the event).
        school_holidays: School breaks in the order they should take precedence.
        weather_by_month: Summary per calendar month number (1-12).

    Returns:
        Dict of date -> DayRecord with exactly ``len(date_range)`` entries.
    """
    days = empty_timeline(date_range)
    place_holidays(days, holidays)
    place_industry_events(days, industry_events)
    place_school_holidays(days, school_holidays)
    if weather_by_month:
        place_weather(days, weather_by_month)
    return days
