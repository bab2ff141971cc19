"""Curated strategic dates, 2026-2030.

Manually verified dates of observances that move business calendars across
regions. Unlike public holidays these do not come from an API, so they are
available for years the upstream providers have not published yet.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class StrategicEvent:
    """A single- or multi-day observance."""

    name: str
    start: date
    end: date
    region: str
    impact_level: str  # "High" | "Critical"

    def covers(self, day: date) -> bool:
        return self.start <= day <= self.end


def _event(start: str, end: str, name: str, region: str, impact: str) -> StrategicEvent:
    first = date.fromisoformat(start)
    return StrategicEvent(
        name=name,
        start=first,
        end=date.fromisoformat(end) if end else first,
        region=region,
        impact_level=impact,
    )


STRATEGIC_EVENTS: tuple[StrategicEvent, ...] = (
    _event("2026-02-17", "", "Lunar New Year", "East Asia", "High"),
    _event("2026-03-20", "2026-03-22", "Eid al-Fitr", "MENA/Global", "High"),
    _event("2026-03-21", "", "Nowruz", "Central Asia/Iran", "High"),
    _event("2026-04-01", "2026-04-09", "Passover", "Global Jewish", "High"),
    _event("2026-04-03", "2026-04-06", "Easter (Western)", "US/EU/AUS", "High"),
    _event("2026-04-12", "", "Easter (Orthodox)", "East Europe/Russia", "High"),
    _event("2026-04-29", "2026-05-05", "Golden Week (Japan)", "Japan", "High"),
    _event("2026-05-27", "2026-05-30", "Eid al-Adha", "MENA/Global", "High"),
    _event("2026-09-12", "2026-09-13", "Rosh Hashanah", "Global Jewish", "High"),
    _event("2026-09-21", "", "Yom Kippur", "Global Jewish", "Critical"),
    _event("2026-10-01", "2026-10-07", "National Day (China)", "China", "High"),
    _event("2026-11-08", "", "Diwali", "India/Global", "High"),
    _event("2026-11-26", "", "Thanksgiving (US)", "USA", "High"),
    _event("2027-02-06", "", "Lunar New Year", "East Asia", "High"),
    _event("2027-03-09", "2027-03-11", "Eid al-Fitr", "MENA/Global", "High"),
    _event("2027-03-21", "", "Nowruz", "Central Asia/Iran", "High"),
    _event("2027-03-28", "2027-03-31", "Easter (Western)", "US/EU/AUS", "High"),
    _event("2027-04-22", "2027-04-30", "Passover", "Global Jewish", "High"),
    _event("2027-04-29", "2027-05-05", "Golden Week (Japan)", "Japan", "High"),
    _event("2027-05-02", "", "Easter (Orthodox)", "East Europe/Russia", "High"),
    _event("2027-05-16", "2027-05-19", "Eid al-Adha", "MENA/Global", "High"),
    _event("2027-10-01", "2027-10-07", "National Day (China)", "China", "High"),
    _event("2027-10-02", "2027-10-04", "Rosh Hashanah", "Global Jewish", "High"),
    _event("2027-10-11", "", "Yom Kippur", "Global Jewish", "Critical"),
    _event("2027-10-29", "", "Diwali", "India/Global", "High"),
    _event("2027-11-25", "", "Thanksgiving (US)", "USA", "High"),
    _event("2028-01-26", "", "Lunar New Year", "East Asia", "High"),
    _event("2028-02-26", "2028-02-28", "Eid al-Fitr", "MENA/Global", "High"),
    _event("2028-03-21", "", "Nowruz", "Central Asia/Iran", "High"),
    _event("2028-04-11", "2028-04-19", "Passover", "Global Jewish", "High"),
    _event("2028-04-16", "2028-04-17", "Easter (Western)", "US/EU/AUS", "High"),
    _event("2028-04-16", "", "Easter (Orthodox)", "East Europe/Russia", "High"),
    _event("2028-04-29", "2028-05-05", "Golden Week (Japan)", "Japan", "High"),
    _event("2028-05-05", "2028-05-08", "Eid al-Adha", "MENA/Global", "High"),
    _event("2028-09-21", "2028-09-22", "Rosh Hashanah", "Global Jewish", "High"),
    _event("2028-09-30", "", "Yom Kippur", "Global Jewish", "Critical"),
    _event("2028-10-01", "2028-10-07", "National Day (China)", "China", "High"),
    _event("2028-10-17", "", "Diwali", "India/Global", "High"),
    _event("2028-11-23", "", "Thanksgiving (US)", "USA", "High"),
    _event("2029-02-13", "", "Lunar New Year", "East Asia", "High"),
    _event("2029-02-14", "2029-02-16", "Eid al-Fitr", "MENA/Global", "High"),
    _event("2029-03-21", "", "Nowruz", "Central Asia/Iran", "High"),
    _event("2029-03-31", "2029-04-08", "Passover", "Global Jewish", "High"),
    _event("2029-04-01", "", "Easter (Western)", "US/EU/AUS", "High"),
    _event("2029-04-08", "", "Easter (Orthodox)", "East Europe/Russia", "High"),
    _event("2029-04-24", "2029-04-27", "Eid al-Adha", "MENA/Global", "High"),
    _event("2029-09-10", "2029-09-11", "Rosh Hashanah", "Global Jewish", "High"),
    _event("2029-09-19", "", "Yom Kippur", "Global Jewish", "Critical"),
    _event("2029-11-05", "", "Diwali", "India/Global", "High"),
    _event("2029-11-22", "", "Thanksgiving (US)", "USA", "High"),
    _event("2030-02-03", "", "Lunar New Year", "East Asia", "High"),
    _event("2030-02-04", "2030-02-06", "Eid al-Fitr", "MENA/Global", "High"),
    _event("2030-03-21", "", "Nowruz", "Central Asia/Iran", "High"),
    _event("2030-04-14", "2030-04-22", "Passover", "Global Jewish", "High"),
    _event("2030-04-14", "2030-04-16", "Eid al-Adha", "MENA/Global", "High"),
    _event("2030-04-21", "", "Easter (Western)", "US/EU/AUS", "High"),
    _event("2030-04-28", "", "Easter (Orthodox)", "East Europe/Russia", "High"),
    _event("2030-09-28", "2030-09-29", "Rosh Hashanah", "Global Jewish", "High"),
    _event("2030-10-07", "", "Yom Kippur", "Global Jewish", "Critical"),
    _event("2030-10-26", "", "Diwali", "India/Global", "High"),
    _event("2030-11-28", "", "Thanksgiving (US)", "USA", "High"),
)


def strategic_events_for_date(day: date) -> list[StrategicEvent]:
    """Return every strategic event covering ``day``."""
    return [event for event in STRATEGIC_EVENTS if event.covers(day)]
