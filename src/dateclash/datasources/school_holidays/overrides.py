"""Manual school-holiday override table.

``reference/manual_school_holidays.json`` holds rows like::

    {"country_code": "AE", "region_id": "AE-DU", "region_name": "Dubai",
     "holiday_name": "Spring Break", "start_date": "2026-03-16",
     "end_date": "2026-03-29", "source_url": "https://..."}

The file may be a bare list or a store envelope with the list under ``data``.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

from dateclash.datasources.school_holidays.client import (
    DEFAULT_SCHOOL_HOLIDAY_NAME,
    MANUAL_OVERRIDES_PATH,
)
from dateclash.datasources.school_holidays.models import Region, SchoolHoliday

if TYPE_CHECKING:
    from dateclash.store import DataStore


def load_manual_rows(store: DataStore) -> list[dict[str, Any]]:
    """All override rows, or an empty list when the table doesn't exist."""
    rows = store.read(MANUAL_OVERRIDES_PATH)
    if not isinstance(rows, list):
        return []
    return [row for row in rows if isinstance(row, dict)]


def manual_school_holidays(
    store: DataStore, country_code: str, region_code: str, year: int
) -> list[SchoolHoliday]:
    """Override rows for a region whose interval overlaps ``year``."""
    year_start, year_end = date(year, 1, 1), date(year, 12, 31)
    holidays: list[SchoolHoliday] = []
    for row in load_manual_rows(store):
        if row.get("country_code") != country_code or row.get("region_id") != region_code:
            continue
        holiday = SchoolHoliday(
            name=row.get("holiday_name") or DEFAULT_SCHOOL_HOLIDAY_NAME,
            start=date.fromisoformat(row["start_date"]),
            end=date.fromisoformat(row["end_date"]),
            source_url=row.get("source_url") or None,
        )
        if holiday.overlaps(year_start, year_end):
            holidays.append(holiday)
    return holidays


def manual_regions(store: DataStore, country_code: str) -> list[Region]:
    """Distinct regions present in the override table for a country."""
    regions: dict[str, Region] = {}
    for row in load_manual_rows(store):
        code = row.get("region_id")
        if row.get("country_code") != country_code or not code or code in regions:
            continue
        regions[code] = Region(
            code=code,
            name=row.get("region_name") or code,
            source="manual",
            source_url=row.get("source_url") or None,
        )
    return list(regions.values())
