"""School holidays per (country, region, year).

Manual overrides win; the OpenHolidays API is only asked when the override
table has nothing for that key. Upstream failures are logged and read as
"no school holidays" rather than failing the caller.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Any

import requests

from dateclash.datasources.school_holidays.client import (
    LANGUAGE,
    SCHOOL_HOLIDAYS_ENDPOINT,
    localized_text,
)
from dateclash.datasources.school_holidays.models import SchoolHoliday
from dateclash.datasources.school_holidays.overrides import manual_school_holidays
from dateclash.services.http import get_json

if TYPE_CHECKING:
    from dateclash.store import DataStore

logger = logging.getLogger(__name__)


def _parse_school_holiday(raw: dict[str, Any]) -> SchoolHoliday | None:
    name = localized_text(raw.get("name"))
    start = raw.get("startDate")
    end = raw.get("endDate") or start
    if not name or not start:
        return None
    return SchoolHoliday(name=name, start=date.fromisoformat(start), end=date.fromisoformat(end))


def fetch_api_school_holidays(country_code: str, region_code: str, year: int) -> list[SchoolHoliday]:
    """
    Fetch school holidays for a subdivision from OpenHolidays.

    Raises:
        requests.HTTPError: If the API request fails.
    """
    params = {
        "countryIsoCode": country_code,
        "subdivisionCode": region_code,
        "validFrom": f"{year}-01-01",
        "validTo": f"{year}-12-31",
        "languageIsoCode": LANGUAGE,
    }
    payload = get_json(SCHOOL_HOLIDAYS_ENDPOINT, params)
    if not isinstance(payload, list):
        return []

    holidays: list[SchoolHoliday] = []
    for raw in payload:
        parsed = _parse_school_holiday(raw)
        if parsed is not None:
            holidays.append(parsed)
    return holidays


def get_school_holidays(
    store: DataStore, country_code: str, region_code: str, year: int
) -> list[SchoolHoliday]:
    """Return school holidays for a region and year, manual table first."""
    manual = manual_school_holidays(store, country_code, region_code, year)
    if manual:
        logger.debug("Using %d manual school holidays for %s %d", len(manual), region_code, year)
        return manual

    try:
        return fetch_api_school_holidays(country_code, region_code, year)
    except (requests.RequestException, ValueError) as e:
        logger.warning("School holidays unavailable for %s %d: %s", region_code, year, e)
        return []
