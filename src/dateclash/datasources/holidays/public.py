"""Public holidays per (country, year), cached permanently in the store.

Lookup order: store -> Calendarific -> insert. An empty upstream answer is
returned but not cached, so a later call can pick up newly published data.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from dateclash.config import get_settings
from dateclash.datasources.holidays.client import HOLIDAYS_ENDPOINT, cache_path
from dateclash.datasources.holidays.models import Holiday
from dateclash.errors import CacheRowExistsError
from dateclash.services.http import get_json

if TYPE_CHECKING:
    from dateclash.store import DataStore

logger = logging.getLogger(__name__)


def _parse_holiday(raw: dict[str, Any], country_code: str) -> Holiday | None:
    """Parse one Calendarific holiday. Returns None if the date is missing."""
    iso = (raw.get("date") or {}).get("iso")
    if not iso:
        return None
    types = raw.get("type")
    holiday_type = types[0] if isinstance(types, list) and types else types
    return Holiday.from_dict(
        {
            # DST-style entries carry a time part: "2026-03-08T02:00:00-08:00"
            "date": iso[:10],
            "name": raw.get("name") or "",
            "country_code": country_code,
            "description": raw.get("description"),
            "type": holiday_type,
        }
    )


def fetch_public_holidays(country_code: str, year: int, api_key: str) -> list[Holiday]:
    """
    Fetch public holidays from Calendarific.

    Raises:
        requests.HTTPError: If the API request fails.
        ValueError: If the body is not a JSON object.
    """
    params = {"api_key": api_key, "country": country_code, "year": year}
    payload = get_json(HOLIDAYS_ENDPOINT, params, expect=dict)
    raw_holidays = (payload.get("response") or {}).get("holidays") or []

    holidays: list[Holiday] = []
    for raw in raw_holidays:
        parsed = _parse_holiday(raw, country_code.upper())
        if parsed is not None:
            holidays.append(parsed)
    return holidays


def get_holidays(
    store: DataStore,
    country_code: str,
    year: int,
    api_key: str | None = None,
) -> list[Holiday]:
    """
    Return holidays for a country and year, from cache or upstream.

    Args:
        store: Data store holding ``historical/holidays``.
        country_code: ISO 3166-1 alpha-2 code.
        year: Calendar year.
        api_key: Calendarific key; defaults to the configured one.

    Raises:
        ConfigurationError: On a cache miss without a configured API key.
        requests.HTTPError: If the upstream request fails.
        CacheWriteError: If the row cannot be written (a row inserted
            concurrently for the same key is not an error).
    """
    path = cache_path(country_code, year)
    cached = store.read(path)
    if isinstance(cached, list) and cached:
        return [Holiday.from_dict(row) for row in cached]

    key = api_key or get_settings().require_calendarific_key()
    holidays = fetch_public_holidays(country_code, year, key)
    if not holidays:
        logger.info("Calendarific returned no holidays for %s %d; not caching", country_code, year)
        return []

    try:
        store.insert(
            path,
            [h.to_dict() for h in holidays],
            source="calendarific.com",
            country_code=country_code.upper(),
            year=year,
        )
    except CacheRowExistsError:
        logger.debug("Holidays for %s %d were cached by a concurrent fetch", country_code, year)
    return holidays
