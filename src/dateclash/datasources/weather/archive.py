"""Historical daily weather from Open-Meteo Archive API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dateclash.datasources.weather.client import ARCHIVE_API, DAILY_VARS
from dateclash.services.http import get_json

if TYPE_CHECKING:
    from datetime import date


def fetch_archive_window(lat: float, lon: float, start: date, end: date) -> dict[str, Any]:
    """
    Fetch daily archive samples for ``start..end`` (inclusive).

    Args:
        lat: Latitude.
        lon: Longitude.
        start: First day of the window.
        end: Last day of the window.

    Returns:
        Raw API response dict with a ``daily`` key containing aligned arrays.

    Raises:
        requests.HTTPError: If the API answers with a non-2xx status.
        ValueError: If the body is not a JSON object.
    """
    params: dict[str, Any] = {
        "latitude": lat,
        "longitude": lon,
        "start_date": start.isoformat(),
        "end_date": end.isoformat(),
        "daily": ",".join(DAILY_VARS),
        "timezone": "auto",
    }
    result: dict[str, Any] = get_json(ARCHIVE_API, params, expect=dict)
    return result
