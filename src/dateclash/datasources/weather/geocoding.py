"""City name -> coordinates via the Open-Meteo geocoding API."""

from __future__ import annotations

import logging
from typing import Any

import requests

from dateclash.datasources.weather.client import GEOCODING_API
from dateclash.datasources.weather.models import Coordinates
from dateclash.services.http import get_json

logger = logging.getLogger(__name__)


def geocode_city(city: str, country_code: str, *, max_candidates: int = 5) -> Coordinates | None:
    """
    Resolve a free-text city name inside the expected country.

    The first candidate whose country code matches ``country_code`` wins. A
    name that only resolves in another country counts as not found.

    Returns:
        Coordinates, or None when nothing matches, the API refuses the query
        or the answer is malformed.

    Raises:
        requests.RequestException: On network failure.
    """
    name = city.strip()
    if not name:
        return None

    params: dict[str, Any] = {
        "name": name,
        "count": max_candidates,
        "countryCode": country_code,
        "language": "en",
        "format": "json",
    }
    try:
        payload = get_json(GEOCODING_API, params, expect=dict)
    except (requests.HTTPError, ValueError) as e:
        logger.warning("Geocoding %r failed: %s", name, e)
        return None

    expected = country_code.upper()
    results = payload.get("results")
    for result in results if isinstance(results, list) else []:
        if not isinstance(result, dict):
            continue
        if str(result.get("country_code", "")).upper() != expected:
            continue
        try:
            lat, lon = float(result["latitude"]), float(result["longitude"])
        except (KeyError, TypeError, ValueError):
            logger.warning("Geocoding candidate for %r has no usable coordinates", name)
            continue
        return Coordinates(
            city_name=result.get("name") or name,
            lat=lat,
            lon=lon,
            country_code=expected,
        )

    logger.info("No geocoding match for %r in %s", name, expected)
    return None
