"""Supported regions: manual override regions merged with OpenHolidays subdivisions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests

from dateclash.datasources.school_holidays.client import (
    LANGUAGE,
    SUBDIVISIONS_ENDPOINT,
    localized_text,
)
from dateclash.datasources.school_holidays.models import Region
from dateclash.datasources.school_holidays.overrides import manual_regions
from dateclash.services.http import get_json

if TYPE_CHECKING:
    from dateclash.store import DataStore

logger = logging.getLogger(__name__)


def fetch_api_subdivisions(country_code: str) -> list[Region]:
    """
    Fetch subdivisions for a country from OpenHolidays.

    Raises:
        requests.HTTPError: If the API request fails.
    """
    params = {"countryIsoCode": country_code, "languageIsoCode": LANGUAGE}
    payload: Any = get_json(SUBDIVISIONS_ENDPOINT, params)
    if isinstance(payload, dict):
        payload = payload.get("data") or payload.get("subdivisions") or []
    if not isinstance(payload, list):
        return []

    regions: list[Region] = []
    for raw in payload:
        code = raw.get("code") or raw.get("isoCode")
        if not code:
            continue
        regions.append(
            Region(code=code, name=localized_text(raw.get("name")) or code, source="api")
        )
    return regions


def get_supported_regions(store: DataStore, country_code: str) -> list[Region]:
    """
    All known regions for a country, sorted by name.

    Manual regions come first and win on a code collision; API regions fill
    in the rest. An API failure leaves the manual regions only.
    """
    regions: dict[str, Region] = {r.code: r for r in manual_regions(store, country_code)}

    try:
        api_regions = fetch_api_subdivisions(country_code)
    except (requests.RequestException, ValueError) as e:
        logger.warning("Subdivision lookup failed for %s, using manual regions only: %s", country_code, e)
        api_regions = []

    for region in api_regions:
        regions.setdefault(region.code, region)

    return sorted(regions.values(), key=lambda r: r.name.lower())


def find_region(store: DataStore, country_code: str, region_code: str) -> Region | None:
    """Look up one region by code."""
    for region in get_supported_regions(store, country_code):
        if region.code == region_code:
            return region
    return None
