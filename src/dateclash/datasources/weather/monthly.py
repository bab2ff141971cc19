"""Monthly weather summaries: cache lookup, archive sampling, aggregation.

For a city and calendar month, samples a 15-day window (target day ± 7)
from each of the last ``HISTORICAL_YEARS`` complete years and reduces them
into one ``MonthlyWeatherSummary``. Summaries are cached per
(city, month, scope) and never refreshed.

Failure contract:
  - network or parse failure -> logged, returns None ("weather unavailable")
  - an HTTP error status or malformed body for a single year -> that year is skipped
  - no usable year at all -> returns None, nothing is cached
  - a row inserted concurrently for the same key -> the fresh summary is kept
  - any other cache insert failure -> ``CacheWriteError`` propagates to the caller
"""

from __future__ import annotations

import calendar
import logging
from datetime import date, timedelta
from typing import TYPE_CHECKING

import requests

from dateclash.datasources.weather import aggregate
from dateclash.datasources.weather.archive import fetch_archive_window
from dateclash.datasources.weather.client import (
    DEFAULT_TARGET_DAY,
    HISTORICAL_YEARS,
    WINDOW_HALF_WIDTH_DAYS,
    SequentialRequestQueue,
)
from dateclash.datasources.weather.models import (
    MonthlyWeatherSummary,
    WeatherCacheKey,
    scope_for,
)
from dateclash.datasources.weather.serialization import summary_from_dict, summary_to_dict
from dateclash.errors import CacheRowExistsError

if TYPE_CHECKING:
    from dateclash.store import DataStore

logger = logging.getLogger(__name__)


def historical_years(today: date | None = None, count: int = HISTORICAL_YEARS) -> list[int]:
    """The ``count`` most recent years strictly before the current one, ascending."""
    current = (today or date.today()).year
    return list(range(current - count, current))


def resolve_target_day(month: int, target_date: date | str | None) -> int:
    """Day-of-month to centre the window on.

    Uses ``target_date``'s day when it falls in ``month``, else the 15th.
    An unparseable date string falls back to the 15th as well.
    """
    if isinstance(target_date, str):
        try:
            target_date = date.fromisoformat(target_date)
        except ValueError:
            return DEFAULT_TARGET_DAY
    if target_date is not None and target_date.month == month:
        return target_date.day
    return DEFAULT_TARGET_DAY


def sample_window(year: int, month: int, target_day: int) -> tuple[date, date]:
    """Window bounds for one year; the centre is clamped to the month's length."""
    day = min(target_day, calendar.monthrange(year, month)[1])
    centre = date(year, month, day)
    half = timedelta(days=WINDOW_HALF_WIDTH_DAYS)
    return centre - half, centre + half


def _fetch_year(
    lat: float, lon: float, year: int, month: int, target_day: int
) -> aggregate.YearWindow | None:
    start, end = sample_window(year, month, target_day)
    try:
        payload = fetch_archive_window(lat, lon, start, end)
    except (requests.HTTPError, ValueError) as e:
        logger.warning("Archive request for %d failed (%s); skipping year", year, e)
        return None

    daily = payload.get("daily") if isinstance(payload, dict) else None
    if not isinstance(daily, dict):
        logger.warning("Archive response for %d has no daily block; skipping year", year)
        return None
    return aggregate.parse_year_window(year, start, end, daily)


def resolve_monthly_weather(
    store: DataStore,
    city: str,
    month: int,
    lat: float,
    lon: float,
    target_year: int | None = None,
    target_date: date | str | None = None,
    *,
    queue: SequentialRequestQueue | None = None,
    today: date | None = None,
) -> MonthlyWeatherSummary | None:
    """
    Return the cached or freshly computed weather summary for a month.

    Args:
        store: Data store holding the ``historical/weather`` cache.
        city: City name (part of the cache key).
        month: Calendar month, 1-12.
        lat: Latitude of the city.
        lon: Longitude of the city.
        target_year: Year-specific cache row when given; generic row when None.
        target_date: Date whose day-of-month centres the sample window.
        queue: Request pacing; defaults to ``SequentialRequestQueue()``.
        today: Override for the current date (year selection).

    Returns:
        The summary, or None when weather could not be fetched.

    Raises:
        CacheWriteError: If the computed summary cannot be persisted.
    """
    key = WeatherCacheKey(city=city, month=month, scope=scope_for(target_year))
    path = key.path()

    try:
        cached = store.read(path)
    except (OSError, ValueError) as e:
        logger.warning("Unreadable weather cache row %s: %s", path, e)
        return None
    if isinstance(cached, dict):
        logger.debug("Weather cache hit for %s", path)
        return summary_from_dict(cached, key)

    target_day = resolve_target_day(month, target_date)
    years = historical_years(today)
    queue = queue or SequentialRequestQueue()
    logger.info(
        "Weather cache miss for %s; sampling %s around day %d", path, years, target_day
    )

    try:
        windows = queue.map(lambda y: _fetch_year(lat, lon, y, month, target_day), years)
        usable = [w for w in windows if w is not None]
        if not usable:
            # all-zero rows would be cached forever
            logger.warning("No archive year usable for %s month %d; not caching", city, month)
            return None
        summary = aggregate.combine_years(city, month, key.scope, usable)
    except (requests.RequestException, ValueError, KeyError, TypeError) as e:
        logger.warning("Weather unavailable for %s month %d: %s", city, month, e)
        return None

    try:
        store.insert(
            path,
            summary_to_dict(summary),
            source="open-meteo.com (archive)",
            city=city,
            month=month,
            target_year=target_year,
            location={"lat": lat, "lon": lon},
            years=years,
        )
    except CacheRowExistsError:
        logger.debug("Weather row %s was cached by a concurrent fetch", path)
    return summary
