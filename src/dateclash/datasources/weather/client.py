"""Open-Meteo API client constants and request pacing.

API docs:
  - Archive: https://open-meteo.com/en/docs/historical-weather-api
  - Geocoding: https://open-meteo.com/en/docs/geocoding-api

The archive API enforces a per-IP rate limit, so the per-year requests for
one location go through ``SequentialRequestQueue`` instead of running in
parallel.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from typing import TypeVar

ARCHIVE_API = "https://archive-api.open-meteo.com/v1/archive"
GEOCODING_API = "https://geocoding-api.open-meteo.com/v1/search"

# Daily variables we request from the archive
DAILY_VARS = [
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
    "relative_humidity_2m_mean",
    "sunset",
]

# Number of past years averaged into a monthly summary (never the current year)
HISTORICAL_YEARS = 4

# Minimum daily precipitation (mm) that counts as a rain day
RAIN_THRESHOLD_MM = 1.0

# Sample window is target day ± this many days (15 days inclusive)
WINDOW_HALF_WIDTH_DAYS = 7

# Representative day used when the target date is in another month
DEFAULT_TARGET_DAY = 15

# Pause between consecutive archive requests
REQUEST_DELAY_SECONDS = 0.4

T = TypeVar("T")
R = TypeVar("R")


class SequentialRequestQueue:
    """Run calls strictly one after another with a fixed pause in between."""

    def __init__(
        self,
        delay_seconds: float = REQUEST_DELAY_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.delay_seconds = delay_seconds
        self._sleep = sleep

    def map(self, fn: Callable[[T], R], items: Iterable[T]) -> list[R]:
        """Apply ``fn`` to each item in order, pausing between calls."""
        results: list[R] = []
        for i, item in enumerate(items):
            if i and self.delay_seconds > 0:
                self._sleep(self.delay_seconds)
            results.append(fn(item))
        return results
