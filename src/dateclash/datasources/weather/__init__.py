"""Open-Meteo weather data source.

Fetches historical daily weather from the Open-Meteo archive (free, no API
key) and reduces it into cached monthly summaries.

Public API:
  - monthly: resolve_monthly_weather (cache + sampling + aggregation)
  - geocoding: geocode_city
  - models: MonthlyWeatherSummary, WeatherHistoryDay, cache keys
  - client: API URLs, constants, SequentialRequestQueue
"""

from dateclash.datasources.weather.client import (
    ARCHIVE_API,
    GEOCODING_API,
    HISTORICAL_YEARS,
    RAIN_THRESHOLD_MM,
    SequentialRequestQueue,
)
from dateclash.datasources.weather.geocoding import geocode_city
from dateclash.datasources.weather.models import (
    Coordinates,
    GenericScope,
    MonthlyWeatherSummary,
    WeatherCacheKey,
    WeatherHistoryDay,
    YearlyScope,
    YearSummary,
)
from dateclash.datasources.weather.monthly import historical_years, resolve_monthly_weather

__all__ = [
    "ARCHIVE_API",
    "GEOCODING_API",
    "HISTORICAL_YEARS",
    "RAIN_THRESHOLD_MM",
    "Coordinates",
    "GenericScope",
    "MonthlyWeatherSummary",
    "SequentialRequestQueue",
    "WeatherCacheKey",
    "WeatherHistoryDay",
    "YearSummary",
    "YearlyScope",
    "geocode_city",
    "historical_years",
    "resolve_monthly_weather",
]
