"""Weather data models and cache keys."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from datetime import date

WEATHER_CACHE_DIR = Path("historical/weather")


@dataclass(frozen=True)
class Coordinates:
    """A geocoded city."""

    city_name: str
    lat: float
    lon: float
    country_code: str = ""


# =============================================================================
# Cache scope (tagged union)
# =============================================================================


@dataclass(frozen=True)
class GenericScope:
    """Year-agnostic summary row."""

    kind: ClassVar[str] = "generic"

    @property
    def target_year(self) -> None:
        return None

    @property
    def label(self) -> str:
        return "generic"


@dataclass(frozen=True)
class YearlyScope:
    """Summary row requested for one specific target year."""

    year: int
    kind: ClassVar[str] = "yearly"

    @property
    def target_year(self) -> int:
        return self.year

    @property
    def label(self) -> str:
        return str(self.year)


CacheScope = GenericScope | YearlyScope


def scope_for(target_year: int | None) -> CacheScope:
    """Map an optional target year onto its cache scope."""
    if target_year is None:
        return GenericScope()
    return YearlyScope(target_year)


def city_slug(city: str) -> str:
    """Filesystem-safe, case-insensitive city key ("São Paulo" -> "sao-paulo")."""
    ascii_name = unicodedata.normalize("NFKD", city).encode("ascii", "ignore").decode()
    slug = re.sub(r"[^a-z0-9]+", "-", ascii_name.lower()).strip("-")
    return slug or "unknown"


@dataclass(frozen=True)
class WeatherCacheKey:
    """Identity of one cached monthly summary: (city, month, scope)."""

    city: str
    month: int
    scope: CacheScope

    def path(self) -> Path:
        return WEATHER_CACHE_DIR / city_slug(self.city) / f"{self.month:02d}-{self.scope.label}.json"


# =============================================================================
# Summary
# =============================================================================


@dataclass(frozen=True)
class WeatherHistoryDay:
    """One retained daily archive sample."""

    date: date
    year: int
    temp_max_c: float | None
    temp_min_c: float | None
    rain_mm: float | None
    humidity_pct: float | None
    sunset: str | None
    window_label: str


@dataclass(frozen=True)
class YearSummary:
    """Reduction of one year's sample window."""

    year: int
    sample_count: int
    rain_days: int
    avg_humidity_pct: float
    typical_sunset: str


@dataclass(frozen=True)
class MonthlyWeatherSummary:
    """Multi-year weather picture for one city and calendar month.

    Shared by reference between every day of the month in a timeline, so it
    is frozen and its sequences are tuples.
    """

    city: str
    month: int
    scope: CacheScope
    avg_high_c: float
    avg_low_c: float
    avg_rain_days: float
    avg_humidity_pct: float
    typical_sunset: str
    history: tuple[WeatherHistoryDay, ...] = field(default=())
    years: tuple[YearSummary, ...] = field(default=())

    @property
    def target_year(self) -> int | None:
        return self.scope.target_year

    def history_for(self, day: date) -> list[WeatherHistoryDay]:
        """Samples from past years that share ``day``'s month and day."""
        return [
            h for h in self.history if h.date.month == day.month and h.date.day == day.day
        ]
