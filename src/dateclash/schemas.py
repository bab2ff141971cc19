"""
Boundary models for dateclash.

Pydantic models for what crosses the process boundary: the analysis request
(from the CLI or a caller) and the metadata block returned with a result.
Internal records (holidays, events, weather) are frozen dataclasses in
their datasource packages.
"""

from __future__ import annotations

from datetime import date
from typing import Self

from pydantic import BaseModel, Field, field_validator, model_validator

from dateclash.analysis.risk import Confidence
from dateclash.analysis.timeline import DateRange

# =============================================================================
# Request
# =============================================================================


class WatchlistLocation(BaseModel):
    """Another country or region whose holidays should be flagged as conflicts."""

    model_config = {"str_strip_whitespace": True, "frozen": True}

    id: str = Field(..., min_length=1)
    country: str = Field(..., min_length=2, max_length=2)
    region: str | None = None
    label: str = Field(..., min_length=1)

    @field_validator("country")
    @classmethod
    def _upper_country(cls, value: str) -> str:
        return value.upper()


class AnalysisRequest(BaseModel):
    """Inputs for one strategic analysis run."""

    model_config = {"str_strip_whitespace": True}

    country_code: str = Field(..., min_length=2, max_length=2)
    target_start: date
    target_end: date
    city: str | None = None
    lat: float | None = Field(default=None, ge=-90, le=90)
    lon: float | None = Field(default=None, ge=-180, le=180)
    subdivision_code: str | None = None
    industries: list[str] = Field(default_factory=list)
    audiences: list[str] = Field(default_factory=list)
    scales: list[str] = Field(default_factory=list)
    radar_countries: list[str] = Field(default_factory=list)
    watchlist: list[WatchlistLocation] = Field(default_factory=list)

    @field_validator("country_code")
    @classmethod
    def _upper_country(cls, value: str) -> str:
        return value.upper()

    @field_validator("radar_countries")
    @classmethod
    def _upper_radar(cls, value: list[str]) -> list[str]:
        # one scan per country, in first-given order
        return list(dict.fromkeys(code.strip().upper() for code in value if code.strip()))

    @model_validator(mode="after")
    def _check_range(self) -> Self:
        if self.target_end < self.target_start:
            msg = f"target_end {self.target_end} is before target_start {self.target_start}"
            raise ValueError(msg)
        return self

    @property
    def has_coordinates(self) -> bool:
        return self.lat is not None and self.lon is not None

    def date_range(self, padding_days: int = 0) -> DateRange:
        """Analysis range: the target range widened by ``padding_days`` each side."""
        return DateRange(self.target_start, self.target_end).padded(padding_days)


# =============================================================================
# Metadata
# =============================================================================


class WeatherMetadata(BaseModel):
    available: bool = False
    city: str | None = None


class PublicHolidayMetadata(BaseModel):
    count: int = 0
    country_code: str


class SchoolHolidayMetadata(BaseModel):
    checked: bool = False
    region_name: str | None = None
    region_code: str | None = None
    count: int = Field(default=0, description="Unique school-holiday dates inside the range")
    is_verified: bool | None = None
    source_url: str | None = None


class IndustryEventMetadata(BaseModel):
    match_count: int = 0
    radar_count: int = 0
    total_tracked: int = 0
    confidence: Confidence = Confidence.NONE


class AnalysisMetadata(BaseModel):
    """What was consulted for a run and how complete it was."""

    weather: WeatherMetadata
    public_holidays: PublicHolidayMetadata
    school_holidays: SchoolHolidayMetadata
    industry_events: IndustryEventMetadata
