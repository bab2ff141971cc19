"""Industry event models."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any

# Catalog risk labels, most severe first
RISK_LEVEL_RANK: dict[str, int] = {"Critical": 4, "High": 3, "Medium": 2, "Low": 1}


@dataclass(frozen=True)
class IndustryEvent:
    """A tracked industry or competitor event spanning one or more days."""

    id: str
    name: str
    start: date
    end: date
    city: str
    country_code: str
    industries: tuple[str, ...] = ()
    audience_types: tuple[str, ...] = ()
    scale: str = ""
    risk_level: str = ""
    category: str = "General"
    url: str = ""
    description: str | None = None
    is_radar: bool = False

    @property
    def identity(self) -> tuple[str, bool]:
        """Dedup key. A radar occurrence is distinct from a local one."""
        return (self.id, self.is_radar)

    @property
    def risk_rank(self) -> int:
        return RISK_LEVEL_RANK.get(self.risk_level, 0)

    def overlaps(self, start: date, end: date) -> bool:
        return self.start <= end and self.end >= start

    def as_radar(self) -> IndustryEvent:
        """Copy of this event tagged as a radar occurrence."""
        return replace(self, is_radar=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "start_date": self.start.isoformat(),
            "end_date": self.end.isoformat(),
            "city": self.city,
            "country_code": self.country_code,
            "industry": list(self.industries),
            "audience_types": list(self.audience_types),
            "event_scale": self.scale,
            "risk_level": self.risk_level,
            "category": self.category,
            "url": self.url,
            "description": self.description,
            "is_radar": self.is_radar,
        }


@dataclass
class EventQuery:
    """Filtered events for a date range plus the date-unfiltered match count."""

    events: list[IndustryEvent] = field(default_factory=list)
    total_tracked: int = 0
