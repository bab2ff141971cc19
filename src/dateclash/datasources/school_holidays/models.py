"""School holiday and region models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from datetime import date


@dataclass(frozen=True)
class SchoolHoliday:
    """A school break for one region, inclusive on both ends."""

    name: str
    start: date
    end: date
    source_url: str | None = None

    def overlaps(self, start: date, end: date) -> bool:
        return self.start <= end and self.end >= start

    def covers(self, day: date) -> bool:
        return self.start <= day <= self.end


@dataclass(frozen=True)
class Region:
    """A country subdivision that school holidays can be queried for."""

    code: str
    name: str
    source: Literal["manual", "api"]
    source_url: str | None = None

    @property
    def is_verified(self) -> bool:
        """Manually curated regions are verified; API regions are not."""
        return self.source == "manual"
