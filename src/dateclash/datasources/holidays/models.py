"""Public holiday model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any


@dataclass(frozen=True)
class Holiday:
    """A public holiday on a single date."""

    date: date
    name: str
    country_code: str
    local_name: str | None = None
    description: str | None = None
    type: str | None = None

    @property
    def identity(self) -> tuple[str, str, str]:
        """Dedup key: the same holiday fetched twice is one holiday."""
        return (self.date.isoformat(), self.country_code, self.name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "name": self.name,
            "country_code": self.country_code,
            "local_name": self.local_name,
            "description": self.description,
            "type": self.type,
        }

    @classmethod
    def from_dict(cls, row: dict[str, Any]) -> Holiday:
        return cls(
            date=date.fromisoformat(str(row["date"])[:10]),
            name=str(row.get("name") or ""),
            country_code=str(row.get("country_code") or ""),
            local_name=row.get("local_name"),
            description=row.get("description"),
            type=row.get("type"),
        )
