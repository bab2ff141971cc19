"""
Curated industry-event catalog.

The catalog lives at ``reference/industry_events.json`` as a list of rows::

    {"id": "evt-001", "name": "Money20/20 Europe", "start_date": "2026-06-02",
     "end_date": "2026-06-04", "city": "Amsterdam", "country_code": "NL",
     "industry": "{Fintech,Banking}", "audience_types": ["Founder", "VC"],
     "event_scale": "Major (5000+)", "risk_level": "High", "url": "https://..."}

Array columns arrive in several shapes (list, bare string, ``{a,b}`` literal)
and are normalized on load.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dateclash.datasources.industry_events.models import EventQuery, IndustryEvent
from dateclash.reference.hubs import GLOBAL_COUNTRY_CODE

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from dateclash.store import DataStore

logger = logging.getLogger(__name__)

CATALOG_PATH = Path("reference/industry_events.json")

DEFAULT_CATEGORY = "General"

AUDIENCE_MAP: dict[str, str] = {
    "Founder": "C-Level & Founders",
    "Executive": "C-Level & Founders",
    "VC": "Investors",
    "PE": "Investors",
    "Asset Manager": "Investors",
}


# =============================================================================
# Normalization
# =============================================================================


def normalize_enum_array(value: Any, *, map_audiences: bool = False) -> list[str]:
    """
    Normalize an array-ish catalog column to a list of strings.

    >>> normalize_enum_array('{Fintech,"AI"}')
    ['Fintech', 'AI']
    >>> normalize_enum_array("VC", map_audiences=True)
    ['Investors']
    """
    if not value:
        return []
    if isinstance(value, list | tuple):
        items = [str(v) for v in value]
    elif isinstance(value, str):
        text = value.strip()
        if text.startswith("{") and text.endswith("}"):
            items = [part.strip().replace('"', "") for part in text[1:-1].split(",")]
        else:
            items = [text]
    else:
        return []

    items = [item.strip() for item in items if item.strip()]
    if map_audiences:
        return [AUDIENCE_MAP.get(item, item) for item in items]
    return items


def normalize_scale(value: Any) -> str:
    """Keep the first word of a scale label ("Major (5000+)" -> "Major")."""
    if not value:
        return ""
    text = str(value).strip()
    return text.split(" ")[0] if text else ""


def parse_event(row: dict[str, Any]) -> IndustryEvent:
    """Build an IndustryEvent from a raw catalog row."""
    industries = normalize_enum_array(row.get("industry"))
    start = date.fromisoformat(str(row["start_date"])[:10])
    end_raw = row.get("end_date")
    return IndustryEvent(
        id=str(row.get("id") or row.get("name")),
        name=str(row.get("name") or ""),
        start=start,
        end=date.fromisoformat(str(end_raw)[:10]) if end_raw else start,
        city=str(row.get("city") or ""),
        country_code=str(row.get("country_code") or ""),
        industries=tuple(industries),
        audience_types=tuple(normalize_enum_array(row.get("audience_types"), map_audiences=True)),
        scale=normalize_scale(row.get("event_scale")),
        risk_level=str(row.get("risk_level") or ""),
        category=industries[0] if industries else DEFAULT_CATEGORY,
        url=str(row.get("url") or ""),
        description=row.get("description"),
    )


def load_catalog(store: DataStore) -> list[IndustryEvent]:
    """
    Load and normalize every catalog row.

    Returns an empty list when the catalog doesn't exist.

    Raises:
        ValueError: If the catalog is not a list or a row has a bad date.
    """
    rows = store.read(CATALOG_PATH)
    if rows is None:
        logger.info("No industry-event catalog at %s", CATALOG_PATH)
        return []
    if not isinstance(rows, list):
        msg = f"Industry-event catalog must be a list, got {type(rows).__name__}"
        raise ValueError(msg)
    return [parse_event(row) for row in rows]


# =============================================================================
# Query
# =============================================================================


def _matches_filters(
    event: IndustryEvent,
    industries: Sequence[str],
    audiences: Sequence[str],
    scales: Sequence[str],
) -> bool:
    if industries and not any(i in industries for i in event.industries):
        return False
    # events without audience types are never filtered out by audience
    if audiences and event.audience_types and not any(a in audiences for a in event.audience_types):
        return False
    return not (scales and event.scale not in scales)


def _in_country(event: IndustryEvent, country_code: str | None, include_global: bool) -> bool:
    if not country_code:
        return True
    if event.country_code == country_code:
        return True
    return include_global and event.country_code == GLOBAL_COUNTRY_CODE


def query_industry_events(
    store: DataStore,
    start: date,
    end: date,
    country_code: str | None = None,
    industries: Sequence[str] = (),
    audiences: Sequence[str] = (),
    scales: Sequence[str] = (),
    *,
    include_global: bool = True,
) -> EventQuery:
    """
    Events overlapping ``[start, end]`` that pass the active filters.

    ``total_tracked`` counts catalog events passing the same country,
    industry, audience and scale filters regardless of date; it feeds the
    confidence ladder.

    Events are ordered by risk level (most severe first), then start date.
    """
    tracked = [
        event
        for event in load_catalog(store)
        if _in_country(event, country_code, include_global)
        and _matches_filters(event, industries, audiences, scales)
    ]
    in_range = [event for event in tracked if event.overlaps(start, end)]
    in_range.sort(key=lambda e: (-e.risk_rank, e.start, e.id))
    return EventQuery(events=in_range, total_tracked=len(tracked))


def _unique_sorted(values: Iterable[str]) -> list[str]:
    return sorted({v for v in values if v})


def unique_industries(store: DataStore) -> list[str]:
    """All industry labels present in the catalog, sorted."""
    return _unique_sorted(i for event in load_catalog(store) for i in event.industries)


def unique_audiences(store: DataStore) -> list[str]:
    """All (mapped) audience labels present in the catalog, sorted."""
    return _unique_sorted(a for event in load_catalog(store) for a in event.audience_types)
