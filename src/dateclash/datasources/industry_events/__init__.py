"""Curated industry-event catalog.

Public API:
  - catalog: query_industry_events, unique_industries, unique_audiences,
    normalize_enum_array, normalize_scale
  - models: IndustryEvent, EventQuery
"""

from dateclash.datasources.industry_events.catalog import (
    normalize_enum_array,
    normalize_scale,
    query_industry_events,
    unique_audiences,
    unique_industries,
)
from dateclash.datasources.industry_events.models import EventQuery, IndustryEvent

__all__ = [
    "EventQuery",
    "IndustryEvent",
    "normalize_enum_array",
    "normalize_scale",
    "query_industry_events",
    "unique_audiences",
    "unique_industries",
]
