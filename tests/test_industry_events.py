"""Tests for the curated industry-event catalog."""

from __future__ import annotations

import json
from datetime import date
from typing import TYPE_CHECKING, Any

import pytest

from dateclash.datasources.industry_events import (
    IndustryEvent,
    normalize_enum_array,
    normalize_scale,
    query_industry_events,
    unique_audiences,
    unique_industries,
)
from dateclash.datasources.industry_events.catalog import load_catalog, parse_event
from dateclash.store import DataStore

if TYPE_CHECKING:
    from pathlib import Path

CATALOG: list[dict[str, Any]] = [
    {
        "id": "evt-1",
        "name": "Money20/20 Europe",
        "start_date": "2026-06-02",
        "end_date": "2026-06-04",
        "city": "Amsterdam",
        "country_code": "NL",
        "industry": "{Fintech,Banking}",
        "audience_types": ["Founder", "VC"],
        "event_scale": "Major (5000+)",
        "risk_level": "High",
    },
    {
        "id": "evt-2",
        "name": "Amsterdam Tech Meetup",
        "start_date": "2026-06-03",
        "city": "Amsterdam",
        "country_code": "NL",
        "industry": "AI",
        "audience_types": [],
        "event_scale": "Boutique",
        "risk_level": "Low",
    },
    {
        "id": "evt-3",
        "name": "Global Remote Summit",
        "start_date": "2026-06-01",
        "end_date": "2026-06-02",
        "city": "Online",
        "country_code": "Global",
        "industry": ["Fintech"],
        "audience_types": "Engineer",
        "event_scale": "Major",
        "risk_level": "Critical",
    },
    {
        "id": "evt-4",
        "name": "Berlin Fintech Week",
        "start_date": "2026-09-10",
        "end_date": "2026-09-12",
        "city": "Berlin",
        "country_code": "DE",
        "industry": "{Fintech}",
        "audience_types": ["Executive"],
        "event_scale": "Major",
        "risk_level": "Medium",
    },
    {
        "id": "evt-5",
        "name": "Amsterdam Fintech Autumn",
        "start_date": "2026-10-10",
        "city": "Amsterdam",
        "country_code": "NL",
        "industry": "{Fintech}",
        "event_scale": "Major",
        "risk_level": "Medium",
    },
]


@pytest.fixture
def store(tmp_path: Path) -> DataStore:
    (tmp_path / "reference").mkdir()
    (tmp_path / "reference" / "industry_events.json").write_text(json.dumps(CATALOG))
    return DataStore(tmp_path)


def _ids(events: list[IndustryEvent]) -> list[str]:
    return [e.id for e in events]


class TestNormalization:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("{Fintech,Banking}", ["Fintech", "Banking"]),
            ('{"AI", Web3}', ["AI", "Web3"]),
            ("AI", ["AI"]),
            (["AI", " "], ["AI"]),
            (None, []),
            ("", []),
            (42, []),
        ],
    )
    def test_enum_array(self, value: Any, expected: list[str]) -> None:
        assert normalize_enum_array(value) == expected

    def test_audience_mapping(self) -> None:
        assert normalize_enum_array(["Founder", "PE", "Engineer"], map_audiences=True) == [
            "C-Level & Founders",
            "Investors",
            "Engineer",
        ]

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("Major (5000+)", "Major"), ("Boutique", "Boutique"), (None, ""), ("  ", "")],
    )
    def test_scale(self, value: Any, expected: str) -> None:
        assert normalize_scale(value) == expected


class TestParseEvent:
    def test_category_from_first_industry(self) -> None:
        event = parse_event(CATALOG[0])
        assert event.category == "Fintech"
        assert event.industries == ("Fintech", "Banking")
        assert event.audience_types == ("C-Level & Founders", "Investors")
        assert event.scale == "Major"

    def test_end_defaults_to_start(self) -> None:
        event = parse_event(CATALOG[1])
        assert event.end == event.start == date(2026, 6, 3)

    def test_general_category_without_industry(self) -> None:
        event = parse_event({"id": "x", "name": "X", "start_date": "2026-01-01"})
        assert event.category == "General"

    def test_radar_copy_has_distinct_identity(self) -> None:
        event = parse_event(CATALOG[0])
        radar = event.as_radar()
        assert radar.is_radar
        assert radar.identity != event.identity
        assert not event.is_radar


class TestLoadCatalog:
    def test_missing_catalog_is_empty(self, tmp_path: Path) -> None:
        assert load_catalog(DataStore(tmp_path)) == []

    def test_non_list_catalog_raises(self, tmp_path: Path) -> None:
        (tmp_path / "reference").mkdir()
        (tmp_path / "reference" / "industry_events.json").write_text(json.dumps({"rows": []}))
        with pytest.raises(ValueError, match="must be a list"):
            load_catalog(DataStore(tmp_path))


class TestQueryIndustryEvents:
    def test_country_includes_global_by_default(self, store: DataStore) -> None:
        result = query_industry_events(store, date(2026, 6, 1), date(2026, 6, 10), "NL")
        # Critical first, then High, then Low
        assert _ids(result.events) == ["evt-3", "evt-1", "evt-2"]

    def test_country_without_global(self, store: DataStore) -> None:
        result = query_industry_events(
            store, date(2026, 6, 1), date(2026, 6, 10), "NL", include_global=False
        )
        assert _ids(result.events) == ["evt-1", "evt-2"]

    def test_date_overlap_requires_both_bounds(self, store: DataStore) -> None:
        result = query_industry_events(store, date(2026, 6, 4), date(2026, 6, 4), "NL")
        assert _ids(result.events) == ["evt-1"]

    def test_total_tracked_ignores_dates(self, store: DataStore) -> None:
        result = query_industry_events(store, date(2026, 6, 1), date(2026, 6, 10), "NL")
        # evt-5 is outside the range but still tracked
        assert result.total_tracked == 4

    def test_industry_filter_any_match(self, store: DataStore) -> None:
        result = query_industry_events(
            store, date(2026, 6, 1), date(2026, 6, 10), "NL", industries=["Banking", "Crypto"]
        )
        assert _ids(result.events) == ["evt-1"]

    def test_audience_filter_passes_events_without_audiences(self, store: DataStore) -> None:
        result = query_industry_events(
            store, date(2026, 6, 1), date(2026, 6, 10), "NL", audiences=["Investors"]
        )
        assert _ids(result.events) == ["evt-1", "evt-2"]

    def test_scale_filter(self, store: DataStore) -> None:
        result = query_industry_events(
            store, date(2026, 6, 1), date(2026, 6, 10), "NL", scales=["Boutique"]
        )
        assert _ids(result.events) == ["evt-2"]
        assert result.total_tracked == 1

    def test_no_country_means_everywhere(self, store: DataStore) -> None:
        result = query_industry_events(store, date(2026, 1, 1), date(2026, 12, 31))
        assert len(result.events) == 5

    def test_empty_catalog(self, tmp_path: Path) -> None:
        result = query_industry_events(DataStore(tmp_path), date(2026, 6, 1), date(2026, 6, 2), "NL")
        assert result.events == []
        assert result.total_tracked == 0


class TestUniqueValues:
    def test_industries(self, store: DataStore) -> None:
        assert unique_industries(store) == ["AI", "Banking", "Fintech"]

    def test_audiences(self, store: DataStore) -> None:
        assert unique_audiences(store) == ["C-Level & Founders", "Engineer", "Investors"]
