"""Tests for static reference tables."""

from __future__ import annotations

from datetime import date

from dateclash.reference import (
    DEFAULT_PROXY_HUBS,
    GLOBAL_OBSERVANCES,
    STRATEGIC_EVENTS,
    get_global_impact,
    strategic_events_for_date,
)


class TestProxyHubs:
    def test_default_hubs(self) -> None:
        assert frozenset({"IL", "AE", "CN"}) == DEFAULT_PROXY_HUBS


class TestGlobalImpact:
    def test_keyword_match_is_case_insensitive(self) -> None:
        observance = get_global_impact("chinese lunar new year's eve")
        assert observance is GLOBAL_OBSERVANCES["Lunar New Year"]

    def test_partial_name(self) -> None:
        observance = get_global_impact("Eid al-Fitr (Day 2)")
        assert observance is not None
        assert "AE" in observance.affected_markets

    def test_no_match(self) -> None:
        assert get_global_impact("Labour Day") is None
        assert get_global_impact("") is None


class TestStrategicEvents:
    def test_multi_day_event(self) -> None:
        names = [e.name for e in strategic_events_for_date(date(2026, 4, 4))]
        assert names == ["Passover", "Easter (Western)"]

    def test_single_day_event(self) -> None:
        (event,) = strategic_events_for_date(date(2026, 9, 21))
        assert event.name == "Yom Kippur"
        assert event.impact_level == "Critical"

    def test_quiet_day(self) -> None:
        assert strategic_events_for_date(date(2026, 8, 12)) == []

    def test_ranges_are_ordered(self) -> None:
        assert all(e.start <= e.end for e in STRATEGIC_EVENTS)
