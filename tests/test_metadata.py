"""Tests for result metadata and timeline serialization."""

from __future__ import annotations

import json
from datetime import date

from dateclash.analysis.metadata import build_metadata, school_holiday_dates
from dateclash.analysis.risk import Confidence, RiskLevel, classify_timeline
from dateclash.analysis.serialization import day_to_dict, timeline_to_dict, weather_for_day
from dateclash.analysis.timeline import DateRange, DayRecord, build_timeline
from dateclash.datasources.holidays.models import Holiday
from dateclash.datasources.industry_events.models import EventQuery, IndustryEvent
from dateclash.datasources.school_holidays.models import Region, SchoolHoliday
from dateclash.datasources.weather.models import (
    GenericScope,
    MonthlyWeatherSummary,
    WeatherHistoryDay,
)
from dateclash.schemas import AnalysisMetadata

RANGE = DateRange(date(2026, 7, 1), date(2026, 7, 10))

EVENT = IndustryEvent(
    id="evt-1",
    name="Summit",
    start=date(2026, 7, 2),
    end=date(2026, 7, 3),
    city="Berlin",
    country_code="DE",
    risk_level="High",
)


def _metadata(**overrides: object) -> AnalysisMetadata:
    kwargs: dict[str, object] = {
        "weather_city": "Berlin",
        "weather_available": True,
        "public_holiday_count": 2,
        "subdivision_code": "DE-BY",
        "school_holidays": [],
        "region": None,
        "primary_events": EventQuery(events=[EVENT], total_tracked=12),
        "radar_events": [],
    }
    kwargs.update(overrides)
    return build_metadata("DE", RANGE, **kwargs)  # type: ignore[arg-type]


class TestSchoolHolidayDates:
    def test_overlapping_breaks_counted_once(self) -> None:
        breaks = [
            SchoolHoliday("A", date(2026, 6, 25), date(2026, 7, 3)),
            SchoolHoliday("B", date(2026, 7, 2), date(2026, 7, 4)),
            SchoolHoliday("C", date(2026, 8, 1), date(2026, 8, 10)),
        ]
        assert len(school_holiday_dates(breaks, RANGE)) == 4


class TestBuildMetadata:
    def test_event_counts_and_confidence(self) -> None:
        radar = [EVENT.as_radar()]
        meta = _metadata(radar_events=radar)
        assert meta.industry_events.match_count == 1
        assert meta.industry_events.radar_count == 1
        assert meta.industry_events.total_tracked == 12
        assert meta.industry_events.confidence == Confidence.MEDIUM

    def test_weather_and_holidays(self) -> None:
        meta = _metadata(weather_available=False, weather_city=None)
        assert meta.weather.available is False
        assert meta.weather.city is None
        assert meta.public_holidays.count == 2
        assert meta.public_holidays.country_code == "DE"

    def test_known_region(self) -> None:
        region = Region("DE-BY", "Bavaria", "manual", source_url="https://km.bayern.de")
        meta = _metadata(
            region=region,
            school_holidays=[SchoolHoliday("Summer", date(2026, 7, 8), date(2026, 9, 14))],
        )
        school = meta.school_holidays
        assert school.checked
        assert school.region_name == "Bavaria"
        assert school.is_verified is True
        assert school.source_url == "https://km.bayern.de"
        assert school.count == 3

    def test_unknown_region_falls_back_to_code(self) -> None:
        school = _metadata().school_holidays
        assert school.region_name == "DE-BY"
        assert school.region_code == "DE-BY"
        assert school.is_verified is None

    def test_no_subdivision(self) -> None:
        school = _metadata(subdivision_code=None).school_holidays
        assert not school.checked
        assert school.region_name is None
        assert school.count == 0

    def test_json_dump(self) -> None:
        dumped = _metadata().model_dump(mode="json")
        assert dumped["industry_events"]["confidence"] == "MEDIUM"


class TestSerialization:
    def _summary(self) -> MonthlyWeatherSummary:
        history = tuple(
            WeatherHistoryDay(
                date=date(year, 7, 2),
                year=year,
                temp_max_c=24.0,
                temp_min_c=14.0,
                rain_mm=0.0,
                humidity_pct=60.0,
                sunset="21:15",
                window_label=f"Jun 25 - Jul 9, {year}",
            )
            for year in (2024, 2025)
        )
        return MonthlyWeatherSummary(
            city="Berlin",
            month=7,
            scope=GenericScope(),
            avg_high_c=24.0,
            avg_low_c=14.0,
            avg_rain_days=2.5,
            avg_humidity_pct=60.0,
            typical_sunset="21:15",
            history=history,
        )

    def test_weather_for_day_filters_history(self) -> None:
        summary = self._summary()
        assert len(weather_for_day(summary, date(2026, 7, 2))["history"]) == 2
        assert weather_for_day(summary, date(2026, 7, 3))["history"] == []

    def test_day_to_dict(self) -> None:
        record = DayRecord(date=date(2026, 7, 2))
        record.add_event(EVENT)
        row = day_to_dict(record, RiskLevel.CAUTION)
        assert row["date"] == "2026-07-02"
        assert row["industry_events"][0]["id"] == "evt-1"
        assert row["weather"] is None
        assert row["risk"] == "caution"

    def test_day_without_risk_has_no_key(self) -> None:
        assert "risk" not in day_to_dict(DayRecord(date=date(2026, 7, 2)))

    def test_timeline_output_is_byte_identical(self) -> None:
        holidays = [Holiday(date=date(2026, 7, 4), name="Independence Day", country_code="US")]

        def render() -> str:
            days = build_timeline(
                RANGE,
                holidays=holidays,
                industry_events=[EVENT, EVENT.as_radar()],
                weather_by_month={7: self._summary()},
            )
            return json.dumps(timeline_to_dict(days, classify_timeline(days)))

        first = render()
        assert first == render()
        decoded = json.loads(first)
        assert list(decoded) == [d.isoformat() for d in RANGE]
        assert decoded["2026-07-04"]["risk"] == "high"

    def test_observances_and_strategic_dates(self) -> None:
        day = date(2026, 3, 20)
        record = DayRecord(date=day)
        record.add_holiday(Holiday(date=day, name="Eid al-Fitr", country_code="AE"))

        row = day_to_dict(record)

        assert row["observances"] == ["Eid al-Fitr"]
        assert row["strategic_events"] == ["Eid al-Fitr"]
        assert day_to_dict(DayRecord(date=date(2026, 8, 12)))["strategic_events"] == []
