"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
import json
from datetime import date
from io import StringIO
from typing import TYPE_CHECKING, Any
from unittest.mock import patch

import pytest

from dateclash.analysis.conflicts import ConflictSummary
from dateclash.analysis.risk import RiskLevel
from dateclash.analysis.timeline import DateRange, build_timeline
from dateclash.cli import (
    cmd_analyze,
    cmd_industries,
    cmd_info,
    cmd_regions,
    create_parser,
    main,
    parse_watch,
    watch_arg,
)
from dateclash.datasources.holidays import Holiday
from dateclash.datasources.school_holidays import Region
from dateclash.flows.analyze import AnalysisResult

if TYPE_CHECKING:
    from pathlib import Path

ANALYZE_ARGV = ["analyze", "--country", "DE", "--start", "2026-06-01", "--end", "2026-06-02"]


def _analyze_args(**overrides: Any) -> argparse.Namespace:
    values: dict[str, Any] = {
        "country": "DE",
        "start": date(2026, 6, 1),
        "end": date(2026, 6, 2),
        "city": None,
        "lat": None,
        "lon": None,
        "region": None,
        "industry": [],
        "audience": [],
        "scale": [],
        "radar": [],
        "watch": [],
        "json": False,
        "debug": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


def _success() -> AnalysisResult:
    date_range = DateRange(date(2026, 6, 1), date(2026, 6, 2))
    days = build_timeline(
        date_range,
        holidays=[Holiday(date=date(2026, 6, 2), name="Bank Holiday", country_code="DE")],
    )
    return AnalysisResult(
        success=True,
        message="Strategic analysis completed successfully.",
        date_range=date_range,
        days=days,
        risk={date(2026, 6, 1): RiskLevel.SAFE, date(2026, 6, 2): RiskLevel.HIGH},
        conflicts=ConflictSummary(count=1, impacted_locations=["UK"]),
    )


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "dateclash"

    def test_parser_has_version(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--version"])

    def test_parser_has_debug_flag(self) -> None:
        args = create_parser().parse_args(["--debug", "info"])
        assert args.debug is True

    def test_analyze_command(self) -> None:
        args = create_parser().parse_args(
            [
                "analyze",
                "--country",
                "DE",
                "--start",
                "2026-06-01",
                "--end",
                "2026-06-14",
                "--industry",
                "Fintech",
                "--industry",
                "AI",
                "--radar",
                "NL",
                "--watch",
                "GB=UK",
            ]
        )
        assert args.command == "analyze"
        assert args.start == date(2026, 6, 1)
        assert args.industry == ["Fintech", "AI"]
        assert args.radar == ["NL"]
        assert args.watch == ["GB=UK"]
        assert args.json is False

    def test_analyze_requires_dates(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["analyze", "--country", "DE"])

    def test_analyze_rejects_bad_date(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(
                ["analyze", "--country", "DE", "--start", "June 1", "--end", "2026-06-02"]
            )

    @pytest.mark.parametrize("value", ["X", "germany", ":DE-BY", "DEU=Germany"])
    def test_bad_watch_value_is_usage_error(self, value: str) -> None:
        with (
            patch("sys.stderr", new=StringIO()) as mock_stderr,
            pytest.raises(SystemExit) as exc_info,
        ):
            create_parser().parse_args([*ANALYZE_ARGV, "--watch", value])
        assert exc_info.value.code == 2
        assert "invalid watchlist location" in mock_stderr.getvalue()

    def test_regions_command(self) -> None:
        args = create_parser().parse_args(["regions", "de"])
        assert args.command == "regions"
        assert args.country == "de"


class TestParseWatch:
    def test_country_only(self) -> None:
        loc = parse_watch("gb")
        assert (loc.id, loc.country, loc.region, loc.label) == ("watch-1", "GB", None, "GB")

    def test_region_and_label(self) -> None:
        loc = parse_watch("AE:AE-DU=Dubai office", index=2)
        assert loc.id == "watch-3"
        assert loc.region == "AE-DU"
        assert loc.label == "Dubai office"

    def test_default_label_with_region(self) -> None:
        assert parse_watch("DE:DE-BY").label == "DE DE-BY"

    def test_watch_arg_passes_valid_value_through(self) -> None:
        assert watch_arg("GB=UK") == "GB=UK"

    def test_main_bad_watch_exits_before_analysis(self) -> None:
        with (
            patch("dateclash.cli.run_analysis") as mock_run,
            patch("sys.stderr", new=StringIO()),
            pytest.raises(SystemExit) as exc_info,
        ):
            main([*ANALYZE_ARGV, "--watch", "X"])
        assert exc_info.value.code == 2
        mock_run.assert_not_called()


class TestCmdAnalyze:
    def test_success_returns_zero(self) -> None:
        with (
            patch("dateclash.cli.run_analysis", return_value=_success()) as mock_run,
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            exit_code = cmd_analyze(_analyze_args(watch=["GB=UK"], region="DE-BY"))

        assert exit_code == 0
        request = mock_run.call_args.args[0]
        assert request["country_code"] == "DE"
        assert request["subdivision_code"] == "DE-BY"
        assert request["watchlist"][0].label == "UK"
        output = mock_stdout.getvalue()
        assert "2026-06-02  high" in output
        assert "Bank Holiday" in output
        assert "Watchlist conflicts: 1 (UK)" in output

    def test_failure_returns_one(self) -> None:
        failed = AnalysisResult(success=False, message="Failed to perform strategic analysis: boom")
        with (
            patch("dateclash.cli.run_analysis", return_value=failed),
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            exit_code = cmd_analyze(_analyze_args())

        assert exit_code == 1
        assert "boom" in mock_stderr.getvalue()

    def test_json_output(self) -> None:
        with (
            patch("dateclash.cli.run_analysis", return_value=_success()),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            cmd_analyze(_analyze_args(json=True))

        payload = json.loads(mock_stdout.getvalue())
        assert payload["success"] is True
        assert payload["days"]["2026-06-02"]["risk"] == "high"
        assert payload["conflicts"] == {"count": 1, "impacted_locations": ["UK"]}


class TestCmdRegions:
    def test_lists_regions(self) -> None:
        regions = [Region("DE-BY", "Bavaria", "manual"), Region("DE-BE", "Berlin", "api")]
        with (
            patch("dateclash.cli.get_supported_regions", return_value=regions) as mock_regions,
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            exit_code = cmd_regions(argparse.Namespace(country="de"))

        assert exit_code == 0
        assert mock_regions.call_args.args[1] == "DE"
        output = mock_stdout.getvalue()
        assert "Bavaria [verified]" in output
        assert "Berlin" in output

    def test_no_regions_returns_one(self) -> None:
        with (
            patch("dateclash.cli.get_supported_regions", return_value=[]),
            patch("sys.stderr", new=StringIO()),
        ):
            assert cmd_regions(argparse.Namespace(country="XX")) == 1


class TestCmdIndustries:
    def test_lists_catalog_values(self, tmp_path: Path) -> None:
        (tmp_path / "reference").mkdir()
        (tmp_path / "reference" / "industry_events.json").write_text(
            json.dumps(
                [
                    {
                        "id": "e",
                        "name": "E",
                        "start_date": "2026-06-01",
                        "industry": "{Fintech}",
                        "audience_types": ["VC"],
                    }
                ]
            )
        )
        with (
            patch("dateclash.cli.get_settings") as mock_settings,
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            mock_settings.return_value.data_dir = tmp_path
            assert cmd_industries(argparse.Namespace()) == 0

        output = mock_stdout.getvalue()
        assert "Fintech" in output
        assert "Investors" in output


class TestCmdInfo:
    """Tests for cmd_info function."""

    def test_returns_zero(self) -> None:
        assert cmd_info(argparse.Namespace()) == 0

    def test_prints_app_info(self) -> None:
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            cmd_info(argparse.Namespace())
        output = mock_stdout.getvalue()
        assert "Application" in output
        assert "Proxy hubs" in output

    def test_never_prints_key(self) -> None:
        with (
            patch("dateclash.cli.get_settings") as mock_settings,
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            mock_settings.return_value.calendarific_api_key = "secret"
            mock_settings.return_value.proxy_hubs = frozenset({"IL"})
            cmd_info(argparse.Namespace())
        assert "secret" not in mock_stdout.getvalue()
        assert "Calendarific key: set" in mock_stdout.getvalue()


class TestMain:
    """Tests for main function."""

    def test_no_command_shows_help(self) -> None:
        with patch("sys.stdout", new=StringIO()):
            assert main([]) == 0

    def test_info_command_executes(self) -> None:
        with patch("dateclash.cli.cmd_info", return_value=0) as mock_cmd:
            assert main(["info"]) == 0
            mock_cmd.assert_called_once()

    def test_analyze_command_dispatch(self) -> None:
        with patch("dateclash.cli.cmd_analyze", return_value=1) as mock_cmd:
            exit_code = main(
                ["analyze", "--country", "DE", "--start", "2026-06-01", "--end", "2026-06-02"]
            )
        assert exit_code == 1
        assert mock_cmd.call_args.args[0].country == "DE"

    def test_unknown_command_shows_help(self) -> None:
        with patch("dateclash.cli.create_parser") as mock_parser:
            mock_parser.return_value.parse_args.return_value = argparse.Namespace(
                command="unknown", debug=False
            )
            assert main([]) == 1
