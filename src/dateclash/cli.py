"""
Command-line interface for dateclash.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from typing import TYPE_CHECKING

from pydantic import ValidationError

from dateclash import __version__
from dateclash.config import get_settings
from dateclash.datasources.industry_events import unique_audiences, unique_industries
from dateclash.datasources.school_holidays import get_supported_regions
from dateclash.flows.analyze import run_analysis
from dateclash.schemas import WatchlistLocation
from dateclash.store import DataStore

if TYPE_CHECKING:
    from dateclash.flows.analyze import AnalysisResult

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def parse_watch(value: str, index: int = 0) -> WatchlistLocation:
    """
    Parse a ``--watch`` value of the form ``CC[:REGION][=LABEL]``.

    >>> parse_watch("AE:AE-DU=Dubai office").label
    'Dubai office'
    """
    location, _, label = value.partition("=")
    country, _, region = location.partition(":")
    country = country.strip().upper()
    region = region.strip() or None
    return WatchlistLocation(
        id=f"watch-{index + 1}",
        country=country,
        region=region,
        label=label.strip() or (f"{country} {region}" if region else country),
    )


def watch_arg(value: str) -> str:
    """argparse ``type`` for ``--watch``: rejects values parse_watch cannot read."""
    try:
        parse_watch(value)
    except ValidationError as e:
        msg = f"invalid watchlist location {value!r} (expected CC[:REGION][=LABEL])"
        raise argparse.ArgumentTypeError(msg) from e
    return value


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="dateclash",
        description="Find low-risk event dates from holidays, industry events and weather",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'analyze' command
    analyze_parser = subparsers.add_parser("analyze", help="Analyze a date range")
    analyze_parser.add_argument("--country", required=True, help="ISO country code (e.g. DE)")
    analyze_parser.add_argument("--start", required=True, type=date.fromisoformat, help="YYYY-MM-DD")
    analyze_parser.add_argument("--end", required=True, type=date.fromisoformat, help="YYYY-MM-DD")
    analyze_parser.add_argument("--city", default=None, help="City for weather (geocoded)")
    analyze_parser.add_argument("--lat", type=float, default=None, help="Latitude, skips geocoding")
    analyze_parser.add_argument("--lon", type=float, default=None, help="Longitude, skips geocoding")
    analyze_parser.add_argument("--region", default=None, help="Subdivision code (e.g. DE-BE)")
    analyze_parser.add_argument("--industry", action="append", default=[], help="Industry filter")
    analyze_parser.add_argument("--audience", action="append", default=[], help="Audience filter")
    analyze_parser.add_argument("--scale", action="append", default=[], help="Scale filter")
    analyze_parser.add_argument(
        "--radar", action="append", default=[], help="Also scan this country's events"
    )
    analyze_parser.add_argument(
        "--watch",
        action="append",
        default=[],
        type=watch_arg,
        metavar="CC[:REGION][=LABEL]",
        help="Watchlist location",
    )
    analyze_parser.add_argument("--json", action="store_true", help="Print the full result as JSON")

    # 'regions' command
    regions_parser = subparsers.add_parser("regions", help="List supported school-holiday regions")
    regions_parser.add_argument("country", help="ISO country code")

    # 'industries' command
    subparsers.add_parser("industries", help="List catalog industries and audiences")

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def configure_logging(debug: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO, format=LOG_FORMAT)


def print_result(result: AnalysisResult) -> None:
    """Human-readable summary: metadata, watchlist conflicts, then flagged days."""
    meta = result.metadata
    if meta is not None:
        weather = meta.weather.city if meta.weather.available else "unavailable"
        print(f"Public holidays: {meta.public_holidays.count} ({meta.public_holidays.country_code})")
        if meta.school_holidays.checked:
            verified = " [verified]" if meta.school_holidays.is_verified else ""
            print(
                f"School holidays: {meta.school_holidays.count} days in "
                f"{meta.school_holidays.region_name}{verified}"
            )
        events = meta.industry_events
        print(
            f"Industry events: {events.match_count} matches, {events.radar_count} radar, "
            f"{events.total_tracked} tracked (confidence {events.confidence})"
        )
        print(f"Weather: {weather}")
    if result.conflicts is not None and result.conflicts.has_conflicts:
        locations = ", ".join(result.conflicts.impacted_locations)
        print(f"Watchlist conflicts: {result.conflicts.count} ({locations})")

    print()
    for day, record in result.days.items():
        notes = [h.name for h in record.holidays]
        notes += [f"{e.name}{' (radar)' if e.is_radar else ''}" for e in record.industry_events]
        if record.school_holiday:
            notes.append(f"school: {record.school_holiday}")
        print(f"{day.isoformat()}  {result.risk[day]:<8} {'; '.join(notes)}".rstrip())


def cmd_analyze(args: argparse.Namespace) -> int:
    """Handle the 'analyze' command."""
    request = {
        "country_code": args.country,
        "target_start": args.start,
        "target_end": args.end,
        "city": args.city,
        "lat": args.lat,
        "lon": args.lon,
        "subdivision_code": args.region,
        "industries": args.industry,
        "audiences": args.audience,
        "scales": args.scale,
        "radar_countries": args.radar,
        "watchlist": [parse_watch(value, i) for i, value in enumerate(args.watch)],
    }
    result = run_analysis(request)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    elif result.success:
        print_result(result)

    if not result.success:
        print(f"Error: {result.message}", file=sys.stderr)
        return 1
    return 0


def cmd_regions(args: argparse.Namespace) -> int:
    """Handle the 'regions' command."""
    store = DataStore(get_settings().data_dir)
    regions = get_supported_regions(store, args.country.upper())
    if not regions:
        print(f"No regions found for {args.country.upper()}", file=sys.stderr)
        return 1
    for region in regions:
        marker = " [verified]" if region.is_verified else ""
        print(f"{region.code:<10} {region.name}{marker}")
    return 0


def cmd_industries(_args: argparse.Namespace) -> int:
    """Handle the 'industries' command."""
    store = DataStore(get_settings().data_dir)
    print("Industries:")
    for industry in unique_industries(store):
        print(f"  {industry}")
    print("Audiences:")
    for audience in unique_audiences(store):
        print(f"  {audience}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Data dir: {settings.data_dir}")
    print(f"Proxy hubs: {', '.join(sorted(settings.proxy_hubs))}")
    print(f"Calendarific key: {'set' if settings.calendarific_api_key else 'missing'}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug or get_settings().debug)

    commands = {
        "analyze": cmd_analyze,
        "regions": cmd_regions,
        "industries": cmd_industries,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
