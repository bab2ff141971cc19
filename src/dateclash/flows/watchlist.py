"""
Prefect tasks resolving watchlist locations into conflict snapshots.

Each location is resolved independently: public holidays for every year of
the analysis range plus, when a region is given, its school holidays. A
failing location is logged and left out; the rest of the watchlist and the
primary analysis carry on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prefect import task

from dateclash.analysis.conflicts import WatchlistSnapshot
from dateclash.datasources.holidays import get_holidays
from dateclash.datasources.school_holidays import get_school_holidays
from dateclash.services.isolation import degrade_on_failure

if TYPE_CHECKING:
    from collections.abc import Sequence

    from prefect.futures import PrefectFuture

    from dateclash.schemas import WatchlistLocation
    from dateclash.store import DataStore


@task(name="resolve-watchlist-location")
@degrade_on_failure("watchlist", fallback=lambda: None)
def resolve_watchlist_location(
    store: DataStore, location: WatchlistLocation, years: Sequence[int]
) -> WatchlistSnapshot | None:
    """Fetch one location's holidays and school breaks for the given years."""
    holidays = [h for year in years for h in get_holidays(store, location.country, year)]
    school_holidays = []
    if location.region:
        school_holidays = [
            s
            for year in years
            for s in get_school_holidays(store, location.country, location.region, year)
        ]
    return WatchlistSnapshot(
        label=location.label,
        country_code=location.country,
        region_code=location.region,
        holidays=tuple(holidays),
        school_holidays=tuple(school_holidays),
    )


def submit_watchlist(
    store: DataStore, locations: Sequence[WatchlistLocation], years: Sequence[int]
) -> list[PrefectFuture[WatchlistSnapshot | None]]:
    """Submit one resolve task per location; join with ``collect_snapshots``."""
    return [resolve_watchlist_location.submit(store, location, list(years)) for location in locations]


def collect_snapshots(
    futures: Sequence[PrefectFuture[WatchlistSnapshot | None]],
) -> list[WatchlistSnapshot]:
    """Join watchlist futures, dropping locations that degraded."""
    snapshots = [future.result() for future in futures]
    return [s for s in snapshots if s is not None]
