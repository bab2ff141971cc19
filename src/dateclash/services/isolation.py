"""
Per-source failure strategies for analysis fetches.

Primary sources (public holidays, the target country's industry events) must
fail the whole analysis when they fail. Secondary sources (radar countries,
weather months, geocoding, region lookup, watchlist locations) degrade to an
empty result so the analysis continues with less data.

Each fetch task is wrapped with exactly one of the two strategies::

    @propagate_failure("public-holidays")
    def load_holidays(country_code: str, year: int) -> list[Holiday]: ...

    @degrade_on_failure("radar-events", fallback=list)
    def load_radar_events(country_code: str, ...) -> list[IndustryEvent]: ...
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import ParamSpec, TypeVar

from dateclash.errors import UpstreamError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def propagate_failure(source: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Re-raise any failure as ``UpstreamError`` tagged with ``source``."""

    def decorator(fn: Callable[P, R]) -> Callable[P, R]:
        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return fn(*args, **kwargs)
            except UpstreamError:
                raise
            except Exception as e:
                logger.error("Primary source %s failed: %s", source, e)
                raise UpstreamError(source, e) from e

        wrapper.failure_policy = "propagate"  # type: ignore[attr-defined]
        return wrapper

    return decorator


def degrade_on_failure(
    source: str, fallback: Callable[[], R]
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Log any failure and return ``fallback()`` instead."""

    def decorator(fn: Callable[P, R]) -> Callable[P, R]:
        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return fn(*args, **kwargs)
            except Exception as e:  # noqa: BLE001
                logger.warning("Secondary source %s degraded to empty result: %s", source, e)
                return fallback()

        wrapper.failure_policy = "degrade"  # type: ignore[attr-defined]
        return wrapper

    return decorator
