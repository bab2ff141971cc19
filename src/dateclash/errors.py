"""Exception taxonomy.

- ConfigurationError: a required credential is missing.
- UpstreamError: a primary source (public holidays, industry events) failed.
- CacheWriteError: a cache row could not be inserted.
  - CacheRowExistsError: another writer already inserted the row.
- InvalidRangeError: a date range ends before it starts.
"""

from __future__ import annotations


class DateClashError(Exception):
    """Base class for all application errors."""


class ConfigurationError(DateClashError):
    """A required external-service credential is not configured."""


class UpstreamError(DateClashError):
    """A primary data source failed; the analysis cannot continue."""

    def __init__(self, source: str, cause: BaseException) -> None:
        self.source = source
        self.cause = cause
        super().__init__(f"{source}: {cause}")


class CacheWriteError(DateClashError):
    """Persisting a cache row failed."""


class CacheRowExistsError(CacheWriteError):
    """The row was already inserted, possibly by a concurrent fetch."""


class InvalidRangeError(DateClashError, ValueError):
    """Start date is after end date."""
