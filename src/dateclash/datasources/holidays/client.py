"""Calendarific API constants.

API docs: https://calendarific.com/api-documentation
Requires an API key (``DATECLASH_CALENDARIFIC_API_KEY``).
"""

from pathlib import Path

CALENDARIFIC_API = "https://calendarific.com/api/v2"
HOLIDAYS_ENDPOINT = f"{CALENDARIFIC_API}/holidays"

HOLIDAY_CACHE_DIR = Path("historical/holidays")


def cache_path(country_code: str, year: int) -> Path:
    """Store path of the cached holiday list for one country and year."""
    return HOLIDAY_CACHE_DIR / country_code.upper() / f"{year}.json"
