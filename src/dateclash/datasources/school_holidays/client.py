"""OpenHolidays API client constants.

API docs: https://www.openholidaysapi.org/en/
Free, no API key. Names come back as ``[{"language": "EN", "text": ...}]``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

OPENHOLIDAYS_API = "https://openholidaysapi.org"
SCHOOL_HOLIDAYS_ENDPOINT = f"{OPENHOLIDAYS_API}/SchoolHolidays"
SUBDIVISIONS_ENDPOINT = f"{OPENHOLIDAYS_API}/Subdivisions"

LANGUAGE = "EN"

# Hand-curated overrides; take precedence over the API for a region
MANUAL_OVERRIDES_PATH = Path("reference/manual_school_holidays.json")

DEFAULT_SCHOOL_HOLIDAY_NAME = "School Holiday"


def localized_text(name: Any) -> str:
    """Extract display text from an OpenHolidays name field."""
    if isinstance(name, list):
        for entry in name:
            if isinstance(entry, dict) and entry.get("text"):
                return str(entry["text"])
        return ""
    if isinstance(name, dict):
        return str(name.get("text") or "")
    if isinstance(name, str):
        return name
    return ""
