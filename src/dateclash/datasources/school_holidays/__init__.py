"""School holidays and supported regions (OpenHolidays + manual overrides).

Public API:
  - school: get_school_holidays (manual table first, then API), fetch_api_school_holidays
  - regions: get_supported_regions, find_region, fetch_api_subdivisions
  - models: SchoolHoliday, Region
"""

from dateclash.datasources.school_holidays.models import Region, SchoolHoliday
from dateclash.datasources.school_holidays.regions import (
    fetch_api_subdivisions,
    find_region,
    get_supported_regions,
)
from dateclash.datasources.school_holidays.school import (
    fetch_api_school_holidays,
    get_school_holidays,
)

__all__ = [
    "Region",
    "SchoolHoliday",
    "fetch_api_school_holidays",
    "fetch_api_subdivisions",
    "find_region",
    "get_school_holidays",
    "get_supported_regions",
]
