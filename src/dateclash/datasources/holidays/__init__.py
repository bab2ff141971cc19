"""Calendarific public-holiday data source.

Public API:
  - public: get_holidays (cache-then-origin-then-insert), fetch_public_holidays
  - models: Holiday
"""

from dateclash.datasources.holidays.models import Holiday
from dateclash.datasources.holidays.public import fetch_public_holidays, get_holidays

__all__ = ["Holiday", "fetch_public_holidays", "get_holidays"]
