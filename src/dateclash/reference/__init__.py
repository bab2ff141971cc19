"""Static reference tables.

Data that doesn't change with API calls: proxy-hub countries, cultural
observance keywords, curated strategic dates.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from dateclash.reference.cultural import GLOBAL_OBSERVANCES as GLOBAL_OBSERVANCES
from dateclash.reference.cultural import CulturalObservance as CulturalObservance
from dateclash.reference.cultural import get_global_impact as get_global_impact
from dateclash.reference.hubs import DEFAULT_PROXY_HUBS as DEFAULT_PROXY_HUBS
from dateclash.reference.hubs import GLOBAL_COUNTRY_CODE as GLOBAL_COUNTRY_CODE
from dateclash.reference.strategic import STRATEGIC_EVENTS as STRATEGIC_EVENTS
from dateclash.reference.strategic import StrategicEvent as StrategicEvent
from dateclash.reference.strategic import (
    strategic_events_for_date as strategic_events_for_date,
)
