"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, request pacing
    ├── models.py         # Frozen dataclasses for normalized records
    └── {feature}.py      # Fetch / lookup functions (one per concept)

Sources:
  - weather/          Open-Meteo archive + geocoding, monthly summaries
  - holidays/         Calendarific public holidays
  - school_holidays/  OpenHolidays + manual override table, regions
  - industry_events/  curated catalog in the reference tier (no client)

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.

2. Write fetch functions that go through the shared session::

       from dateclash.services.http import get_json

       def fetch_something(country_code: str) -> dict[str, Any]:
           return get_json(API_URL, {"country": country_code})

3. Cache upstream answers with ``store.insert(path, data, source="...")``
   under ``historical/``. Rows are never overwritten.

4. Re-export public API in ``__init__.py`` with ``__all__``.

5. Wire into ``flows/analyze.py`` as a ``@task`` wrapped with one of the
   ``services.isolation`` strategies, and add ``tests/test_{name}.py``.
"""
