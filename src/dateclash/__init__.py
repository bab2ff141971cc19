"""DateClash - find low-risk event dates by merging holiday, event and weather feeds.

Architecture::

    datasources/   External APIs (Calendarific, OpenHolidays, Open-Meteo) and the
                   curated industry-event catalog
    store.py       Tiered JSON store; cache rows are insert-only
    analysis/      Cross-datasource logic (timeline, risk, watchlist conflicts)
    reference/     Static tables (proxy hubs, cultural observances, strategic dates)
    flows/         Prefect orchestration (one flow per analysis run)
    services/      Shared utilities (HTTP client with retry, failure isolation)

Data flow: datasources → store (cache) → analysis.timeline → analysis.risk → result

Extension points (see each package's docstring for step-by-step guides):
  - New data source:   datasources/__init__.py
  - New analysis:      analysis/__init__.py
"""

__version__ = "0.1.0"

from dateclash.config import Settings

__all__ = ["Settings", "__version__"]
