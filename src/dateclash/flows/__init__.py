"""
Prefect flows for the analysis pipeline.

Flows:
- analyze: fetch every source for one request, merge, classify
- watchlist: tasks resolving watchlist locations (used by analyze)

Usage (local):
    python -m dateclash.flows.analyze DE 2026-06-01 2026-06-14
    dateclash analyze --country DE --start 2026-06-01 --end 2026-06-14

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    dateclash analyze ...
"""
