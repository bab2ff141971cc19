"""Cross-datasource joins and classification.

Each module combines outputs from 2+ datasources into structures the flow
and CLI consume directly. This is the domain logic layer.

Dependency rule: analysis/ imports from datasources/ models only.
It never fetches data or touches the store.

Modules:
  - timeline: DateRange, DayRecord, build_timeline (day-indexed merge)
  - risk: classify_day, classify_confidence, proxy-hub holiday tagging
  - conflicts: watchlist conflict aggregation per range and per day
  - metadata: AnalysisMetadata for a run
  - serialization: JSON-compatible timeline rows

Adding an analysis module
-------------------------
1. Create ``analysis/{name}.py`` with a pure function over datasource models.

2. Rules:
   - Import datasource *models* only (never call fetch functions here).
   - No I/O, no HTTP, no Prefect decorators.
   - Keep output deterministic: sort anything built from sets.

3. Wire into ``flows/analyze.py`` after all fetch tasks are joined.

4. Re-export in ``__init__.py`` and add tests in ``tests/test_{name}.py``.
"""

from dateclash.analysis.conflicts import (
    ConflictSummary,
    WatchlistSnapshot,
    conflict_days,
    day_conflicts,
    global_observances,
    resolve_conflicts,
)
from dateclash.analysis.risk import (
    Confidence,
    RiskLevel,
    classify_confidence,
    classify_day,
    classify_timeline,
    is_global_impact,
    split_holidays,
)
from dateclash.analysis.timeline import DateRange, DayRecord, Timeline, build_timeline, days_between

__all__ = [
    "Confidence",
    "ConflictSummary",
    "DateRange",
    "DayRecord",
    "RiskLevel",
    "Timeline",
    "WatchlistSnapshot",
    "build_timeline",
    "classify_confidence",
    "classify_day",
    "classify_timeline",
    "conflict_days",
    "day_conflicts",
    "days_between",
    "global_observances",
    "is_global_impact",
    "resolve_conflicts",
    "split_holidays",
]
