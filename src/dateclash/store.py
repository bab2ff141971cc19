"""Tiered JSON data store with insert-only cache rows.

Manages read/write of JSON data files organized into tiers:
  - reference/: Hand-curated tables (industry events, manual school holidays)
  - historical/: Cached upstream responses (public holidays, weather summaries)

Every JSON file written by the store is wrapped in a metadata envelope
(``source``, ``fetched_at`` plus any extra query params). Cache rows are
permanent once written: there is no update or delete path, and inserting
over an existing row is an error.
"""

from __future__ import annotations

import json
import tempfile
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from dateclash.errors import CacheRowExistsError, CacheWriteError


class DataStore:
    """Manages read/insert of cached data files."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.reference = base_dir / "reference"
        self.historical = base_dir / "historical"

    def read(self, path: Path) -> Any:
        """Read data payload from a JSON file.

        Returns the envelope's ``data`` field, the raw document for
        hand-written files without an envelope, or None if the file
        doesn't exist.
        """
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            document: Any = json.load(f)
        if isinstance(document, dict) and "data" in document:
            return document["data"]
        return document

    def exists(self, path: Path) -> bool:
        """Check whether a row has already been written."""
        return self._resolve(path).exists()

    def insert(self, path: Path, data: Any, source: str, **params: Any) -> Path:
        """Write a new row wrapped in a metadata envelope.

        Args:
            path: Relative path under base_dir (e.g. ``historical/holidays/DE/2026.json``).
            data: Payload to store under the ``data`` key.
            source: Data source identifier (e.g. ``"open-meteo.com (archive)"``).
            **params: Extra metadata fields (location, query params, etc.).

        Returns:
            Absolute path of the written file.

        Raises:
            CacheRowExistsError: If the row already exists.
            CacheWriteError: If the write fails.
        """
        full = self._resolve(path)
        meta: dict[str, Any] = {
            "source": source,
            "fetched_at": datetime.now(UTC).isoformat(),
        }
        if params:
            meta.update(params)
        envelope = {"meta": meta, "data": data}

        tmp: Path | None = None
        try:
            full.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", dir=full.parent, prefix=f".{full.name}.", suffix=".tmp", delete=False
            ) as f:
                tmp = Path(f.name)
                json.dump(envelope, f, indent=2, allow_nan=False)
            # linking never replaces an existing row and publishes it complete
            full.hardlink_to(tmp)
        except FileExistsError:
            msg = f"Cache row already exists: {path}"
            raise CacheRowExistsError(msg) from None
        except (OSError, TypeError, ValueError) as e:
            msg = f"Failed to write cache row {path}: {e}"
            raise CacheWriteError(msg) from e
        finally:
            if tmp is not None:
                tmp.unlink(missing_ok=True)

        return full

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full
