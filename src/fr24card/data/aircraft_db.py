"""Process-wide aircraft reference table (ICAO address -> registration/type).

The table is large and optional. It is loaded at most once per process: the
first :meth:`AircraftDatabase.ensure_loaded` call reads the file and every
later call is a no-op, whether or not the load succeeded. Until the table is
loaded, lookups return None and callers fall back to the raw record.

Schema
------
A JSON object keyed by lowercase ICAO address. Values are either objects
with ``r`` (registration) and ``t`` (ICAO type designator) fields, or
``[registration, type]`` pairs. Unusable entries are ignored.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

__all__ = [
    "AircraftReference",
    "AircraftDatabase",
    "get_database",
    "database_path",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AircraftReference:
    registration: Optional[str] = None
    aircraft_type: Optional[str] = None


def database_path() -> Optional[Path]:
    """Return the configured database file (``FR24CARD_AIRCRAFT_DB``), if any."""
    p = os.environ.get("FR24CARD_AIRCRAFT_DB")
    return Path(p).expanduser() if p else None


def _text(v: Any) -> Optional[str]:
    if not isinstance(v, str):
        return None
    s = v.strip()
    return s if s else None


def _coerce_entry(v: Any) -> Optional[AircraftReference]:
    if isinstance(v, dict):
        reg, typ = _text(v.get("r")), _text(v.get("t"))
    elif isinstance(v, (list, tuple)) and v:
        reg = _text(v[0])
        typ = _text(v[1]) if len(v) > 1 else None
    else:
        return None
    if reg is None and typ is None:
        return None
    return AircraftReference(registration=reg, aircraft_type=typ)


class AircraftDatabase:
    """Lazily-initialized lookup with single-initialization semantics."""

    def __init__(self) -> None:
        self._records: Dict[str, AircraftReference] = {}
        self._initialized = False

    @property
    def loaded(self) -> bool:
        return self._initialized

    def __len__(self) -> int:
        return len(self._records)

    def ensure_loaded(self, path: Optional[Path] = None) -> bool:
        """Load the table once.

        Returns True when this call performed the load, False when the table
        had already been initialized by an earlier call.
        """
        if self._initialized:
            return False
        self._initialized = True
        path = path if path is not None else database_path()
        if path is None:
            logger.debug("no aircraft database configured")
            return True
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.warning("aircraft database not found: %s", path)
            return True
        except (OSError, ValueError) as e:
            logger.warning("failed to read aircraft database %s: %s", path, e)
            return True

        if not isinstance(data, dict):
            logger.warning("aircraft database %s is not a JSON object", path)
            return True
        for key, value in data.items():
            entry = _coerce_entry(value)
            if entry is not None and isinstance(key, str):
                self._records[key.strip().lower()] = entry
        logger.info("aircraft database loaded entries=%d path=%s", len(self), path)
        return True

    def load_records(self, records: Dict[str, Any]) -> None:
        """Initialize from an in-memory mapping (same schema as the file)."""
        self._initialized = True
        for key, value in records.items():
            entry = _coerce_entry(value)
            if entry is not None:
                self._records[key.strip().lower()] = entry

    def lookup(self, hex_address: str) -> Optional[AircraftReference]:
        if not hex_address:
            return None
        return self._records.get(hex_address.strip().lower())

    def reset(self) -> None:
        """Forget all records and allow a fresh load (used by tests)."""
        self._records.clear()
        self._initialized = False


_DATABASE = AircraftDatabase()


def get_database() -> AircraftDatabase:
    return _DATABASE
