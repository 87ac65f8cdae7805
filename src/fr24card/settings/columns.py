"""Column registry loaded from YAML.

The master source is ``columns.yml`` in this package. The registry is
read-only: per-render visibility (the distance column disappears when no
reference point is available) is computed as a derived view with
:meth:`ColumnRegistry.effective` instead of toggling shared state, so several
cards can share one registry.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

import yaml

from fr24card.core.models import Column
from fr24card.errors import UnknownColumn

__all__ = [
    "COLUMNS_PATH",
    "DEFAULT_WEIGHT_BUDGET",
    "ColumnRegistry",
    "default_registry",
]

_PKG_DIR = Path(__file__).parent
COLUMNS_PATH = _PKG_DIR / "columns.yml"

DEFAULT_WEIGHT_BUDGET = 15

# Columns whose availability depends on run-time configuration
_DISTANCE_KEYS = frozenset({"distance"})


class ColumnRegistry:
    """Read-only catalog from column key to :class:`Column`."""

    def __init__(
        self, columns: Sequence[Column], *, budget: int = DEFAULT_WEIGHT_BUDGET
    ) -> None:
        table: Dict[str, Column] = {}
        for col in columns:
            if col.key in table:
                raise ValueError(f"duplicate column key: {col.key}")
            table[col.key] = col
        self._columns = table
        self.budget = int(budget)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "ColumnRegistry":
        """Build from the parsed ``columns.yml`` structure."""
        cols_raw = raw.get("columns") or {}
        if not isinstance(cols_raw, Mapping):
            raise ValueError("'columns' must be a mapping of key -> column")
        columns: List[Column] = []
        for key, entry in cols_raw.items():
            entry = dict(entry or {})
            entry["key"] = str(key)
            columns.append(Column.model_validate(entry))
        budget = raw.get("budget", DEFAULT_WEIGHT_BUDGET)
        return cls(columns, budget=int(budget))

    @classmethod
    def load(cls, path: Path = COLUMNS_PATH) -> "ColumnRegistry":
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        return cls.from_mapping(raw)

    # Container protocol ---------------------------------------------------
    def __getitem__(self, key: str) -> Column:
        return self._columns[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __contains__(self, key: object) -> bool:
        return key in self._columns

    def get(self, key: str) -> Column:
        """Return the column for *key*; raise :class:`UnknownColumn` if absent."""
        try:
            return self._columns[key]
        except KeyError:
            raise UnknownColumn(key) from None

    def total_weight(self, keys: Sequence[str]) -> int:
        return sum(self.get(k).weight for k in keys)

    def effective(
        self, keys: Sequence[str], *, distance_available: bool
    ) -> List[Tuple[str, Column]]:
        """Return the visible ``(key, column)`` pairs for one render.

        Order follows *keys*. Distance columns are dropped when no reference
        point is available; every other column keeps its catalog ``show``.
        """
        out: List[Tuple[str, Column]] = []
        for key in keys:
            col = self.get(key)
            if key in _DISTANCE_KEYS and not distance_available:
                col = col.model_copy(update={"show": False})
            if col.show is False:
                continue
            out.append((key, col))
        return out


_DEFAULT: ColumnRegistry | None = None


def default_registry() -> ColumnRegistry:
    """Return the packaged registry, loading it on first use."""
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = ColumnRegistry.load()
    return _DEFAULT
