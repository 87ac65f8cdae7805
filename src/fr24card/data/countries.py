"""Country of registration from the ICAO 24-bit address.

Schema
------
``countries.yml`` holds a list under ``allocations`` with fields:
    - start, end: Inclusive hex bounds of the address block. Required.
    - code: ISO 3166-1 alpha-2 country code. Required.
    - name: Country name used as image alt text.

Entries with missing or invalid fields are ignored. Blocks are sorted by
start address and resolved with a binary search.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence

import yaml

__all__ = [
    "FLAG_URL_TEMPLATE",
    "Allocation",
    "CountryTable",
    "default_country_table",
    "parse_icao",
]

_PKG_DIR = Path(__file__).parent
_YAML_PATH = _PKG_DIR / "countries.yml"

FLAG_URL_TEMPLATE = "/local/fr24card/dist/flags/{code}.svg"


@dataclass(frozen=True)
class Allocation:
    start: int
    end: int
    code: str
    name: str

    @property
    def flag(self) -> str:
        return FLAG_URL_TEMPLATE.format(code=self.code.lower())


def parse_icao(hex_address: Any) -> Optional[int]:
    """Return the 24-bit address as an int, or None when not a valid address."""
    if not isinstance(hex_address, str):
        return None
    s = hex_address.strip()
    if len(s) != 6:
        return None
    try:
        return int(s, 16)
    except ValueError:
        return None


def _coerce_allocation(item: Any) -> Optional[Allocation]:
    if not isinstance(item, dict):
        return None
    start = parse_icao(item.get("start"))
    end = parse_icao(item.get("end"))
    code = item.get("code")
    if start is None or end is None or start > end:
        return None
    if not isinstance(code, str) or len(code.strip()) != 2:
        return None
    name = item.get("name")
    return Allocation(
        start=start,
        end=end,
        code=code.strip().upper(),
        name=str(name) if name else code.strip().upper(),
    )


class CountryTable:
    """Lookup of :class:`Allocation` by ICAO address."""

    def __init__(self, allocations: Sequence[Allocation]) -> None:
        self._blocks = sorted(allocations, key=lambda a: a.start)
        self._starts = [a.start for a in self._blocks]

    @classmethod
    def load(cls, path: Path = _YAML_PATH) -> "CountryTable":
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        items = raw.get("allocations") if isinstance(raw, dict) else None
        out = []
        for item in items or []:
            alloc = _coerce_allocation(item)
            if alloc is not None:
                out.append(alloc)
        return cls(out)

    def __len__(self) -> int:
        return len(self._blocks)

    def lookup(self, hex_address: Any) -> Optional[Allocation]:
        """Allocation block containing *hex_address*, or None."""
        addr = parse_icao(hex_address)
        if addr is None:
            return None
        i = bisect_right(self._starts, addr) - 1
        if i < 0:
            return None
        block = self._blocks[i]
        return block if addr <= block.end else None

    def flag(self, hex_address: Any) -> Optional[str]:
        """Flag asset path for *hex_address*, or None if unresolvable."""
        block = self.lookup(hex_address)
        return block.flag if block is not None else None


_DEFAULT: CountryTable | None = None


def default_country_table() -> CountryTable:
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = CountryTable.load()
    return _DEFAULT
