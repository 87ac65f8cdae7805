"""Deterministic row ordering.

Rows are ordered by ascending distance. Aircraft without a distance go
after every aircraft with one. Ties (equal distances, or both missing) are
broken by ascending hex address, then callsign and registration, then the
remaining fields, so only identical aircraft can tie and the result never
depends on input order.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Tuple

from fr24card.core.models import Aircraft

__all__ = ["distance_key", "sort_by_distance"]

# Tiebreak fields after hex/flight/registration
_TEXT_FIELDS = ("aircraft_type", "squawk", "category", "country", "flag", "icon")
_NUMBER_FIELDS = ("altitude", "speed", "track", "lat", "lon", "bearing")


def _num(v: Optional[float]) -> Tuple[int, float]:
    # Missing values sort after known ones
    return (1, 0.0) if v is None else (0, float(v))


def _text(v: Optional[str]) -> Tuple[int, str]:
    return (1, "") if v is None else (0, v)


def distance_key(a: Aircraft) -> Tuple[Any, ...]:
    return (
        _num(a.distance),
        a.hex,
        _text(a.flight),
        _text(a.registration),
        *(_text(getattr(a, f)) for f in _TEXT_FIELDS),
        *(_num(getattr(a, f)) for f in _NUMBER_FIELDS),
    )


def sort_by_distance(aircraft: Iterable[Aircraft]) -> List[Aircraft]:
    return sorted(aircraft, key=distance_key)
