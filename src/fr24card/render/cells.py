"""Per-column cell value resolvers.

Rules
-----
- ``flag``: ``<img>`` of the registration country flag, empty if unknown.
- ``icon``: Material Design icon tinted with the aircraft hex address.
- ``icao``: hex address in upper case.
- ``track``: navigation arrow rotated to the track, followed by degrees.
- ``distance``: one decimal, suffixed with the configured distance unit.
- Numeric values are rounded to whole numbers and suffixed with the column
  unit. Unknown values render as an empty cell.
"""

from __future__ import annotations

import html
from typing import Callable, Dict, Optional, Union

from fr24card.core.models import Aircraft, Column
from fr24card.render.table import Markup

__all__ = ["CellValue", "cell_value", "format_number"]

CellValue = Union[str, Markup]
_Resolver = Callable[[Aircraft, Column, str], CellValue]

# Column key -> Aircraft attribute where they differ
_ATTRS = {"type": "aircraft_type"}


def format_number(value: Optional[float], unit: Optional[str], digits: int = 0) -> str:
    if value is None:
        return ""
    text = f"{value:.{digits}f}" if digits else str(int(round(value)))
    return f"{text} {unit}" if unit else text


def _flag(a: Aircraft, column: Column, distance_unit: str) -> CellValue:
    if a.flag is None:
        return ""
    src = html.escape(a.flag, quote=True)
    alt = html.escape(a.country or "", quote=True)
    return Markup(f'<img src="{src}" alt="{alt}" />')


def _icon(a: Aircraft, column: Column, distance_unit: str) -> CellValue:
    color = html.escape(a.hex, quote=True)
    icon = html.escape(a.icon, quote=True)
    return Markup(f'<font color="#{color}"><ha-icon icon="{icon}"></ha-icon></font>')


def _icao(a: Aircraft, column: Column, distance_unit: str) -> CellValue:
    return a.hex.upper()


def _track(a: Aircraft, column: Column, distance_unit: str) -> CellValue:
    if a.track is None:
        return ""
    deg = int(round(a.track)) % 360
    unit = html.escape(column.unit or "")
    return Markup(
        f'<ha-icon icon="mdi:navigation" style="transform: rotate({deg}deg);">'
        f"</ha-icon> {deg}{unit}"
    )


def _distance(a: Aircraft, column: Column, distance_unit: str) -> CellValue:
    return format_number(a.distance, distance_unit, digits=1)


_RESOLVERS: Dict[str, _Resolver] = {
    "flag": _flag,
    "icon": _icon,
    "icao": _icao,
    "track": _track,
    "distance": _distance,
}


def cell_value(
    aircraft: Aircraft, key: str, column: Column, *, distance_unit: str = "km"
) -> CellValue:
    """Content of the *key* cell for *aircraft*."""
    resolver = _RESOLVERS.get(key)
    if resolver is not None:
        return resolver(aircraft, column, distance_unit)
    value = getattr(aircraft, _ATTRS.get(key, key), None)
    if value is None:
        return ""
    if isinstance(value, (int, float)):
        return format_number(float(value), column.unit)
    return str(value)
