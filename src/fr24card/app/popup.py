"""Detail popup contract for a clicked table row.

The host resolves a click to the row's ``data-hex`` attribute and asks
:class:`Popup` for the matching aircraft's details. The popup only reads the
aircraft list of the render that produced the table; the host owns the map
and dialog surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from fr24card.core.models import Aircraft
from fr24card.lang import Lang
from fr24card.render.cells import format_number
from fr24card.settings.columns import ColumnRegistry, default_registry

__all__ = ["DetailRow", "PopupContent", "Popup"]


@dataclass(frozen=True)
class DetailRow:
    label: str
    value: str


@dataclass(frozen=True)
class PopupContent:
    hex: str
    title: str
    rows: Tuple[DetailRow, ...]
    # Map centre for the host's map surface, when the position is known
    position: Optional[Tuple[float, float]] = None


class Popup:
    def __init__(
        self,
        aircraft: Sequence[Aircraft],
        lang: Lang,
        *,
        distance_unit: str = "km",
        registry: Optional[ColumnRegistry] = None,
    ) -> None:
        self._by_hex = {a.hex: a for a in aircraft if a.hex}
        self._lang = lang
        self._distance_unit = distance_unit
        self._registry = registry if registry is not None else default_registry()

    def _unit(self, key: str) -> Optional[str]:
        # Same unit labels as the table cells
        if key not in self._registry:
            return None
        return self._registry.get(key).unit

    def find(self, hex_address: str) -> Optional[Aircraft]:
        return self._by_hex.get((hex_address or "").strip().lower())

    def on_click(self, hex_address: str) -> Optional[PopupContent]:
        """Details for the row with ``data-hex == hex_address``, or None."""
        a = self.find(hex_address)
        if a is None:
            return None
        title = a.flight or a.registration or a.hex.upper()
        position = (a.lat, a.lon) if a.lat is not None and a.lon is not None else None
        return PopupContent(
            hex=a.hex,
            title=title,
            rows=tuple(self.detail_rows(a)),
            position=position,
        )

    def detail_rows(self, a: Aircraft) -> List[DetailRow]:
        """Localized label/value pairs; unknown values are left out."""
        lang = self._lang
        pairs = [
            ("icao", a.hex.upper()),
            ("flight", a.flight or ""),
            ("registration", a.registration or ""),
            ("type", a.aircraft_type or ""),
            ("country", a.country or ""),
            ("altitude", format_number(a.altitude, self._unit("altitude"))),
            ("speed", format_number(a.speed, self._unit("speed"))),
            ("distance", format_number(a.distance, self._distance_unit, digits=1)),
            ("bearing", format_number(a.bearing, self._unit("track"))),
            ("track", format_number(a.track, self._unit("track"))),
            ("squawk", a.squawk or ""),
        ]
        if a.lat is not None and a.lon is not None:
            pairs.append(("position", f"{a.lat:.4f}, {a.lon:.4f}"))
        return [
            DetailRow(label=lang.get(f"popup.{key}"), value=value)
            for key, value in pairs
            if value
        ]
