"""Distance and bearing from a fixed reference point.

The reference point is a host entity (typically a zone) whose attributes
carry ``latitude`` and ``longitude``. When no zone is configured, or the host
state does not expose usable coordinates for it, the service reports itself
unavailable and every query returns None.

Example usage:

    svc = DistanceService("zone.home", hass_states, unit="km")
    if svc.is_available():
        km = svc.distance_to(52.1, 4.1)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Tuple

from fr24card.core.geo import (
    DistanceUnit,
    earth_radius,
    haversine,
    initial_bearing_deg,
    valid_coordinate,
)

__all__ = ["DistanceService", "reference_point"]


def reference_point(
    zone: Optional[str], states: Mapping[str, Any] | None
) -> Optional[Tuple[float, float]]:
    """Return ``(lat, lon)`` of *zone* in host *states*, or None."""
    if not zone or not isinstance(states, Mapping):
        return None
    entity = states.get(zone)
    if not isinstance(entity, Mapping):
        return None
    attrs = entity.get("attributes")
    if not isinstance(attrs, Mapping):
        return None
    lat = attrs.get("latitude")
    lon = attrs.get("longitude")
    if not (valid_coordinate(lat) and valid_coordinate(lon)):
        return None
    return (float(lat), float(lon))


class DistanceService:
    """Great-circle distance (haversine) from a reference point.

    Results are unrounded and expressed in one fixed unit per instance;
    formatting is left to the caller.
    """

    def __init__(
        self,
        zone: Optional[str],
        states: Mapping[str, Any] | None = None,
        *,
        unit: DistanceUnit = "km",
    ) -> None:
        # Fail early on a bad unit rather than on the first query
        earth_radius(unit)
        self.zone = zone
        self.unit: DistanceUnit = unit
        self._origin = reference_point(zone, states)

    @classmethod
    def from_point(
        cls, lat: float, lon: float, *, unit: DistanceUnit = "km"
    ) -> "DistanceService":
        """Build a service around explicit coordinates instead of host state."""
        zone = "zone.reference"
        states = {zone: {"attributes": {"latitude": lat, "longitude": lon}}}
        return cls(zone, states, unit=unit)

    @property
    def origin(self) -> Optional[Tuple[float, float]]:
        return self._origin

    def is_available(self) -> bool:
        return self._origin is not None

    def distance_to(self, lat: Any, lon: Any) -> Optional[float]:
        """Distance to ``(lat, lon)`` or None when it cannot be computed."""
        if self._origin is None:
            return None
        if not (valid_coordinate(lat) and valid_coordinate(lon)):
            return None
        lat0, lon0 = self._origin
        return haversine(lat0, lon0, float(lat), float(lon), self.unit)

    def bearing_to(self, lat: Any, lon: Any) -> Optional[float]:
        """Initial bearing in degrees [0, 360) or None, like :meth:`distance_to`."""
        if self._origin is None:
            return None
        if not (valid_coordinate(lat) and valid_coordinate(lon)):
            return None
        lat0, lon0 = self._origin
        return initial_bearing_deg(lat0, lon0, float(lat), float(lon))
