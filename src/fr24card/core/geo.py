"""Spherical geodesy helpers.

All angles are in degrees. Distances use a mean Earth radius of 6371 km and
are reported in kilometres or statute miles. Implementations use only the
Python standard library (math).
"""

from __future__ import annotations

from math import asin, atan2, cos, degrees, isfinite, radians, sin, sqrt
from typing import Literal, Tuple

__all__ = [
    "DistanceUnit",
    "EARTH_RADIUS_KM",
    "KM_PER_MI",
    "earth_radius",
    "haversine",
    "initial_bearing_deg",
    "range_bearing_from",
    "valid_coordinate",
]

DistanceUnit = Literal["km", "mi"]

EARTH_RADIUS_KM: float = 6371.0
KM_PER_MI: float = 1.609344


def earth_radius(unit: DistanceUnit = "km") -> float:
    """Mean Earth radius expressed in *unit*."""
    if unit == "km":
        return EARTH_RADIUS_KM
    if unit == "mi":
        return EARTH_RADIUS_KM / KM_PER_MI
    raise ValueError(f"unsupported distance unit: {unit!r}")


def valid_coordinate(v: object) -> bool:
    """True for a finite real number (bools excluded)."""
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return False
    return isfinite(v)


def _normalize_lon_raw(lon_deg: float) -> float:
    """Normalize longitude to [-180, 180) without rounding."""
    return (lon_deg + 180.0) % 360.0 - 180.0


def haversine(
    lat1: float, lon1: float, lat2: float, lon2: float, unit: DistanceUnit = "km"
) -> float:
    """Great-circle distance between two points on a sphere.

    Args:
        lat1: Latitude of point 1 in degrees.
        lon1: Longitude of point 1 in degrees.
        lat2: Latitude of point 2 in degrees.
        lon2: Longitude of point 2 in degrees.
        unit: ``"km"`` or ``"mi"``.
    Returns:
        Non-negative, unrounded distance in *unit*.
    """
    radius = earth_radius(unit)
    if lat1 == lat2 and lon1 == lon2:
        return 0.0

    phi1 = radians(lat1)
    phi2 = radians(lat2)
    dphi = phi2 - phi1
    dlambda = radians(_normalize_lon_raw(lon2) - _normalize_lon_raw(lon1))

    # haversine(a) = sin^2(dphi/2) + cos(phi1)cos(phi2)sin^2(dlambda/2)
    sdphi = sin(dphi * 0.5)
    sdl = sin(dlambda * 0.5)
    a = sdphi * sdphi + cos(phi1) * cos(phi2) * sdl * sdl
    # Clamp due to rounding
    a = min(1.0, max(0.0, a))
    return radius * 2.0 * asin(sqrt(a))


def initial_bearing_deg(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Initial (forward) azimuth from point 1 to point 2 in degrees [0, 360).

    If the two points are identical, returns 0.0 by convention.
    """
    if lat1 == lat2 and lon1 == lon2:
        return 0.0

    phi1 = radians(lat1)
    phi2 = radians(lat2)
    dlambda = radians(_normalize_lon_raw(lon2 - lon1))

    x = sin(dlambda) * cos(phi2)
    y = cos(phi1) * sin(phi2) - sin(phi1) * cos(phi2) * cos(dlambda)
    brg = degrees(atan2(x, y)) % 360.0
    # 359.9999999999 rounds back to 360.0 on some inputs
    return 0.0 if brg >= 360.0 else brg


def range_bearing_from(
    lat0: float, lon0: float, lat: float, lon: float, unit: DistanceUnit = "km"
) -> Tuple[float, float]:
    """Convenience inverse: range and bearing from origin to target."""
    rng = haversine(lat0, lon0, lat, lon, unit)
    brg = initial_bearing_deg(lat0, lon0, lat, lon)
    return (rng, brg)
