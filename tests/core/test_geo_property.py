from __future__ import annotations

from math import pi

import hypothesis.strategies as st
from hypothesis import assume, given, settings

from fr24card.core.geo import EARTH_RADIUS_KM, haversine, initial_bearing_deg

lat_strat = st.floats(
    min_value=-89.9, max_value=89.9, allow_nan=False, allow_infinity=False
)
lon_strat = st.floats(
    min_value=-180.0, max_value=180.0, allow_nan=False, allow_infinity=False
)
unit_strat = st.sampled_from(["km", "mi"])


@settings(deadline=None, max_examples=120)
@given(lat1=lat_strat, lon1=lon_strat, lat2=lat_strat, lon2=lon_strat, unit=unit_strat)
def test_symmetry(lat1: float, lon1: float, lat2: float, lon2: float, unit: str) -> None:
    d1 = haversine(lat1, lon1, lat2, lon2, unit)  # type: ignore[arg-type]
    d2 = haversine(lat2, lon2, lat1, lon1, unit)  # type: ignore[arg-type]
    assert abs(d1 - d2) <= 1e-9


@settings(deadline=None, max_examples=120)
@given(lat1=lat_strat, lon1=lon_strat, lat2=lat_strat, lon2=lon_strat)
def test_non_negative_and_bounded(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> None:
    d = haversine(lat1, lon1, lat2, lon2)
    assert 0.0 <= d <= pi * EARTH_RADIUS_KM + 1e-9


@settings(deadline=None, max_examples=100)
@given(
    lat1=lat_strat,
    lon1=lon_strat,
    lat2=lat_strat,
    lon2=lon_strat,
    lat3=lat_strat,
    lon3=lon_strat,
)
def test_triangle_inequality(
    lat1: float, lon1: float, lat2: float, lon2: float, lat3: float, lon3: float
) -> None:
    d12 = haversine(lat1, lon1, lat2, lon2)
    d23 = haversine(lat2, lon2, lat3, lon3)
    d13 = haversine(lat1, lon1, lat3, lon3)
    assume(d13 < 19000.0)
    assert d13 <= d12 + d23 + 1e-6


@settings(deadline=None, max_examples=120)
@given(lat1=lat_strat, lon1=lon_strat, lat2=lat_strat, lon2=lon_strat)
def test_bearing_range(lat1: float, lon1: float, lat2: float, lon2: float) -> None:
    b = initial_bearing_deg(lat1, lon1, lat2, lon2)
    assert 0.0 <= b < 360.0
