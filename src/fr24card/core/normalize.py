"""Raw aircraft record -> :class:`Aircraft`.

``normalize`` is a total, side-effect free mapping: absent or unusable
fields become None and never raise, so one bad record cannot stop the rest
of the list from rendering. Enrichment sources (country table, reference
database) are read-only collaborators; when they are missing the derived
fields fall back to defaults.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Protocol

from fr24card.core.distance import DistanceService
from fr24card.core.models import Aircraft, RawAircraft
from fr24card.data.aircraft_db import AircraftDatabase
from fr24card.data.countries import CountryTable

__all__ = [
    "DEFAULT_ICON",
    "icon_for_category",
    "normalize",
    "normalize_all",
    "filter_visible",
]

DEFAULT_ICON = "mdi:airplane"

# ADS-B emitter categories (DO-260B) -> Material Design icons
_CATEGORY_ICONS = {
    "A7": "mdi:helicopter",
    "B1": "mdi:airplane",
    "B2": "mdi:airballoon",
    "B3": "mdi:parachute",
    "B4": "mdi:paragliding",
    "B6": "mdi:quadcopter",
    "B7": "mdi:rocket",
    "C1": "mdi:car-emergency",
    "C2": "mdi:car",
    "C3": "mdi:transmission-tower",
}


class _HideOptions(Protocol):
    @property
    def hide_without_flight(self) -> bool: ...


def icon_for_category(category: Optional[str]) -> str:
    if not category:
        return DEFAULT_ICON
    return _CATEGORY_ICONS.get(category.strip().upper(), DEFAULT_ICON)


def normalize(
    record: Any,
    distance: DistanceService,
    *,
    countries: Optional[CountryTable] = None,
    database: Optional[AircraftDatabase] = None,
) -> Aircraft:
    """Map one raw host record to an :class:`Aircraft`."""
    raw = RawAircraft.from_record(record)

    registration = raw.registration
    aircraft_type = raw.aircraft_type
    if database is not None and (registration is None or aircraft_type is None):
        ref = database.lookup(raw.hex)
        if ref is not None:
            registration = registration or ref.registration
            aircraft_type = aircraft_type or ref.aircraft_type

    country = flag = None
    if countries is not None:
        block = countries.lookup(raw.hex)
        if block is not None:
            country, flag = block.name, block.flag

    return Aircraft(
        hex=raw.hex,
        flight=raw.flight,
        registration=registration,
        aircraft_type=aircraft_type,
        altitude=raw.altitude,
        speed=raw.speed,
        track=raw.track,
        lat=raw.lat,
        lon=raw.lon,
        squawk=raw.squawk,
        category=raw.category,
        distance=distance.distance_to(raw.lat, raw.lon),
        bearing=distance.bearing_to(raw.lat, raw.lon),
        country=country,
        flag=flag,
        icon=icon_for_category(raw.category),
    )


def normalize_all(
    records: Iterable[Any],
    distance: DistanceService,
    *,
    countries: Optional[CountryTable] = None,
    database: Optional[AircraftDatabase] = None,
) -> List[Aircraft]:
    return [
        normalize(r, distance, countries=countries, database=database)
        for r in records
    ]


def filter_visible(
    aircraft: Iterable[Aircraft], config: _HideOptions
) -> List[Aircraft]:
    """Drop aircraft without a callsign when the config asks for it.

    Input order is preserved; ordering is the sorter's job.
    """
    if not config.hide_without_flight:
        return list(aircraft)
    return [a for a in aircraft if a.flight]
