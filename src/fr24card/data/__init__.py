"""Static reference data for fr24card.

Includes the ICAO address allocation table used for country flags and the
optional, lazily-loaded aircraft reference database.
"""

from .aircraft_db import AircraftDatabase, AircraftReference, get_database
from .countries import Allocation, CountryTable, default_country_table

__all__ = [
    "AircraftDatabase",
    "AircraftReference",
    "get_database",
    "Allocation",
    "CountryTable",
    "default_country_table",
]
