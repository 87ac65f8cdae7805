from __future__ import annotations

import pytest
from pydantic import ValidationError

from fr24card.core.models import Aircraft, Column, RawAircraft


def test_full_record() -> None:
    raw = RawAircraft.from_record(
        {
            "hex": " 4840D6 ",
            "flight": "KLM1234 ",
            "registration": "PH-BXA",
            "type": "B738",
            "altitude": 3000,
            "speed": "250",
            "track": 91.5,
            "lat": 52.1,
            "lon": 4.1,
            "squawk": 1000,
            "category": "A3",
        }
    )
    assert raw.hex == "4840d6"
    assert raw.flight == "KLM1234"
    assert raw.aircraft_type == "B738"
    assert raw.altitude == 3000.0
    assert raw.speed == 250.0
    assert raw.squawk == "1000"


def test_dump1090_aliases() -> None:
    raw = RawAircraft.from_record(
        {"hex": "abc123", "alt_baro": "ground", "gs": 12.0, "r": "N1", "t": "C172"}
    )
    assert raw.altitude == 0.0
    assert raw.speed == 12.0
    assert raw.registration == "N1"
    assert raw.aircraft_type == "C172"


@pytest.mark.parametrize(
    "record",
    [
        {},
        {"hex": None, "flight": "   ", "lat": "north", "lon": float("nan")},
        {"hex": ["x"], "altitude": {"v": 1}, "speed": True, "track": "n/a"},
    ],
)
def test_malformed_fields_degrade_to_none(record: dict) -> None:
    raw = RawAircraft.from_record(record)
    assert raw.hex == ""
    assert raw.flight is None
    assert raw.altitude is None
    assert raw.speed is None
    assert raw.track is None
    assert raw.lat is None
    assert raw.lon is None


@pytest.mark.parametrize("record", [None, 42, "4840d6", ["4840d6"]])
def test_non_mapping_yields_empty_record(record: object) -> None:
    raw = RawAircraft.from_record(record)
    assert raw == RawAircraft()


def test_aircraft_is_frozen() -> None:
    a = Aircraft(hex="4840d6", flight="KL123")
    with pytest.raises(ValidationError):
        a.flight = "KL999"  # type: ignore[misc]
    assert a.has_position is False
    assert a.icon == "mdi:airplane"


def test_column_weight_positive() -> None:
    with pytest.raises(ValidationError):
        Column(key="x", weight=0)
    assert Column(key="x", weight=1).show is True
