from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from fr24card.data.aircraft_db import AircraftDatabase, AircraftReference, get_database


def write_db(tmp_path: Path, data: object) -> Path:
    p = tmp_path / "aircraft.json"
    p.write_text(json.dumps(data))
    return p


def test_loads_once(tmp_path: Path) -> None:
    p = write_db(tmp_path, {"4840D6": {"r": "PH-BXA", "t": "B738"}, "a835af": ["N1", "C172"]})
    db = AircraftDatabase()
    assert db.loaded is False
    assert db.lookup("4840d6") is None

    assert db.ensure_loaded(p) is True
    assert db.loaded is True
    assert db.lookup("4840d6") == AircraftReference("PH-BXA", "B738")
    assert db.lookup("A835AF") == AircraftReference("N1", "C172")

    # A second call never reloads, even with a different file
    other_dir = tmp_path / "other"
    other_dir.mkdir()
    other = write_db(other_dir, {"000001": ["X", "Y"]})
    assert db.ensure_loaded(other) is False
    assert db.lookup("000001") is None


def test_missing_file_still_initializes(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    db = AircraftDatabase()
    with caplog.at_level(logging.WARNING):
        assert db.ensure_loaded(tmp_path / "nope.json") is True
    assert db.loaded is True
    assert len(db) == 0
    assert "not found" in caplog.text
    assert db.ensure_loaded(tmp_path / "nope.json") is False


def test_corrupt_file(tmp_path: Path) -> None:
    p = tmp_path / "aircraft.json"
    p.write_text("{broken")
    db = AircraftDatabase()
    assert db.ensure_loaded(p) is True
    assert len(db) == 0


def test_bad_entries_ignored(tmp_path: Path) -> None:
    p = write_db(tmp_path, {"a": 1, "b": [], "c": {"r": "", "t": None}, "d": ["R-D"]})
    db = AircraftDatabase()
    db.ensure_loaded(p)
    assert len(db) == 1
    assert db.lookup("d") == AircraftReference("R-D", None)


def test_env_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    p = write_db(tmp_path, {"4840d6": ["PH-BXA", "B738"]})
    monkeypatch.setenv("FR24CARD_AIRCRAFT_DB", str(p))
    db = AircraftDatabase()
    db.ensure_loaded()
    assert db.lookup("4840d6") is not None


def test_process_wide_instance() -> None:
    assert get_database() is get_database()
    db = get_database()
    db.load_records({"4840d6": ["PH-BXA", "B738"]})
    db.reset()
    assert db.loaded is False
    assert db.lookup("4840d6") is None
