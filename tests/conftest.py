from __future__ import annotations

from typing import Any, Callable, Iterator

import pytest

from fr24card.data.aircraft_db import get_database
from fr24card.settings.columns import ColumnRegistry, default_registry

ENTITY = "sensor.planes"
ZONE = "zone.home"


@pytest.fixture(autouse=True)
def _fresh_database(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    # The reference database is process-wide; isolate every test from it
    monkeypatch.delenv("FR24CARD_AIRCRAFT_DB", raising=False)
    db = get_database()
    db.reset()
    yield
    db.reset()


@pytest.fixture
def registry() -> ColumnRegistry:
    return default_registry()


@pytest.fixture
def make_states() -> Callable[..., dict[str, Any]]:
    """Build a host state mapping with an aircraft entity and optional zone."""

    def _make(
        aircraft: list[Any] | None = None,
        *,
        zone: tuple[float, float] | None = (52.0, 4.0),
        entity: str = ENTITY,
        attribute: str = "aircraft",
    ) -> dict[str, Any]:
        states: dict[str, Any] = {
            entity: {"state": len(aircraft or []), "attributes": {attribute: aircraft or []}}
        }
        if zone is not None:
            states[ZONE] = {
                "state": "zoning",
                "attributes": {"latitude": zone[0], "longitude": zone[1]},
            }
        return states

    return _make
