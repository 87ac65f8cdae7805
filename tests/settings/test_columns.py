from __future__ import annotations

from pathlib import Path

import pytest

from fr24card.core.models import Column
from fr24card.errors import UnknownColumn
from fr24card.settings.columns import ColumnRegistry, default_registry


def test_packaged_catalog(registry: ColumnRegistry) -> None:
    assert registry.budget == 15
    for key in ("flag", "registration", "flight", "altitude", "speed", "distance", "track"):
        assert key in registry
    assert registry.get("altitude").unit == "ft"
    assert registry.get("flag").weight == 1
    assert default_registry() is default_registry()


def test_get_unknown_column(registry: ColumnRegistry) -> None:
    with pytest.raises(UnknownColumn) as exc:
        registry.get("bogus")
    assert exc.value.key == "bogus"
    assert "bogus" in str(exc.value)


def test_duplicate_keys_rejected() -> None:
    with pytest.raises(ValueError):
        ColumnRegistry([Column(key="a", weight=1), Column(key="a", weight=2)])


def test_effective_hides_distance_without_reference(registry: ColumnRegistry) -> None:
    keys = ["flight", "distance", "altitude"]
    on = registry.effective(keys, distance_available=True)
    off = registry.effective(keys, distance_available=False)
    assert [k for k, _ in on] == keys
    assert [k for k, _ in off] == ["flight", "altitude"]
    # The catalog itself is never modified
    assert registry.get("distance").show is True


def test_effective_respects_catalog_show() -> None:
    reg = ColumnRegistry(
        [Column(key="a", weight=1), Column(key="b", weight=1, show=False)]
    )
    assert [k for k, _ in reg.effective(["b", "a"], distance_available=True)] == ["a"]


def test_load_from_yaml(tmp_path: Path) -> None:
    p = tmp_path / "columns.yml"
    p.write_text(
        "budget: 4\ncolumns:\n  a:\n    weight: 3\n    unit: m\n  b:\n    weight: 1\n"
    )
    reg = ColumnRegistry.load(p)
    assert reg.budget == 4
    assert len(reg) == 2
    assert list(reg) == ["a", "b"]
    assert reg["a"].unit == "m"
