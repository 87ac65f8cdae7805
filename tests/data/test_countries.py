from __future__ import annotations

from pathlib import Path

import pytest

from fr24card.data.countries import (
    Allocation,
    CountryTable,
    default_country_table,
    parse_icao,
)


@pytest.mark.parametrize(
    "hex_,code",
    [
        ("480000", "NL"),
        ("4840d6", "NL"),
        ("487FFF", "NL"),
        ("3c6444", "DE"),
        ("a835af", "US"),
        ("406b90", "GB"),
        ("4ca7b3", "IE"),
    ],
)
def test_lookup_known_blocks(hex_: str, code: str) -> None:
    block = default_country_table().lookup(hex_)
    assert block is not None
    assert block.code == code


@pytest.mark.parametrize("hex_", ["000001", "f00000", "4cb000", "", "xyz", None, "4840d"])
def test_lookup_unresolvable(hex_: object) -> None:
    assert default_country_table().lookup(hex_) is None
    assert default_country_table().flag(hex_) is None


def test_flag_path() -> None:
    assert default_country_table().flag("4840d6") == "/local/fr24card/dist/flags/nl.svg"


def test_parse_icao() -> None:
    assert parse_icao("4840D6") == 0x4840D6
    assert parse_icao(" 4840d6 ") == 0x4840D6
    assert parse_icao("4840d") is None
    assert parse_icao(0x4840D6) is None


def test_load_skips_bad_entries(tmp_path: Path) -> None:
    p = tmp_path / "countries.yml"
    p.write_text(
        "allocations:\n"
        '  - { start: "100000", end: "1FFFFF", code: "ru", name: "Russia" }\n'
        '  - { start: "300000", end: "2FFFFF", code: "IT" }\n'
        '  - { start: "400000", end: "43FFFF" }\n'
        "  - nonsense\n"
    )
    table = CountryTable.load(p)
    assert len(table) == 1
    assert table.lookup("150000") == Allocation(0x100000, 0x1FFFFF, "RU", "Russia")
