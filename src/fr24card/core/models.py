from __future__ import annotations

from collections.abc import Mapping
from math import isfinite
from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _coerce_float(v: Any) -> Optional[float]:
    if v is None or isinstance(v, bool):
        return None
    try:
        f = float(v)
    except (TypeError, ValueError):
        return None
    return f if isfinite(f) else None


def _coerce_text(v: Any) -> Optional[str]:
    if v is None or isinstance(v, (dict, list, tuple, set)):
        return None
    s = str(v).strip()
    return s if s else None


class Column(BaseModel):
    """Catalog entry for one selectable table column."""

    model_config = ConfigDict(frozen=True)

    key: str
    weight: int = Field(..., gt=0, description="Cost against the column budget")
    show: bool = True
    unit: Optional[str] = None
    styles: Optional[Dict[str, str]] = Field(
        None, description="CSS declarations applied to header and data cells"
    )


class RawAircraft(BaseModel):
    """
    One aircraft record as pushed by the host, every field optional.
    Values that cannot be interpreted become None instead of failing, so
    a single bad field never rejects the record.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    hex: str = ""
    flight: Optional[str] = None
    registration: Optional[str] = Field(
        None, validation_alias=AliasChoices("registration", "r")
    )
    aircraft_type: Optional[str] = Field(
        None, validation_alias=AliasChoices("aircraft_type", "type", "t")
    )
    altitude: Optional[float] = Field(
        None, validation_alias=AliasChoices("altitude", "alt_baro", "alt_geom")
    )
    speed: Optional[float] = Field(None, validation_alias=AliasChoices("speed", "gs"))
    track: Optional[float] = Field(
        None, validation_alias=AliasChoices("track", "heading")
    )
    lat: Optional[float] = None
    lon: Optional[float] = None
    squawk: Optional[str] = None
    category: Optional[str] = None

    @field_validator("hex", mode="before")
    @classmethod
    def _normalize_hex(cls, v: Any) -> str:
        s = _coerce_text(v)
        return s.lower() if s else ""

    @field_validator(
        "flight", "registration", "aircraft_type", "squawk", "category", mode="before"
    )
    @classmethod
    def _text(cls, v: Any) -> Optional[str]:
        return _coerce_text(v)

    @field_validator("altitude", mode="before")
    @classmethod
    def _altitude(cls, v: Any) -> Optional[float]:
        # dump1090 reports aircraft on the ground as alt_baro == "ground"
        if isinstance(v, str) and v.strip().lower() == "ground":
            return 0.0
        return _coerce_float(v)

    @field_validator("speed", "track", "lat", "lon", mode="before")
    @classmethod
    def _number(cls, v: Any) -> Optional[float]:
        return _coerce_float(v)

    @classmethod
    def from_record(cls, record: Any) -> "RawAircraft":
        """Build from an arbitrary field bag; non-mappings yield an empty record."""
        if not isinstance(record, Mapping):
            return cls()
        return cls.model_validate(dict(record))


class Aircraft(BaseModel):
    """
    Normalized aircraft for one render cycle.
    Derived fields (distance, bearing, flag, icon) are None when they could
    not be computed.
    """

    model_config = ConfigDict(frozen=True)

    hex: str
    flight: Optional[str] = None
    registration: Optional[str] = None
    aircraft_type: Optional[str] = None
    altitude: Optional[float] = None
    speed: Optional[float] = None
    track: Optional[float] = None
    lat: Optional[float] = None
    lon: Optional[float] = None
    squawk: Optional[str] = None
    category: Optional[str] = None

    distance: Optional[float] = None
    bearing: Optional[float] = None
    country: Optional[str] = None
    flag: Optional[str] = None
    icon: str = "mdi:airplane"

    @property
    def has_position(self) -> bool:
        return self.lat is not None and self.lon is not None

    def __repr__(self) -> str:  # pragma: no cover
        return f"Aircraft({self.hex or '?'} {self.flight or '-'})"


__all__ = [
    "Column",
    "RawAircraft",
    "Aircraft",
]
