"""Pydantic model for the card configuration and its validator."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from fr24card.errors import (
    InvalidConfig,
    MissingEntity,
    UnknownColumn,
    WeightBudgetExceeded,
)

from .columns import ColumnRegistry, default_registry

__all__ = [
    "DEFAULT_COLUMNS",
    "HideOptions",
    "CardConfig",
    "validate_config",
]

DEFAULT_COLUMNS: Tuple[str, ...] = (
    "flag",
    "registration",
    "flight",
    "altitude",
    "speed",
    "distance",
    "track",
)


class HideOptions(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    with_out_flight: bool = Field(default=True, alias="withOutFlight")


class CardConfig(BaseModel):
    """Validated card configuration.

    Parameters
    ----------
    entity: Host entity holding the raw aircraft list. Required.
    attribute: Attribute of ``entity`` with the aircraft records.
    zone: Optional reference point entity for distance and bearing.
    columns: Column keys in display order.
    hide: Row filters; ``withOutFlight`` drops aircraft without a callsign.
    sort: Accepted for compatibility; rows are always ordered by distance.
    lang: Locale code for header and popup text.
    popup: When true rows carry ``data-hex`` for click handling.
    title: Optional card header.
    unit: Distance unit, ``km`` or ``mi``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    entity: str
    attribute: str = Field(default="aircraft")
    zone: Optional[str] = Field(default=None)
    columns: Tuple[str, ...] = Field(default=DEFAULT_COLUMNS)
    hide: HideOptions = Field(default_factory=HideOptions)
    sort: str = Field(default="distance")
    lang: str = Field(default="en")
    popup: bool = Field(default=False)
    title: Optional[str] = Field(default=None)
    unit: Literal["km", "mi"] = Field(default="km")

    @field_validator("columns", mode="before")
    @classmethod
    def _chk_columns(cls, v: Any) -> Any:
        if isinstance(v, str):
            raise ValueError("columns must be a list of column keys")
        return v

    @field_validator("hide", mode="before")
    @classmethod
    def _chk_hide(cls, v: Any) -> Any:
        # ``hide: null`` in YAML means "use defaults"
        return {} if v is None else v

    @property
    def hide_without_flight(self) -> bool:
        return self.hide.with_out_flight


def validate_config(
    raw: Mapping[str, Any] | None, registry: ColumnRegistry | None = None
) -> CardConfig:
    """Merge *raw* over the defaults and validate it against *registry*.

    Raises
    ------
    MissingEntity: ``entity`` is absent or empty.
    UnknownColumn: a requested column is not in the registry.
    WeightBudgetExceeded: selected columns weigh more than the budget.
    InvalidConfig: *raw* is not a mapping, or any other shape problem
        reported by pydantic.
    """
    registry = registry if registry is not None else default_registry()
    if raw is not None and not isinstance(raw, Mapping):
        raise InvalidConfig(
            f"configuration must be a mapping, got {type(raw).__name__}"
        )
    data = dict(raw or {})
    if not data.get("entity"):
        raise MissingEntity()

    try:
        config = CardConfig.model_validate(data)
    except ValidationError as e:
        raise InvalidConfig(str(e)) from e

    total = 0
    for key in config.columns:
        if key not in registry:
            raise UnknownColumn(key)
        total += registry.get(key).weight
    if total > registry.budget:
        raise WeightBudgetExceeded(total, registry.budget)
    return config
