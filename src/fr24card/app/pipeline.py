"""One render cycle: host state -> normalized, filtered, sorted -> table.

The pipeline takes explicit inputs (validated config, host states, optional
collaborators) and returns an explicit result; it keeps no state between
cycles. Per-cycle data problems are absorbed here: a missing entity yields
a header-only table and bad records degrade field by field.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, List, Optional

from fr24card.core.distance import DistanceService
from fr24card.core.models import Aircraft
from fr24card.core.normalize import filter_visible, normalize_all
from fr24card.core.sorting import sort_by_distance
from fr24card.data.aircraft_db import AircraftDatabase
from fr24card.data.countries import CountryTable, default_country_table
from fr24card.errors import MissingEntityState
from fr24card.lang import Lang
from fr24card.render.builder import build_table
from fr24card.render.table import Table
from fr24card.settings.columns import ColumnRegistry, default_registry
from fr24card.settings.schema import CardConfig

__all__ = ["RenderResult", "aircraft_records", "render_cycle"]

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    table: Table
    aircraft: List[Aircraft] = field(default_factory=list)
    distance_available: bool = False
    skipped: bool = False

    @property
    def html(self) -> str:
        return self.table.to_html()


def aircraft_records(config: CardConfig, states: Mapping[str, Any]) -> List[Any]:
    """Raw records under ``states[entity].attributes[attribute]``.

    Raises :class:`MissingEntityState` when the entity is absent. A missing
    or non-list attribute is treated as no aircraft.
    """
    entity = states.get(config.entity) if isinstance(states, Mapping) else None
    if not isinstance(entity, Mapping):
        raise MissingEntityState(config.entity)
    attrs = entity.get("attributes")
    records = attrs.get(config.attribute) if isinstance(attrs, Mapping) else None
    if records is None:
        return []
    if not isinstance(records, (list, tuple)):
        logger.warning(
            "attribute %s of %s is not a list (%s)",
            config.attribute,
            config.entity,
            type(records).__name__,
        )
        return []
    good: List[Any] = []
    for r in records:
        if isinstance(r, Mapping):
            good.append(r)
        else:
            logger.warning("ignoring malformed aircraft record: %r", r)
    return good


def render_cycle(
    config: CardConfig,
    states: Mapping[str, Any],
    *,
    registry: Optional[ColumnRegistry] = None,
    lang: Optional[Lang] = None,
    countries: Optional[CountryTable] = None,
    database: Optional[AircraftDatabase] = None,
) -> RenderResult:
    """Normalize, filter, sort and tabulate one host state push."""
    registry = registry if registry is not None else default_registry()
    lang = lang if lang is not None else Lang(config.lang)
    countries = countries if countries is not None else default_country_table()
    distance = DistanceService(config.zone, states, unit=config.unit)

    skipped = False
    try:
        records = aircraft_records(config, states)
    except MissingEntityState as e:
        logger.warning("%s; rendering empty table", e)
        records = []
        skipped = True

    aircraft = normalize_all(records, distance, countries=countries, database=database)
    aircraft = sort_by_distance(filter_visible(aircraft, config))
    table = build_table(
        config,
        registry,
        aircraft,
        lang=lang,
        distance_available=distance.is_available(),
    )
    return RenderResult(
        table=table,
        aircraft=aircraft,
        distance_available=distance.is_available(),
        skipped=skipped,
    )
