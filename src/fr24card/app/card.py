"""Dashboard card lifecycle around the render pipeline.

The host calls :meth:`FlightCard.set_config` when the card is configured
and :meth:`FlightCard.set_state` on every state push. Configuration errors
propagate to the host; per-cycle problems never do.

The first configuration triggers the one-time aircraft database load and a
short settle delay (2.5 s when this card started the load, 0.15 s when the
table was already initialized). Until the delay expires renders skip the
database enrichment.

Example usage:

    card = FlightCard()
    card.set_config({"entity": "sensor.planes", "zone": "zone.home"})
    html = card.set_state(hass_states)
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from fr24card.app.pipeline import RenderResult, render_cycle
from fr24card.app.popup import Popup
from fr24card.data.aircraft_db import AircraftDatabase, get_database
from fr24card.lang import Lang
from fr24card.settings.columns import ColumnRegistry, default_registry
from fr24card.settings.schema import CardConfig, validate_config

__all__ = ["FlightCard", "SETTLE_DELAY_LOADING_S", "SETTLE_DELAY_S"]

logger = logging.getLogger(__name__)

SETTLE_DELAY_LOADING_S = 2.5
SETTLE_DELAY_S = 0.15
CARD_SIZE = 100


class FlightCard:
    """Configured card instance; one per dashboard placement."""

    def __init__(
        self,
        *,
        registry: Optional[ColumnRegistry] = None,
        database: Optional[AircraftDatabase] = None,
        database_path: Optional[Path] = None,
    ) -> None:
        self._registry = registry if registry is not None else default_registry()
        self._database = database if database is not None else get_database()
        self._database_path = database_path
        self._config: Optional[CardConfig] = None
        self._lang: Optional[Lang] = None
        self._setup_started = False
        self._settle: Optional[asyncio.TimerHandle] = None
        self.setup_complete = False
        self.last_result: Optional[RenderResult] = None
        self.popup: Optional[Popup] = None

    @property
    def config(self) -> Optional[CardConfig]:
        return self._config

    @property
    def header(self) -> str:
        if self._config is None:
            return ""
        return self._config.title or ""

    def card_size(self) -> int:
        """Preferred height hint for host layout."""
        return CARD_SIZE

    def set_config(self, raw: Mapping[str, Any]) -> CardConfig:
        """Validate and apply *raw*; raises :class:`ConfigError` subclasses."""
        config = validate_config(raw, self._registry)
        self._config = config
        self._lang = Lang(config.lang)
        if not self._setup_started:
            self._setup_started = True
            triggered = self._database.ensure_loaded(self._database_path)
            delay = SETTLE_DELAY_LOADING_S if triggered else SETTLE_DELAY_S
            self._schedule_setup_complete(delay)
        return config

    def _schedule_setup_complete(self, delay_s: float) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is None:
            # Synchronous callers (CLI, tests) have nothing to wait on
            self.setup_complete = True
            return

        def _cb() -> None:
            self.setup_complete = True
            logger.debug("card setup complete")

        self._settle = loop.call_later(delay_s, _cb)

    def set_state(self, states: Mapping[str, Any]) -> Optional[str]:
        """Render one host state push; returns markup, or None if unconfigured."""
        if self._config is None or self._lang is None:
            # The host may push state before configuring the card
            return None
        result = render_cycle(
            self._config,
            states,
            registry=self._registry,
            lang=self._lang,
            database=self._database if self.setup_complete else None,
        )
        self.last_result = result
        if self._config.popup:
            self.popup = Popup(
                result.aircraft,
                self._lang,
                distance_unit=self._config.unit,
                registry=self._registry,
            )
        else:
            self.popup = None
        return result.html

    def close(self) -> None:
        """Cancel a pending settle timer (card removed from the dashboard)."""
        if self._settle is not None:
            self._settle.cancel()
            self._settle = None
