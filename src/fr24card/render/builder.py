"""Table generation from the configured columns and ordered aircraft.

Two passes share one list of visible columns, so the header row and every
body row always have the same number of cells. Columns hidden for this
render (distance without a reference point) are skipped in both.
"""

from __future__ import annotations

from typing import Dict, Sequence

from fr24card.core.models import Aircraft
from fr24card.lang import Lang
from fr24card.render.cells import cell_value
from fr24card.render.table import Table
from fr24card.settings.columns import ColumnRegistry
from fr24card.settings.schema import CardConfig

__all__ = ["build_table"]


def build_table(
    config: CardConfig,
    registry: ColumnRegistry,
    aircraft: Sequence[Aircraft],
    *,
    lang: Lang,
    distance_available: bool,
) -> Table:
    """Build the header row and one body row per aircraft, in given order."""
    table = Table()
    visible = registry.effective(config.columns, distance_available=distance_available)

    table.row(
        [table.cell(lang.head(key), column.styles, "th") for key, column in visible],
        "thead",
    )

    for a in aircraft:
        cells = [
            table.cell(
                cell_value(a, key, column, distance_unit=config.unit), column.styles
            )
            for key, column in visible
        ]
        attrs: Dict[str, str] = {}
        if config.popup:
            attrs["data-hex"] = a.hex
        table.row(cells, "tbody", attrs)

    return table
