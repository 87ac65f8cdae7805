"""Semantic table structure and its HTML serialization.

Cells hold either plain text, which is escaped on output, or :class:`Markup`
fragments (flag images, icons) which are emitted verbatim.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import Dict, List, Literal, Mapping, Optional, Sequence, Union

__all__ = ["Markup", "TableCell", "TableRow", "Table", "style_attr"]

CellTag = Literal["th", "td"]
Section = Literal["thead", "tbody"]


class Markup(str):
    """A string that is already safe HTML."""

    __slots__ = ()


def _escape(value: Union[str, Markup]) -> str:
    if isinstance(value, Markup):
        return str(value)
    return html.escape(value, quote=True)


def style_attr(styles: Optional[Mapping[str, str]]) -> str:
    """Render a CSS declaration block, e.g. ``text-align: right; width: 32px``."""
    if not styles:
        return ""
    return "; ".join(f"{k}: {v}" for k, v in styles.items())


@dataclass(frozen=True)
class TableCell:
    content: Union[str, Markup] = ""
    styles: Optional[Mapping[str, str]] = None
    tag: CellTag = "td"

    def to_html(self) -> str:
        style = style_attr(self.styles)
        attrs = f' style="{html.escape(style, quote=True)}"' if style else ""
        return f"<{self.tag}{attrs}>{_escape(self.content)}</{self.tag}>"


@dataclass(frozen=True)
class TableRow:
    cells: Sequence[TableCell]
    section: Section = "tbody"
    attrs: Mapping[str, str] = field(default_factory=dict)

    def to_html(self) -> str:
        attrs = "".join(
            f' {html.escape(k, quote=True)}="{html.escape(v, quote=True)}"'
            for k, v in self.attrs.items()
        )
        inner = "".join(c.to_html() for c in self.cells)
        return f"<tr{attrs}>{inner}</tr>"


@dataclass
class Table:
    rows: List[TableRow] = field(default_factory=list)

    @staticmethod
    def cell(
        content: Union[str, Markup],
        styles: Optional[Mapping[str, str]] = None,
        tag: CellTag = "td",
    ) -> TableCell:
        return TableCell(content=content, styles=styles, tag=tag)

    def row(
        self,
        cells: Sequence[TableCell],
        section: Section = "tbody",
        attrs: Optional[Dict[str, str]] = None,
    ) -> TableRow:
        r = TableRow(cells=tuple(cells), section=section, attrs=dict(attrs or {}))
        self.rows.append(r)
        return r

    @property
    def head(self) -> List[TableRow]:
        return [r for r in self.rows if r.section == "thead"]

    @property
    def body(self) -> List[TableRow]:
        return [r for r in self.rows if r.section == "tbody"]

    def to_html(self) -> str:
        parts = ["<table>"]
        for section in ("thead", "tbody"):
            rows = [r for r in self.rows if r.section == section]
            parts.append(f"<{section}>")
            parts.extend(r.to_html() for r in rows)
            parts.append(f"</{section}>")
        parts.append("</table>")
        return "".join(parts)
