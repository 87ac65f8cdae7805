"""Localized strings for table headers and popup labels.

Catalogs are YAML files named ``<locale>.yml`` in this package. Lookups use
dotted paths such as ``table.head.altitude``; a missing key resolves to an
empty string. An unknown locale falls back to ``en``.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

__all__ = ["DEFAULT_LOCALE", "Lang", "available_locales", "lookup"]

logger = logging.getLogger(__name__)

_PKG_DIR = Path(__file__).parent

DEFAULT_LOCALE = "en"


def available_locales() -> Tuple[str, ...]:
    return tuple(sorted(p.stem for p in _PKG_DIR.glob("*.yml")))


@lru_cache(maxsize=None)
def _catalog(locale: str) -> Dict[str, Any]:
    path = _PKG_DIR / f"{locale}.yml"
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return data if isinstance(data, dict) else {}


def lookup(locale: str, path: str) -> str:
    """Return the string at dotted *path* in the *locale* catalog or ``""``."""
    return Lang(locale).get(path)


class Lang:
    """Catalog for one locale."""

    def __init__(self, locale: str = DEFAULT_LOCALE) -> None:
        locale = (locale or DEFAULT_LOCALE).strip().lower()
        if locale not in available_locales():
            logger.warning("unknown locale %r, falling back to %s", locale, DEFAULT_LOCALE)
            locale = DEFAULT_LOCALE
        self.locale = locale
        self.content = _catalog(locale)

    def get(self, path: str) -> str:
        node: Any = self.content
        for part in path.split("."):
            if not isinstance(node, dict) or part not in node:
                return ""
            node = node[part]
        if node is None or isinstance(node, (dict, list)):
            return ""
        return str(node)

    def head(self, column: str) -> str:
        return self.get(f"table.head.{column}")
