"""Command-line interface for fr24card.

Renders the aircraft table for a host state snapshot, which is handy for
checking a card configuration outside the dashboard:

    fr24card render --state states.json --config card.yml > table.html

The state file is a JSON object keyed by entity id, each entry holding an
``attributes`` object, exactly as the host pushes it. The config file is
YAML (JSON is valid YAML) with the card options.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, TextIO

import yaml

from fr24card import __version__
from fr24card.app.card import FlightCard
from fr24card.errors import ConfigError

__all__ = ["build_parser", "parse_args", "main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="fr24card", description="Render the nearby aircraft table"
    )
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--log-level",
        dest="log_level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    sub = p.add_subparsers(dest="command")

    r = sub.add_parser("render", help="Render the table for a state snapshot")
    r.add_argument(
        "--state", required=True, type=Path, help="JSON file with host states"
    )
    r.add_argument(
        "--config", required=True, type=Path, help="YAML/JSON card configuration"
    )
    r.add_argument(
        "--aircraft-db",
        dest="aircraft_db",
        type=Path,
        default=None,
        help="Optional aircraft reference database (JSON)",
    )
    return p


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    When ``argv`` is None the values are read from ``sys.argv`` as usual.
    Accepting an ``argv`` list makes the parser testable programmatically.
    """
    return build_parser().parse_args(argv)


def _load_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def render(args: argparse.Namespace, out: TextIO) -> int:
    try:
        raw_config = _load_yaml(args.config) or {}
        states = _load_json(args.state)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error("cannot read input: %s", e)
        return EXIT_INPUT
    if not isinstance(raw_config, dict) or not isinstance(states, dict):
        logger.error("config and state files must each hold an object")
        return EXIT_INPUT

    card = FlightCard(database_path=args.aircraft_db)
    try:
        card.set_config(raw_config)
    except ConfigError as e:
        logger.error("invalid configuration: %s", e)
        return EXIT_CONFIG

    html = card.set_state(states) or ""
    out.write(html + "\n")
    return EXIT_OK


def main(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    """Synchronous entrypoint; returns the process exit status."""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    out = out if out is not None else sys.stdout

    if args.version:
        out.write(f"fr24card {__version__}\n")
        return EXIT_OK
    if args.command == "render":
        return render(args, out)
    build_parser().print_help(out)
    return EXIT_INPUT
