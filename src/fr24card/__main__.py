"""Console entrypoint for fr24card.

Running ``python -m fr24card`` or the installed ``fr24card`` console script
executes :func:`fr24card.cli.main`.
"""

from __future__ import annotations

import sys

from fr24card.cli import main as cli_main


def main() -> None:
    """Application entrypoint (delegates to :func:`fr24card.cli.main`)."""
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
