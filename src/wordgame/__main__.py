"""Allow running the game with ``python -m wordgame``."""

from __future__ import annotations

import sys

from .main import run


def main(argv: list[str] | None = None) -> int:
    """Play with ``argv``, or the process arguments when omitted."""
    return run(argv)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
