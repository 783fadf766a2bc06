"""Hunt the Wumpus in a dodecahedral cave."""

import sys

from .config import Config
from .session import GameSession

__all__ = ["main", "Config", "GameSession"]


def main() -> None:
    """Entry point for the wumpus command."""
    from .cli import main as cli_main

    sys.exit(cli_main())
