"""Terminal front end.

Reads one line per turn, hands it to the session and prints whatever
comes back. Owns the exit status: voluntary quits and the cave's own
deaths exit 0, running out of arrows or waking the Wumpus exit 1.
"""

import argparse
import sys
from collections.abc import Iterable
from typing import TextIO

from .config import Config
from .engine.errors import MazeError
from .engine.outcome import OutcomeKind
from .engine.rng import make_random
from .logging import LEVELS, configure_logging, get_logger
from .session import GameSession

logger = get_logger(__name__)

PROMPT = "> "
EXIT_INTERNAL_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wumpus",
        description='Play "Hunt the Wumpus" in a 20-room dodecahedral cave.',
    )
    parser.add_argument("--seed", type=int, help="Seed for a reproducible cave")
    parser.add_argument(
        "--log-level",
        choices=list(LEVELS),
        type=str.upper,
        help="Log level (default: WUMPUS_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--json-logs", action="store_true", default=None,
        help="Emit logs as JSON lines",
    )
    return parser


def play(session: GameSession, lines: Iterable[str], out: TextIO) -> int:
    """Run the game loop over input lines and return the exit status."""
    out.write(session.describe() + "\n")
    out.write(session.prompt + "\n")
    out.write(PROMPT)
    out.flush()

    for line in lines:
        outcome = session.submit(line.strip().casefold())
        out.write(outcome.message + "\n")

        if outcome.kind is OutcomeKind.LOSE:
            out.write("GAME OVER\n")
        if outcome.is_terminal:
            return outcome.exit_code

        if session.prompt and outcome.kind is OutcomeKind.CONTINUE:
            out.write(session.prompt + "\n")
        out.write(PROMPT)
        out.flush()

    # Input ran out: treat it as walking away.
    logger.info("input_closed", turns=session.turns)
    out.write("\nGoodbye, braveheart!\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_env()
    except ValueError as e:
        parser.error(str(e))
    if args.seed is not None:
        config.seed = args.seed
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.json_logs is not None:
        config.json_logs = args.json_logs

    try:
        configure_logging(
            log_level=config.log_level,
            log_file=config.log_file,
            json_logs=config.json_logs,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        session = GameSession.start(make_random(config.seed))
    except MazeError as e:
        logger.error("maze_construction_failed", error=str(e))
        return EXIT_INTERNAL_ERROR

    return play(session, sys.stdin, sys.stdout)
