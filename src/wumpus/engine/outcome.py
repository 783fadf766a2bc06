"""Results of resolving one turn, ready for the front end to render."""

from dataclasses import dataclass
from enum import Enum


class OutcomeKind(Enum):
    CONTINUE = "continue"
    REPROMPT = "reprompt"
    WIN = "win"
    LOSE = "lose"
    QUIT = "quit"


class LoseReason(Enum):
    """How the player died, and the exit status it maps to.

    Deaths the cave inflicts exit cleanly. Running dry on arrows or
    waking the Wumpus with a shot exit with a failure status.
    """

    EATEN = ("eaten by Wumpus", 0)
    PIT = ("fell into pit", 0)
    WOKEN_WUMPUS = ("woken Wumpus ate you", 1)
    OUT_OF_ARROWS = ("out of arrows", 1)

    def __init__(self, description: str, exit_code: int):
        self.description = description
        self.exit_code = exit_code


@dataclass(frozen=True)
class Outcome:
    kind: OutcomeKind
    message: str = ""
    reason: LoseReason | None = None

    @classmethod
    def proceed(cls, message: str) -> "Outcome":
        return cls(OutcomeKind.CONTINUE, message)

    @classmethod
    def reprompt(cls, message: str) -> "Outcome":
        return cls(OutcomeKind.REPROMPT, message)

    @classmethod
    def win(cls, message: str) -> "Outcome":
        return cls(OutcomeKind.WIN, message)

    @classmethod
    def lose(cls, reason: LoseReason, message: str) -> "Outcome":
        return cls(OutcomeKind.LOSE, message, reason)

    @classmethod
    def quit(cls, message: str) -> "Outcome":
        return cls(OutcomeKind.QUIT, message)

    @property
    def is_terminal(self) -> bool:
        return self.kind in (OutcomeKind.WIN, OutcomeKind.LOSE, OutcomeKind.QUIT)

    @property
    def exit_code(self) -> int:
        """Process exit status for a terminal outcome."""
        if self.reason is not None:
            return self.reason.exit_code
        return 0
