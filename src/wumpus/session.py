"""Session layer bridging the game engine and a front end."""

from .engine.commands import ACTION_PROMPT, new_game, submit_input
from .engine.maze import Maze
from .engine.outcome import Outcome, OutcomeKind
from .engine.rng import RandomSource
from .engine.state import Player, TurnState
from .logging import get_logger

logger = get_logger(__name__)


class GameSession:
    """Wraps a Maze + Player + TurnState and the random source they share."""

    def __init__(
        self,
        maze: Maze,
        player: Player,
        rng: RandomSource,
        state: TurnState = TurnState.IDLE,
    ):
        self.maze = maze
        self.player = player
        self.rng = rng
        self.state = state
        self.turns = 0

    @classmethod
    def start(cls, rng: RandomSource) -> "GameSession":
        """Set up a fresh cave."""
        maze, player, _ = new_game(rng)
        logger.info(
            "game_started",
            start_room=player.room,
            wumpus_room=maze.wumpus_room,
        )
        return cls(maze, player, rng)

    @property
    def is_finished(self) -> bool:
        return self.state is TurnState.FINISHED

    @property
    def prompt(self) -> str | None:
        """The action prompt, shown only when waiting for a new action."""
        if self.state is TurnState.IDLE:
            return ACTION_PROMPT
        return None

    def describe(self) -> str:
        return self.maze.describe_room(self.player.room)

    def submit(self, raw_input: str) -> Outcome:
        """Delegate one line of input to the engine."""
        was = self.state
        self.state, outcome = submit_input(
            self.state, self.maze, self.player, raw_input, self.rng,
        )
        self.turns += 1
        logger.debug(
            "turn_resolved",
            turn=self.turns,
            from_state=was.value,
            to_state=self.state.value,
            outcome=outcome.kind.value,
        )

        if outcome.is_terminal:
            logger.info(
                "game_over",
                outcome=outcome.kind.value,
                reason=outcome.reason.description if outcome.reason else None,
                turns=self.turns,
                arrows=self.player.arrows,
            )
        elif outcome.kind is OutcomeKind.REPROMPT:
            logger.debug("input_rejected", state=self.state.value)
        return outcome
