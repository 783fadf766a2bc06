"""Turn resolution.

submit_input(state, maze, player, raw_input, rng) -> (state, Outcome) is
the main entry point. The current TurnState picks the handler; handlers
mutate maze and player in place and return the next state together with
the Outcome to render.
"""

from collections.abc import Callable

from ..logging import get_logger
from .errors import DestinationError
from .maze import Maze
from .outcome import LoseReason, Outcome
from .rng import RandomSource
from .state import Player, TurnState
from .world import Hazard

logger = get_logger(__name__)

# Chance that a missed shot wakes the Wumpus.
WAKE_WUMPUS_PROB = 0.75

ACTION_PROMPT = "What do you want to do? (m)ove or (s)hoot?"
NONSENSE = "That doesn't make any sense"
GAME_OVER = "The game is over."

HELP = """\
Welcome to "Hunt the Wumpus"

The wumpus lives in a cave of 20 rooms. Each room has 3
tunnels to other rooms. (The tunnels form a dodecahedron:
http://en.wikipedia.org/dodecahedron)

Hazards:

 Bottomless pits: Two rooms have bottomless pits in them. If you go
   there, you fall into the pit (& lose)!

 Super bats: Two other rooms have super bats. If you go
   there, a bat grabs you and takes you to some other room
   at random (which may be troublesome).

Wumpus:

   The wumpus is not bothered by hazards. (He has sucker
   feet and is too big for a bat to lift.)  Usually he is
   asleep. Two things wake him up: your shooting an arrow,
   or your entering his room.  If the wumpus wakes, he moves
   one room or stays still.  After that, if he is where you
   are, he eats you up and you lose!

You:

   Each turn you may move or shoot a crooked arrow.

   Moving: You can move one room (through one tunnel).

   Arrows: You have 5 arrows. You lose when you run out.
      You can only shoot to nearby rooms. If the arrow hits
      the wumpus, you win.

Warnings:

   When you are one room away from a wumpus or hazard, the
   computer says:

   Wumpus:  "You smell something terrible nearby."
   Bat:  "You hear a rustling."
   Pit:  "You feel a cold wind blowing from a nearby cavern."
"""

Handler = Callable[[Maze, Player, str, RandomSource], tuple[TurnState, Outcome]]


def new_game(rng: RandomSource) -> tuple[Maze, Player, str]:
    """Build a cave, drop the player into an empty room, and describe it."""
    maze, _ = Maze.generate(rng)
    player = Player(room=maze.random_empty_room(rng))
    return maze, player, maze.describe_room(player.room)


def submit_input(
    state: TurnState,
    maze: Maze,
    player: Player,
    raw_input: str,
    rng: RandomSource,
) -> tuple[TurnState, Outcome]:
    """Resolve one input token against the current turn state."""
    token = raw_input.strip().lower()
    handler = _STATE_HANDLERS[state]
    return handler(maze, player, token, rng)


def _handle_idle(
    maze: Maze, player: Player, token: str, rng: RandomSource,
) -> tuple[TurnState, Outcome]:
    """Pick an action."""
    command = _IDLE_DISPATCH.get(token)
    if command is None:
        return TurnState.IDLE, Outcome.reprompt(NONSENSE)
    return command()


def _cmd_move() -> tuple[TurnState, Outcome]:
    return TurnState.AWAITING_MOVE_TARGET, Outcome.proceed("Where?")


def _cmd_shoot() -> tuple[TurnState, Outcome]:
    return TurnState.AWAITING_SHOOT_TARGET, Outcome.proceed("Where?")


def _cmd_help() -> tuple[TurnState, Outcome]:
    return TurnState.IDLE, Outcome.proceed(HELP)


def _cmd_quit() -> tuple[TurnState, Outcome]:
    return (
        TurnState.AWAITING_QUIT_CONFIRMATION,
        Outcome.proceed("Are you so easily scared? [y/n]"),
    )


def _handle_quit_confirmation(
    maze: Maze, player: Player, token: str, rng: RandomSource,
) -> tuple[TurnState, Outcome]:
    if token in ("y", "yes"):
        return TurnState.FINISHED, Outcome.quit("Goodbye, braveheart!")
    if token in ("n", "no"):
        return TurnState.IDLE, Outcome.proceed("Good. the Wumpus is looking for you!")
    return TurnState.AWAITING_QUIT_CONFIRMATION, Outcome.reprompt(NONSENSE)


def _bad_directions(error: DestinationError, question: str) -> Outcome:
    return Outcome.reprompt(
        f"There was a problem with your directions: {error}\n{question}"
    )


def _handle_move_target(
    maze: Maze, player: Player, token: str, rng: RandomSource,
) -> tuple[TurnState, Outcome]:
    """Walk through a tunnel and face whatever is on the other side."""
    try:
        dest = maze.validate_destination(player.room, token)
    except DestinationError as e:
        return (
            TurnState.AWAITING_MOVE_TARGET,
            _bad_directions(e, "Where do you want to go?"),
        )

    room = maze.rooms[dest]
    if room.has_wumpus:
        return TurnState.FINISHED, Outcome.lose(
            LoseReason.EATEN, "The wumpus ate you up!",
        )
    if room.hazard is Hazard.PIT:
        return TurnState.FINISHED, Outcome.lose(
            LoseReason.PIT, "You fall into a bottomless pit!",
        )

    if room.hazard is Hazard.BAT:
        # Bats only drop the player into empty rooms.
        player.room = maze.random_empty_room(rng)
        message = "The bats whisk you away!\n" + maze.describe_room(player.room)
    else:
        player.room = dest
        message = maze.describe_room(player.room)

    return TurnState.IDLE, Outcome.proceed(message)


def _wake_wumpus(
    maze: Maze, player: Player, rng: RandomSource,
) -> tuple[bool, str | None]:
    """Maybe disturb the Wumpus with a stray arrow.

    Returns (player_eaten, message). message is None when the Wumpus
    stayed where it was.
    """
    if rng.random() >= WAKE_WUMPUS_PROB:
        return False, None

    wumpus_room = maze.wumpus_room
    new_room = maze.random_empty_neighbor(wumpus_room, rng)
    if new_room is None:
        logger.debug("wumpus_cornered", room=wumpus_room)
        return False, None

    maze.move_wumpus(new_room)
    logger.debug("wumpus_relocated", from_room=wumpus_room, to_room=new_room)
    if new_room == player.room:
        return True, None
    return False, "You heard a rumbling in a nearby cavern."


def _handle_shoot_target(
    maze: Maze, player: Player, token: str, rng: RandomSource,
) -> tuple[TurnState, Outcome]:
    """Loose an arrow into a neighboring room."""
    try:
        target = maze.validate_destination(player.room, token)
    except DestinationError as e:
        return (
            TurnState.AWAITING_SHOOT_TARGET,
            _bad_directions(e, "Where do you want to shoot?"),
        )

    if maze.rooms[target].has_wumpus:
        return TurnState.FINISHED, Outcome.win(
            "YOU KILLED THE WUMPUS! GOOD JOB, BUDDY!!!"
        )

    eaten, rumble = _wake_wumpus(maze, player, rng)
    if eaten:
        return TurnState.FINISHED, Outcome.lose(
            LoseReason.WOKEN_WUMPUS, "You woke up the wumpus and he ate you!",
        )

    player.arrows -= 1
    if player.arrows == 0:
        return TurnState.FINISHED, Outcome.lose(
            LoseReason.OUT_OF_ARROWS, "You ran out of arrows.",
        )

    noun = "arrow" if player.arrows == 1 else "arrows"
    lines = [f"Your arrow misses. {player.arrows} {noun} left."]
    if rumble:
        lines.insert(0, rumble)
    return TurnState.IDLE, Outcome.proceed("\n".join(lines))


def _handle_finished(
    maze: Maze, player: Player, token: str, rng: RandomSource,
) -> tuple[TurnState, Outcome]:
    return TurnState.FINISHED, Outcome.reprompt(GAME_OVER)


_IDLE_DISPATCH: dict[str, Callable[[], tuple[TurnState, Outcome]]] = {
    **dict.fromkeys(("m", "move"), _cmd_move),
    **dict.fromkeys(("s", "shoot"), _cmd_shoot),
    **dict.fromkeys(("h", "help"), _cmd_help),
    **dict.fromkeys(("q", "quit"), _cmd_quit),
}

_STATE_HANDLERS: dict[TurnState, Handler] = {
    TurnState.IDLE: _handle_idle,
    TurnState.AWAITING_MOVE_TARGET: _handle_move_target,
    TurnState.AWAITING_SHOOT_TARGET: _handle_shoot_target,
    TurnState.AWAITING_QUIT_CONFIRMATION: _handle_quit_confirmation,
    TurnState.FINISHED: _handle_finished,
}
