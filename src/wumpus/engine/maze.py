"""The cave: rooms, hazard placement, and proximity queries.

Maze.generate(rng) is the entry point. Everything random goes through the
random source passed in by the caller, so a seeded source replays the
same cave.
"""

from ..logging import get_logger
from .errors import MazeError, NotAdjacentError, RoomParseError
from .rng import RandomSource
from .topology import ADJACENCY, check_topology
from .world import HAZARD_WARNINGS, WUMPUS_WARNING, Hazard, Room

logger = get_logger(__name__)

PITS = 2
BATS = 2


class Maze:
    """All 20 rooms plus the Wumpus's whereabouts."""

    def __init__(self, rooms: list[Room]):
        self.rooms = rooms

    @classmethod
    def empty(cls) -> "Maze":
        """A wired cave with nothing placed in it yet."""
        check_topology(ADJACENCY)
        rooms = [
            Room(number=n, neighbors=tuple(neighbors))
            for n, neighbors in enumerate(ADJACENCY)
        ]
        return cls(rooms)

    @classmethod
    def generate(cls, rng: RandomSource) -> tuple["Maze", int]:
        """Build a populated cave and return it with the Wumpus's room.

        Placement order is Wumpus, pits, bats. Each draw only sees the
        rooms still empty at that point.
        """
        maze = cls.empty()

        wumpus_room = maze.random_empty_room(rng)
        maze.rooms[wumpus_room].has_wumpus = True

        for hazard, count in ((Hazard.PIT, PITS), (Hazard.BAT, BATS)):
            for _ in range(count):
                maze.rooms[maze.random_empty_room(rng)].hazard = hazard

        logger.debug(
            "maze_generated",
            wumpus=wumpus_room,
            pits=maze.rooms_with(Hazard.PIT),
            bats=maze.rooms_with(Hazard.BAT),
        )
        return maze, wumpus_room

    @property
    def wumpus_room(self) -> int:
        for room in self.rooms:
            if room.has_wumpus:
                return room.number
        raise MazeError("the Wumpus has gone missing")

    def neighbors(self, room: int) -> tuple[int, int, int]:
        return self.rooms[room].neighbors

    def rooms_with(self, hazard: Hazard) -> list[int]:
        """Rooms holding the given hazard, in ascending order."""
        return [r.number for r in self.rooms if r.hazard is hazard]

    def empty_rooms(self) -> list[int]:
        """Rooms with no hazard and no Wumpus, in ascending order."""
        return [r.number for r in self.rooms if r.is_empty]

    def random_empty_room(self, rng: RandomSource) -> int:
        """Pick a room uniformly among the empty ones."""
        candidates = self.empty_rooms()
        if not candidates:
            raise MazeError("no empty room left")
        return candidates[rng.randrange(len(candidates))]

    def random_empty_neighbor(self, room: int, rng: RandomSource) -> int | None:
        """Pick an empty neighbor of room, or None if every one is taken."""
        candidates = [n for n in self.neighbors(room) if self.rooms[n].is_empty]
        if not candidates:
            return None
        return rng.choice(candidates)

    def is_danger_adjacent(self, room: int, hazard: Hazard) -> bool:
        return any(self.rooms[n].hazard is hazard for n in self.neighbors(room))

    def is_wumpus_adjacent(self, room: int) -> int | None:
        """The neighbor of room holding the Wumpus, if there is one."""
        for n in self.neighbors(room):
            if self.rooms[n].has_wumpus:
                return n
        return None

    def move_wumpus(self, to_room: int) -> None:
        self.rooms[self.wumpus_room].has_wumpus = False
        self.rooms[to_room].has_wumpus = True

    def validate_destination(self, from_room: int, token: str) -> int:
        """Turn a player's room token into a neighbor of from_room.

        Raises RoomParseError when the token is not a plain non-negative
        integer and NotAdjacentError when no tunnel leads there.
        """
        token = token.strip()
        if not (token.isascii() and token.isdigit()):
            raise RoomParseError(token)

        try:
            dest = int(token)
        except ValueError as e:
            # Too many digits for int() to convert.
            raise RoomParseError(token) from e
        if dest not in self.neighbors(from_room):
            raise NotAdjacentError(from_room, dest)
        return dest

    def describe_room(self, room: int) -> str:
        """Where the player is, what they sense, and where they can go."""
        lines = [f"You are in room #{room}"]

        for hazard, warning in HAZARD_WARNINGS.items():
            if self.is_danger_adjacent(room, hazard):
                lines.append(warning)

        if self.is_wumpus_adjacent(room) is not None:
            lines.append(WUMPUS_WARNING)

        exits = ", ".join(str(n) for n in self.neighbors(room))
        lines.append(f"Exits go to: {exits}")
        return "\n".join(lines)
