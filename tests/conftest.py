"""Shared test fixtures for Hunt the Wumpus."""

import random
from collections.abc import Sequence

import pytest

from wumpus.engine.maze import Maze
from wumpus.engine.state import Player
from wumpus.engine.world import Hazard

# Hand-placed cave used by most tests. Room 0 has exits 1, 4 and 7.
WUMPUS_ROOM = 9
PIT_ROOMS = (4, 15)
BAT_ROOMS = (7, 18)


class ScriptedRandom:
    """Random source that replays canned draws and fails on surprises.

    indexes feed randrange, floats feed random, picks feed choice (each
    pick must be one of the offered items).
    """

    def __init__(
        self,
        indexes: Sequence[int] = (),
        floats: Sequence[float] = (),
        picks: Sequence[int] = (),
    ):
        self.indexes = list(indexes)
        self.floats = list(floats)
        self.picks = list(picks)

    def randrange(self, n: int) -> int:
        assert self.indexes, "unexpected randrange draw"
        i = self.indexes.pop(0)
        assert 0 <= i < n
        return i

    def random(self) -> float:
        assert self.floats, "unexpected random draw"
        return self.floats.pop(0)

    def choice(self, seq):
        assert self.picks, "unexpected choice draw"
        item = self.picks.pop(0)
        assert item in seq, f"{item} not among {list(seq)}"
        return item

    @property
    def exhausted(self) -> bool:
        return not (self.indexes or self.floats or self.picks)


def build_maze(
    wumpus: int = WUMPUS_ROOM,
    pits: Sequence[int] = PIT_ROOMS,
    bats: Sequence[int] = BAT_ROOMS,
) -> Maze:
    """A wired cave with entities placed by hand."""
    maze = Maze.empty()
    maze.rooms[wumpus].has_wumpus = True
    for n in pits:
        maze.rooms[n].hazard = Hazard.PIT
    for n in bats:
        maze.rooms[n].hazard = Hazard.BAT
    return maze


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def maze() -> Maze:
    return build_maze()


@pytest.fixture
def player() -> Player:
    return Player(room=0)
