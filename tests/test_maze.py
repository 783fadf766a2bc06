"""Tests for maze construction and room queries."""

import random

import pytest

from wumpus.engine.errors import (
    DestinationError,
    MazeError,
    NotAdjacentError,
    RoomParseError,
)
from wumpus.engine.maze import BATS, PITS, Maze
from wumpus.engine.topology import ROOM_COUNT
from wumpus.engine.world import Hazard

from conftest import build_maze


@pytest.mark.parametrize("seed", range(200))
def test_generate_places_everything_once(seed: int):
    """One Wumpus, two pits, two bats, all in different rooms."""
    maze, wumpus_room = Maze.generate(random.Random(seed))

    wumpus_rooms = [r.number for r in maze.rooms if r.has_wumpus]
    pits = maze.rooms_with(Hazard.PIT)
    bats = maze.rooms_with(Hazard.BAT)

    assert wumpus_rooms == [wumpus_room]
    assert len(pits) == PITS
    assert len(bats) == BATS
    assert len({wumpus_room, *pits, *bats}) == 5
    assert len(maze.empty_rooms()) == ROOM_COUNT - 5


def test_generate_wires_rooms_from_topology(rng):
    maze, _ = Maze.generate(rng)
    assert [r.number for r in maze.rooms] == list(range(ROOM_COUNT))
    assert maze.neighbors(0) == (1, 4, 7)
    assert maze.neighbors(19) == (12, 15, 18)


def test_generate_draws_in_placement_order(scripted):
    """Wumpus first, then pits, then bats, each from the rooms still empty."""
    source = scripted(indexes=[0, 0, 0, 0, 0])
    maze, wumpus_room = Maze.generate(source)

    assert wumpus_room == 0
    assert maze.rooms_with(Hazard.PIT) == [1, 2]
    assert maze.rooms_with(Hazard.BAT) == [3, 4]
    assert source.exhausted


def test_generate_indexes_shrinking_pool(scripted):
    source = scripted(indexes=[19, 18, 17, 16, 15])
    maze, wumpus_room = Maze.generate(source)

    assert wumpus_room == 19
    assert maze.rooms_with(Hazard.PIT) == [17, 18]
    assert maze.rooms_with(Hazard.BAT) == [15, 16]


def test_generate_is_reproducible():
    first, _ = Maze.generate(random.Random(7))
    second, _ = Maze.generate(random.Random(7))
    assert first.rooms == second.rooms


def test_random_empty_room_skips_occupied(maze, rng):
    occupied = {9, 4, 15, 7, 18}
    for _ in range(200):
        assert maze.random_empty_room(rng) not in occupied


def test_random_empty_room_indexes_empty_rooms(maze, scripted):
    # Empty rooms in ascending order: 0 1 2 3 5 6 8 10 ...
    assert maze.random_empty_room(scripted(indexes=[4])) == 5
    assert maze.random_empty_room(scripted(indexes=[7])) == 10


def test_random_empty_room_exhausted():
    maze = Maze.empty()
    for room in maze.rooms:
        room.hazard = Hazard.PIT
    with pytest.raises(MazeError, match="no empty room"):
        maze.random_empty_room(random.Random(0))


def test_random_empty_neighbor_only_offers_empty_rooms(maze, scripted):
    # Room 0 leads to 1 (empty), 4 (pit) and 7 (bats).
    assert maze.random_empty_neighbor(0, scripted(picks=[1])) == 1


def test_random_empty_neighbor_skips_wumpus(maze, rng):
    # Room 1 leads to 0, 2 and the Wumpus in 9.
    picked = {maze.random_empty_neighbor(1, rng) for _ in range(100)}
    assert picked == {0, 2}


def test_random_empty_neighbor_none_when_boxed_in(scripted):
    maze = build_maze(wumpus=9, pits=(1, 8), bats=(10, 18))
    source = scripted()
    assert maze.random_empty_neighbor(9, source) is None
    assert source.exhausted


def test_is_danger_adjacent(maze):
    assert maze.is_danger_adjacent(0, Hazard.PIT)
    assert maze.is_danger_adjacent(0, Hazard.BAT)
    assert not maze.is_danger_adjacent(2, Hazard.PIT)
    assert not maze.is_danger_adjacent(2, Hazard.BAT)
    # Standing in a pit room does not count as being next to one.
    assert not maze.is_danger_adjacent(4, Hazard.PIT)


def test_is_wumpus_adjacent(maze):
    assert maze.is_wumpus_adjacent(1) == 9
    assert maze.is_wumpus_adjacent(10) == 9
    assert maze.is_wumpus_adjacent(0) is None
    assert maze.is_wumpus_adjacent(9) is None


def test_move_wumpus(maze):
    maze.move_wumpus(8)
    assert maze.wumpus_room == 8
    assert not maze.rooms[9].has_wumpus
    assert [r.number for r in maze.rooms if r.has_wumpus] == [8]


def test_wumpus_room_missing():
    with pytest.raises(MazeError):
        Maze.empty().wumpus_room


@pytest.mark.parametrize("token,expected", [("1", 1), ("4", 4), ("7", 7), (" 7 ", 7), ("007", 7)])
def test_validate_destination_accepts_neighbors(maze, token: str, expected: int):
    assert maze.validate_destination(0, token) == expected


@pytest.mark.parametrize("token", ["", "abc", "-1", "+4", "4.0", "1 4", "four", "٤"])
def test_validate_destination_rejects_non_numbers(maze, token: str):
    with pytest.raises(RoomParseError):
        maze.validate_destination(0, token)


def test_validate_destination_rejects_huge_numbers(maze):
    """Numbers too long for int() are refused like any other bad token."""
    with pytest.raises(RoomParseError, match="is not a room number"):
        maze.validate_destination(0, "9" * 5000)


@pytest.mark.parametrize("room", [r for r in range(40) if r not in (1, 4, 7)])
def test_validate_destination_rejects_non_neighbors(maze, room: int):
    """Every other number, the current room included, is refused."""
    with pytest.raises(NotAdjacentError, match="not a neighbor"):
        maze.validate_destination(0, str(room))


def test_destination_errors_are_value_errors(maze):
    with pytest.raises(ValueError):
        maze.validate_destination(0, "99")
    with pytest.raises(DestinationError):
        maze.validate_destination(0, "x")


def test_describe_room_with_warnings(maze):
    assert maze.describe_room(0) == (
        "You are in room #0\n"
        "You feel a cold wind blowing from a nearby cavern.\n"
        "You hear a rustling.\n"
        "Exits go to: 1, 4, 7"
    )


def test_describe_room_smells_wumpus(maze):
    assert maze.describe_room(10) == (
        "You are in room #10\n"
        "You hear a rustling.\n"
        "You smell something terrible nearby.\n"
        "Exits go to: 9, 11, 18"
    )


def test_describe_quiet_room(maze):
    assert maze.describe_room(2) == "You are in room #2\nExits go to: 1, 3, 11"
