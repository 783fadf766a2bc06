"""The cave layout: a dodecahedron of 20 rooms with 3 tunnels each."""

from collections import deque
from collections.abc import Sequence

from .errors import MazeError

ROOM_COUNT = 20
NEIGHBOR_COUNT = 3

# Room n connects to the three rooms listed at index n.
ADJACENCY: tuple[tuple[int, int, int], ...] = (
    (1, 4, 7),
    (0, 2, 9),
    (1, 3, 11),
    (2, 4, 13),
    (0, 3, 5),
    (4, 6, 14),
    (5, 7, 16),
    (0, 6, 8),
    (7, 9, 17),
    (1, 8, 10),
    (9, 11, 18),
    (2, 10, 12),
    (11, 13, 19),
    (3, 12, 14),
    (5, 13, 15),
    (14, 16, 19),
    (6, 15, 17),
    (8, 16, 18),
    (10, 17, 19),
    (12, 15, 18),
)


def reachable_from(
    start: int, table: Sequence[Sequence[int]] = ADJACENCY,
) -> set[int]:
    """Rooms reachable from start by walking tunnels."""
    seen = {start}
    queue = deque([start])
    while queue:
        room = queue.popleft()
        for neighbor in table[room]:
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return seen


def check_topology(table: Sequence[Sequence[int]] = ADJACENCY) -> None:
    """Raise MazeError unless table is a connected 3-regular cave."""
    if len(table) != ROOM_COUNT:
        raise MazeError(f"expected {ROOM_COUNT} rooms, got {len(table)}")

    for room, neighbors in enumerate(table):
        if len(set(neighbors)) != NEIGHBOR_COUNT or len(neighbors) != NEIGHBOR_COUNT:
            raise MazeError(f"room {room} needs {NEIGHBOR_COUNT} distinct neighbors")
        for neighbor in neighbors:
            if not 0 <= neighbor < ROOM_COUNT:
                raise MazeError(f"room {room} links to unknown room {neighbor}")
            if neighbor == room:
                raise MazeError(f"room {room} links to itself")
            if room not in table[neighbor]:
                raise MazeError(f"tunnel {room}->{neighbor} has no way back")

    if len(reachable_from(0, table)) != ROOM_COUNT:
        raise MazeError("cave is not connected")
