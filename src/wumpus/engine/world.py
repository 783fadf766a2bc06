"""Data structures for a single cave room.

Rooms are wired once when the maze is built. Tunnels never change and
hazards stay where they were placed; only the Wumpus moves.
"""

from dataclasses import dataclass
from enum import Enum


class Hazard(Enum):
    """Something nasty that can sit in a room."""

    PIT = "pit"
    BAT = "bat"


# Warning shown when a hazard of this kind is one tunnel away.
HAZARD_WARNINGS: dict[Hazard, str] = {
    Hazard.PIT: "You feel a cold wind blowing from a nearby cavern.",
    Hazard.BAT: "You hear a rustling.",
}

WUMPUS_WARNING = "You smell something terrible nearby."


@dataclass
class Room:
    """A room in the cave."""

    number: int
    neighbors: tuple[int, int, int]
    hazard: Hazard | None = None
    has_wumpus: bool = False

    @property
    def is_empty(self) -> bool:
        """No hazard and no Wumpus."""
        return self.hazard is None and not self.has_wumpus
