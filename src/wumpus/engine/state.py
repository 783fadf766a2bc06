"""Mutable per-game state: the player and the turn machine's mode."""

from dataclasses import dataclass
from enum import Enum

START_ARROWS = 5


class TurnState(Enum):
    """What the controller expects the next input to be."""

    IDLE = "idle"
    AWAITING_MOVE_TARGET = "awaiting_move_target"
    AWAITING_SHOOT_TARGET = "awaiting_shoot_target"
    AWAITING_QUIT_CONFIRMATION = "awaiting_quit_confirmation"
    FINISHED = "finished"


@dataclass
class Player:
    """Where the player stands and what they have left to shoot."""

    room: int
    arrows: int = START_ARROWS
