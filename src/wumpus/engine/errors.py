"""Exceptions raised by the game engine."""


class WumpusError(Exception):
    """Base class for all engine errors."""


class MazeError(WumpusError):
    """The cave could not be built consistently.

    Raised for a malformed adjacency table or when an entity has no empty
    room left to go to. Never expected with the stock constants.
    """


class DestinationError(WumpusError, ValueError):
    """A move or shoot target was rejected."""


class RoomParseError(DestinationError):
    """The target token is not a room number."""

    def __init__(self, token: str):
        self.token = token
        shown = token if len(token) <= 20 else token[:17] + "..."
        super().__init__(f"{shown!r} is not a room number")


class NotAdjacentError(DestinationError):
    """The target room is not connected to the current room."""

    def __init__(self, from_room: int, to_room: int):
        self.from_room = from_room
        self.to_room = to_room
        super().__init__("room is not a neighbor")
