"""The random source the engine draws from.

Every operation that needs randomness takes one of these explicitly.
``random.Random`` already provides all three capabilities, so a seeded
instance gives a reproducible game.
"""

import random
from collections.abc import Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def randrange(self, n: int) -> int:
        """Uniform index in [0, n)."""
        ...

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        ...

    def choice(self, seq: Sequence[T]) -> T:
        """One item picked uniformly from a non-empty sequence."""
        ...


def make_random(seed: int | None = None) -> random.Random:
    """Create a random source, seeded when seed is given."""
    return random.Random(seed)
