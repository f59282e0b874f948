"""Cardinal directions used to address neighboring cells."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np


class Direction(Enum):
    """
    The four cardinal directions.

    Members are declared in canonical order (north, east, south, west); every
    neighbor enumeration in the package follows this order.
    """

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def delta(self) -> tuple[int, int]:
        """(dx, dy) offset of this direction; y grows southwards."""
        return _DELTAS[self]

    def opposite(self) -> Direction:
        """Return the direction pointing back."""
        return _OPPOSITES[self]

    @classmethod
    def all(cls) -> list[Direction]:
        """Return all directions in canonical order."""
        return list(cls)

    @classmethod
    def random_order(cls, rng: np.random.Generator) -> list[Direction]:
        """Return all directions shuffled with the given generator."""
        directions = cls.all()
        return [directions[i] for i in rng.permutation(len(directions))]


_DELTAS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}

_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}
