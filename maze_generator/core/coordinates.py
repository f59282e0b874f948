"""Two-dimensional integer coordinates addressing maze cells."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from .direction import Direction


@dataclass(frozen=True, order=True)
class Coordinates:
    """
    Position of a cell in the maze grid.

    Attributes:
        x: Column index, growing eastwards
        y: Row index, growing southwards
    """

    x: int
    y: int

    def next(self, direction: Direction) -> Coordinates:
        """Return the adjacent coordinates one step in ``direction``."""
        dx, dy = direction.delta
        return Coordinates(self.x + dx, self.y + dy)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    @classmethod
    def of(cls, value: Coordinates | tuple[int, int]) -> Coordinates:
        """Coerce an ``(x, y)`` tuple into Coordinates; Coordinates pass through."""
        if isinstance(value, Coordinates):
            return value
        x, y = value
        if not all(isinstance(v, Integral) and not isinstance(v, bool) for v in (x, y)):
            raise TypeError(f"Coordinates must be integers, got ({x!r}, {y!r})")
        return cls(int(x), int(y))

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Passage(NamedTuple):
    """Undirected passage between two adjacent cells, ``a`` ordered before ``b``."""

    a: Coordinates
    b: Coordinates
