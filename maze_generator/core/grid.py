"""
Grid model used while carving a maze.

A Grid owns one mutable Cell per coordinate of a width x height rectangle.
Generators carve passages into a private Grid; the finished Grid is then
frozen into a Maze, so no Cell is ever shared with a caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from maze_generator.utils.exceptions import MazeInvariantError, OutOfBoundsError

from .coordinates import Coordinates
from .direction import Direction

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(eq=False)
class Cell:
    """
    Represents a cell in the maze grid.

    Attributes:
        coordinates: Position of the cell
        passages: Directions with an open passage to the neighbor
        visited: Temporary flag for generation algorithms
    """

    coordinates: Coordinates
    passages: set[Direction] = field(default_factory=set)
    visited: bool = False

    def has_passage(self, direction: Direction) -> bool:
        return direction in self.passages

    def is_untouched(self) -> bool:
        """True while no passage has been carved into this cell."""
        return not self.passages


class Grid:
    """Grid of cells for maze generation."""

    def __init__(self, width: int, height: int):
        """
        Initialize grid.

        Args:
            width: Number of columns
            height: Number of rows
        """
        self.width = width
        self.height = height
        self.cells: list[list[Cell]] = [
            [Cell(Coordinates(x, y)) for x in range(width)] for y in range(height)
        ]

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def contains(self, coordinates: Coordinates | tuple[int, int]) -> bool:
        coordinates = Coordinates.of(coordinates)
        return 0 <= coordinates.x < self.width and 0 <= coordinates.y < self.height

    def cell_at(self, coordinates: Coordinates | tuple[int, int]) -> Cell:
        """
        Get cell at position.

        Raises:
            OutOfBoundsError: If the coordinates lie outside the grid
        """
        coordinates = Coordinates.of(coordinates)
        if not self.contains(coordinates):
            raise OutOfBoundsError(coordinates, self.width, self.height, component="Grid")
        return self.cells[coordinates.y][coordinates.x]

    def neighbors(self, coordinates: Coordinates | tuple[int, int]) -> list[tuple[Direction, Coordinates]]:
        """In-bounds neighbors of ``coordinates`` in canonical direction order."""
        coordinates = Coordinates.of(coordinates)
        result = []
        for direction in Direction:
            neighbor = coordinates.next(direction)
            if self.contains(neighbor):
                result.append((direction, neighbor))
        return result

    def unvisited_neighbors(self, coordinates: Coordinates | tuple[int, int]) -> list[tuple[Direction, Coordinates]]:
        return [(d, c) for d, c in self.neighbors(coordinates) if not self.cell_at(c).visited]

    def visited_neighbors(self, coordinates: Coordinates | tuple[int, int]) -> list[tuple[Direction, Coordinates]]:
        return [(d, c) for d, c in self.neighbors(coordinates) if self.cell_at(c).visited]

    def open_passage(self, coordinates: Coordinates | tuple[int, int], direction: Direction) -> Coordinates:
        """
        Carve a passage from ``coordinates`` towards ``direction`` on both cells.

        Generators check bounds before carving, so an out-of-bounds endpoint
        is a generator bug and raises MazeInvariantError.

        Returns:
            Coordinates of the neighbor the passage leads to
        """
        coordinates = Coordinates.of(coordinates)
        neighbor = coordinates.next(direction)
        if not (self.contains(coordinates) and self.contains(neighbor)):
            raise MazeInvariantError(
                f"Cannot carve {direction.value} from {coordinates}: passage leaves the "
                f"{self.width}x{self.height} grid"
            )

        self.cells[coordinates.y][coordinates.x].passages.add(direction)
        self.cells[neighbor.y][neighbor.x].passages.add(direction.opposite())
        return neighbor

    def link(self, a: Coordinates | tuple[int, int], b: Coordinates | tuple[int, int]) -> None:
        """Carve a passage between two adjacent coordinates."""
        a, b = Coordinates.of(a), Coordinates.of(b)
        for direction in Direction:
            if a.next(direction) == b:
                self.open_passage(a, direction)
                return
        raise MazeInvariantError(f"Cannot link {a} and {b}: cells are not adjacent")

    def all_cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in self.cells:
            yield from row

    def passage_count(self) -> int:
        """Number of undirected passages (each counted once)."""
        return sum(
            cell.has_passage(Direction.EAST) + cell.has_passage(Direction.SOUTH) for cell in self.all_cells()
        )

    def reset_visited(self) -> None:
        """Reset visited flags for all cells."""
        for cell in self.all_cells():
            cell.visited = False
