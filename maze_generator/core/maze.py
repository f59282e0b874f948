"""
Maze entity returned by every generator.

A Maze is a frozen snapshot of a carved Grid plus the designated start and
goal cells and the generation metadata (algorithm name and seed). Fields are
handed out as read-only views; nothing on a Maze mutates it.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import TYPE_CHECKING

import numpy as np

from maze_generator.utils.exceptions import ConfigurationError, MazeInvariantError, OutOfBoundsError

from .coordinates import Coordinates, Passage
from .direction import Direction

if TYPE_CHECKING:
    from collections.abc import Iterator

    from numpy.typing import NDArray

    from .grid import Grid


class FieldType(Enum):
    """Role a field plays in the maze."""

    START = "start"
    GOAL = "goal"
    NORMAL = "normal"


@dataclass(frozen=True)
class Field:
    """
    Read-only view of one maze position.

    Attributes:
        coordinates: Where the field lies in the maze
        passages: Directions with an open passage to the neighbor
        field_type: Role of this field (start, goal or normal)
    """

    coordinates: Coordinates
    passages: frozenset[Direction]
    field_type: FieldType = FieldType.NORMAL

    def has_passage(self, direction: Direction) -> bool:
        """Whether a passage leads from this field to the neighbor in ``direction``."""
        return direction in self.passages

    def has_wall(self, direction: Direction) -> bool:
        return direction not in self.passages


class Maze:
    """
    A rectangular collection of fields with passages between them.

    Use one of the generators in ``maze_generator.algorithms`` to create an
    instance. Every coordinate in [0, width) x [0, height) maps to exactly one
    field, and passages are symmetric: a passage from A towards D is also a
    passage from A's neighbor towards the opposite of D.
    """

    def __init__(
        self,
        grid: Grid,
        start: Coordinates,
        goal: Coordinates,
        algorithm: str = "unknown",
        seed: int | None = None,
    ):
        """
        Freeze a carved grid into a Maze.

        Args:
            grid: Fully carved grid (copied, never referenced afterwards)
            start: Start coordinates
            goal: Goal coordinates
            algorithm: Name of the generating algorithm
            seed: Seed that reproduces this maze

        Raises:
            MazeInvariantError: If start/goal lie outside the grid or passages
                are not symmetric
        """
        self._width = grid.width
        self._height = grid.height
        self._start = start
        self._goal = goal
        self._algorithm = algorithm
        self._seed = seed
        self._passages: tuple[tuple[frozenset[Direction], ...], ...] = tuple(
            tuple(frozenset(cell.passages) for cell in row) for row in grid.cells
        )

        for name, coordinates in (("start", start), ("goal", goal)):
            if not self.contains(coordinates):
                raise MazeInvariantError(f"{name} {coordinates} lies outside the {self._width}x{self._height} maze")

        self._check_symmetry()

    def _check_symmetry(self) -> None:
        for y, row in enumerate(self._passages):
            for x, passages in enumerate(row):
                here = Coordinates(x, y)
                for direction in passages:
                    there = here.next(direction)
                    if not self.contains(there):
                        raise MazeInvariantError(f"Passage {direction.value} from {here} leaves the maze")
                    if direction.opposite() not in self._passages[there.y][there.x]:
                        raise MazeInvariantError(f"Passage {direction.value} from {here} is not mirrored at {there}")

    # =========================================================================
    # Read-only accessors
    # =========================================================================

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        """How large the maze is in (width, height) format."""
        return (self._width, self._height)

    @property
    def start(self) -> Coordinates:
        return self._start

    @property
    def goal(self) -> Coordinates:
        return self._goal

    @property
    def algorithm(self) -> str:
        """Name of the algorithm that generated this maze."""
        return self._algorithm

    @property
    def seed(self) -> int | None:
        """Seed that reproduces this maze with the same algorithm."""
        return self._seed

    @property
    def num_cells(self) -> int:
        return self._width * self._height

    @property
    def passage_count(self) -> int:
        """Number of undirected passages."""
        return sum(1 for _ in self.passages())

    def contains(self, coordinates: Coordinates | tuple[int, int]) -> bool:
        x, y = Coordinates.of(coordinates)
        return 0 <= x < self._width and 0 <= y < self._height

    def cell_at(self, coordinates: Coordinates | tuple[int, int]) -> Field:
        """
        Retrieve the field located at ``coordinates``.

        Raises:
            OutOfBoundsError: If the coordinates lie outside the maze
        """
        coordinates = Coordinates.of(coordinates)
        if not self.contains(coordinates):
            raise OutOfBoundsError(coordinates, self._width, self._height, component="Maze")

        if coordinates == self._start:
            field_type = FieldType.START
        elif coordinates == self._goal:
            field_type = FieldType.GOAL
        else:
            field_type = FieldType.NORMAL

        return Field(coordinates, self._passages[coordinates.y][coordinates.x], field_type)

    def fields(self) -> Iterator[Field]:
        """Iterate over all fields in row-major order."""
        for y in range(self._height):
            for x in range(self._width):
                yield self.cell_at(Coordinates(x, y))

    def passages(self) -> Iterator[Passage]:
        """Iterate over every undirected passage exactly once."""
        for y, row in enumerate(self._passages):
            for x, passages in enumerate(row):
                here = Coordinates(x, y)
                for direction in (Direction.EAST, Direction.SOUTH):
                    if direction in passages:
                        yield Passage(here, here.next(direction))

    def neighbors_through_passages(self, coordinates: Coordinates | tuple[int, int]) -> list[Coordinates]:
        """Coordinates reachable in one step from ``coordinates``, canonical direction order."""
        field = self.cell_at(coordinates)
        return [field.coordinates.next(d) for d in Direction if field.has_passage(d)]

    def distances_from(self, origin: Coordinates | tuple[int, int]) -> dict[Coordinates, int]:
        """Passage-graph distance from ``origin`` to every reachable cell (breadth-first)."""
        origin = self.cell_at(origin).coordinates
        distances = {origin: 0}
        queue = deque([origin])
        while queue:
            current = queue.popleft()
            for neighbor in self.neighbors_through_passages(current):
                if neighbor not in distances:
                    distances[neighbor] = distances[current] + 1
                    queue.append(neighbor)
        return distances

    def to_array(self, wall_thickness: int = 1) -> NDArray[np.int32]:
        """
        Convert maze to a block array representation.

        Each cell occupies a ``wall_thickness`` square, separated and surrounded
        by walls of the same thickness.

        Args:
            wall_thickness: Thickness of walls in array elements

        Returns:
            Array of shape (height * 2t + t, width * 2t + t) where 1 = wall, 0 = passage

        Raises:
            ConfigurationError: If wall_thickness is not an integer >= 1
        """
        if isinstance(wall_thickness, bool) or not isinstance(wall_thickness, Integral):
            raise ConfigurationError("wall_thickness", wall_thickness, expected_type=int, component="Maze")
        if wall_thickness < 1:
            raise ConfigurationError(
                "wall_thickness", wall_thickness, valid_range=(1, float("inf")), component="Maze"
            )

        t = int(wall_thickness)
        stride = 2 * t
        array = np.ones((self._height * stride + t, self._width * stride + t), dtype=np.int32)

        for y, row in enumerate(self._passages):
            for x, passages in enumerate(row):
                r = y * stride + t
                c = x * stride + t
                array[r : r + t, c : c + t] = 0

                if Direction.EAST in passages:
                    array[r : r + t, c + t : c + 2 * t] = 0
                if Direction.SOUTH in passages:
                    array[r + t : r + 2 * t, c : c + t] = 0

        return array

    # =========================================================================
    # Value semantics
    # =========================================================================

    def __eq__(self, other):
        if not isinstance(other, Maze):
            return NotImplemented
        return (
            self.size == other.size
            and self._start == other._start
            and self._goal == other._goal
            and self._passages == other._passages
        )

    def __hash__(self):
        return hash((self.size, self._start, self._goal, self._passages))

    def __repr__(self) -> str:
        return (
            f"Maze(width={self._width}, height={self._height}, start={self._start}, "
            f"goal={self._goal}, algorithm={self._algorithm!r}, seed={self._seed})"
        )
