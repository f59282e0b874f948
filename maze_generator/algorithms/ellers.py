"""
Eller's algorithm for row-by-row maze generation.

Algorithm:
1. Process rows from top to bottom
2. Give every cell of the row a set id (cells carried down keep theirs)
3. Randomly join adjacent cells of different sets (merge sets)
4. Carve at least one passage down from every set
5. In the last row, join every pair of adjacent cells in different sets

Result: a perfect maze (spanning tree). Passages are only carved between
cells of different sets, which rules out cycles, and the downward step plus
the final row join leave a single set.

Start: (0, 0). Goal: farthest cell from the start by passage distance.
Randomness, in order per row: one join draw per adjacent pair in different
sets (skipped on the last row), then per set (in order of first column) one
draw for the number of downward passages and one draw for their columns.

Reference: Eller (1982), "An Efficient Method for Generating Mazes"
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from maze_generator.core.coordinates import Coordinates
from maze_generator.core.direction import Direction
from maze_generator.utils.exceptions import validate_probability

from .base import BaseMazeGenerator

if TYPE_CHECKING:
    import numpy as np

    from maze_generator.core.grid import Grid

HORIZONTAL_JOIN_CHANCE = 0.5


class EllersGenerator(BaseMazeGenerator):
    """Eller's row-by-row generator."""

    name = "ellers"

    def __init__(self, horizontal_join_chance: float = HORIZONTAL_JOIN_CHANCE):
        """
        Initialize generator.

        Args:
            horizontal_join_chance: Probability of joining two adjacent cells
                of different sets within a row (strictly between 0 and 1)

        Raises:
            ConfigurationError: If the probability is out of range
        """
        validate_probability(horizontal_join_chance, "horizontal_join_chance", component=type(self).__name__)
        self.horizontal_join_chance = float(horizontal_join_chance)

    def _carve(self, grid: Grid, start: Coordinates, rng: np.random.Generator) -> None:
        width, height = grid.size
        row_sets = list(range(width))
        next_set_id = width

        for y in range(height):
            last_row = y == height - 1

            # Step 1: join adjacent cells horizontally (merge sets)
            for x in range(width - 1):
                if row_sets[x] == row_sets[x + 1]:
                    continue
                if last_row or rng.random() < self.horizontal_join_chance:
                    grid.open_passage(Coordinates(x, y), Direction.EAST)
                    old_set = row_sets[x + 1]
                    new_set = row_sets[x]
                    row_sets = [new_set if s == old_set else s for s in row_sets]

            if last_row:
                break

            # Step 2: at least one vertical connection per set
            sets_in_row: dict[int, list[int]] = {}
            for x, set_id in enumerate(row_sets):
                sets_in_row.setdefault(set_id, []).append(x)

            next_row_sets = [-1] * width
            for set_id, columns in sets_in_row.items():
                count = int(rng.integers(1, len(columns) + 1))
                for x in map(int, rng.choice(columns, size=count, replace=False)):
                    grid.open_passage(Coordinates(x, y), Direction.SOUTH)
                    next_row_sets[x] = set_id

            # Unconnected cells of the next row start their own sets
            for x in range(width):
                if next_row_sets[x] == -1:
                    next_row_sets[x] = next_set_id
                    next_set_id += 1

            row_sets = next_row_sets

    def __repr__(self) -> str:
        return f"{type(self).__name__}(horizontal_join_chance={self.horizontal_join_chance})"
