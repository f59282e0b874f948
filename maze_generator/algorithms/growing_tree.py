"""
Growing Tree maze generator - generalized framework for maze generation.

A flexible algorithm whose character depends on how the next cell is taken
from the active list:

- NEWEST: always the most recent cell (behaves like recursive backtracking)
- OLDEST: always the oldest cell (long straight corridors from the start)
- RANDOM: a uniformly random cell (behaves like simplified Prim's)
- MIXED: 50% newest, 50% random (balanced characteristics)

Result: a perfect maze (spanning tree). A cell enters the active list only
when it is carved into from an already visited cell, so each cell gains
exactly one parent passage.

Start: (0, 0). Goal: farthest cell from the start by passage distance.
Randomness: the selection draw (RANDOM and MIXED only; MIXED draws a coin
and then, on tails, an index) followed by one neighbor draw per carve step.

Reference: Jamis Buck, "Mazes for Programmers" (2015)
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from maze_generator.utils.exceptions import ConfigurationError

from .base import BaseMazeGenerator, choose

if TYPE_CHECKING:
    import numpy as np

    from maze_generator.core.coordinates import Coordinates
    from maze_generator.core.grid import Grid

MIXED_NEWEST_PROBABILITY = 0.5


class SelectionMethod(Enum):
    """How the growing tree picks the next active cell."""

    NEWEST = "newest"
    OLDEST = "oldest"
    RANDOM = "random"
    MIXED = "mixed"


class GrowingTreeGenerator(BaseMazeGenerator):
    """Growing tree generator with a configurable selection method."""

    name = "growing_tree"

    def __init__(self, selection_method: SelectionMethod | str = SelectionMethod.MIXED):
        """
        Initialize generator.

        Args:
            selection_method: Strategy for picking the next active cell

        Raises:
            ConfigurationError: If the selection method is unknown
        """
        try:
            self.selection_method = SelectionMethod(selection_method)
        except ValueError:
            raise ConfigurationError(
                parameter_name="selection_method",
                provided_value=selection_method,
                valid_choices=[m.value for m in SelectionMethod],
                component=type(self).__name__,
            ) from None

    def _select_index(self, active: list[Coordinates], rng: np.random.Generator) -> int:
        method = self.selection_method
        if method == SelectionMethod.MIXED:
            method = SelectionMethod.NEWEST if rng.random() < MIXED_NEWEST_PROBABILITY else SelectionMethod.RANDOM

        if method == SelectionMethod.NEWEST:
            return len(active) - 1
        elif method == SelectionMethod.OLDEST:
            return 0
        else:
            return int(rng.integers(len(active)))

    def _carve(self, grid: Grid, start: Coordinates, rng: np.random.Generator) -> None:
        active = [start]
        grid.cell_at(start).visited = True

        while active:
            index = self._select_index(active, rng)
            current = active[index]
            unvisited = grid.unvisited_neighbors(current)

            if unvisited:
                direction, neighbor = choose(rng, unvisited)
                grid.open_passage(current, direction)
                grid.cell_at(neighbor).visited = True
                active.append(neighbor)
            else:
                active.pop(index)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(selection_method={self.selection_method.value!r})"
