"""
Shared machinery for the concrete maze generation algorithms.

BaseMazeGenerator implements the generate() contract once: it validates the
input, prepares a call-local random generator, lets the subclass carve a
private Grid, picks the goal and freezes the result into a Maze. Subclasses
only implement ``_carve``.

Goal policy (all algorithms): the cell farthest from the start by passage
distance. Ties go to the cell reached first by a breadth-first search that
expands neighbors in canonical direction order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, ClassVar

import numpy as np

from maze_generator.core.coordinates import Coordinates
from maze_generator.core.direction import Direction
from maze_generator.core.grid import Grid
from maze_generator.core.maze import Maze
from maze_generator.utils.exceptions import MazeError, validate_dimensions, validate_seed
from maze_generator.utils.maze_logging import (
    get_logger,
    log_generation_completion,
    log_generation_start,
    log_validation_error,
)

logger = get_logger(__name__)

START = Coordinates(0, 0)


def draw_seed() -> int:
    """Draw a fresh unsigned 64-bit seed from OS entropy."""
    return int(np.random.SeedSequence().generate_state(1, dtype=np.uint64)[0])


def make_rng(seed: int) -> np.random.Generator:
    """Create the call-local random generator for one generation run."""
    return np.random.default_rng(seed)


def choose(rng: np.random.Generator, items: list[Any]) -> Any:
    """Pick one element of a non-empty list uniformly at random."""
    return items[int(rng.integers(len(items)))]


def find_farthest_cell(grid: Grid, start: Coordinates) -> Coordinates:
    """Breadth-first search through open passages; return the first cell dequeued at maximum distance."""
    distances = {start: 0}
    queue = deque([start])
    farthest = start

    while queue:
        current = queue.popleft()
        if distances[current] > distances[farthest]:
            farthest = current
        cell = grid.cell_at(current)
        for direction in Direction:
            if cell.has_passage(direction):
                neighbor = current.next(direction)
                if neighbor not in distances:
                    distances[neighbor] = distances[current] + 1
                    queue.append(neighbor)

    return farthest


class BaseMazeGenerator(ABC):
    """
    Abstract base for generators satisfying MazeGeneratorProtocol.

    Instances carry only their configuration; all generation state (grid,
    random generator, stacks, frontiers) lives inside a single generate()
    call, so one instance can serve concurrent callers.
    """

    name: ClassVar[str] = "base"

    def generate(self, width: int, height: int, seed: int | None = None) -> Maze:
        """
        Generate a width x height maze.

        Args:
            width: Number of columns (>= 1)
            height: Number of rows (>= 1)
            seed: Unsigned 64-bit seed; None draws a fresh one from entropy

        Returns:
            Fully carved, immutable Maze

        Raises:
            InvalidDimensionsError: If width or height is not an integer >= 1
            ConfigurationError: If seed is not None or an unsigned 64-bit integer
        """
        component = type(self).__name__
        try:
            validate_dimensions(width, height, component=component)
            validate_seed(seed, component=component)
        except MazeError as e:
            log_validation_error(logger, component, str(e).splitlines()[0], e.suggested_action)
            raise

        width, height = int(width), int(height)
        seed = draw_seed() if seed is None else int(seed)

        log_generation_start(logger, component, width, height, seed)

        grid = Grid(width, height)
        self._carve(grid, START, make_rng(seed))

        goal = find_farthest_cell(grid, START)
        maze = Maze(grid, START, goal, algorithm=self.name, seed=seed)

        log_generation_completion(logger, component, width, height, maze.passage_count, goal)
        return maze

    @abstractmethod
    def _carve(self, grid: Grid, start: Coordinates, rng: np.random.Generator) -> None:
        """Carve passages into ``grid``, drawing randomness only from ``rng``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
