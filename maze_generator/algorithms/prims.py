"""
Randomized Prim's maze generator (frontier growth).

The maze grows outwards from the start cell. The frontier holds every
unvisited cell adjacent to the maze; each step moves one random frontier cell
into the maze by connecting it to a random visited neighbor.

Result: a perfect maze (spanning tree). A frontier cell always has at least
one visited neighbor, and it is connected to exactly one of them when it
joins the maze. Mazes have many short dead ends radiating from the start.

Start: (0, 0). Goal: farthest cell from the start by passage distance.
Randomness: per step, one draw for the frontier cell and one for the visited
neighbor it connects to.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import BaseMazeGenerator, choose

if TYPE_CHECKING:
    import numpy as np

    from maze_generator.core.coordinates import Coordinates
    from maze_generator.core.grid import Grid


class PrimsGenerator(BaseMazeGenerator):
    """Randomized Prim's algorithm over the grid graph."""

    name = "prims"

    def _carve(self, grid: Grid, start: Coordinates, rng: np.random.Generator) -> None:
        frontier: list[Coordinates] = []
        in_frontier: set[Coordinates] = set()

        def mark(coordinates: Coordinates) -> None:
            grid.cell_at(coordinates).visited = True
            for _, neighbor in grid.unvisited_neighbors(coordinates):
                if neighbor not in in_frontier:
                    frontier.append(neighbor)
                    in_frontier.add(neighbor)

        mark(start)

        while frontier:
            current = frontier.pop(int(rng.integers(len(frontier))))
            in_frontier.discard(current)

            direction, _ = choose(rng, grid.visited_neighbors(current))
            grid.open_passage(current, direction)
            mark(current)
