"""
Wilson's algorithm using loop-erased random walks.

Produces unbiased mazes: every spanning tree of the grid graph is equally
likely to be generated.

Algorithm:
1. Mark the start cell as part of the maze
2. While unvisited cells remain:
   - Pick a random unvisited cell and random-walk until the walk hits the maze
   - Erase loops from the walk as soon as they form
   - Carve the loop-free path into the maze

Result: a perfect maze (spanning tree). Each carved path ends on the
existing tree and contains no repeated cell.

Start: (0, 0). Goal: farthest cell from the start by passage distance.
Randomness: one draw per walk for its starting cell, then one neighbor draw
per walk step.

Characteristics:
- Unbiased: all mazes equally likely
- Slow start on large grids while the tree is small
- More dead ends and junctions than recursive backtracking
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import BaseMazeGenerator, choose

if TYPE_CHECKING:
    import numpy as np

    from maze_generator.core.coordinates import Coordinates
    from maze_generator.core.grid import Grid


class WilsonsGenerator(BaseMazeGenerator):
    """Wilson's uniform spanning tree generator."""

    name = "wilsons"

    def _carve(self, grid: Grid, start: Coordinates, rng: np.random.Generator) -> None:
        # Unvisited cells with O(1) removal; list order stays deterministic
        unvisited = [cell.coordinates for cell in grid.all_cells() if cell.coordinates != start]
        position = {c: i for i, c in enumerate(unvisited)}

        def remove(coordinates: Coordinates) -> None:
            i = position.pop(coordinates)
            last = unvisited.pop()
            if last != coordinates:
                unvisited[i] = last
                position[last] = i

        grid.cell_at(start).visited = True

        while unvisited:
            current = choose(rng, unvisited)
            path = [current]
            on_path = {current: 0}

            while not grid.cell_at(current).visited:
                _, current = choose(rng, grid.neighbors(current))

                if current in on_path:
                    # Erase the loop that just closed
                    cut = on_path[current] + 1
                    for erased in path[cut:]:
                        del on_path[erased]
                    del path[cut:]
                else:
                    on_path[current] = len(path)
                    path.append(current)

            for here, there in zip(path, path[1:]):
                grid.link(here, there)
                grid.cell_at(here).visited = True
                remove(here)
