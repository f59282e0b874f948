"""
Recursive Backtracking (randomized depth-first search) maze generator.

Creates mazes with long, winding passages and few dead ends. The recursion
is unrolled into an explicit stack, so grid size is not limited by the
interpreter's recursion depth.

Result: a perfect maze (spanning tree). Every cell is visited exactly once
and carved into from exactly one other cell, giving width*height - 1
passages and no cycles.

Start: (0, 0). Goal: farthest cell from the start by passage distance.
Randomness: one uniform draw among the unvisited neighbors per carve step.

Reference: Jamis Buck, "Mazes for Programmers" (2015)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import BaseMazeGenerator, choose

if TYPE_CHECKING:
    import numpy as np

    from maze_generator.core.coordinates import Coordinates
    from maze_generator.core.grid import Grid


class RecursiveBacktrackingGenerator(BaseMazeGenerator):
    """
    Randomized depth-first backtracker.

    Algorithm:
    1. Mark the start cell visited and push it on the stack
    2. While the stack is not empty:
       - Look at the cell on top of the stack
       - If it has unvisited neighbors: pick one at random, carve the
         passage, mark it visited and push it
       - Otherwise pop (backtrack)

    Characteristics:
    - Fast: O(n) where n = number of cells
    - Biased toward long corridors
    - High exploration difficulty
    """

    name = "recursive_backtracking"

    def _carve(self, grid: Grid, start: Coordinates, rng: np.random.Generator) -> None:
        stack = [start]
        grid.cell_at(start).visited = True

        while stack:
            current = stack[-1]
            unvisited = grid.unvisited_neighbors(current)

            if unvisited:
                direction, neighbor = choose(rng, unvisited)
                grid.open_passage(current, direction)
                grid.cell_at(neighbor).visited = True
                stack.append(neighbor)
            else:
                stack.pop()
