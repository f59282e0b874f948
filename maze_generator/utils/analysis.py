"""
Structural analysis of generated mazes.

A perfect maze must satisfy:
1. Connectivity: all cells reachable from any cell
2. Acyclicity: exactly (n-1) passages for n cells

These helpers inspect a Maze through its read-only accessors only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from maze_generator.core.coordinates import Coordinates
from maze_generator.core.direction import Direction

if TYPE_CHECKING:
    from maze_generator.core.maze import Maze


def count_connected_regions(maze: Maze) -> int:
    """Number of connected components of the passage graph."""
    seen: set[Coordinates] = set()
    regions = 0

    for field in maze.fields():
        if field.coordinates in seen:
            continue
        regions += 1
        stack = [field.coordinates]
        seen.add(field.coordinates)
        while stack:
            current = stack.pop()
            for neighbor in maze.neighbors_through_passages(current):
                if neighbor not in seen:
                    seen.add(neighbor)
                    stack.append(neighbor)

    return regions


def passages_are_symmetric(maze: Maze) -> bool:
    """Check that every passage is recorded on both of its cells."""
    for field in maze.fields():
        for direction in field.passages:
            neighbor = field.coordinates.next(direction)
            if not maze.contains(neighbor):
                return False
            if not maze.cell_at(neighbor).has_passage(direction.opposite()):
                return False
    return True


def find_dead_ends(maze: Maze) -> list[Coordinates]:
    """Cells with exactly one passage, in row-major order."""
    return [field.coordinates for field in maze.fields() if len(field.passages) == 1]


def find_boundary_passages(maze: Maze) -> list[tuple[Coordinates, Direction]]:
    """Passages that point out of the maze; always empty for a consistent maze."""
    return [
        (field.coordinates, direction)
        for field in maze.fields()
        for direction in field.passages
        if not maze.contains(field.coordinates.next(direction))
    ]


def verify_perfect_maze(maze: Maze) -> dict:
    """
    Verify that a maze is perfect (fully connected, no loops).

    Args:
        maze: Maze to verify

    Returns:
        Dictionary with verification results including:
        - is_perfect: Overall validity
        - is_connected: Connectivity check
        - is_no_loops: Acyclicity check
        - is_symmetric: Passage symmetry check
        - visited_cells: Number of cells reachable from the start
        - total_cells: Total number of cells
        - passage_count: Number of passages
        - expected_passages: Expected passages for perfect maze
        - start_goal_connected: Whether the goal is reachable from the start
    """
    distances = maze.distances_from(maze.start)
    total_cells = maze.num_cells
    visited_cells = len(distances)
    passage_count = maze.passage_count
    expected_passages = total_cells - 1

    is_connected = visited_cells == total_cells
    is_no_loops = passage_count == expected_passages
    is_symmetric = passages_are_symmetric(maze)

    return {
        "is_perfect": is_connected and is_no_loops and is_symmetric,
        "is_connected": is_connected,
        "is_no_loops": is_no_loops,
        "is_symmetric": is_symmetric,
        "visited_cells": visited_cells,
        "total_cells": total_cells,
        "passage_count": passage_count,
        "expected_passages": expected_passages,
        "start_goal_connected": maze.goal in distances,
    }
