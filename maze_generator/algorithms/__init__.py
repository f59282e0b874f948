"""
Concrete maze generation algorithms.

All generators implement MazeGeneratorProtocol and produce perfect mazes
(spanning trees) starting at (0, 0), with the goal at the cell farthest from
the start by passage distance.

Implemented Algorithms:
- Recursive Backtracking (DFS): long winding paths
- Growing Tree: configurable selection method, from DFS-like to Prim-like
- Prim's: randomized frontier growth, many short dead ends
- Eller's: row-by-row generation
- Wilson's: loop-erased random walks, unbiased sampling
"""

from .base import BaseMazeGenerator, find_farthest_cell
from .ellers import EllersGenerator
from .growing_tree import GrowingTreeGenerator, SelectionMethod
from .prims import PrimsGenerator
from .recursive_backtracking import RecursiveBacktrackingGenerator
from .wilsons import WilsonsGenerator

__all__ = [
    "BaseMazeGenerator",
    "EllersGenerator",
    "GrowingTreeGenerator",
    "PrimsGenerator",
    "RecursiveBacktrackingGenerator",
    "SelectionMethod",
    "WilsonsGenerator",
    "find_farthest_cell",
]
