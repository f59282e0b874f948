"""
Core maze data model and generator protocol.

- Coordinates / Direction: addressing cells and their neighbors
- Grid / Cell: mutable model carved by generators
- Maze / Field / FieldType: immutable result handed to callers
- MazeGeneratorProtocol: the contract every algorithm implements
"""

from .coordinates import Coordinates, Passage
from .direction import Direction
from .grid import Cell, Grid
from .maze import Field, FieldType, Maze
from .protocol import MazeGeneratorProtocol, is_maze_generator

__all__ = [
    "Cell",
    "Coordinates",
    "Direction",
    "Field",
    "FieldType",
    "Grid",
    "Maze",
    "MazeGeneratorProtocol",
    "Passage",
    "is_maze_generator",
]
