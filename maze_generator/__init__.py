"""
maze_generator - interchangeable two-dimensional maze generation algorithms.

Every algorithm implements MazeGeneratorProtocol, so consumption code can
swap strategies freely:

>>> from maze_generator import RecursiveBacktrackingGenerator, PrimsGenerator
>>> for generator in (RecursiveBacktrackingGenerator(), PrimsGenerator()):
...     maze = generator.generate(10, 10, seed=42)
...     field = maze.cell_at((0, 0))
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("maze-generator")  # Matches the name in pyproject.toml
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0-dev"

from .algorithms import (
    EllersGenerator,
    GrowingTreeGenerator,
    PrimsGenerator,
    RecursiveBacktrackingGenerator,
    SelectionMethod,
    WilsonsGenerator,
)
from .config import MazeAlgorithm, MazeConfig, create_default_config
from .core import (
    Coordinates,
    Direction,
    Field,
    FieldType,
    Grid,
    Maze,
    MazeGeneratorProtocol,
    Passage,
    is_maze_generator,
)
from .factory import GeneratorFactory, create_generator, generate_maze
from .utils.exceptions import (
    ConfigurationError,
    InvalidDimensionsError,
    MazeError,
    MazeInvariantError,
    OutOfBoundsError,
)

__all__ = [
    "__version__",
    # Data model
    "Coordinates",
    "Direction",
    "Field",
    "FieldType",
    "Grid",
    "Maze",
    "Passage",
    # Generator abstraction
    "MazeGeneratorProtocol",
    "is_maze_generator",
    # Algorithms
    "EllersGenerator",
    "GrowingTreeGenerator",
    "PrimsGenerator",
    "RecursiveBacktrackingGenerator",
    "SelectionMethod",
    "WilsonsGenerator",
    # Configuration and factory
    "GeneratorFactory",
    "MazeAlgorithm",
    "MazeConfig",
    "create_default_config",
    "create_generator",
    "generate_maze",
    # Errors
    "ConfigurationError",
    "InvalidDimensionsError",
    "MazeError",
    "MazeInvariantError",
    "OutOfBoundsError",
]
