"""
Utility modules for maze_generator.

- exceptions: error taxonomy and input validation helpers
- maze_logging: logging infrastructure
- analysis: perfect-maze verification (import explicitly:
  ``from maze_generator.utils.analysis import verify_perfect_maze``)
"""

from .exceptions import (
    ConfigurationError,
    InvalidDimensionsError,
    MazeError,
    MazeInvariantError,
    OutOfBoundsError,
)
from .maze_logging import configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "InvalidDimensionsError",
    "MazeError",
    "MazeInvariantError",
    "OutOfBoundsError",
    "configure_logging",
    "get_logger",
]
