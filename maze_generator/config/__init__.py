"""
Configuration for maze generation.

>>> from maze_generator.config import MazeConfig, create_default_config
>>> config = create_default_config(30, 20, algorithm="wilsons")
"""

from .maze_config import MazeAlgorithm, MazeConfig, create_default_config, resolve_algorithm

__all__ = [
    "MazeAlgorithm",
    "MazeConfig",
    "create_default_config",
    "resolve_algorithm",
]
