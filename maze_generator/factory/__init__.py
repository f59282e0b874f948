"""
Maze Generator Factory Module

- GeneratorFactory - Main factory class
- create_generator() - Create a generator by algorithm name
- generate_maze() - Generate a maze straight from a MazeConfig
"""

from .generator_factory import GeneratorFactory, create_generator, generate_maze

__all__ = [
    "GeneratorFactory",
    "create_generator",
    "generate_maze",
]
