"""
Maze Generator Factory

Creates generators by algorithm name or from a MazeConfig, so callers can
pick the generation strategy from data instead of importing a concrete class.

>>> from maze_generator.config import MazeConfig
>>> from maze_generator.factory import create_generator, generate_maze
>>> generator = create_generator("growing_tree", selection_method="newest")
>>> maze = generator.generate(10, 10, seed=42)
>>> maze = generate_maze(MazeConfig(width=10, height=10, algorithm="ellers", seed=42))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from maze_generator.algorithms import (
    EllersGenerator,
    GrowingTreeGenerator,
    PrimsGenerator,
    RecursiveBacktrackingGenerator,
    WilsonsGenerator,
)
from maze_generator.config.maze_config import MazeAlgorithm, MazeConfig, resolve_algorithm
from maze_generator.utils.exceptions import ConfigurationError

if TYPE_CHECKING:
    from maze_generator.core.maze import Maze
    from maze_generator.core.protocol import MazeGeneratorProtocol


class GeneratorFactory:
    """Factory for creating maze generators."""

    _registry: dict[MazeAlgorithm, type] = {
        MazeAlgorithm.RECURSIVE_BACKTRACKING: RecursiveBacktrackingGenerator,
        MazeAlgorithm.GROWING_TREE: GrowingTreeGenerator,
        MazeAlgorithm.PRIMS: PrimsGenerator,
        MazeAlgorithm.ELLERS: EllersGenerator,
        MazeAlgorithm.WILSONS: WilsonsGenerator,
    }

    # Keyword options each algorithm accepts
    _options: dict[MazeAlgorithm, tuple[str, ...]] = {
        MazeAlgorithm.GROWING_TREE: ("selection_method",),
        MazeAlgorithm.ELLERS: ("horizontal_join_chance",),
    }

    @staticmethod
    def create_generator(algorithm: MazeAlgorithm | str, **options: Any) -> MazeGeneratorProtocol:
        """
        Create a generator.

        Args:
            algorithm: Algorithm name or enum member
            **options: Algorithm-specific options (``selection_method`` for
                growing tree, ``horizontal_join_chance`` for Eller's)

        Returns:
            Generator instance

        Raises:
            ConfigurationError: If the algorithm is unknown or an option does
                not apply to it
        """
        algorithm = resolve_algorithm(algorithm)
        accepted = GeneratorFactory._options.get(algorithm, ())

        for option, value in options.items():
            if option not in accepted:
                raise ConfigurationError(
                    parameter_name=option,
                    provided_value=value,
                    valid_choices=list(accepted) or None,
                    component=f"GeneratorFactory[{algorithm.value}]",
                )

        return GeneratorFactory._registry[algorithm](**options)

    @staticmethod
    def from_config(config: MazeConfig) -> MazeGeneratorProtocol:
        """Create the generator described by ``config``."""
        options: dict[str, Any] = {}
        if config.algorithm == MazeAlgorithm.GROWING_TREE:
            options["selection_method"] = config.selection_method
        elif config.algorithm == MazeAlgorithm.ELLERS:
            options["horizontal_join_chance"] = config.horizontal_join_chance
        return GeneratorFactory.create_generator(config.algorithm, **options)

    @staticmethod
    def available_algorithms() -> list[str]:
        return [algorithm.value for algorithm in GeneratorFactory._registry]


def create_generator(algorithm: MazeAlgorithm | str = MazeAlgorithm.RECURSIVE_BACKTRACKING, **options: Any):
    """Convenience function for GeneratorFactory.create_generator()."""
    return GeneratorFactory.create_generator(algorithm, **options)


def generate_maze(config: MazeConfig) -> Maze:
    """
    High-level function to generate a maze from a configuration.

    Args:
        config: Validated maze configuration

    Returns:
        Generated maze

    Example:
        >>> maze = generate_maze(MazeConfig(width=20, height=20, seed=42))
        >>> maze.size
        (20, 20)
    """
    generator = GeneratorFactory.from_config(config)
    return generator.generate(config.width, config.height, seed=config.seed)
