"""
Pydantic configuration for maze generation.

MazeConfig bundles the dimensions, algorithm choice, seed and per-algorithm
options of one generation request, validated on construction and on
assignment.

Examples
--------
>>> from maze_generator.config import MazeConfig
>>> config = MazeConfig(width=20, height=10, algorithm="prims", seed=7)
>>> config.algorithm
<MazeAlgorithm.PRIMS: 'prims'>
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from maze_generator.algorithms.ellers import HORIZONTAL_JOIN_CHANCE
from maze_generator.algorithms.growing_tree import SelectionMethod
from maze_generator.utils.exceptions import MAX_SEED, ConfigurationError
from maze_generator.utils.maze_logging import get_logger

logger = get_logger(__name__)


class MazeAlgorithm(Enum):
    """Available maze generation algorithms."""

    RECURSIVE_BACKTRACKING = "recursive_backtracking"
    GROWING_TREE = "growing_tree"
    PRIMS = "prims"
    ELLERS = "ellers"
    WILSONS = "wilsons"


class MazeConfig(BaseModel):
    """
    Configuration for a single maze generation request.

    Attributes:
        width: Number of columns
        height: Number of rows
        algorithm: Generation algorithm
        seed: Unsigned 64-bit seed; None draws fresh entropy per call
        selection_method: Active-cell selection for the growing tree algorithm
        horizontal_join_chance: Row join probability for Eller's algorithm
    """

    width: int = Field(20, ge=1, strict=True, description="Number of columns in the maze")
    height: int = Field(20, ge=1, strict=True, description="Number of rows in the maze")
    algorithm: MazeAlgorithm = Field(MazeAlgorithm.RECURSIVE_BACKTRACKING, description="Generation algorithm")
    seed: int | None = Field(None, ge=0, le=MAX_SEED, strict=True, description="Seed for reproducible generation")
    selection_method: SelectionMethod = Field(
        SelectionMethod.MIXED, description="Growing tree active-cell selection method"
    )
    horizontal_join_chance: float = Field(
        HORIZONTAL_JOIN_CHANCE, gt=0.0, lt=1.0, description="Eller's horizontal join probability"
    )

    model_config = ConfigDict(validate_assignment=True, frozen=False)

    @model_validator(mode="after")
    def log_ignored_options(self) -> MazeConfig:
        """Flag algorithm options that the selected algorithm ignores."""
        fields_set = self.model_fields_set

        if "selection_method" in fields_set and self.algorithm != MazeAlgorithm.GROWING_TREE:
            logger.debug(f"selection_method is ignored by {self.algorithm.value}")
        if "horizontal_join_chance" in fields_set and self.algorithm != MazeAlgorithm.ELLERS:
            logger.debug(f"horizontal_join_chance is ignored by {self.algorithm.value}")
        return self

    @property
    def num_cells(self) -> int:
        return self.width * self.height


def create_default_config(
    width: int,
    height: int,
    algorithm: MazeAlgorithm | str = MazeAlgorithm.RECURSIVE_BACKTRACKING,
) -> MazeConfig:
    """
    Create a configuration with default options.

    Args:
        width: Number of columns
        height: Number of rows
        algorithm: Algorithm name or enum member

    Returns:
        Validated MazeConfig
    """
    return MazeConfig(width=width, height=height, algorithm=resolve_algorithm(algorithm))


def resolve_algorithm(algorithm: MazeAlgorithm | str) -> MazeAlgorithm:
    """
    Coerce an algorithm name into a MazeAlgorithm.

    Raises:
        ConfigurationError: If the name is not a known algorithm
    """
    try:
        return MazeAlgorithm(algorithm)
    except ValueError:
        raise ConfigurationError(
            parameter_name="algorithm",
            provided_value=algorithm,
            valid_choices=[a.value for a in MazeAlgorithm],
            component="MazeConfig",
        ) from None
