"""
Unit tests shared by every maze generation algorithm.

Tests the generator contract for correctness, reproducibility and perfect
maze properties (connectivity, acyclicity, symmetric passages).
"""

from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from maze_generator import (
    ConfigurationError,
    Coordinates,
    InvalidDimensionsError,
    MazeGeneratorProtocol,
    is_maze_generator,
)
from maze_generator.utils.analysis import count_connected_regions, passages_are_symmetric, verify_perfect_maze

SIZES = [(1, 1), (1, 7), (7, 1), (2, 2), (5, 5), (10, 15), (3, 20)]
SEEDS = [0, 1, 42, 2**63, 2**64 - 1]


class TestGeneratorContract:
    """Test the protocol-level behavior of every generator."""

    def test_satisfies_protocol(self, generator):
        assert isinstance(generator, MazeGeneratorProtocol)
        assert is_maze_generator(generator)
        assert isinstance(generator.name, str)

    @pytest.mark.parametrize(("width", "height"), [(0, 5), (5, 0), (0, 0), (-1, 3), (3, -4)])
    def test_invalid_dimensions(self, generator, width, height):
        with pytest.raises(InvalidDimensionsError) as exc_info:
            generator.generate(width, height, seed=1)
        assert exc_info.value.error_code == "INVALID_DIMENSIONS"

    @pytest.mark.parametrize(("width", "height"), [(2.5, 3), (3, "4"), (True, 3), (None, 2)])
    def test_non_integer_dimensions(self, generator, width, height):
        with pytest.raises(InvalidDimensionsError):
            generator.generate(width, height)

    @pytest.mark.parametrize("seed", [-1, 2**64, 1.5, "42"])
    def test_invalid_seed(self, generator, seed):
        with pytest.raises(ConfigurationError):
            generator.generate(3, 3, seed=seed)

    def test_metadata(self, generator):
        maze = generator.generate(4, 3, seed=9)
        assert maze.algorithm == generator.name
        assert maze.seed == 9
        assert maze.size == (4, 3)

    def test_numpy_integer_arguments(self, generator):
        shape = np.zeros((3, 5)).shape
        maze = generator.generate(np.int64(shape[1]), shape[0], seed=np.uint64(11))

        assert maze == generator.generate(5, 3, seed=11)
        assert maze.size == (5, 3)
        assert type(maze.width) is int
        assert type(maze.seed) is int
        assert maze.seed == 11

    @pytest.mark.parametrize("seed", [np.uint64(2**64 - 1), np.int32(0)])
    def test_numpy_integer_seed_bounds(self, generator, seed):
        assert generator.generate(2, 2, seed=seed).seed == int(seed)

    def test_numpy_negative_seed_rejected(self, generator):
        with pytest.raises(ConfigurationError):
            generator.generate(3, 3, seed=np.int64(-1))

    def test_numpy_bool_dimension_rejected(self, generator):
        with pytest.raises(InvalidDimensionsError):
            generator.generate(np.bool_(True), 3)


class TestDeterminism:
    """Test that generation is reproducible per seed."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_same_seed_same_maze(self, generator, seed):
        first = generator.generate(8, 6, seed=seed)
        second = generator.generate(8, 6, seed=seed)

        assert first == second
        assert list(first.fields()) == list(second.fields())

    def test_independent_instances_agree(self, generator):
        other = type(generator)(**_options(generator))
        assert generator.generate(9, 9, seed=123) == other.generate(9, 9, seed=123)

    def test_unseeded_maze_records_reproducible_seed(self, generator):
        maze = generator.generate(7, 5)
        assert maze.seed is not None
        assert 0 <= maze.seed < 2**64
        assert generator.generate(7, 5, seed=maze.seed) == maze

    def test_different_seeds_vary(self, generator):
        mazes = {generator.generate(10, 10, seed=seed) for seed in range(10)}
        assert len(mazes) > 1

    def test_shared_instance_across_threads(self, generator):
        """One generator instance serves concurrent callers without cross-talk."""
        seeds = list(range(32))
        expected = [generator.generate(12, 9, seed=seed) for seed in seeds]

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda seed: generator.generate(12, 9, seed=seed), seeds))

        assert results == expected
        assert [maze.seed for maze in results] == seeds


class TestPerfectMaze:
    """Test perfect maze properties of the generated passage graph."""

    @pytest.mark.parametrize(("width", "height"), SIZES)
    @pytest.mark.parametrize("seed", [0, 42, 2**64 - 1])
    def test_maze_is_perfect(self, generator, width, height, seed):
        maze = generator.generate(width, height, seed=seed)
        verification = verify_perfect_maze(maze)

        assert verification["is_perfect"], f"Maze is not perfect: {verification}"
        assert verification["total_cells"] == width * height
        assert verification["passage_count"] == width * height - 1

    def test_single_region(self, generator):
        maze = generator.generate(12, 9, seed=5)
        assert count_connected_regions(maze) == 1

    def test_symmetric_passages(self, generator):
        maze = generator.generate(12, 9, seed=5)
        assert passages_are_symmetric(maze)

    def test_field_count(self, generator):
        maze = generator.generate(6, 11, seed=5)
        assert sum(1 for _ in maze.fields()) == 66


class TestStartAndGoal:
    """Test start/goal selection policy."""

    @pytest.mark.parametrize(("width", "height"), SIZES[1:])
    def test_start_differs_from_goal(self, generator, width, height):
        maze = generator.generate(width, height, seed=3)
        assert maze.start == Coordinates(0, 0)
        assert maze.goal != maze.start

    def test_goal_is_farthest_cell(self, generator):
        maze = generator.generate(10, 8, seed=17)
        distances = maze.distances_from(maze.start)
        assert distances[maze.goal] == max(distances.values())

    def test_corridor_goal_is_far_end(self, generator):
        assert generator.generate(6, 1, seed=2).goal == Coordinates(5, 0)
        assert generator.generate(1, 6, seed=2).goal == Coordinates(0, 5)

    def test_single_cell(self, generator):
        maze = generator.generate(1, 1, seed=8)
        assert maze.start == maze.goal == Coordinates(0, 0)
        assert maze.passage_count == 0
        assert maze.cell_at((0, 0)).passages == frozenset()


def _options(generator):
    """Constructor options to rebuild an equivalent generator."""
    if hasattr(generator, "selection_method"):
        return {"selection_method": generator.selection_method}
    if hasattr(generator, "horizontal_join_chance"):
        return {"horizontal_join_chance": generator.horizontal_join_chance}
    return {}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
