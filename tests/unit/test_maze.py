"""
Unit tests for the Maze entity: accessors, immutability and value semantics.
"""

import pytest

import numpy as np

from maze_generator import RecursiveBacktrackingGenerator
from maze_generator.core import Coordinates, Direction, FieldType, Grid, Maze
from maze_generator.utils.exceptions import ConfigurationError, MazeInvariantError, OutOfBoundsError


def _corridor(width: int) -> Grid:
    """Single-row grid with every cell linked to the next."""
    grid = Grid(width, 1)
    for x in range(width - 1):
        grid.open_passage(Coordinates(x, 0), Direction.EAST)
    return grid


class TestMazeConstruction:
    """Test freezing a grid into a maze."""

    def test_accessors(self):
        maze = Maze(_corridor(3), Coordinates(0, 0), Coordinates(2, 0), algorithm="manual", seed=7)

        assert maze.width == 3
        assert maze.height == 1
        assert maze.size == (3, 1)
        assert maze.start == Coordinates(0, 0)
        assert maze.goal == Coordinates(2, 0)
        assert maze.algorithm == "manual"
        assert maze.seed == 7
        assert maze.num_cells == 3
        assert maze.passage_count == 2

    def test_snapshot_is_independent_of_grid(self):
        grid = Grid(2, 2)
        maze = Maze(grid, Coordinates(0, 0), Coordinates(1, 1))

        grid.open_passage(Coordinates(0, 0), Direction.EAST)

        assert maze.passage_count == 0
        assert not maze.cell_at((0, 0)).has_passage(Direction.EAST)

    def test_start_outside_grid_rejected(self):
        with pytest.raises(MazeInvariantError):
            Maze(Grid(2, 2), Coordinates(2, 0), Coordinates(0, 0))

    def test_asymmetric_passage_rejected(self):
        grid = Grid(2, 1)
        grid.cell_at((0, 0)).passages.add(Direction.EAST)
        with pytest.raises(MazeInvariantError):
            Maze(grid, Coordinates(0, 0), Coordinates(1, 0))

    def test_passage_leaving_grid_rejected(self):
        grid = Grid(2, 1)
        grid.cell_at((0, 0)).passages.add(Direction.NORTH)
        with pytest.raises(MazeInvariantError):
            Maze(grid, Coordinates(0, 0), Coordinates(1, 0))


class TestMazeAccessors:
    """Test read-only field lookups."""

    @pytest.fixture
    def maze(self):
        return RecursiveBacktrackingGenerator().generate(5, 4, seed=42)

    def test_field_types(self, maze):
        assert maze.cell_at(maze.start).field_type == FieldType.START
        assert maze.cell_at(maze.goal).field_type == FieldType.GOAL
        normal = [f for f in maze.fields() if f.coordinates not in (maze.start, maze.goal)]
        assert all(f.field_type == FieldType.NORMAL for f in normal)

    def test_field_is_read_only(self, maze):
        field = maze.cell_at((1, 1))
        with pytest.raises(AttributeError):
            field.passages = frozenset()
        with pytest.raises(AttributeError):
            field.passages.add(Direction.NORTH)

    def test_has_wall_is_inverse_of_has_passage(self, maze):
        for field in maze.fields():
            for direction in Direction:
                assert field.has_wall(direction) != field.has_passage(direction)

    @pytest.mark.parametrize("coordinates", [(-1, 0), (0, -1), (5, 0), (0, 4), (5, 4), (-3, -3), (100, 1)])
    def test_cell_at_out_of_bounds(self, maze, coordinates):
        with pytest.raises(OutOfBoundsError):
            maze.cell_at(coordinates)

    def test_out_of_bounds_is_index_error(self, maze):
        with pytest.raises(IndexError):
            maze.cell_at(Coordinates(5, 0))

    @pytest.mark.parametrize("coordinates", [(1.5, 0), (0, 2.0), (None, 1)])
    def test_cell_at_non_integer(self, maze, coordinates):
        with pytest.raises(TypeError, match="Coordinates must be integers"):
            maze.cell_at(coordinates)
        with pytest.raises(TypeError):
            maze.contains(coordinates)

    def test_fields_cover_grid(self, maze):
        coordinates = [f.coordinates for f in maze.fields()]
        assert len(coordinates) == 20
        assert set(coordinates) == {Coordinates(x, y) for x in range(5) for y in range(4)}

    def test_passages_listed_once(self, maze):
        passages = list(maze.passages())
        assert len(passages) == len(set(passages)) == maze.passage_count
        for passage in passages:
            assert passage.b in maze.neighbors_through_passages(passage.a)
            assert passage.a in maze.neighbors_through_passages(passage.b)

    def test_distances_from_start(self, maze):
        distances = maze.distances_from(maze.start)
        assert distances[maze.start] == 0
        assert distances[maze.goal] == max(distances.values())


class TestMazeValueSemantics:
    """Test equality, hashing and representations."""

    def test_equal_mazes(self):
        a = Maze(_corridor(3), Coordinates(0, 0), Coordinates(2, 0))
        b = Maze(_corridor(3), Coordinates(0, 0), Coordinates(2, 0), algorithm="other")
        assert a == b
        assert hash(a) == hash(b)

    def test_different_goal(self):
        a = Maze(_corridor(3), Coordinates(0, 0), Coordinates(2, 0))
        b = Maze(_corridor(3), Coordinates(0, 0), Coordinates(1, 0))
        assert a != b

    def test_repr_mentions_metadata(self):
        maze = Maze(_corridor(2), Coordinates(0, 0), Coordinates(1, 0), algorithm="manual", seed=3)
        assert "manual" in repr(maze)
        assert "seed=3" in repr(maze)


class TestToArray:
    """Test block array representation."""

    def test_corridor_array(self):
        maze = Maze(_corridor(3), Coordinates(0, 0), Coordinates(2, 0))
        expected = np.array(
            [
                [1, 1, 1, 1, 1, 1, 1],
                [1, 0, 0, 0, 0, 0, 1],
                [1, 1, 1, 1, 1, 1, 1],
            ],
            dtype=np.int32,
        )
        np.testing.assert_array_equal(maze.to_array(), expected)

    @pytest.mark.parametrize("wall_thickness", [1, 2])
    def test_array_shape(self, wall_thickness):
        maze = RecursiveBacktrackingGenerator().generate(6, 4, seed=1)
        array = maze.to_array(wall_thickness=wall_thickness)

        t = wall_thickness
        assert array.shape == (4 * 2 * t + t, 6 * 2 * t + t)
        assert array.dtype == np.int32
        assert np.all((array == 0) | (array == 1))

    def test_open_area_matches_passages(self):
        maze = RecursiveBacktrackingGenerator().generate(6, 4, seed=1)
        array = maze.to_array()
        assert int((array == 0).sum()) == maze.num_cells + maze.passage_count

    @pytest.mark.parametrize("wall_thickness", [0, -2, 1.5, True])
    def test_invalid_wall_thickness(self, wall_thickness):
        maze = RecursiveBacktrackingGenerator().generate(3, 3, seed=1)
        with pytest.raises(ConfigurationError) as exc_info:
            maze.to_array(wall_thickness=wall_thickness)
        assert exc_info.value.parameter_name == "wall_thickness"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
