"""
Generator protocol shared by every maze generation algorithm.

Callers hold "something that can generate" rather than a concrete algorithm
class, so one algorithm can be swapped for another without touching the code
that consumes the resulting Maze.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .maze import Maze


@runtime_checkable
class MazeGeneratorProtocol(Protocol):
    """
    Protocol that all maze generators must satisfy.

    Contract of ``generate``:
        - ``width`` and ``height`` are integers >= 1, otherwise
          InvalidDimensionsError is raised before any work is done.
        - ``seed`` is None or an unsigned 64-bit integer, otherwise
          ConfigurationError is raised.
        - Identical width, height and seed produce identical mazes. A seeded
          call draws randomness only from a generator built from that seed.
        - Without a seed, a fresh seed is drawn from OS entropy and recorded
          in ``Maze.seed``.
        - The returned Maze is complete; a generator never touches it again.
    """

    @property
    def name(self) -> str:
        """Algorithm name recorded in ``Maze.algorithm``."""
        ...

    def generate(self, width: int, height: int, seed: int | None = None) -> Maze:
        """Generate a width x height maze."""
        ...


def is_maze_generator(obj: object) -> bool:
    """Check whether ``obj`` satisfies MazeGeneratorProtocol."""
    return isinstance(obj, MazeGeneratorProtocol)
