"""
Pytest configuration and shared fixtures for the maze_generator test suite.
"""

import pytest

from maze_generator import (
    EllersGenerator,
    GrowingTreeGenerator,
    PrimsGenerator,
    RecursiveBacktrackingGenerator,
    SelectionMethod,
    WilsonsGenerator,
)

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test paths."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


# =============================================================================
# Generator Fixtures
# =============================================================================

ALL_GENERATORS = [
    pytest.param(RecursiveBacktrackingGenerator, id="recursive_backtracking"),
    pytest.param(lambda: GrowingTreeGenerator(SelectionMethod.NEWEST), id="growing_tree_newest"),
    pytest.param(lambda: GrowingTreeGenerator(SelectionMethod.OLDEST), id="growing_tree_oldest"),
    pytest.param(lambda: GrowingTreeGenerator(SelectionMethod.RANDOM), id="growing_tree_random"),
    pytest.param(lambda: GrowingTreeGenerator(SelectionMethod.MIXED), id="growing_tree_mixed"),
    pytest.param(PrimsGenerator, id="prims"),
    pytest.param(EllersGenerator, id="ellers"),
    pytest.param(WilsonsGenerator, id="wilsons"),
]


@pytest.fixture(params=ALL_GENERATORS)
def generator(request):
    """Every generator variant, freshly constructed."""
    return request.param()


@pytest.fixture
def backtracker():
    """The reference depth-first generator."""
    return RecursiveBacktrackingGenerator()
