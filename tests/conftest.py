"""
Pytest configuration and shared fixtures for the mazegraph test suite.
"""

import shutil
import tempfile
import warnings
from pathlib import Path

import pytest

import numpy as np

from mazegraph import DepthFirstMazeGenerator

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (slower, cross-component)")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test paths."""
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)

        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


# =============================================================================
# Maze Fixtures
# =============================================================================


@pytest.fixture
def small_maze():
    """Default-size maze with a fixed seed."""
    return DepthFirstMazeGenerator(seed=42, width=21, height=21)


@pytest.fixture(params=[(3, 3), (5, 5), (21, 21), (31, 11), (22, 22), (4, 9)])
def maze_size(request):
    """Parametrized (width, height) pairs, odd and even, including degenerate ones."""
    return request.param


@pytest.fixture
def mask_from_rows():
    """Build a boolean mask from strings: '#' is open, anything else is wall."""

    def _build(rows):
        return np.array([[ch == "#" for ch in row] for row in rows], dtype=bool)

    return _build


# =============================================================================
# File System Fixtures
# =============================================================================


@pytest.fixture
def temp_directory():
    """Temporary directory for file operations."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def maze_image(small_maze, temp_directory):
    """The small maze rendered to a BMP file."""
    return small_maze.render_to_file(temp_directory / "maze.bmp")


# =============================================================================
# Cleanup Utilities
# =============================================================================


@pytest.fixture(autouse=True)
def suppress_warnings():
    """Suppress the even-size warning during tests that do not check for it."""
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message="Even maze size", category=UserWarning)
        yield
