"""
Perfect maze generation and rendering.

Examples
--------
>>> from mazegraph.geometry.mazes import DepthFirstMazeGenerator, verify_perfect_maze
>>> maze = DepthFirstMazeGenerator(seed=7, width=31, height=21)
>>> verify_perfect_maze(maze.grid)["is_perfect"]
True
"""

from .maze_generator import (
    Cell,
    CellGrid,
    DepthFirstMazeGenerator,
    MazeAlgorithm,
    create_maze_generator,
    generate_maze,
    verify_perfect_maze,
)
from .maze_renderer import render_ascii, render_grid

__all__ = [
    "Cell",
    "CellGrid",
    "DepthFirstMazeGenerator",
    "MazeAlgorithm",
    "create_maze_generator",
    "generate_maze",
    "render_ascii",
    "render_grid",
    "verify_perfect_maze",
]
