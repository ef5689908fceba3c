"""
Maze geometry: grid generation, rasterization and graph extraction.

Examples
--------
>>> from mazegraph.geometry import DepthFirstMazeGenerator, MazeNetwork
>>> maze = DepthFirstMazeGenerator(seed=42, width=21, height=21)
>>> path = maze.render_to_file("maze.bmp")
>>> network = MazeNetwork(path)
>>> network.start.y, network.end.y
(0, 20)
"""

from .directions import Direction, invert_direction, is_white, should_create_node
from .graph import MAX_DISTANCE_FROM_EXIT, MazeNetwork, Node
from .mazes import (
    Cell,
    CellGrid,
    DepthFirstMazeGenerator,
    MazeAlgorithm,
    create_maze_generator,
    generate_maze,
    verify_perfect_maze,
)

__all__ = [
    "MAX_DISTANCE_FROM_EXIT",
    "Cell",
    "CellGrid",
    "DepthFirstMazeGenerator",
    "Direction",
    "MazeAlgorithm",
    "MazeNetwork",
    "Node",
    "create_maze_generator",
    "generate_maze",
    "invert_direction",
    "is_white",
    "should_create_node",
    "verify_perfect_maze",
]
