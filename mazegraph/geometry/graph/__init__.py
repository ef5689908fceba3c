"""Graph extraction from maze images."""

from .maze_network import MAX_DISTANCE_FROM_EXIT, MazeNetwork, Node

__all__ = ["MAX_DISTANCE_FROM_EXIT", "MazeNetwork", "Node"]
