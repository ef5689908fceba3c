"""Validated run configuration and JSON/YAML config files."""

from .maze_config import MazeConfig, load_config_file, save_config_file

__all__ = ["MazeConfig", "load_config_file", "save_config_file"]
