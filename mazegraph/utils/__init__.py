"""Shared utilities: structured exceptions and logging."""

from .exceptions import ImageAccessError, InputValidationError, MazeError, UnexpectedDirectionError
from .maze_logging import configure_logging, get_logger

__all__ = [
    "ImageAccessError",
    "InputValidationError",
    "MazeError",
    "UnexpectedDirectionError",
    "configure_logging",
    "get_logger",
]
