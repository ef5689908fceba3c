from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("mazegraph")  # Matches the name in pyproject.toml
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0-dev"

from .geometry import (  # noqa: E402
    MAX_DISTANCE_FROM_EXIT,
    CellGrid,
    DepthFirstMazeGenerator,
    Direction,
    MazeAlgorithm,
    MazeNetwork,
    Node,
    create_maze_generator,
    generate_maze,
    verify_perfect_maze,
)
from .io import Bitmap  # noqa: E402
from .utils.exceptions import (  # noqa: E402
    ImageAccessError,
    InputValidationError,
    MazeError,
    UnexpectedDirectionError,
)

__all__ = [
    "MAX_DISTANCE_FROM_EXIT",
    "Bitmap",
    "CellGrid",
    "DepthFirstMazeGenerator",
    "Direction",
    "ImageAccessError",
    "InputValidationError",
    "MazeAlgorithm",
    "MazeError",
    "MazeNetwork",
    "Node",
    "UnexpectedDirectionError",
    "__version__",
    "create_maze_generator",
    "generate_maze",
    "verify_perfect_maze",
]
