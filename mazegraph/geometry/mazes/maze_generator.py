"""
Perfect Maze Generation by Randomized Depth-First Search

Builds a perfect maze over a grid of cells and renders it to a two-color
bitmap. A perfect maze is a spanning tree on the grid graph:
1. Fully Connected: Path exists between any two cells
2. No Loops: Exactly one unique path between any pair of cells

Pixel Layout:
Walls are one pixel wide and every cell sits on an odd pixel coordinate, so a
cell occupies a 2x2 block made of its own pixel plus the pixels shared with
its east and south neighbors. Row 0 and column 0 are border. The far border
is one pixel for odd sizes and two pixels for even sizes.

Reproducibility:
Each generator owns a ``random.Random`` seeded once at construction. Draws are
consumed in a fixed order (start column, end column, then one draw per
forward step), so the same seed and size always produce the same maze.

Reference: Jamis Buck, "Mazes for Programmers" (2015)
"""

from __future__ import annotations

import operator
import random
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from mazegraph.geometry.directions import Direction, direction_offset, invert_direction
from mazegraph.geometry.mazes.maze_renderer import render_ascii, render_grid
from mazegraph.io.bitmap import Bitmap
from mazegraph.utils.exceptions import InputValidationError
from mazegraph.utils.maze_logging import LoggedOperation, get_logger, log_performance_metric

if TYPE_CHECKING:
    import numpy as np
    from numpy.typing import NDArray

logger = get_logger(__name__)

# Outer border pixels that hold no cells (one on each side)
CELL_BORDER_TOTAL_WIDTH = 2

DEFAULT_SIZE = 21
DEFAULT_OUTPUT = "maze.bmp"


class MazeAlgorithm(Enum):
    """Available perfect maze generation algorithms."""

    DEPTH_FIRST = "depth_first"


@dataclass(eq=False)
class Cell:
    """
    Represents a cell in the maze grid.

    Attributes:
        x: Column index in grid
        y: Row index in grid
        visited: Flag set once the walk has reached the cell
        previous: Index of the cell the walk came from (backtrack chain)
        connections: Index of the connected cell per direction, or None
    """

    x: int
    y: int
    visited: bool = False
    previous: int | None = None
    connections: dict[Direction, int | None] = field(default_factory=lambda: dict.fromkeys(Direction))

    def connected(self, direction: Direction) -> bool:
        return self.connections[direction] is not None


class CellGrid:
    """
    Fixed-size grid of cells stored as a flat row-major arena.

    Cells refer to each other by index (``y * cols + x``), never by object.
    """

    def __init__(self, cols: int, rows: int):
        """
        Initialize grid.

        Args:
            cols: Number of cell columns
            rows: Number of cell rows
        """
        self.cols = cols
        self.rows = rows
        self.cells: list[Cell] = [Cell(x, y) for y in range(rows) for x in range(cols)]

    def __len__(self) -> int:
        return len(self.cells)

    def index(self, x: int, y: int) -> int:
        return y * self.cols + x

    def get_cell(self, x: int, y: int) -> Cell | None:
        """
        Get cell at position.

        Returns:
            Cell if valid position, None otherwise
        """
        if 0 <= x < self.cols and 0 <= y < self.rows:
            return self.cells[self.index(x, y)]
        return None

    def neighbor_index(self, index: int, direction: Direction) -> int | None:
        """Index of the grid-adjacent cell in ``direction``, None at the edge."""
        cell = self.cells[index]
        dx, dy = direction_offset(direction)
        nx, ny = cell.x + dx, cell.y + dy
        if 0 <= nx < self.cols and 0 <= ny < self.rows:
            return self.index(nx, ny)
        return None

    def unvisited_directions(self, index: int) -> list[Direction]:
        """Directions towards unvisited neighbors, in north, east, south, west order."""
        options = []
        for direction in Direction:
            neighbor = self.neighbor_index(index, direction)
            if neighbor is not None and not self.cells[neighbor].visited:
                options.append(direction)
        return options

    def link(self, index: int, direction: Direction) -> int:
        """
        Carve a passage from ``index`` towards ``direction``.

        Both cells record the connection, so adjacency stays symmetric.

        Returns:
            Index of the neighbor that was linked
        """
        neighbor = self.neighbor_index(index, direction)
        if neighbor is None:
            raise IndexError(f"No cell {direction.value} of cell {index}")
        self.cells[index].connections[direction] = neighbor
        self.cells[neighbor].connections[invert_direction(direction)] = index
        return neighbor

    def passage_count(self) -> int:
        """Each passage is counted once, from its north or west end."""
        return sum(cell.connected(Direction.SOUTH) + cell.connected(Direction.EAST) for cell in self.cells)


class DepthFirstMazeGenerator:
    """
    Randomized depth-first maze builder.

    The maze is built eagerly at construction. Backtracking follows each
    cell's ``previous`` index instead of a call stack, so arbitrarily large
    mazes never hit the recursion limit.

    Args:
        seed: Non-negative random seed; the same seed and size reproduce the
            same maze (default: current time)
        width: Image width in pixels, border included (> 2)
        height: Image height in pixels, border included (> 2)
        trace: Log every step of the walk and an ASCII snapshot at DEBUG level

    Raises:
        InputValidationError: If either dimension is not an integer above 2, or
            the seed is not a non-negative integer
    """

    algorithm = MazeAlgorithm.DEPTH_FIRST

    def __init__(
        self,
        seed: int | None = None,
        width: int = DEFAULT_SIZE,
        height: int = DEFAULT_SIZE,
        trace: bool = False,
    ):
        width = _validate_integer("width", width, CELL_BORDER_TOTAL_WIDTH)
        height = _validate_integer("height", height, CELL_BORDER_TOTAL_WIDTH)
        seed = int(time.time()) if seed is None else _validate_integer("seed", seed, -1)

        self.seed = seed
        self.width = width
        self.height = height
        self.trace = trace
        self._rng = random.Random(self.seed)

        self.x_cells = (width - 1) // 2
        self.y_cells = (height - 1) // 2

        # Border columns for the entrance and exit, as cell columns
        self.start_column = self._rng.randrange(self.x_cells)
        self.end_column = self._rng.randrange(self.x_cells)

        self.grid = CellGrid(self.x_cells, self.y_cells)
        self._build()

    @property
    def start_pixel_x(self) -> int:
        return self.start_column * 2 + 1

    @property
    def end_pixel_x(self) -> int:
        return self.end_column * 2 + 1

    def _build(self) -> None:
        grid = self.grid
        t0 = time.perf_counter()

        current: int | None = grid.index(0, 0)
        grid.cells[current].visited = True

        while current is not None:
            options = grid.unvisited_directions(current)

            if not options:
                # Dead end: pop back along the chain
                current = grid.cells[current].previous
                if self.trace:
                    logger.debug("Dead end - backtracking")
                    if current is not None:
                        cell = grid.cells[current]
                        logger.debug("\n" + self.to_ascii(current=(cell.x, cell.y)))
                continue

            choice = options[self._rng.randrange(len(options))]
            neighbor = grid.link(current, choice)
            grid.cells[neighbor].previous = current
            grid.cells[neighbor].visited = True
            current = neighbor

            if self.trace:
                cell = grid.cells[current]
                logger.debug(f"{len(options)} choices, going {choice.value} to x {cell.x} y {cell.y}")
                logger.debug("\n" + self.to_ascii(current=(cell.x, cell.y)))

        log_performance_metric(
            logger,
            "Built maze",
            time.perf_counter() - t0,
            {
                "seed": self.seed,
                "size": f"{self.width} x {self.height}",
                "pixels": self.width * self.height,
                "cells": len(grid),
            },
        )

    def to_pixels(self) -> NDArray[np.bool_]:
        """Boolean ``(height, width)`` mask of the maze, ``True`` = open."""
        return render_grid(self.grid, self.width, self.height, self.start_pixel_x, self.end_pixel_x)

    def to_bitmap(self) -> Bitmap:
        return Bitmap.from_mask(self.to_pixels())

    def to_ascii(self, current: tuple[int, int] | None = None) -> str:
        return render_ascii(self.grid, current=current)

    def render_to_file(self, path: str | Path = DEFAULT_OUTPUT) -> Path:
        """
        Render the maze and write it as an image.

        Args:
            path: Output file; the image format follows the suffix

        Returns:
            The path that was written
        """
        path = Path(path)
        with LoggedOperation(logger, f"rendering {path.name}"):
            self.to_bitmap().save(path)
        return path


def _validate_integer(name: str, value: int, minimum_exclusive: int) -> int:
    """Return ``value`` as a plain int; NumPy integers are accepted, bools are not."""
    try:
        if isinstance(value, bool):
            raise TypeError("bool is not accepted as an integer input")
        value = operator.index(value)
    except TypeError as e:
        logger.error(f"Expected an integer for {name}, got {value!r}")
        raise InputValidationError(
            name, value, minimum_exclusive, expected_type=int, component="DepthFirstMazeGenerator"
        ) from e

    if value <= minimum_exclusive:
        logger.error(f"Invalid {name}: {value!r} is not above {minimum_exclusive}")
        raise InputValidationError(name, value, minimum_exclusive, component="DepthFirstMazeGenerator")
    return value


def create_maze_generator(
    seed: int | None = None,
    width: int = DEFAULT_SIZE,
    height: int = DEFAULT_SIZE,
    algorithm: MazeAlgorithm | str = MazeAlgorithm.DEPTH_FIRST,
    trace: bool = False,
) -> DepthFirstMazeGenerator:
    """
    Build a maze with the requested algorithm.

    Raises:
        ValueError: If ``algorithm`` names no known algorithm
    """
    alg_enum = MazeAlgorithm(algorithm)
    if alg_enum == MazeAlgorithm.DEPTH_FIRST:
        return DepthFirstMazeGenerator(seed, width, height, trace=trace)
    raise ValueError(f"Unknown algorithm: {algorithm}")


def verify_perfect_maze(grid: CellGrid) -> dict:
    """
    Verify that a maze is perfect (fully connected, no loops).

    A perfect maze must satisfy:
    1. Connectivity: All cells reachable from any cell
    2. Acyclicity: Exactly (n-1) passages for n cells
    3. Symmetry: Every connection is recorded on both cells

    Args:
        grid: Maze grid to verify

    Returns:
        Dictionary with verification results including:
        - is_perfect: Overall validity
        - is_connected: Connectivity check
        - is_no_loops: Acyclicity check
        - is_symmetric: Every connection mirrored by its neighbor
        - visited_cells: Number of reachable cells
        - total_cells: Total number of cells
        - passage_count: Number of passages
        - expected_passages: Expected passages for perfect maze
    """
    is_symmetric = True
    for index, cell in enumerate(grid.cells):
        for direction, neighbor in cell.connections.items():
            if neighbor is None:
                continue
            if neighbor != grid.neighbor_index(index, direction):
                is_symmetric = False
            elif grid.cells[neighbor].connections[invert_direction(direction)] != index:
                is_symmetric = False

    seen = {0}
    queue = [0]
    while queue:
        current = queue.pop()
        for neighbor in grid.cells[current].connections.values():
            if neighbor is not None and neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)

    total_cells = len(grid)
    is_connected = len(seen) == total_cells

    passage_count = grid.passage_count()
    expected_passages = total_cells - 1
    is_no_loops = passage_count == expected_passages

    return {
        "is_perfect": is_connected and is_no_loops and is_symmetric,
        "is_connected": is_connected,
        "is_no_loops": is_no_loops,
        "is_symmetric": is_symmetric,
        "visited_cells": len(seen),
        "total_cells": total_cells,
        "passage_count": passage_count,
        "expected_passages": expected_passages,
    }


def generate_maze(
    width: int = DEFAULT_SIZE,
    height: int = DEFAULT_SIZE,
    seed: int | None = None,
) -> NDArray[np.bool_]:
    """
    High-level function to generate a perfect maze.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        seed: Random seed for reproducibility

    Returns:
        Boolean pixel mask (True = passage)

    Example:
        >>> maze = generate_maze(21, 21, seed=42)
        >>> print(f"Maze shape: {maze.shape}")
        Maze shape: (21, 21)
    """
    generator = DepthFirstMazeGenerator(seed, width, height)

    verification = verify_perfect_maze(generator.grid)
    if not verification["is_perfect"]:
        raise RuntimeError(f"Generated maze is not perfect: {verification}")

    return generator.to_pixels()
