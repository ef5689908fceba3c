"""
Rasterization of a cell grid into a two-color pixel mask.

Both functions are pure: the same grid always yields the same output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from mazegraph.geometry.directions import Direction

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from mazegraph.geometry.mazes.maze_generator import CellGrid


def _passage_pixels(grid: CellGrid, offset: int) -> NDArray[np.bool_]:
    """
    Open pixels of the maze interior.

    Cell ``(x, y)`` maps to pixel ``(2x + offset, 2y + offset)``. A passage to
    the east or south opens the pixel between the two cells, but only when the
    connection is recorded on both sides.
    """
    height = 2 * grid.rows - 1 + offset
    width = 2 * grid.cols - 1 + offset
    pixels = np.zeros((height, width), dtype=bool)

    for index, cell in enumerate(grid.cells):
        if not cell.visited:
            continue
        px = 2 * cell.x + offset
        py = 2 * cell.y + offset
        pixels[py, px] = True

        east = cell.connections[Direction.EAST]
        if cell.x < grid.cols - 1 and east == index + 1:
            if grid.cells[east].connections[Direction.WEST] == index:
                pixels[py, px + 1] = True

        south = cell.connections[Direction.SOUTH]
        if cell.y < grid.rows - 1 and south == index + grid.cols:
            if grid.cells[south].connections[Direction.NORTH] == index:
                pixels[py + 1, px] = True

    return pixels


def render_grid(
    grid: CellGrid,
    width: int,
    height: int,
    start_x: int,
    end_x: int,
) -> NDArray[np.bool_]:
    """
    Render a maze to a ``(height, width)`` boolean mask, ``True`` = open.

    Args:
        grid: Completed cell grid
        width: Image width in pixels
        height: Image height in pixels
        start_x: Pixel column of the entrance in row 0
        end_x: Pixel column of the exit in the bottom border

    Returns:
        Pixel mask with walls and unexplored space set to False
    """
    if 2 * grid.cols + 1 > width or 2 * grid.rows + 1 > height:
        raise ValueError(f"A {grid.cols}x{grid.rows} cell grid does not fit in {width}x{height} pixels")

    interior = _passage_pixels(grid, offset=1)
    pixels = np.zeros((height, width), dtype=bool)
    pixels[: interior.shape[0], : interior.shape[1]] = interior

    pixels[0, start_x] = True

    # Open the row just below the cells and the last row; these are the same
    # row when there is only one border row
    pixels[2 * grid.rows, end_x] = True
    pixels[height - 1, end_x] = True

    return pixels


def render_ascii(grid: CellGrid, current: tuple[int, int] | None = None) -> str:
    """
    Text picture of the maze path without the border.

    ``#`` marks open pixels, a space marks walls and ``X`` marks ``current``
    (a cell coordinate) when given.
    """
    pixels = _passage_pixels(grid, offset=0)
    marker = None if current is None else (2 * current[1], 2 * current[0])

    lines = []
    for py in range(pixels.shape[0]):
        row = []
        for px in range(pixels.shape[1]):
            if (py, px) == marker:
                row.append("X")
            elif pixels[py, px]:
                row.append("#")
            else:
                row.append(" ")
        lines.append("".join(row))
    return "\n".join(lines)
