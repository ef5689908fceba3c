"""
Compass directions and pixel classification shared by the maze generator and
the image-to-graph extractor.

Coordinates follow image conventions: ``x`` grows to the east, ``y`` grows to
the south, so north is ``y - 1``.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from mazegraph.utils.exceptions import UnexpectedDirectionError

if TYPE_CHECKING:
    from collections.abc import Sequence


class Direction(Enum):
    """The four axis-aligned directions, in enumeration order."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"


# Unit offsets as (dx, dy)
DIRECTION_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}

WHITE = (255, 255, 255)


def invert_direction(direction: Direction) -> Direction:
    """
    Return the opposite compass direction.

    Raises:
        UnexpectedDirectionError: If ``direction`` is not a ``Direction`` member
    """
    if not isinstance(direction, Direction):
        raise UnexpectedDirectionError(direction, component="directions")
    return _OPPOSITES[direction]


def direction_offset(direction: Direction) -> tuple[int, int]:
    """Return the ``(dx, dy)`` step for ``direction``."""
    if not isinstance(direction, Direction):
        raise UnexpectedDirectionError(direction, component="directions")
    return DIRECTION_OFFSETS[direction]


def is_white(pixel: Sequence[int]) -> bool:
    """A pixel is passable only when it is pure white."""
    return tuple(pixel[:3]) == WHITE


def should_create_node(north: bool, south: bool, east: bool, west: bool) -> bool:
    """
    Decide whether an open pixel is a decision point of the maze graph.

    Three configurations are skipped:
    1. No open neighbors at all (an isolated hole)
    2. A straight north-south corridor
    3. A straight east-west corridor

    Dead ends, corners, 3-way and 4-way junctions all get a node.

    Args:
        north: Pixel above is open
        south: Pixel below is open
        east: Pixel to the right is open
        west: Pixel to the left is open

    Returns:
        True if a node should be created
    """
    if not north and not south and not east and not west:
        return False
    if north and south and not east and not west:
        return False
    if not north and not south and east and west:
        return False
    return True
