"""
Image-to-Graph Extraction for Maze Bitmaps

Scans a maze image once, top-to-bottom and left-to-right, and builds a sparse
graph whose nodes are the decision points of the maze: entrance, exit,
corners, dead ends and junctions. Straight corridor pixels never become nodes;
corridors become edges between the nodes at their two ends.

Scan State:
The single pass keeps O(width) state:
- a pending west neighbor: the latest node in the current row with an open
  pixel to its east, cleared at the start of every row
- a column -> node mapping of pending north neighbors: nodes with an open
  pixel below them, waiting for the next node further down the column

Distance Heuristic:
After the scan every node is annotated with its squared Euclidean distance to
the exit. It is a geometric ordering signal, not a path length; no edges are
traversed to compute it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

from mazegraph.geometry.directions import Direction, invert_direction, should_create_node
from mazegraph.io.bitmap import Bitmap
from mazegraph.utils.exceptions import UnexpectedDirectionError
from mazegraph.utils.maze_logging import LoggedOperation, get_logger

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = get_logger(__name__)

MAX_DISTANCE_FROM_EXIT = 0xFFFFFFFF


@dataclass(eq=False)
class Node:
    """
    A decision point of the maze graph.

    Neighbors are stored as node indices into the owning ``MazeNetwork``.

    Attributes:
        x: Pixel column
        y: Pixel row
        distance: Squared distance to the exit, or ``MAX_DISTANCE_FROM_EXIT``
            until computed
    """

    x: int = 0
    y: int = 0
    distance: int = MAX_DISTANCE_FROM_EXIT
    neighbors: dict[Direction, int | None] = field(default_factory=lambda: dict.fromkeys(Direction))

    def set_location(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def get_neighbor(self, direction: Direction) -> int | None:
        if direction not in self.neighbors:
            raise UnexpectedDirectionError(direction, component="Node")
        return self.neighbors[direction]

    def set_neighbor(self, node: int | None, direction: Direction) -> None:
        if direction not in self.neighbors:
            raise UnexpectedDirectionError(direction, component="Node")
        self.neighbors[direction] = node

    def set_distance(self, distance: int) -> None:
        self.distance = distance

    def describe(self, index: int | None = None) -> str:
        lines = [f"Node {index}" if index is not None else "Node"]
        lines.append(f"x:{self.x} y:{self.y}")
        for direction, neighbor in self.neighbors.items():
            if neighbor is not None:
                lines.append(f"{direction.value}: {neighbor}")
        lines.append(f"distance: {self.distance}")
        return "\n".join(lines)


class MazeNetwork:
    """
    Sparse node graph of a maze image.

    Nodes are owned by the network and live in ``nodes`` in creation (scan)
    order; a node's index in that list is its handle.

    Args:
        image_path: Image to parse right away (optional)

    Raises:
        ImageAccessError: If ``image_path`` cannot be opened or decoded
    """

    def __init__(self, image_path: str | Path | None = None):
        self.nodes: list[Node] = []
        self.start_index: int | None = None
        self.end_index: int | None = None

        if image_path is not None:
            self.parse_image(image_path)

    @property
    def start(self) -> Node | None:
        return None if self.start_index is None else self.nodes[self.start_index]

    @property
    def end(self) -> Node | None:
        return None if self.end_index is None else self.nodes[self.end_index]

    def __len__(self) -> int:
        return len(self.nodes)

    def neighbor(self, node: Node, direction: Direction) -> Node | None:
        index = node.get_neighbor(direction)
        return None if index is None else self.nodes[index]

    def parse_image(self, image_path: str | Path) -> None:
        """
        Load a maze image and build the graph from it.

        The image is fully decoded before any node is created, so a failure
        leaves the network untouched.
        """
        bitmap = Bitmap.open(image_path)
        logger.info(f"Parsing {image_path} ({bitmap.width}x{bitmap.height})")
        self.parse_mask(bitmap.passable_mask())

    def parse_mask(self, mask: NDArray[np.bool_]) -> None:
        """
        Build the graph from a boolean ``(height, width)`` mask, ``True`` = open.

        Any previously parsed graph is discarded.
        """
        mask = np.asarray(mask, dtype=bool)
        if mask.ndim != 2:
            raise ValueError(f"Expected a 2D mask, got shape {mask.shape}")

        self.nodes = []
        self.start_index = None
        self.end_index = None

        with LoggedOperation(logger, "graph extraction"):
            self._scan(mask)
            self.calculate_distances()

        logger.info(f"Extracted {len(self.nodes)} nodes")

    def _scan(self, mask: NDArray[np.bool_]) -> None:
        height, width = mask.shape

        def is_open(x: int, y: int) -> bool:
            return 0 <= x < width and 0 <= y < height and bool(mask[y, x])

        west_neighbor: int | None = None
        north_neighbors: dict[int, int] = {}

        for y in range(height):
            west_neighbor = None

            for x in range(width):
                if not mask[y, x]:
                    continue

                # Entrance: first open pixel of the top row
                if y == 0:
                    self.start_index = self._add_node(x, y)
                    if is_open(x, y + 1):
                        north_neighbors[x] = self.start_index
                    break

                # Exit: first open pixel of the bottom row
                if y == height - 1:
                    self.end_index = self._add_node(x, y)
                    if is_open(x, y - 1):
                        north = north_neighbors.pop(x, None)
                        if north is not None:
                            self._connect(self.end_index, north, Direction.NORTH)
                    break

                north_open = is_open(x, y - 1)
                south_open = is_open(x, y + 1)
                east_open = is_open(x + 1, y)
                west_open = is_open(x - 1, y)

                if not should_create_node(north_open, south_open, east_open, west_open):
                    continue

                this_node = self._add_node(x, y)

                if west_open and west_neighbor is not None:
                    self._connect(this_node, west_neighbor, Direction.WEST)
                    west_neighbor = None

                if north_open:
                    north = north_neighbors.pop(x, None)
                    if north is not None:
                        self._connect(this_node, north, Direction.NORTH)

                if east_open:
                    west_neighbor = this_node

                if south_open:
                    north_neighbors[x] = this_node

    def _add_node(self, x: int, y: int) -> int:
        node = Node()
        node.set_location(x, y)
        self.nodes.append(node)
        return len(self.nodes) - 1

    def _connect(self, index: int, other: int, direction: Direction) -> None:
        """Link ``index`` to ``other`` lying in ``direction``, and back."""
        self.nodes[index].set_neighbor(other, direction)
        self.nodes[other].set_neighbor(index, invert_direction(direction))

    def calculate_distances(self) -> None:
        """
        Annotate every node with its squared distance to the exit.

        Leaves the sentinel in place when the image has no exit row node.
        """
        end = self.end
        if end is None:
            logger.warning("No exit found; node distances left at MAX_DISTANCE_FROM_EXIT")
            return

        for node in self.nodes:
            x_diff = node.x - end.x
            y_diff = node.y - end.y
            node.set_distance(x_diff * x_diff + y_diff * y_diff)

    def describe(self) -> str:
        """Human-readable dump of all nodes, their neighbors and distances."""
        blocks = [node.describe(index) + "\n" for index, node in enumerate(self.nodes)]
        blocks.append("---------------------")
        blocks.append(f"Node count: {len(self.nodes)}")
        return "\n".join(blocks)

    def reachable_from_start(self) -> set[int]:
        """Indices of all nodes connected to the entrance."""
        if self.start_index is None:
            return set()

        seen = {self.start_index}
        stack = [self.start_index]
        while stack:
            current = stack.pop()
            for neighbor in self.nodes[current].neighbors.values():
                if neighbor is not None and neighbor not in seen:
                    seen.add(neighbor)
                    stack.append(neighbor)
        return seen
