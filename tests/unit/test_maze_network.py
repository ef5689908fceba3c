"""
Unit tests for maze image to graph extraction.

Tests node classification, single-pass neighbor linking, distance annotation
and the Node accessors.
"""

import pytest

import numpy as np

from mazegraph.geometry.directions import Direction, should_create_node
from mazegraph.geometry.graph import MAX_DISTANCE_FROM_EXIT, MazeNetwork, Node
from mazegraph.io import Bitmap
from mazegraph.utils.exceptions import ImageAccessError, UnexpectedDirectionError


class TestNode:
    """Test Node getters and setters."""

    def test_getters_and_setters(self):
        network = MazeNetwork()
        node1 = network.nodes[network._add_node(0, 0)]
        node2_index = network._add_node(5, 5)

        node1.set_location(123, 456)
        node1.set_distance(54321)
        node1.set_neighbor(node2_index, Direction.NORTH)

        assert node1.x == 123
        assert node1.y == 456
        assert node1.distance == 54321
        assert node1.get_neighbor(Direction.NORTH) == node2_index
        assert network.neighbor(node1, Direction.NORTH) is network.nodes[node2_index]

    def test_defaults(self):
        node = Node()

        assert (node.x, node.y) == (0, 0)
        assert node.distance == MAX_DISTANCE_FROM_EXIT
        assert all(node.get_neighbor(d) is None for d in Direction)

    def test_unknown_direction_raises(self):
        node = Node()

        with pytest.raises(UnexpectedDirectionError):
            node.get_neighbor("up")
        with pytest.raises(UnexpectedDirectionError):
            node.set_neighbor(1, "up")

    def test_describe_lists_present_neighbors(self):
        node = Node(x=3, y=4, distance=25)
        node.set_neighbor(7, Direction.EAST)

        text = node.describe(2)

        assert text.splitlines() == ["Node 2", "x:3 y:4", "east: 7", "distance: 25"]


class TestShouldCreateNode:
    """Test decision-point classification."""

    # NSEW bits -> expected
    TRUTH_TABLE = [
        (0b0000, False),
        (0b0001, True),
        (0b0010, True),
        (0b0011, False),
        (0b0100, True),
        (0b0101, True),
        (0b0110, True),
        (0b0111, True),
        (0b1000, True),
        (0b1001, True),
        (0b1010, True),
        (0b1011, True),
        (0b1100, False),
        (0b1101, True),
        (0b1110, True),
        (0b1111, True),
    ]

    @pytest.mark.parametrize(("bits", "expected"), TRUTH_TABLE)
    def test_truth_table(self, bits, expected):
        n = bool(bits & 0b1000)
        s = bool(bits & 0b0100)
        e = bool(bits & 0b0010)
        w = bool(bits & 0b0001)

        assert should_create_node(n, s, e, w) is expected, f"n{n:d} s{s:d} e{e:d} w{w:d}"


class TestParseMask:
    """Test graph construction from synthetic masks."""

    def test_vertical_corridor_two_nodes(self, mask_from_rows):
        network = MazeNetwork()
        network.parse_mask(mask_from_rows(["x#x", "x#x", "x#x", "x#x"]))

        assert len(network) == 2
        assert (network.start.x, network.start.y) == (1, 0)
        assert (network.end.x, network.end.y) == (1, 3)
        assert network.start.get_neighbor(Direction.SOUTH) == network.end_index
        assert network.end.get_neighbor(Direction.NORTH) == network.start_index

    def test_corner_and_junction_nodes(self, mask_from_rows):
        rows = [
            "x#xxxxx",
            "x#####x",
            "x#xxx#x",
            "x#xxx#x",
            "xxxxx#x",
        ]
        network = MazeNetwork()
        network.parse_mask(mask_from_rows(rows))

        positions = {(n.x, n.y): i for i, n in enumerate(network.nodes)}
        # start, junction below the start, east corner, dead end, exit
        assert set(positions) == {(1, 0), (1, 1), (5, 1), (1, 3), (5, 4)}

        junction = network.nodes[positions[(1, 1)]]
        assert junction.get_neighbor(Direction.NORTH) == positions[(1, 0)]
        assert junction.get_neighbor(Direction.EAST) == positions[(5, 1)]
        assert junction.get_neighbor(Direction.SOUTH) == positions[(1, 3)]
        assert junction.get_neighbor(Direction.WEST) is None

        corner = network.nodes[positions[(5, 1)]]
        assert corner.get_neighbor(Direction.WEST) == positions[(1, 1)]
        assert corner.get_neighbor(Direction.SOUTH) == positions[(5, 4)]

        assert network.reachable_from_start() == set(range(len(network)))

    def test_only_first_open_pixel_of_boundary_rows(self, mask_from_rows):
        rows = [
            "#x#",
            "#x#",
            "###",
            "#x#",
        ]
        network = MazeNetwork()
        network.parse_mask(mask_from_rows(rows))

        assert (network.start.x, network.start.y) == (0, 0)
        assert (network.end.x, network.end.y) == (0, 3)
        assert sum(1 for n in network.nodes if n.y in (0, 3)) == 2

    def test_isolated_pixel_is_not_a_node(self, mask_from_rows):
        rows = [
            "x#xxx",
            "x#x#x",
            "x#xxx",
            "x#xxx",
        ]
        network = MazeNetwork()
        network.parse_mask(mask_from_rows(rows))

        assert all((n.x, n.y) != (3, 1) for n in network.nodes)

    def test_corridor_to_image_edge(self, mask_from_rows):
        """Pixels beyond the image are walls, so a corridor touching the edge ends in a dead end."""
        rows = [
            "x#xxx",
            "x####",
            "x#xxx",
            "x####",
            "x#xxx",
        ]
        network = MazeNetwork()
        network.parse_mask(mask_from_rows(rows))

        positions = {(n.x, n.y): i for i, n in enumerate(network.nodes)}
        assert sorted(x for x, y in positions if y == 1) == [1, 4]
        assert sorted(x for x, y in positions if y == 3) == [1, 4]

        edge1 = network.nodes[positions[(4, 1)]]
        assert edge1.get_neighbor(Direction.WEST) == positions[(1, 1)]
        assert edge1.get_neighbor(Direction.EAST) is None

        # Pending west neighbors never carry over into the next row
        assert network.nodes[positions[(1, 3)]].get_neighbor(Direction.WEST) is None
        assert network.reachable_from_start() == set(range(len(network)))

    def test_two_row_image(self, mask_from_rows):
        network = MazeNetwork()
        network.parse_mask(mask_from_rows(["x#x", "x#x"]))

        assert len(network) == 2
        assert network.start.get_neighbor(Direction.SOUTH) == network.end_index
        assert network.start.distance == 1
        assert network.end.distance == 0

    def test_no_exit_leaves_sentinel(self, mask_from_rows):
        network = MazeNetwork()
        network.parse_mask(mask_from_rows(["x#x", "x#x", "xxx"]))

        assert network.end is None
        assert network.start is not None
        assert network.start.distance == MAX_DISTANCE_FROM_EXIT

    def test_reparse_discards_previous_graph(self, mask_from_rows):
        network = MazeNetwork()
        network.parse_mask(mask_from_rows(["x#x", "x#x", "x#x"]))
        network.parse_mask(mask_from_rows(["#x", "#x"]))

        assert len(network) == 2
        assert network.start.x == 0

    def test_rejects_non_2d_mask(self):
        with pytest.raises(ValueError):
            MazeNetwork().parse_mask(np.zeros((2, 2, 3), dtype=bool))


class TestDistances:
    """Test the squared-distance heuristic."""

    def test_distance_is_squared_euclidean(self, mask_from_rows):
        rows = [
            "x#xxx",
            "x###x",
            "xxx#x",
            "xxx#x",
        ]
        network = MazeNetwork()
        network.parse_mask(mask_from_rows(rows))

        end = network.end
        assert (end.x, end.y) == (3, 3)
        assert end.distance == 0
        for node in network.nodes:
            assert node.distance == (node.x - 3) ** 2 + (node.y - 3) ** 2

        start = network.start
        assert start.distance == (1 - 3) ** 2 + (0 - 3) ** 2

    def test_unit_offset_distance(self):
        network = MazeNetwork()
        end = network._add_node(10, 10)
        neighbor = network._add_node(10, 9)
        network.end_index = end

        assert network.nodes[neighbor].distance == MAX_DISTANCE_FROM_EXIT

        network.calculate_distances()

        assert network.nodes[end].distance == 0
        assert network.nodes[neighbor].distance == 1

    def test_distance_ignores_connectivity(self):
        network = MazeNetwork()
        network.end_index = network._add_node(0, 0)
        far = network._add_node(300, 400)

        network.calculate_distances()

        assert network.nodes[far].distance == 250000


class TestParseImage:
    """Test reading maze images from disk."""

    def test_missing_file(self, temp_directory):
        with pytest.raises(ImageAccessError) as exc_info:
            MazeNetwork(temp_directory / "missing.bmp")

        assert exc_info.value.error_code == "IMAGE_ACCESS_FAILURE"

    def test_corrupt_file(self, temp_directory):
        path = temp_directory / "corrupt.bmp"
        path.write_bytes(b"BM not really a bitmap")

        with pytest.raises(ImageAccessError):
            MazeNetwork(path)

    def test_failed_parse_keeps_previous_graph(self, mask_from_rows, temp_directory):
        network = MazeNetwork()
        network.parse_mask(mask_from_rows(["x#x", "x#x"]))

        with pytest.raises(ImageAccessError):
            network.parse_image(temp_directory / "missing.png")

        assert len(network) == 2

    def test_only_pure_white_is_open(self, temp_directory):
        bitmap = Bitmap.blank(3, 3)
        for y in range(3):
            bitmap.set_pixel(1, y, (255, 255, 255))
        bitmap.set_pixel(2, 1, (254, 255, 255))
        path = temp_directory / "nearly_white.png"
        bitmap.save(path)

        network = MazeNetwork(path)

        assert len(network) == 2

    def test_describe(self, mask_from_rows):
        network = MazeNetwork()
        network.parse_mask(mask_from_rows(["x#x", "x#x", "x#x"]))

        text = network.describe()

        assert text.endswith("Node count: 2")
        assert "---------------------" in text
        assert "x:1 y:0" in text
        assert "south: 1" in text
        assert "distance: 4" in text
