"""Tests for adjacency module."""

from adjacency import get_adjacent
from grid_types import Coord

GRID = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


class TestGetAdjacent:
    """Tests for neighbour lookup."""

    def test_corner(self) -> None:
        """Top-left corner has three neighbours."""
        assert get_adjacent(Coord(0, 0), GRID) == [
            (Coord(0, 1), 2),
            (Coord(1, 0), 4),
            (Coord(1, 1), 5),
        ]

    def test_side(self) -> None:
        """Top edge cell has five neighbours."""
        assert get_adjacent(Coord(0, 1), GRID) == [
            (Coord(0, 0), 1),
            (Coord(0, 2), 3),
            (Coord(1, 0), 4),
            (Coord(1, 1), 5),
            (Coord(1, 2), 6),
        ]

    def test_middle(self) -> None:
        """Interior cell has all eight neighbours in direction order."""
        assert get_adjacent(Coord(1, 1), GRID) == [
            (Coord(0, 0), 1),
            (Coord(0, 1), 2),
            (Coord(0, 2), 3),
            (Coord(1, 0), 4),
            (Coord(1, 2), 6),
            (Coord(2, 0), 7),
            (Coord(2, 1), 8),
            (Coord(2, 2), 9),
        ]

    def test_bottom_right_corner(self) -> None:
        """Bottom-right corner does not run past the grid."""
        assert [value for _, value in get_adjacent(Coord(2, 2), GRID)] == [5, 6, 8]

    def test_ragged_rows(self) -> None:
        """Bounds are checked against the length of each row."""
        grid = [["a", "b", "c"], ["d"], ["e", "f"]]
        assert get_adjacent(Coord(1, 0), grid) == [
            (Coord(0, 0), "a"),
            (Coord(0, 1), "b"),
            (Coord(2, 0), "e"),
            (Coord(2, 1), "f"),
        ]

    def test_single_cell(self) -> None:
        """A 1x1 grid has no neighbours."""
        assert get_adjacent(Coord(0, 0), [["x"]]) == []

    def test_returns_grid_elements(self) -> None:
        """Neighbour values are the grid's own objects, not copies."""
        cell = ["payload"]
        grid = [[cell, None]]
        [(_, value)] = get_adjacent(Coord(0, 1), grid)
        assert value is cell
