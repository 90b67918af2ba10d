"""
Neighbour lookup for 2D grids, including diagonals.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from grid_types import Coord

__all__ = ["ADJACENT_OFFSETS", "get_adjacent"]

T = TypeVar("T")

# (d_row, d_col) in scan order: row above, same row, row below
ADJACENT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


def get_adjacent(coord: Coord, grid: Sequence[Sequence[T]]) -> list[tuple[Coord, T]]:
    """
    Get the coordinates and values of every in-bounds neighbour of a cell.

    Candidates off the top or left edge, past the last row, or past the end
    of their own row (rows may differ in length) are skipped. A corner cell
    has 3 neighbours, an edge cell 5 and an interior cell 8.

    Example:
        grid = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
        get_adjacent(Coord(0, 0), grid)
        -> [(Coord(0, 1), 2), (Coord(1, 0), 4), (Coord(1, 1), 5)]

    Args:
        coord: Position whose neighbours are wanted
        grid: Rows of cells, indexed grid[row][col]

    Returns:
        (Coord, value) pairs in ADJACENT_OFFSETS order
    """
    neighbours: list[tuple[Coord, T]] = []
    for d_row, d_col in ADJACENT_OFFSETS:
        row = coord.row + d_row
        col = coord.col + d_col
        # Negative indices would wrap around in Python
        if row < 0 or col < 0:
            continue
        if row >= len(grid) or col >= len(grid[row]):
            continue
        neighbours.append((Coord(row, col), grid[row][col]))
    return neighbours
