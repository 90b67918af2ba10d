"""
ASCII rendering of engine schematics.

Draws the schematic inside a box with part numbers, gears and other symbols
coloured, which makes it easy to eyeball why a number was (or wasn't) counted.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence

import simple_chalk as chalk  # type: ignore[import-untyped]

from grid_types import Coord
from gear_ratios import GEAR, PartNumber, collect_gear_numbers, is_symbol, iter_part_numbers
from line_reader import PAD_CHAR

logger = logging.getLogger(__name__)

__all__ = ["find_part_numbers", "find_gears", "render_grid"]


def find_part_numbers(grid: Sequence[Sequence[str]]) -> list[PartNumber]:
    """All numbers that touch a symbol, in scan order."""
    return list(iter_part_numbers(grid))


def find_gears(grid: Sequence[Sequence[str]]) -> set[Coord]:
    """Positions of gears touching exactly two numbers."""
    return {gear for gear, numbers in collect_gear_numbers(grid).items() if len(numbers) == 2}


def _identity(text: str) -> str:
    return text


def render_grid(
    grid: Sequence[Sequence[str]],
    part_numbers: Iterable[PartNumber] | None = None,
    gears: Iterable[Coord] | None = None,
    color: bool = True,
    padded: bool = False,
) -> str:
    """
    Render a schematic as a boxed block of text.

    Colours:
    - part number digits: green
    - gears with exactly two numbers: bright yellow
    - other symbols: red
    - everything else: white

    Args:
        grid: Schematic rows
        part_numbers: Numbers to highlight (default: computed from grid)
        gears: Gear positions to highlight (default: computed from grid)
        color: Emit ANSI colours (default True)
        padded: Rows carry a trailing PAD_CHAR from read_grid, which is
            dropped (default False: every cell is drawn)

    Returns:
        Multi-line string
    """
    parts = find_part_numbers(grid) if part_numbers is None else list(part_numbers)
    gear_set = find_gears(grid) if gears is None else set(gears)
    part_cells = {cell for part in parts for cell in part.cells()}
    logger.info("render_grid: %d part numbers, %d gears", len(parts), len(gear_set))

    rows = [
        list(row[:-1]) if padded and row and row[-1] == PAD_CHAR else list(row)
        for row in grid
    ]
    width = max((len(row) for row in rows), default=0)

    def colorize_for(coord: Coord, char: str) -> Callable[[str], str]:
        if not color:
            return _identity
        if char == GEAR and coord in gear_set:
            return chalk.yellowBright
        if coord in part_cells:
            return chalk.green
        if is_symbol(char):
            return chalk.red
        return chalk.white

    border = chalk.white if color else _identity
    lines = [border("┌" + "─" * width + "┐")]
    for r_idx, row in enumerate(rows):
        line_parts = [border("│")]
        for c_idx, char in enumerate(row):
            line_parts.append(colorize_for(Coord(r_idx, c_idx), char)(char))
        # Ragged rows are filled out to the box width
        line_parts.append(" " * (width - len(row)))
        line_parts.append(border("│"))
        lines.append("".join(line_parts))
    lines.append(border("└" + "─" * width + "┘"))

    return "\n".join(lines)
