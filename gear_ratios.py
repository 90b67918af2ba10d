"""
Engine schematic scanning (day three).

Each row is walked left to right. Consecutive digit cells form a run; the run
closes on the first non-digit cell (or at end of row) and is then scored:

- part one: the run counts when any of its digits touches a symbol
- part two: the run is recorded against every gear ('*') it touches, and a
  gear touching exactly two runs contributes the product of the two
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from adjacency import get_adjacent
from grid_types import Coord, Digit, GearMap, digits_to_number

logger = logging.getLogger(__name__)

__all__ = [
    "BLANK",
    "GEAR",
    "PartNumber",
    "is_symbol",
    "iter_part_numbers",
    "part_one",
    "collect_gear_numbers",
    "gear_ratio_sum",
    "part_two",
]

BLANK = "."
GEAR = "*"

Schematic = Sequence[Sequence[str]]


def is_symbol(char: str) -> bool:
    """A symbol is anything that is neither blank nor a digit."""
    return char != BLANK and Digit.from_char(char) is None


@dataclass(frozen=True)
class PartNumber:
    """A number adjacent to at least one symbol."""

    value: int
    start: Coord  # Position of the leftmost digit
    length: int

    def cells(self) -> list[Coord]:
        """Positions of the number's digits, left to right."""
        return [Coord(self.start.row, self.start.col + offset) for offset in range(self.length)]


# =============================================================================
# Run State
# =============================================================================


@dataclass
class SymbolRun:
    """Digits seen so far in the current run, and whether any touched a symbol."""

    digits: list[Digit] = field(default_factory=list)
    has_symbol: bool = False

    def reset(self) -> None:
        self.digits.clear()
        self.has_symbol = False


@dataclass
class GearRun:
    """Digits seen so far in the current run, and the gears they touch."""

    digits: list[Digit] = field(default_factory=list)
    gears: set[Coord] = field(default_factory=set)

    def reset(self) -> None:
        self.digits.clear()
        self.gears.clear()


# =============================================================================
# Part One: Symbol Adjacency
# =============================================================================


def iter_part_numbers(grid: Schematic) -> Iterator[PartNumber]:
    """
    Yield every number in the schematic that touches a symbol.

    Rows are expected to be padded with a trailing BLANK, but a run still open
    at the end of a row is closed there as well.
    """
    for row_idx, row in enumerate(grid):
        run = SymbolRun()

        def close(end_col: int) -> PartNumber | None:
            part = None
            if run.digits and run.has_symbol:
                length = len(run.digits)
                part = PartNumber(
                    digits_to_number(run.digits), Coord(row_idx, end_col - length), length
                )
            run.reset()
            return part

        for col_idx, char in enumerate(row):
            digit = Digit.from_char(char)
            if digit is not None:
                run.digits.append(digit)
                if not run.has_symbol:
                    neighbours = get_adjacent(Coord(row_idx, col_idx), grid)
                    run.has_symbol = any(is_symbol(value) for _, value in neighbours)
            else:
                part = close(col_idx)
                if part is not None:
                    yield part

        part = close(len(row))
        if part is not None:
            yield part


def part_one(grid: Schematic) -> int:
    """Sum of all part numbers (numbers adjacent to any symbol)."""
    total = 0
    count = 0
    for part in iter_part_numbers(grid):
        total += part.value
        count += 1
    logger.info("part_one: %d part numbers, sum=%d", count, total)
    return total


# =============================================================================
# Part Two: Gear Ratios
# =============================================================================


def collect_gear_numbers(grid: Schematic) -> GearMap:
    """
    Map each gear position to the numbers adjacent to it, in scan order.

    A gear only appears in the map once at least one number touches it. A run
    touching the same gear through several of its digits is recorded once.
    """
    gear_map: GearMap = {}

    for row_idx, row in enumerate(grid):
        run = GearRun()

        def close() -> None:
            if run.digits and run.gears:
                number = digits_to_number(run.digits)
                for gear in run.gears:
                    gear_map.setdefault(gear, []).append(number)
            run.reset()

        for col_idx, char in enumerate(row):
            digit = Digit.from_char(char)
            if digit is not None:
                run.digits.append(digit)
                for pos, value in get_adjacent(Coord(row_idx, col_idx), grid):
                    if value == GEAR:
                        run.gears.add(pos)
            else:
                close()

        close()

    return gear_map


def gear_ratio_sum(gear_map: GearMap) -> int:
    """Sum the products of gears with exactly two adjacent numbers."""
    total = 0
    for gear, numbers in gear_map.items():
        if len(numbers) != 2:
            logger.debug("gear_ratio_sum: skipping %s with %d numbers", gear, len(numbers))
            continue
        total += numbers[0] * numbers[1]
    return total


def part_two(grid: Schematic) -> int:
    """Sum of all gear ratios."""
    gear_map = collect_gear_numbers(grid)
    total = gear_ratio_sum(gear_map)
    logger.info("part_two: %d candidate gears, sum=%d", len(gear_map), total)
    return total
