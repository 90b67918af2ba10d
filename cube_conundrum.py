"""
Cube game scoring (day two).
"""

from __future__ import annotations

import logging
from math import prod
from typing import Iterable, Mapping

from game_parser import Cube, Record

logger = logging.getLogger(__name__)

__all__ = ["BAG_LIMITS", "check_limits", "is_possible", "minimum_set", "part_one", "part_two"]

# Cubes loaded in the bag for part one
BAG_LIMITS: dict[Cube, int] = {Cube.RED: 12, Cube.GREEN: 13, Cube.BLUE: 14}


def check_limits(limits: Mapping[Cube, int]) -> None:
    """Raise ValueError unless the bag limits name every colour."""
    missing = [cube.value.lower() for cube in Cube if cube not in limits]
    if missing:
        raise ValueError(
            f"Bag limits missing colour(s): {', '.join(missing)}\n"
            f"  Given: {', '.join(f'{cube.value.lower()}={count}' for cube, count in limits.items())}\n"
            f"  Limits must give a count for every colour: "
            f"{', '.join(cube.value.lower() for cube in Cube)}"
        )


def is_possible(record: Record, limits: Mapping[Cube, int] = BAG_LIMITS) -> bool:
    """
    True if no pull reveals more cubes of a colour than the bag holds.

    Raises:
        ValueError: If limits leaves out a colour
    """
    check_limits(limits)
    return all(count <= limits[cube] for pull in record.contents for cube, count in pull)


def minimum_set(record: Record) -> dict[Cube, int]:
    """Fewest cubes of each colour that make the game possible."""
    maxes = {cube: 0 for cube in Cube}
    for pull in record.contents:
        for cube, count in pull:
            if count > maxes[cube]:
                maxes[cube] = count
    return maxes


def part_one(records: Iterable[Record], limits: Mapping[Cube, int] = BAG_LIMITS) -> int:
    """Sum of the ids of possible games."""
    total = 0
    for record in records:
        if is_possible(record, limits):
            total += record.id
        else:
            logger.debug("part_one: game %d is impossible", record.id)
    logger.info("part_one: sum=%d", total)
    return total


def part_two(records: Iterable[Record]) -> int:
    """Sum of the powers (product of the minimum set) of all games."""
    total = sum(prod(minimum_set(record).values()) for record in records)
    logger.info("part_two: sum=%d", total)
    return total
