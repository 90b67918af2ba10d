"""
Trebuchet calibration values (day one).

A calibration value is the two-digit number formed by the first and last digit
found on a line.
"""

from __future__ import annotations

import logging
from typing import Iterable

from grid_types import Digit

logger = logging.getLogger(__name__)

__all__ = ["DIGIT_WORDS", "digits_in", "digits_and_words_in", "calibration_value", "part_one", "part_two"]

DIGIT_WORDS = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")


def digits_in(line: str) -> list[int]:
    """All ASCII digits on the line, in order."""
    return [digit.value for char in line if (digit := Digit.from_char(char)) is not None]


def digits_and_words_in(line: str) -> list[int]:
    """
    All digits on the line, including spelled-out ones, in order.

    Spelled digits may share letters: "twone" yields [2, 1] and "eightwo"
    yields [8, 2].
    """
    found: list[int] = []
    word = ""
    for char in line:
        digit = Digit.from_char(char)
        if digit is not None:
            found.append(digit.value)
            word = ""
            continue

        word += char
        for idx, name in enumerate(DIGIT_WORDS):
            if name in word:
                found.append(idx + 1)
                # Keep the last letter, it may start the next word
                word = char
                break
    return found


def calibration_value(line: str, digits: list[int]) -> int:
    """Combine the first and last digit of a line into a two-digit number."""
    if not digits:
        raise ValueError(
            f"No digits found on line: '{line}'\n"
            f"  Every calibration line must contain at least one digit"
        )
    return digits[0] * 10 + digits[-1]


def part_one(lines: Iterable[str]) -> int:
    """Sum of calibration values using numeric digits only."""
    total = sum(calibration_value(line, digits_in(line)) for line in lines)
    logger.info("part_one: sum=%d", total)
    return total


def part_two(lines: Iterable[str]) -> int:
    """Sum of calibration values counting spelled-out digits too."""
    total = sum(calibration_value(line, digits_and_words_in(line)) for line in lines)
    logger.info("part_two: sum=%d", total)
    return total
