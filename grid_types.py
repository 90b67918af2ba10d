"""
Shared type definitions for the engine schematic solvers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


# =============================================================================
# Grid Definition Types
# =============================================================================


@dataclass(frozen=True)
class Coord:
    """A (row, col) position in a 2D grid."""

    row: int
    col: int

    @classmethod
    def from_tuple(cls, value: tuple[int, int]) -> Coord:
        return cls(value[0], value[1])


@dataclass(frozen=True)
class Digit:
    """A single validated base-10 digit (0-9)."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 9:
            raise ValueError(f"Digit out of range: {self.value}")

    @classmethod
    def from_int(cls, value: int) -> Digit | None:
        """Return a Digit for 0-9, None for anything else."""
        if 0 <= value <= 9:
            return cls(value)
        return None

    @classmethod
    def from_char(cls, char: str) -> Digit | None:
        """Return a Digit for '0'-'9', None for any other character."""
        # str.isdigit() also accepts superscripts and other scripts
        if len(char) == 1 and "0" <= char <= "9":
            return cls(ord(char) - ord("0"))
        return None


def digits_to_number(digits: Iterable[Digit]) -> int:
    """
    Fold digits into an integer, leftmost digit most significant.

    Example:
        digits_to_number([Digit(1), Digit(2), Digit(3)]) -> 123
        digits_to_number([]) -> 0
    """
    number = 0
    for digit in digits:
        number = number * 10 + digit.value
    return number


GearMap = dict[Coord, list[int]]
