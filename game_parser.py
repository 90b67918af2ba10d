"""
Parsing of cube game records (day two).

Format (one game per line):
    Game <id>: <pull>; <pull>; ...
where each pull is a comma separated list of "<count> <colour>".

Example:
    "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green"
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

__all__ = ["Cube", "Pull", "Record", "parse_line"]


class Cube(Enum):
    """Cube colour."""

    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"

    @classmethod
    def parse(cls, name: str) -> Cube:
        """Parse a lowercase colour name as it appears in game records."""
        for cube in cls:
            if cube.value.lower() == name:
                return cube
        raise ValueError(
            f"Unknown cube colour: '{name}'\n"
            f"  Valid colours: {', '.join(cube.value.lower() for cube in cls)}"
        )


Pull = tuple[tuple[Cube, int], ...]


@dataclass(frozen=True)
class Record:
    """One game: its id and the cubes revealed in each pull."""

    id: int
    contents: tuple[Pull, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible form, e.g. {"id": 1, "contents": [[["Blue", 3]]]}."""
        return {
            "id": self.id,
            "contents": [[[cube.value, count] for cube, count in pull] for pull in self.contents],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Record:
        contents = tuple(
            tuple((Cube(name), int(count)) for name, count in pull) for pull in data["contents"]
        )
        return cls(int(data["id"]), contents)


def parse_line(line: str) -> Record:
    """
    Parse a single game record.

    Args:
        line: Game record line

    Returns:
        Record with one tuple of (Cube, count) pairs per pull

    Raises:
        ValueError: If the line does not follow the record format
    """
    header, sep, body = line.partition(":")
    if not sep:
        raise ValueError(
            f"Invalid game record: '{line}'\n"
            f"  Expected format: 'Game <id>: <count> <colour>, ...; ...'"
        )

    id_str = header.split(" ")[-1]
    if not id_str.isdigit():
        raise ValueError(
            f"Invalid game id '{id_str}' in record: '{line}'\n"
            f"  Expected a header like 'Game 12'"
        )

    contents: list[Pull] = []
    for pull_idx, pull_str in enumerate(part.strip() for part in body.split(";")):
        pull: list[tuple[Cube, int]] = []
        for cubes_str in (part.strip() for part in pull_str.split(",")):
            count_str, _, colour = cubes_str.partition(" ")
            if not count_str.isdigit() or not colour:
                raise ValueError(
                    f"Invalid cube count: '{cubes_str}'\n"
                    f"  Game {id_str}, pull {pull_idx}: \"{pull_str}\"\n"
                    f"  Expected format: '<count> <colour>'"
                )
            pull.append((Cube.parse(colour), int(count_str)))
        contents.append(tuple(pull))

    return Record(int(id_str), tuple(contents))
