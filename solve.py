#!/usr/bin/env python3
"""
Command line entry point: solve one day's puzzle from an input file.

Usage:
    python solve.py <day> [input_path] [--render] [-v]
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterator

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

import cube_conundrum
import gear_ratios
import trebuchet
from ascii_render import render_grid
from game_parser import parse_line
from line_reader import read_file_lines, read_grid

DEFAULT_INPUT = "input.txt"


@dataclass(frozen=True)
class Day:
    """How to load one day's input and solve both parts."""

    title: str
    load: Callable[[Iterator[str]], Any]
    part_one: Callable[[Any], int]
    part_two: Callable[[Any], int]


DAYS: dict[int, Day] = {
    1: Day("Trebuchet?!", list, trebuchet.part_one, trebuchet.part_two),
    2: Day(
        "Cube Conundrum",
        lambda lines: [parse_line(line) for line in lines],
        cube_conundrum.part_one,
        cube_conundrum.part_two,
    ),
    3: Day("Gear Ratios", read_grid, gear_ratios.part_one, gear_ratios.part_two),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve an Advent of Code 2023 puzzle.")
    parser.add_argument("day", type=int, choices=sorted(DAYS), help="Puzzle day")
    parser.add_argument(
        "input_path", nargs="?", default=DEFAULT_INPUT, help=f"Puzzle input (default {DEFAULT_INPUT})"
    )
    parser.add_argument(
        "--render", action="store_true", help="Print the coloured schematic first (day 3 only)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress at INFO level")
    return parser


def solve(day_number: int, input_path: str) -> tuple[Any, int, int]:
    """
    Load the input for a day and compute both answers.

    Returns:
        Tuple of (loaded data, part one, part two)

    Raises:
        OSError: If the input file cannot be read
        ValueError: If the input is malformed
    """
    day = DAYS[day_number]
    with read_file_lines(input_path) as lines:
        data = day.load(lines)
    return (data, day.part_one(data), day.part_two(data))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    console = Console()

    try:
        data, one, two = solve(args.day, args.input_path)
    except OSError as exc:
        console.print(f"[bold red]ERROR:[/] could not read input file '{args.input_path}': {exc}")
        return 1
    except ValueError as exc:
        console.print(f"[bold red]ERROR:[/] malformed input in '{args.input_path}'")
        console.print(Text(str(exc)))
        return 1

    day = DAYS[args.day]
    report = Text()
    if args.render and args.day == 3:
        report.append(Text.from_ansi(render_grid(data, padded=True)))
        report.append("\n\n")
    report.append("Part one: ", style="bold")
    report.append(f"{one}\n")
    report.append("Part two: ", style="bold")
    report.append(f"{two}")
    console.print(Panel(report, title=f"Day {args.day}: {day.title}", border_style="green"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
