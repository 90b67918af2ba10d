"""Tests for ascii_render module."""

import re
from types import SimpleNamespace

import pytest

import ascii_render
from ascii_render import find_gears, find_part_numbers, render_grid
from grid_types import Coord
from line_reader import read_grid
from test_gear_ratios import EXAMPLE

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


class TestFindHelpers:
    """Tests for locating highlighted cells."""

    def test_find_part_numbers(self) -> None:
        """Example has eight part numbers."""
        parts = find_part_numbers(read_grid(EXAMPLE.splitlines()))
        assert sum(part.value for part in parts) == 4361
        assert len(parts) == 8

    def test_find_gears(self) -> None:
        """Only gears touching exactly two numbers are returned."""
        assert find_gears(read_grid(EXAMPLE.splitlines())) == {Coord(1, 3), Coord(8, 5)}


class TestRenderGrid:
    """Tests for boxed schematic rendering."""

    def test_plain(self) -> None:
        """Without colour the schematic is boxed and padding is stripped."""
        grid = read_grid(["1*2", "..."])
        assert render_grid(grid, color=False, padded=True) == "┌───┐\n│1*2│\n│...│\n└───┘"

    def test_ragged_rows_filled(self) -> None:
        """Short rows are filled out to the widest row."""
        grid = read_grid(["12#", "3"])
        assert render_grid(grid, color=False, padded=True) == "┌───┐\n│12#│\n│3  │\n└───┘"

    def test_unpadded_grid_keeps_trailing_blanks(self) -> None:
        """Trailing blanks of an unpadded grid are real cells and are drawn."""
        grid = read_grid(["1.."], pad=False)
        assert render_grid(grid, color=False) == "┌───┐\n│1..│\n└───┘"

    def test_padding_drawn_unless_padded(self) -> None:
        """A padded grid rendered as unpadded shows its pad character."""
        grid = read_grid(["1"])
        assert render_grid(grid, color=False) == "┌──┐\n│1.│\n└──┘"

    def test_part_number_digits_coloured(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Every digit of a part number is green, other numbers are not."""
        fake_chalk = SimpleNamespace(
            green=lambda text: f"<g:{text}>",
            yellowBright=lambda text: f"<y:{text}>",
            red=lambda text: f"<r:{text}>",
            white=lambda text: text,
        )
        monkeypatch.setattr(ascii_render, "chalk", fake_chalk)
        grid = read_grid(["12*3..45"])
        assert render_grid(grid, padded=True) == (
            "┌────────┐\n│<g:1><g:2><y:*><g:3>..45│\n└────────┘"
        )

    def test_colour_preserves_text(self) -> None:
        """Coloured output shows the same characters as plain output."""
        grid = read_grid(EXAMPLE.splitlines())
        coloured = render_grid(grid)
        assert ANSI_ESCAPE.sub("", coloured) == render_grid(grid, color=False)

    def test_explicit_highlights(self) -> None:
        """Supplied part numbers and gears are used as given."""
        grid = read_grid(["1*2"])
        rendered = render_grid(grid, part_numbers=[], gears=[], color=False, padded=True)
        assert rendered == "┌───┐\n│1*2│\n└───┘"
