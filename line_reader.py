"""
Puzzle input reading.

Every solver consumes its input as plain lines of text. Lines that cannot be
decoded are dropped rather than aborting the whole read.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Generator, Iterable, Iterator

logger = logging.getLogger(__name__)

__all__ = ["PAD_CHAR", "read_to_lines", "read_file_lines", "read_grid"]

# Appended to every schematic row so a number in the last column is still closed
PAD_CHAR = "."


def read_to_lines(stream: IO[bytes] | IO[str] | Iterable[bytes | str]) -> Iterator[str]:
    """
    Lazily yield the lines of a stream without their line terminators.

    Byte lines that are not valid UTF-8 are skipped.

    Args:
        stream: Binary or text file object (or any iterable of lines)

    Returns:
        Iterator over decoded lines
    """
    for line_no, raw in enumerate(stream, start=1):
        if isinstance(raw, bytes):
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                logger.debug("read_to_lines: dropping undecodable line %d (%s)", line_no, exc)
                continue
        else:
            line = raw
        yield line.rstrip("\r\n")


def read_file_lines(file_path: str | Path) -> _ClosingLines:
    """
    Open a file and lazily yield its lines.

    The file is opened immediately so a missing or unreadable path raises
    here, not on first iteration. The handle is closed once the iterator is
    exhausted or closed; use it as a context manager, or call close(), when it
    may not be read to the end.

    Raises:
        OSError: If the file cannot be opened
    """
    handle = open(file_path, "rb")
    logger.info("read_file_lines: reading %s", file_path)

    def lines() -> Generator[str, None, None]:
        with handle:
            yield from read_to_lines(handle)

    return _ClosingLines(handle, lines())


class _ClosingLines:
    """Line iterator that closes its file even if iteration never started."""

    def __init__(self, handle: IO[bytes], lines: Generator[str, None, None]) -> None:
        self.handle = handle
        self.lines = lines

    def __iter__(self) -> _ClosingLines:
        return self

    def __next__(self) -> str:
        return next(self.lines)

    def close(self) -> None:
        self.lines.close()
        self.handle.close()

    def __enter__(self) -> _ClosingLines:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def read_grid(lines: Iterable[str], pad: bool = True) -> list[list[str]]:
    """
    Build a character grid, one row per line.

    Args:
        lines: Lines of the schematic
        pad: Append PAD_CHAR to every row (default True)

    Returns:
        Rows of single-character strings; rows may differ in length
    """
    grid = [list(line + PAD_CHAR) if pad else list(line) for line in lines]
    logger.info("read_grid: %d rows (padded=%s)", len(grid), pad)
    return grid
