# maps.py
"""
Text map loader.

One row per line, row index = y and column index = x:
  '#'  wall block
  '@'  food (the last one wins)
  ' '  empty
Anything else is a fatal format error. Rows and columns beyond the board
size are ignored.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Set, Union
import logging

from .snake import Block

logger = logging.getLogger(__name__)

WALL, FOOD, EMPTY = "#", "@", " "


class MapFormatError(ValueError):
    """Unexpected character in a map file."""

    def __init__(self, char: str, x: int, y: int):
        self.char = char
        self.x = x
        self.y = y
        super().__init__(f"Unexpected symbol {char!r} at row {y}, column {x}")


@dataclass
class MapLayout:
    blocks: Set[Block] = field(default_factory=set)
    food: Optional[Block] = None


def parse_map(lines: Iterable[str], width: int, height: int) -> MapLayout:
    layout = MapLayout()
    for y, line in enumerate(lines):
        if y >= height:
            continue
        # One terminator only: "\n" or "\r\n"
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        for x, c in enumerate(line):
            if x >= width:
                break
            if c == WALL:
                layout.blocks.add(Block(x, y))
            elif c == FOOD:
                layout.food = Block(x, y)
            elif c != EMPTY:
                raise MapFormatError(c, x, y)
    return layout


def read_map(path: Union[str, Path], width: int, height: int) -> MapLayout:
    """
    Read and parse a map file.

    OSError from opening or reading propagates, as does UnicodeDecodeError
    for a file that is not UTF-8. Lines end at LF; a CR before it is dropped.
    """
    with open(path, encoding="utf-8", newline="\n") as f:
        layout = parse_map(f, width, height)
    logger.info(
        "Loaded map %s: %d wall block(s), food %s",
        path, len(layout.blocks),
        (layout.food.x, layout.food.y) if layout.food else "none",
    )
    return layout
