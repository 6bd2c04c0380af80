"""Snake on a wrap-around grid, with walls loaded from text maps."""

from .game import Game, Phase
from .maps import MapFormatError, MapLayout, parse_map, read_map
from .snake import Block, Direction, Snake

__all__ = [
    "Game", "Phase",
    "MapFormatError", "MapLayout", "parse_map", "read_map",
    "Block", "Direction", "Snake",
]
