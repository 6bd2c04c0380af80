# draw.py
from typing import Tuple

import pygame  # type: ignore

from .config import BLOCK_SIZE

Color = Tuple[int, int, int, int]


def to_coord(game_coord: int) -> int:
    """Grid cells -> pixels."""
    return game_coord * BLOCK_SIZE


def draw_block(color: Color, x: int, y: int, screen: pygame.Surface) -> None:
    rect = pygame.Rect(to_coord(x), to_coord(y), BLOCK_SIZE, BLOCK_SIZE)
    pygame.draw.rect(screen, color, rect)


def draw_rectangle(color: Color, x: int, y: int, width: int, height: int,
                   screen: pygame.Surface) -> None:
    """Filled rectangle measured in cells; translucent colors are alpha-blended."""
    size = (to_coord(width), to_coord(height))
    pos = (to_coord(x), to_coord(y))
    if len(color) == 4 and color[3] < 255:
        overlay = pygame.Surface(size, pygame.SRCALPHA)
        overlay.fill(color)
        screen.blit(overlay, pos)
    else:
        pygame.draw.rect(screen, color, pygame.Rect(pos, size))
