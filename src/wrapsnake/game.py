# game.py
from enum import Enum
from pathlib import Path
from typing import Optional, Set, Union
import logging

import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import (
    FOOD_COLOR, BORDER_COLOR, GAMEOVER_COLOR,
    MOVING_PERIOD, RESTART_TIME, MAX_FOOD_ATTEMPTS,
    SPAWN_X, SPAWN_Y,
)
from .draw import draw_block, draw_rectangle
from .maps import read_map
from .snake import Block, Direction, Snake

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


class Phase(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Game:
    """
    Single-player snake on a width x height wrap-around board.

    Driven by three calls from the frame loop: update(dt), key_pressed(key)
    and draw(screen). A blocked move never raises; it switches the game to
    GAME_OVER, and the board resets once RESTART_TIME has elapsed.
    """

    def __init__(self, width: int, height: int, seed: Optional[int] = None):
        self.width = width
        self.height = height
        self.snake = Snake(SPAWN_X, SPAWN_Y, width - 1, height - 1)
        self.blocks: Set[Block] = set()

        self.food_exists = False
        self.food_x = 0
        self.food_y = 0

        self.game_over = False
        self.waiting_time = 0.0
        self.rng = np.random.default_rng(seed)

    @property
    def phase(self) -> Phase:
        return Phase.GAME_OVER if self.game_over else Phase.PLAYING

    # ---------- Input / Update / Draw ----------
    def key_pressed(self, key: int) -> None:
        if self.game_over:
            return

        direction = KEY_DIRECTIONS.get(key)
        if direction is None:
            return
        # No 180° turns
        if direction == self.snake.head_direction().opposite():
            return

        self.update_snake(direction)

    def update(self, delta_time: float) -> None:
        self.waiting_time += delta_time

        if self.game_over:
            if self.waiting_time > RESTART_TIME:
                self.restart()
            return

        if not self.food_exists:
            self.add_food()

        if self.waiting_time > MOVING_PERIOD:
            self.update_snake(None)

    def draw(self, screen: pygame.Surface) -> None:
        self.snake.draw(screen)

        if self.food_exists:
            draw_block(FOOD_COLOR, self.food_x, self.food_y, screen)

        for b in self.blocks:
            draw_block(BORDER_COLOR, b.x, b.y, screen)

        if self.game_over:
            draw_rectangle(GAMEOVER_COLOR, 0, 0, self.width, self.height, screen)

    # ---------- Rules ----------
    def update_snake(self, direction: Optional[Direction]) -> None:
        """One forward step: move and maybe eat, or end the game if blocked."""
        if self.check_if_snake_alive(direction):
            self.snake.move_forward(direction)
            self.check_eating()
        else:
            self.game_over = True
            logger.info("Game over at %s", self.snake.next_head(direction))
        self.waiting_time = 0.0

    def check_if_snake_alive(self, direction: Optional[Direction]) -> bool:
        next_x, next_y = self.snake.next_head(direction)
        overlap = self.snake.overlap_tail(next_x, next_y)
        crash = self.check_in_blocks(next_x, next_y)
        return not overlap and not crash

    def check_eating(self) -> None:
        head_x, head_y = self.snake.head_position()
        if self.food_exists and self.food_x == head_x and self.food_y == head_y:
            self.food_exists = False
            self.snake.restore_tail()

    def check_in_blocks(self, x: int, y: int) -> bool:
        return Block(x, y) in self.blocks

    def is_free(self, x: int, y: int) -> bool:
        return not self.snake.occupies(x, y) and not self.check_in_blocks(x, y)

    def add_food(self) -> bool:
        """
        Put food on a random free interior cell (the outer ring is excluded).

        Tries MAX_FOOD_ATTEMPTS random cells first, then picks uniformly among
        the remaining free ones. Returns False, leaving no food, when the
        interior is full.
        """
        if self.width < 3 or self.height < 3:
            return False

        for _ in range(MAX_FOOD_ATTEMPTS):
            x = int(self.rng.integers(1, self.width - 1))
            y = int(self.rng.integers(1, self.height - 1))
            if self.is_free(x, y):
                self._set_food(x, y)
                return True

        free = [
            (x, y)
            for y in range(1, self.height - 1)
            for x in range(1, self.width - 1)
            if self.is_free(x, y)
        ]
        if not free:
            logger.debug("No free cell for food")
            return False
        x, y = free[int(self.rng.integers(len(free)))]
        self._set_food(x, y)
        return True

    def _set_food(self, x: int, y: int) -> None:
        self.food_x = x
        self.food_y = y
        self.food_exists = True
        logger.debug("Food placed at (%d, %d)", x, y)

    def restart(self) -> None:
        self.snake = Snake(SPAWN_X, SPAWN_Y, self.width - 1, self.height - 1)
        self.waiting_time = 0.0
        self.food_exists = False
        self.game_over = False
        logger.info("Restarted")

    # ---------- Map ----------
    def load_map(self, path: Union[str, Path]) -> None:
        """Add the walls (and food, if any) from a map file to the board."""
        layout = read_map(path, self.width, self.height)
        self.blocks.update(layout.blocks)
        if layout.food is not None:
            self._set_food(layout.food.x, layout.food.y)
