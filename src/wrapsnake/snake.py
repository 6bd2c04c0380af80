# snake.py
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Optional, Tuple

from .config import SNAKE_COLOR
from .draw import draw_block


class Direction(Enum):
    """Grid heading, valued by its (dx, dy) step. y grows downward."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


@dataclass(frozen=True)
class Block:
    x: int
    y: int


class Snake:
    """
    Snake body on a wrap-around grid.

    body: deque of Blocks, head at index 0, never empty
    tail: last segment popped by move_forward, kept for one regrowth
    max_x, max_y: largest valid coordinate on each axis (inclusive)
    """

    def __init__(self, x: int, y: int, max_x: int, max_y: int):
        self.body: Deque[Block] = deque([
            Block(x + 2, y),
            Block(x + 1, y),
            Block(x, y),
        ])
        self.direction = Direction.RIGHT
        self.tail: Optional[Block] = None
        self.max_x = max_x
        self.max_y = max_y

    def __len__(self) -> int:
        return len(self.body)

    def draw(self, screen) -> None:
        for block in self.body:
            draw_block(SNAKE_COLOR, block.x, block.y, screen)

    def head_position(self) -> Tuple[int, int]:
        head = self.body[0]
        return head.x, head.y

    def head_direction(self) -> Direction:
        return self.direction

    def next_head(self, direction: Optional[Direction] = None) -> Tuple[int, int]:
        """Where the head lands after one step in `direction` (or the current heading)."""
        hx, hy = self.head_position()
        dx, dy = (direction or self.direction).value
        nx, ny = hx + dx, hy + dy

        if nx < 0:
            nx = self.max_x
        elif nx > self.max_x:
            nx = 0
        if ny < 0:
            ny = self.max_y
        elif ny > self.max_y:
            ny = 0
        return nx, ny

    def move_forward(self, direction: Optional[Direction] = None) -> None:
        if direction is not None:
            self.direction = direction

        x, y = self.next_head(direction)
        self.body.appendleft(Block(x, y))
        self.tail = self.body.pop()

    def restore_tail(self) -> None:
        # Not guarded against a second call: that appends the same segment again.
        if self.tail is None:
            raise RuntimeError("restore_tail() called before any move")
        self.body.append(self.tail)

    def overlap_tail(self, x: int, y: int) -> bool:
        """True if (x, y) is on the body, ignoring the last segment (it moves away this step)."""
        last = len(self.body) - 1
        for i, block in enumerate(self.body):
            if i == last:
                break
            if block.x == x and block.y == y:
                return True
        return False

    def occupies(self, x: int, y: int) -> bool:
        return Block(x, y) in self.body
