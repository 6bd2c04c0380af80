import os

# Headless pygame for surface tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest  # noqa: E402

from wrapsnake.game import Game  # noqa: E402


@pytest.fixture
def game():
    """10x10 board, no walls, seeded food."""
    return Game(10, 10, seed=0)
