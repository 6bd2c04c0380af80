# config.py
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# ----- Grid & window -----
GRID_W, GRID_H = 30, 30
BLOCK_SIZE = 25  # pixels per grid cell

# ----- Colors (RGBA) -----
BACK_COLOR     = (128, 128, 128, 255)
SNAKE_COLOR    = (0, 204, 0, 255)
FOOD_COLOR     = (204, 0, 0, 255)
BORDER_COLOR   = (0, 0, 0, 255)
GAMEOVER_COLOR = (230, 0, 0, 128)

# ----- Timing (seconds) -----
MOVING_PERIOD = 0.2
RESTART_TIME = 1.0

# ----- Spawn -----
SPAWN_X, SPAWN_Y = 2, 2

# Rejection-sampling budget before add_food scans the free cells
MAX_FOOD_ATTEMPTS = 1000

# ----- Maps -----
MAPS_DIR = Path(__file__).resolve().parent / "levels"
DEFAULT_MAP = MAPS_DIR / "1.txt"


@dataclass
class Config:
    seed: Optional[int] = None
    map_path: Path = DEFAULT_MAP
    width: int = GRID_W
    height: int = GRID_H
    verbose: bool = False
