# main.py
import argparse
import logging
from pathlib import Path
from typing import List, Optional

import pygame  # type: ignore

from .config import BACK_COLOR, DEFAULT_MAP, GRID_W, GRID_H, Config
from .draw import to_coord
from .game import Game

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> Config:
    p = argparse.ArgumentParser(prog="wrapsnake", description="Snake on a wrap-around grid.")
    p.add_argument("map", nargs="?", type=Path, default=DEFAULT_MAP,
                   help="map file ('#' wall, '@' food, ' ' empty); defaults to the bundled map")
    p.add_argument("--seed", type=int, default=None, help="seed for food placement")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = p.parse_args(argv)
    return Config(seed=args.seed, map_path=args.map, width=GRID_W, height=GRID_H,
                  verbose=args.verbose)


def main(argv: Optional[List[str]] = None) -> int:
    cfg = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if cfg.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    game = Game(cfg.width, cfg.height, seed=cfg.seed)
    try:
        game.load_map(cfg.map_path)
    # MapFormatError and UnicodeDecodeError are both ValueErrors
    except (OSError, ValueError) as e:
        logger.error("Could not load map %s: %s", cfg.map_path, e)
        return 1

    pygame.init()
    screen = pygame.display.set_mode((to_coord(cfg.width), to_coord(cfg.height)))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    running = True
    while running:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    game.key_pressed(event.key)

        # 2) update; movement is gated on elapsed time inside Game
        dt = clock.tick(60) / 1000.0
        game.update(dt)

        # 3) render
        screen.fill(BACK_COLOR)
        game.draw(screen)
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
