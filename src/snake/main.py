# main.py
from __future__ import annotations
import argparse
import logging

import pygame # type: ignore

from .config import WIDTH, HEIGHT, Config
from .widget import SnakeWidget

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    defaults = Config()
    p = argparse.ArgumentParser(description="Play Snake on a 15x15 wrap-around board.")
    p.add_argument("--seed", type=int, default=defaults.seed, help="seed for food placement")
    p.add_argument("--speed-ms", type=int, default=defaults.move_every_ms, help="ms per move")
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = Config(seed=args.seed, move_every_ms=args.speed_ms)

    pygame.init()
    try:
        font = pygame.font.SysFont(None, 24)
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Snake")
        clock = pygame.time.Clock()

        widget = SnakeWidget(cfg)
        logger.info("Snake ready (seed=%s, %d ms per move)", cfg.seed, cfg.move_every_ms)
        try:
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                        break
                    widget.handle_event(event)

                widget.draw(screen, font)
                pygame.display.flip()
                clock.tick(cfg.fps)  # redraw rate; movement is driven by the game clock
        finally:
            widget.close()
    finally:
        pygame.quit()

if __name__ == "__main__":
    main()
