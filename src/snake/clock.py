# clock.py
import logging

import pygame # type: ignore

from .config import CFG
from .game import GameStatus

logger = logging.getLogger(__name__)

MOVE_EVENT = pygame.USEREVENT + 1


class GameClock:
    """
    Posts MOVE_EVENT every `interval_ms` while the game is running.

    pygame keeps one timer per event type and `set_timer` replaces it, so
    there is never more than one tick source for a period.
    """

    def __init__(self, interval_ms: int = CFG.move_every_ms):
        self.interval_ms = interval_ms
        self.active = False

    def start(self) -> None:
        if self.active:
            return
        pygame.time.set_timer(MOVE_EVENT, self.interval_ms)
        self.active = True
        logger.debug("Clock started (%d ms)", self.interval_ms)

    def stop(self) -> None:
        if not self.active:
            return
        pygame.time.set_timer(MOVE_EVENT, 0)
        self.active = False
        logger.debug("Clock stopped")

    def sync(self, status: GameStatus) -> None:
        """Tick only while running."""
        if status is GameStatus.RUNNING:
            self.start()
        else:
            self.stop()
