# controls.py
from __future__ import annotations
from typing import Optional, Tuple
import logging

import pygame # type: ignore

from .config import UP, DOWN, LEFT, RIGHT, CFG
from .game import GameState, GameStatus, Direction, is_opposite

logger = logging.getLogger(__name__)

# pygame reports letter keys by their lowercase code whatever the shift state,
# so WASD is case-insensitive here without extra work.
KEY_DIRECTIONS = {
    pygame.K_UP: UP,    pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}


def direction_for_key(key: int) -> Optional[Direction]:
    return KEY_DIRECTIONS.get(key)

def direction_for_swipe(dx: float, dy: float, threshold: float = CFG.swipe_threshold) -> Optional[Direction]:
    """Dominant axis wins; movement within the threshold is not a swipe."""
    if abs(dx) > abs(dy):
        if dx > threshold:
            return RIGHT
        if dx < -threshold:
            return LEFT
    else:
        if dy > threshold:
            return DOWN
        if dy < -threshold:
            return UP
    return None

def request_direction(state: GameState, cand: Direction) -> bool:
    """
    Apply a direction intent to the shared state.
    - Ignored once the game is over.
    - The first intent starts the game.
    - 180° turns are checked against the committed direction, not against an
      earlier intent from the same tick. The latest valid intent wins.
    Returns True if `cand` became the pending direction.
    """
    if state.status is GameStatus.GAME_OVER:
        return False

    if state.status is GameStatus.NOT_STARTED:
        state.status = GameStatus.RUNNING
        logger.info("Game started")

    if is_opposite(cand, state.direction):
        logger.debug("Rejected reversal %s (moving %s)", cand, state.direction)
        return False

    state.pending = cand
    return True

def handle_key(state: GameState, key: int) -> bool:
    cand = direction_for_key(key)
    if cand is None:
        return False
    return request_direction(state, cand)


class SwipeTracker:
    """
    Turns a touch-start / touch-end pair into a direction intent.

    pygame finger events carry coordinates normalised to [0, 1]; they are
    scaled by the surface size so the threshold is measured in pixels.
    """

    def __init__(self, size: Tuple[int, int], threshold: float = CFG.swipe_threshold):
        self.width, self.height = size
        self.threshold = threshold
        self.start: Optional[Tuple[float, float]] = None

    def _to_pixels(self, x: float, y: float) -> Tuple[float, float]:
        return x * self.width, y * self.height

    def begin(self, x: float, y: float) -> None:
        self.start = self._to_pixels(x, y)

    def end(self, state: GameState, x: float, y: float) -> bool:
        if self.start is None:
            return False
        sx, sy = self.start
        self.start = None
        if state.status is GameStatus.GAME_OVER:
            return False

        ex, ey = self._to_pixels(x, y)
        cand = direction_for_swipe(ex - sx, ey - sy, self.threshold)
        if cand is None:
            logger.debug("Ignored swipe (%.1f, %.1f)", ex - sx, ey - sy)
            return False
        return request_direction(state, cand)
