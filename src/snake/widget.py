# widget.py
from __future__ import annotations
from typing import Optional
import logging
import random

import pygame # type: ignore

from .config import WIDTH, HEIGHT, CFG, Config
from .clock import GameClock, MOVE_EVENT
from .controls import SwipeTracker, handle_key
from .game import GameState, GameStatus, new_game_state, restart, step_game
from .render import draw_game, restart_button_rect

logger = logging.getLogger(__name__)

RESTART_KEYS = (pygame.K_r, pygame.K_RETURN)


class SnakeWidget:
    """
    The game as one component: owns the shared GameState, the swipe tracker
    and the clock, and routes pygame events to them.

    Handlers never capture state values; they read `self.state` when called,
    and restart resets that same object in place.
    """

    def __init__(self, cfg: Config = CFG, rng: Optional[random.Random] = None):
        self.cfg = cfg
        self.state: GameState = new_game_state(rng if rng is not None else random.Random(cfg.seed))
        self.swipe = SwipeTracker((WIDTH, HEIGHT), cfg.swipe_threshold)
        self.clock = GameClock(cfg.move_every_ms)

    # ---------- Events ----------
    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == MOVE_EVENT:
            self.tick()
        elif event.type == pygame.KEYDOWN:
            if self.state.status is GameStatus.GAME_OVER:
                if event.key in RESTART_KEYS:
                    self.restart()
                return
            handle_key(self.state, event.key)
            self.clock.sync(self.state.status)
        elif event.type == pygame.FINGERDOWN:
            self.swipe.begin(event.x, event.y)
        elif event.type == pygame.FINGERUP:
            self.swipe.end(self.state, event.x, event.y)
            self.clock.sync(self.state.status)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.state.status is GameStatus.GAME_OVER and restart_button_rect().collidepoint(event.pos):
                self.restart()

    def tick(self) -> None:
        # Move events already queued when the game stopped are dropped here
        if self.state.status is not GameStatus.RUNNING:
            return
        step_game(self.state)
        self.clock.sync(self.state.status)

    # ---------- Lifecycle ----------
    def restart(self) -> None:
        self.clock.stop()
        restart(self.state)
        self.swipe.start = None

    def draw(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        draw_game(screen, font, self.state)

    def close(self) -> None:
        self.clock.stop()
        self.swipe.start = None
        logger.info("Widget closed (score %d)", self.state.score)
