import os
import random

# Headless pygame; must be set before pygame initialises a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from src.snake.game import GameStatus, new_game_state  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def running_state(rng):
    state = new_game_state(rng)
    state.status = GameStatus.RUNNING
    return state


@pytest.fixture
def timer_calls(monkeypatch):
    """Record pygame.time.set_timer calls instead of arming real timers."""
    calls = []
    monkeypatch.setattr(pygame.time, "set_timer", lambda event, ms: calls.append((event, ms)))
    return calls
