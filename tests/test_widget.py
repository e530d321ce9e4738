import random

import pygame
import pytest

from src.snake.clock import MOVE_EVENT
from src.snake.config import Config, LEFT, UP
from src.snake.game import GameStatus
from src.snake.render import restart_button_rect
from src.snake.widget import SnakeWidget


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def tick():
    return pygame.event.Event(MOVE_EVENT)


@pytest.fixture
def widget(timer_calls):
    w = SnakeWidget(Config(seed=3, move_every_ms=150), rng=random.Random(3))
    yield w
    w.close()


def end_game(widget):
    widget.handle_event(key(pygame.K_UP))
    widget.state.snake = [(5, 5), (5, 4), (6, 4), (6, 5)]
    widget.state.direction = widget.state.pending = (1, 0)
    widget.handle_event(tick())
    assert widget.state.status is GameStatus.GAME_OVER


def test_ticks_ignored_until_started(widget, timer_calls):
    widget.handle_event(tick())
    assert widget.state.snake == [(7, 7)]
    assert timer_calls == []


def test_key_starts_game_and_clock(widget, timer_calls):
    widget.state.food = (0, 0)
    widget.handle_event(key(pygame.K_a))
    assert widget.state.status is GameStatus.RUNNING
    assert timer_calls == [(MOVE_EVENT, 150)]

    widget.handle_event(tick())
    assert widget.state.head == (6, 7)
    assert widget.state.direction == LEFT


def test_more_keys_do_not_rearm_clock(widget, timer_calls):
    widget.handle_event(key(pygame.K_UP))
    widget.handle_event(key(pygame.K_LEFT))
    widget.handle_event(key(pygame.K_RIGHT))
    assert timer_calls == [(MOVE_EVENT, 150)]


def test_game_over_stops_clock(widget, timer_calls):
    end_game(widget)
    assert timer_calls[-1] == (MOVE_EVENT, 0)
    assert not widget.clock.active

    snake = list(widget.state.snake)
    widget.handle_event(tick())
    widget.handle_event(key(pygame.K_LEFT))
    assert widget.state.snake == snake
    assert widget.state.status is GameStatus.GAME_OVER


def test_restart_key(widget):
    end_game(widget)
    widget.handle_event(key(pygame.K_r))
    assert widget.state.status is GameStatus.NOT_STARTED
    assert widget.state.snake == [(7, 7)]
    assert widget.state.direction == UP
    assert widget.state.score == 0


def test_restart_button_click(widget):
    end_game(widget)
    click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=restart_button_rect().center)
    widget.handle_event(click)
    assert widget.state.status is GameStatus.NOT_STARTED


def test_click_outside_button_does_nothing(widget):
    end_game(widget)
    click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(1, 1))
    widget.handle_event(click)
    assert widget.state.status is GameStatus.GAME_OVER


def test_restart_key_ignored_while_running(widget):
    widget.handle_event(key(pygame.K_UP))
    widget.handle_event(key(pygame.K_r))
    assert widget.state.status is GameStatus.RUNNING


def test_swipe_starts_game(widget, timer_calls):
    widget.handle_event(pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5))
    widget.handle_event(pygame.event.Event(pygame.FINGERUP, x=0.1, y=0.5))
    assert widget.state.status is GameStatus.RUNNING
    assert widget.state.pending == LEFT
    assert timer_calls == [(MOVE_EVENT, 150)]


def test_close_stops_clock(widget, timer_calls):
    widget.handle_event(key(pygame.K_UP))
    widget.close()
    assert timer_calls[-1] == (MOVE_EVENT, 0)
    assert not widget.clock.active
