# game.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Optional
import logging
import random

from .config import BOARD_SIZE, START_CELL, UP

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]
Direction = Tuple[int, int]

# Rejection sampling gives up after this many misses and enumerates free cells
MAX_FOOD_ATTEMPTS = 1000


class GameStatus(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"


# ---------- Helpers ----------
def spawn_food(snake: List[Cell], rng: random.Random, board_size: int = BOARD_SIZE) -> Optional[Cell]:
    """
    Pick a cell not occupied by the snake.

    Uniform rejection sampling first; if that keeps missing (a nearly full
    board) fall back to choosing among the free cells directly. Returns None
    only when the snake covers the whole board.
    """
    occupied = set(snake)
    for _ in range(MAX_FOOD_ATTEMPTS):
        cell = (rng.randrange(board_size), rng.randrange(board_size))
        if cell not in occupied:
            return cell

    free = [
        (x, y)
        for y in range(board_size)
        for x in range(board_size)
        if (x, y) not in occupied
    ]
    if not free:
        logger.warning("No free cell left for food (snake length %d)", len(snake))
        return None
    return rng.choice(free)

def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def wrap(cell: Cell, direction: Direction, board_size: int = BOARD_SIZE) -> Cell:
    """Move one cell in `direction` on a toroidal board."""
    return ((cell[0] + direction[0]) % board_size, (cell[1] + direction[1]) % board_size)


# ---------- Pure transition ----------
@dataclass(frozen=True)
class StepResult:
    snake: List[Cell]
    food: Optional[Cell]
    score_delta: int
    game_over: bool

def advance(
    snake: List[Cell],
    direction: Direction,
    food: Optional[Cell],
    rng: random.Random,
    board_size: int = BOARD_SIZE,
) -> StepResult:
    """
    One tick of the board. Does not mutate its inputs.
    - Self collision (tail included, it has not moved yet) ends the game and
      returns snake and food unchanged.
    - Eating grows the snake by one and relocates the food.
    - Otherwise the snake shifts by one cell.
    """
    new_head = wrap(snake[0], direction, board_size)

    if new_head in snake:
        return StepResult(snake=list(snake), food=food, score_delta=0, game_over=True)

    if new_head == food:
        grown = [new_head] + snake
        return StepResult(
            snake=grown,
            food=spawn_food(grown, rng, board_size),
            score_delta=1,
            game_over=False,
        )

    return StepResult(snake=[new_head] + snake[:-1], food=food, score_delta=0, game_over=False)


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]                  # head at index 0
    direction: Direction               # committed by the last tick
    pending: Direction                 # latest accepted intent
    food: Optional[Cell]
    score: int
    status: GameStatus
    rng: random.Random = field(repr=False, compare=False, default_factory=random.Random)

    @property
    def head(self) -> Cell:
        return self.snake[0]

def new_game_state(rng: Optional[random.Random] = None) -> GameState:
    rng = rng if rng is not None else random.Random()
    snake = [START_CELL]
    return GameState(
        snake=snake,
        direction=UP,
        pending=UP,
        food=spawn_food(snake, rng),
        score=0,
        status=GameStatus.NOT_STARTED,
        rng=rng,
    )

def restart(state: GameState) -> None:
    """Reset every entity in place; the clock stays off until the next intent."""
    fresh = new_game_state(state.rng)
    state.snake = fresh.snake
    state.direction = fresh.direction
    state.pending = fresh.pending
    state.food = fresh.food
    state.score = fresh.score
    state.status = fresh.status
    logger.info("Game restarted, food at %s", state.food)


# ---------- Update ----------
def step_game(state: GameState) -> bool:
    """
    Advance the game by one tick.
    Commits the pending direction, then applies `advance`.
    Returns True if alive, False if game over. No-op unless running.
    """
    if state.status is not GameStatus.RUNNING:
        return state.status is not GameStatus.GAME_OVER

    # Commit direction once per tick
    state.direction = state.pending

    result = advance(state.snake, state.direction, state.food, state.rng)
    if result.game_over:
        state.status = GameStatus.GAME_OVER
        logger.info("Game over at %s, score %d", state.head, state.score)
        return False

    state.snake = result.snake
    state.food = result.food
    state.score += result.score_delta
    if result.score_delta:
        logger.debug("Ate food, score %d, next food at %s", state.score, state.food)
    return True
