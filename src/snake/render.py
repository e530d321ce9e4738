# render.py
from __future__ import annotations
from enum import IntEnum
from typing import Optional, Tuple

import numpy as np  # type: ignore
import pygame       # type: ignore

from .config import (
    WIDTH, BOARD_SIZE, CELL_SIZE, BOARD_PAD, HUD_H,
    BG, CARD, BORDER, ACCENT, ACCENT_LIGHT, FOOD, RED, TEXT, MUTED,
)
from .game import GameState, GameStatus

BOARD_TOP = HUD_H
FOOTER_TOP = BOARD_TOP + BOARD_SIZE * CELL_SIZE + 2 * BOARD_PAD

HINTS = ("Use arrow keys or WASD to move", "On mobile, swipe to control")


class CellKind(IntEnum):
    EMPTY = 0
    BODY = 1
    HEAD = 2
    FOOD = 3


# ---------- Board snapshot ----------
def board_grid(state: GameState) -> np.ndarray:
    """
    BOARD_SIZE x BOARD_SIZE int8 array indexed [y, x] with a CellKind per cell.
    The head is written last so it wins over the body.
    """
    grid = np.full((BOARD_SIZE, BOARD_SIZE), CellKind.EMPTY, dtype=np.int8)
    if state.food is not None:
        fx, fy = state.food
        grid[fy, fx] = CellKind.FOOD
    for x, y in state.snake[1:]:
        grid[y, x] = CellKind.BODY
    hx, hy = state.head
    grid[hy, hx] = CellKind.HEAD
    return grid

def status_message(state: GameState) -> Optional[str]:
    if state.status is GameStatus.GAME_OVER:
        return "Game Over!"
    if state.status is GameStatus.NOT_STARTED:
        return "Press any key to start"
    return None

def cell_rect(gx: int, gy: int) -> pygame.Rect:
    return pygame.Rect(
        BOARD_PAD + gx * CELL_SIZE,
        BOARD_TOP + BOARD_PAD + gy * CELL_SIZE,
        CELL_SIZE,
        CELL_SIZE,
    )

def restart_button_rect() -> pygame.Rect:
    rect = pygame.Rect(0, 0, 140, 36)
    rect.center = (WIDTH // 2, FOOTER_TOP + 28)
    return rect


# ---------- Draw ----------
CELL_COLORS = {
    CellKind.BODY: ACCENT_LIGHT,
    CellKind.HEAD: ACCENT,
    CellKind.FOOD: FOOD,
}

def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = cell_rect(gx, gy).inflate(-2, -2)
    pygame.draw.rect(screen, color, rect, border_radius=3)

def draw_board(screen: pygame.Surface, state: GameState) -> None:
    card = pygame.Rect(0, BOARD_TOP, WIDTH, BOARD_SIZE * CELL_SIZE + 2 * BOARD_PAD)
    pygame.draw.rect(screen, CARD, card, border_radius=8)
    pygame.draw.rect(screen, BORDER, card, width=1, border_radius=8)

    grid = board_grid(state)
    for gy in range(BOARD_SIZE):
        for gx in range(BOARD_SIZE):
            kind = CellKind(int(grid[gy, gx]))
            if kind is CellKind.EMPTY:
                pygame.draw.rect(screen, BORDER, cell_rect(gx, gy), width=1)
            else:
                draw_cell(screen, gx, gy, CELL_COLORS[kind])

def draw_hud(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    txt = font.render(f"Score: {state.score}", True, ACCENT)
    screen.blit(txt, (BOARD_PAD, 10))

    msg = status_message(state)
    if msg:
        color = RED if state.status is GameStatus.GAME_OVER else MUTED
        surf = font.render(msg, True, color)
        screen.blit(surf, surf.get_rect(topright=(WIDTH - BOARD_PAD, 10)))

def draw_footer(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    if state.status is GameStatus.GAME_OVER:
        rect = restart_button_rect()
        pygame.draw.rect(screen, ACCENT, rect, border_radius=8)
        label = font.render("Play Again", True, TEXT)
        screen.blit(label, label.get_rect(center=rect.center))
    elif state.status is GameStatus.NOT_STARTED:
        for i, line in enumerate(HINTS):
            surf = font.render(line, True, MUTED)
            screen.blit(surf, surf.get_rect(center=(WIDTH // 2, FOOTER_TOP + 18 + i * 22)))

def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    screen.fill(BG)
    draw_hud(screen, font, state)
    draw_board(screen, state)
    draw_footer(screen, font, state)
