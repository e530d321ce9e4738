from dataclasses import dataclass
from typing import Optional

# ----- Board -----
BOARD_SIZE = 15
START_CELL = (BOARD_SIZE // 2, BOARD_SIZE // 2)

# ----- Window & layout (pixels) -----
CELL_SIZE = 24
BOARD_PAD = 8
HUD_H = 40
FOOTER_H = 64
WIDTH = BOARD_SIZE * CELL_SIZE + 2 * BOARD_PAD
HEIGHT = HUD_H + BOARD_SIZE * CELL_SIZE + 2 * BOARD_PAD + FOOTER_H

# ----- Colors -----
BG     = (20, 20, 24)
CARD   = (32, 32, 40)
BORDER = (52, 52, 64)
ACCENT = (0, 82, 255)
ACCENT_LIGHT = (120, 160, 255)
FOOD   = (34, 197, 94)
RED    = (239, 68, 68)
TEXT   = (220, 220, 230)
MUTED  = (140, 140, 155)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None     # None -> fresh entropy every run
    move_every_ms: int = 150
    swipe_threshold: int = 20      # pixels
    fps: int = 60

CFG = Config()
