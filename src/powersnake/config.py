from dataclasses import dataclass
from typing import Optional

# ----- Board -----
BOARD_SIZE = 20

# ----- Window (pygame front end only) -----
CELL_SIZE = 24
HUD_HEIGHT = 56

# ----- Colors -----
BG     = (20, 20, 24)
GRID   = (30, 30, 36)
GREEN  = (80, 200, 80)
HEAD_GREEN = (140, 240, 120)
GHOST  = (120, 160, 220)
RED    = (200, 70, 70)
GOLD   = (255, 215, 0)
TEXT   = (220, 220, 230)
DIM    = (110, 110, 120)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Initial session -----
INITIAL_SNAKE = ((8, 10), (7, 10), (6, 10))
INITIAL_DIRECTION = RIGHT

# ----- Tunables -----
@dataclass(frozen=True)
class Config:
    board_size: int = BOARD_SIZE
    base_interval_ms: int = 120
    interval_step_ms: int = 20
    points_per_speedup: int = 10
    min_interval_ms: int = 40
    powerup_duration: int = 99   # ticks a timed skill stays active
    multi_food_count: int = 5
    evolution_every: int = 10
    seed: Optional[int] = None

CFG = Config()
