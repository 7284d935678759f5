# render.py
from typing import List, Optional, Tuple

import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import (
    CELL_SIZE, HUD_HEIGHT,
    BG, GRID, GREEN, HEAD_GREEN, GHOST, RED, GOLD, TEXT, DIM,
)
from .game import BODY, EMPTY, FOOD, HEAD, GameSnapshot
from .leaderboard import ScoreEntry
from .powerups import Skill

SKILL_LABELS = (
    (Skill.SLOW, "1 Slow"),
    (Skill.DOUBLE, "2 x2"),
    (Skill.GHOST, "3 Ghost"),
    (Skill.MULTI_FOOD, "4 Multi"),
    (Skill.CUT, "5 Cut"),
)


def window_size(board_size: int, cell_size: int = CELL_SIZE) -> Tuple[int, int]:
    return board_size * cell_size, board_size * cell_size + HUD_HEIGHT


def draw_cell(screen: pygame.Surface, gx: int, gy: int, color, cell_size: int = CELL_SIZE) -> None:
    rect = pygame.Rect(gx * cell_size, HUD_HEIGHT + gy * cell_size, cell_size, cell_size)
    pygame.draw.rect(screen, color, rect)


def cell_colors(snap: GameSnapshot) -> List[Tuple[int, int, Tuple[int, int, int]]]:
    """Non-empty board cells with their fill color; the body is tinted while ghost is active."""
    palette = {
        FOOD: RED,
        BODY: GHOST if snap.powerups[Skill.GHOST].active else GREEN,
        HEAD: HEAD_GREEN,
    }
    board = snap.occupancy()
    return [(int(x), int(y), palette[int(board[y, x])]) for y, x in np.argwhere(board != EMPTY)]


def draw_game(
    screen: pygame.Surface,
    font: pygame.font.Font,
    snap: GameSnapshot,
    top: Optional[ScoreEntry] = None,
    cell_size: int = CELL_SIZE,
) -> None:
    screen.fill(BG)
    board_px = snap.board_size * cell_size
    pygame.draw.rect(screen, GRID, pygame.Rect(0, HUD_HEIGHT, board_px, board_px))

    for x, y, color in cell_colors(snap):
        draw_cell(screen, x, y, color, cell_size)

    # HUD
    score_txt = font.render(f"Score: {snap.score}", True, GOLD if snap.evolved else TEXT)
    screen.blit(score_txt, (8, 6))
    if top is not None:
        top_txt = font.render(f"Top: {top.name} {top.score}", True, DIM)
        screen.blit(top_txt, (board_px - top_txt.get_width() - 8, 6))

    x = 8
    for skill, label in SKILL_LABELS:
        state = snap.powerups[skill]
        if state.active:
            color = GOLD
            label = f"{label} {state.ticks_elapsed}"
        elif state.used_ever:
            color = DIM
        else:
            color = TEXT
        txt = font.render(label, True, color)
        screen.blit(txt, (x, 30))
        x += txt.get_width() + 14


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int, message: str = "") -> None:
    width, height = screen.get_size()
    # Dim with translucent overlay
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    lines = ["GAME OVER", f"Score: {score}"]
    if message:
        lines.append(message)
    lines.append("Press R to restart")

    y = height // 2 - 16 * len(lines)
    for line in lines:
        txt = font.render(line, True, (240, 240, 250))
        screen.blit(txt, txt.get_rect(center=(width // 2, y)))
        y += 30
