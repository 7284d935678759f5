# main.py
import argparse
import logging
from typing import Optional

import pygame  # type: ignore

from .config import CELL_SIZE, CFG, Config, UP, DOWN, LEFT, RIGHT
from .game import GameEngine
from .leaderboard import (
    InMemoryLeaderboard, LeaderboardService, SubmitResult,
    fetch_top_score_safely, is_new_high_score, submit_score_safely,
)
from .powerups import Skill
from .render import draw_game, draw_game_over, window_size


KEY_DIRECTIONS = {
    pygame.K_UP: UP,    pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}

KEY_SKILLS = {
    pygame.K_1: Skill.SLOW,
    pygame.K_2: Skill.DOUBLE,
    pygame.K_3: Skill.GHOST,
    pygame.K_4: Skill.MULTI_FOOD,
    pygame.K_5: Skill.CUT,
}


def handle_key(engine: GameEngine, key: int) -> bool:
    """Route one key press to the engine. Returns True if the engine accepted it."""
    if key in KEY_DIRECTIONS:
        return engine.set_direction(KEY_DIRECTIONS[key])
    if key in KEY_SKILLS:
        return engine.activate_skill(KEY_SKILLS[key])
    if key == pygame.K_r:
        engine.restart()
        return True
    return False


def finish_game(engine: GameEngine, leaderboard: Optional[LeaderboardService], name: str) -> str:
    """
    Submit a new high score if there is one.

    A rejected submission (a higher score was posted meanwhile) restarts the
    game straight away. Returns a line for the game-over overlay.
    """
    if leaderboard is None:
        return ""
    score = engine.session.score
    top = fetch_top_score_safely(leaderboard)
    if not is_new_high_score(score, top):
        return ""
    result = submit_score_safely(leaderboard, name, score)
    if result is SubmitResult.ACCEPTED:
        return "New high score!"
    engine.restart()
    return ""


def run(cfg: Config = CFG, cell_size: int = CELL_SIZE, name: str = "player",
        leaderboard: Optional[LeaderboardService] = None) -> None:
    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode(window_size(cfg.board_size, cell_size))
    pygame.display.set_caption("Snake: power-ups")
    clock = pygame.time.Clock()

    engine = GameEngine(cfg)
    top = fetch_top_score_safely(leaderboard)
    last_tick = pygame.time.get_ticks()
    message = ""
    running = True

    while running:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif handle_key(engine, event.key) and event.key == pygame.K_r:
                    top = fetch_top_score_safely(leaderboard)
                    message = ""
                    last_tick = pygame.time.get_ticks()

        # 2) update, re-armed with the interval reported after every tick
        now = pygame.time.get_ticks()
        if not engine.session.game_over and now - last_tick >= engine.interval_ms:
            snap = engine.tick()
            last_tick = now
            if snap.game_over:
                message = finish_game(engine, leaderboard, name)
                if not engine.session.game_over:
                    top = fetch_top_score_safely(leaderboard)

        # 3) render
        snap = engine.snapshot()
        draw_game(screen, font, snap, top, cell_size)
        if snap.game_over:
            draw_game_over(screen, font, snap.score, message)
        pygame.display.flip()
        clock.tick(60)  # high FPS; movement gated on engine.interval_ms

    pygame.quit()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Toroidal snake with one-shot power-ups.")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="pixels per board cell")
    parser.add_argument("--name", default="player", help="name used for high-score submissions")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = Config(seed=args.seed)
    run(cfg, cell_size=args.cell_size, name=args.name, leaderboard=InMemoryLeaderboard())


if __name__ == "__main__":
    main()
