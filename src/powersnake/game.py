# game.py
from dataclasses import dataclass, field
import logging
from typing import Callable, Dict, FrozenSet, List, Optional, Set, Tuple

import numpy as np  # type: ignore

from .collision import CollisionResolver
from .config import CFG, Config, DIRECTIONS, INITIAL_DIRECTION, INITIAL_SNAKE
from .food import FoodPlacer
from .grid import Cell, Direction, is_opposite
from .powerups import PowerUpManager, PowerUpState, Skill
from .snake import Snake

logger = logging.getLogger(__name__)

# Occupancy codes used by GameSnapshot.occupancy()
EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3


# ---------- Helpers ----------
def tick_interval_ms(score: int, slow: bool = False, cfg: Config = CFG) -> int:
    """Milliseconds until the next tick: faster every 10 points, floored, doubled while slowed."""
    interval = max(
        cfg.min_interval_ms,
        cfg.base_interval_ms - cfg.interval_step_ms * (score // cfg.points_per_speedup),
    )
    return interval * 2 if slow else interval


# ---------- State ----------
@dataclass
class GameSession:
    snake: Snake
    direction: Direction
    foods: Set[Cell]
    score: int = 0
    powerups: PowerUpManager = field(default_factory=PowerUpManager)
    game_over: bool = False
    tick_count: int = 0

    def occupied(self) -> Set[Cell]:
        return set(self.snake.body) | self.foods


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a session, handed to renderers after every tick."""
    snake: Tuple[Cell, ...]
    direction: Direction
    foods: FrozenSet[Cell]
    score: int
    game_over: bool
    powerups: Dict[Skill, PowerUpState]
    interval_ms: int
    tick: int
    board_size: int
    evolved: bool = False

    @property
    def food(self) -> Optional[Cell]:
        """The single food cell, or None while several are on the board."""
        if len(self.foods) == 1:
            return next(iter(self.foods))
        return None

    def occupancy(self) -> np.ndarray:
        board = np.zeros((self.board_size, self.board_size), dtype=np.int8)
        for x, y in self.foods:
            board[y, x] = FOOD
        for x, y in self.snake[1:]:
            board[y, x] = BODY
        hx, hy = self.snake[0]
        board[hy, hx] = HEAD
        return board

    def to_dict(self) -> dict:
        return {
            "snake": [list(c) for c in self.snake],
            "direction": list(self.direction),
            "foods": sorted(list(c) for c in self.foods),
            "score": self.score,
            "game_over": self.game_over,
            "powerups": {
                s.value: {
                    "used_ever": st.used_ever,
                    "active": st.active,
                    "ticks_elapsed": st.ticks_elapsed,
                }
                for s, st in self.powerups.items()
            },
            "interval_ms": self.interval_ms,
            "tick": self.tick,
            "evolved": self.evolved,
        }


# ---------- Engine ----------
class GameEngine:
    """
    Owns one GameSession and advances it one tick at a time.

    Callers only submit requests (set_direction, activate_skill, restart)
    and read snapshots; the session itself is mutated by tick() and skill
    activation alone. Not thread-safe: drive it from a single thread or
    guard it with one lock.
    """

    def __init__(
        self,
        cfg: Config = CFG,
        placer: Optional[FoodPlacer] = None,
        seed: Optional[int] = None,
    ):
        self.cfg = cfg
        if placer is None:
            placer = FoodPlacer(cfg.board_size, seed=cfg.seed if seed is None else seed)
        self.placer = placer
        self._listeners: List[Callable[[GameSnapshot], None]] = []
        self.session = self._new_session()
        self._pending: Optional[Direction] = None
        self._evolved = False
        self.interval_ms = tick_interval_ms(0, cfg=cfg)
        logger.info("New game session started")

    def _new_session(self) -> GameSession:
        snake = Snake(INITIAL_SNAKE, size=self.cfg.board_size)
        food = self.placer.place_one(set(snake.body))
        return GameSession(
            snake=snake,
            direction=INITIAL_DIRECTION,
            foods={food},
            powerups=PowerUpManager(self.cfg.powerup_duration),
        )

    # Input ---------------------------------------------------------------
    def set_direction(self, direction: Direction) -> bool:
        """Queue a turn for the next tick. At most one turn is accepted per tick; reversals are dropped."""
        if direction not in DIRECTIONS:
            logger.debug("Direction %s dropped (not a unit step)", direction)
            return False
        s = self.session
        if s.game_over or self._pending is not None:
            logger.debug("Direction %s dropped (locked or game over)", direction)
            return False
        if direction == s.direction:
            return False
        if is_opposite(direction, s.direction):
            logger.debug("Direction %s dropped (reversal)", direction)
            return False
        self._pending = direction
        return True

    def activate_skill(self, skill: Skill) -> bool:
        s = self.session
        if s.game_over:
            return False
        try:
            skill = Skill(skill)
        except ValueError:
            logger.debug("Unknown skill %r ignored", skill)
            return False
        if not s.powerups.activate(skill, s.snake):
            return False

        if skill is Skill.MULTI_FOOD:
            missing = self.cfg.multi_food_count - len(s.foods)
            if missing > 0:
                s.foods |= self.placer.place_many(s.occupied(), missing)
        elif skill is Skill.SLOW:
            self.interval_ms = tick_interval_ms(s.score, slow=True, cfg=self.cfg)
        return True

    def subscribe(self, listener: Callable[[GameSnapshot], None]) -> None:
        self._listeners.append(listener)

    # Update --------------------------------------------------------------
    def tick(self) -> GameSnapshot:
        s = self.session
        if s.game_over:
            return self.snapshot()

        self._evolved = False

        # Commit direction once per tick
        if self._pending is not None:
            s.direction = self._pending
            self._pending = None

        next_head = s.snake.next_head(s.direction)
        outcome = CollisionResolver(s.powerups).resolve(s.snake, next_head, s.foods)

        if outcome.fatal:
            s.game_over = True
            s.tick_count += 1
            logger.info("Game over at tick %d with score %d", s.tick_count, s.score)
            return self._emit()

        s.snake.move(s.direction, grow=outcome.grow)

        if outcome.food is not None:
            before = s.score
            s.score += outcome.points
            s.foods.discard(outcome.food)
            s.foods.add(self.placer.place_one(s.occupied()))
            every = self.cfg.evolution_every
            if s.score // every > before // every:
                self._evolved = True
                logger.info("Evolved at score %d", s.score)

        for skill in s.powerups.on_tick():
            if skill is Skill.MULTI_FOOD:
                s.foods = {self.placer.place_one(set(s.snake.body))}

        s.tick_count += 1
        self.interval_ms = tick_interval_ms(
            s.score, slow=s.powerups.is_active(Skill.SLOW), cfg=self.cfg
        )
        return self._emit()

    def restart(self) -> GameSnapshot:
        self.session = self._new_session()
        self._pending = None
        self._evolved = False
        self.interval_ms = tick_interval_ms(0, cfg=self.cfg)
        logger.info("Game restarted")
        return self._emit()

    # Output --------------------------------------------------------------
    def snapshot(self) -> GameSnapshot:
        s = self.session
        return GameSnapshot(
            snake=tuple(s.snake.body),
            direction=s.direction,
            foods=frozenset(s.foods),
            score=s.score,
            game_over=s.game_over,
            powerups=s.powerups.snapshot(),
            interval_ms=self.interval_ms,
            tick=s.tick_count,
            board_size=self.cfg.board_size,
            evolved=self._evolved,
        )

    def _emit(self) -> GameSnapshot:
        snap = self.snapshot()
        for listener in self._listeners:
            listener(snap)
        return snap
