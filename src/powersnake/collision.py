# collision.py
from dataclasses import dataclass
import logging
from typing import AbstractSet, Optional

from .grid import Cell
from .powerups import PowerUpManager, Skill
from .snake import Snake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollisionOutcome:
    """
    What the proposed next head runs into.

    Attributes:
        next_head: the cell the head is about to enter
        self_hit: the cell is already part of the body
        ghost_saved: the hit triggered the one-time automatic ghost activation
        fatal: the hit ends the game
        food: the food cell eaten, if any
        points: score to award for ``food`` (0 when nothing was eaten)
    """
    next_head: Cell
    self_hit: bool = False
    ghost_saved: bool = False
    fatal: bool = False
    food: Optional[Cell] = None
    points: int = 0

    @property
    def grow(self) -> bool:
        return self.food is not None


class CollisionResolver:
    """Ghost-aware self-collision and food-pickup checks for one tick."""

    def __init__(self, powerups: PowerUpManager):
        self.powerups = powerups

    def resolve(self, snake: Snake, next_head: Cell, foods: AbstractSet[Cell]) -> CollisionOutcome:
        self_hit = snake.contains_self_collision(next_head)
        ghost_saved = False

        if self_hit:
            if self.powerups.is_active(Skill.GHOST):
                pass  # passes through itself
            elif not self.powerups.was_used(Skill.GHOST):
                # First self-hit of the session spends ghost instead of ending the game.
                self.powerups.activate(Skill.GHOST)
                ghost_saved = True
                logger.info("Self-collision at %s: ghost auto-activated", next_head)
            else:
                return CollisionOutcome(next_head=next_head, self_hit=True, fatal=True)

        if next_head in foods:
            points = 2 if self.powerups.is_active(Skill.DOUBLE) else 1
            return CollisionOutcome(
                next_head=next_head,
                self_hit=self_hit,
                ghost_saved=ghost_saved,
                food=next_head,
                points=points,
            )

        return CollisionOutcome(next_head=next_head, self_hit=self_hit, ghost_saved=ghost_saved)
