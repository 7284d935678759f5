# powerups.py
from dataclasses import dataclass, replace
from enum import Enum
import logging
from typing import Dict, List, Optional

from .config import CFG
from .snake import Snake

logger = logging.getLogger(__name__)


class Skill(str, Enum):
    SLOW = "slow"
    DOUBLE = "double"
    GHOST = "ghost"
    MULTI_FOOD = "multiFood"
    CUT = "cut"


# Skills with a bounded active window; CUT is applied once and never active.
TIMED_SKILLS = (Skill.SLOW, Skill.DOUBLE, Skill.GHOST, Skill.MULTI_FOOD)


@dataclass
class PowerUpState:
    used_ever: bool = False
    active: bool = False
    ticks_elapsed: int = 0


class PowerUpManager:
    """
    One-shot skills for a single game session.

    Each skill goes Unused -> Active -> Expired exactly once. CUT skips the
    Active phase: it halves the snake on activation and is spent right away.
    Skills are independent, so any combination can be active together.
    """

    def __init__(self, duration: int = CFG.powerup_duration):
        self.duration = duration
        self.states: Dict[Skill, PowerUpState] = {s: PowerUpState() for s in Skill}

    def is_active(self, skill: Skill) -> bool:
        return self.states[Skill(skill)].active

    def was_used(self, skill: Skill) -> bool:
        return self.states[Skill(skill)].used_ever

    def activate(self, skill: Skill, snake: Optional[Snake] = None) -> bool:
        """
        Try to fire ``skill``. Returns True if it took effect.

        A skill that was already used is rejected, and so is CUT on a snake
        of length <= 1 (nothing to cut, so the skill is not consumed).
        """
        skill = Skill(skill)
        state = self.states[skill]
        if state.used_ever:
            logger.debug("Skill %s already used; ignoring", skill.value)
            return False

        if skill is Skill.CUT:
            if snake is None or len(snake) <= 1:
                logger.debug("Cut ignored: snake too short")
                return False
            dropped = snake.cut_in_half()
            state.used_ever = True
            logger.info("Cut applied: dropped %d cells, length now %d", dropped, len(snake))
            return True

        state.used_ever = True
        state.active = True
        state.ticks_elapsed = 0
        logger.info("Skill %s activated for %d ticks", skill.value, self.duration)
        return True

    def on_tick(self) -> List[Skill]:
        """Advance every active countdown. Returns the skills that expired on this tick."""
        expired = []
        for skill in TIMED_SKILLS:
            state = self.states[skill]
            if not state.active:
                continue
            state.ticks_elapsed += 1
            if state.ticks_elapsed >= self.duration:
                state.active = False
                expired.append(skill)
                logger.info("Skill %s expired", skill.value)
        return expired

    def snapshot(self) -> Dict[Skill, PowerUpState]:
        return {s: replace(st) for s, st in self.states.items()}
