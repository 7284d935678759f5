"""Deterministic snake engine on a toroidal board with one-shot power-ups."""

from .config import CFG, Config, UP, DOWN, LEFT, RIGHT
from .food import BoardSaturatedError, FoodPlacer
from .game import GameEngine, GameSession, GameSnapshot, tick_interval_ms
from .grid import wrap
from .powerups import PowerUpManager, PowerUpState, Skill
from .snake import Snake

__all__ = [
    "CFG", "Config", "UP", "DOWN", "LEFT", "RIGHT",
    "BoardSaturatedError", "FoodPlacer",
    "GameEngine", "GameSession", "GameSnapshot", "tick_interval_ms",
    "wrap",
    "PowerUpManager", "PowerUpState", "Skill",
    "Snake",
]
