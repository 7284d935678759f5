# food.py
import logging
from typing import AbstractSet, Optional, Set

import numpy as np  # type: ignore

from .config import BOARD_SIZE
from .grid import Cell, in_bounds

logger = logging.getLogger(__name__)


class BoardSaturatedError(RuntimeError):
    """Raised when no free cell is left to put food on."""


class FoodPlacer:
    """
    Rejection-sampling food spawner.

    Cells are drawn uniformly from the whole board until one outside the
    occupied set turns up. A full board raises ``BoardSaturatedError``
    up front instead of sampling forever.
    """

    def __init__(
        self,
        size: int = BOARD_SIZE,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ):
        self.size = size
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def _free_count(self, occupied: AbstractSet[Cell]) -> int:
        taken = sum(1 for c in occupied if in_bounds(c, self.size))
        return self.size * self.size - taken

    def place_one(self, occupied: AbstractSet[Cell]) -> Cell:
        if self._free_count(occupied) <= 0:
            raise BoardSaturatedError(
                f"no free cell on a {self.size}x{self.size} board"
            )
        while True:
            x, y = self.rng.integers(0, self.size, size=2)
            cell = (int(x), int(y))
            if cell not in occupied:
                return cell

    def place_many(self, occupied: AbstractSet[Cell], count: int) -> Set[Cell]:
        """Place ``count`` foods, disjoint from ``occupied`` and from each other."""
        taken = set(occupied)
        placed: Set[Cell] = set()
        for _ in range(count):
            cell = self.place_one(taken)
            taken.add(cell)
            placed.add(cell)
        logger.debug("Placed %d food cells: %s", count, sorted(placed))
        return placed
