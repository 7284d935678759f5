# grid.py
from typing import Tuple

from .config import BOARD_SIZE

Cell = Tuple[int, int]
Direction = Tuple[int, int]


def wrap(cell: Cell, delta: Direction, size: int = BOARD_SIZE) -> Cell:
    """Step ``cell`` by ``delta`` on a toroidal ``size`` x ``size`` board.

    Python's ``%`` is a floored modulo, so ``(0, 0) + (-1, 0)`` lands on
    ``(size - 1, 0)``.
    """
    return ((cell[0] + delta[0]) % size, (cell[1] + delta[1]) % size)


def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def in_bounds(cell: Cell, size: int = BOARD_SIZE) -> bool:
    return 0 <= cell[0] < size and 0 <= cell[1] < size

