# snake.py
from collections import deque
from typing import Iterable, Iterator

from .config import BOARD_SIZE
from .grid import Cell, Direction, wrap


class Snake:
    """
    Ordered snake body.

    Attributes:
        body: deque of (x, y) from head at index 0 to tail at the end
        size: edge length of the toroidal board the snake moves on
    """

    def __init__(self, cells: Iterable[Cell], size: int = BOARD_SIZE):
        self.body = deque(tuple(c) for c in cells)
        if not self.body:
            raise ValueError("Snake needs at least one cell.")
        self.size = size

    @property
    def head(self) -> Cell:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.body)

    def __contains__(self, cell) -> bool:
        return cell in self.body

    def next_head(self, direction: Direction) -> Cell:
        return wrap(self.head, direction, self.size)

    def move(self, direction: Direction, grow: bool = False) -> Cell:
        """Push a new head one cell along ``direction``; keep the tail only when growing."""
        new_head = self.next_head(direction)
        self.body.appendleft(new_head)
        if not grow:
            self.body.pop()
        return new_head

    def cut_in_half(self) -> int:
        """Keep the head-end ``ceil(len/2)`` cells. Returns how many were dropped."""
        length = len(self.body)
        if length <= 1:
            return 0
        keep = (length + 1) // 2
        for _ in range(length - keep):
            self.body.pop()
        return length - keep

    def contains_self_collision(self, candidate_head: Cell) -> bool:
        return candidate_head in self.body

    def __repr__(self):
        return f"<Snake len={len(self.body)} head={self.head}>"
