# snake/core/snake_model.py
from __future__ import annotations
from typing import TYPE_CHECKING, Iterator, List, Sequence
from .grid import Grid
from .interfaces import Cell, Direction, Pos

if TYPE_CHECKING:
    from .food import Food

class Snake:
    def __init__(self, head: Pos, body: Sequence[Pos], tick_period: float = 0.2):
        self.head: Pos = tuple(head)
        self.body: List[Pos] = [tuple(p) for p in body]   # neck -> tail
        self.tick_period = tick_period

    def __len__(self) -> int:
        return len(self.body) + 1

    def cells(self) -> Iterator[Pos]:
        yield self.head
        yield from self.body

    def advance(self, direction: Direction, food: "Food", grid: Grid) -> bool:
        """Move one cell in ``direction``; return True if the food was eaten.

        The old head always becomes the new neck. The tail is only dropped
        on a non-eating move, so eating grows the body by exactly one.
        """
        before = self.head
        self.head = direction.shift(before)
        consumed = self.head == food.position and not food.consumed

        grid[before] = Cell.BODY
        grid[self.head] = Cell.HEAD

        if self.body and not consumed:
            tail = self.body.pop()
            grid[tail] = Cell.EMPTY

        self.body.insert(0, before)
        return consumed

    def draw(self, grid: Grid) -> None:
        grid[self.head] = Cell.HEAD
        for seg in self.body:
            grid[seg] = Cell.BODY
