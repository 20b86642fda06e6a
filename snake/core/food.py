# snake/core/food.py
from __future__ import annotations
import random
from typing import Optional
from .grid import Grid
from .interfaces import Cell, Pos
from .snake_model import Snake

class Food:
    def __init__(self, position: Pos, consumed: bool = False):
        self.position: Pos = tuple(position)
        self.consumed = consumed

    def draw(self, grid: Grid) -> None:
        # an eaten food is not put back on the map
        if self.consumed:
            return
        grid[self.position] = Cell.FOOD

    def maybe_respawn(self, snake: Snake, grid: Grid, rng: random.Random,
                      avoid_snake: bool = False) -> bool:
        """Place a new food if the current one was eaten.

        By default the row/col are drawn blindly over the interior and may
        land on the snake's body. ``avoid_snake`` draws over free interior
        cells instead. Returns True when a new food was placed.
        """
        if not self.consumed:
            return False

        pos: Optional[Pos]
        if avoid_snake:
            occ = set(snake.cells())
            free = [p for p in grid.interior() if p not in occ]
            if not free:
                return False
            pos = rng.choice(free)
        else:
            pos = (rng.randint(1, grid.height - 2), rng.randint(1, grid.width - 2))

        grid[pos] = Cell.FOOD
        self.position = pos
        self.consumed = False
        return True
