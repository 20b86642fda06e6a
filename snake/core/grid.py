# snake/core/grid.py  (pure data, no terminal I/O)
from __future__ import annotations
from typing import List
import numpy as np
from .interfaces import Cell, Pos, SYMBOLS

class Grid:
    """Fixed-size board stored as a flat row-major ``uint8`` buffer.

    Cells are addressed as ``grid[row, col]``; both reads and writes are
    bounds-checked. Snake and food write their cells directly, the grid only
    knows how to build its wall ring and turn itself into text.
    """

    def __init__(self, height: int, width: int):
        if height < 3 or width < 3:
            raise ValueError(f"grid must be at least 3x3, got {height}x{width}")
        self.height = height
        self.width = width
        self.cells = np.full(height * width, Cell.EMPTY, dtype=np.uint8)

    @classmethod
    def create(cls, height: int, width: int) -> "Grid":
        g = cls(height, width)
        view = g.cells.reshape(height, width)
        view[0, :] = Cell.WALL; view[height - 1, :] = Cell.WALL
        view[:, 0] = Cell.WALL; view[:, width - 1] = Cell.WALL
        return g

    def _index(self, pos: Pos) -> int:
        r, c = pos
        if not (0 <= r < self.height and 0 <= c < self.width):
            raise IndexError(f"cell {pos} outside {self.height}x{self.width} grid")
        return r * self.width + c

    def __getitem__(self, pos: Pos) -> Cell:
        return Cell(int(self.cells[self._index(pos)]))

    def __setitem__(self, pos: Pos, value: Cell) -> None:
        self.cells[self._index(pos)] = value

    def interior(self) -> List[Pos]:
        return [(r, c) for r in range(1, self.height - 1) for c in range(1, self.width - 1)]

    def count(self, value: Cell) -> int:
        return int(np.count_nonzero(self.cells == int(value)))

    def render(self) -> List[str]:
        rows = self.cells.reshape(self.height, self.width)
        return ["".join(SYMBOLS[Cell(int(v))] for v in row) for row in rows]

    def render_text(self) -> str:
        return "".join(line + "\n" for line in self.render())
