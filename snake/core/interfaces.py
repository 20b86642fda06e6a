# snake/core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple

Pos = Tuple[int, int]   # (row, col)

class Cell(IntEnum):
    EMPTY = 0
    WALL = 1
    BODY = 2
    HEAD = 3
    FOOD = 4

SYMBOLS = {
    Cell.EMPTY: " ",
    Cell.WALL: "■",
    Cell.BODY: "■",
    Cell.HEAD: "●",
    Cell.FOOD: "▣",
}

class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self) -> "Direction":
        dr, dc = self.value
        return Direction((-dr, -dc))

    def shift(self, pos: Pos) -> Pos:
        dr, dc = self.value
        return (pos[0] + dr, pos[1] + dc)

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        return cls[name.upper()]

class GameState(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"

@dataclass(frozen=True)
class Snapshot:
    head: Pos
    body: Tuple[Pos, ...]   # neck first
    food: Pos
    food_consumed: bool
    dir: Direction
    tick: int
    ate: bool
    terminated: bool
    reason: str | None
    grid_w: int
    grid_h: int

    @property
    def length(self) -> int:
        return len(self.body) + 1
