# snake/core/collision.py
from __future__ import annotations
from typing import Optional
from .snake_model import Snake

def termination_reason(snake: Snake, height: int, width: int) -> Optional[str]:
    r, c = snake.head
    if r == 0 or r == height - 1 or c == 0 or c == width - 1:
        return "wall"
    if snake.head in snake.body:
        return "self"
    return None

def is_game_over(snake: Snake, height: int, width: int) -> bool:
    return termination_reason(snake, height, width) is not None
