# snake/core/game.py  (authoritative game state, no I/O)
from __future__ import annotations
import random
from typing import Dict, Iterable, List, Optional
from snake.config import AppConfig
from .collision import termination_reason
from .food import Food
from .grid import Grid
from .interfaces import Direction, GameState, Snapshot
from .snake_model import Snake

class Game:
    """Grid, snake and food for one round, advanced one tick at a time.

    The simulation loop feeds it the keys drained from the input queue
    (``apply_input``) and then calls ``tick``; everything caller-visible comes
    back in the returned ``Snapshot``.
    """

    def __init__(self, cfg: AppConfig):
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.rng = random.Random(cfg.seed)
        self.key_map: Dict[str, Direction] = {
            k.lower(): Direction.from_name(d) for k, d in cfg.key_map
        }
        self.grid = Grid.create(cfg.grid_h, cfg.grid_w)
        self.snake = Snake(cfg.start_head, cfg.start_body, cfg.tick_period)
        self.food = Food(cfg.start_food)
        self.dir = Direction.from_name(cfg.start_dir)
        self.state = GameState.RUNNING
        self.tick_count = 0
        self.reason: Optional[str] = None
        self._ate = False
        self.snake.draw(self.grid)
        self.food.draw(self.grid)

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    def apply_input(self, keys: Iterable[str]) -> Direction:
        """Apply drained key events in arrival order.

        Each request is checked against the most recently accepted direction,
        so the last non-reversing request wins.
        """
        for key in keys:
            want = self.key_map.get(str(key).lower())
            if want is None:
                continue
            if want is not self.dir.opposite:
                self.dir = want
        return self.dir

    def tick(self) -> Snapshot:
        if not self.running:
            return self.snapshot()

        self._ate = self.snake.advance(self.dir, self.food, self.grid)
        if self._ate:
            self.food.consumed = True
        self.tick_count += 1

        self.snake.draw(self.grid)
        self.food.draw(self.grid)
        self.food.maybe_respawn(self.snake, self.grid, self.rng,
                                avoid_snake=self.cfg.food_avoids_snake)

        self.reason = termination_reason(self.snake, self.grid.height, self.grid.width)
        if self.reason is not None:
            self.state = GameState.GAME_OVER
        return self.snapshot()

    def frame(self) -> List[str]:
        return self.grid.render()

    def snapshot(self) -> Snapshot:
        return Snapshot(
            head=self.snake.head,
            body=tuple(self.snake.body),
            food=self.food.position,
            food_consumed=self.food.consumed,
            dir=self.dir,
            tick=self.tick_count,
            ate=self._ate,
            terminated=not self.running,
            reason=self.reason,
            grid_w=self.grid.width,
            grid_h=self.grid.height,
        )
