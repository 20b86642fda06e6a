# snake/config.py
from dataclasses import dataclass, replace
from typing import Optional, Tuple
from snake.core.interfaces import Pos

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board
    grid_w: int = 100
    grid_h: int = 25
    seed: Optional[int] = None

    # starting layout (row, col)
    start_head: Pos = (5, 6)
    start_body: Tuple[Pos, ...] = ((5, 5), (5, 4))
    start_food: Pos = (5, 8)
    start_dir: str = "right"
    food_avoids_snake: bool = False      # False keeps the original blind draw

    # timing
    tick_ms: int = 200
    poll_ms: int = 10
    queue_max: int = 100

    # input: (key name, direction name)
    key_map: Tuple[Tuple[str, str], ...] = (
        ("w", "up"), ("a", "left"), ("s", "down"), ("d", "right"),
    )
    input_title: str = "Snake (keyboard focus)"
    input_window: Tuple[int, int] = (240, 80)

    # display
    clear_command: Optional[Tuple[str, ...]] = None   # None -> platform default
    game_over_text: str = "Game Over!"

    # tick log (csv); None disables it
    log_path: Optional[str] = None

    @property
    def tick_period(self) -> float:
        return self.tick_ms / 1000.0

    @property
    def poll_interval(self) -> float:
        return self.poll_ms / 1000.0

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
