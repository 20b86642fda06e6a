# snake/viz/render_iface.py
from __future__ import annotations
from typing import Protocol, Sequence

class DisplayError(RuntimeError):
    """The display could not be cleared; the frame on screen is unusable."""

class Display(Protocol):
    def clear(self) -> None: ...
    def draw(self, rows: Sequence[str]) -> None: ...
    def game_over(self, text: str) -> None: ...
