# snake/viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional, Sequence

class HeadlessDisplay:
    """Keeps frames in memory instead of drawing them."""
    def __init__(self, keep: Optional[int] = None):
        self.keep = keep
        self.frames: List[List[str]] = []
        self.clears = 0
        self.message: Optional[str] = None

    def clear(self) -> None:
        self.clears += 1

    def draw(self, rows: Sequence[str]) -> None:
        self.frames.append(list(rows))
        if self.keep is not None and len(self.frames) > self.keep:
            del self.frames[0]

    def game_over(self, text: str) -> None:
        self.message = text

    @property
    def last_frame(self) -> List[str]:
        return self.frames[-1] if self.frames else []
