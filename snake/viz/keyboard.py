# snake/viz/keyboard.py
from __future__ import annotations
from typing import Dict, List, Protocol, Sequence, Tuple
import pygame as pg

class KeySource(Protocol):
    def open(self) -> None: ...
    def pressed(self) -> List[str]: ...
    def close(self) -> None: ...

class Keyboard:
    """Samples which of the watched keys are held down right now.

    This is state polling, not KEYDOWN events: a key held across several
    samples is reported by every one of them. SDL only tracks key state for
    a focused window, so ``open`` creates a small one; the player keeps that
    window focused while watching the frames in the terminal.

    ``open`` runs on the input thread. macOS only allows windows on the main
    thread, so there the open fails and no keys are read.
    """

    def __init__(self, keys: Sequence[str] = ("w", "a", "s", "d"),
                 title: str = "Snake", size: Tuple[int, int] = (240, 80)):
        self.codes: Dict[str, int] = {k: getattr(pg, f"K_{k}") for k in keys}
        self.title = title
        self.size = size
        self._open = False

    def open(self) -> None:
        if self._open:
            return
        pg.init()
        pg.display.set_caption(self.title)
        pg.display.set_mode(self.size)
        self._open = True

    def pressed(self) -> List[str]:
        pg.event.pump()
        state = pg.key.get_pressed()
        return [name for name, code in self.codes.items() if state[code]]

    def close(self) -> None:
        if self._open:
            pg.quit()
            self._open = False
