# snake/viz/renderer_terminal.py
from __future__ import annotations
import os, subprocess, sys
from typing import Optional, Sequence, TextIO
from .render_iface import DisplayError

def default_clear_command() -> tuple[str, ...]:
    if os.name == "nt":
        return ("cmd.exe", "/c", "cls")
    return ("clear",)

class TerminalDisplay:
    """Full-frame redraw on a plain terminal: shell clear, then print rows."""

    def __init__(self, clear_command: Optional[Sequence[str]] = None,
                 stream: Optional[TextIO] = None):
        self.clear_command = tuple(clear_command or default_clear_command())
        self.stream = stream if stream is not None else sys.stdout

    def clear(self) -> None:
        try:
            subprocess.run(self.clear_command, check=True)
        except (OSError, subprocess.CalledProcessError) as e:
            raise DisplayError(f"clear error: {' '.join(self.clear_command)}: {e}") from e

    def draw(self, rows: Sequence[str]) -> None:
        self.stream.write("".join(row + "\n" for row in rows))
        self.stream.flush()

    def game_over(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()
