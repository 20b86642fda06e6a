# snake/core/tick_log.py
from __future__ import annotations
import csv, os
from typing import Any, Dict, Optional, Protocol
from .interfaces import Snapshot

TICK_KEYS = ["tick", "head_row", "head_col", "length", "dir",
             "food_row", "food_col", "ate", "terminated", "reason"]

class TickLogger(Protocol):
    def log(self, snap: Snapshot) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...

def snapshot_row(snap: Snapshot) -> Dict[str, Any]:
    return {
        "tick": snap.tick,
        "head_row": snap.head[0], "head_col": snap.head[1],
        "length": snap.length,
        "dir": snap.dir.name.lower(),
        "food_row": snap.food[0], "food_col": snap.food[1],
        "ate": int(snap.ate),
        "terminated": int(snap.terminated),
        "reason": snap.reason or "",
    }

class CSVTickLogger:
    """Append-only CSV logger, one row per tick."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        d = os.path.dirname(path)
        if d:
            os.makedirs(d, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames or list(TICK_KEYS)
        self._file = open(path, "a", newline="", encoding="utf-8")
        self._writer: Optional[csv.DictWriter] = None

    def log(self, snap: Snapshot) -> None:
        if self._writer is None:
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(snapshot_row(snap))

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

class NullTickLogger:
    def log(self, snap: Snapshot) -> None: pass
    def flush(self) -> None: pass
    def close(self) -> None: pass

def make_tick_logger(path: Optional[str]) -> TickLogger:
    return CSVTickLogger(path) if path else NullTickLogger()
