# tests/conftest.py
import os
import sys
import threading

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable when running from a plain checkout
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

from snake.config import AppConfig
from snake.core.game import Game
from snake.viz.renderer_headless import HeadlessDisplay


class ScriptedKeys:
    """KeySource that replays a list of samples, then reports nothing held."""
    def __init__(self, samples=None, hold=None):
        self.samples = list(samples or [])
        self.hold = list(hold or [])
        self.opened_on = None
        self.closed = False
        self.calls = 0

    def open(self):
        self.opened_on = threading.current_thread().name

    def pressed(self):
        self.calls += 1
        if self.samples:
            return list(self.samples.pop(0))
        return list(self.hold)

    def close(self):
        self.closed = True


@pytest.fixture
def cfg():
    # small board, fixed seed; same start layout as the real game
    return AppConfig(grid_w=20, grid_h=12, seed=1234)

@pytest.fixture
def game_factory(cfg):
    def make(**kwargs):
        return Game(cfg.with_(**kwargs))
    return make

@pytest.fixture
def display():
    return HeadlessDisplay()

@pytest.fixture
def keys_factory():
    return ScriptedKeys
