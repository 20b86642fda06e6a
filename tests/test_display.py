import io
import os
import subprocess

import pytest

from snake.viz import renderer_terminal
from snake.viz.render_iface import DisplayError
from snake.viz.renderer_headless import HeadlessDisplay
from snake.viz.renderer_terminal import TerminalDisplay, default_clear_command

def test_default_clear_command_matches_platform():
    cmd = default_clear_command()
    if os.name == "nt":
        assert cmd[-1] == "cls"
    else:
        assert cmd == ("clear",)

def test_clear_runs_command(monkeypatch):
    calls = []
    monkeypatch.setattr(renderer_terminal.subprocess, "run",
                        lambda cmd, check: calls.append((cmd, check)))
    TerminalDisplay(clear_command=["clear"]).clear()
    assert calls == [(("clear",), True)]

def test_missing_clear_command_is_fatal():
    d = TerminalDisplay(clear_command=["snake-no-such-clear-command"])
    with pytest.raises(DisplayError):
        d.clear()

def test_failing_clear_command_is_fatal(monkeypatch):
    def boom(cmd, check):
        raise subprocess.CalledProcessError(1, cmd)
    monkeypatch.setattr(renderer_terminal.subprocess, "run", boom)
    with pytest.raises(DisplayError) as exc:
        TerminalDisplay(clear_command=["clear"]).clear()
    assert "clear error" in str(exc.value)

def test_draw_and_game_over_write_lines():
    out = io.StringIO()
    d = TerminalDisplay(clear_command=["clear"], stream=out)
    d.draw(["■■■", "■●■", "■■■"])
    d.game_over("Game Over!")
    assert out.getvalue() == "■■■\n■●■\n■■■\nGame Over!\n"

def test_headless_keeps_bounded_history():
    d = HeadlessDisplay(keep=2)
    for i in range(5):
        d.clear()
        d.draw([str(i)])
    assert d.clears == 5
    assert d.frames == [["3"], ["4"]]
    assert d.last_frame == ["4"]
