# snake/runners/run_snake.py
from __future__ import annotations
import queue, sys, time
from typing import Callable, List, Optional
from snake.config import AppConfig
from snake.core.game import Game
from snake.core.interfaces import Snapshot
from snake.core.tick_log import NullTickLogger, TickLogger, make_tick_logger
from snake.runners.input_bridge import InputBridge
from snake.viz.keyboard import Keyboard
from snake.viz.render_iface import Display, DisplayError
from snake.viz.renderer_terminal import TerminalDisplay

def drain(events: "queue.Queue[str]") -> List[str]:
    """Take everything already queued without waiting for more."""
    keys: List[str] = []
    while True:
        try:
            keys.append(events.get_nowait())
        except queue.Empty:
            return keys

def run_loop(
    game: Game,
    events: "queue.Queue[str]",
    display: Display,
    logger: Optional[TickLogger] = None,
    clock: Callable[[], float] = time.perf_counter,
    sleep: Callable[[float], None] = time.sleep,
    max_ticks: Optional[int] = None,
) -> Snapshot:
    """Run ticks until the game is over (or ``max_ticks`` ran).

    Pacing waits out whatever is left of the tick period since the previous
    tick started; an overrun tick is followed immediately, never by a burst.
    """
    logger = logger or NullTickLogger()
    period = game.snake.tick_period
    snap = game.snapshot()
    ticks = 0
    last = clock()
    while game.running:
        elapsed = clock() - last
        if elapsed < period:
            sleep(period - elapsed)
        last = clock()

        game.apply_input(drain(events))
        snap = game.tick()

        display.clear()
        display.draw(game.frame())
        logger.log(snap)

        if snap.terminated:
            display.game_over(game.cfg.game_over_text)
            break
        ticks += 1
        if max_ticks is not None and ticks >= max_ticks:
            break
    logger.flush()
    return snap

def main(cfg: Optional[AppConfig] = None) -> Snapshot:
    cfg = cfg or AppConfig()
    game = Game(cfg)
    events: "queue.Queue[str]" = queue.Queue(maxsize=cfg.queue_max)
    kbd = Keyboard(keys=[k for k, _ in cfg.key_map], title=cfg.input_title, size=cfg.input_window)
    bridge = InputBridge(kbd, events, poll_interval=cfg.poll_interval)
    display = TerminalDisplay(cfg.clear_command)
    logger = make_tick_logger(cfg.log_path)

    bridge.start()
    try:
        snap = run_loop(game, events, display, logger)
    except DisplayError as e:
        print(f"[snake] {e}", file=sys.stderr)
        raise SystemExit(1) from e
    finally:
        logger.close()
        bridge.stop()
    print(f"[snake] tick={snap.tick} length={snap.length} reason={snap.reason}", file=sys.stderr)
    return snap
