# snake/runners/input_bridge.py
from __future__ import annotations
import queue, threading
from typing import Optional
from snake.viz.keyboard import KeySource

class InputBridge:
    """Producer side of the key queue.

    A daemon thread samples the keyboard every ``poll_interval`` seconds and
    enqueues every key that is down at that moment. The simulation loop is
    the only consumer.
    """

    def __init__(self, keys: KeySource, events: "queue.Queue[str]", poll_interval: float = 0.010):
        self._keys = keys
        self._q = events
        self._interval = max(0.0, float(poll_interval))
        self._t: Optional[threading.Thread] = None
        self._stop = threading.Event()
        self._started = False

    def start(self) -> None:
        if self._started: return
        self._stop.clear()
        self._t = threading.Thread(target=self._run, name="InputBridge", daemon=True)
        self._t.start()
        self._started = True

    def _put(self, key: str) -> bool:
        # blocking put; re-check stop so a stalled consumer cannot pin the thread
        while not self._stop.is_set():
            try:
                self._q.put(key, timeout=0.1)
                return True
            except queue.Full:
                continue
        return False

    def _run(self) -> None:
        # the key source is opened on this thread so all its polling stays here
        self._keys.open()
        try:
            while not self._stop.is_set():
                for key in self._keys.pressed():
                    if not self._put(key):
                        break
                self._stop.wait(self._interval)
        finally:
            self._keys.close()

    @property
    def alive(self) -> bool:
        return self._t is not None and self._t.is_alive()

    def stop(self, timeout: float = 1.0) -> None:
        if not self._started: return
        self._stop.set()
        if self._t is not None:
            self._t.join(timeout=timeout)
        self._started = False
