"""Pending cell explosions and the worker that resolves them."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .board import Cell
    from .players import Player

POLL_INTERVAL = 0.1


@dataclass(frozen=True)
class Explosion:
    """A cell that receives an overflowing orb from ``player``."""

    cell: Cell
    player: Player


class ExplosionQueue:
    """A thread-safe FIFO of pending explosions."""

    def __init__(self) -> None:
        self._pending: deque[Explosion] = deque()
        self._ready = threading.Condition()

    def put(self, cell: Cell, player: Player) -> None:
        with self._ready:
            self._pending.append(Explosion(cell, player))
            self._ready.notify()

    def get(self, timeout: Optional[float] = None) -> Optional[Explosion]:
        """Take the oldest explosion, waiting up to ``timeout`` seconds.

        Returns ``None`` if nothing arrived in time.
        """
        with self._ready:
            if not self._ready.wait_for(lambda: bool(self._pending), timeout):
                return None
            return self._pending.popleft()

    def empty(self) -> bool:
        with self._ready:
            return not self._pending

    def clear(self) -> None:
        with self._ready:
            self._pending.clear()
            self._ready.notify_all()

    def __len__(self) -> int:
        with self._ready:
            return len(self._pending)


class ExplosionProcessor:
    """A background thread that feeds queued explosions into their cells."""

    def __init__(self, queue: ExplosionQueue) -> None:
        self.queue = queue
        self.interval = POLL_INTERVAL
        self._running = False
        self._thread: Optional[threading.Thread] = None
        self._state = threading.Lock()

    def start(self) -> None:
        """Start the worker; does nothing if it is already running."""
        with self._state:
            if self._running:
                return
            self._running = True
            self._thread = threading.Thread(
                target=self._run, name="explosions", daemon=True
            )
            self._thread.start()

    def stop(self) -> None:
        """Ask the worker to finish and wait for it."""
        with self._state:
            if not self._running:
                return
            self._running = False
            thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def join(self) -> None:
        """Stop the worker and wait for it to end."""
        self.stop()

    def is_running(self) -> bool:
        return self._running

    def _run(self) -> None:
        while self._running:
            self.process_once()

    def process_once(self) -> bool:
        """Resolve one explosion if one arrives within the poll interval."""
        explosion = self.queue.get(self.interval)
        if explosion is None:
            return False
        explosion.cell.explode(explosion.player)
        return True