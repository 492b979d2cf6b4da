"""The selection cursor, which wraps around the board edges."""

from __future__ import annotations

import threading


class Cursor:
    """A thread-safe position on a ``rows`` x ``cols`` board, starting at (0, 0)."""

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        self._x = 0
        self._y = 0
        self._lock = threading.Lock()

    @property
    def x(self) -> int:
        with self._lock:
            return self._x

    @property
    def y(self) -> int:
        with self._lock:
            return self._y

    def move_up(self) -> None:
        with self._lock:
            self._y = self._y - 1 if self._y > 0 else self.rows - 1

    def move_down(self) -> None:
        with self._lock:
            self._y = self._y + 1 if self._y < self.rows - 1 else 0

    def move_left(self) -> None:
        with self._lock:
            self._x = self._x - 1 if self._x > 0 else self.cols - 1

    def move_right(self) -> None:
        with self._lock:
            self._x = self._x + 1 if self._x < self.cols - 1 else 0

    def set_position(self, x: int, y: int) -> bool:
        """Move to (x, y) if it lies on the board; report whether it moved."""
        with self._lock:
            if 0 <= x < self.cols and 0 <= y < self.rows:
                self._x, self._y = x, y
                return True
            return False

    def position(self) -> tuple[int, int]:
        """Return ``(x, y)`` read atomically."""
        with self._lock:
            return self._x, self._y

    def reset(self) -> None:
        with self._lock:
            self._x = 0
            self._y = 0