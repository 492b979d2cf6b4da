"""A background thread that keeps redrawing the game in the terminal."""

from __future__ import annotations

import sys
import threading
from typing import Optional, TextIO

from .board import Board
from .cursor import Cursor
from .frames import FrameQueue, render_frame

CLEAR = "\033[H\033[2J"
REFRESH_INTERVAL = 0.1


class DisplayThread:
    """Redraws the screen every ``interval`` seconds.

    Queued frames are shown first, one per refresh, so that chain reactions
    play out step by step; with none queued the live board is drawn.
    """

    def __init__(
        self,
        board: Board,
        frames: Optional[FrameQueue] = None,
        cursor: Optional[Cursor] = None,
        out: Optional[TextIO] = None,
        interval: float = REFRESH_INTERVAL,
    ) -> None:
        self.board = board
        self.frames = frames if frames is not None else board.frames
        self.cursor = cursor if cursor is not None else board.cursor
        self.out = out if out is not None else sys.stdout
        self.interval = interval
        self._running = False
        self._thread: Optional[threading.Thread] = None
        self._stop_requested = threading.Event()
        self._state = threading.Lock()

    def start(self) -> None:
        """Start redrawing; does nothing if already running."""
        with self._state:
            if self._running:
                return
            self._running = True
            self._stop_requested.clear()
            self._thread = threading.Thread(target=self._run, name="display", daemon=True)
            self._thread.start()

    def stop(self) -> None:
        """Stop redrawing and wait for the thread to end."""
        with self._state:
            if not self._running:
                return
            self._running = False
            self._stop_requested.set()
            thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def join(self) -> None:
        """Stop the thread and wait for it to end."""
        self.stop()

    def is_running(self) -> bool:
        return self._running

    def _run(self) -> None:
        while not self._stop_requested.wait(self.interval):
            self.draw_once()

    def draw_once(self) -> str:
        """Clear the screen and draw the next frame, or the live board if none is queued.

        Returns the text that was drawn, without the clearing sequence.
        """
        if not self.frames.empty():
            frame = self.frames.get()
        else:
            frame = self.board.snapshot()
        text = render_frame(frame, self.board.rows, self.board.cols)
        self.out.write(CLEAR + text)
        self.out.flush()
        return text