"""Snapshots of the board and the queue that carries them to the display."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, field

from .players import RESET, Player, color_to_escape_code


@dataclass
class GameFrame:
    """Everything needed to draw one picture of the game."""

    cursor_x: int
    cursor_y: int
    current_player_id: int
    colors: list[list[str]]
    levels: list[list[int]]
    eliminated_players: list[Player] = field(default_factory=list)
    game_over: bool = False


class FrameQueue:
    """A thread-safe FIFO of frames; :meth:`get` blocks until one arrives."""

    def __init__(self) -> None:
        self._frames: deque[GameFrame] = deque()
        self._ready = threading.Condition()

    def put(self, frame: GameFrame) -> None:
        with self._ready:
            self._frames.append(frame)
            self._ready.notify()

    def get(self) -> GameFrame:
        with self._ready:
            self._ready.wait_for(lambda: bool(self._frames))
            return self._frames.popleft()

    def empty(self) -> bool:
        with self._ready:
            return not self._frames

    def clear(self) -> None:
        with self._ready:
            self._frames.clear()
            self._ready.notify_all()

    def __len__(self) -> int:
        with self._ready:
            return len(self._frames)


def _border(left: str, middle: str, right: str, cols: int) -> str:
    return left + (f"═══{middle}" * (cols - 1)) + f"═══{right}\n"


def render_frame(frame: GameFrame, rows: int, cols: int) -> str:
    """Draw ``frame`` as a box-drawn grid with status lines below it."""
    parts = [_border("╔", "╦", "╗", cols)]
    for i in range(rows):
        cells = []
        for j in range(cols):
            level = frame.levels[i][j]
            highlighted = i == frame.cursor_y and j == frame.cursor_x
            glyph = "█" if level == 0 else str(level)
            cells.append(
                f" {color_to_escape_code(frame.colors[i][j], highlighted)}{glyph}{RESET} ║"
            )
        parts.append("║" + "".join(cells) + "\n")
        if i != rows - 1:
            parts.append(_border("╠", "╬", "╣", cols))
    parts.append(_border("╚", "╩", "╝", cols))
    parts.append(f"Player {frame.current_player_id}'s turn.\n")
    if frame.eliminated_players:
        parts.append("Eliminated Players: ")
        parts.extend(
            f"Player {player.id} ({player.color}) \n" for player in frame.eliminated_players
        )
        parts.append("\n")
        if frame.game_over:
            parts.append(f"Game Over! Player {frame.eliminated_players[0].id} wins!\n")
    return "".join(parts)