"""The game grid, its cells and the turn order."""

from __future__ import annotations

import threading
from typing import Optional

from .cursor import Cursor
from .explosions import ExplosionQueue
from .frames import FrameQueue, GameFrame
from .players import RESET, Player, color_to_escape_code

EMPTY_COLOR = "Black"


class GameStateError(RuntimeError):
    """Raised when the board is asked for something its state cannot give."""


class Cell:
    """One square of the board, owned by at most one player."""

    def __init__(self, board: Board, row: int, col: int) -> None:
        self.board = board
        self.row = row
        self.col = col
        self.player: Optional[Player] = None
        self.level = 0
        self.neighbors: list[Cell] = []

    def __repr__(self) -> str:
        owner = self.player.id if self.player is not None else None
        return f"Cell(row={self.row}, col={self.col}, player={owner}, level={self.level})"

    def _capacity(self) -> int:
        on_row_edge = self.row in (0, self.board.rows - 1)
        on_col_edge = self.col in (0, self.board.cols - 1)
        if on_row_edge and on_col_edge:
            return 2
        if on_row_edge or on_col_edge:
            return 3
        return 4

    def reset(self) -> bool:
        """Empty the cell if it has reached its capacity; report whether it did."""
        if self.player is None or self.level < self._capacity():
            return False
        self.level = 0
        self.player = None
        return True

    def _burst(self, player: Player) -> None:
        self.board.frames.put(self.board._snapshot(player.id))
        for neighbor in self.neighbors:
            self.board.explosions.put(neighbor, player)

    def explode(self, player: Player) -> None:
        """Receive an orb from a neighbouring explosion, capturing the cell."""
        with self.board._lock:
            self.player = player
            self.level += 1
            self.board.end_check()
            if self.reset():
                self._burst(player)

    def select(self, player: Player) -> bool:
        """Place an orb for ``player``; ``False`` if another player owns the cell."""
        with self.board._lock:
            if self.player is not None and self.player.id != player.id:
                return False
            if self.player is None:
                self.player = player
                self.level = 1
                self.board.frames.put(self.board._snapshot(player.id))
            elif self.player is player:
                self.level += 1
                if self.reset():
                    self._burst(player)
            return True


def _border(left: str, middle: str, right: str, cols: int) -> str:
    return left + (f"═══{middle}" * (cols - 1)) + f"═══{right}\n"


class Board:
    """A ``rows`` x ``cols`` grid shared by ``players`` numbered from 1."""

    def __init__(
        self,
        rows: int,
        cols: int,
        players: int,
        frames: Optional[FrameQueue] = None,
        explosions: Optional[ExplosionQueue] = None,
        cursor: Optional[Cursor] = None,
    ) -> None:
        self.rows = rows
        self.cols = cols
        self.frames = frames if frames is not None else FrameQueue()
        self.explosions = explosions if explosions is not None else ExplosionQueue()
        self.cursor = cursor if cursor is not None else Cursor(rows, cols)
        self._lock = threading.RLock()
        self.players = [Player(number) for number in range(1, players + 1)]
        self.active_players: list[Player] = list(self.players)
        self.inactive_players: list[Player] = []
        self.first_run = True
        self.game_over = False
        self._current = 1
        self.cells = [[Cell(self, i, j) for j in range(cols)] for i in range(rows)]
        for i, row in enumerate(self.cells):
            for j, cell in enumerate(row):
                if i > 0:
                    cell.neighbors.append(self.cells[i - 1][j])
                if i < rows - 1:
                    cell.neighbors.append(self.cells[i + 1][j])
                if j > 0:
                    cell.neighbors.append(self.cells[i][j - 1])
                if j < cols - 1:
                    cell.neighbors.append(self.cells[i][j + 1])

    def current_player(self) -> Player:
        """Return the player whose turn it is."""
        with self._lock:
            if not 1 <= self._current <= len(self.active_players):
                raise GameStateError("Invalid current player index.")
            return self.active_players[self._current - 1]

    def switch_player(self) -> None:
        """Pass the turn to the next active player."""
        with self._lock:
            if self.first_run and self._current == len(self.players):
                self.first_run = False
            self._current = self._current % len(self.active_players) + 1

    def colors(self) -> list[list[str]]:
        """Colour name of each cell's owner, ``Black`` where empty."""
        with self._lock:
            return [
                [cell.player.color if cell.player else EMPTY_COLOR for cell in row]
                for row in self.cells
            ]

    def levels(self) -> list[list[int]]:
        with self._lock:
            return [[cell.level for cell in row] for row in self.cells]

    def end_check(self) -> None:
        """Split players into active and eliminated; end the game at one left.

        Nobody can be eliminated before every player has moved once.
        """
        with self._lock:
            if self.first_run:
                return
            owners = {
                id(cell.player)
                for row in self.cells
                for cell in row
                if cell.player is not None and cell.level > 0
            }
            self.active_players = [p for p in self.players if id(p) in owners]
            self.inactive_players = [p for p in self.players if id(p) not in owners]
            if len(self.active_players) == 1:
                self.game_over = True

    def _snapshot(self, player_id: int) -> GameFrame:
        x, y = self.cursor.position()
        with self._lock:
            return GameFrame(
                cursor_x=x,
                cursor_y=y,
                current_player_id=player_id,
                colors=self.colors(),
                levels=self.levels(),
                eliminated_players=list(self.inactive_players),
                game_over=self.game_over,
            )

    def snapshot(self) -> GameFrame:
        """Capture the board as a frame for the current player."""
        with self._lock:
            return self._snapshot(self.current_player().id)

    def render(self, x: int, y: int) -> str:
        """Draw the live board with the cell at column ``x``, row ``y`` highlighted."""
        with self._lock:
            parts = [_border("╔", "╦", "╗", self.cols)]
            for i, row in enumerate(self.cells):
                pieces = []
                for j, cell in enumerate(row):
                    color = cell.player.color if cell.player is not None else EMPTY_COLOR
                    glyph = "█" if cell.player is None else str(cell.level)
                    code = color_to_escape_code(color, i == y and j == x)
                    pieces.append(f" {code}{glyph}{RESET} ║")
                parts.append("║" + "".join(pieces) + "\n")
                if i != self.rows - 1:
                    parts.append(_border("╠", "╬", "╣", self.cols))
            parts.append(_border("╚", "╩", "╝", self.cols))
            parts.append(f"Player {self._current}'s turn.\n\n")
            if self.inactive_players:
                parts.append("Eliminated Players: ")
                parts.extend(
                    f"Player {player.id} ({player.color}) "
                    for player in self.inactive_players
                )
                parts.append("\n")
            if self.game_over:
                parts.append(f"Game Over! Player {self.active_players[0].id} wins!\n")
            return "".join(parts)