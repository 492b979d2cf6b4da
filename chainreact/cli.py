"""The interactive terminal game."""

from __future__ import annotations

import argparse
import io
import os
import subprocess
import sys
import termios
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

from .board import Board
from .cursor import Cursor
from .display import CLEAR, DisplayThread
from .explosions import ExplosionProcessor
from .settings import prompt_settings

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"


@contextmanager
def raw_mode(fd: Optional[int]) -> Iterator[None]:
    """Turn off line buffering and echo on ``fd`` and hide the cursor.

    Terminal settings are only touched when ``fd`` is a terminal; everything
    is restored on exit.
    """
    saved = None
    if fd is not None and os.isatty(fd):
        saved = termios.tcgetattr(fd)
        changed = termios.tcgetattr(fd)
        changed[3] &= ~(termios.ICANON | termios.ECHO)
        termios.tcsetattr(fd, termios.TCSANOW, changed)
    sys.stdout.write(HIDE_CURSOR)
    sys.stdout.flush()
    try:
        yield
    finally:
        sys.stdout.write(SHOW_CURSOR)
        sys.stdout.flush()
        if saved is not None:
            termios.tcsetattr(fd, termios.TCSANOW, saved)


def clear_screen() -> None:
    """Clear the terminal with the system ``clear`` command."""
    sys.stdout.flush()
    try:
        subprocess.run(["clear"], check=False)
    except FileNotFoundError:
        sys.stdout.write(CLEAR)
        sys.stdout.flush()


def dispatch_key(key: str, board: Board, cursor: Cursor) -> bool:
    """Act on one key press; return ``False`` when the player asked to quit.

    ``w``/``a``/``s``/``d`` move the cursor, Enter places an orb, ``c``
    clears the screen and ``q`` quits. Other keys are ignored.
    """
    if key == "q":
        return False
    if key == "c":
        clear_screen()
    elif key == "w":
        cursor.move_up()
    elif key == "s":
        cursor.move_down()
    elif key == "a":
        cursor.move_left()
    elif key == "d":
        cursor.move_right()
    elif key == "\n":
        x, y = cursor.position()
        if board.cells[y][x].select(board.current_player()):
            board.switch_player()
    return True


def _fileno(stream: TextIO) -> Optional[int]:
    try:
        return stream.fileno()
    except (OSError, ValueError, io.UnsupportedOperation):
        return None


def main(argv: Optional[list[str]] = None) -> int:
    """Run the game on the terminal until the player presses ``q``."""
    parser = argparse.ArgumentParser(
        prog="chainreact",
        description="Chain reaction board game for the terminal. "
        "Move with w/a/s/d, place an orb with Enter, quit with q.",
    )
    parser.parse_args(argv)

    stdin = sys.stdin
    settings = prompt_settings(stdin, sys.stdout, sys.stderr)
    clear_screen()
    print("Game Settings:")
    print(f"Rows: {settings.rows}")
    print(f"Columns: {settings.cols}")
    print(f"Players: {settings.players}")

    with raw_mode(_fileno(stdin)):
        cursor = Cursor(settings.rows, settings.cols)
        board = Board(settings.rows, settings.cols, settings.players, cursor=cursor)
        print("Game board initialized.")
        print("Game players initialized.")
        for player in board.players:
            print(f"Player {player.id} ({player.color}) initialized.")
        print("Press any key to start the game...", flush=True)
        stdin.read(1)
        clear_screen()

        display = DisplayThread(board, board.frames, cursor, sys.stdout)
        processor = ExplosionProcessor(board.explosions)
        display.start()
        processor.start()
        try:
            while True:
                key = stdin.read(1)
                if not key or not dispatch_key(key, board, cursor):
                    print("Exiting game.", flush=True)
                    break
        finally:
            display.stop()
            processor.stop()
            board.explosions.clear()
        clear_screen()
        print("Game ended.")
        print("Thank you for playing!", flush=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())