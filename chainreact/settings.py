"""Board size and player count, read from one line of user input."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import TextIO

PROMPT = "Enter game settings in the format rows(>4) cols(>4) players(>1 & <7): "

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class SettingsError(ValueError):
    """Raised when a settings line cannot be used."""


@dataclass
class GameSettings:
    """Dimensions of the board and number of players."""

    rows: int = 5
    cols: int = 5
    players: int = 2

    def set_defaults(self) -> None:
        """Restore the default 5x5 board with two players."""
        self.rows = 5
        self.cols = 5
        self.players = 2


def _leading_int(token: str) -> int:
    """Read the integer at the start of ``token``, ignoring any trailing text."""
    match = _LEADING_INT.match(token)
    if match is None:
        raise SettingsError("Invalid input values. Using defaults.")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise SettingsError("Invalid input values. Using defaults.")
    return value


def parse_settings(text: str) -> GameSettings:
    """Parse ``"rows cols players"`` separated by spaces.

    Raises :class:`SettingsError` if there are not exactly three fields, a
    field is not a number, or a value is out of range.
    """
    fields = [part for part in text.split(" ") if part]
    if len(fields) != 3:
        raise SettingsError("Invalid input. Defaulting to rows=5, cols=5, players=2.")
    rows, cols, players = (_leading_int(part) for part in fields)
    if rows > 4 and cols > 4 and 1 < players < 7:
        return GameSettings(rows, cols, players)
    raise SettingsError("Input values out of allowed range. Using defaults.")


def prompt_settings(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> GameSettings:
    """Ask for the settings; on bad input report why and use the defaults."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr
    stdout.write(PROMPT)
    stdout.flush()
    line = stdin.readline()
    if line.endswith("\n"):
        line = line[:-1]
    try:
        return parse_settings(line)
    except SettingsError as error:
        stderr.write(f"{error}\n")
        return GameSettings()