"""Players and the terminal colours that represent them."""

from __future__ import annotations

from dataclasses import dataclass, field

_PLAYER_COLORS = {
    1: "Red",
    2: "Blue",
    3: "Green",
    4: "Yellow",
    5: "Cyan",
    6: "Magenta",
}

_COLOR_CODES = {
    "Red": "31m",
    "Blue": "34m",
    "Green": "32m",
    "Yellow": "33m",
    "Cyan": "36m",
    "Magenta": "35m",
}

RESET = "\033[0m"
_CURSOR_BACKGROUND = "\033[47;"
_PLAIN_BACKGROUND = "\033[40;"


@dataclass(eq=False)
class Player:
    """A participant; the colour follows from the id (1-6), else ``Unknown``."""

    id: int
    score: int = 0
    is_active: bool = True
    color: str = field(init=False)

    def __post_init__(self) -> None:
        self.color = _PLAYER_COLORS.get(self.id, "Unknown")


def color_to_escape_code(color: str, cursor: bool) -> str:
    """Return the ANSI sequence that draws a cell of ``color``.

    The cell under the cursor gets a white background, others a black one.
    Unrecognised colours yield the plain reset sequence.
    """
    background = _CURSOR_BACKGROUND if cursor else _PLAIN_BACKGROUND
    if color in _COLOR_CODES:
        return background + _COLOR_CODES[color]
    if color == "Black":
        return background + ("37m" if cursor else "30m")
    return RESET