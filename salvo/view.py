"""Text rendering of boards, with the colours and labels each cell state gets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .player import BOARD_SIZE, HIT, MISS, SHIP


@dataclass(frozen=True)
class CellStyle:
    """How one cell is shown: its colour name, its label and a text glyph."""

    color: str
    label: str
    glyph: str

    @property
    def attackable(self) -> bool:
        """A tracking cell can be fired at while it shows nothing yet."""
        return self.color == "LightGray" or not self.label


_OWN_STYLES = {
    SHIP: CellStyle("DarkGray", "", "#"),
    HIT: CellStyle("OrangeRed", "", "X"),
    MISS: CellStyle("LightSkyBlue", "", "o"),
}
_OWN_DEFAULT = CellStyle("Azure", "", "~")

_TRACKING_STYLES = {
    HIT: CellStyle("Red", "H", "H"),
    MISS: CellStyle("Blue", "M", "M"),
}
_TRACKING_DEFAULT = CellStyle("LightGray", "", ".")


def own_cell_style(cell: str) -> CellStyle:
    """Style of a cell on a player's own board."""
    return _OWN_STYLES.get(cell, _OWN_DEFAULT)


def tracking_cell_style(cell: str) -> CellStyle:
    """Style of a cell seen on the opponent's board."""
    return _TRACKING_STYLES.get(cell, _TRACKING_DEFAULT)


def render_board(board: str, styler: Callable[[str], CellStyle]) -> str:
    """Render a row-by-row board string as a labelled grid of glyphs.

    Raises ValueError when the string does not cover the board exactly.
    """
    if len(board) != BOARD_SIZE * BOARD_SIZE:
        raise ValueError(
            f"board string must have {BOARD_SIZE * BOARD_SIZE} cells, got {len(board)}"
        )
    lines = ["  " + " ".join(str(col) for col in range(BOARD_SIZE))]
    for row in range(BOARD_SIZE):
        cells = board[row * BOARD_SIZE:(row + 1) * BOARD_SIZE]
        lines.append(f"{row} " + " ".join(styler(cell).glyph for cell in cells))
    return "\n".join(lines)


def render_boards(own_board: str, tracking_board: str) -> str:
    """Render a player's own board and the board of shots fired, side by side.

    The tracking board is given as the opponent's own board; only hits and
    misses on it are shown.
    """
    left = ["Your Ships", *render_board(own_board, own_cell_style).splitlines()]
    right = ["Tracking Board", *render_board(tracking_board, tracking_cell_style).splitlines()]
    width = max(len(line) for line in left)
    return "\n".join(f"{a.ljust(width)}   {b}" for a, b in zip(left, right))