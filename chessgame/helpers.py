"""Small helpers shared by the board, the pieces and the game loop."""

from __future__ import annotations

from dataclasses import dataclass

SQUARE_SIZE = 80


@dataclass(frozen=True, slots=True)
class MoveContext:
    """Where a piece stands, where it wants to go, and whose side it is on."""

    curr_row: int
    curr_col: int
    dest_row: int
    dest_col: int
    curr_colour: str
    opp_colour: str


def toggle_turn(turn: str) -> str:
    """Return the colour whose turn comes after ``turn``."""
    return "b" if turn == "w" else "w"


def get_coords(pos_x: int, pos_y: int) -> tuple[int, int]:
    """Map a pixel position in the window to a (row, column) square."""
    # Screen x runs along columns and screen y along rows.
    return pos_y // SQUARE_SIZE, pos_x // SQUARE_SIZE