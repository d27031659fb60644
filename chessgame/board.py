"""The chess board: setting up pieces, moving them and detecting check."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from chessgame.pieces import (
    BLACK,
    BOARD_SIZE,
    NO_COLOUR,
    WHITE,
    Bishop,
    Empty,
    King,
    Knight,
    Pawn,
    Piece,
    Queen,
    Rook,
)

logger = logging.getLogger(__name__)

_BACK_RANK = (Rook, Knight, Bishop, Queen, King, Bishop, Knight, Rook)
_NAME_WIDTH = 8


class KingNotFoundError(RuntimeError):
    """Raised when the king of the requested colour is not on the board."""


def _starting_piece(row: int, col: int) -> Piece:
    coords = (row, col)
    if row == 0:
        return _BACK_RANK[col](BLACK, coords)
    if row == 1:
        return Pawn(BLACK, coords)
    if row == 6:
        return Pawn(WHITE, coords)
    if row == 7:
        return _BACK_RANK[col](WHITE, coords)
    return Empty(coords)


def _check_square(row: int, col: int) -> None:
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise IndexError(f"square ({row}, {col}) is off the board")


class Board:
    """An 8x8 grid of pieces, starting in the standard position."""

    def __init__(self) -> None:
        self.grid: list[list[Piece]] = [
            [_starting_piece(row, col) for col in range(BOARD_SIZE)]
            for row in range(BOARD_SIZE)
        ]

    def render(self) -> str:
        """Return a text picture of the board, one line per row."""
        lines = []
        for row in self.grid:
            cells = [
                piece.colour + ("____" if piece.is_empty else piece.name).ljust(_NAME_WIDTH)
                for piece in row
            ]
            lines.append("{" + ", ".join(cells) + "}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()

    def piece_at(self, coords: Sequence[int]) -> Piece:
        """Return the piece (or empty square) at ``coords``."""
        row, col = coords[0], coords[1]
        _check_square(row, col)
        return self.grid[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        _check_square(row, col)
        return self.grid[row][col].is_empty

    def move_piece(self, source: Sequence[int], dest: Sequence[int]) -> bool:
        """Move the piece at ``source`` to ``dest`` if the move is legal.

        A move that would leave the mover's own king in check is undone.
        """
        source = (source[0], source[1])
        dest = (dest[0], dest[1])
        piece = self.piece_at(source)

        if not piece.valid_move(dest, self.grid):
            logger.info("invalid move")
            return False

        captured = self.piece_at(dest)
        self.grid[dest[0]][dest[1]] = piece
        piece.coords = dest
        self.grid[source[0]][source[1]] = Empty(source)

        if self.king_in_check(piece.colour):
            self.grid[source[0]][source[1]] = piece
            piece.coords = source
            self.grid[dest[0]][dest[1]] = captured
            logger.info("invalid move, king in check after move")
            return False

        logger.info("valid move")
        return True

    def king_in_check(self, colour: str) -> bool:
        """Tell whether any opposing piece attacks the king of ``colour``."""
        king_square = None
        for r, row in enumerate(self.grid):
            for c, piece in enumerate(row):
                if piece.name == "King" and piece.colour == colour:
                    king_square = (r, c)
                    break

        if king_square is None:
            raise KingNotFoundError("King not found on board")

        return any(
            piece.valid_move(king_square, self.grid)
            for row in self.grid
            for piece in row
            if piece.colour not in (colour, NO_COLOUR)
        )