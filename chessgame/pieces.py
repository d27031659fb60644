"""Chess pieces and their movement rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence

from chessgame.helpers import MoveContext

WHITE = "w"
BLACK = "b"
NO_COLOUR = "_"
EMPTY_NAME = "None"
BOARD_SIZE = 8

Grid = Sequence[Sequence["Piece"]]


def _on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def _square(board: Grid, row: int, col: int) -> Piece:
    """Look up a square, refusing negative indices instead of wrapping."""
    if row < 0 or col < 0:
        raise IndexError(f"square ({row}, {col}) is off the board")
    return board[row][col]


def _between(start: int, stop: int, step: int) -> Iterator[int]:
    """Yield the positions strictly between ``start`` and ``stop``."""
    pos = start + step
    while pos != stop:
        yield pos
        pos += step


def _free_or_enemy(piece: Piece, opp_colour: str) -> bool:
    return piece.is_empty or piece.colour == opp_colour


class Piece(ABC):
    """A piece, or an empty square, standing on the board."""

    def __init__(self, colour: str, name: str, row: int, col: int) -> None:
        self.colour = colour
        self.name = name
        self.row = row
        self.col = col

    @property
    def coords(self) -> tuple[int, int]:
        return self.row, self.col

    @coords.setter
    def coords(self, value: Sequence[int]) -> None:
        self.row, self.col = value[0], value[1]

    @property
    def is_empty(self) -> bool:
        return self.name == EMPTY_NAME

    def move_context(self, dest: Sequence[int]) -> MoveContext:
        """Bundle this piece's position and colour with a destination."""
        return MoveContext(
            curr_row=self.row,
            curr_col=self.col,
            dest_row=dest[0],
            dest_col=dest[1],
            curr_colour=self.colour,
            opp_colour=BLACK if self.colour == WHITE else WHITE,
        )

    def describe(self) -> str:
        """Return a short text such as ``wPawn: (6, 0)``."""
        return f"{self.colour}{self.name}: ({self.row}, {self.col})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.colour!r}, {self.coords})"

    @abstractmethod
    def valid_move(self, dest: Sequence[int], board: Grid) -> bool:
        """Tell whether this piece may move to ``dest`` on ``board``."""


class Empty(Piece):
    """An unoccupied square."""

    def __init__(self, coords: Sequence[int]) -> None:
        super().__init__(NO_COLOUR, EMPTY_NAME, coords[0], coords[1])

    def valid_move(self, dest: Sequence[int], board: Grid) -> bool:
        return False


class Rook(Piece):
    def __init__(self, colour: str, coords: Sequence[int]) -> None:
        super().__init__(colour, "Rook", coords[0], coords[1])

    def valid_move(self, dest: Sequence[int], board: Grid) -> bool:
        m = self.move_context(dest)
        if not _on_board(m.dest_row, m.dest_col):
            return False
        if m.dest_row != m.curr_row and m.dest_col != m.curr_col:
            return False

        if m.dest_row == m.curr_row:
            step = 1 if m.dest_col > m.curr_col else -1
            path = ((m.curr_row, c) for c in _between(m.curr_col, m.dest_col, step))
        else:
            step = 1 if m.dest_row > m.curr_row else -1
            path = ((r, m.curr_col) for r in _between(m.curr_row, m.dest_row, step))
        if any(not _square(board, r, c).is_empty for r, c in path):
            return False

        return _free_or_enemy(board[m.dest_row][m.dest_col], m.opp_colour)


class Knight(Piece):
    def __init__(self, colour: str, coords: Sequence[int]) -> None:
        super().__init__(colour, "Knight", coords[0], coords[1])

    def valid_move(self, dest: Sequence[int], board: Grid) -> bool:
        m = self.move_context(dest)
        if not _on_board(m.dest_row, m.dest_col):
            return False
        jump = (abs(m.dest_row - m.curr_row), abs(m.dest_col - m.curr_col))
        if jump not in ((2, 1), (1, 2)):
            return False
        return _free_or_enemy(board[m.dest_row][m.dest_col], m.opp_colour)


class Bishop(Piece):
    def __init__(self, colour: str, coords: Sequence[int]) -> None:
        super().__init__(colour, "Bishop", coords[0], coords[1])

    def valid_move(self, dest: Sequence[int], board: Grid) -> bool:
        m = self.move_context(dest)
        if not _on_board(m.dest_row, m.dest_col):
            return False
        if abs(m.dest_row - m.curr_row) != abs(m.dest_col - m.curr_col):
            return False

        row_step = 1 if m.dest_row > m.curr_row else -1
        col_step = 1 if m.dest_col > m.curr_col else -1
        path = zip(
            _between(m.curr_row, m.dest_row, row_step),
            _between(m.curr_col, m.dest_col, col_step),
        )
        if any(not _square(board, r, c).is_empty for r, c in path):
            return False

        return _free_or_enemy(board[m.dest_row][m.dest_col], m.opp_colour)


class Queen(Piece):
    def __init__(self, colour: str, coords: Sequence[int]) -> None:
        super().__init__(colour, "Queen", coords[0], coords[1])

    def valid_move(self, dest: Sequence[int], board: Grid) -> bool:
        return Bishop(self.colour, self.coords).valid_move(dest, board) or Rook(
            self.colour, self.coords
        ).valid_move(dest, board)


class King(Piece):
    def __init__(self, colour: str, coords: Sequence[int]) -> None:
        super().__init__(colour, "King", coords[0], coords[1])

    def valid_move(self, dest: Sequence[int], board: Grid) -> bool:
        m = self.move_context(dest)
        if not _on_board(m.dest_row, m.dest_col):
            return False
        if board[m.dest_row][m.dest_col].colour == m.curr_colour:
            return False
        row_diff = abs(m.dest_row - m.curr_row)
        col_diff = abs(m.dest_col - m.curr_col)
        return row_diff <= 1 and col_diff <= 1 and (row_diff != 0 or col_diff != 0)


class Pawn(Piece):
    def __init__(self, colour: str, coords: Sequence[int]) -> None:
        super().__init__(colour, "Pawn", coords[0], coords[1])

    def valid_move(self, dest: Sequence[int], board: Grid) -> bool:
        m = self.move_context(dest)
        if not _on_board(m.dest_row, m.dest_col):
            return False

        target = board[m.dest_row][m.dest_col]
        black = m.curr_colour == BLACK
        start_row = 1 if black else 6

        # Double step from the starting rank over two clear squares.
        if m.curr_row == start_row:
            if black and m.dest_row - m.curr_row == 2:
                if board[m.dest_row - 1][m.dest_col].is_empty and target.is_empty:
                    return True
            elif not black and m.curr_row - m.dest_row == 2:
                if board[m.dest_row + 1][m.dest_col].is_empty and target.is_empty:
                    return True

        # Single step forward onto an empty square.
        if m.curr_col == m.dest_col and target.is_empty:
            if m.curr_colour == BLACK and m.dest_row - m.curr_row == 1:
                return True
            if m.curr_colour == WHITE and m.curr_row - m.dest_row == 1:
                return True

        # Diagonal capture.
        if abs(m.dest_col - m.curr_col) == 1:
            if (
                m.dest_row - m.curr_row == 1
                and target.colour == WHITE
                and self.colour == BLACK
            ):
                return True
            if (
                m.curr_row - m.dest_row == 1
                and target.colour == BLACK
                and self.colour == WHITE
            ):
                return True

        return False