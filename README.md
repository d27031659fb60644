# chessgame

A two-player chess board shown in a pygame window. Players take turns
clicking a piece of their own colour and then a destination square. Each
move is checked against the rules for that piece, and a move that would leave
the mover's own king in check is refused.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
chessgame
chessgame --assets path/to/images
```

A 640×640 window titled "Chessboard" opens with an 8×8 board of 80-pixel
squares. White moves first. Click one of your pieces to select it (clicking
another of your own pieces changes the selection), then click an empty square
or an opponent's piece to move there. If the move is legal, the turn passes
to the other player and the board is redrawn. If it is not, the selection is
cleared and you choose again.

Piece images are read from the directory given by `--assets` (default:
`assets` in the current directory). The files are named by colour letter and
piece letter: `wr.png`, `wn.png`, `wb.png`, `wq.png`, `wk.png`, `wp.png` and
the same with `b` for Black. An image that is missing is skipped, and pieces
of that kind are simply not drawn.

Supported movement:

- **Rook**: any distance along a row or column, blocked by pieces in between.
- **Bishop**: any distance along a diagonal, blocked by pieces in between.
- **Queen**: any rook or bishop move.
- **Knight**: an L-shape, jumping over pieces.
- **King**: one square in any direction.
- **Pawn**: one square forward onto an empty square, two from its starting
  row when both squares are clear, and one square diagonally forward to
  capture.

## Using the board in code

```python
from chessgame.board import Board

board = Board()
board.move_piece((6, 4), (4, 4))   # white pawn two squares forward
print(board.render())
print(board.king_in_check("b"))
```

Coordinates are `(row, column)`, with row 0 holding Black's back rank and
row 7 holding White's. Colours are `"w"` and `"b"`; empty squares are
`Empty` pieces with colour `"_"`.

- `Board.move_piece(source, dest)` returns `True` when the move was made and
  `False` when it was refused.
- `Board.piece_at(coords)` and `Board.is_empty(row, col)` look up a square
  and raise `IndexError` for squares off the board.
- `Board.king_in_check(colour)` raises `KingNotFoundError` if there is no
  king of the given colour on the board.
- `Board.render()` returns a text picture of the board, one line per row.

The click handling used by the window is available without pygame through
`chessgame.game.Game`: `Game.handle_click(pos_x, pos_y)` takes a pixel
position and returns `True` when the click completed a move.

Messages about accepted and refused moves go to the standard `logging`
module rather than to the window.

## What it does not do

Castling, en passant and pawn promotion are not part of the rules, and the
game does not detect checkmate or stalemate: play continues until the window
is closed. There is no move history, undo, saving of games or computer
opponent.