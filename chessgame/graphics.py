"""Drawing the chess board and its pieces onto a pygame surface."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import pygame

from chessgame.board import Board
from chessgame.helpers import SQUARE_SIZE
from chessgame.pieces import BLACK, BOARD_SIZE, WHITE, Piece

LIGHT_SQUARE = (245, 245, 220)
DARK_SQUARE = (0, 0, 255)
BACKGROUND = (255, 255, 255)
WINDOW_SIZE = (SQUARE_SIZE * BOARD_SIZE, SQUARE_SIZE * BOARD_SIZE)

_PIECE_LETTERS = {
    "Rook": "r",
    "Knight": "n",
    "Bishop": "b",
    "Queen": "q",
    "King": "k",
    "Pawn": "p",
}

TEXTURE_KEYS = tuple(
    colour + letter for colour in (BLACK, WHITE) for letter in _PIECE_LETTERS.values()
)


def _texture_key(piece: Piece) -> str | None:
    letter = _PIECE_LETTERS.get(piece.name)
    return None if letter is None else piece.colour + letter


def load_textures(assets_dir: str | Path) -> dict[str, pygame.Surface]:
    """Load piece images such as ``wp.png`` from ``assets_dir``.

    Images that are missing are left out, so their pieces are not drawn.
    """
    directory = Path(assets_dir)
    textures: dict[str, pygame.Surface] = {}
    for key in TEXTURE_KEYS:
        path = directory / f"{key}.png"
        if path.is_file():
            textures[key] = pygame.image.load(str(path))
    return textures


def draw_window(
    surface: pygame.Surface,
    board: Board,
    textures: Mapping[str, pygame.Surface],
) -> None:
    """Paint the checkered board and every piece that has a texture."""
    surface.fill(BACKGROUND)
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            colour = LIGHT_SQUARE if (row + col) % 2 == 0 else DARK_SQUARE
            rect = pygame.Rect(col * SQUARE_SIZE, row * SQUARE_SIZE, SQUARE_SIZE, SQUARE_SIZE)
            surface.fill(colour, rect)

    for row, pieces in enumerate(board.grid):
        for col, piece in enumerate(pieces):
            key = _texture_key(piece)
            texture = textures.get(key) if key is not None else None
            if texture is None:
                continue
            image = pygame.transform.scale(texture, (SQUARE_SIZE, SQUARE_SIZE))
            surface.blit(image, (col * SQUARE_SIZE, row * SQUARE_SIZE))