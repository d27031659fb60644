"""The game loop: turns, piece selection by mouse and the window."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from chessgame.board import Board
from chessgame.helpers import get_coords, toggle_turn
from chessgame.pieces import WHITE

logger = logging.getLogger(__name__)

LEFT_BUTTON = 1


class Game:
    """Tracks whose turn it is and turns clicks into moves on a board."""

    def __init__(self, board: Board | None = None) -> None:
        self.board = board if board is not None else Board()
        self.turn = WHITE
        self.source: tuple[int, int] | None = None
        self.dest: tuple[int, int] | None = None
        self.selected = False
        self.needs_redraw = True

    def handle_click(self, pos_x: int, pos_y: int) -> bool:
        """React to a left click at a pixel position; return True if a move was made."""
        piece = self.board.piece_at(get_coords(pos_x, pos_y))
        logger.debug("clicked %s", piece.describe())

        if (
            self.source is not None
            and self.dest is None
            and self.selected
            and piece.colour != self.turn
        ):
            self.dest = piece.coords
            logger.debug("destination selected %s", piece.describe())
        elif piece.colour == self.turn:
            self.source = piece.coords
            self.selected = True
            logger.debug("selected piece %s", piece.describe())

        if self.source is None or self.dest is None:
            return False

        moved = self.board.move_piece(self.source, self.dest)
        if moved:
            self.turn = toggle_turn(self.turn)
            self.needs_redraw = True
        self.source = None
        self.dest = None
        self.selected = False
        return moved


def main(argv: Sequence[str] | None = None) -> int:
    """Open the chess window and play until it is closed."""
    import pygame

    from chessgame.graphics import WINDOW_SIZE, draw_window, load_textures

    parser = argparse.ArgumentParser(prog="chessgame", description="Two-player chess.")
    parser.add_argument("--assets", default="assets", help="directory holding piece images")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        window = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Chessboard")
        textures = load_textures(args.assets)
        game = Game(Board())
        clock = pygame.time.Clock()
        running = True
        while running:
            if game.needs_redraw:
                draw_window(window, game.board, textures)
                pygame.display.flip()
                game.needs_redraw = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_BUTTON:
                    game.handle_click(*event.pos)
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())