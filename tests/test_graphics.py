import pygame
import pytest

from chessgame.board import Board
from chessgame.graphics import (
    DARK_SQUARE,
    LIGHT_SQUARE,
    TEXTURE_KEYS,
    WINDOW_SIZE,
    draw_window,
    load_textures,
)


def _rgb(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def _solid(colour, size=(10, 10)):
    surf = pygame.Surface(size)
    surf.fill(colour)
    return surf


@pytest.fixture
def surface():
    return pygame.Surface(WINDOW_SIZE)


def test_squares_alternate_without_textures(surface):
    draw_window(surface, Board(), {})
    assert _rgb(surface, 40, 40) == LIGHT_SQUARE
    assert _rgb(surface, 120, 40) == DARK_SQUARE
    assert _rgb(surface, 40, 120) == DARK_SQUARE
    assert _rgb(surface, 600, 600) == LIGHT_SQUARE


def test_checkerboard_invariant(surface):
    draw_window(surface, Board(), {})
    for row in range(8):
        for col in range(8):
            expected = LIGHT_SQUARE if (row + col) % 2 == 0 else DARK_SQUARE
            assert _rgb(surface, col * 80 + 40, row * 80 + 40) == expected


def test_piece_texture_is_scaled_to_its_square(surface):
    red = (255, 0, 0)
    draw_window(surface, Board(), {"wp": _solid(red)})
    for col in range(8):
        assert _rgb(surface, col * 80 + 1, 6 * 80 + 1) == red
        assert _rgb(surface, col * 80 + 78, 6 * 80 + 78) == red
    # Black pawns have no texture, so their squares keep the board colour.
    assert _rgb(surface, 40, 80 + 40) == DARK_SQUARE


def test_empty_squares_are_not_covered(surface):
    textures = {key: _solid((0, 255, 0)) for key in TEXTURE_KEYS}
    draw_window(surface, Board(), textures)
    assert _rgb(surface, 40, 4 * 80 + 40) == LIGHT_SQUARE
    assert _rgb(surface, 40, 0 * 80 + 40) == (0, 255, 0)


def test_drawing_follows_moves(surface):
    board = Board()
    assert board.move_piece((6, 4), (4, 4))
    draw_window(surface, board, {"wp": _solid((255, 0, 0))})
    assert _rgb(surface, 4 * 80 + 40, 4 * 80 + 40) == (255, 0, 0)
    assert _rgb(surface, 4 * 80 + 40, 6 * 80 + 40) == LIGHT_SQUARE


def test_load_textures_reads_present_files(tmp_path):
    pygame.image.save(_solid((1, 2, 3), (16, 12)), str(tmp_path / "wp.png"))
    pygame.image.save(_solid((4, 5, 6), (8, 8)), str(tmp_path / "bk.png"))
    textures = load_textures(tmp_path)
    assert set(textures) == {"wp", "bk"}
    assert textures["wp"].get_size() == (16, 12)
    assert tuple(textures["bk"].get_at((0, 0)))[:3] == (4, 5, 6)


def test_load_textures_empty_directory(tmp_path):
    assert load_textures(str(tmp_path)) == {}


def test_load_textures_covers_all_pieces(tmp_path):
    names = ["br", "bn", "bb", "bq", "bk", "bp", "wr", "wn", "wb", "wq", "wk", "wp"]
    for name in names:
        pygame.image.save(_solid((9, 9, 9), (4, 4)), str(tmp_path / f"{name}.png"))
    textures = load_textures(tmp_path)
    assert set(textures) == set(names)
    assert set(TEXTURE_KEYS) == set(names)
    assert len(TEXTURE_KEYS) == 12