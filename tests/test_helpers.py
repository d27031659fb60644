import dataclasses

import pytest

from chessgame.helpers import MoveContext, get_coords, toggle_turn


def test_toggle_turn_white_to_black():
    assert toggle_turn("w") == "b"


def test_toggle_turn_black_to_white():
    assert toggle_turn("b") == "w"


def test_toggle_turn_anything_else_becomes_white():
    assert toggle_turn("_") == "w"


@pytest.mark.parametrize("turn", ["w", "b"])
def test_toggle_turn_twice_is_identity(turn):
    assert toggle_turn(toggle_turn(turn)) == turn


def test_get_coords_origin():
    assert get_coords(0, 0) == (0, 0)


@pytest.mark.parametrize("row", range(8))
@pytest.mark.parametrize("col", range(8))
def test_get_coords_swaps_axes(row, col):
    assert get_coords(col * 80, row * 80) == (row, col)
    assert get_coords(col * 80 + 79, row * 80 + 79) == (row, col)


def test_move_context_fields():
    ctx = MoveContext(6, 4, 4, 4, "w", "b")
    assert (ctx.curr_row, ctx.curr_col, ctx.dest_row, ctx.dest_col) == (6, 4, 4, 4)
    assert ctx.curr_colour == "w"
    assert ctx.opp_colour == "b"


def test_move_context_is_frozen():
    ctx = MoveContext(0, 0, 1, 1, "b", "w")
    with pytest.raises(dataclasses.FrozenInstanceError):
        ctx.dest_row = 3
    assert ctx.dest_row == 1
    assert (ctx.curr_row, ctx.curr_col, ctx.dest_col) == (0, 0, 1)