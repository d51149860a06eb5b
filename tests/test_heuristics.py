import pytest
from puzzle_core.state import Board, SOLVED
from puzzle_core.moves import LEFT, UP, apply_move
from puzzle_core.scramble import scramble
from heuristics.classic import h_misplaced, h_squared_euclid, h_zero, tile_positions
from heuristics.selector import get_heuristic

TARGET = Board((1, 3, 10, 4, 5, 2, 0, 7, 9, 11, 6, 8, 13, 14, 15, 12))


def test_tile_positions_inverse():
    pos = tile_positions(TARGET)
    for idx, tile in enumerate(TARGET.cells):
        assert pos[tile] == idx


@pytest.mark.parametrize("h", [h_misplaced, h_squared_euclid, h_zero])
def test_zero_on_identical_boards(h):
    for seed in range(3):
        b = scramble(15, seed=seed)
        assert h(b, b) == 0
        assert h(b, SOLVED) >= 0


def test_one_slide_values():
    b = apply_move(SOLVED, LEFT)
    # tile 15 and the blank each moved by one cell
    assert h_misplaced(b, SOLVED) == 2
    assert h_squared_euclid(b, SOLVED) == 2


def test_squared_euclid_grows_with_distance():
    b = apply_move(apply_move(SOLVED, UP), UP)
    # blank moved two rows (4), tiles 12 and 8 one row each
    assert h_squared_euclid(b, SOLVED) == 6
    assert isinstance(h_squared_euclid(b, SOLVED), int)


def test_selector():
    assert get_heuristic("squared_euclid") is h_squared_euclid
    assert get_heuristic("Misplaced") is h_misplaced
    with pytest.raises(ValueError):
        get_heuristic("manhattan")
