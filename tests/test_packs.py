import os
import pytest
from puzzle_core.packs import (
    iterate_board_strings, load_board_by_id, parse_board_id, resolve_board, write_pack,
)
from puzzle_core.parser import parse_board_str
from puzzle_core.state import InvalidBoardError, SOLVED
from puzzle_core.scramble import scramble, scramble_many
from puzzle_core.moves import cells_differ

CORE_DIR = os.path.join(os.path.dirname(__file__), "..", "puzzle_core")
EXAMPLES = os.path.join(CORE_DIR, "boards", "examples.txt")


def test_examples_iterate():
    pairs = list(iterate_board_strings(CORE_DIR, ["boards"]))
    assert len(pairs) >= 3
    ref0, s0 = pairs[0]
    assert ref0.index == 0
    assert parse_board_str(s0) == SOLVED


def test_load_by_id():
    b = load_board_by_id(f"{EXAMPLES}#2")
    assert b.blank == 6
    with pytest.raises(IndexError):
        load_board_by_id(f"{EXAMPLES}#99")


def test_parse_board_id():
    assert parse_board_id("a/b.txt#3") == ("a/b.txt", 3)
    assert parse_board_id("a/b.txt") == ("a/b.txt", 0)
    with pytest.raises(ValueError):
        parse_board_id("a/b.txt#x")


def test_resolve_inline_or_id():
    assert resolve_board("1 2 3 4 5 6 7 8 9 10 11 12 13 14 15 0") == SOLVED
    assert resolve_board(f"{EXAMPLES}#0") == SOLVED


def test_write_pack_roundtrip(tmp_path):
    boards = scramble_many(4, depth=10, seed=0)
    out = str(tmp_path / "packs" / "p.txt")
    write_pack(out, boards)
    assert [load_board_by_id(f"{out}#{i}") for i in range(4)] == boards


def test_scramble_deterministic():
    assert scramble(20, seed=5) == scramble(20, seed=5)
    assert scramble(0, seed=5) == SOLVED
    assert cells_differ(scramble(1, seed=5), SOLVED) == 2


def test_missing_pack_names_the_id_form():
    with pytest.raises(InvalidBoardError, match="pack not found"):
        resolve_board("no/such/pack.txt#2")
