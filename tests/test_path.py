import pytest
from puzzle_core.state import SOLVED
from puzzle_core.moves import LEFT, UP, apply_move, is_single_step_diff
from heuristics.classic import h_squared_euclid
from search.frontier import Frontier
from search.node import Node
from search.path import find_goal_node, reconstruct_path

ONE = apply_move(SOLVED, LEFT)
TWO = apply_move(ONE, UP)


def _chain_frontier() -> Frontier:
    f = Frontier(TWO, h_squared_euclid)
    f.insert_or_improve(Node(board=SOLVED, depth=0))
    f.insert_or_improve(Node(board=ONE, depth=1))
    f.insert_or_improve(Node(board=apply_move(SOLVED, UP), depth=1))
    f.insert_or_improve(Node(board=TWO, depth=2))
    return f


def test_reconstruct_goal_to_start():
    f = _chain_frontier()
    path = reconstruct_path(f, TWO)
    assert path == [TWO, ONE, SOLVED]
    assert all(is_single_step_diff(a, b) for a, b in zip(path, path[1:]))


def test_goal_at_start():
    f = Frontier(SOLVED, h_squared_euclid)
    f.insert_or_improve(Node(board=SOLVED))
    assert reconstruct_path(f, SOLVED) == [SOLVED]


def test_missing_goal():
    f = _chain_frontier()
    assert find_goal_node(f, apply_move(TWO, UP)) is None
    with pytest.raises(KeyError):
        reconstruct_path(f, apply_move(TWO, UP))
