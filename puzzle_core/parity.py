from __future__ import annotations
from typing import List

from .state import Board, CELLS, position_to_xy


def permutation_parity(perm: List[int]) -> int:
    """0 for even, 1 for odd, counted through cycle lengths."""
    seen = [False] * len(perm)
    parity = 0
    for i in range(len(perm)):
        if seen[i]:
            continue
        length = 0
        j = i
        while not seen[j]:
            seen[j] = True
            j = perm[j]
            length += 1
        parity ^= (length - 1) & 1
    return parity


def blank_distance(a: Board, b: Board) -> int:
    ax, ay = position_to_xy(a.blank)
    bx, by = position_to_xy(b.blank)
    return abs(ax - bx) + abs(ay - by)


def is_solvable_pair(start: Board, goal: Board) -> bool:
    """True if `goal` is reachable from `start`.

    Every slide is one transposition of the cell permutation and moves the
    blank by one cell, so both parities flip together on each move.
    """
    where = [0] * CELLS
    for idx, tile in enumerate(goal.cells):
        where[tile] = idx
    perm = [where[tile] for tile in start.cells]
    return permutation_parity(perm) == blank_distance(start, goal) & 1
