from __future__ import annotations
import random
from typing import List, Optional

from .state import Board, SOLVED
from .moves import successors


def scramble(depth: int, seed: int, start: Board = SOLVED) -> Board:
    """Random walk of `depth` slides from `start` without immediate backtracking."""
    rng = random.Random(seed)
    b = start
    last_blank: Optional[int] = None
    for _ in range(depth):
        cand = [nb for _, nb in successors(b)]
        if len(cand) > 1:
            cand = [nb for nb in cand if nb.blank != last_blank]
        nxt = rng.choice(cand)
        last_blank = b.blank
        b = nxt
    return b


def scramble_many(count: int, depth: int, seed: int, start: Board = SOLVED) -> List[Board]:
    return [scramble(depth, seed + i, start) for i in range(count)]
