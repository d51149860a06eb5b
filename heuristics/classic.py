from __future__ import annotations
from typing import Callable

import numpy as np
from puzzle_core.state import Board, CELLS, WIDTH
from puzzle_core.moves import cells_differ

Distance = Callable[[Board, Board], int]


# ---- helpers

def tile_positions(board: Board) -> np.ndarray:
    """pos[t] = cell index of tile t."""
    pos = np.empty(CELLS, dtype=np.int64)
    pos[np.asarray(board.cells, dtype=np.int64)] = np.arange(CELLS, dtype=np.int64)
    return pos


# ---- distances between two boards

def h_misplaced(a: Board, b: Board) -> int:
    """Number of cells whose tile differs (the blank counts too)."""
    return cells_differ(a, b)


def h_squared_euclid(a: Board, b: Board) -> int:
    """Sum over all 16 tiles of the squared grid distance between their cells in `a` and `b`."""
    pa = tile_positions(a)
    pb = tile_positions(b)
    dy = pa // WIDTH - pb // WIDTH
    dx = pa % WIDTH - pb % WIDTH
    return int((dx * dx + dy * dy).sum())


def h_zero(a: Board, b: Board) -> int:
    return 0
