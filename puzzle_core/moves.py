from typing import Dict, List, Optional, Tuple
from .state import Board, WIDTH, CELLS, position_to_xy

# expansion order
LEFT, RIGHT, UP, DOWN = 0, 1, 2, 3
DIRECTIONS: Tuple[int, ...] = (LEFT, RIGHT, UP, DOWN)

INVERSE: Dict[int, int] = {LEFT: RIGHT, RIGHT: LEFT, UP: DOWN, DOWN: UP}

# blank index offset for each direction
_OFFSET: Dict[int, int] = {LEFT: -1, RIGHT: 1, UP: -WIDTH, DOWN: WIDTH}


def target_cell(blank: int, direction: int) -> Optional[int]:
    """Cell the blank moves to, or None if it sits on that edge."""
    x, y = position_to_xy(blank)
    if direction == LEFT and x == 0:
        return None
    if direction == RIGHT and x == WIDTH - 1:
        return None
    if direction == UP and y == 0:
        return None
    if direction == DOWN and y == WIDTH - 1:
        return None
    return blank + _OFFSET[direction]


def apply_move(board: Board, direction: int) -> Optional[Board]:
    """Swaps the blank with its neighbour in `direction`; None on the edge."""
    nb = target_cell(board.blank, direction)
    if nb is None:
        return None
    return board.swapped(board.blank, nb)


def successors(board: Board) -> List[Tuple[int, Board]]:
    """All legal (direction, board) pairs in expansion order."""
    out: List[Tuple[int, Board]] = []
    for d in DIRECTIONS:
        nb = apply_move(board, d)
        if nb is not None:
            out.append((d, nb))
    return out


def are_adjacent(i: int, j: int) -> bool:
    xi, yi = position_to_xy(i)
    xj, yj = position_to_xy(j)
    return abs(xi - xj) + abs(yi - yj) == 1


def cells_differ(a: Board, b: Board) -> int:
    """Number of cells holding different tiles."""
    return sum(1 for i in range(CELLS) if a.cells[i] != b.cells[i])


def is_single_step_diff(a: Board, b: Board) -> bool:
    """True if one slide turns `a` into `b`.

    The blanks differ, exactly two cells differ, and those two cells are the
    grid-adjacent blank positions. Unrelated boards give False.
    The adjacency requirement is stricter than "blanks differ and two cells
    differ": a blank swapped with a distant tile is rejected too.
    """
    if a.blank == b.blank:
        return False
    if not are_adjacent(a.blank, b.blank):
        return False
    return cells_differ(a, b) == 2
