from typing import Iterable
from .state import Board, WIDTH


def render_grid(board: Board) -> str:
    """4 rows of zero-padded two-digit tiles, the blank shows as 00."""
    rows = []
    for y in range(WIDTH):
        row = board.cells[y * WIDTH:(y + 1) * WIDTH]
        rows.append(" ".join(f"{v:02d}" for v in row))
    return "\n".join(rows)


def render_path(path: Iterable[Board]) -> str:
    """Boards separated by blank lines."""
    return "\n\n".join(render_grid(b) for b in path)
