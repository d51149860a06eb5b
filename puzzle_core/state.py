from dataclasses import dataclass, field
from typing import Tuple

__all__ = [
    "Board",
    "InvalidBoardError",
    "WIDTH",
    "CELLS",
    "SOLVED",
    "position_to_xy",
    "xy_to_position",
    "bit",
    "has_bit",
    "set_bit",
]

WIDTH = 4
CELLS = WIDTH * WIDTH


# Bit helpers
def bit(idx: int) -> int:
    return 1 << idx

def has_bit(mask: int, idx: int) -> bool:
    return (mask >> idx) & 1 == 1

def set_bit(mask: int, idx: int) -> int:
    return mask | bit(idx)



def position_to_xy(idx: int) -> Tuple[int, int]:
    """Cell index -> (x, y), x is the column and y the row."""
    return (idx % WIDTH, idx // WIDTH)


def xy_to_position(x: int, y: int) -> int:
    return y * WIDTH + x


class InvalidBoardError(ValueError):
    """The cells are not a permutation of 0..15."""


@dataclass(frozen=True, slots=True)
class Board:
    """
    Immutable 4x4 tile grid.

    cells[idx] is the tile at idx = y*WIDTH + x, 0 is the blank.
    The permutation invariant is checked once here, every lookup relies on it.
    """

    cells: Tuple[int, ...]
    blank: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        cells = tuple(int(v) for v in self.cells)
        if len(cells) != CELLS or sorted(cells) != list(range(CELLS)):
            raise InvalidBoardError(f"not a permutation of 0..{CELLS - 1}: {cells}")
        # frozen dataclass: bypass __setattr__
        object.__setattr__(self, "cells", cells)
        object.__setattr__(self, "blank", cells.index(0))

    def position_of(self, tile: int) -> int:
        return self.cells.index(tile)

    def swapped(self, i: int, j: int) -> "Board":
        cells = list(self.cells)
        cells[i], cells[j] = cells[j], cells[i]
        return Board(tuple(cells))


SOLVED = Board(tuple(range(1, CELLS)) + (0,))
