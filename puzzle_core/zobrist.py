import random
from .state import Board, CELLS


class Zobrist:
    """Zobrist hash for a 4x4 board.

    One 64-bit key per (cell, tile) pair, all 16 cells take part (the blank too).
    A slide only touches two cells, so successor keys are updated incrementally.
    """
    def __init__(self, seed: int = 12345) -> None:
        rng = random.Random(seed)
        self.keys = [[rng.getrandbits(64) for _ in range(CELLS)] for _ in range(CELLS)]

    def hash(self, b: Board) -> int:
        h = 0
        for idx, tile in enumerate(b.cells):
            h ^= self.keys[idx][tile]
        return h

    def update(self, h: int, parent: Board, child: Board) -> int:
        """Key of `child`, given key `h` of `parent` one slide away."""
        src = parent.blank
        dst = child.blank
        tile = parent.cells[dst]
        keys = self.keys
        h ^= keys[src][0] ^ keys[dst][tile]
        h ^= keys[src][tile] ^ keys[dst][0]
        return h
