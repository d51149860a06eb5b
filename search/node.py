from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from puzzle_core.state import Board, has_bit, set_bit
from puzzle_core.moves import DIRECTIONS, apply_move
from puzzle_core.zobrist import Zobrist

ALL_TRIED = 0
for _d in DIRECTIONS:
    ALL_TRIED = set_bit(ALL_TRIED, _d)


@dataclass(slots=True, eq=False)
class Node:
    """A discovered board inside the frontier.

    tried: bitset of directions already attempted from this node.
    key: Zobrist key of the board (fast inequality pre-check).
    score: heuristic distance to the search goal, filled in by the frontier.
    seq: insertion order inside the frontier, -1 until inserted.
    """

    board: Board
    depth: int = 0
    key: Optional[int] = None
    tried: int = 0
    score: int = 0
    seq: int = -1

    @property
    def blank(self) -> int:
        return self.board.blank

    def can_expand(self) -> bool:
        return self.tried != ALL_TRIED

    def is_tried(self, direction: int) -> bool:
        return has_bit(self.tried, direction)

    def apply_move(self, direction: int) -> Optional[Board]:
        """Marks `direction` as attempted, then returns the moved board (None on the edge)."""
        self.tried = set_bit(self.tried, direction)
        return apply_move(self.board, direction)

    def expand(self, zobrist: Optional[Zobrist] = None) -> List["Node"]:
        """Tries every direction in order, returns the legal successors at depth + 1."""
        out: List[Node] = []
        for d in DIRECTIONS:
            nb = self.apply_move(d)
            if nb is None:
                continue
            key = None
            if zobrist is not None and self.key is not None:
                key = zobrist.update(self.key, self.board, nb)
            out.append(Node(board=nb, depth=self.depth + 1, key=key))
        return out

    def reopen(self, depth: int) -> None:
        """Lower the depth and clear the expansion flags."""
        self.depth = depth
        self.tried = 0

    def same_board(self, other: "Node") -> bool:
        if self.key is not None and other.key is not None and self.key != other.key:
            return False
        return self.board.cells == other.board.cells


def make_root(board: Board, zobrist: Zobrist) -> Node:
    return Node(board=board, depth=0, key=zobrist.hash(board))


__all__ = ["Node", "ALL_TRIED", "make_root"]
