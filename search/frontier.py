from __future__ import annotations
from typing import Callable, Dict, Iterator, List, Optional

from puzzle_core.state import Board, CELLS
from puzzle_core.zobrist import Zobrist
from .node import Node
from .priority_queue import PriorityQueue


class Frontier:
    """All discovered nodes, bucketed by blank position.

    Each bucket keeps its nodes in insertion order, an index by Zobrist key
    (a key miss proves the board is new, a hit is confirmed cell by cell) and
    a heap ordered by (score, seq) for picking the next node to expand.
    No bucket ever holds the same board twice.
    """
    def __init__(
        self,
        goal: Board,
        distance: Callable[[Board, Board], int],
        zobrist: Optional[Zobrist] = None,
    ) -> None:
        self.goal = goal
        self.distance = distance
        self.z = zobrist or Zobrist()
        self.buckets: List[List[Node]] = [[] for _ in range(CELLS)]
        self._by_key: List[Dict[int, List[Node]]] = [{} for _ in range(CELLS)]
        self._queues: List[PriorityQueue] = [PriorityQueue() for _ in range(CELLS)]
        self.nodes: List[Node] = []

    def _lookup(self, node: Node) -> Optional[Node]:
        for other in self._by_key[node.blank].get(node.key, ()):
            if other.same_board(node):
                return other
        return None

    def insert_or_improve(self, node: Node) -> bool:
        """Adds `node` unless its board is already stored.

        A stored copy at a strictly greater depth takes the new depth and is
        re-opened for expansion; otherwise the call changes nothing.
        Returns True only when a new node was appended.
        """
        if node.key is None:
            node.key = self.z.hash(node.board)
        old = self._lookup(node)
        if old is not None:
            if old.depth > node.depth:
                old.reopen(node.depth)
                self._queues[old.blank].push((old.score, old.seq), old)
            return False

        b = node.blank
        node.seq = len(self.nodes)
        node.score = self.distance(node.board, self.goal)
        self.nodes.append(node)
        self.buckets[b].append(node)
        self._by_key[b].setdefault(node.key, []).append(node)
        self._queues[b].push((node.score, node.seq), node)
        return True

    def best_candidate(self, bucket: int) -> Optional[Node]:
        """Expandable node of `bucket` closest to the goal, earliest inserted on ties."""
        # entries of already expanded nodes are dropped lazily
        return self._queues[bucket].peek(Node.can_expand)

    def best_distance(self) -> Optional[int]:
        """Smallest score among the best candidates of all buckets."""
        best: Optional[int] = None
        for b in range(CELLS):
            cand = self.best_candidate(b)
            if cand is not None and (best is None or cand.score < best):
                best = cand.score
        return best

    def find_board(self, board: Board) -> Optional[Node]:
        return self._lookup(Node(board=board, key=self.z.hash(board)))

    def total_count(self) -> int:
        return len(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)
