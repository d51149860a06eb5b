from __future__ import annotations
from typing import List, Optional

from puzzle_core.state import Board
from puzzle_core.moves import DIRECTIONS, target_cell, is_single_step_diff
from .frontier import Frontier
from .node import Node


def find_goal_node(frontier: Frontier, goal: Board) -> Optional[Node]:
    return frontier.find_board(goal)


def find_predecessor(frontier: Frontier, cur: Node) -> Optional[Node]:
    """Earliest inserted node one slide away from `cur` with a smaller depth.

    A predecessor's blank sits next to cur's blank, so only those buckets are scanned.
    """
    best: Optional[Node] = None
    for d in DIRECTIONS:
        b = target_cell(cur.blank, d)
        if b is None:
            continue
        for p in frontier.buckets[b]:
            if best is not None and p.seq > best.seq:
                break
            if p.depth < cur.depth and is_single_step_diff(cur.board, p.board):
                best = p
                break
    return best


def reconstruct_path(frontier: Frontier, goal: Board) -> List[Board]:
    """Boards from the goal back to the start node (goal first).

    Depth strictly decreases along the walk, so it always ends; the last
    board is the one with no shallower neighbour, i.e. the start.
    """
    cur = find_goal_node(frontier, goal)
    if cur is None:
        raise KeyError("goal board is not in the frontier")
    path: List[Board] = []
    while cur is not None:
        path.append(cur.board)
        cur = find_predecessor(frontier, cur)
    return path


__all__ = ["find_goal_node", "find_predecessor", "reconstruct_path"]
