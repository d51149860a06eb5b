from __future__ import annotations
from typing import Callable, Dict, Optional
import time

from puzzle_core.state import Board, CELLS
from puzzle_core.parity import is_solvable_pair
from puzzle_core.zobrist import Zobrist
from heuristics.classic import Distance, h_squared_euclid
from .frontier import Frontier
from .node import make_root
from .path import reconstruct_path

Result = Dict[str, object]
ProgressFn = Callable[[int, Optional[int]], None]


def _failed(reason: str, t0: float, frontier: Optional[Frontier] = None, expanded: int = 0) -> Result:
    return {
        "success": False,
        "reason": reason,
        "nodes": len(frontier) if frontier is not None else 0,
        "expanded": expanded,
        "runtime": time.time() - t0,
    }


def greedy_search(
    start: Board,
    goal: Board,
    distance: Distance = h_squared_euclid,
    check_parity: bool = True,
    node_limit: Optional[int] = None,
    progress_every: int = 1000,
    on_progress: Optional[ProgressFn] = None,
    zobrist: Optional[Zobrist] = None,
) -> Result:
    """Greedy best-first search over blank-position buckets.

    A cursor walks the 16 buckets round-robin; each step expands the
    expandable node of the current bucket closest to `goal`. Successors go
    through the frontier's dominance check, and the search stops as soon as
    one of them equals `goal`. The solution is not guaranteed to be shortest.

    With check_parity=False an unsolvable pair is searched without bound
    (unless node_limit is given).
    """
    t0 = time.time()
    if check_parity and not is_solvable_pair(start, goal):
        return _failed("unsolvable", t0)

    z = zobrist or Zobrist()
    frontier = Frontier(goal, distance, z)
    root = make_root(start, z)
    frontier.insert_or_improve(root)

    expanded = 0
    found = start == goal
    cursor = start.blank
    idle = 0  # consecutive buckets without an expandable node

    while not found:
        cand = frontier.best_candidate(cursor)
        cursor = (cursor + 1) % CELLS
        if cand is None:
            idle += 1
            if idle >= CELLS:
                return _failed("exhausted", t0, frontier, expanded)
            continue
        idle = 0

        expanded += 1
        for child in cand.expand(z):
            if frontier.insert_or_improve(child):
                total = len(frontier)
                if on_progress is not None and progress_every > 0 and total % progress_every == 0:
                    on_progress(total, frontier.best_distance())
            if child.board == goal:
                found = True
                break

        if not found and node_limit is not None and len(frontier) >= node_limit:
            return _failed("node_limit", t0, frontier, expanded)

    path = reconstruct_path(frontier, goal)
    path.reverse()
    runtime = time.time() - t0
    return {
        "success": True,
        "nodes": len(frontier),
        "expanded": expanded,
        "runtime": runtime,
        "solution_len": len(path) - 1,
        "path": path,
    }
