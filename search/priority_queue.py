from __future__ import annotations
import heapq
from typing import Any, Callable, List, Optional, Tuple


class PriorityQueue:
    """Min-heap with lazy deletion.

    Items can go stale while queued; `peek` discards stale items from the head
    instead of searching the heap for them.
    """
    def __init__(self) -> None:
        self._h: List[Tuple[Any, int, Any]] = []
        self._tiebreak = 0

    def push(self, priority: Any, item: Any) -> None:
        self._tiebreak += 1
        heapq.heappush(self._h, (priority, self._tiebreak, item))

    def pop(self) -> Any:
        return heapq.heappop(self._h)[2]

    def peek(self, alive: Callable[[Any], bool]) -> Optional[Any]:
        """Smallest item for which `alive(item)` holds, left in the queue; None if there is none."""
        h = self._h
        while h and not alive(h[0][2]):
            heapq.heappop(h)
        return h[0][2] if h else None

    def __len__(self) -> int:
        return len(self._h)
