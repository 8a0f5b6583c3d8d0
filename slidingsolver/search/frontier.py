from __future__ import annotations
from typing import List, Tuple
import heapq
import itertools

from slidingsolver.search.node import SearchNode

TIE_BREAKS = ("h", "g", "fifo", "lifo")


def priority_tuple(tie_break: str, f: int, g: int, h: int, ctr: int) -> Tuple[int, int, int]:
    if tie_break == "h":    return (f, h, ctr)
    if tie_break == "g":    return (f, -g, ctr)
    if tie_break == "fifo": return (f, 0, ctr)
    if tie_break == "lifo": return (f, 0, -ctr)
    raise ValueError(f"Unknown tie_break {tie_break!r}; choose from {TIE_BREAKS}")


class Frontier:
    """
    Open list ordered by f, then by the tie-break rule.
    'h'    lower h first, then creation order (default)
    'g'    deeper g first, then creation order
    'fifo' creation order
    'lifo' reverse creation order
    Holds node indices; the nodes themselves live in the NodePool.
    """

    def __init__(self, tie_break: str = "h"):
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"Unknown tie_break {tie_break!r}; choose from {TIE_BREAKS}")
        self.tie_break = tie_break
        self._heap: List[Tuple[Tuple[int, int, int], int]] = []
        self._counter = itertools.count()

    def push(self, node: SearchNode) -> None:
        pr = priority_tuple(self.tie_break, node.f, node.g, node.h, next(self._counter))
        heapq.heappush(self._heap, (pr, node.index))

    def pop(self) -> int:
        _, index = heapq.heappop(self._heap)
        return index

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
