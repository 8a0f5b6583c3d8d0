from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional

from slidingsolver.domains.board import Board


@dataclass(frozen=True)
class SearchNode:
    index: int
    state: Board
    g: int
    h: int
    parent: Optional[int] = None

    @property
    def f(self) -> int:
        return self.g + self.h


class NodePool:
    """Every node created during one search, indexed by creation order. Parent links are indices into the pool."""

    def __init__(self):
        self._nodes: List[SearchNode] = []

    def add(self, state: Board, g: int, h: int, parent: Optional[int] = None) -> SearchNode:
        node = SearchNode(index=len(self._nodes), state=state, g=g, h=h, parent=parent)
        self._nodes.append(node)
        return node

    def __getitem__(self, index: int) -> SearchNode:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[SearchNode]:
        return iter(self._nodes)
