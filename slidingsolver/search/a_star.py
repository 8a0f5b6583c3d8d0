from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Callable, Dict, FrozenSet, List, Optional, Set, Tuple, Union
from time import perf_counter

from slidingsolver.domains.board import Board, Direction
from slidingsolver.search.frontier import Frontier
from slidingsolver.search.node import NodePool

Heuristic = Callable[[Board, Board], int]


@dataclass
class SearchStats:
    expanded: int = 0
    generated: int = 0
    duplicates: int = 0
    peak_open: int = 0
    peak_closed: int = 0
    time: float = 0.0
    tie_break: str = "h"
    termination: str = "ok"
    algorithm: str = "A*"

    def as_row(self) -> Dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class Solved:
    path: Tuple[Board, ...]
    cost: int
    stats: SearchStats = field(default_factory=SearchStats, compare=False)

    @property
    def moves(self) -> int:
        return self.cost

    def directions(self) -> List[Direction]:
        """Blank moves taking path[0] to path[-1]."""
        out: List[Direction] = []
        for a, b in zip(self.path, self.path[1:]):
            (r1, c1), (r2, c2) = a.blank, b.blank
            out.append(Direction((r2 - r1, c2 - c1)))
        return out


@dataclass(frozen=True)
class NoSolution:
    visited: FrozenSet[Board] = frozenset()
    stats: SearchStats = field(default_factory=SearchStats, compare=False)


@dataclass(frozen=True)
class Aborted:
    reason: str
    stats: SearchStats = field(default_factory=SearchStats, compare=False)


SolutionOutcome = Union[Solved, NoSolution, Aborted]


def reconstruct_path(pool: NodePool, index: int) -> List[Board]:
    path: List[Board] = []
    cur: Optional[int] = index
    while cur is not None:
        node = pool[cur]
        path.append(node.state)
        cur = node.parent
    path.reverse()
    return path


def a_star(
    start: Board,
    goal: Board,
    hfun: Heuristic,
    tie_break: str = "h",
    return_path: bool = True,
    timeout_sec: float | None = None,
    max_expansions: int | None = None,
) -> SolutionOutcome:
    """
    A* graph search over blank moves, with instrumentation.
    States are closed when popped, never when generated; a popped state that is
    already closed is a stale duplicate and is dropped.
    The expansion budget is charged only when a popped node is about to be expanded.
    Successors are generated in Direction order (UP, DOWN, LEFT, RIGHT).
    With return_path=False, Solved.path is an empty tuple and only Solved.cost is filled in.
    """
    t0 = perf_counter()
    stats = SearchStats(tie_break=tie_break)
    pool = NodePool()
    frontier = Frontier(tie_break)
    closed: Set[Board] = set()
    seen_ever: Set[Board] = {start}

    root = pool.add(start, g=0, h=hfun(start, goal))
    frontier.push(root)
    stats.peak_open = 1

    def finish(termination: str) -> SearchStats:
        stats.time = perf_counter() - t0
        stats.termination = termination
        return stats

    while frontier:
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return Aborted("timeout", finish("timeout"))

        stats.peak_open = max(stats.peak_open, len(frontier))
        node = pool[frontier.pop()]
        if node.state in closed:
            continue

        if node.state == goal:
            path = tuple(reconstruct_path(pool, node.index)) if return_path else ()
            return Solved(path, node.g, finish("ok"))

        if max_expansions is not None and stats.expanded >= max_expansions:
            return Aborted("budget", finish("budget"))

        closed.add(node.state)
        stats.expanded += 1
        stats.peak_closed = max(stats.peak_closed, len(closed))

        for d in Direction:
            s2 = node.state.generate_successor(d)
            if s2 is None or s2 in closed:
                continue
            stats.generated += 1
            if s2 in seen_ever:
                stats.duplicates += 1
            else:
                seen_ever.add(s2)
            child = pool.add(s2, g=node.g + 1, h=hfun(s2, goal), parent=node.index)
            frontier.push(child)

    # Open exhausted without finding goal
    return NoSolution(frozenset(closed), finish("exhausted"))
