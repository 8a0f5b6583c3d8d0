from __future__ import annotations
from typing import Iterable, Optional, Sequence, Union

from slidingsolver.domains.board import Board
from slidingsolver.domains.errors import InvalidShape
from slidingsolver.heuristics.registry import get_heuristic
from slidingsolver.search.a_star import SolutionOutcome, a_star
from slidingsolver.search.config import SearchConfig

GridLike = Union[Board, Iterable[Sequence[int]]]


def _as_board(grid: GridLike) -> Board:
    if isinstance(grid, Board):
        return grid.copy()
    return Board(grid)


class Puzzle:
    """A start/goal pair of equal size, ready to solve."""

    def __init__(self, start: GridLike, goal: GridLike, config: Optional[SearchConfig] = None):
        self.start = _as_board(start)
        self.goal = _as_board(goal)
        if self.start.N != self.goal.N:
            raise InvalidShape(
                f"Boards not of equal size: start is {self.start.N}x{self.start.N}, "
                f"goal is {self.goal.N}x{self.goal.N}"
            )
        self.config = config or SearchConfig()

    def solve(self, return_path: bool = True) -> SolutionOutcome:
        cfg = self.config
        return a_star(
            self.start,
            self.goal,
            get_heuristic(cfg.heuristic),
            tie_break=cfg.tie_break,
            return_path=return_path,
            timeout_sec=cfg.timeout_sec,
            max_expansions=cfg.max_expansions,
        )
