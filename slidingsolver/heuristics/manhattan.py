from __future__ import annotations
from typing import Dict, Tuple

from slidingsolver.domains.board import Board


def _goal_positions(goal: Board) -> Dict[int, Tuple[int, int]]:
    n = goal.N
    return {t: divmod(idx, n) for idx, t in enumerate(goal.flat()) if t != 0}


def manhattan(s: Board, goal: Board) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    s._check_size(goal)
    goal_pos = _goal_positions(goal)
    n = s.N
    dist = 0
    for idx, tile in enumerate(s.flat()):
        if tile == 0:
            continue
        r, c = divmod(idx, n)
        gr, gc = goal_pos[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist
