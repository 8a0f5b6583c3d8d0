from __future__ import annotations
from typing import Optional
import random

from slidingsolver.domains.board import Board, Direction

_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def scramble(goal: Board, depth: int, seed: int) -> Board:
    """Depth-limited random walk from goal with no immediate backtrack."""
    rng = random.Random(seed)
    s = goal.copy()
    last: Optional[Direction] = None
    for _ in range(depth):
        cand = [d for d in Direction if s.can_move(d)]
        if last is not None and _OPPOSITE[last] in cand and len(cand) > 1:
            cand.remove(_OPPOSITE[last])
        d = rng.choice(cand)
        s.move_in_place(d)
        last = d
    return s


def _permutation_parity(seq) -> int:
    """0 for an even permutation of range(len(seq)), 1 for odd (cycle decomposition)."""
    seen = [False] * len(seq)
    parity = 0
    for i in range(len(seq)):
        if seen[i]:
            continue
        j = i
        length = 0
        while not seen[j]:
            seen[j] = True
            j = seq[j]
            length += 1
        parity ^= (length - 1) & 1
    return parity


def is_solvable(start: Board, goal: Board) -> bool:
    """
    Parity rule valid for any N and any goal layout:
    every blank move is one transposition of cells and shifts the blank by one,
    so the permutation taking start to goal must have the same parity as the
    blank's Manhattan displacement.
    Assumes both boards hold the same labels.
    """
    if start.N != goal.N:
        return False
    goal_idx = {t: i for i, t in enumerate(goal.flat())}
    perm = [goal_idx[t] for t in start.flat()]
    (r1, c1), (r2, c2) = start.blank, goal.blank
    blank_dist = abs(r1 - r2) + abs(c1 - c2)
    return _permutation_parity(perm) == (blank_dist & 1)


def make_unsolvable_variant(s: Board) -> Board:
    """Swap the first two non-blank tiles (row-major), flipping parity."""
    lst = list(s.flat())
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    n = s.N
    return Board([lst[r * n:(r + 1) * n] for r in range(n)])
