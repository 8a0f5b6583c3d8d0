from typing import Callable, Dict

from slidingsolver.domains.board import Board
from slidingsolver.heuristics.manhattan import manhattan
from slidingsolver.heuristics.misplaced import hamming, misplaced

Heuristic = Callable[[Board, Board], int]

HEURISTICS: Dict[str, Heuristic] = {
    "misplaced": misplaced,
    "hamming": hamming,
    "manhattan": manhattan,
}

ALIASES: Dict[str, str] = {"mt": "misplaced", "h": "hamming", "m": "manhattan"}


def get_heuristic(name: str) -> Heuristic:
    n = name.lower()
    n = ALIASES.get(n, n)
    try:
        return HEURISTICS[n]
    except KeyError:
        raise ValueError(f"Unknown heuristic {name!r}; choose from {sorted(HEURISTICS)}") from None
