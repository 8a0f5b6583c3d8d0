from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from slidingsolver.heuristics.registry import HEURISTICS, get_heuristic
from slidingsolver.search.frontier import TIE_BREAKS


@dataclass
class SearchConfig:
    """
    Search settings shared by Puzzle.solve and the CLIs.
    The default heuristic "misplaced" is the mismatched-tile count with the blank's goal cell left out,
    which keeps it admissible so solutions stay optimal; "hamming" is the blank-inclusive count.
    """
    heuristic: str = "misplaced"
    tie_break: str = "h"
    timeout_sec: Optional[float] = None
    max_expansions: Optional[int] = None

    def __post_init__(self):
        get_heuristic(self.heuristic)
        if self.tie_break not in TIE_BREAKS:
            raise ValueError(f"Unknown tie_break {self.tie_break!r}; choose from {TIE_BREAKS}")
        if self.timeout_sec is not None and self.timeout_sec <= 0:
            raise ValueError(f"timeout_sec must be positive, got {self.timeout_sec}")
        if self.max_expansions is not None and self.max_expansions <= 0:
            raise ValueError(f"max_expansions must be positive, got {self.max_expansions}")

    @classmethod
    def from_args(cls, args) -> "SearchConfig":
        """Build from an argparse namespace carrying the shared search flags."""
        return cls(
            heuristic=args.heuristic,
            tie_break=args.tie_break,
            timeout_sec=args.timeout_sec,
            max_expansions=args.max_expansions,
        )


def add_search_arguments(ap) -> None:
    ap.add_argument("--heuristic", choices=sorted(HEURISTICS), default="misplaced")
    ap.add_argument("--tie_break", choices=list(TIE_BREAKS), default="h")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-instance wall time")
    ap.add_argument("--max_expansions", type=int, default=None, help="Stop after this many expanded nodes")
