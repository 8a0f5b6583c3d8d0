from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import List

from slidingsolver.domains.board import Board, goal_board
from slidingsolver.domains.generator import is_solvable, make_unsolvable_variant, scramble
from slidingsolver.domains.puzzle import Puzzle
from slidingsolver.search.a_star import Solved
from slidingsolver.search.config import SearchConfig, add_search_arguments

HEADER = [
    "algorithm", "heuristic", "n", "depth", "seed", "moves",
    "expanded", "generated", "duplicates", "peak_open", "peak_closed",
    "time_sec", "tie_break", "termination", "solvable",
]


@dataclass
class Instance:
    seed: int
    depth: int
    state: Board


def generate_instances(goal: Board, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            s = scramble(goal, d, seed)
            attempts += 1
            if is_solvable(s, goal):
                out.append(Instance(seed=seed, depth=d, state=s))
                made += 1
            seed += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out


def run_row(puzzle: Puzzle, inst: Instance, n: int, solvable_flag: int) -> dict:
    res = puzzle.solve(return_path=False)
    st = res.stats
    return {
        "algorithm": st.algorithm,
        "heuristic": puzzle.config.heuristic,
        "n": n,
        "depth": inst.depth,
        "seed": inst.seed,
        "moves": res.moves if isinstance(res, Solved) else "",
        "expanded": st.expanded,
        "generated": st.generated,
        "duplicates": st.duplicates,
        "peak_open": st.peak_open,
        "peak_closed": st.peak_closed,
        "time_sec": f"{st.time:.6f}",
        "tie_break": st.tie_break,
        "termination": st.termination,
        "solvable": solvable_flag,
    }


def main(argv=None):
    ap = argparse.ArgumentParser(description="A* sliding-puzzle experiment runner")
    ap.add_argument("--n", type=int, default=3, help="Square board size (N×N)")
    ap.add_argument("--depths", type=int, nargs="+", default=[4, 8, 12, 16])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--seed", type=int, default=0, help="First scramble seed")
    ap.add_argument("--include_unsolvable", action="store_true", help="Also run parity-flipped variants")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    add_search_arguments(ap)
    args = ap.parse_args(argv)

    try:
        config = SearchConfig.from_args(args)
        goal = goal_board(args.n)
    except ValueError as e:
        ap.error(str(e))

    insts = generate_instances(goal, args.depths, args.per_depth, start_seed=args.seed)
    args.out.parent.mkdir(parents=True, exist_ok=True)

    with args.out.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=HEADER)
        w.writeheader()
        for inst in insts:
            w.writerow(run_row(Puzzle(inst.state, goal, config), inst, args.n, 1))
            if args.include_unsolvable:
                u = make_unsolvable_variant(inst.state)
                w.writerow(run_row(Puzzle(u, goal, config), inst, args.n, 0))

    print(f"Wrote {args.out} ({len(insts)} instances)")


if __name__ == "__main__":
    main()
