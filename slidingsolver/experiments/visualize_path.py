#!/usr/bin/env python3
import argparse, os
from pathlib import Path
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from slidingsolver.domains.board import Board, goal_board
from slidingsolver.domains.generator import scramble
from slidingsolver.domains.puzzle import Puzzle
from slidingsolver.search.a_star import Solved
from slidingsolver.search.config import SearchConfig, add_search_arguments


def draw_board(state: Board, out_path: Path):
    n = state.N
    plt.figure(figsize=(3, 3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n + 1):
        ax.plot([0, n], [i, i], linewidth=1)
        ax.plot([i, i], [0, n], linewidth=1)
    # tiles
    for idx, t in enumerate(state.flat()):
        if t == 0: continue
        r, c = divmod(idx, n)
        ax.text(c + 0.5, r + 0.6, str(t), ha="center", va="center", fontsize=16)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()


def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--n", type=int, default=3)
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", default="results/figs/example_path")
    add_search_arguments(p)
    args = p.parse_args(argv)

    try:
        config = SearchConfig.from_args(args)
        goal = goal_board(args.n)
    except ValueError as e:
        p.error(str(e))

    start = scramble(goal, args.depth, args.seed)
    res = Puzzle(start, goal, config).solve()

    if not isinstance(res, Solved):
        print("No path (timeout, budget or exhausted). Try smaller depth.")
        return

    outdir = Path(args.outdir)
    for i, s in enumerate(res.path):
        draw_board(s, outdir / f"step_{i:03d}.png")
    print(f"Saved {len(res.path)} frames to {outdir}")


if __name__ == "__main__":
    main()
