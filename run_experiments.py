#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("Misplaced tiles", "python -m slidingsolver.experiments.runner --depths 4 8 12 16 --per_depth 10 --heuristic misplaced --out results/p8_misplaced.csv")
    run("Manhattan", "python -m slidingsolver.experiments.runner --depths 4 8 12 16 --per_depth 10 --heuristic manhattan --out results/p8_manhattan.csv")
    run("Manhattan FIFO ties", "python -m slidingsolver.experiments.runner --depths 4 8 12 16 --per_depth 10 --heuristic manhattan --tie_break fifo --out results/p8_manhattan_fifo.csv")
    run("Unsolvable 2x2", "python -m slidingsolver.experiments.runner --n 2 --depths 2 4 6 --per_depth 5 --include_unsolvable --out results/p3_unsolvable.csv")
    run("Summary", "python -m slidingsolver.experiments.summarize results/p8_misplaced.csv results/p8_manhattan.csv results/p8_manhattan_fifo.csv --out results/summary.csv")
    run("Plots", "python -m slidingsolver.experiments.plot results/p8_misplaced.csv results/p8_manhattan.csv results/p8_manhattan_fifo.csv")

if __name__ == "__main__":
    main()
