#!/usr/bin/env python3
import argparse

from slidingsolver.domains.board import goal_board, parse_grid
from slidingsolver.domains.puzzle import Puzzle
from slidingsolver.search.a_star import Aborted, Solved
from slidingsolver.search.config import SearchConfig, add_search_arguments


def print_outcome(outcome) -> None:
    if isinstance(outcome, Solved):
        print("Solution Found!")
        for i, s in enumerate(outcome.path):
            print(f"--- Step {i} ---")
            print(s)
        print("Goal reached!")
        print(f"Moves: {outcome.moves} ({' '.join(d.name for d in outcome.directions())})")
    elif isinstance(outcome, Aborted):
        print(f"Search aborted ({outcome.reason}) after {outcome.stats.expanded} expansions.")
    else:
        print("No solution found.")
    st = outcome.stats
    print(f"expanded={st.expanded} generated={st.generated} duplicates={st.duplicates} time={st.time:.4f}s")


def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one sliding-tile instance with A* and print every step.")
    p.add_argument("--start", required=True, help='Rows split by "/", cells by spaces or commas: "1 2 3/4 0 5/6 7 8"')
    p.add_argument("--goal", default=None, help="Same format; defaults to 1..N²-1 with the blank last")
    add_search_arguments(p)
    args = p.parse_args(argv)

    try:
        start = parse_grid(args.start)
        goal = parse_grid(args.goal) if args.goal else goal_board(len(start)).rows()
        config = SearchConfig.from_args(args)
        puzzle = Puzzle(start, goal, config)
    except ValueError as e:
        p.error(str(e))

    print("Game initialised")
    print_outcome(puzzle.solve())


if __name__ == "__main__":
    main()
