from slidingsolver.domains.board import Board


def misplaced(s: Board, goal: Board) -> int:
    """Non-blank tiles not on their goal cell. Admissible and consistent."""
    return s.misplaced_tiles(goal)


def hamming(s: Board, goal: Board) -> int:
    """All mismatched cells, blank included. Overestimates by one whenever the blank is out of place."""
    return s.mismatched_tile_count(goal)
