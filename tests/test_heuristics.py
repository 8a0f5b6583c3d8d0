import pytest

from slidingsolver.domains.board import Board, Direction, goal_board
from slidingsolver.domains.generator import scramble
from slidingsolver.heuristics.manhattan import manhattan
from slidingsolver.heuristics.misplaced import hamming, misplaced
from slidingsolver.heuristics.registry import HEURISTICS, get_heuristic

GOAL = goal_board(3)


@pytest.mark.parametrize("hfun", [misplaced, hamming, manhattan])
def test_zero_at_goal(hfun):
    assert hfun(GOAL, GOAL) == 0


def test_known_values():
    s = Board([[1, 2, 3], [4, 5, 6], [0, 7, 8]])
    assert misplaced(s, GOAL) == 2
    assert hamming(s, GOAL) == 3
    assert manhattan(s, GOAL) == 2


def test_manhattan_against_custom_goal():
    goal = Board([[0, 1], [2, 3]])
    s = Board([[3, 1], [2, 0]])
    assert manhattan(s, goal) == 2


@pytest.mark.parametrize("hfun", [misplaced, manhattan])
def test_consistent_along_every_edge(hfun):
    # |h(s) - h(s')| <= 1 for every move, across a batch of scrambled boards
    for seed in range(30):
        s = scramble(GOAL, 15, seed)
        for _, s2 in s.successors():
            assert abs(hfun(s, GOAL) - hfun(s2, GOAL)) <= 1


def test_hamming_changes_by_two_on_one_move():
    s = GOAL.generate_successor(Direction.UP)
    assert hamming(s, GOAL) == 2
    assert misplaced(s, GOAL) == 1


def test_registry():
    assert set(HEURISTICS) == {"misplaced", "hamming", "manhattan"}
    assert get_heuristic("manhattan") is manhattan
    assert get_heuristic("M") is manhattan
    assert get_heuristic("misplaced") is misplaced
    with pytest.raises(ValueError):
        get_heuristic("linear_conflict")


def test_aliases_and_cli_choices_come_from_the_registry():
    import argparse
    from slidingsolver.heuristics.registry import ALIASES
    from slidingsolver.search.config import add_search_arguments

    for alias, name in ALIASES.items():
        assert get_heuristic(alias) is HEURISTICS[name]
    ap = argparse.ArgumentParser()
    add_search_arguments(ap)
    action = next(a for a in ap._actions if a.dest == "heuristic")
    assert list(action.choices) == sorted(HEURISTICS)


def test_default_heuristic_never_overestimates_one_move():
    from slidingsolver.search.config import SearchConfig

    hfun = get_heuristic(SearchConfig().heuristic)
    for _, s in GOAL.successors():
        assert hfun(s, GOAL) == 1
    assert "admissible" in SearchConfig.__doc__
