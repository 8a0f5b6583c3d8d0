import pytest

from slidingsolver.domains.board import Board, Direction, goal_board, parse_grid
from slidingsolver.domains.errors import InvalidBlankCount, InvalidShape, PuzzleError

MID = [[1, 2, 3], [4, 0, 5], [6, 7, 8]]


def test_blank_is_located():
    b = Board(MID)
    assert b.N == 3
    assert b.blank == (1, 1)
    assert b[1, 1] == 0


@pytest.mark.parametrize("grid", [[], [[1, 0]], [[1, 2, 3], [4, 0]], [[1, 2], [0, 3], [4, 5]]])
def test_non_square_rejected(grid):
    with pytest.raises(InvalidShape):
        Board(grid)


@pytest.mark.parametrize("grid", [[[1, 2], [3, 4]], [[0, 2], [3, 0]], [[0, 0], [0, 0]]])
def test_blank_count_rejected(grid):
    with pytest.raises(InvalidBlankCount):
        Board(grid)


def test_errors_are_value_errors():
    assert issubclass(InvalidShape, PuzzleError)
    assert issubclass(InvalidBlankCount, ValueError)


def test_constructor_copies_input():
    grid = [row[:] for row in MID]
    b = Board(grid)
    grid[0][0] = 99
    assert b[0, 0] == 1


def test_equal_grids_are_equal_and_hash_equal():
    a = Board(MID)
    b = Board([row[:] for row in MID])
    assert a is not b
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_different_grids_not_equal():
    assert Board(MID) != Board([[1, 2, 3], [4, 5, 0], [6, 7, 8]])
    assert Board(MID) != MID


@pytest.mark.parametrize("blank_at, blocked", [
    ((0, 0), {Direction.UP, Direction.LEFT}),
    ((0, 2), {Direction.UP, Direction.RIGHT}),
    ((2, 0), {Direction.DOWN, Direction.LEFT}),
    ((2, 2), {Direction.DOWN, Direction.RIGHT}),
    ((1, 1), set()),
    ((0, 1), {Direction.UP}),
    ((2, 1), {Direction.DOWN}),
    ((1, 0), {Direction.LEFT}),
    ((1, 2), {Direction.RIGHT}),
])
def test_move_legality_at_boundaries(blank_at, blocked):
    cells = [1, 2, 3, 4, 5, 6, 7, 8]
    grid = []
    for r in range(3):
        row = []
        for c in range(3):
            row.append(0 if (r, c) == blank_at else cells.pop(0))
        grid.append(row)
    b = Board(grid)
    for d in Direction:
        assert b.can_move(d) == (d not in blocked)
        if d in blocked:
            assert b.generate_successor(d) is None
        else:
            assert b.generate_successor(d) is not None
    assert b.can_move_up() == (Direction.UP not in blocked)
    assert b.can_move_down() == (Direction.DOWN not in blocked)
    assert b.can_move_left() == (Direction.LEFT not in blocked)
    assert b.can_move_right() == (Direction.RIGHT not in blocked)


@pytest.mark.parametrize("d, expected, blank", [
    (Direction.UP, [[1, 0, 3], [4, 2, 5], [6, 7, 8]], (0, 1)),
    (Direction.DOWN, [[1, 2, 3], [4, 7, 5], [6, 0, 8]], (2, 1)),
    (Direction.LEFT, [[1, 2, 3], [0, 4, 5], [6, 7, 8]], (1, 0)),
    (Direction.RIGHT, [[1, 2, 3], [4, 5, 0], [6, 7, 8]], (1, 2)),
])
def test_successor_swaps_on_the_right_axis(d, expected, blank):
    s = Board(MID).generate_successor(d)
    assert s == Board(expected)
    assert s.blank == blank
    assert s[blank] == 0


def test_generate_successor_leaves_origin_untouched():
    b = Board(MID)
    before = b.rows()
    for d in Direction:
        b.generate_successor(d)
    assert b.rows() == before
    assert b.blank == (1, 1)


def test_successor_shares_no_rows():
    b = Board(MID)
    s = b.generate_successor(Direction.RIGHT)
    s.move_in_place(Direction.UP)
    assert b == Board(MID)


def test_move_in_place_tracks_blank_across_moves():
    b = Board(MID)
    for d in [Direction.UP, Direction.LEFT, Direction.DOWN, Direction.DOWN, Direction.RIGHT, Direction.RIGHT]:
        b.move_in_place(d)
        r, c = b.blank
        assert b[r, c] == 0
        assert sum(1 for t in b.flat() if t == 0) == 1
    assert b.blank == (2, 2)


def test_move_in_place_refuses_illegal_move():
    b = Board([[0, 1], [2, 3]])
    with pytest.raises(ValueError):
        b.move_in_place(Direction.UP)
    assert b.blank == (0, 0)


def test_hash_follows_mutation():
    b = Board(MID)
    assert hash(b) == hash(Board(MID))
    b.move_in_place(Direction.RIGHT)
    assert b == Board([[1, 2, 3], [4, 5, 0], [6, 7, 8]])
    assert hash(b) == hash(Board([[1, 2, 3], [4, 5, 0], [6, 7, 8]]))


def test_successors_follow_direction_order():
    dirs = [d for d, _ in Board(MID).successors()]
    assert dirs == [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]
    corner = [d for d, _ in Board([[0, 1], [2, 3]]).successors()]
    assert corner == [Direction.DOWN, Direction.RIGHT]


def test_mismatched_tile_count_counts_blank_cell():
    a = Board(MID)
    assert a.mismatched_tile_count(a) == 0
    b = Board([[1, 2, 3], [4, 5, 0], [6, 7, 8]])
    assert a.mismatched_tile_count(b) == 2
    assert a.misplaced_tiles(b) == 1


def test_mismatched_tile_count_size_mismatch():
    with pytest.raises(InvalidShape):
        Board(MID).mismatched_tile_count(Board([[0, 1], [2, 3]]))


def test_str_renders_rows():
    assert str(Board([[1, 2], [3, 0]])) == " 1 2\n 3 0\n"


def test_goal_board():
    assert goal_board(3) == Board([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
    assert goal_board(1).blank == (0, 0)
    with pytest.raises(InvalidShape):
        goal_board(0)


def test_parse_grid():
    assert parse_grid("1 2 3/4 0 5/6 7 8") == MID
    assert parse_grid("1,2;3,0") == [[1, 2], [3, 0]]
    with pytest.raises(InvalidShape):
        parse_grid("1 x/3 0")
