from __future__ import annotations
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from slidingsolver.domains.errors import InvalidBlankCount, InvalidShape

Grid = List[List[int]]
Rows = Tuple[Tuple[int, ...], ...]


class Direction(Enum):
    """Blank moves, in the fixed order successors are generated."""
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def d_row(self) -> int:
        return self.value[0]

    @property
    def d_col(self) -> int:
        return self.value[1]


class Board:
    """
    N×N sliding-tile grid, 0 is the blank.
    The blank coordinates are cached and kept in step with the grid on every move.
    Equality and hashing use the full grid contents.
    """
    __slots__ = ("N", "_grid", "_blank_r", "_blank_c", "_key")

    def __init__(self, grid: Iterable[Sequence[int]]):
        rows = [list(r) for r in grid]
        n = len(rows)
        if n == 0:
            raise InvalidShape("Grid must have at least one row")
        for r in rows:
            if len(r) != n:
                raise InvalidShape(f"Enter a square board: got {n} rows but a row of length {len(r)}")
        blanks = [(i, j) for i in range(n) for j in range(n) if rows[i][j] == 0]
        if len(blanks) == 0:
            raise InvalidBlankCount("You should have at least one empty tile marked as 0")
        if len(blanks) > 1:
            raise InvalidBlankCount(f"You can have only one empty tile marked as 0 (found {len(blanks)})")
        self.N = n
        self._grid: Grid = rows
        self._blank_r, self._blank_c = blanks[0]
        self._key: Optional[Rows] = None

    @classmethod
    def _from_trusted(cls, grid: Grid, blank_r: int, blank_c: int) -> "Board":
        # grid is already a private deep copy; skip validation
        b = cls.__new__(cls)
        b.N = len(grid)
        b._grid = grid
        b._blank_r = blank_r
        b._blank_c = blank_c
        b._key = None
        return b

    # ---------- accessors ----------
    @property
    def blank(self) -> Tuple[int, int]:
        return (self._blank_r, self._blank_c)

    def rows(self) -> Rows:
        if self._key is None:
            self._key = tuple(tuple(r) for r in self._grid)
        return self._key

    def flat(self) -> Tuple[int, ...]:
        return tuple(t for r in self._grid for t in r)

    def __getitem__(self, pos: Tuple[int, int]) -> int:
        r, c = pos
        return self._grid[r][c]

    def copy(self) -> "Board":
        return Board._from_trusted([r[:] for r in self._grid], self._blank_r, self._blank_c)

    # ---------- transitions ----------
    def can_move(self, direction: Direction) -> bool:
        r = self._blank_r + direction.d_row
        c = self._blank_c + direction.d_col
        return 0 <= r < self.N and 0 <= c < self.N

    def can_move_up(self) -> bool:
        return self._blank_r > 0

    def can_move_down(self) -> bool:
        return self._blank_r < self.N - 1

    def can_move_left(self) -> bool:
        return self._blank_c > 0

    def can_move_right(self) -> bool:
        return self._blank_c < self.N - 1

    def move_in_place(self, direction: Direction) -> None:
        """Swap the blank with its neighbour in `direction`. Never call on a board already handed to a search."""
        if not self.can_move(direction):
            raise ValueError(f"Cannot move blank {direction.name} from {self.blank}")
        r, c = self._blank_r, self._blank_c
        r2, c2 = r + direction.d_row, c + direction.d_col
        g = self._grid
        g[r][c], g[r2][c2] = g[r2][c2], g[r][c]
        self._blank_r, self._blank_c = r2, c2
        self._key = None

    def generate_successor(self, direction: Direction) -> Optional["Board"]:
        """New board with the blank moved, or None if the move is off the grid. self is untouched."""
        if not self.can_move(direction):
            return None
        nxt = self.copy()
        nxt.move_in_place(direction)
        return nxt

    def successors(self) -> List[Tuple[Direction, "Board"]]:
        out: List[Tuple[Direction, Board]] = []
        for d in Direction:
            s2 = self.generate_successor(d)
            if s2 is not None:
                out.append((d, s2))
        return out

    # ---------- comparisons ----------
    def _check_size(self, other: "Board") -> None:
        if other.N != self.N:
            raise InvalidShape(f"Boards not of equal size: {self.N}x{self.N} vs {other.N}x{other.N}")

    def mismatched_tile_count(self, other: "Board") -> int:
        """Number of cells (blank included) holding different values in the two boards."""
        self._check_size(other)
        return sum(1 for a, b in zip(self.flat(), other.flat()) if a != b)

    def misplaced_tiles(self, goal: "Board") -> int:
        """Like mismatched_tile_count, but cells where `goal` holds the blank are not counted."""
        self._check_size(goal)
        return sum(1 for a, b in zip(self.flat(), goal.flat()) if b != 0 and a != b)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Board):
            return NotImplemented
        return self.rows() == other.rows()

    def __hash__(self) -> int:
        return hash(self.rows())

    # ---------- display ----------
    def __str__(self) -> str:
        return "".join("".join(f" {t}" for t in r) + "\n" for r in self._grid)

    def __repr__(self) -> str:
        return f"Board({[list(r) for r in self.rows()]!r})"


def goal_board(n: int) -> Board:
    """Canonical goal: 1..n²-1 row-major, blank last."""
    if n < 1:
        raise InvalidShape(f"Board side must be positive, got {n}")
    cells = list(range(1, n * n)) + [0]
    return Board([cells[i * n:(i + 1) * n] for i in range(n)])


def parse_grid(text: str) -> Grid:
    """
    Parse rows separated by '/' or ';', cells by commas or whitespace.
    "1 2 3/4 0 5/6 7 8" -> [[1,2,3],[4,0,5],[6,7,8]]
    """
    rows: Grid = []
    for chunk in text.replace(";", "/").split("/"):
        cells = chunk.replace(",", " ").split()
        if not cells:
            continue
        try:
            rows.append([int(x) for x in cells])
        except ValueError:
            raise InvalidShape(f"Non-integer cell in row {chunk.strip()!r}") from None
    return rows
