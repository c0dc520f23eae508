"""Othello board model: legality, captures, move application and counts."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Sequence, Union

BOARD_SIZE = 8

# The 8 compass directions as (dcol, drow).
DIRECTIONS = [
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
]


class CellState(IntEnum):
    EMPTY = 0
    LIGHT = 1
    DARK = 2


class Side(IntEnum):
    LIGHT = 1
    DARK = 2

    @property
    def opponent(self) -> "Side":
        return Side.DARK if self is Side.LIGHT else Side.LIGHT

    @classmethod
    def parse(cls, value: Union["Side", int, str]) -> "Side":
        """Accept a Side, its value, or a name ("light"/"white", "dark"/"black")."""
        if isinstance(value, str):
            name = value.strip().lower()
            aliases = {"light": cls.LIGHT, "white": cls.LIGHT,
                       "dark": cls.DARK, "black": cls.DARK}
            if name not in aliases:
                raise ValueError(f"Unknown side: {value!r}")
            return aliases[name]
        if isinstance(value, bool):
            raise ValueError(f"Unknown side: {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown side: {value!r}") from None


def _check_coords(col: int, row: int) -> None:
    if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
        raise ValueError(f"Coordinates out of range: ({col}, {row})")


@dataclass(frozen=True)
class Move:
    """A placement at (col, row). A pass is represented by ``None``."""
    col: int
    row: int

    def __post_init__(self):
        _check_coords(self.col, self.row)

    def __str__(self) -> str:
        return f"{self.col} {self.row}"


@dataclass
class Capture:
    valid: bool = False
    captured: List[Move] = field(default_factory=list)


# Markers accepted by Board.reset(rows)
_MARKERS = {
    "b": CellState.DARK, "B": CellState.DARK,
    "w": CellState.LIGHT, "W": CellState.LIGHT,
    ".": CellState.EMPTY, "-": CellState.EMPTY,
    "_": CellState.EMPTY, " ": CellState.EMPTY,
}
_SYMBOLS = {CellState.EMPTY: ".", CellState.LIGHT: "w", CellState.DARK: "b"}


class Board:
    def __init__(self, rows: Optional[Sequence[Sequence[str]]] = None):
        """Initialize from raw rows or the standard starting position."""
        self._grid: List[List[CellState]] = []
        self._counts: List[int] = [0, 0, 0]
        self.reset(rows)

    def reset(self, rows: Optional[Sequence[Sequence[str]]] = None):
        """Install a raw configuration (8 rows of 8 markers) or the standard start.

        Counts are recomputed from scratch; the position does not have to
        be reachable in a real game.
        """
        if rows is not None:
            grid = self._parse_rows(rows)
        else:
            grid = None

        self._grid = [[CellState.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self._counts = [BOARD_SIZE * BOARD_SIZE, 0, 0]

        if grid is None:
            self._set(CellState.LIGHT, 3, 3)
            self._set(CellState.LIGHT, 4, 4)
            self._set(CellState.DARK, 4, 3)
            self._set(CellState.DARK, 3, 4)
            return

        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if grid[row][col] != CellState.EMPTY:
                    self._set(grid[row][col], col, row)

    @staticmethod
    def _parse_rows(rows: Sequence[Sequence[str]]) -> List[List[CellState]]:
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")
        grid = []
        for y, line in enumerate(rows):
            if len(line) != BOARD_SIZE:
                raise ValueError(f"Row {y} has {len(line)} cells, expected {BOARD_SIZE}")
            parsed = []
            for marker in line:
                if marker not in _MARKERS:
                    raise ValueError(f"Unknown marker {marker!r} in row {y}")
                parsed.append(_MARKERS[marker])
            grid.append(parsed)
        return grid

    def clone(self) -> "Board":
        """Return an independent copy of this board."""
        new_board = Board.__new__(Board)
        new_board._grid = [row[:] for row in self._grid]
        new_board._counts = self._counts[:]
        return new_board

    def is_occupied(self, col: int, row: int) -> bool:
        return self.state_at(col, row) != CellState.EMPTY

    def state_at(self, col: int, row: int) -> CellState:
        _check_coords(col, row)
        return self._grid[row][col]

    def _set(self, state: CellState, col: int, row: int):
        # Keep the three counts in step with the grid.
        previous = self._grid[row][col]
        self._counts[previous] -= 1
        self._counts[state] += 1
        self._grid[row][col] = state

    def legal_move(self, move: Optional[Move], side: Side) -> bool:
        """A pass is legal only when `side` has no placement available."""
        if move is None:
            return not self.has_legal_move(side)
        if self._grid[move.row][move.col] != CellState.EMPTY:
            return False
        other = side.opponent
        for dx, dy in DIRECTIONS:
            x, y = move.col + dx, move.row + dy
            if not self._on_board(x, y) or self._grid[y][x] != other:
                continue
            while self._on_board(x, y) and self._grid[y][x] == other:
                x += dx
                y += dy
            if self._on_board(x, y) and self._grid[y][x] == side:
                return True
        return False

    def move_captures(self, move: Optional[Move], side: Side) -> Capture:
        """Validate `move` and collect every opponent stone it would flip."""
        result = Capture()
        if move is None:
            result.valid = not self.has_legal_move(side)
            return result
        if self._grid[move.row][move.col] != CellState.EMPTY:
            return result

        other = side.opponent
        for dx, dy in DIRECTIONS:
            run = []
            x, y = move.col + dx, move.row + dy
            while self._on_board(x, y) and self._grid[y][x] == other:
                run.append(Move(x, y))
                x += dx
                y += dy
            if run and self._on_board(x, y) and self._grid[y][x] == side:
                result.captured.extend(run)
                result.valid = True
        return result

    def apply_move(self, move: Optional[Move], side: Side) -> bool:
        """Play `move` for `side`. Returns False (board untouched) if it is illegal."""
        if move is None:
            return True
        capture = self.move_captures(move, side)
        if not capture.valid:
            return False
        for flipped in capture.captured:
            self._set(CellState(side), flipped.col, flipped.row)
        self._set(CellState(side), move.col, move.row)
        return True

    def legal_moves(self, side: Side) -> List[Move]:
        """Return legal placements in row-major scan order."""
        return [
            Move(col, row)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if self.legal_move(Move(col, row), side)
        ]

    def has_legal_move(self, side: Side) -> bool:
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if self.legal_move(Move(col, row), side):
                    return True
        return False

    def is_terminal(self) -> bool:
        """The game is over when neither side can place a stone."""
        return not (self.has_legal_move(Side.DARK) or self.has_legal_move(Side.LIGHT))

    def count(self, state: Union[CellState, Side]) -> int:
        return self._counts[state]

    def count_empty(self) -> int:
        return self._counts[CellState.EMPTY]

    def count_light(self) -> int:
        return self._counts[CellState.LIGHT]

    def count_dark(self) -> int:
        return self._counts[CellState.DARK]

    def rows(self) -> List[str]:
        return ["".join(_SYMBOLS[cell] for cell in row) for row in self._grid]

    def __str__(self) -> str:
        return "\n".join(self.rows())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid and self._counts == other._counts

    @staticmethod
    def _on_board(x: int, y: int) -> bool:
        return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE
