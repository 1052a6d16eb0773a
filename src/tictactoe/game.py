"""Core rules for tic-tac-toe: immutable board, game state and outcome."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union
import logging

logger = logging.getLogger(__name__)

Move = Tuple[int, int]  # (row, col)

SIZE = 3

WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


class Cell(Enum):
    EMPTY = " "
    X = "X"
    O = "O"


class Player(Enum):
    """X always moves first; O is the computer in single-player games."""

    X = "X"
    O = "O"

    @property
    def cell(self) -> Cell:
        return Cell.X if self is Player.X else Cell.O

    @property
    def opponent(self) -> "Player":
        return Player.O if self is Player.X else Player.X


class GameType(Enum):
    SINGLE_PLAYER = "single_player"
    TWO_PLAYER = "two_player"


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Outcome(Enum):
    X_WINS = "X"
    O_WINS = "O"
    DRAW = "draw"

    @property
    def winner(self) -> Optional[Player]:
        if self is Outcome.X_WINS:
            return Player.X
        if self is Outcome.O_WINS:
            return Player.O
        return None


# ---------- Board ----------


@dataclass(frozen=True)
class Board:
    # Row-major, index = row * 3 + col
    cells: Tuple[Cell, ...] = field(default=(Cell.EMPTY,) * 9)

    def __post_init__(self) -> None:
        cells = tuple(self.cells)
        if len(cells) != SIZE * SIZE:
            raise ValueError(f"Board needs {SIZE * SIZE} cells, got {len(cells)}")
        for c in cells:
            if not isinstance(c, Cell):
                raise ValueError(f"Board cells must be Cell values, got {c!r}")
        object.__setattr__(self, "cells", cells)

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """Build a board from three strings such as ``["XO ", " X ", "  O"]``.

        Any character other than ``X`` or ``O`` is read as an empty cell.
        """
        cells: List[Cell] = []
        for row in rows:
            if len(row) != SIZE:
                raise ValueError(f"Row {row!r} must have {SIZE} cells")
            for ch in row:
                cells.append(Cell(ch) if ch in ("X", "O") else Cell.EMPTY)
        return cls(tuple(cells))

    def __getitem__(self, pos: Move) -> Cell:
        row, col = pos
        return self.cells[row * SIZE + col]

    def with_cell(self, row: int, col: int, cell: Cell) -> "Board":
        idx = row * SIZE + col
        return Board(self.cells[:idx] + (cell,) + self.cells[idx + 1 :])

    def empty_cells(self) -> List[Move]:
        return [divmod(i, SIZE) for i, c in enumerate(self.cells) if c is Cell.EMPTY]

    def is_full(self) -> bool:
        return all(c is not Cell.EMPTY for c in self.cells)

    def rows(self) -> List[List[Cell]]:
        return [list(self.cells[r * SIZE : (r + 1) * SIZE]) for r in range(SIZE)]


def evaluate(board: Board) -> Optional[Outcome]:
    """Return the winner, a draw, or None while the game is still open.

    Lines are checked rows first, then columns, then diagonals; on a board
    with winning lines for both players the first one found decides.
    """
    cells = board.cells
    for a, b, c in WINNING_LINES:
        v = cells[a]
        if v is not Cell.EMPTY and v is cells[b] is cells[c]:
            return Outcome.X_WINS if v is Cell.X else Outcome.O_WINS
    if board.is_full():
        return Outcome.DRAW
    return None


# ---------- Game state ----------


@dataclass(frozen=True)
class InvalidMove:
    """A rejected move. The state it was applied to is left untouched."""

    row: int
    col: int
    reason: str


@dataclass(frozen=True)
class GameState:
    board: Board = field(default_factory=Board.empty)
    current_player: Player = Player.X
    game_type: GameType = GameType.TWO_PLAYER
    difficulty: Difficulty = Difficulty.MEDIUM

    @property
    def outcome(self) -> Optional[Outcome]:
        return evaluate(self.board)

    @property
    def is_over(self) -> bool:
        return self.outcome is not None


MoveResult = Union[GameState, InvalidMove]


def new_game(
    game_type: GameType = GameType.TWO_PLAYER,
    difficulty: Difficulty = Difficulty.MEDIUM,
) -> GameState:
    return GameState(game_type=game_type, difficulty=difficulty)


def restart(state: GameState) -> GameState:
    """Fresh board for the same game type and difficulty."""
    return new_game(state.game_type, state.difficulty)


def apply_move(state: GameState, row: int, col: int) -> MoveResult:
    """Place the current player's mark at (row, col) and pass the turn.

    There is no player argument: the mark written is always that of
    ``state.current_player``.
    """
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        return InvalidMove(row, col, f"Cell ({row}, {col}) is off the board")
    if state.is_over:
        return InvalidMove(row, col, "Game already finished")
    if state.board[row, col] is not Cell.EMPTY:
        return InvalidMove(row, col, "Cell already occupied")

    player = state.current_player
    logger.debug("%s plays (%d, %d)", player.value, row, col)
    return replace(
        state,
        board=state.board.with_cell(row, col, player.cell),
        current_player=player.opponent,
    )
