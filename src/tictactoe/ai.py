"""Computer opponent: first-open, random and exhaustive minimax strategies."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional
import logging
import math
import random

from .game import (
    Board,
    Cell,
    Difficulty,
    GameState,
    Move,
    Outcome,
    Player,
    evaluate,
)

logger = logging.getLogger(__name__)

WIN_SCORE = 10


# ---- strategies ----


def first_open_cell(board: Board) -> Optional[Move]:
    """Easy: first empty cell in row-major order."""
    moves = board.empty_cells()
    return moves[0] if moves else None


def random_open_cell(board: Board, rng: random.Random) -> Optional[Move]:
    """Medium: any empty cell, chosen uniformly with ``rng``."""
    moves = board.empty_cells()
    if not moves:
        return None
    return rng.choice(moves)


@lru_cache(maxsize=None)
def minimax(board: Board, depth: int, maximizing: bool) -> int:
    """Score ``board`` with O maximizing and X minimizing.

    ``depth`` counts plies already simulated below the root move, so quicker
    wins and slower losses score further from zero.
    """
    outcome = evaluate(board)
    if outcome is Outcome.O_WINS:
        return WIN_SCORE - depth
    if outcome is Outcome.X_WINS:
        return -WIN_SCORE + depth
    if outcome is Outcome.DRAW:
        return 0

    mark = Cell.O if maximizing else Cell.X
    scores = (
        minimax(board.with_cell(r, c, mark), depth + 1, not maximizing)
        for r, c in board.empty_cells()
    )
    return max(scores) if maximizing else min(scores)


def best_move(board: Board) -> Optional[Move]:
    """Hard: the O move with the best minimax score, first one on ties."""
    best_score = -math.inf
    move: Optional[Move] = None
    for r, c in board.empty_cells():
        score = minimax(board.with_cell(r, c, Cell.O), 0, False)
        if score > best_score:
            best_score, move = score, (r, c)
    return move


def choose_move(state: GameState, rng: Optional[random.Random] = None) -> Optional[Move]:
    """Pick the machine's next move for ``state.difficulty``.

    Returns None when the board has no empty cell.
    """
    if state.difficulty is Difficulty.EASY:
        return first_open_cell(state.board)
    if state.difficulty is Difficulty.MEDIUM:
        return random_open_cell(state.board, rng or random.Random())
    return best_move(state.board)


# ---- player ----


@dataclass
class ComputerPlayer:
    """Machine opponent. Always plays O, the side minimax maximizes."""

    rng: random.Random = field(default_factory=random.Random, repr=False)
    player: Player = field(default=Player.O, init=False)

    def choose(self, state: GameState) -> Optional[Move]:
        move = choose_move(state, self.rng)
        logger.debug(
            "%s (%s) chose %s", self.player.value, state.difficulty.value, move
        )
        return move

