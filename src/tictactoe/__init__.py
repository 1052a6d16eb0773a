"""Tic-tac-toe package exposing game rules, the computer opponent, and the web API."""

from .ai import ComputerPlayer, choose_move
from .game import (
    Board,
    Cell,
    Difficulty,
    GameState,
    GameType,
    InvalidMove,
    Outcome,
    Player,
    apply_move,
    evaluate,
    new_game,
    restart,
)
from .session import GameSession
from .ui import app

__all__ = [
    "Board",
    "Cell",
    "ComputerPlayer",
    "Difficulty",
    "GameSession",
    "GameState",
    "GameType",
    "InvalidMove",
    "Outcome",
    "Player",
    "app",
    "apply_move",
    "choose_move",
    "evaluate",
    "new_game",
    "restart",
]
