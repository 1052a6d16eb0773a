"""FastAPI JSON interface for playing tic-tac-toe against a person or the computer."""

from __future__ import annotations

import logging
import os
import random
import threading
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from .game import Cell, Difficulty, GameType, InvalidMove
from .session import GameSession

logger = logging.getLogger(__name__)


@dataclass
class SessionEntry:
    """An active game plus the lock that serialises moves against it."""

    session: GameSession
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


SESSIONS: Dict[str, SessionEntry] = {}
app = FastAPI(title="Tic-Tac-Toe", description="Tic-tac-toe with an optional computer opponent")


def _seed_from_env() -> Optional[int]:
    raw = os.environ.get("TICTACTOE_SEED")
    return int(raw) if raw else None


# Fixed seed for the computer's random source; None draws fresh entropy.
AI_SEED: Optional[int] = _seed_from_env()


class NewGameRequest(BaseModel):
    """Request payload for starting a new game."""

    model_config = ConfigDict(populate_by_name=True)

    game_type: GameType = Field(default=GameType.TWO_PLAYER, alias="gameType")
    difficulty: Difficulty = Field(
        default=Difficulty.MEDIUM,
        description="Strategy the computer uses in single-player games",
    )


class MoveRequest(BaseModel):
    """Request payload for claiming a cell on an existing game."""

    row: int = Field(ge=0, le=2)
    col: int = Field(ge=0, le=2)


def _create_session(game_type: GameType, difficulty: Difficulty) -> Tuple[str, SessionEntry]:
    """Create a new game session and register it for later access."""

    rng = random.Random(AI_SEED) if AI_SEED is not None else None
    entry = SessionEntry(session=GameSession.start(game_type, difficulty, rng=rng))
    game_id = uuid.uuid4().hex
    SESSIONS[game_id] = entry
    return game_id, entry


def _get_session(game_id: str) -> SessionEntry:
    try:
        return SESSIONS[game_id]
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Game not found") from exc


def _serialize_session(game_id: str, entry: SessionEntry) -> Dict[str, object]:
    with entry.lock:
        session = entry.session
        state = session.state
        outcome = state.outcome
        board: List[List[str]] = [
            ["" if c is Cell.EMPTY else c.value for c in row]
            for row in state.board.rows()
        ]
        available_moves = (
            [] if outcome else [{"row": r, "col": c} for r, c in state.board.empty_cells()]
        )
        move_log = [
            {"player": m.player.value, "row": m.row, "col": m.col}
            for m in session.move_log
        ]

        payload: Dict[str, object] = {
            "id": game_id,
            "gameType": state.game_type.value,
            "difficulty": state.difficulty.value,
            "currentPlayer": state.current_player.value,
            "board": board,
            "outcome": outcome.value if outcome else None,
            "availableMoves": available_moves,
            "moveLog": move_log,
        }
        if move_log:
            payload["lastMove"] = move_log[-1]
        return payload


@app.post("/api/game")
def create_game(request: Optional[NewGameRequest] = None) -> Dict[str, object]:
    request = request or NewGameRequest()
    game_id, entry = _create_session(request.game_type, request.difficulty)
    return _serialize_session(game_id, entry)


@app.get("/api/game/{game_id}")
def get_game(game_id: str) -> Dict[str, object]:
    entry = _get_session(game_id)
    return _serialize_session(game_id, entry)


@app.post("/api/game/{game_id}/move")
def make_move(game_id: str, request: MoveRequest) -> Dict[str, object]:
    entry = _get_session(game_id)
    with entry.lock:
        result = entry.session.play(request.row, request.col)
    if isinstance(result, InvalidMove):
        raise HTTPException(status_code=400, detail=result.reason)
    return _serialize_session(game_id, entry)


@app.post("/api/game/{game_id}/restart")
def restart_game(game_id: str) -> Dict[str, object]:
    entry = _get_session(game_id)
    with entry.lock:
        entry.session.restart()
    return _serialize_session(game_id, entry)
