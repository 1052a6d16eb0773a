"""Turn orchestration for a single game: human moves plus the machine reply."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional
import logging
import random

from .ai import ComputerPlayer
from .game import (
    Difficulty,
    GameState,
    GameType,
    InvalidMove,
    MoveResult,
    Outcome,
    Player,
    apply_move,
    new_game,
    restart,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveRecord:
    player: Player
    row: int
    col: int


@dataclass
class GameSession:
    """Owns the current ``GameState`` of one game and replaces it per move."""

    state: GameState
    computer: Optional[ComputerPlayer] = None
    move_log: List[MoveRecord] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.computer is None and self.state.game_type is GameType.SINGLE_PLAYER:
            self.computer = ComputerPlayer()

    @classmethod
    def start(
        cls,
        game_type: GameType = GameType.TWO_PLAYER,
        difficulty: Difficulty = Difficulty.MEDIUM,
        rng: Optional[random.Random] = None,
    ) -> "GameSession":
        computer = None
        if game_type is GameType.SINGLE_PLAYER and rng is not None:
            computer = ComputerPlayer(rng=rng)
        logger.info("New %s game (%s)", game_type.value, difficulty.value)
        return cls(state=new_game(game_type, difficulty), computer=computer)

    @property
    def outcome(self) -> Optional[Outcome]:
        return self.state.outcome

    def play(self, row: int, col: int) -> MoveResult:
        """Apply a human move, then let the computer answer once if it is due."""
        state = self.state
        if state.is_over:
            return InvalidMove(row, col, "Game already finished")
        if self.computer and state.current_player is self.computer.player:
            return InvalidMove(row, col, "Waiting for the computer to move")

        result = apply_move(state, row, col)
        if isinstance(result, InvalidMove):
            logger.debug("Rejected move (%d, %d): %s", row, col, result.reason)
            return result
        self._advance(result, state.current_player, row, col)

        if (
            self.computer
            and not self.state.is_over
            and self.state.current_player is self.computer.player
        ):
            move = self.computer.choose(self.state)
            if move is not None:
                reply = apply_move(self.state, *move)
                if isinstance(reply, InvalidMove):
                    raise RuntimeError(f"Computer produced an illegal move: {reply.reason}")
                self._advance(reply, self.computer.player, *move)
        return self.state

    def restart(self) -> GameState:
        self.state = restart(self.state)
        self.move_log.clear()
        logger.info(
            "Restarted %s game (%s)",
            self.state.game_type.value,
            self.state.difficulty.value,
        )
        return self.state

    def _advance(self, state: GameState, player: Player, row: int, col: int) -> None:
        self.state = state
        self.move_log.append(MoveRecord(player, row, col))
        if state.outcome is not None:
            logger.info("Game finished: %s", state.outcome.value)
