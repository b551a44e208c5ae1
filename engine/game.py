from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .evaluator import ONGOING, Cell, Evaluator, Mark, Outcome, ScoreCategory

logger = logging.getLogger(__name__)

ScoreListener = Callable[[ScoreCategory], None]

END_MESSAGES: Dict[ScoreCategory, str] = {
    ScoreCategory.PLAYER_WIN: "🎉 You won! Great job!",
    ScoreCategory.COMPUTER_WIN: "🤖 Computer wins! Try again!",
    ScoreCategory.TIE: "🤝 It's a tie! Good game!",
}


@dataclass(frozen=True)
class GameState:
    board: Tuple[Cell, ...]
    turn: Mark
    active: bool


class Game:
    """Owns the board and turn state of a single tic-tac-toe game.

    The board is only ever written through ``apply_move``. Moves that conflict
    with the game state (occupied cell, finished game, wrong turn) are ignored
    rather than rejected. Turn advancement is left to the caller so the
    computer's reply can be scheduled separately from the player's move.
    """

    def __init__(self) -> None:
        self._listeners: List[ScoreListener] = []
        self.reset()

    def reset(self) -> None:
        self._board: List[Cell] = [None] * Evaluator.BOARD_SIZE
        self.turn = Mark.PLAYER
        self.active = True
        self.last_outcome: Outcome = ONGOING

    def add_listener(self, listener: ScoreListener) -> None:
        """Register a callback fired once per finished game with its category."""
        self._listeners.append(listener)

    @property
    def board(self) -> Tuple[Cell, ...]:
        return tuple(self._board)

    @property
    def state(self) -> GameState:
        return GameState(board=self.board, turn=self.turn, active=self.active)

    def apply_move(self, index: int, mark: Mark) -> bool:
        Evaluator.check_index(index)
        if not self.active or self._board[index] is not None or mark is not self.turn:
            return False
        self._board[index] = mark
        return True

    def advance_turn(self) -> None:
        if self.active:
            self.turn = self.turn.opposite()

    def detect_outcome(self) -> Outcome:
        outcome = Evaluator.outcome(self._board)
        self.last_outcome = outcome
        if outcome.is_terminal and self.active:
            self.active = False
            self._notify(outcome.category)
        return outcome

    def _notify(self, category: ScoreCategory) -> None:
        logger.debug("Game over: %s", category.value)
        for listener in self._listeners:
            listener(category)

    def get_status(self) -> str:
        if not self.active:
            return "Game Over"
        if self.turn is Mark.PLAYER:
            return "Your turn (X)"
        return "Computer thinking... 🤔"

    def get_message(self) -> str:
        category = self.last_outcome.category
        return END_MESSAGES[category] if category is not None else ""

    def snapshot(self) -> Dict[str, object]:
        outcome = self.last_outcome
        return {
            "board": [cell.value if cell is not None else "" for cell in self._board],
            "turn": self.turn.value,
            "active": self.active,
            "outcome": outcome.status.value,
            "winner": outcome.winner.value if outcome.winner is not None else None,
            "winning_line": list(outcome.line) if outcome.line is not None else None,
            "status": self.get_status(),
            "message": self.get_message(),
        }
