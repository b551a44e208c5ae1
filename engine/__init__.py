"""Tic-tac-toe engine package providing game state, board evaluation, and the computer opponent.

Modules:
- game: Board, turn and terminal-state orchestration for one game
- evaluator: Marks, outcomes and static win/tie detection over a 3x3 board
- ai: Fixed-priority move selection (win, block, center, corner, side)
"""

from .game import Game, GameState
from .ai import AIPlayer
from .evaluator import Evaluator, Mark, Outcome, OutcomeStatus, ScoreCategory

__all__ = [
    "Game",
    "GameState",
    "AIPlayer",
    "Evaluator",
    "Mark",
    "Outcome",
    "OutcomeStatus",
    "ScoreCategory",
]
