from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple


class Mark(Enum):
    """Occupant of a cell, or whose turn it is. Displayed as X/O."""

    PLAYER = "X"
    COMPUTER = "O"

    def opposite(self) -> "Mark":
        return Mark.COMPUTER if self is Mark.PLAYER else Mark.PLAYER


class OutcomeStatus(Enum):
    ONGOING = "ongoing"
    WIN = "win"
    TIE = "tie"


class ScoreCategory(Enum):
    PLAYER_WIN = "player"
    COMPUTER_WIN = "computer"
    TIE = "ties"


WinLine = Tuple[int, int, int]
Cell = Optional[Mark]


@dataclass(frozen=True)
class Outcome:
    status: OutcomeStatus
    winner: Optional[Mark] = None
    line: Optional[WinLine] = None

    @property
    def is_terminal(self) -> bool:
        return self.status is not OutcomeStatus.ONGOING

    @property
    def category(self) -> Optional[ScoreCategory]:
        if self.status is OutcomeStatus.TIE:
            return ScoreCategory.TIE
        if self.status is OutcomeStatus.WIN:
            if self.winner is Mark.PLAYER:
                return ScoreCategory.PLAYER_WIN
            return ScoreCategory.COMPUTER_WIN
        return None


ONGOING = Outcome(OutcomeStatus.ONGOING)
TIE = Outcome(OutcomeStatus.TIE)


class Evaluator:
    """Static classification of tic-tac-toe boards.

    A board is any sequence of 9 cells holding ``None`` or a ``Mark``.
    Nothing here mutates the board it is given.
    """

    BOARD_SIZE = 9

    # Rows, then columns, then diagonals. The order decides which line is
    # reported for highlighting.
    WIN_LINES: Tuple[WinLine, ...] = (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    )

    CENTER = 4
    CORNERS: Tuple[int, ...] = (0, 2, 6, 8)
    SIDES: Tuple[int, ...] = (1, 3, 5, 7)

    @classmethod
    def outcome(cls, board: Sequence[Cell]) -> Outcome:
        cls.check_board(board)
        for line in cls.WIN_LINES:
            a, b, c = line
            if board[a] is not None and board[a] == board[b] == board[c]:
                return Outcome(OutcomeStatus.WIN, winner=board[a], line=line)
        if all(cell is not None for cell in board):
            return TIE
        return ONGOING

    @classmethod
    def winner(cls, board: Sequence[Cell]) -> Optional[Mark]:
        return cls.outcome(board).winner

    @classmethod
    def empty_cells(cls, board: Sequence[Cell]) -> Tuple[int, ...]:
        return tuple(i for i, cell in enumerate(board) if cell is None)

    @classmethod
    def check_board(cls, board: Sequence[Cell]) -> None:
        if len(board) != cls.BOARD_SIZE:
            raise ValueError(f"Board must have {cls.BOARD_SIZE} cells, got {len(board)}")

    @classmethod
    def check_index(cls, index: object) -> int:
        # bool is an int subclass but never a valid cell
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValueError(f"Cell index must be an integer, got {index!r}")
        if not 0 <= index < cls.BOARD_SIZE:
            raise ValueError(f"Cell index out of range: {index}")
        return index
