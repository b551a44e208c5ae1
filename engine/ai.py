from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from .evaluator import Cell, Evaluator, Mark

logger = logging.getLogger(__name__)


class AIPlayer:
    """Fixed-priority tic-tac-toe opponent.

    Rules are tried in order and the first one that applies picks the cell:
    win now, block the player, take the center, take a random free corner,
    take a random free side. There is no lookahead beyond one ply: the
    computer never misses an immediate win or a single block, but a player
    who sets up two threats at once (a fork) can still beat it.
    """

    def __init__(self, mark: Mark = Mark.COMPUTER, rng: Optional[random.Random] = None) -> None:
        self.mark = mark
        # Anything with a ``choice`` method works, tests pass a seeded Random.
        self.rng = rng if rng is not None else random.Random()

    def choose_move(self, board: Sequence[Cell]) -> Optional[int]:
        """Return the cell index to play on ``board``, or None when it is full.

        The caller's board is never modified; probing happens on a copy.
        """
        Evaluator.check_board(board)
        search_board: List[Cell] = list(board)
        empty = Evaluator.empty_cells(search_board)
        if not empty:
            return None

        for mark in (self.mark, self.mark.opposite()):
            for index in empty:
                if self._completes_line(search_board, index, mark):
                    logger.debug("%s at %d (%s)", self.mark.value, index,
                                 "win" if mark is self.mark else "block")
                    return index

        if search_board[Evaluator.CENTER] is None:
            return Evaluator.CENTER

        for group in (Evaluator.CORNERS, Evaluator.SIDES):
            candidates = [i for i in group if search_board[i] is None]
            if candidates:
                return self.rng.choice(candidates)

        return None

    @staticmethod
    def _completes_line(board: List[Cell], index: int, mark: Mark) -> bool:
        board[index] = mark
        try:
            return Evaluator.winner(board) is mark
        finally:
            # Always revert so the next probe sees the original position
            board[index] = None
