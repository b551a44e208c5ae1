from __future__ import annotations

from typing import List, Optional, Sequence

from engine import Mark

X = Mark.PLAYER
O = Mark.COMPUTER
_ = None


def parse_board(cells: Sequence[str]) -> List[Optional[Mark]]:
    """Build a board from strings like ``["X", "", "O", ...]``."""
    return [Mark(c) if c else None for c in cells]


class PickNth:
    """Stand-in random source that always picks the n-th candidate."""

    def __init__(self, n: int = 0) -> None:
        self.n = n
        self.candidates: Optional[list] = None

    def choice(self, seq):
        self.candidates = list(seq)
        return self.candidates[self.n]
