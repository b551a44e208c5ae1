from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, Union

from engine import ScoreCategory

logger = logging.getLogger(__name__)

DEFAULT_KEY = "ticTacToeScores"


@dataclass
class ScoreTally:
    player: int = 0
    computer: int = 0
    ties: int = 0

    def record(self, category: ScoreCategory) -> None:
        field_name = category.value
        setattr(self, field_name, getattr(self, field_name) + 1)

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: object) -> "ScoreTally":
        if not isinstance(data, dict):
            raise ValueError("Score data must be an object")
        values = {}
        for name in ("player", "computer", "ties"):
            value = data.get(name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"Invalid score field {name!r}: {value!r}")
            values[name] = value
        return cls(**values)


class ScoreStore:
    """Score tally persisted as JSON under a fixed key in a file.

    Other keys in the file are preserved on save.
    """

    def __init__(self, path: Union[str, Path], key: str = DEFAULT_KEY) -> None:
        self.path = Path(path)
        self.key = key
        self.tally = self.load()

    def load(self) -> ScoreTally:
        if not self.path.exists():
            return ScoreTally()
        try:
            stored = self._read_file()[self.key]
            return ScoreTally.from_dict(stored)
        except (OSError, ValueError, KeyError, TypeError) as exc:
            logger.warning("Ignoring unreadable scores in %s: %s", self.path, exc)
            return ScoreTally()

    def record(self, category: ScoreCategory) -> None:
        self.tally.record(category)
        self.save()

    def save(self) -> None:
        try:
            data = self._read_file()
        except (OSError, ValueError):
            data = {}
        if not isinstance(data, dict):
            data = {}
        data[self.key] = self.tally.to_dict()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data), encoding="utf-8")
        except OSError as exc:
            # The in-memory tally stays current even when it cannot be stored
            logger.warning("Could not save scores to %s: %s", self.path, exc)

    def _read_file(self) -> dict:
        return json.loads(self.path.read_text(encoding="utf-8"))
