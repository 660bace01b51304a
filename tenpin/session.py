from __future__ import annotations

import copy
from threading import Lock
from typing import Any, Dict, Optional

from .schemas import RollOutcome, ScoreSummary
from .scoring import bowling


class GameSession:
    """One live bowling game with lock-guarded access.

    Every read and write runs under the same lock, so a scoring read never
    sees a half-recorded roll. ``reset`` swaps in a fresh game in a single
    assignment.
    """

    def __init__(self, config: Optional[Dict] = None) -> None:
        self._lock = Lock()
        self._state = bowling.new_game(config)

    def record_roll(self, pins: Any) -> RollOutcome:
        with self._lock:
            return bowling.record_roll(self._state, pins)

    def scores(self) -> ScoreSummary:
        with self._lock:
            return bowling.compute_scores(self._state)

    def summary(self) -> Dict:
        with self._lock:
            return bowling.summary(self._state)

    def snapshot(self) -> Dict:
        with self._lock:
            return copy.deepcopy(self._state)

    @property
    def game_complete(self) -> bool:
        with self._lock:
            return bowling.is_complete(self._state)

    def reset(self) -> None:
        with self._lock:
            self._state = bowling.reset_game(self._state)
