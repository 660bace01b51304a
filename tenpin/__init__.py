"""Ten-pin bowling game state and scoring."""

from .exceptions import BowlingError, InvalidRollValue
from .schemas import RollOutcome, ScoreSummary
from .scoring.bowling import (
    compute_scores,
    new_game,
    record_roll,
    reset_game,
)
from .session import GameSession

__all__ = [
    "BowlingError",
    "InvalidRollValue",
    "RollOutcome",
    "ScoreSummary",
    "compute_scores",
    "new_game",
    "record_roll",
    "reset_game",
    "GameSession",
]
