"""Pure helpers around the bowling engine (no I/O)."""

from .validation import clamp_roll, validate_roll
from .status import rating_for, status_message

__all__ = [
    "clamp_roll",
    "validate_roll",
    "rating_for",
    "status_message",
]
