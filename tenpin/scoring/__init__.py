"""Scoring engines."""

from . import bowling

__all__ = [
    "bowling",
]
