"""Data models module."""

from src.models.schemas import (
    MatchSnapshot,
    ScoreboardSummary,
    Side,
)

__all__ = [
    "MatchSnapshot",
    "ScoreboardSummary",
    "Side",
]
