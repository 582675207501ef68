"""
Live Scoreboard - Data Models (Pydantic Schemas)

Immutable read models handed out by the scoreboard. Live, mutable match
state lives in src.scoreboard.match; these are point-in-time copies.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Side(str, Enum):
    """Which team a score mutation applies to."""

    HOME = "HOME"
    AWAY = "AWAY"

    @classmethod
    def parse(cls, value: object) -> Optional["Side"]:
        """
        Resolve a side token.

        Accepts a Side member or the strings "HOME"/"AWAY" in any case.

        Returns:
            The matching Side, or None for anything unrecognised
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                return None
        return None


class MatchSnapshot(BaseModel):
    """Point-in-time copy of an active match."""

    model_config = ConfigDict(frozen=True)

    home_team: str
    away_team: str
    home_score: int = Field(ge=0)
    away_score: int = Field(ge=0)
    start_time: datetime
    sequence: int = Field(ge=0, description="Registration order within the scoreboard")

    @computed_field
    @property
    def total_score(self) -> int:
        return self.home_score + self.away_score

    def __str__(self) -> str:
        return f"{self.home_team} {self.home_score} - {self.away_team} {self.away_score}"


class ScoreboardSummary(BaseModel):
    """Ranked summary of all active matches."""

    model_config = ConfigDict(frozen=True)

    generated_at: datetime = Field(description="Scoreboard clock reading when the ranking was taken")
    matches: list[MatchSnapshot] = Field(default_factory=list)

    @property
    def lines(self) -> list[str]:
        """Formatted summary lines in ranking order."""
        return [str(match) for match in self.matches]
