"""
Live match state.

A Match is created once and never changes except for its Score, which
guards its two counters with its own lock so that updates on unrelated
matches never contend.
"""

import threading
from dataclasses import dataclass, field
from datetime import datetime

from ..models.schemas import MatchSnapshot, Side
from .errors import ScoreboardError


class Score:
    """Home and away goal counters. Neither ever goes below zero."""

    def __init__(self, home: int = 0, away: int = 0):
        if home < 0 or away < 0:
            raise ValueError("Scores cannot be negative")
        self._home = home
        self._away = away
        self._lock = threading.Lock()

    def values(self) -> tuple[int, int]:
        """Read both counters as one consistent pair."""
        with self._lock:
            return self._home, self._away

    def increment(self, side: Side) -> tuple[int, int]:
        """
        Add one goal to the given side.

        Returns:
            The (home, away) score after the update
        """
        with self._lock:
            if side is Side.HOME:
                self._home += 1
            else:
                self._away += 1
            return self._home, self._away

    def decrement(self, side: Side) -> tuple[int, int]:
        """
        Remove one goal from the given side.

        Raises:
            ScoreboardError: IllegalState if that side is already at zero;
                the score is left unchanged

        Returns:
            The (home, away) score after the update
        """
        with self._lock:
            if side is Side.HOME:
                if self._home == 0:
                    raise ScoreboardError.illegal_state(
                        "Cannot adjust score for infraction: Home team score is already at minimum."
                    )
                self._home -= 1
            else:
                if self._away == 0:
                    raise ScoreboardError.illegal_state(
                        "Cannot adjust score for infraction: Away team score is already at minimum."
                    )
                self._away -= 1
            return self._home, self._away

    def __repr__(self) -> str:
        home, away = self.values()
        return f"Score(home={home}, away={away})"


@dataclass(eq=False)
class Match:
    """An active match between two teams."""

    home_team: str
    away_team: str
    start_time: datetime
    sequence: int = 0
    score: Score = field(default_factory=Score)

    @property
    def teams(self) -> tuple[str, str]:
        return self.home_team, self.away_team

    def snapshot(self) -> MatchSnapshot:
        """Copy the current state into an immutable read model."""
        home, away = self.score.values()
        return MatchSnapshot(
            home_team=self.home_team,
            away_team=self.away_team,
            home_score=home,
            away_score=away,
            start_time=self.start_time,
            sequence=self.sequence,
        )

    def __str__(self) -> str:
        home, away = self.score.values()
        return f"{self.home_team} {home} - {self.away_team} {away}"
