"""
Scoreboard error model.

Every rejected request raises ScoreboardError; callers branch on its kind.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Why a scoreboard request was rejected."""

    INVALID_ARGUMENT = "InvalidArgument"
    EXISTING_MATCH_CONFLICT = "ExistingMatchConflict"
    MATCH_ALREADY_STARTED = "MatchAlreadyStarted"
    TEAM_ALREADY_IN_MATCH = "TeamAlreadyInMatch"
    MATCH_NOT_FOUND = "MatchNotFound"
    ILLEGAL_STATE = "IllegalState"


class ScoreboardError(Exception):
    """A rejected scoreboard request."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        home_team: Optional[str] = None,
        away_team: Optional[str] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.home_team = home_team
        self.away_team = away_team

    def __repr__(self) -> str:
        return f"ScoreboardError(kind={self.kind.value!r}, message={self.message!r})"

    @classmethod
    def invalid_argument(cls, message: str) -> "ScoreboardError":
        return cls(ErrorKind.INVALID_ARGUMENT, message)

    @classmethod
    def existing_match_conflict(cls, home_team: str, away_team: str) -> "ScoreboardError":
        return cls(
            ErrorKind.EXISTING_MATCH_CONFLICT,
            f"Cannot start the match since the match between {away_team} and {home_team} exists!",
            home_team,
            away_team,
        )

    @classmethod
    def match_already_started(cls, home_team: str, away_team: str) -> "ScoreboardError":
        return cls(
            ErrorKind.MATCH_ALREADY_STARTED,
            f"The match between {home_team} and {away_team} has already been started!",
            home_team,
            away_team,
        )

    @classmethod
    def team_already_in_match(cls, home_team: str, away_team: str) -> "ScoreboardError":
        return cls(
            ErrorKind.TEAM_ALREADY_IN_MATCH,
            f"Cannot start {home_team} vs {away_team}: "
            "both teams must be free of ongoing matches.",
            home_team,
            away_team,
        )

    @classmethod
    def match_not_found(cls, home_team: str, away_team: str) -> "ScoreboardError":
        return cls(
            ErrorKind.MATCH_NOT_FOUND,
            f"The match between {home_team} and {away_team} cannot be found!",
            home_team,
            away_team,
        )

    @classmethod
    def illegal_state(cls, message: str) -> "ScoreboardError":
        return cls(ErrorKind.ILLEGAL_STATE, message)
