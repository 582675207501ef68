"""
Scoreboard Service.

Validates requests, enforces the one-match-per-team rules, mutates scores
and ranks active matches for the live summary.
"""

import itertools
import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Hashable, Optional

from ..models.schemas import MatchSnapshot, ScoreboardSummary, Side
from ..scoreboard.errors import ScoreboardError
from ..scoreboard.keys import KeyGenerator, pair_key
from ..scoreboard.match import Match
from ..scoreboard.registry import MatchRegistry

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def summary_sort_key(snapshot: MatchSnapshot) -> tuple:
    """Highest total first, then most recently started, then most recently registered."""
    return (-snapshot.total_score, -snapshot.start_time.timestamp(), -snapshot.sequence)


class ScoreboardService:
    """
    Live scoreboard for matches between two named teams.

    Starting and finishing matches is serialised by a lifecycle lock that
    covers the multi-team conflict check and the registry change. Score
    updates only take the lock of the match being scored.
    """

    def __init__(
        self,
        registry: Optional[MatchRegistry] = None,
        key_generator: Optional[KeyGenerator] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize scoreboard.

        Args:
            registry: Match storage (a fresh registry if None)
            key_generator: Ordered-pair key function (pair_key if None)
            clock: Source of match start times (UTC now if None)
        """
        self.registry = registry if registry is not None else MatchRegistry()
        self.key_generator = key_generator or pair_key
        self.clock = clock or _utc_now

        self._lifecycle_lock = threading.Lock()
        self._sequence = itertools.count()
        self._last_start_time: Optional[datetime] = None

    # ============================================
    # Validation
    # ============================================

    def generate_key(self, home_team: str, away_team: str) -> Hashable:
        return self.key_generator(home_team, away_team)

    def validate_teams(self, home_team: str, away_team: str) -> None:
        """
        Check a team pair before any operation that takes one.

        Raises:
            ScoreboardError: InvalidArgument for missing or identical names,
                ExistingMatchConflict if the reversed pair is active
        """
        if not isinstance(home_team, str) or not home_team:
            raise ScoreboardError.invalid_argument("Home team name cannot be null or empty")
        if not isinstance(away_team, str) or not away_team:
            raise ScoreboardError.invalid_argument("Away team name cannot be null or empty")
        if home_team == away_team:
            raise ScoreboardError.invalid_argument("Home team and away team cannot be the same")
        if self.registry.contains(self.generate_key(away_team, home_team)):
            raise ScoreboardError.existing_match_conflict(home_team, away_team)

    @staticmethod
    def _parse_side(side: object) -> Side:
        parsed = Side.parse(side)
        if parsed is None:
            raise ScoreboardError.invalid_argument(f"Invalid team side: {side!r}")
        return parsed

    # ============================================
    # Lifecycle
    # ============================================

    def start_match(self, home_team: str, away_team: str) -> MatchSnapshot:
        """
        Start a match with a 0-0 score.

        Returns:
            Snapshot of the new match

        Raises:
            ScoreboardError: InvalidArgument, ExistingMatchConflict,
                MatchAlreadyStarted or TeamAlreadyInMatch
        """
        with self._lifecycle_lock:
            self.validate_teams(home_team, away_team)
            key = self.generate_key(home_team, away_team)
            if self.registry.contains(key):
                raise ScoreboardError.match_already_started(home_team, away_team)
            if self.registry.team_in_any_match(home_team) or self.registry.team_in_any_match(away_team):
                raise ScoreboardError.team_already_in_match(home_team, away_team)

            match = Match(
                home_team=home_team,
                away_team=away_team,
                start_time=self._next_start_time(),
                sequence=next(self._sequence),
            )
            if not self.registry.insert(key, match):
                # Registry shared with another writer
                raise ScoreboardError.team_already_in_match(home_team, away_team)

        logger.info(f"Match started: {home_team} vs {away_team}")
        return match.snapshot()

    def finish_match(self, home_team: str, away_team: str) -> MatchSnapshot:
        """
        Finish a match and drop it from the scoreboard.

        Returns:
            Snapshot of the match as it stood when finished

        Raises:
            ScoreboardError: InvalidArgument, ExistingMatchConflict or
                MatchNotFound (also for every loser of a concurrent finish)
        """
        with self._lifecycle_lock:
            self.validate_teams(home_team, away_team)
            match = self.registry.remove(self.generate_key(home_team, away_team))
        if match is None:
            raise ScoreboardError.match_not_found(home_team, away_team)

        logger.info(f"Match finished: {match}")
        return match.snapshot()

    def _next_start_time(self) -> datetime:
        # Caller holds the lifecycle lock
        now = self.clock()
        if self._last_start_time is not None and now < self._last_start_time:
            now = self._last_start_time
        self._last_start_time = now
        return now

    # ============================================
    # Lookup
    # ============================================

    def find_match(self, home_team: str, away_team: str) -> Match:
        """
        Find an active match by its exact (home, away) orientation.

        Raises:
            ScoreboardError: MatchNotFound
        """
        match = self.registry.get(self.generate_key(home_team, away_team))
        if match is None:
            raise ScoreboardError.match_not_found(home_team, away_team)
        return match

    def get_score(self, home_team: str, away_team: str) -> str:
        """Formatted score, e.g. "Mexico 0 - Canada 5"."""
        return str(self.find_match(home_team, away_team))

    @property
    def active_match_count(self) -> int:
        return self.registry.count()

    # ============================================
    # Scores
    # ============================================

    def update_score(self, home_team: str, away_team: str, side: Side | str) -> MatchSnapshot:
        """
        Add one goal for the given side.

        Raises:
            ScoreboardError: InvalidArgument, ExistingMatchConflict or MatchNotFound
        """
        self.validate_teams(home_team, away_team)
        parsed = self._parse_side(side)
        match = self.find_match(home_team, away_team)
        home, away = match.score.increment(parsed)
        logger.debug(f"Goal {parsed.value}: {home_team} {home} - {away_team} {away}")
        return match.snapshot()

    def adjust_score_for_infraction(self, home_team: str, away_team: str, side: Side | str) -> MatchSnapshot:
        """
        Take back one goal from the given side, e.g. after a foul or offside.

        Raises:
            ScoreboardError: InvalidArgument, MatchNotFound, or IllegalState
                if that side has no goals to take back
        """
        parsed = self._parse_side(side)
        match = self.find_match(home_team, away_team)
        home, away = match.score.decrement(parsed)
        logger.debug(f"Goal revoked {parsed.value}: {home_team} {home} - {away_team} {away}")
        return match.snapshot()

    # ============================================
    # Summary
    # ============================================

    def get_summary_entries(self) -> list[MatchSnapshot]:
        """Snapshots of all active matches in summary order."""
        snapshots = [match.snapshot() for match in self.registry.snapshot()]
        return sorted(snapshots, key=summary_sort_key)

    def get_summary(self) -> list[str]:
        """
        Ranked live summary.

        Ordered by total score descending; ties go to the match that started
        more recently, then to the one registered more recently.
        """
        return [str(snapshot) for snapshot in self.get_summary_entries()]

    def summarize(self) -> ScoreboardSummary:
        return ScoreboardSummary(generated_at=self.clock(), matches=self.get_summary_entries())
