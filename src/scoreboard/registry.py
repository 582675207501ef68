"""
In-memory registry of active matches.

Responsibilities:
- Own the authoritative key -> Match map for one scoreboard
- Keep a team -> key index so that a team can be in at most one match
- Provide safe-to-iterate snapshots for enumeration

Each scoreboard creates its own registry; there is no shared instance.
"""

import logging
import threading
from typing import Hashable, Optional

from .match import Match

logger = logging.getLogger(__name__)


class MatchRegistry:
    """
    Thread-safe storage of active matches keyed by registry key.

    Mutations and snapshots take one short lock. Single-key reads go
    straight to the dictionary, so score updates on different matches
    never wait on each other here.
    """

    def __init__(self) -> None:
        self._matches: dict[Hashable, Match] = {}
        self._teams: dict[str, Hashable] = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, key: Hashable, match: Match) -> bool:
        """
        Insert match unless the key exists or either team is already playing.

        The checks and the insert happen in one critical section, so two
        concurrent inserts sharing a team can never both succeed.

        Returns:
            True if the match was stored
        """
        with self._lock:
            if key in self._matches:
                return False
            if match.home_team in self._teams or match.away_team in self._teams:
                return False
            self._matches[key] = match
            self._teams[match.home_team] = key
            self._teams[match.away_team] = key
        logger.debug(f"Registered {key!r}")
        return True

    def remove(self, key: Hashable) -> Optional[Match]:
        """
        Remove the match stored under key, if any.

        Returns:
            The removed match, or None if nothing was stored. When several
            threads remove the same key, exactly one gets the match back.
        """
        with self._lock:
            match = self._matches.pop(key, None)
            if match is None:
                return None
            for team in match.teams:
                if self._teams.get(team) == key:
                    del self._teams[team]
        logger.debug(f"Removed {key!r}")
        return match

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, key: Hashable) -> Optional[Match]:
        return self._matches.get(key)

    def contains(self, key: Hashable) -> bool:
        return key in self._matches

    def count(self) -> int:
        return len(self._matches)

    def team_in_any_match(self, team: str) -> bool:
        """Check if team plays home or away in any stored match."""
        return team in self._teams

    def snapshot(self) -> list[Match]:
        """Point-in-time list of stored matches, safe to iterate."""
        with self._lock:
            return list(self._matches.values())

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, key: Hashable) -> bool:
        return self.contains(key)
