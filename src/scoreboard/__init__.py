"""Match-state core: live matches, keys, registry and errors."""

from .errors import ErrorKind, ScoreboardError
from .keys import KeyGenerator, SimpleMatchKeyGenerator, pair_key
from .match import Match, Score
from .registry import MatchRegistry

__all__ = [
    "ErrorKind",
    "KeyGenerator",
    "Match",
    "MatchRegistry",
    "Score",
    "ScoreboardError",
    "SimpleMatchKeyGenerator",
    "pair_key",
]
