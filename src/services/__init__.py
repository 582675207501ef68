"""Business logic services."""

from .scoreboard_service import ScoreboardService
from .script_runner import ScriptRunner, parse_script

__all__ = ["ScoreboardService", "ScriptRunner", "parse_script"]
