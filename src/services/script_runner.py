"""
Scripted scoreboard replay.

Parses a plain-text list of scoreboard commands and runs them against a
ScoreboardService. One command per line:

    start HOME AWAY
    finish HOME AWAY
    goal HOME AWAY SIDE
    undo HOME AWAY SIDE
    score HOME AWAY
    summary

Names with spaces are quoted ("South Korea"). Blank lines and lines
starting with # are skipped.
"""

import logging
import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Optional

from ..scoreboard.errors import ScoreboardError
from .scoreboard_service import ScoreboardService

logger = logging.getLogger(__name__)

# command -> number of arguments
COMMAND_ARITY = {
    "start": 2,
    "finish": 2,
    "goal": 3,
    "undo": 3,
    "score": 2,
    "summary": 0,
}


class ScriptSyntaxError(ValueError):
    """A script line that cannot be parsed."""

    def __init__(self, line_number: int, message: str):
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number


@dataclass(frozen=True)
class ScriptCommand:
    """A single parsed script line."""

    name: str
    args: tuple[str, ...]
    line_number: int

    def __str__(self) -> str:
        return " ".join([self.name, *(shlex.quote(arg) for arg in self.args)])


@dataclass
class ScriptResult:
    """Outcome of one executed command."""

    command: ScriptCommand
    output: list[str] = field(default_factory=list)
    error: Optional[ScoreboardError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_line(line: str, line_number: int) -> Optional[ScriptCommand]:
    """
    Parse one script line.

    Returns:
        ScriptCommand, or None for blank and comment lines

    Raises:
        ScriptSyntaxError: unknown command, wrong arity or bad quoting
    """
    try:
        tokens = shlex.split(line, comments=True)
    except ValueError as e:
        raise ScriptSyntaxError(line_number, str(e)) from e

    if not tokens:
        return None

    name = tokens[0].lower()
    if name not in COMMAND_ARITY:
        raise ScriptSyntaxError(line_number, f"unknown command {tokens[0]!r}")

    args = tuple(tokens[1:])
    if len(args) != COMMAND_ARITY[name]:
        raise ScriptSyntaxError(
            line_number,
            f"{name} takes {COMMAND_ARITY[name]} argument(s), got {len(args)}",
        )
    return ScriptCommand(name=name, args=args, line_number=line_number)


def parse_script(lines: Iterable[str]) -> list[ScriptCommand]:
    """Parse every line of a script; fails on the first syntax error."""
    commands = []
    for line_number, line in enumerate(lines, start=1):
        command = parse_line(line, line_number)
        if command is not None:
            commands.append(command)
    return commands


def load_script(path: Path) -> list[ScriptCommand]:
    return parse_script(path.read_text(encoding="utf-8").splitlines())


class ScriptRunner:
    """Executes parsed commands against a scoreboard."""

    def __init__(self, service: ScoreboardService):
        self.service = service

    def execute(self, command: ScriptCommand) -> ScriptResult:
        """Run one command. Rejections are captured on the result."""
        result = ScriptResult(command=command)
        try:
            result.output = self._dispatch(command)
        except ScoreboardError as e:
            result.error = e
        return result

    def run(self, commands: Iterable[ScriptCommand], strict: bool = False) -> Iterator[ScriptResult]:
        """
        Run commands in order, yielding each result.

        Args:
            commands: Parsed commands
            strict: Stop after the first rejected command
        """
        for command in commands:
            result = self.execute(command)
            yield result
            if strict and not result.ok:
                logger.debug(f"Stopping at line {command.line_number}")
                return

    def _dispatch(self, command: ScriptCommand) -> list[str]:
        service = self.service
        args = command.args

        if command.name == "start":
            return [f"started {service.start_match(*args)}"]
        if command.name == "finish":
            return [f"finished {service.finish_match(*args)}"]
        if command.name == "goal":
            return [str(service.update_score(*args))]
        if command.name == "undo":
            return [str(service.adjust_score_for_infraction(*args))]
        if command.name == "score":
            return [service.get_score(*args)]
        return service.get_summary()
