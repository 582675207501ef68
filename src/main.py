"""
Live Scoreboard - Main Entry Point

Command line host for the in-memory scoreboard.
"""

import logging
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.settings import settings
from src.models.schemas import Side
from src.scoreboard.errors import ErrorKind, ScoreboardError
from src.scoreboard.keys import SimpleMatchKeyGenerator
from src.services.scoreboard_service import ScoreboardService
from src.services.script_runner import ScriptRunner, ScriptSyntaxError, load_script

# Setup logging
logging.basicConfig(
    level=settings.log_level_value,
    format="%(message)s",
    handlers=[RichHandler(rich_tracebacks=True)],
)
logger = logging.getLogger(__name__)
console = Console()

# (home, away, home goals, away goals) in start order
WORLD_CUP_FIXTURES = [
    ("Mexico", "Canada", 0, 5),
    ("Spain", "Brazil", 10, 2),
    ("Germany", "France", 2, 2),
    ("Uruguay", "Italy", 6, 6),
    ("Argentina", "Australia", 3, 1),
]


def build_service() -> ScoreboardService:
    """Scoreboard wired with the configured key format."""
    return ScoreboardService(key_generator=SimpleMatchKeyGenerator(settings.key_separator))


def render_summary(service: ScoreboardService, title: str = "Live Summary") -> Table:
    """Build a rich table of the ranked summary."""
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Home")
    table.add_column("Score", justify="center")
    table.add_column("Away")
    table.add_column("Total", justify="right")

    for rank, entry in enumerate(service.get_summary_entries(), start=1):
        table.add_row(
            str(rank),
            entry.home_team,
            f"{entry.home_score} - {entry.away_score}",
            entry.away_team,
            str(entry.total_score),
        )
    return table


@click.group()
def cli():
    """Live Scoreboard - ranked scores for ongoing matches."""
    pass


@cli.command()
def demo():
    """Run the World Cup example and print the summary."""
    service = build_service()

    for home, away, _, _ in WORLD_CUP_FIXTURES:
        service.start_match(home, away)

    for home, away, home_goals, away_goals in WORLD_CUP_FIXTURES:
        for _ in range(home_goals):
            service.update_score(home, away, Side.HOME)
        for _ in range(away_goals):
            service.update_score(home, away, Side.AWAY)

    console.print(render_summary(service, title="World Cup Summary"))
    for line in service.get_summary():
        console.print(f"  {line}")


@cli.command()
@click.argument("script", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--strict", is_flag=True, help="Stop at the first rejected command")
def replay(script: Path, strict: bool):
    """Replay a scoreboard script."""
    try:
        commands = load_script(script)
    except ScriptSyntaxError as e:
        console.print(f"[red]Syntax error:[/red] {e}")
        sys.exit(2)

    service = build_service()
    runner = ScriptRunner(service)
    rejected = 0

    for result in runner.run(commands, strict=strict):
        console.print(f"[dim]{result.command.line_number:>3}[/dim] [bold]{result.command}[/bold]")
        if result.ok:
            for line in result.output:
                console.print(f"      {line}")
        else:
            rejected += 1
            console.print(f"      [red]{result.error.kind.value}[/red]: {result.error.message}")

    if service.active_match_count:
        console.print(render_summary(service))

    if rejected:
        console.print(f"[yellow]{rejected} command(s) rejected[/yellow]")
        if strict:
            sys.exit(1)


@cli.command()
@click.option("--matches", default=settings.stress.matches, show_default=True, help="Independent matches to run")
@click.option("--workers", default=settings.stress.workers, show_default=True, help="Worker threads")
@click.option("--goals", default=3, show_default=True, help="Goals per side per match")
def stress(matches: int, workers: int, goals: int):
    """Start, score and finish many matches concurrently."""
    service = build_service()
    pairs = [(f"Home{i}", f"Away{i}") for i in range(matches)]

    def play(pair: tuple[str, str]) -> None:
        home, away = pair
        for _ in range(goals):
            service.update_score(home, away, Side.HOME)
            service.update_score(home, away, Side.AWAY)

    def finish(pair: tuple[str, str]) -> bool:
        try:
            service.finish_match(*pair)
            return True
        except ScoreboardError as e:
            if e.kind is not ErrorKind.MATCH_NOT_FOUND:
                raise
            return False

    started_at = time.perf_counter()
    with ThreadPoolExecutor(max_workers=workers) as pool:
        list(pool.map(lambda pair: service.start_match(*pair), pairs))
        active = service.active_match_count
        list(pool.map(play, pairs))
        expected_total = 2 * goals
        wrong = [entry for entry in service.get_summary_entries() if entry.total_score != expected_total]
        finished = sum(pool.map(finish, pairs))
    elapsed = time.perf_counter() - started_at

    console.print(f"[cyan]started:[/cyan] {active}")
    console.print(f"[cyan]finished:[/cyan] {finished}")
    console.print(f"[cyan]lost updates:[/cyan] {len(wrong)}")
    console.print(f"[cyan]elapsed:[/cyan] {elapsed:.3f}s")

    if active != matches or finished != matches or wrong:
        console.print("[red]Inconsistent scoreboard state[/red]")
        sys.exit(1)
    console.print("[green]OK[/green]")


def main():
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
