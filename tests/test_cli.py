from click.testing import CliRunner

from src.main import cli


def test_demo_prints_ranked_summary():
    result = CliRunner().invoke(cli, ["demo"])
    assert result.exit_code == 0
    lines = [line.strip() for line in result.output.splitlines()]
    summary = [line for line in lines if " - " in line and line[0].isalpha()]
    assert summary == [
        "Uruguay 6 - Italy 6",
        "Spain 10 - Brazil 2",
        "Mexico 0 - Canada 5",
        "Argentina 3 - Australia 1",
        "Germany 2 - France 2",
    ]


def test_replay_reports_rejections(tmp_path):
    script = tmp_path / "matches.txt"
    script.write_text("start A B\nstart B A\ngoal A B home\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["replay", str(script)])
    assert result.exit_code == 0
    assert "ExistingMatchConflict" in result.output
    assert "A 1 - B 0" in result.output


def test_replay_strict_exit_code(tmp_path):
    script = tmp_path / "matches.txt"
    script.write_text("finish A B\nstart A B\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["replay", "--strict", str(script)])
    assert result.exit_code == 1
    assert "MatchNotFound" in result.output


def test_replay_syntax_error(tmp_path):
    script = tmp_path / "matches.txt"
    script.write_text("kickoff A B\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["replay", str(script)])
    assert result.exit_code == 2
    assert "line 1" in result.output


def test_stress_small_run():
    result = CliRunner().invoke(cli, ["stress", "--matches", "50", "--workers", "8", "--goals", "2"])
    assert result.exit_code == 0, result.output
    assert "OK" in result.output


def test_replay_bundled_world_cup_script():
    from pathlib import Path

    script = Path(__file__).parent.parent / "scripts" / "world_cup.txt"
    result = CliRunner().invoke(cli, ["replay", str(script)])
    assert result.exit_code == 0, result.output
    assert "Spain 2 - Brazil 1" in result.output
    assert "1 command(s) rejected" in result.output


def test_replay_names_containing_key_separator(tmp_path):
    script = tmp_path / "matches.txt"
    script.write_text(
        'start "A vs B" C\nstart A "B vs C"\ngoal A "B vs C" home\nscore "A vs B" C\n',
        encoding="utf-8",
    )

    result = CliRunner().invoke(cli, ["replay", "--strict", str(script)])
    assert result.exit_code == 0, result.output
    assert "MatchAlreadyStarted" not in result.output
    assert "A 1 - B vs C 0" in result.output
    assert "A vs B 0 - C 0" in result.output
