from __future__ import annotations

from pathlib import Path

from typer.main import get_command
from typer.testing import CliRunner

from apitour import __version__
from apitour.main import app

runner = CliRunner()


def test_app_version() -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_all_commands_have_help() -> None:
    """Every registered command must accept --help."""
    commands = getattr(get_command(app), "commands", {})
    assert {"run", "list", "config", "version"} <= set(commands)
    for name in commands:
        result = runner.invoke(app, [name, "--help"])
        assert result.exit_code == 0, f"Command 'tour {name} --help' failed!"
        assert "Usage:" in result.stdout


def test_bare_invocation_runs_every_catalog() -> None:
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "abs(-5) = 5" in result.stdout
    assert "len('hello') = 5" in result.stdout
    assert "ord(s[0]) = 20320" in result.stdout
    assert "next(npc_dialog()) = NPC: Welcome to the village! What is your name?" in result.stdout


def test_run_reports_protected_calls() -> None:
    result = runner.invoke(app, ["run", "basic"])
    assert result.exit_code == 0
    assert "protected_call(ieee_divide, 1, 0) = true inf" in result.stdout
    assert "protected_call(raise_failure, 'fail', handler=prefix_error) = false Error: fail" in result.stdout


def test_run_keeps_requested_order() -> None:
    result = runner.invoke(app, ["run", "utf8", "math", "--deterministic-only"])
    assert result.exit_code == 0
    lines = [line for line in result.stdout.splitlines() if " = " in line]
    assert lines[0].startswith("len(s) = 4")
    assert any(line.startswith("abs(-5) = ") for line in lines)
    assert lines.index("len(s) = 4") < lines.index("abs(-5) = 5")
    assert not any(line.startswith("time.time()") for line in lines)


def test_run_unknown_catalog_exits_with_error() -> None:
    result = runner.invoke(app, ["run", "nope"])
    assert result.exit_code == 1
    assert "Unknown catalog: nope" in result.stdout


def test_list_shows_catalogs() -> None:
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    for name in ("basic", "math", "string", "utf8", "coroutine"):
        assert name in result.stdout


def test_config_file_limits_bare_run(isolate_config: Path) -> None:
    isolate_config.write_text('catalogs = ["string"]\n', encoding="utf-8")
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "len('hello') = 5" in result.stdout
    assert "abs(-5) = 5" not in result.stdout


def test_broken_config_falls_back_to_defaults(isolate_config: Path) -> None:
    isolate_config.write_text("catalogs = [", encoding="utf-8")
    result = runner.invoke(app, ["run", "math"])
    assert result.exit_code == 0
    assert "abs(-5) = 5" in result.stdout


def test_failed_entry_is_marked_on_stdout() -> None:
    result = runner.invoke(app, ["run", "utf8"])
    assert result.exit_code == 0
    assert "b'\\xff'.decode('utf-8') = error: 'utf-8' codec can't decode" in result.stdout


def test_unknown_configured_catalog_falls_back_to_defaults(isolate_config: Path) -> None:
    isolate_config.write_text('catalogs = ["nope"]\n', encoding="utf-8")
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "abs(-5) = 5" in result.stdout
    assert "len('hello') = 5" in result.stdout
