from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from time import perf_counter

import typer
from rich import box
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .core.config import ConfigLoadResult, TourConfig, load_config, reconcile_catalogs
from .core.console import console, print_outcome, setup_logging, stderr_console
from .core.decorators import handle_exceptions
from .core.registry import Catalog, discover_catalogs, resolve_catalogs
from .core.runner import RunReport, run_entries

app = typer.Typer(help="tour: annotated demonstrations of built-in functions.")
logger = logging.getLogger(__name__)

CATALOGS_PATH = Path(__file__).resolve().parent / "catalogs"


@dataclass
class AppState:
    config: TourConfig
    config_meta: ConfigLoadResult
    logger: logging.Logger
    catalogs: Mapping[str, Catalog] = field(default_factory=dict)


def _load_catalogs() -> dict[str, Catalog]:
    start = perf_counter()
    catalogs = discover_catalogs(CATALOGS_PATH)
    logger.debug("Discovered %d catalogs in %.3f seconds", len(catalogs), perf_counter() - start)
    return catalogs


def _run(state: AppState, names: list[str], deterministic_only: bool) -> RunReport:
    report = RunReport()
    for catalog in resolve_catalogs(state.catalogs, names):
        state.logger.debug("Running catalog %s (%s)", catalog.name, catalog.title)
        partial = run_entries(catalog.entries(), print_outcome, deterministic_only=deterministic_only)
        report.outcomes.extend(partial.outcomes)

    state.logger.debug(
        "Tour finished: %d succeeded, %d failed", report.succeeded, report.failed
    )
    return report


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to a tour config file (TOML or JSON)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Run every configured catalog when no command is given."""
    loaded_config, meta = load_config(config_path=config)
    app_logger = setup_logging(level=loaded_config.log_level, verbose=verbose)

    catalogs = _load_catalogs()
    loaded_config, meta = reconcile_catalogs(loaded_config, meta, catalogs)

    state = AppState(
        config=loaded_config,
        config_meta=meta,
        logger=app_logger,
        catalogs=catalogs,
    )
    ctx.obj = state

    if meta.error:
        stderr_console.print(
            Panel(
                f"[bold red]Configuration Error - Safe Mode Active[/bold red]\n\n"
                f"Failed to load {meta.path}:\n{escape(meta.error)}\n\n"
                f"[yellow]Using default settings.[/yellow]",
                border_style="red",
            )
        )
    else:
        app_logger.debug(
            "Loaded configuration from %s (env overrides: %s)",
            meta.path,
            sorted(meta.env_overrides),
        )

    if ctx.invoked_subcommand is None:
        _run_configured(state)


@handle_exceptions
def _run_configured(state: AppState) -> None:
    _run(state, state.config.catalogs, state.config.deterministic_only)


@app.command("run")
@handle_exceptions
def run_catalogs(
    ctx: typer.Context,
    names: list[str] | None = typer.Argument(
        None, help="Catalogs to run, in order (default: the configured list)."
    ),
    deterministic_only: bool = typer.Option(
        False, "--deterministic-only", help="Skip entries that read the clock or a random source."
    ),
) -> None:
    """Run demonstration catalogs and print one line per entry."""
    state: AppState = ctx.obj
    _run(
        state,
        names or state.config.catalogs,
        deterministic_only or state.config.deterministic_only,
    )


@app.command("list")
def list_catalogs(ctx: typer.Context) -> None:
    """Display the available catalogs and their entry counts."""
    state: AppState = ctx.obj
    table = Table(title="Catalogs", box=box.SIMPLE_HEAVY, expand=True)
    table.add_column("Catalog", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Entries", justify="right")
    table.add_column("Non-deterministic", justify="right")

    for name, catalog in state.catalogs.items():
        entries = catalog.entries()
        volatile = sum(1 for entry in entries if not entry.deterministic)
        table.add_row(name, catalog.title, str(len(entries)), str(volatile))

    console.print(table)


@app.command("config")
def show_config(ctx: typer.Context) -> None:
    """Show the active configuration and where it came from."""
    state: AppState = ctx.obj
    meta = state.config_meta

    table = Table(title="Config", box=box.SIMPLE, expand=True)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    for key, value in state.config.model_dump().items():
        table.add_row(key, str(value))

    console.print(table)

    meta_lines = [
        f"Path: {meta.path}",
        "File loaded: yes" if meta.file_loaded else "File loaded: no (using defaults + env)",
    ]

    if meta.env_overrides:
        meta_lines.append("Env overrides: " + ", ".join(sorted(meta.env_overrides)))

    console.print(Panel("\n".join(meta_lines), title="Config source", box=box.SIMPLE))


@app.command("version")
def show_version() -> None:
    """Print the apitour version."""
    console.print(__version__)


def cli() -> None:
    app()


if __name__ == "__main__":
    cli()
