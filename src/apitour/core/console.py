"""Rich consoles for the tour output and its diagnostics.

Demonstration lines go to stdout through ``print_outcome``; logging goes to
stderr so piped stdout holds nothing but ``<label> = <value>`` lines.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from apitour.core.runner import EntryOutcome

console = Console()
stderr_console = Console(stderr=True)

OUTCOME_STYLES = {"failed": "red", "anomalous": "yellow"}


def print_outcome(outcome: EntryOutcome) -> None:
    """Write one outcome line unwrapped, coloured only on a terminal."""
    if not outcome.ok:
        style = OUTCOME_STYLES["failed"]
    elif outcome.anomalous:
        style = OUTCOME_STYLES["anomalous"]
    else:
        style = None
    console.out(outcome.line, style=style, highlight=False)


def setup_logging(level: str | int = logging.INFO, verbose: bool = False) -> logging.Logger:
    """Send all log records to stderr through Rich and return the ``apitour`` logger."""
    if verbose:
        numeric_level = logging.DEBUG
    elif isinstance(level, str):
        numeric_level = logging.getLevelName(level.upper())
        if not isinstance(numeric_level, int):
            numeric_level = logging.INFO
    else:
        numeric_level = int(level)

    handler = RichHandler(console=stderr_console, markup=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)

    app_logger = logging.getLogger("apitour")
    app_logger.setLevel(numeric_level)
    return app_logger
