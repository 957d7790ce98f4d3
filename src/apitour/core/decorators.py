from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, NoReturn, TypeVar

import typer
from rich.markup import escape

from apitour.core.console import console
from apitour.core.result import CatalogError, ConfigurationError

F = TypeVar("F", bound=Callable[..., Any])


def _handle_exception(exc: Exception) -> NoReturn:
    console.print(f"[red]{escape(str(exc))}[/red]", highlight=False)
    raise typer.Exit(code=1)


def handle_exceptions(func: F) -> F:
    """Decorate CLI entrypoints to present friendly errors and exit cleanly."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (CatalogError, ConfigurationError) as exc:
            _handle_exception(exc)

    return wrapper  # type: ignore[return-value]


__all__ = ["handle_exceptions"]
