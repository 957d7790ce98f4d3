"""
Protected-call results and the apitour error hierarchy.

``protected_call`` returns ``Ok(value)`` when the wrapped function returns and
``Err(RaisedFailure)`` when it raises. The runner prints such results with a
leading ``true``/``false`` flag.

Usage:
    from apitour.core.protected import protected_call

    result = protected_call(int, "abc")
    if result.is_err():
        print(result.error.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=Exception)
F = TypeVar("F", bound=Exception)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def map_err(self, fn: Callable[[E], F]) -> Ok[T]:
        return self


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E

    def is_err(self) -> bool:
        return True

    def map_err(self, fn: Callable[[E], F]) -> Err[F]:
        """Replace the caught error, e.g. with one carrying a handler's message."""
        return Err(fn(self.error))


Result = Ok[T] | Err[E]


class ApiTourError(Exception):
    """Base exception for apitour; ``context`` is appended to ``str()``."""

    def __init__(self, message: str, *, context: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} [{details}]"


class RaisedFailure(ApiTourError):
    """An action explicitly signalled failure.

    Caught by the nearest protected call or by the runner's per-entry
    isolation; it never ends a run.
    """


class CatalogError(ApiTourError):
    """A malformed demo entry or an unknown catalog name."""


class ConfigurationError(ApiTourError):
    """A config file that cannot be read or parsed."""


__all__ = [
    "Ok",
    "Err",
    "Result",
    "ApiTourError",
    "RaisedFailure",
    "CatalogError",
    "ConfigurationError",
]
