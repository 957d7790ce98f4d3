"""Protected calls: run a function and return its outcome as a Result."""

from __future__ import annotations

import logging
from typing import Any, Callable, NoReturn

from apitour.core.result import Err, Ok, RaisedFailure, Result

logger = logging.getLogger(__name__)

MessageHandler = Callable[[str], str]


def raise_failure(message: str) -> NoReturn:
    """Explicitly signal failure from inside a demonstrated action."""
    raise RaisedFailure(message)


def prefix_error(message: str) -> str:
    return f"Error: {message}"


def _as_failure(exc: Exception) -> RaisedFailure:
    if isinstance(exc, RaisedFailure):
        return exc
    failure = RaisedFailure(str(exc), context={"type": type(exc).__name__})
    failure.__cause__ = exc
    return failure


def protected_call(
    fn: Callable[..., Any],
    *args: Any,
    handler: MessageHandler | None = None,
) -> Result[Any, RaisedFailure]:
    """Call ``fn(*args)`` and capture a raised exception instead of propagating it.

    Returns ``Ok(value)`` when ``fn`` returns. When it raises, returns
    ``Err(RaisedFailure)``; with a ``handler``, the failure carries
    ``handler(message)`` as its message.
    """
    try:
        return Ok(fn(*args))
    except Exception as exc:
        logger.debug("Protected call to %s raised %s", getattr(fn, "__name__", fn), exc)
        result: Result[Any, RaisedFailure] = Err(_as_failure(exc))

    if handler is not None:
        result = result.map_err(lambda failure: RaisedFailure(handler(failure.message)))
    return result


__all__ = ["MessageHandler", "prefix_error", "protected_call", "raise_failure"]
