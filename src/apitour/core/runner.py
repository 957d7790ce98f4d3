"""Sequential demonstration runner.

Each ``DemoEntry`` pairs a label with a zero-argument action. The runner calls
every action in order and emits ``<label> = <values>`` per entry. A failing
action is reported as ``<label> = error: <message>`` and never stops the
remaining entries.

Action return convention:
    - tuple: zero or more values, space-joined in the output line
    - Ok / Err: a protected call; the line starts with ``true`` or ``false``
    - anything else: a single value
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Callable

from apitour.core.numeric import is_anomalous
from apitour.core.result import CatalogError, Err, Ok

logger = logging.getLogger(__name__)

Action = Callable[[], Any]
Emit = Callable[["EntryOutcome"], None]

FAILURE_MARKER = "error:"


@dataclass(frozen=True)
class DemoEntry:
    label: str
    action: Action
    deterministic: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.label, str) or not self.label.strip():
            raise CatalogError("Demo entry label must be a non-empty string")
        if not callable(self.action):
            raise CatalogError("Demo entry action must be callable", context={"label": self.label})


def display(value: Any) -> str:
    """Render a single value the way it appears in an output line."""
    if isinstance(value, (float, bytes)):
        return repr(value)
    return str(value)


@dataclass(frozen=True)
class EntryOutcome:
    label: str
    ok: bool
    values: tuple[Any, ...] = ()
    error: str | None = None
    protected: bool = False

    @property
    def anomalous(self) -> bool:
        """True when a successful result carries a non-finite float."""
        return self.ok and any(is_anomalous(value) for value in self.values)

    @property
    def text(self) -> str:
        if self.ok:
            body = " ".join(display(value) for value in self.values)
        else:
            body = self.error or ""
        if self.protected:
            flag = "true" if self.ok else "false"
            return f"{flag} {body}" if body else flag
        if not self.ok:
            return f"{FAILURE_MARKER} {body}"
        return body

    @property
    def line(self) -> str:
        return f"{self.label} = {self.text}"


@dataclass
class RunReport:
    outcomes: list[EntryOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.ok)

    @property
    def failed(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.ok)

    @property
    def lines(self) -> list[str]:
        return [outcome.line for outcome in self.outcomes]


def _failure_message(error: BaseException) -> str:
    message = getattr(error, "message", None)
    return message if isinstance(message, str) else str(error)


def run_entry(entry: DemoEntry) -> EntryOutcome:
    """Run one entry, containing any exception it raises."""
    try:
        returned = entry.action()
    except Exception as exc:
        logger.warning("Entry %r raised %s: %s", entry.label, type(exc).__name__, exc)
        return EntryOutcome(label=entry.label, ok=False, error=_failure_message(exc))

    protected = isinstance(returned, (Ok, Err))
    if protected:
        if returned.is_err():
            message = _failure_message(returned.error)
            logger.warning("Entry %r reported failure: %s", entry.label, message)
            return EntryOutcome(label=entry.label, ok=False, error=message, protected=True)
        returned = returned.unwrap()

    values = returned if isinstance(returned, tuple) else (returned,)
    return EntryOutcome(label=entry.label, ok=True, values=values, protected=protected)


def run_entries(
    entries: Iterable[DemoEntry],
    emit: Emit | None = None,
    *,
    deterministic_only: bool = False,
) -> RunReport:
    """Run entries in order, passing each outcome to ``emit`` as soon as it is known."""
    report = RunReport()
    for entry in entries:
        if deterministic_only and not entry.deterministic:
            logger.debug("Skipping non-deterministic entry %r", entry.label)
            continue
        outcome = run_entry(entry)
        report.outcomes.append(outcome)
        if emit is not None:
            emit(outcome)

    logger.debug("Ran %d entries (%d failed)", len(report.outcomes), report.failed)
    return report


__all__ = [
    "Action",
    "DemoEntry",
    "EntryOutcome",
    "RunReport",
    "display",
    "run_entries",
    "run_entry",
]
