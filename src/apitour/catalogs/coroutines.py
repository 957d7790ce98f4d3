"""Generators as coroutines, shown with a scripted NPC conversation.

The player's replies are fixed so every run prints the same dialog.
"""

from __future__ import annotations

import inspect
from collections.abc import Generator

from apitour.core.registry import Catalog
from apitour.core.runner import DemoEntry

PLAYER_NAME = "Traveler"
PLAYER_NEEDS_HELP = "yes"

Dialog = Generator[str, str, None]


def npc_dialog() -> Dialog:
    name = yield "NPC: Welcome to the village! What is your name?"
    need_help = yield f"NPC: Nice to meet you, {name}! Do you need help? (yes/no)"
    if need_help == "yes":
        yield "NPC: Sure, I can help you."
    else:
        yield "NPC: Safe travels!"


def converse(*replies: str) -> tuple[str, ...]:
    """Run a full dialog, sending each reply after the NPC speaks."""
    dialog = npc_dialog()
    lines = [next(dialog)]
    for reply in replies:
        try:
            lines.append(dialog.send(reply))
        except StopIteration:
            break
    dialog.close()
    return tuple(lines)


def _state_after(steps: int) -> str:
    dialog = npc_dialog()
    for _ in range(steps):
        next(dialog, None)
    return inspect.getgeneratorstate(dialog)


def _exhausted() -> str:
    dialog = npc_dialog()
    for _ in dialog:
        pass
    return inspect.getgeneratorstate(dialog)


def build_entries() -> list[DemoEntry]:
    return [
        DemoEntry("inspect.getgeneratorstate(npc_dialog())", lambda: _state_after(0)),
        DemoEntry("next(npc_dialog())", lambda: next(npc_dialog())),
        DemoEntry("inspect.getgeneratorstate(<after next>)", lambda: _state_after(1)),
        DemoEntry(
            f"converse({PLAYER_NAME!r}, {PLAYER_NEEDS_HELP!r})",
            lambda: converse(PLAYER_NAME, PLAYER_NEEDS_HELP),
        ),
        DemoEntry(f"converse({PLAYER_NAME!r}, 'no')", lambda: converse(PLAYER_NAME, "no")[-1]),
        DemoEntry("inspect.getgeneratorstate(<exhausted>)", _exhausted),
    ]


catalog = Catalog(
    name="coroutine",
    title="Coroutines with generators",
    build=build_entries,
    order=50,
)
