"""Demonstration catalogs for the tour CLI.

Each module exposes a module-level ``catalog``:
    - basic: general-purpose built-ins, tables, varargs, protected calls
    - mathematics: numeric and math functions
    - strings: str methods, re and struct
    - utf8: Unicode text and UTF-8 bytes
    - coroutines: generators driven with send()
"""

from __future__ import annotations

from . import basic, coroutines, mathematics, strings, utf8

__all__ = ["basic", "coroutines", "mathematics", "strings", "utf8"]
