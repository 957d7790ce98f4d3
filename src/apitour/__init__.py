"""apitour - annotated demonstrations of built-in functions.

This package provides the `tour` command-line tool, which runs catalogs of
one-line usage demonstrations and prints each label with its result.

Exports:
    __version__: Package version string.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.3.0"
