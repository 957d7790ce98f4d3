"""Mapping with raw access and an explicit fallback for missing keys.

Lookups through ``Table.get`` are two-stage: a direct lookup, then, on a miss,
either the ``resolver`` (called with the table and the key) or the plain
``default`` value. A table has at most one of the two. The ``raw_*``
operations never consult either. ``None`` is the absence marker: it is never
stored, and assigning it removes the key.

The array portion of a table is the run of integer keys ``1..n``;
``ipairs`` and ``raw_len`` operate on it.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping
from typing import Any, Callable

Resolver = Callable[["Table", Hashable], Any]


class Table:
    """Insertion-ordered mapping with raw access and fallback resolution."""

    def __init__(
        self,
        items: Mapping[Hashable, Any] | None = None,
        *,
        array: Iterable[Any] | None = None,
        resolver: Resolver | None = None,
        default: Any = None,
    ) -> None:
        if resolver is not None and default is not None:
            raise ValueError("a table takes a resolver or a default, not both")
        self._data: dict[Hashable, Any] = {}
        self._resolver = resolver
        self._default = default
        for index, value in enumerate(array or (), start=1):
            self.raw_set(index, value)
        for key, value in (items or {}).items():
            self.raw_set(key, value)

    def __repr__(self) -> str:
        return f"Table({self._data!r})"

    def set_resolver(self, resolver: Resolver | None) -> Table:
        """Install a resolver for missing keys, replacing any default, and return the table."""
        self._resolver = resolver
        self._default = None
        return self

    # -- raw access ---------------------------------------------------------

    def raw_get(self, key: Hashable) -> Any:
        return self._data.get(key)

    def raw_set(self, key: Hashable, value: Any) -> Table:
        if key is None:
            raise KeyError("table index is None")
        if isinstance(key, float) and key != key:
            raise KeyError("table index is NaN")
        if value is None:
            self._data.pop(key, None)
        else:
            self._data[key] = value
        return self

    def raw_len(self) -> int:
        """Length of the contiguous run of values at keys 1, 2, 3, ..."""
        length = 0
        while (length + 1) in self._data:
            length += 1
        return length

    # -- resolved access ----------------------------------------------------

    def get(self, key: Hashable) -> Any:
        if key in self._data:
            return self._data[key]
        if self._resolver is not None:
            return self._resolver(self, key)
        return self._default

    def set(self, key: Hashable, value: Any) -> Table:
        return self.raw_set(key, value)

    # -- traversal ----------------------------------------------------------

    def ipairs(self) -> Iterator[tuple[int, Any]]:
        """Yield (index, value) pairs from index 1 up to the first gap."""
        index = 1
        while index in self._data:
            yield index, self._data[index]
            index += 1

    def pairs(self) -> Iterator[tuple[Hashable, Any]]:
        yield from list(self._data.items())

    def next(self, key: Hashable = None) -> tuple[Hashable, Any] | None:
        """Return the entry after ``key`` (the first entry when ``key`` is None)."""
        keys = list(self._data)
        if key is None:
            position = 0
        else:
            try:
                position = keys.index(key) + 1
            except ValueError:
                raise KeyError(f"invalid key to 'next': {key!r}") from None
        if position >= len(keys):
            return None
        found = keys[position]
        return found, self._data[found]


def raw_equal(left: Any, right: Any) -> bool:
    """Compare without any table-level equality: tables compare by identity."""
    if isinstance(left, Table) or isinstance(right, Table):
        return left is right
    return bool(left == right)


__all__ = ["Resolver", "Table", "raw_equal"]
