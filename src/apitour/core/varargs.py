"""Explicit variadic argument sequences."""

from __future__ import annotations

from typing import Any


class Varargs:
    """An ordered argument list with a count and a 1-based ``select`` accessor."""

    def __init__(self, *values: Any) -> None:
        self._values = values

    def __repr__(self) -> str:
        return f"Varargs{self._values!r}"

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    @property
    def count(self) -> int:
        return len(self._values)

    def select(self, n: int | str) -> Any:
        """Return the values from position ``n`` onward, or the count for ``"#"``.

        Negative positions count back from the end. Position 0, or a negative
        position before the first value, raises IndexError.
        """
        if n == "#":
            return self.count
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"select position must be an int or '#', got {n!r}")
        if n < 0:
            n = self.count + n + 1
            if n < 1:
                raise IndexError("select position out of range")
        elif n == 0:
            raise IndexError("select position out of range")
        return self._values[n - 1 :]


__all__ = ["Varargs"]
