"""Unicode text and its UTF-8 byte encoding."""

from __future__ import annotations

from apitour.core.registry import Catalog
from apitour.core.runner import DemoEntry

SAMPLE = "你好Py"


def byte_offsets(text: str) -> list[tuple[int, int]]:
    """Return (byte position, code point) for each character, positions 1-based."""
    offsets: list[tuple[int, int]] = []
    position = 1
    for char in text:
        offsets.append((position, ord(char)))
        position += len(char.encode("utf-8"))
    return offsets


def build_entries() -> list[DemoEntry]:
    return [
        DemoEntry("len(s)", lambda: len(SAMPLE)),  # 4
        DemoEntry("len(s.encode('utf-8'))", lambda: len(SAMPLE.encode("utf-8"))),  # 8
        DemoEntry("len(s[1:3])", lambda: len(SAMPLE[1:3])),  # 2
        DemoEntry("ord(s[0])", lambda: ord(SAMPLE[0])),  # 20320
        DemoEntry("chr(20320) + chr(22909)", lambda: chr(20320) + chr(22909)),
        DemoEntry("byte_offsets(s)[1][0]", lambda: byte_offsets(SAMPLE)[1][0]),  # 4
        DemoEntry("byte_offsets(s)", lambda: tuple(byte_offsets(SAMPLE))),
        DemoEntry("s.encode('utf-8')", lambda: SAMPLE.encode("utf-8")),
        DemoEntry("b'\\xe4\\xbd\\xa0'.decode('utf-8')", lambda: b"\xe4\xbd\xa0".decode("utf-8")),
        DemoEntry("b'\\xff'.decode('utf-8')", lambda: b"\xff".decode("utf-8")),
    ]


catalog = Catalog(
    name="utf8",
    title="UTF-8 encoding functions",
    build=build_entries,
    order=40,
)
