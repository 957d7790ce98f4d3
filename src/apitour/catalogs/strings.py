"""Text built-ins: str methods, the re module and struct packing."""

from __future__ import annotations

import math
import re
import struct

from apitour.core.registry import Catalog
from apitour.core.runner import DemoEntry


def _find_span(text: str, pattern: str, start: int = 0) -> tuple[int, int] | None:
    match = re.compile(pattern).search(text, start)
    return match.span() if match else None


def build_entries() -> list[DemoEntry]:
    return [
        DemoEntry("len('hello')", lambda: len("hello")),  # 5
        DemoEntry("'abcdef'[1:4]", lambda: "abcdef"[1:4]),  # bcd
        DemoEntry("'abcdef'[2:]", lambda: "abcdef"[2:]),  # cdef
        DemoEntry("'hello world'.find('world')", lambda: "hello world".find("world")),  # 6
        DemoEntry("'hello world'.find('l', 4)", lambda: "hello world".find("l", 4)),  # 9
        DemoEntry("'hello world'.find('x')", lambda: "hello world".find("x")),  # -1
        DemoEntry("re.search('l', 'hello world').span()", lambda: _find_span("hello world", "l")),
        DemoEntry("re.match(r'\\w+', 'hello world')[0]", lambda: re.match(r"\w+", "hello world")[0]),
        DemoEntry("re.findall(r'\\w+', 'one two three')", lambda: tuple(re.findall(r"\w+", "one two three"))),
        # subn returns (new_string, number_of_subs)
        DemoEntry("re.subn('l', 'L', 'hello world')", lambda: re.subn("l", "L", "hello world")),
        DemoEntry("re.subn('l', 'L', 'hello world', count=1)", lambda: re.subn("l", "L", "hello world", count=1)),
        DemoEntry("f'Pi = {math.pi:.2f}'", lambda: f"Pi = {math.pi:.2f}"),
        DemoEntry("'%d + %d = %d' % (2, 3, 2 + 3)", lambda: "%d + %d = %d" % (2, 3, 2 + 3)),
        DemoEntry("'abc'[::-1]", lambda: "abc"[::-1]),
        DemoEntry("'abc'.upper()", lambda: "abc".upper()),
        DemoEntry("'ABC'.lower()", lambda: "ABC".lower()),
        DemoEntry("struct.pack('<if', 123, 3.14)", lambda: struct.pack("<if", 123, 3.14)),
        DemoEntry("struct.calcsize('<if')", lambda: struct.calcsize("<if")),  # 8
        DemoEntry("''.join(map(chr, (65, 66, 67)))", lambda: "".join(map(chr, (65, 66, 67)))),
        DemoEntry("'Py' * 3", lambda: "Py" * 3),
        DemoEntry("'-'.join(['Py'] * 3)", lambda: "-".join(["Py"] * 3)),
    ]


catalog = Catalog(
    name="string",
    title="String functions",
    build=build_entries,
    order=30,
)
