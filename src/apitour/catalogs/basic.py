"""General-purpose built-ins: namespaces, iteration, conversion, protected calls."""

from __future__ import annotations

import gc
import platform

from apitour.core.numeric import ieee_divide
from apitour.core.protected import prefix_error, protected_call, raise_failure
from apitour.core.registry import BUILTINS, Catalog
from apitour.core.runner import DemoEntry
from apitour.core.table import Table, raw_equal
from apitour.core.varargs import Varargs


def _sample() -> Table:
    return Table({"a": 1, "b": 2})


def _check(condition: bool, message: str = "assertion failed!") -> bool:
    if not condition:
        raise_failure(message)
    return condition


def _write_then_read() -> object:
    table = _sample().set_resolver(lambda _table, _key: "default")
    table.raw_set("c", 3)
    return table.raw_get("c")


def build_entries() -> list[DemoEntry]:
    return [
        # The built-in namespace is an explicit, read-only mapping.
        DemoEntry("BUILTINS['print'] is print", lambda: BUILTINS["print"] is print),
        DemoEntry("platform.python_version()", platform.python_version),
        DemoEntry("check(1 == 1)", lambda: _check(1 == 1)),
        DemoEntry("gc.isenabled()", gc.isenabled),
        DemoEntry("type('abc').__name__", lambda: type("abc").__name__),
        DemoEntry(
            "Table(array=[10, 20, 30]).ipairs()",
            lambda: tuple(Table(array=[10, 20, 30]).ipairs()),
        ),
        DemoEntry(
            "eval(compile('123', '<demo>', 'eval'))",
            lambda: eval(compile("123", "<demo>", "eval")),
        ),
        DemoEntry("tbl.next()", lambda: _sample().next()),
        DemoEntry("tbl.pairs()", lambda: tuple(_sample().pairs())),
        # Division by zero is a non-finite value here, not a failure.
        DemoEntry("protected_call(ieee_divide, 1, 0)", lambda: protected_call(ieee_divide, 1, 0)),
        DemoEntry("print('Hello', 'World', 123)", lambda: ("Hello", "World", 123)),
        DemoEntry("raw_equal(1, 1)", lambda: raw_equal(1, 1)),
        DemoEntry("tbl.raw_get('a')", lambda: _sample().raw_get("a")),
        DemoEntry("Table(array=[1, 2, 3]).raw_len()", lambda: Table(array=[1, 2, 3]).raw_len()),
        DemoEntry("tbl.raw_set('c', 3).raw_get('c')", _write_then_read),
        DemoEntry("Varargs(1, 2, 3, 4).select('#')", lambda: Varargs(1, 2, 3, 4).select("#")),
        DemoEntry("Varargs(1, 2, 3, 4).select(2)", lambda: Varargs(1, 2, 3, 4).select(2)),
        DemoEntry(
            "Table(resolver=lambda t, k: 'default').get('x')",
            lambda: Table(resolver=lambda _table, _key: "default").get("x"),
        ),
        DemoEntry("int('123')", lambda: int("123")),
        DemoEntry("int('123', 16)", lambda: int("123", 16)),
        DemoEntry("str(123)", lambda: str(123)),
        DemoEntry("type(123).__name__", lambda: type(123).__name__),
        DemoEntry(
            "protected_call(raise_failure, 'fail', handler=prefix_error)",
            lambda: protected_call(raise_failure, "fail", handler=prefix_error),
        ),
    ]


catalog = Catalog(
    name="basic",
    title="General-purpose built-in functions",
    build=build_entries,
    order=10,
)
