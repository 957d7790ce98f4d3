"""Numeric built-ins and the math module."""

from __future__ import annotations

import math
import random
import time

from apitour.core.numeric import (
    MAX_INTEGER,
    MIN_INTEGER,
    number_type,
    to_integer,
    unsigned_less_than,
)
from apitour.core.registry import Catalog
from apitour.core.runner import DemoEntry


def build_entries() -> list[DemoEntry]:
    return [
        DemoEntry("abs(-5)", lambda: abs(-5)),  # 5
        DemoEntry("math.acos(1)", lambda: math.acos(1)),  # 0.0
        DemoEntry("math.asin(0)", lambda: math.asin(0)),  # 0.0
        DemoEntry("math.atan(1)", lambda: math.atan(1)),  # 0.785...
        DemoEntry("math.atan2(1, 1)", lambda: math.atan2(1, 1)),  # 0.785...
        DemoEntry("math.ceil(2.3)", lambda: math.ceil(2.3)),  # 3
        DemoEntry("math.cos(math.pi)", lambda: math.cos(math.pi)),  # -1.0
        DemoEntry("math.degrees(math.pi)", lambda: math.degrees(math.pi)),  # 180.0
        DemoEntry("math.exp(1)", lambda: math.exp(1)),  # 2.718...
        DemoEntry("math.floor(2.7)", lambda: math.floor(2.7)),  # 2
        DemoEntry("math.fmod(7, 3)", lambda: math.fmod(7, 3)),  # 1.0
        DemoEntry("math.inf", lambda: math.inf),
        DemoEntry("math.log(8)", lambda: math.log(8)),
        DemoEntry("math.log(8, 2)", lambda: math.log(8, 2)),  # 3.0
        DemoEntry("max(1, 5, 3)", lambda: max(1, 5, 3)),
        DemoEntry("MAX_INTEGER", lambda: MAX_INTEGER),
        DemoEntry("min(1, 5, 3)", lambda: min(1, 5, 3)),
        DemoEntry("MIN_INTEGER", lambda: MIN_INTEGER),
        # math.modf returns (fractional, integral)
        DemoEntry("math.modf(2.75)", lambda: math.modf(2.75)),  # 0.75 2.0
        DemoEntry("math.pi", lambda: math.pi),
        DemoEntry("math.radians(180)", lambda: math.radians(180)),
        DemoEntry("random.random()", random.random, deterministic=False),
        DemoEntry("random.randint(1, 10)", lambda: random.randint(1, 10), deterministic=False),
        DemoEntry("time.time()", time.time, deterministic=False),
        DemoEntry("math.sin(math.radians(30))", lambda: math.sin(math.radians(30))),  # ~0.5
        DemoEntry("math.sqrt(16)", lambda: math.sqrt(16)),  # 4.0
        DemoEntry("math.tan(math.radians(45))", lambda: math.tan(math.radians(45))),  # ~1
        DemoEntry("to_integer(3.7)", lambda: to_integer(3.7)),  # None
        DemoEntry("to_integer(3.0)", lambda: to_integer(3.0)),  # 3
        DemoEntry("number_type(3)", lambda: number_type(3)),
        DemoEntry("number_type(3.5)", lambda: number_type(3.5)),
        DemoEntry("unsigned_less_than(1, 2)", lambda: unsigned_less_than(1, 2)),
        DemoEntry("unsigned_less_than(-1, 2)", lambda: unsigned_less_than(-1, 2)),  # False
    ]


catalog = Catalog(
    name="math",
    title="Numeric and math functions",
    build=build_entries,
    order=20,
)
