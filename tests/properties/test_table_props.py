"""Property-based tests for Table and Varargs using Hypothesis.

These tests verify core invariants:
- raw_get after raw_set of the same key returns the written value
- get on a missing key returns the configured fallback
- ipairs enumerates a built array as 1-based (index, value) pairs
- select(n) is the tail of the argument list from position n
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from apitour.core.table import Table
from apitour.core.varargs import Varargs

# === Strategies ===

keys = st.one_of(st.text(max_size=10), st.integers(min_value=-1000, max_value=1000))
values = st.one_of(st.integers(), st.text(max_size=20), st.booleans())
initial_items = st.dictionaries(keys, values, max_size=20)


# === Property Tests ===


@given(items=initial_items, key=keys, value=values)
@settings(max_examples=200)
def test_raw_read_sees_raw_write(items: dict, key: object, value: object) -> None:
    table = Table(items, resolver=lambda _t, _k: "default")
    table.raw_set(key, value)
    assert table.raw_get(key) == value
    assert table.get(key) == value


@given(items=initial_items, key=keys, default=values)
def test_missing_key_resolves_to_fallback(items: dict, key: object, default: object) -> None:
    items.pop(key, None)
    table = Table(items, default=default)
    assert table.raw_get(key) is None
    assert table.get(key) == default


@given(array=st.lists(values, max_size=30))
def test_ipairs_enumerates_from_one(array: list) -> None:
    table = Table(array=array)
    assert list(table.ipairs()) == list(enumerate(array, start=1))
    assert table.raw_len() == len(array)


@given(args=st.lists(values, min_size=1, max_size=10), data=st.data())
def test_select_is_tail(args: list, data: st.DataObject) -> None:
    position = data.draw(st.integers(min_value=1, max_value=len(args) + 2))
    assert Varargs(*args).select(position) == tuple(args[position - 1 :])
    assert Varargs(*args).select("#") == len(args)
