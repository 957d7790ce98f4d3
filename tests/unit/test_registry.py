from __future__ import annotations

import builtins

import pytest

from apitour.core.registry import BUILTINS, Catalog, discover_catalogs, resolve_catalogs
from apitour.core.result import CatalogError
from apitour.core.runner import DemoEntry
from apitour.main import CATALOGS_PATH


def test_builtins_namespace_is_read_only() -> None:
    assert BUILTINS["print"] is builtins.print
    with pytest.raises(TypeError):
        BUILTINS["print"] = None  # type: ignore[index]


def test_discovers_every_catalog_in_order() -> None:
    catalogs = discover_catalogs(CATALOGS_PATH)
    assert list(catalogs) == ["basic", "math", "string", "utf8", "coroutine"]


def test_catalog_entries_are_fresh_each_time() -> None:
    catalog = Catalog(name="x", title="X", build=lambda: [DemoEntry("a", lambda: 1)])
    assert catalog.entries() is not catalog.entries()


def test_resolve_preserves_requested_order() -> None:
    catalogs = discover_catalogs(CATALOGS_PATH)
    resolved = resolve_catalogs(catalogs, ["utf8", "basic"])
    assert [catalog.name for catalog in resolved] == ["utf8", "basic"]


def test_resolve_unknown_name() -> None:
    with pytest.raises(CatalogError, match="Unknown catalog: nope"):
        resolve_catalogs(discover_catalogs(CATALOGS_PATH), ["nope"])
