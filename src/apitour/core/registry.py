from __future__ import annotations

import builtins
import importlib
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Callable

from apitour.core.result import CatalogError
from apitour.core.runner import DemoEntry

logger = logging.getLogger(__name__)

BUILTINS: Mapping[str, object] = MappingProxyType(vars(builtins))
"""Read-only view of the interpreter's built-in namespace."""


@dataclass(frozen=True)
class Catalog:
    name: str
    title: str
    build: Callable[[], list[DemoEntry]]
    order: int = 100

    def entries(self) -> list[DemoEntry]:
        """Build a fresh entry list so no state is shared between runs."""
        return list(self.build())


def _import_module(module_name: str) -> object | None:
    try:
        return importlib.import_module(module_name)
    except ImportError as exc:
        logger.error("Failed to import catalog module %s: %s", module_name, exc)
        return None


def discover_catalogs(package_path: Path, package: str = "apitour.catalogs") -> dict[str, Catalog]:
    """
    Discover catalog modules that expose a module-level ``catalog``.

    Returns:
        Catalogs keyed by name, in display order.
    """
    found: list[Catalog] = []

    for file in package_path.glob("*.py"):
        if file.name.startswith("_"):
            continue
        module = _import_module(f"{package}.{file.stem}")
        if module is None:
            continue

        catalog = getattr(module, "catalog", None)
        if isinstance(catalog, Catalog):
            found.append(catalog)
        else:
            logger.debug("Module %s has no catalog, skipping", file.stem)

    found.sort(key=lambda item: (item.order, item.name))
    return {item.name: item for item in found}


def resolve_catalogs(available: Mapping[str, Catalog], names: list[str]) -> list[Catalog]:
    """Look up catalogs by name, preserving the requested order."""
    unknown = [name for name in names if name not in available]
    if unknown:
        raise CatalogError(
            f"Unknown catalog: {', '.join(unknown)}",
            context={"available": ", ".join(available)},
        )
    return [available[name] for name in names]


__all__ = ["BUILTINS", "Catalog", "discover_catalogs", "resolve_catalogs"]
