from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def isolate_config(tmp_path: Path, monkeypatch: Any) -> Path:
    """Point config to a temp path so tests don't read user state."""
    cfg_path = tmp_path / "config.toml"
    monkeypatch.setenv("APITOUR_CONFIG", str(cfg_path))
    for name in ("APITOUR_LOG_LEVEL", "APITOUR_CATALOGS", "APITOUR_DETERMINISTIC_ONLY"):
        monkeypatch.delenv(name, raising=False)
    return cfg_path
