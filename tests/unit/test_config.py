"""Tests for configuration loading and Safe Mode fallback."""

from __future__ import annotations

import json
from pathlib import Path

from apitour.core.config import DEFAULT_CATALOGS, load_config, reconcile_catalogs


def test_defaults_when_file_missing(tmp_path: Path) -> None:
    config, meta = load_config(config_path=tmp_path / "missing.toml")
    assert config.catalogs == DEFAULT_CATALOGS
    assert config.log_level == "INFO"
    assert config.deterministic_only is False
    assert meta.file_loaded is False
    assert meta.error is None


def test_reads_toml(tmp_path: Path) -> None:
    path = tmp_path / "tour.toml"
    path.write_text('log_level = "debug"\ncatalogs = ["math", "basic"]\n', encoding="utf-8")
    config, meta = load_config(config_path=path)
    assert config.log_level == "DEBUG"
    assert config.catalogs == ["math", "basic"]
    assert meta.file_loaded is True


def test_reads_json(tmp_path: Path) -> None:
    path = tmp_path / "tour.json"
    path.write_text(json.dumps({"deterministic_only": True}), encoding="utf-8")
    config, _ = load_config(config_path=path)
    assert config.deterministic_only is True


def test_env_overrides_file(tmp_path: Path) -> None:
    path = tmp_path / "tour.toml"
    path.write_text('log_level = "WARNING"\n', encoding="utf-8")
    config, meta = load_config(config_path=path, env={"APITOUR_LOG_LEVEL": "ERROR"})
    assert config.log_level == "ERROR"
    assert meta.env_overrides == {"log_level"}


def test_syntax_error_enters_safe_mode(tmp_path: Path) -> None:
    path = tmp_path / "tour.toml"
    path.write_text("catalogs = [", encoding="utf-8")
    config, meta = load_config(config_path=path)
    assert meta.error is not None
    assert "Syntax error" in meta.error
    assert config.catalogs == DEFAULT_CATALOGS


def test_invalid_value_enters_safe_mode(tmp_path: Path) -> None:
    path = tmp_path / "tour.toml"
    path.write_text('log_level = "LOUD"\n', encoding="utf-8")
    config, meta = load_config(config_path=path)
    assert meta.error is not None
    assert config.log_level == "INFO"


def test_invalid_env_value_enters_safe_mode(tmp_path: Path) -> None:
    config, meta = load_config(
        config_path=tmp_path / "missing.toml", env={"APITOUR_LOG_LEVEL": "LOUD"}
    )
    assert meta.error is not None
    assert config.log_level == "INFO"


def test_config_path_from_env(isolate_config: Path) -> None:
    isolate_config.write_text('catalogs = ["utf8"]\n', encoding="utf-8")
    config, meta = load_config()
    assert meta.path == isolate_config
    assert config.catalogs == ["utf8"]


def test_unknown_catalogs_enter_safe_mode(tmp_path: Path) -> None:
    path = tmp_path / "tour.toml"
    path.write_text('catalogs = ["math", "nope"]\n', encoding="utf-8")
    config, meta = load_config(config_path=path)
    config, meta = reconcile_catalogs(config, meta, DEFAULT_CATALOGS)
    assert config.catalogs == DEFAULT_CATALOGS
    assert meta.error == "Unknown catalogs in configuration: nope"


def test_known_catalogs_are_kept(tmp_path: Path) -> None:
    config, meta = load_config(config_path=tmp_path / "missing.toml")
    config = config.model_copy(update={"catalogs": ["utf8"]})
    reconciled, reconciled_meta = reconcile_catalogs(config, meta, DEFAULT_CATALOGS)
    assert reconciled.catalogs == ["utf8"]
    assert reconciled_meta.error is None
