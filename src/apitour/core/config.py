"""Application configuration management.

Handles loading and validating configuration from multiple sources:
    - TOML/JSON config files
    - Environment variables (APITOUR_* prefix)
    - Default values

Key components:
    - TourConfig: Main configuration model
    - load_config(): Safe config loading with fallback
    - ConfigLoadResult: Metadata about config source
"""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Collection, Mapping
from contextlib import nullcontext
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any
from unittest.mock import patch

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from apitour.core.result import ConfigurationError

CONFIG_ENV_VAR = "APITOUR_CONFIG"
DEFAULT_CATALOGS = ["basic", "math", "string", "utf8", "coroutine"]


@dataclass
class ConfigLoadResult:
    path: Path
    file_loaded: bool
    env_overrides: set[str]
    error: str | None = None


class TourConfig(BaseSettings):
    """Settings for a demonstration run."""

    model_config = SettingsConfigDict(
        env_prefix="APITOUR_",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Log level for diagnostics on stderr.")
    catalogs: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CATALOGS),
        description="Catalogs run by a bare `tour` invocation, in order.",
    )
    deterministic_only: bool = Field(
        default=False,
        description="Skip entries that read the clock or an unseeded random source.",
    )

    @field_validator("log_level", mode="after")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("catalogs", mode="after")
    @classmethod
    def require_catalogs(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("At least one catalog must be configured")
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
    ]:
        # Environment variables override config file entries.
        return (env_settings, init_settings, dotenv_settings, file_secret_settings)


def _resolve_config_path(config_path: Path | None, env_vars: Mapping[str, str]) -> Path:
    candidate = config_path or env_vars.get(CONFIG_ENV_VAR) or (Path.home() / ".apitour.toml")
    return Path(candidate).expanduser()


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}

    raw = path.read_text(encoding="utf-8")
    parser = json.loads if path.suffix.lower() == ".json" else tomllib.loads

    try:
        data = parser(raw)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationError(f"Syntax error in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config root in {path} must be a mapping.")

    return data


def _detect_env_overrides(env_vars: Mapping[str, str]) -> set[str]:
    prefix = TourConfig.model_config.get("env_prefix", "")
    return {
        name
        for name in TourConfig.model_fields
        if f"{prefix}{name}".upper() in env_vars
    }


def load_config(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> tuple[TourConfig, ConfigLoadResult]:
    """
    Load configuration with Safe Mode fallback.
    If the file is invalid, returns default config + error message.
    """
    env_vars: Mapping[str, str] = os.environ if env is None else {**os.environ, **env}
    resolved_path = _resolve_config_path(config_path, env_vars)
    env_overrides = _detect_env_overrides(env_vars)

    error: str | None = None
    file_loaded = False
    file_data: dict[str, Any] = {}

    try:
        file_data = _read_config_file(resolved_path)
        file_loaded = resolved_path.exists()
    except ConfigurationError as exc:
        error = str(exc)

    context_manager = (
        patch.dict(os.environ, env_vars, clear=False) if env is not None else nullcontext()
    )

    try:
        with context_manager:
            config = TourConfig(**file_data)
    except ValidationError as exc:
        error = str(exc)
        # Defaults only: the invalid value may come from the environment.
        config = TourConfig.model_construct()

    return config, ConfigLoadResult(
        path=resolved_path,
        file_loaded=file_loaded,
        env_overrides=env_overrides,
        error=error,
    )


def reconcile_catalogs(
    config: TourConfig,
    meta: ConfigLoadResult,
    available: Collection[str],
) -> tuple[TourConfig, ConfigLoadResult]:
    """Fall back to the default catalogs when the configured list names unknown ones."""
    unknown = [name for name in config.catalogs if name not in available]
    if not unknown:
        return config, meta

    message = f"Unknown catalogs in configuration: {', '.join(unknown)}"
    defaults = [name for name in DEFAULT_CATALOGS if name in available]
    return (
        config.model_copy(update={"catalogs": defaults}),
        replace(meta, error=f"{meta.error}; {message}" if meta.error else message),
    )


__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CATALOGS",
    "ConfigLoadResult",
    "TourConfig",
    "load_config",
    "reconcile_catalogs",
]
