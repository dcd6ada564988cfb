from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Dict

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .fragments import ROOT_QUERY_NAME

CONFIG_TABLE = "gqlcompose"


class ComposerSettings(BaseSettings):
    """Tunables for fragment composition, overridable via ``GQLCOMPOSE_*`` env vars."""

    # Upper bound on productive inline passes; <= 0 disables the bound.
    max_inline_passes: int = 100
    separator: str = "\n"
    root_name: str = ROOT_QUERY_NAME

    model_config = SettingsConfigDict(env_prefix="GQLCOMPOSE_", extra="ignore")

    @field_validator("root_name")
    @classmethod
    def validate_root_name(cls, value: str) -> str:
        if not value:
            raise ValueError("root_name must not be empty")
        return value


def _deep_update(target: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _deep_update(target[key], value)
        else:
            target[key] = value
    return target


def _load_toml(path: Path | None) -> Dict[str, Any]:
    if path is None:
        return {}
    with path.open("rb") as f:
        data = tomllib.load(f)
    table = data.get(CONFIG_TABLE)
    if isinstance(table, dict):
        return table
    return data


def load_settings(
    *,
    config_path: Path | None = None,
    overrides: Dict[str, Any] | None = None,
) -> ComposerSettings:
    """Merge settings from a TOML file, the environment and explicit overrides.

    Later sources win: TOML < environment < ``overrides``.
    """

    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Config file not found at {config_path}")

    merged: Dict[str, Any] = {}
    _deep_update(merged, _load_toml(config_path))
    _deep_update(merged, ComposerSettings().model_dump(exclude_unset=True))
    if overrides:
        _deep_update(merged, overrides)

    return ComposerSettings(**merged)


__all__ = ["ComposerSettings", "load_settings"]
