"""Configuration via environment variables, config.json, and .env files."""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pva.core.constants import (
    CONFIG_FILE_PATH,
    DEFAULT_FORMAT,
    DEFAULT_LIMIT,
    DEFAULT_SORT_BY,
)

CONFIG_KEYS = ("db_path", "limit", "format", "sort_by", "debug")


def _load_config_file() -> dict:
    """Read ~/.config/pva/config.json if it exists, return as dict."""
    if not CONFIG_FILE_PATH.exists():
        return {}
    try:
        data = json.loads(CONFIG_FILE_PATH.read_text())
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict) -> Path:
    """Write config dict to ~/.config/pva/config.json. Returns the path."""
    CONFIG_FILE_PATH.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE_PATH.write_text(json.dumps(data, indent=2) + "\n")
    return CONFIG_FILE_PATH


class PVAConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PVA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Photos library catalog (Photos.sqlite)
    db_path: Path | None = Field(default=None)

    # Report defaults
    limit: int = Field(default=DEFAULT_LIMIT, ge=0)
    format: str = Field(default=DEFAULT_FORMAT)
    sort_by: str = Field(default=DEFAULT_SORT_BY)

    # Echo generated SQL to stderr
    debug: bool = Field(default=False)


def get_config(db_path: Path | None = None) -> PVAConfig:
    """Create config with priority: env vars > config.json > defaults."""
    file_data = _load_config_file()

    # pydantic treats __init__ kwargs as highest priority, so only pass
    # config.json values that no env var overrides
    init_kwargs: dict = {}
    for key in CONFIG_KEYS:
        env_name = f"PVA_{key.upper()}"
        if key in file_data and env_name not in os.environ:
            init_kwargs[key] = file_data[key]

    config = PVAConfig(**init_kwargs)

    if db_path is not None:
        config.db_path = db_path
    return config
