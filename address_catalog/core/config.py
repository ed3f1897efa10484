"""Application configuration primitives."""

from __future__ import annotations

import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SECRETS_PATH = Path(".secrets/secrets.toml")
SECRETS_SECTION = "address_catalog"


class Settings(BaseSettings):
    """Central configuration for the address catalog."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "console"] = "json"
    strict_validation: bool = Field(
        default=True,
        description="Raise on catalog integrity issues instead of logging them.",
    )

    model_config = SettingsConfigDict(env_prefix="ADDRESS_CATALOG_", env_file=(), extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance."""
    overrides = _load_settings_overrides()
    return Settings(**overrides)


def _load_settings_overrides(secrets_path: Path = DEFAULT_SECRETS_PATH) -> dict[str, Any]:
    """Load configuration overrides from the secrets TOML file."""
    if not secrets_path.exists():
        return {}
    data = _read_toml(secrets_path)
    section = data.get(SECRETS_SECTION)
    if not isinstance(section, dict):
        return {}
    overrides = {key: value for key, value in section.items() if key in Settings.model_fields}
    return {key: value for key, value in overrides.items() if value is not None}


def _read_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)
