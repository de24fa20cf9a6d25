"""Configuration management for service_bindings.

Loads settings from a YAML configuration file with environment variable
overrides. The binding root itself comes from the standard, un-prefixed
``SERVICE_BINDING_ROOT`` variable that the platform sets.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/service-bindings.yaml")


class CacheConfig(BaseModel):
    enabled: bool = Field(default=True, description="Wrap discovered bindings in a CacheBinding")
    synchronized: bool = Field(default=True, description="Guard each cache with a lock")


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class BindingSettings(BaseSettings):
    """Root configuration for service binding discovery.

    Loads from YAML file and supports environment variable overrides.
    Reads .env files automatically.
    """

    model_config = {
        "env_prefix": "SERVICE_BINDINGS_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

    service_binding_root: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("service_binding_root", "SERVICE_BINDING_ROOT"),
        description="Directory holding one subdirectory per binding",
    )

    # Configuration sections
    cache: CacheConfig = Field(default_factory=CacheConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("service_binding_root", mode="before")
    @classmethod
    def _empty_root_is_unset(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


def load_settings(config_path: Path | str | None = None) -> BindingSettings:
    """Load settings from YAML + .env + environment variables.

    Priority: env vars > .env file > YAML file > defaults
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    yaml_data = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.warning("Config file %s not found, using defaults + env vars", path)

    # Init kwargs outrank the environment in pydantic-settings, so YAML
    # values only fill what the environment leaves unset.
    env_settings = BindingSettings()
    return BindingSettings(**_merge(yaml_data, env_settings.model_dump(exclude_unset=True, exclude_none=True)))


def _merge(base: dict, overrides: dict) -> dict:
    """Recursively merge ``overrides`` into a copy of ``base``."""
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged
