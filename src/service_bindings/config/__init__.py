"""Configuration management for service_bindings.

Loads and validates YAML-based configuration with Pydantic models.
Supports environment variable overrides, including the standard
``SERVICE_BINDING_ROOT`` variable.
"""

from service_bindings.config.settings import (
    BindingSettings,
    CacheConfig,
    LoggingConfig,
    load_settings,
)

__all__ = ["BindingSettings", "CacheConfig", "LoggingConfig", "load_settings"]
