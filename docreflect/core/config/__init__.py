"""Configuration loading and management for docreflect."""

from docreflect.core.config.loader import (
    ConfigLoader,
    clear_config_cache,
    get_default_config,
    load_config,
)
from docreflect.core.config.models import DocReflectConfig, LoggingConfig, RenderingConfig

__all__ = [
    "ConfigLoader",
    "DocReflectConfig",
    "LoggingConfig",
    "RenderingConfig",
    "clear_config_cache",
    "get_default_config",
    "load_config",
]
