"""TOML configuration loader for docreflect."""

from __future__ import annotations

import os
import re
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any, cast

from docreflect.core.config.models import (
    DocReflectConfig,
    FormatName,
    LevelName,
    LoggingConfig,
    RenderingConfig,
)
from docreflect.core.exceptions import ConfigurationError
from docreflect.core.logging import get_logger

# Constants for boolean environment variable parsing
_TRUTHY_VALUES = frozenset({"true", "1", "yes", "on", "enabled"})
_FALSY_VALUES = frozenset({"false", "0", "no", "off", "disabled"})

CONFIG_PATH_ENV = "DOCREFLECT_CONFIG_PATH"

logger = get_logger(__name__)


def _parse_bool_env(value: str) -> bool:
    """Parse boolean from environment variable value.

    Raises
    ------
    ValueError
        If value is not a recognized boolean string
    """
    normalized = value.lower().strip()
    if normalized in _TRUTHY_VALUES:
        return True
    if normalized in _FALSY_VALUES:
        return False
    expected = sorted(_TRUTHY_VALUES | _FALSY_VALUES)
    raise ValueError(f"Invalid boolean value: {value!r}. Expected one of: {expected}")


@lru_cache(maxsize=32)
def _load_and_parse_cached(path_str: str) -> DocReflectConfig:
    """Cached configuration loader."""
    loader = ConfigLoader()
    return loader._load_and_parse(Path(path_str))


class ConfigLoader:
    """Loads and processes docreflect configuration from TOML files."""

    ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

    SEARCH_PATHS = ("docreflect.toml", "pyproject.toml", ".docreflect.toml")

    def load_from_toml(self, path: str | Path | None = None) -> DocReflectConfig:
        """Load configuration from TOML file.

        Parameters
        ----------
        path : str | Path | None
            Path to TOML file. If None, searches the working directory

        Returns
        -------
        DocReflectConfig
            Parsed configuration with environment variables substituted
        """
        config_path = self._find_config_file(path)
        return _load_and_parse_cached(str(config_path.absolute()))

    def _load_and_parse(self, config_path: Path) -> DocReflectConfig:
        """Load and parse configuration file."""
        logger.info("Loading configuration from {path}", path=config_path)

        try:
            with config_path.open("rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(str(config_path), f"invalid TOML: {e}") from e

        if "tool" in data and "docreflect" in data.get("tool", {}):
            section = data["tool"]["docreflect"]
        elif config_path.name == "pyproject.toml":
            logger.warning("No [tool.docreflect] section found in pyproject.toml, using defaults")
            return get_default_config()
        else:
            # Flat format (top-level keys)
            section = data

        section = self._substitute_env_vars(section)
        return self._parse_config(section)

    def _find_config_file(self, path: str | Path | None) -> Path:
        """Find configuration file.

        Raises
        ------
        FileNotFoundError
            If no configuration file is found
        """
        if path:
            config_path = Path(path)
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return config_path

        if env_path := os.getenv(CONFIG_PATH_ENV):
            config_path = Path(env_path)
            if config_path.exists():
                logger.debug(f"Using config from {CONFIG_PATH_ENV}: {config_path}")
                return config_path
            logger.warning(f"{CONFIG_PATH_ENV} set but file not found: {config_path}")

        for name in self.SEARCH_PATHS:
            candidate = Path(name)
            if not candidate.exists():
                continue
            if name == "pyproject.toml" and not self._has_tool_section(candidate):
                continue
            return candidate

        raise FileNotFoundError(
            "No configuration file found. Searched for: " + ", ".join(self.SEARCH_PATHS)
        )

    @staticmethod
    def _has_tool_section(pyproject: Path) -> bool:
        try:
            with pyproject.open("rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError:
            return False
        return "docreflect" in data.get("tool", {})

    def _substitute_env_vars(self, data: Any) -> Any:
        """Recursively replace ``${VAR}`` placeholders with environment values.

        Unknown variables keep their placeholder.
        """
        if isinstance(data, str):

            def replacer(match: re.Match[str]) -> str:
                var_name = match.group(1)
                value = os.environ.get(var_name)
                if value is None:
                    logger.debug(
                        f"Environment variable ${{{var_name}}} not found, keeping placeholder"
                    )
                    return match.group(0)
                return value

            return self.ENV_VAR_PATTERN.sub(replacer, data)

        if isinstance(data, dict):
            return {key: self._substitute_env_vars(value) for key, value in data.items()}

        if isinstance(data, list):
            return [self._substitute_env_vars(item) for item in data]

        return data

    def _parse_config(self, data: dict[str, Any]) -> DocReflectConfig:
        """Parse configuration data into DocReflectConfig.

        Raises
        ------
        ConfigurationError
            If a section has the wrong shape
        """
        config = DocReflectConfig()

        if "modules" in data:
            modules = data["modules"]
            if not isinstance(modules, list) or not all(isinstance(m, str) for m in modules):
                raise ConfigurationError("modules", "must be a list of dotted paths")
            config.modules = modules
            logger.debug("Loaded {count} modules", count=len(config.modules))

        config.logging = self._parse_logging_config(self._section(data, "logging"))
        config.rendering = self._parse_rendering_config(self._section(data, "rendering"))

        if "settings" in data:
            config.settings = self._section(data, "settings")
            logger.debug("Loaded {count} settings", count=len(config.settings))

        return config

    @staticmethod
    def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
        section = data.get(name, {})
        if not isinstance(section, dict):
            raise ConfigurationError(name, "must be a table")
        return section

    def _parse_logging_config(self, logging_data: dict[str, Any]) -> LoggingConfig:
        """Parse logging configuration with environment variable overrides.

        Environment variables take precedence over TOML configuration:
        - DOCREFLECT_LOG_LEVEL: Log level
        - DOCREFLECT_LOG_FORMAT: Output format (console, json, structured, rich)
        - DOCREFLECT_LOG_FILE: Optional file path for log output
        - DOCREFLECT_LOG_COLOR: Use color output (true/false)
        - DOCREFLECT_LOG_TIMESTAMP: Include timestamp (true/false)
        """
        level = str(logging_data.get("level", "WARNING")).upper()
        format_type = str(logging_data.get("format", "structured")).lower()
        output_file = logging_data.get("output_file")
        use_color = logging_data.get("use_color", True)
        include_timestamp = logging_data.get("include_timestamp", True)

        if env_level := os.getenv("DOCREFLECT_LOG_LEVEL"):
            level = env_level.upper()
            logger.debug(f"Overriding log level from env: {level}")

        if env_format := os.getenv("DOCREFLECT_LOG_FORMAT"):
            format_type = env_format.lower()
            logger.debug(f"Overriding log format from env: {format_type}")

        if env_file := os.getenv("DOCREFLECT_LOG_FILE"):
            output_file = env_file
            logger.debug(f"Overriding log file from env: {output_file}")

        if env_color := os.getenv("DOCREFLECT_LOG_COLOR"):
            try:
                use_color = _parse_bool_env(env_color)
            except ValueError as e:
                logger.warning(f"Invalid DOCREFLECT_LOG_COLOR value: {e}")

        if env_timestamp := os.getenv("DOCREFLECT_LOG_TIMESTAMP"):
            try:
                include_timestamp = _parse_bool_env(env_timestamp)
            except ValueError as e:
                logger.warning(f"Invalid DOCREFLECT_LOG_TIMESTAMP value: {e}")

        # Level and format names are checked by LoggingConfig itself
        return LoggingConfig(
            level=cast("LevelName", level),
            format=cast("FormatName", format_type),
            output_file=output_file,
            use_color=bool(use_color),
            include_timestamp=bool(include_timestamp),
        )

    def _parse_rendering_config(self, rendering_data: dict[str, Any]) -> RenderingConfig:
        return RenderingConfig(
            with_hr=bool(rendering_data.get("with_hr", False)),
            include_exceptions=bool(rendering_data.get("include_exceptions", False)),
        )


def load_config(path: str | Path | None = None) -> DocReflectConfig:
    """Load configuration from TOML file or return defaults.

    Parameters
    ----------
    path : str | Path | None
        Path to configuration file or None to search

    Returns
    -------
    DocReflectConfig
        Loaded configuration or defaults if no file found
    """
    try:
        return ConfigLoader().load_from_toml(path)
    except FileNotFoundError:
        if path:
            raise
        logger.info("No configuration file found, using defaults")
        return get_default_config()


def clear_config_cache() -> None:
    """Clear the configuration cache.

    Useful for testing or when configuration files have been modified.
    """
    _load_and_parse_cached.cache_clear()


def get_default_config() -> DocReflectConfig:
    """Get default configuration."""
    return DocReflectConfig()
