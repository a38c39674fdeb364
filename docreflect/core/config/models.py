"""Configuration data models for docreflect."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, get_args

from docreflect.core.exceptions import ConfigurationError

LevelName = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
FormatName = Literal["console", "json", "structured", "rich"]


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging configuration for docreflect.

    Attributes
    ----------
    level : str, default="WARNING"
        Log level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
    format : str, default="structured"
        Output format (console, json, structured, rich)
    output_file : str | None, default=None
        Optional file path to write JSON logs to
    use_color : bool, default=True
        Use ANSI color codes (auto-disabled for non-TTY)
    include_timestamp : bool, default=True
        Include timestamp in log output

    Examples
    --------
    TOML configuration:

    ```toml
    [tool.docreflect.logging]
    level = "DEBUG"
    format = "rich"
    ```

    Environment variable overrides:

    ```bash
    export DOCREFLECT_LOG_LEVEL=DEBUG
    export DOCREFLECT_LOG_FORMAT=json
    ```
    """

    level: LevelName = "WARNING"
    format: FormatName = "structured"
    output_file: str | None = None
    use_color: bool = True
    include_timestamp: bool = True

    def __post_init__(self) -> None:
        """Validate level and format names.

        Raises
        ------
        ConfigurationError
            If the level or format is not recognized
        """
        if self.level not in get_args(LevelName):
            raise ConfigurationError("logging", f"unknown level {self.level!r}")
        if self.format not in get_args(FormatName):
            raise ConfigurationError("logging", f"unknown format {self.format!r}")


@dataclass(frozen=True, slots=True)
class RenderingConfig:
    """Options for the HTML documentation generator.

    Attributes
    ----------
    with_hr : bool, default=False
        Append a horizontal rule after each rendered block
    include_exceptions : bool, default=False
        List each member's exception fragment in class documentation
    """

    with_hr: bool = False
    include_exceptions: bool = False


@dataclass(slots=True)
class DocReflectConfig:
    """Complete docreflect configuration.

    Attributes
    ----------
    modules : list[str]
        Dotted class paths documented when no target is given on the CLI
    logging : LoggingConfig
        Logging configuration
    rendering : RenderingConfig
        HTML rendering options
    settings : dict[str, Any]
        Additional custom settings

    Examples
    --------
    TOML configuration in pyproject.toml:

    ```toml
    [tool.docreflect]
    modules = ["myapp.services.UserService"]

    [tool.docreflect.rendering]
    with_hr = true
    ```
    """

    modules: list[str] = field(default_factory=list)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    rendering: RenderingConfig = field(default_factory=RenderingConfig)
    settings: dict[str, Any] = field(default_factory=dict)
