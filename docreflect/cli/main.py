"""docreflect CLI - Main entrypoint."""

from dataclasses import replace
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from docreflect import __version__
from docreflect.cli.commands import docs_cmd, inspect_cmd
from docreflect.core.config import load_config
from docreflect.core.exceptions import ConfigurationError
from docreflect.core.logging import configure_logging

app = typer.Typer(
    name="docreflect",
    help="Extract signatures and structured documentation through introspection.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=False,
)

console = Console(stderr=True)

app.add_typer(inspect_cmd.app, name="inspect", help="Inspect a single function or method")
app.add_typer(docs_cmd.app, name="docs", help="Generate HTML documentation for classes")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold blue]docreflect[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def callback(
    ctx: typer.Context,
    *,
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Suppress non-error output"),
    verbose: bool = typer.Option(False, "-V", "--verbose", help="Enable verbose logging"),
    json_out: bool = typer.Option(False, "--json", help="Output machine-readable JSON"),
    yaml_out: bool = typer.Option(False, "--yaml", help="Output machine-readable YAML"),
    config_path: Path | None = typer.Option(
        None, "--config", help="Path to docreflect.toml or pyproject.toml"
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Log level: debug|info|warning|error"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """docreflect - documentation and call signatures through runtime introspection.

    Global flags are parsed here and stored on `ctx.obj` for subcommands.
    """
    if ctx.obj is None:
        ctx.obj = {}

    try:
        config = load_config(config_path)
    except (FileNotFoundError, ConfigurationError) as e:
        console.print(f"[red]✗[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1) from e

    # Command line flags win over the configured level
    level = config.logging.level
    if log_level:
        level = log_level.upper()
    if verbose:
        level = "DEBUG"
    elif quiet:
        level = "ERROR"
    if level != config.logging.level:
        try:
            config = replace(config, logging=replace(config.logging, level=level))
        except ConfigurationError as e:
            console.print(f"[red]✗[/red] {escape(str(e))}", highlight=False)
            raise typer.Exit(1) from e

    configure_logging(
        level=config.logging.level,
        format=config.logging.format,
        output_file=config.logging.output_file,
        use_color=config.logging.use_color,
        include_timestamp=config.logging.include_timestamp,
    )

    output_format = "pretty"
    if json_out:
        output_format = "json"
    elif yaml_out:
        output_format = "yaml"

    ctx.obj.update({
        "config": config,
        "output_format": output_format,
        "quiet": quiet,
        "verbose": verbose,
    })


def main() -> None:
    """Main CLI entrypoint."""
    app()


if __name__ == "__main__":
    main()
