"""CLI helper utilities for docreflect commands."""

from __future__ import annotations

import json
from typing import Any, NoReturn

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from docreflect.core.config import DocReflectConfig, get_default_config
from docreflect.core.docs import DocExtractor, MemberHandle
from docreflect.core.exceptions import DocReflectError
from docreflect.core.resolver import resolve_target

console = Console(stderr=True)


def get_config(ctx: typer.Context) -> DocReflectConfig:
    """Return the configuration loaded by the root callback."""
    obj = ctx.find_root().obj
    if isinstance(obj, dict) and isinstance(obj.get("config"), DocReflectConfig):
        return obj["config"]
    return get_default_config()


def print_output(payload: dict[str, Any], text: str, ctx: typer.Context) -> None:
    """Print ``payload`` as JSON/YAML when requested, ``text`` otherwise.

    Plain text goes through ``typer.echo`` so that markup in signatures is
    never interpreted as rich styling.
    """
    obj = ctx.find_root().obj
    fmt = obj.get("output_format") if isinstance(obj, dict) else None

    if fmt == "json":
        typer.echo(json.dumps(payload, default=str, indent=2))
    elif fmt == "yaml":
        typer.echo(yaml.safe_dump(payload, sort_keys=False))
    else:
        typer.echo(text)


def describe_target(target: str) -> MemberHandle:
    """Resolve ``module.function`` or ``module.Class.member`` to a descriptor.

    Resolution failures are reported on stderr and end the command with exit
    code 1.
    """
    try:
        owner, member = resolve_target(target)
        if owner is None:
            return DocExtractor.describe_function(member)
        return DocExtractor.describe_method(owner, member)
    except DocReflectError as e:
        fail(str(e))


def fail(message: str) -> NoReturn:
    """Report an error and exit with status 1."""
    console.print(f"[red]✗[/red] {escape(message)}", highlight=False)
    raise typer.Exit(1)
