"""CLI commands for generating class documentation pages."""

from collections.abc import Callable
from pathlib import Path

import typer

from docreflect.cli.utils import console, fail, get_config, print_output
from docreflect.core.docs import ReflectionDocGenerator
from docreflect.core.resolver import ResolveError, resolve_class

app = typer.Typer(help="Generate HTML documentation for classes")


def _targets(ctx: typer.Context, target: str | None) -> list[str]:
    if target:
        return [target]
    modules = get_config(ctx).modules
    if not modules:
        fail("No target given and no modules configured under [tool.docreflect]")
    return modules


def _render(
    ctx: typer.Context,
    targets: list[str],
    render: Callable[[type], str],
    output: Path | None,
) -> None:
    pages = {}
    for path in targets:
        try:
            cls = resolve_class(path)
        except ResolveError as e:
            fail(str(e))
        pages[path] = render(cls)

    html = "\n".join(pages.values())
    if output is None:
        print_output(pages, html, ctx)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html + "\n", encoding="utf-8")
    console.print(f"[green]✓[/green] Wrote {len(pages)} page(s) to {output}")


@app.command("class")
def class_docs(
    ctx: typer.Context,
    target: str | None = typer.Argument(
        None, help="Dotted class path; defaults to the configured modules"
    ),
    hr: bool | None = typer.Option(
        None, "--hr/--no-hr", help="Append a horizontal rule after each class"
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write HTML to this file"),
) -> None:
    """Generate the documentation page of a class.

    The page contains the class description followed by the signature,
    description and example of every public member.

    Examples:
        docreflect docs class myapp.services.UserService
        docreflect docs class --hr -o docs/api.html
    """
    generator = ReflectionDocGenerator(get_config(ctx).rendering)
    _render(
        ctx,
        _targets(ctx, target),
        lambda cls: generator.class_documentation(cls, with_hr=hr),
        output,
    )


@app.command("signatures")
def signatures(
    ctx: typer.Context,
    target: str | None = typer.Argument(
        None, help="Dotted class path; defaults to the configured modules"
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write HTML to this file"),
) -> None:
    """List the signatures of the public members of a class."""
    generator = ReflectionDocGenerator(get_config(ctx).rendering)
    _render(ctx, _targets(ctx, target), generator.method_signatures, output)
