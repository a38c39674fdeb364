"""CLI commands for inspecting a single function or method."""

import typer

from docreflect.cli.utils import console, describe_target, print_output
from docreflect.core.docs import ReflectionDocGenerator, build_signature, extract_fragment

app = typer.Typer(help="Inspect signatures and comment fragments of a single member")


@app.command("signature")
def signature(
    ctx: typer.Context,
    target: str = typer.Argument(
        ..., help="Dotted path: module.function or module.Class.method"
    ),
) -> None:
    """Print the signature of a function or method.

    Private members have no public signature; a notice is printed instead.

    Examples:
        docreflect inspect signature json.dumps
        docreflect inspect signature myapp.services.UserService.read
    """
    handle = describe_target(target)
    text = build_signature(handle)

    if not text:
        console.print(f"[yellow]'{target}' is private; no signature shown[/yellow]")
    print_output({"target": target, "signature": text}, text, ctx)


@app.command("fragment")
def fragment(
    ctx: typer.Context,
    target: str = typer.Argument(
        ..., help="Dotted path: module.function or module.Class.method"
    ),
    name: str = typer.Argument(
        ..., help="Fragment name, e.g. description, example, return-type, exception"
    ),
) -> None:
    """Print one named fragment from a member's structured comment.

    Examples:
        docreflect inspect fragment myapp.services.UserService.read description
    """
    handle = describe_target(target)
    text = extract_fragment(handle.doc_comment, name)
    print_output({"target": target, "fragment": name, "content": text}, text, ctx)


@app.command("info")
def info(
    ctx: typer.Context,
    target: str = typer.Argument(
        ..., help="Dotted path: module.function or module.Class.method"
    ),
) -> None:
    """Print the signature followed by the raw comment block."""
    handle = describe_target(target)
    payload = {
        "target": target,
        "signature": build_signature(handle),
        "comment": handle.doc_comment or "",
    }
    print_output(payload, ReflectionDocGenerator.method_info(handle), ctx)
