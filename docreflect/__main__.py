"""Entry point for running docreflect as a module: python -m docreflect."""

from __future__ import annotations


def main() -> None:
    """Main entry point for module execution."""
    from docreflect.cli.main import main as cli_main

    cli_main()


if __name__ == "__main__":
    main()
