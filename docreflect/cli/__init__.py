"""docreflect command line interface."""

from docreflect.cli.main import app, main

__all__ = ["app", "main"]
