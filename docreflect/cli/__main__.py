#!/usr/bin/env python3
"""Entry point for docreflect CLI when run as python -m docreflect.cli."""

if __name__ == "__main__":
    from docreflect.cli.main import main

    main()
