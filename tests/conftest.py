"""Configuration file for pytest containing fixtures and configuration.

This module provides fixtures that can be used across multiple test files:
- isolated_config: clears cached configuration and DOCREFLECT_* variables
"""

import os

import pytest

from docreflect.core.config import clear_config_cache


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Run each test without cached configuration or environment overrides."""
    for name in list(os.environ):
        if name.startswith("DOCREFLECT_"):
            monkeypatch.delenv(name)
    clear_config_cache()
    yield
    clear_config_cache()
