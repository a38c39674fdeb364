"""Tests for centralized logging configuration using Loguru."""

from pathlib import Path

from loguru import logger

import docreflect.core.logging as logging_module
from docreflect.core.logging import configure_logging, get_logger


class TestGetLogger:
    """Test get_logger function."""

    def test_get_logger_returns_bound_logger(self):
        """Test that get_logger returns a bound logger instance."""
        assert get_logger("test.module") is not None

    def test_get_logger_caches_results(self):
        """Test that get_logger caches logger instances."""
        assert get_logger("test.cache") is get_logger("test.cache")


class TestConfigureLogging:
    """Test configure_logging function."""

    def setup_method(self):
        """Reset logging configuration before each test."""
        configure_logging(level="WARNING", format="console", force_reconfigure=True)
        logging_module._CURRENT_CONFIG = None

    def teardown_method(self):
        """Return to a quiet configuration."""
        configure_logging(level="WARNING", format="structured", force_reconfigure=True)

    def test_configures_each_format(self):
        """Test that every format installs a handler."""
        for format_name in ("json", "structured", "console", "rich"):
            configure_logging(level="INFO", format=format_name, force_reconfigure=True)
            assert len(logging_module._HANDLER_IDS) == 1

    def test_configures_file_output(self, tmp_path: Path):
        """Test file output configuration."""
        log_file = tmp_path / "logs" / "docreflect.log"
        configure_logging(level="INFO", format="json", output_file=log_file)

        assert len(logging_module._HANDLER_IDS) == 2
        get_logger("test").info("Test message")
        assert log_file.exists()

    def test_idempotent_reconfiguration(self):
        """Test that configure_logging is idempotent with same config."""
        configure_logging(level="DEBUG", format="console")
        handler_ids = list(logging_module._HANDLER_IDS)

        configure_logging(level="DEBUG", format="console")
        assert logging_module._HANDLER_IDS == handler_ids

    def test_external_handlers_survive(self):
        """Test that reconfiguring logging doesn't remove external handlers."""
        messages = []
        external_handler_id = logger.add(messages.append, format="{message}")

        try:
            configure_logging(level="INFO", format="console")
            configure_logging(level="DEBUG", format="json", force_reconfigure=True)
            get_logger("test").info("Test message")
            assert any("Test message" in str(message) for message in messages)
        finally:
            logger.remove(external_handler_id)
