"""Tests for logging setup."""
import logging
from logging.handlers import RotatingFileHandler

import pytest

from onionarch.config.schemas import LoggingConfig
from onionarch.infrastructure.logging.logger import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Test cases for setup_logging."""

    def test_console_logging(self):
        """Test stdout destination installs a stream handler."""
        setup_logging(LoggingConfig(level="debug"))
        root = logging.getLogger()

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_file_logging(self, tmp_path):
        """Test file destination creates the log directory and rotating handler."""
        log_file = tmp_path / "logs" / "onionarch.log"
        setup_logging(LoggingConfig(destination="both", file_path=str(log_file)))
        root = logging.getLogger()

        assert log_file.parent.is_dir()
        assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)
        assert len(root.handlers) == 2

    def test_structlog_records_reach_handlers(self, tmp_path):
        """Test that structlog events are written through stdlib handlers."""
        log_file = tmp_path / "onionarch.log"
        setup_logging(LoggingConfig(level="INFO", destination="file", file_path=str(log_file)))

        get_logger("onionarch.test").info("Architecture check finished", violations=3)
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text()
        assert "Architecture check finished" in content
        assert "violations=3" in content

    def test_no_destination(self):
        """Test that 'none' silences output."""
        setup_logging(LoggingConfig(destination="none"))
        assert all(isinstance(h, logging.NullHandler) for h in logging.getLogger().handlers)
