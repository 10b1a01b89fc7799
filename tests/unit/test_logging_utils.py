#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_logging_utils.py
"""Unit tests for logging configuration."""

import logging

import pytest

from conceptmd.logging_utils import PACKAGE_LOGGER_NAME, PLAIN_FORMAT, TRACE_FORMAT, configure_logging


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Restore the package logger after each test."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    saved = (list(package_logger.handlers), package_logger.level, package_logger.propagate)
    yield
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    handlers, level, propagate = saved
    for handler in handlers:
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = propagate


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_string_level(self):
        """Level names are resolved case-insensitively."""
        package_logger = configure_logging("debug")
        assert package_logger.name == PACKAGE_LOGGER_NAME
        assert package_logger.level == logging.DEBUG

    def test_numeric_level(self):
        """Numeric levels are used as given."""
        assert configure_logging(logging.WARNING).level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        """Unknown level names mean INFO."""
        assert configure_logging("chatty").level == logging.INFO

    def test_repeated_calls_replace_handlers(self):
        """Configuring twice does not duplicate output."""
        configure_logging("INFO")
        package_logger = configure_logging("INFO")
        assert len(package_logger.handlers) == 1

    @pytest.mark.parametrize("trace_mode,fmt", [(False, PLAIN_FORMAT), (True, TRACE_FORMAT)])
    def test_formats(self, trace_mode, fmt):
        """Trace mode switches to the detailed format."""
        package_logger = configure_logging("INFO", trace_mode=trace_mode)
        assert package_logger.handlers[0].formatter._fmt == fmt

    def test_propagation_off_by_default(self):
        """Records stay with the package handlers unless asked otherwise."""
        assert configure_logging("INFO").propagate is False
        assert configure_logging("INFO", propagate=True).propagate is True

    def test_log_file(self, tmp_path):
        """Records are also written to the log file."""
        log_path = tmp_path / "parse.log"
        package_logger = configure_logging("DEBUG", log_file=str(log_path))
        assert len(package_logger.handlers) == 2

        logging.getLogger("conceptmd.parsers.dialect").debug("hello from the parser")
        assert "hello from the parser" in log_path.read_text(encoding="utf-8")

    def test_unwritable_log_file(self, tmp_path, capsys):
        """A log file that cannot be opened only produces a warning."""
        bad_path = tmp_path / "missing" / "parse.log"
        package_logger = configure_logging("INFO", log_file=str(bad_path))
        assert len(package_logger.handlers) == 1
        assert "Could not create log file" in capsys.readouterr().err
