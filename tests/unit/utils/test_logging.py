"""Tests for logging configuration utilities."""

from __future__ import annotations

from io import StringIO
import json
import logging
import sys

from kiianigen.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
)


def _record(msg: str = "Test message", level: int = logging.INFO, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )
    record.funcName = "test_function"
    record.module = "test_module"
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredJSONFormatter:
    """Test suite for StructuredJSONFormatter."""

    def test_basic_log_format(self):
        """Test basic log record formatting to JSON."""
        data = json.loads(StructuredJSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert data["context"]["logger_name"] == "test.logger"
        assert data["context"]["module"] == "test_module"
        assert data["context"]["function"] == "test_function"
        assert data["context"]["line"] == 42

    def test_log_with_extra_fields(self):
        """Test that extra fields are included in context."""
        record = _record(generator="kitt2000", frames=101)

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["context"]["generator"] == "kitt2000"
        assert data["context"]["frames"] == 101

    def test_log_with_exception(self):
        """Test that exception info is captured in context."""
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        record = _record("Error occurred", level=logging.ERROR)
        record.exc_info = exc_info

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["level"] == "ERROR"
        assert data["context"]["error_type"] == "ValueError"
        assert data["context"]["error_message"] == "Test error"
        assert "ValueError: Test error" in data["context"]["stack_trace"]


class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_standard_logging(self, capsys):
        """Test standard text logging configuration."""
        configure_logging(level="INFO", structured=False)

        logging.getLogger("test.standard").info("Test message")

        captured = capsys.readouterr()
        assert "Test message" in captured.out
        assert "test.standard" in captured.out
        assert "INFO" in captured.out

    def test_level_is_case_insensitive(self, capsys):
        """Lower-case level names work."""
        configure_logging(level="warning")

        logging.getLogger("test.level").info("hidden")
        logging.getLogger("test.level").warning("shown")

        captured = capsys.readouterr()
        assert "hidden" not in captured.out
        assert "shown" in captured.out

    def test_configure_structured_logging_to_file(self, tmp_path):
        """Test structured JSON logging to file."""
        log_file = tmp_path / "kiianigen.jsonl"
        configure_logging(level="DEBUG", structured=True, filename=str(log_file))

        logger = logging.getLogger("test.file")
        logger.debug("Debug message")
        logger.warning("Warning message")
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = [json.loads(line) for line in log_file.read_text().splitlines() if line]
        levels = [line["level"] for line in lines]
        assert "DEBUG" in levels
        assert "WARNING" in levels
        assert all("logger_name" in line["context"] for line in lines)

        # Release the file handler
        configure_logging(level="INFO")


class TestGetLogger:
    """Test suite for get_logger."""

    def test_plain_logger_without_context(self):
        assert isinstance(get_logger("test.plain"), logging.Logger)

    def test_adapter_carries_context(self):
        """Context kwargs reach the structured output."""
        adapter = get_logger("test.adapter", generator="whiteNoise")
        assert isinstance(adapter, logging.LoggerAdapter)

        stream = StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(StructuredJSONFormatter())
        adapter.logger.addHandler(handler)
        adapter.logger.setLevel(logging.INFO)
        try:
            adapter.info("noise ready")
        finally:
            adapter.logger.removeHandler(handler)

        data = json.loads(stream.getvalue().strip())
        assert data["message"] == "noise ready"
        assert data["context"]["generator"] == "whiteNoise"
