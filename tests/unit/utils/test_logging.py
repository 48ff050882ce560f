"""Tests for logging configuration utilities."""

from io import StringIO
import json
import logging
import sys

import pytest

from color3.core.config import AppConfig, LoggingConfig
from color3.core.config import configure_logging as configure_from_config
from color3.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
    log_performance,
)


def _record(level: int = logging.INFO, msg: str = "Test message", exc_info=None) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    record.funcName = "test_function"
    record.module = "test_module"
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

    def test_standard_attributes_not_in_context(self):
        """Record bookkeeping does not leak into context."""
        context = json.loads(StructuredJSONFormatter().format(_record()))["context"]

        assert "pathname" not in context
        assert "msg" not in context
        assert "args" not in context

    def test_log_with_extra_fields(self):
        """Test that extra fields are included in context."""
        record = _record(level=logging.DEBUG, msg="Debug message")
        record.submission_id = "abc123"
        record.slot_count = 50
        record.custom_data = {"key": "value"}

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["context"]["submission_id"] == "abc123"
        assert data["context"]["slot_count"] == 50
        assert data["context"]["custom_data"] == {"key": "value"}

    def test_log_with_exception(self):
        """Test that exception info is captured in context."""
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(
            StructuredJSONFormatter().format(
                _record(level=logging.ERROR, msg="Error occurred", exc_info=exc_info)
            )
        )

        assert data["level"] == "ERROR"
        assert data["context"]["error_type"] == "ValueError"
        assert data["context"]["error_message"] == "Test error"
        assert "ValueError: Test error" in data["context"]["stack_trace"]

    def test_unserializable_extra_falls_back_to_str(self):
        """Test that non-JSON values are stringified rather than failing."""
        record = _record()
        record.when = object()

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["context"]["when"].startswith("<object object")


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

    def test_level_filters_records(self, capsys):
        """Records below the configured level are dropped."""
        configure_logging(level="warning")

        logger = logging.getLogger("test.level")
        logger.info("hidden")
        logger.warning("shown")

        captured = capsys.readouterr()
        assert "hidden" not in captured.out
        assert "shown" in captured.out

    def test_configure_structured_logging_to_stdout(self, capsys):
        """Test structured JSON logging to stdout."""
        configure_logging(level="INFO", structured=True)

        logging.getLogger("test.structured").info("Structured test message")

        lines = [line for line in capsys.readouterr().out.splitlines() if line]
        data = json.loads(lines[-1])
        assert data["level"] == "INFO"
        assert data["message"] == "Structured test message"
        assert data["context"]["logger_name"] == "test.structured"

    def test_configure_structured_logging_to_file(self, tmp_path):
        """Test structured JSON logging to file."""
        log_file = tmp_path / "color3.jsonl"
        configure_logging(level="DEBUG", structured=True, filename=str(log_file))

        logger = logging.getLogger("test.file")
        logger.debug("Debug message")
        logger.info("Info message")
        logger.warning("Warning message")

        lines = [json.loads(line) for line in log_file.read_text().splitlines() if line]
        assert [line["level"] for line in lines[-3:]] == ["DEBUG", "INFO", "WARNING"]
        for line in lines[-3:]:
            assert "timestamp" in line
            assert "logger_name" in line["context"]

    def test_configure_custom_format_string(self, capsys):
        """Test custom format string for standard logging."""
        configure_logging(level="INFO", format_string="%(levelname)s | %(message)s")

        logging.getLogger("test.custom").info("Custom format test")

        assert "INFO | Custom format test" in capsys.readouterr().out

    def test_unknown_level(self):
        """Test an unknown level name is rejected."""
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging(level="CHATTY")

    def test_reconfigure_replaces_handlers(self):
        """Test that logging can be reconfigured multiple times."""
        configure_logging(level="INFO", structured=False)
        configure_logging(level="DEBUG", structured=True)

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, StructuredJSONFormatter)

    def test_configure_from_app_config(self, tmp_path):
        """Test the config-driven entry point passes every logging option."""
        log_file = tmp_path / "app.log"
        config = AppConfig(
            logging=LoggingConfig(level="ERROR", structured=True, filename=str(log_file))
        )

        configure_from_config(config)

        root = logging.getLogger()
        assert root.level == logging.ERROR
        assert isinstance(root.handlers[0], logging.FileHandler)
        assert isinstance(root.handlers[0].formatter, StructuredJSONFormatter)


class TestGetLogger:
    """Test suite for get_logger function."""

    def test_get_logger_without_context(self):
        """Test getting a plain logger without context."""
        logger = get_logger("test.plain")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.plain"

    def test_get_logger_with_context(self):
        """Test getting a LoggerAdapter with context."""
        logger = get_logger("test.context", submission_id="abc123")
        assert isinstance(logger, logging.LoggerAdapter)
        assert logger.logger.name == "test.context"
        assert logger.extra["submission_id"] == "abc123"

    def test_logger_adapter_includes_context_in_structured_logs(self):
        """Test that LoggerAdapter context appears in structured logs."""
        stream = StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(StructuredJSONFormatter())

        logger = get_logger("test.adapter", submission_id="abc123", operation="aggregate")
        logger.logger.addHandler(handler)
        logger.logger.setLevel(logging.INFO)
        try:
            logger.info("Message with context")
        finally:
            logger.logger.removeHandler(handler)

        data = json.loads(stream.getvalue().strip())
        assert data["message"] == "Message with context"
        assert data["context"]["submission_id"] == "abc123"
        assert data["context"]["operation"] == "aggregate"


class TestLogPerformance:
    """Test suite for the log_performance decorator."""

    def test_returns_result_and_logs_duration(self, caplog):
        @log_performance
        def add(a: int, b: int) -> int:
            return a + b

        with caplog.at_level(logging.DEBUG, logger=__name__):
            assert add(2, 3) == 5

        assert any("'add' took" in message for message in caplog.messages)
        assert add.__name__ == "add"

    def test_exceptions_propagate(self):
        @log_performance
        def boom() -> None:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            boom()
