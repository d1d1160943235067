"""
Unit tests for logger_config module.

Covers the structured JSON formatter, log_structured_error, the call log
file handler and the log_operation decorator used on documentation calls.
"""

import json
import logging
from io import StringIO

import pytest

from archdocs.exceptions import DuplicateSectionError
from archdocs.logger_config import ErrorCategory
from archdocs.logger_config import LazyDirRotatingFileHandler
from archdocs.logger_config import StructuredLogFormatter
from archdocs.logger_config import error_logger
from archdocs.logger_config import log_operation
from archdocs.logger_config import log_structured_error


def _record(msg="Test message", level=logging.ERROR, exc_info=None):
    return logging.LogRecord(
        name="test_logger",
        level=level,
        pathname="test.py",
        lineno=10,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestStructuredLogFormatter:
    def test_basic_log_entry(self):
        log_data = json.loads(StructuredLogFormatter().format(_record()))

        assert log_data["level"] == "ERROR"
        assert log_data["logger"] == "test_logger"
        assert log_data["message"] == "Test message"
        assert "timestamp" in log_data

    def test_with_exception_info(self):
        try:
            raise ValueError("Test exception")
        except ValueError:
            import sys

            log_data = json.loads(StructuredLogFormatter().format(_record(exc_info=sys.exc_info())))

        assert log_data["exception"]["type"] == "ValueError"
        assert log_data["exception"]["message"] == "Test exception"
        assert isinstance(log_data["exception"]["traceback"], list)

    def test_with_extra_fields(self):
        record = _record(level=logging.INFO)
        record.operation = "hydrate"
        record.element_id = "1"

        log_data = json.loads(StructuredLogFormatter().format(record))

        assert log_data["operation"] == "hydrate"
        assert log_data["element_id"] == "1"


class TestLogStructuredError:
    def test_basic(self, mocker):
        mock_logger = mocker.patch("archdocs.logger_config.error_logger")

        log_structured_error(category=ErrorCategory.ERROR, message="Test error message", operation="add")

        call_args = mock_logger.log.call_args
        assert call_args[0][0] == logging.ERROR
        assert call_args[0][1] == "Test error message"
        assert call_args[1]["extra"]["error_category"] == "ERROR"
        assert call_args[1]["extra"]["operation"] == "add"
        assert call_args[1]["exc_info"] is False

    def test_with_archdocs_exception(self, mocker):
        mock_logger = mocker.patch("archdocs.logger_config.error_logger")

        log_structured_error(
            category=ErrorCategory.CRITICAL,
            message="Duplicate",
            exception=DuplicateSectionError("1", "Context"),
            context={"element_id": "1"},
        )

        call_args = mock_logger.log.call_args
        assert call_args[0][0] == logging.CRITICAL
        assert call_args[1]["exc_info"] is True
        assert call_args[1]["extra"]["element_id"] == "1"
        assert call_args[1]["extra"]["error_details"]["error_code"] == "DUPLICATE_SECTION"


class TestLogOperationDecorator:
    def test_success_logs_call_and_result(self, mocker):
        mock_logger = mocker.patch("archdocs.logger_config.call_logger")

        @log_operation
        def join(a, b="x"):
            return a + b

        assert join("hello", b="world") == "helloworld"
        assert mock_logger.info.call_count == 2

    def test_exception_is_logged_and_reraised(self, mocker):
        mock_logger = mocker.patch("archdocs.logger_config.call_logger")
        mock_log_error = mocker.patch("archdocs.logger_config.log_structured_error")

        @log_operation
        def failing_function():
            raise FileNotFoundError("File not found")

        with pytest.raises(FileNotFoundError):
            failing_function()

        mock_logger.error.assert_called_once()
        call_args = mock_log_error.call_args
        assert call_args[1]["category"] == ErrorCategory.ERROR
        assert call_args[1]["operation"] == "documentation_call"
        assert call_args[1]["function"].endswith("failing_function")


class TestActualLogger:
    def test_error_logger_configuration(self):
        assert error_logger.name == "error_logger"
        assert any(isinstance(handler.formatter, StructuredLogFormatter) for handler in error_logger.handlers)

    def test_structured_output_is_json(self):
        log_stream = StringIO()
        handler = logging.StreamHandler(log_stream)
        handler.setFormatter(StructuredLogFormatter())
        test_logger = logging.getLogger("test_structured")
        test_logger.addHandler(handler)
        test_logger.setLevel(logging.INFO)

        try:
            test_logger.error("entry", extra={"error_category": "ERROR", "operation": "hydrate"})
        finally:
            test_logger.removeHandler(handler)

        log_data = json.loads(log_stream.getvalue().strip())
        assert log_data["message"] == "entry"
        assert log_data["operation"] == "hydrate"

    def test_call_log_directory_created_on_first_write(self, tmp_path):
        log_dir = tmp_path / "nested" / "logs"
        handler = LazyDirRotatingFileHandler(log_dir / "calls.log", maxBytes=1024, backupCount=1, delay=True)

        try:
            assert not log_dir.exists()

            handler.emit(_record(msg="first call", level=logging.INFO))
        finally:
            handler.close()

        assert (log_dir / "calls.log").read_text(encoding="utf-8").strip() == "first call"
