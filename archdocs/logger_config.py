"""Logging setup for the archdocs system.

Two loggers are configured at import time:
- error_logger: structured JSON error records on stderr
- archdocs_call_logger: one line per documentation call, in a rotating file
"""

import datetime
import functools
import json
import logging
import sys
import traceback
from enum import Enum
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from .config import get_settings

_STANDARD_RECORD_ATTRS = set(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}


class ErrorCategory(Enum):
    """Severity categories for structured error logging."""

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


_CATEGORY_LEVELS = {
    ErrorCategory.CRITICAL: logging.CRITICAL,
    ErrorCategory.ERROR: logging.ERROR,
    ErrorCategory.WARNING: logging.WARNING,
    ErrorCategory.INFO: logging.INFO,
}


class StructuredLogFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.datetime.fromtimestamp(record.created, tz=datetime.timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, exc_tb = record.exc_info
            log_data["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "traceback": traceback.format_exception(exc_type, exc_value, exc_tb),
            }
        # Anything passed through ``extra=`` ends up as a record attribute
        for key, value in record.__dict__.items():
            if key not in _STANDARD_RECORD_ATTRS and key not in log_data:
                log_data[key] = value
        return json.dumps(log_data, default=str)


class LazyDirRotatingFileHandler(RotatingFileHandler):
    """Rotating file handler that creates the log directory on first write."""

    def _open(self):
        Path(self.baseFilename).parent.mkdir(parents=True, exist_ok=True)
        return super()._open()


# --- Logging Setup ---
_settings = get_settings()

error_logger = logging.getLogger("error_logger")
error_logger.setLevel(logging.INFO)
_error_handler = logging.StreamHandler(sys.stderr)
if _settings.structured_logging:
    _error_handler.setFormatter(StructuredLogFormatter())
else:
    _error_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
error_logger.addHandler(_error_handler)
error_logger.propagate = False

call_logger = logging.getLogger("archdocs_call_logger")
call_logger.setLevel(_settings.log_level.upper())

# maxBytes: 10MB per file, backupCount: 5 files (total ~50MB)
file_handler = LazyDirRotatingFileHandler(
    _settings.log_path / "archdocs_calls.log",
    maxBytes=10 * 1024 * 1024,
    backupCount=5,
    delay=True,
)
file_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
call_logger.addHandler(file_handler)
call_logger.propagate = False


def log_structured_error(
    category: ErrorCategory,
    message: str,
    exception: BaseException | None = None,
    context: dict[str, Any] | None = None,
    operation: str | None = None,
    **kwargs: Any,
) -> None:
    """Log an error with its category, operation and context as structured fields."""
    extra: dict[str, Any] = {"error_category": category.value}
    if operation:
        extra["operation"] = operation
    if context:
        extra.update(context)
    if exception is not None and hasattr(exception, "to_dict"):
        extra["error_details"] = exception.to_dict()
    extra.update(kwargs)

    error_logger.log(
        _CATEGORY_LEVELS[category],
        message,
        exc_info=exception is not None,
        extra=extra,
    )


def _describe(value: Any) -> str:
    if hasattr(value, "model_dump_json"):
        return value.model_dump_json(exclude_none=True)
    return repr(value)


# --- Decorator for Logging Documentation Calls ---
def log_operation(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        func_name = getattr(func, "__qualname__", getattr(func, "__name__", "unknown_function"))

        try:
            logged_args = [_describe(arg) for arg in args]
            logged_kwargs = {k: _describe(v) for k, v in kwargs.items()}
            arg_str = f"args={logged_args}, kwargs={logged_kwargs}"
        except Exception as e:
            arg_str = f"args/kwargs logging error: {e}"

        call_logger.info(f"Calling: {func_name} with {arg_str}")
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            call_logger.error(f"{func_name} raised exception: {e}")
            log_structured_error(
                category=ErrorCategory.ERROR,
                message=f"{func_name} failed: {e}",
                exception=e,
                operation="documentation_call",
                function=func_name,
            )
            raise

        try:
            if isinstance(result, (list, set, frozenset, tuple)):
                result_str = f"{type(result).__name__} of {len(result)} item(s)"
            else:
                result_str = _describe(result)
        except Exception as e:
            result_str = f"Result logging error: {e}"

        call_logger.info(f"{func_name} returned: {result_str}")
        return result

    return wrapper
