# 📄 File: bookworm/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# This file sets up a logging system that records what the library rules decide in a structured way,
# making it easy to see which book was merged, which deletion was refused, and why.

# 🧪 Purpose (Technical Summary):
# Implements structured logging with JSON formatting, a correlation id context variable
# and a thin logger wrapper that carries extra fields into every record.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Correlation id tracking

# 🔄 Connected Modules / Calls From:
# Used by: Catalog and user domain services, security module, application startup code

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Iterator, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

from bookworm.shared.config.settings import get_settings

# Context variable for correlating the log lines of one operation
correlation_id_var: ContextVar[str] = ContextVar('correlation_id', default='')

_logging_configured = False

SERVICE_NAME = 'bookworm-domain'


class ContextFilter(logging.Filter):
    """
    Adds the correlation id and service name to every record so both the
    JSON and the text formatter can reference them.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = correlation_id_var.get('')
        record.service = SERVICE_NAME
        return True


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == 'json':
        return JsonFormatter(
            '%(asctime)s %(levelname)s %(name)s %(message)s %(correlation_id)s %(service)s',
            rename_fields={'levelname': 'level', 'name': 'logger', 'asctime': 'timestamp'},
        )
    return logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s'
    )


class StructuredLogger:
    """
    Thin wrapper around a standard logger.

    ``extra`` dictionaries are flattened into the record so the JSON
    formatter emits them as top-level keys.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)
        self.name = name

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._log(logging.DEBUG, message, extra)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._log(logging.INFO, message, extra)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._log(logging.WARNING, message, extra)

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        self._log(logging.ERROR, message, extra, exc_info=exc_info)

    def _log(
        self,
        level: int,
        message: str,
        extra: Optional[Dict[str, Any]] = None,
        exc_info: bool = False
    ):
        if not self.logger.isEnabledFor(level):
            return
        self.logger.log(level, message, extra=dict(extra or {}), exc_info=exc_info, stacklevel=3)

    def log_business_event(self, event: str, extra: Optional[Dict[str, Any]] = None):
        """Log a domain decision (book merged, deletion refused, ...)."""
        self.info(f"Business event: {event}", extra={'event_type': event, **(extra or {})})


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    log_file: Optional[str] = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Setup application logging configuration.

    Values not passed explicitly are read from settings. Calling this more
    than once is a no-op.
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger("startup")

    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = (log_format or settings.LOG_FORMAT).lower()
    log_file = log_file or settings.LOG_FILE

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    formatter = _build_formatter(log_format)
    context_filter = ContextFilter()

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(context_filter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(context_filter)
        root_logger.addHandler(file_handler)

    logging.getLogger('passlib').setLevel(logging.WARNING)

    _logging_configured = True
    return logging.getLogger("startup")


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, usually ``__name__``

    Returns:
        StructuredLogger: Wrapper around ``logging.getLogger(name)``
    """
    return StructuredLogger(name)


@contextmanager
def log_context(correlation_id: Optional[str] = None) -> Iterator[str]:
    """
    Bind a correlation id to every log line emitted inside the block.

    Example:
        with log_context() as cid:
            catalog.register(...)
    """
    cid = correlation_id or str(uuid4())
    token = correlation_id_var.set(cid)
    try:
        yield cid
    finally:
        correlation_id_var.reset(token)

