import json
import logging

import pytest

from bookworm.shared.utils import logging as app_logging
from bookworm.shared.utils.logging import (
    ContextFilter,
    _build_formatter,
    correlation_id_var,
    get_logger,
    log_context,
)


@pytest.fixture
def captured():
    """Attach a JSON handler to a dedicated logger and collect its output."""
    records = []

    class ListHandler(logging.Handler):
        def emit(self, record):
            records.append(self.format(record))

    handler = ListHandler()
    handler.setFormatter(_build_formatter("json"))
    handler.addFilter(ContextFilter())

    logger = logging.getLogger("tests.structured")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    yield records
    logger.removeHandler(handler)


def test_json_output_carries_extra_and_correlation_id(captured):
    logger = get_logger("tests.structured")

    with log_context("req-123"):
        logger.info("Book registered", extra={"book_id": 7})

    payload = json.loads(captured[0])
    assert payload["message"] == "Book registered"
    assert payload["book_id"] == 7
    assert payload["correlation_id"] == "req-123"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "tests.structured"
    assert payload["service"] == "bookworm-domain"


def test_business_event(captured):
    get_logger("tests.structured").log_business_event("book_merged", extra={"book_id": 1})

    payload = json.loads(captured[0])
    assert payload["event_type"] == "book_merged"
    assert payload["message"] == "Business event: book_merged"


def test_log_context_generates_and_resets_id():
    with log_context() as cid:
        assert cid
        assert correlation_id_var.get() == cid

    assert correlation_id_var.get() == ""


def test_text_formatter():
    formatter = _build_formatter("text")
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "hello", None, None)
    ContextFilter().filter(record)

    assert "WARNING" in formatter.format(record)
    assert "hello" in formatter.format(record)


def test_setup_logging_runs_once(monkeypatch, tmp_path):
    monkeypatch.setattr(app_logging, "_logging_configured", False)
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    log_file = tmp_path / "logs" / "bookworm.log"

    try:
        app_logging.setup_logging(log_level="DEBUG", log_format="text", log_file=str(log_file),
                                  enable_console=False)
        handlers = root.handlers[:]
        app_logging.setup_logging(log_level="ERROR")

        assert root.level == logging.DEBUG
        assert root.handlers == handlers
        assert log_file.parent.exists()
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in original_handlers:
            root.addHandler(handler)
        root.setLevel(original_level)

