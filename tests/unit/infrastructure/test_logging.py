"""Tests for the logging helpers."""
import io
import logging

from core.infrastructure.logging import configure_logging, get_logger


class _Collect(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


def test_line_is_written_once_after_root_is_configured():
    logger = get_logger("tests.logging.written_once")
    stream = io.StringIO()
    logger.handlers[0].setStream(stream)

    configure_logging("INFO")
    root_collector = _Collect()
    logging.getLogger().addHandler(root_collector)
    try:
        logger.info("order placed")
    finally:
        logging.getLogger().removeHandler(root_collector)

    assert stream.getvalue().count("order placed") == 1
    assert root_collector.records == []


def test_handler_is_attached_once():
    first = get_logger("tests.logging.attached_once")
    second = get_logger("tests.logging.attached_once")

    assert first is second
    assert len(second.handlers) == 1
    assert second.propagate is False


def test_format_names_the_logger():
    logger = get_logger("tests.logging.format")
    stream = io.StringIO()
    logger.handlers[0].setStream(stream)

    logger.warning("stock low")

    assert "| WARNING | tests.logging.format | stock low" in stream.getvalue()
