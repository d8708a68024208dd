"""Tests for logging helpers and mixins."""

from __future__ import annotations

import logging

import pytest

from cronexp.expression import CronParser
from cronexp.logging import DEFAULT_LOG_FORMAT, WithLogger, configure_logging


class ExampleLogger(WithLogger):
    """Concrete class for exercising the WithLogger mixin."""


def test_with_logger_caches_logger_named_after_class() -> None:
    """_logger should resolve to a class-named logger and cache the instance."""
    example = ExampleLogger()
    logger = example._logger
    assert logger.name == ExampleLogger.__name__
    assert logger is example._logger
    assert logger is ExampleLogger._get_logger()


def test_parser_logs_each_field(caplog: pytest.LogCaptureFixture) -> None:
    """The parser reports the fields it parses at debug level."""
    with caplog.at_level(logging.DEBUG, logger=CronParser.__name__):
        CronParser().parse("1 2 3 4 5 cmd")

    messages = [record.getMessage() for record in caplog.records if record.name == CronParser.__name__]
    assert messages == [
        "Parsing minute field '1'",
        "Parsing hour field '2'",
        "Parsing day of month field '3'",
        "Parsing month field '4'",
        "Parsing day of week field '5'",
    ]


def test_skipped_items_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Unrecognized items leave a debug trace when skipped."""
    with caplog.at_level(logging.DEBUG, logger="cronexp.segment"):
        CronParser().parse("1,foo 2 3 4 5 cmd")

    assert "Skipping unrecognized item 'foo' in '1,foo'" in caplog.text


@pytest.fixture
def clean_root_logger():
    """Detach root handlers for the duration of a test and restore them afterwards."""
    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    yield root_logger

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    root_logger.setLevel(original_level)
    for handler in original_handlers:
        root_logger.addHandler(handler)


def test_configure_logging_sets_root_level_and_formatter(clean_root_logger: logging.Logger) -> None:
    """configure_logging should apply level and formatter to the root logger."""
    configure_logging(level="DEBUG")
    assert clean_root_logger.level == logging.DEBUG
    assert clean_root_logger.handlers

    formatter = clean_root_logger.handlers[0].formatter
    assert formatter is not None
    assert formatter._style._fmt == DEFAULT_LOG_FORMAT


def test_configure_logging_accepts_lowercase_names(clean_root_logger: logging.Logger) -> None:
    """Level names are case-insensitive."""
    configure_logging(level="info")
    assert clean_root_logger.level == logging.INFO


def test_configure_logging_rejects_unknown_level() -> None:
    """String log level names must be valid."""
    with pytest.raises(ValueError, match="valid logging level name"):
        configure_logging(level="NOTALEVEL")
