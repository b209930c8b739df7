"""Tests for the leveled console log handler."""

from __future__ import annotations

import io
import logging
import re

import pytest
from rich.console import Console

from issuetree.console import PACKAGE_LOGGER, ConsoleLogHandler, LogLevel, configure_logging


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def package_logger(buffer: io.StringIO):
    console = Console(file=buffer, width=200, color_system=None)
    handler = configure_logging(verbose=False, console=console)
    logger = logging.getLogger(PACKAGE_LOGGER)
    yield logger
    logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_custom_levels_are_registered() -> None:
    assert logging.getLevelName(LogLevel.SUCCESS) == "SUCCESS"
    assert logging.getLevelName(LogLevel.DRY_RUN) == "DRY-RUN"


def test_every_user_level_has_a_style() -> None:
    for level in LogLevel:
        assert level in ConsoleLogHandler.LEVEL_STYLES


@pytest.mark.parametrize(
    ("level", "label"),
    [
        (LogLevel.INFO, "INFO"),
        (LogLevel.SUCCESS, "SUCCESS"),
        (LogLevel.WARN, "WARN"),
        (LogLevel.ERROR, "ERROR"),
        (LogLevel.DRY_RUN, "DRY-RUN"),
    ],
)
def test_lines_are_timestamped_and_leveled(package_logger, buffer, level, label) -> None:
    package_logger.getChild("engine").log(level, "hello %s", "world")

    line = buffer.getvalue().strip()
    assert re.fullmatch(rf"\[\d{{2}}:\d{{2}}:\d{{2}}\] \[{label}\] hello world", line)


def test_debug_hidden_unless_verbose(package_logger, buffer) -> None:
    package_logger.debug("secret")
    assert buffer.getvalue() == ""


def test_verbose_enables_debug(buffer) -> None:
    console = Console(file=buffer, width=200, color_system=None)
    handler = configure_logging(verbose=True, console=console)
    logger = logging.getLogger(PACKAGE_LOGGER)
    try:
        logger.debug("Running: gh --version")
    finally:
        logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
    assert "[DEBUG] Running: gh --version" in buffer.getvalue()


def test_configure_logging_replaces_previous_handler(buffer) -> None:
    console = Console(file=buffer, width=200, color_system=None)
    logger = logging.getLogger(PACKAGE_LOGGER)
    first = configure_logging(console=console)
    second = configure_logging(console=console)
    try:
        assert first not in logger.handlers
        assert second in logger.handlers
    finally:
        logger.removeHandler(second)
        logger.setLevel(logging.NOTSET)


def test_markup_in_messages_is_not_interpreted(package_logger, buffer) -> None:
    package_logger.info("title with [bold]brackets[/bold]")
    assert "[bold]brackets[/bold]" in buffer.getvalue()
