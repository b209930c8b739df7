"""Leveled, timestamped console logging rendered with Rich.

Modules log through :mod:`logging` as usual. The two run-specific levels,
``SUCCESS`` and ``DRY-RUN``, are registered with the logging module so that
``logger.log(LogLevel.SUCCESS, ...)`` works anywhere.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from enum import IntEnum
from typing import ClassVar

from rich.console import Console
from rich.text import Text

PACKAGE_LOGGER = "issuetree"


class LogLevel(IntEnum):
    """User-facing log levels, ordered like :mod:`logging` levels."""

    INFO = logging.INFO
    DRY_RUN = 22
    SUCCESS = 25
    WARN = logging.WARNING
    ERROR = logging.ERROR


logging.addLevelName(LogLevel.DRY_RUN, "DRY-RUN")
logging.addLevelName(LogLevel.SUCCESS, "SUCCESS")


class ConsoleLogHandler(logging.Handler):
    """Render log records as ``[HH:MM:SS] [LEVEL] message`` lines."""

    LEVEL_STYLES: ClassVar[dict[int, tuple[str, str]]] = {
        logging.DEBUG: ("DEBUG", "dim"),
        LogLevel.INFO: ("INFO", "cyan"),
        LogLevel.DRY_RUN: ("DRY-RUN", "magenta"),
        LogLevel.SUCCESS: ("SUCCESS", "green"),
        LogLevel.WARN: ("WARN", "yellow"),
        LogLevel.ERROR: ("ERROR", "bold red"),
        logging.CRITICAL: ("ERROR", "bold red"),
    }

    def __init__(self, console: Console | None = None, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.console = console or Console(file=sys.stdout, highlight=False)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            label, style = self.LEVEL_STYLES.get(record.levelno, (record.levelname, ""))
            timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
            line = Text()
            line.append(f"[{timestamp}] ", style="dim")
            line.append(f"[{label}]", style=style)
            line.append(f" {self.format(record)}")
            self.console.print(line, soft_wrap=True)
        except Exception:
            self.handleError(record)


def configure_logging(verbose: bool = False, console: Console | None = None) -> ConsoleLogHandler:
    """Attach a fresh :class:`ConsoleLogHandler` to the package logger.

    Any handler installed by a previous call is replaced.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if isinstance(existing, ConsoleLogHandler):
            logger.removeHandler(existing)

    handler = ConsoleLogHandler(console)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return handler
