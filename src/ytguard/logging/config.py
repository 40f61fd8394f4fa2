"""Logging setup for a wrapper run.

The ``debug`` setting decides once, at startup, whether anything is logged.
There is no level filtering beyond that: when enabled, every record is
appended to ``yt-dlp.log``.

Records logged while the settings are still being read are held by
hold_startup_records() and written once configure_logging() has run, so
nothing reaches the wrapped tools' stderr.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from ytguard.logging.handlers import JSONFormatter, TextFormatter

if TYPE_CHECKING:
    from ytguard.config.models import LoggingConfig

STARTUP_BUFFER_SIZE = 1000


def hold_startup_records() -> logging.handlers.BufferingHandler:
    """Buffer records emitted before configure_logging() is called.

    Returns:
        The buffering handler installed on the root logger.
    """
    handler = logging.handlers.BufferingHandler(STARTUP_BUFFER_SIZE)
    logging.getLogger().addHandler(handler)
    return handler


def _open_log_file(path: Path) -> logging.Handler | None:
    # Opened eagerly: an unwritable log location must fail here, not on
    # the first record.
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(path, mode="a", encoding="utf-8")
    except OSError:
        return None


def configure_logging(config: LoggingConfig) -> None:
    """Install the root handler for this process.

    Any previously installed root handlers are closed and removed; records
    held by hold_startup_records() are passed on to the new handler. When
    logging is disabled, or the log file cannot be opened, only a
    NullHandler remains. With no log file configured, records go to stderr.

    Args:
        config: Logging configuration.
    """
    root_logger = logging.getLogger()

    held: list[logging.LogRecord] = []
    for existing in list(root_logger.handlers):
        if isinstance(existing, logging.handlers.BufferingHandler):
            held.extend(existing.buffer)
        root_logger.removeHandler(existing)
        existing.close()

    if not config.enabled:
        root_logger.setLevel(logging.CRITICAL + 1)
        root_logger.addHandler(logging.NullHandler())
        return

    handler: logging.Handler | None
    if config.file is not None:
        handler = _open_log_file(Path(config.file).expanduser())
        if handler is None:
            root_logger.addHandler(logging.NullHandler())
            return
    else:
        handler = logging.StreamHandler(sys.stderr)

    if config.format.casefold() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter())

    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(handler)

    for record in held:
        handler.handle(record)
