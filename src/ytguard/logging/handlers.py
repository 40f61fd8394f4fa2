"""Log line formatters for ytguard.

The debug log is meant to be read next to the wrapped tools' own output, so
both formats share the local ``YYYY-MM-DD HH:MM:SS`` timestamp.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Attributes every LogRecord carries; anything else came in through extra=
_RECORD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}


def record_extras(record: logging.LogRecord) -> dict[str, Any]:
    """Collect the ``extra=`` fields attached to a record."""
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class TextFormatter(logging.Formatter):
    """``<timestamp>  <message>`` lines, two spaces between the fields."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s  %(message)s", datefmt=TIMESTAMP_FORMAT)


class JSONFormatter(logging.Formatter):
    """One JSON object per line (``log_format = json``).

    Keys: timestamp, level, message, logger (unless root), context (the
    record's extra fields, e.g. the command name and exit code logged by
    the subprocess wrappers) and exception.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).strftime(
                TIMESTAMP_FORMAT
            ),
            "level": record.levelname,
            "message": record.getMessage(),
        }

        if record.name != "root":
            entry["logger"] = record.name

        context = record_extras(record)
        if context:
            entry["context"] = context

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)
