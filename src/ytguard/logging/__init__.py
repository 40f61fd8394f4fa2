"""Logging module for ytguard.

Writes timestamped debug lines next to the executable, with optional JSON
format. Enabled or disabled once per process.
"""

from ytguard.logging.config import configure_logging, hold_startup_records
from ytguard.logging.handlers import JSONFormatter, TextFormatter

__all__ = [
    "JSONFormatter",
    "TextFormatter",
    "configure_logging",
    "hold_startup_records",
]
