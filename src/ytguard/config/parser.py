"""Parsing for the ``yt-dlp.ini`` settings file.

The file format is deliberately minimal: one ``key = value`` pair per line.
There are no section headers, quoting, escape sequences or comments.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class KeyValueParser:
    """Parser for flat ``key = value`` settings files.

    Rules:
    - Each line is stripped, then split on the first ``=``
    - Keys and values are stripped; keys are case-folded
    - Lines without ``=`` are ignored
    - Later definitions of the same key win

    Example:
        parser = KeyValueParser()
        parser.parse('''
        MaxRes = 1080p
        always_compatible = false
        ''')
        # Returns: {"maxres": "1080p", "always_compatible": "false"}
    """

    def parse(self, content: str) -> dict[str, str]:
        """Parse settings content into a dictionary.

        Args:
            content: Settings file content.

        Returns:
            Mapping of case-folded keys to raw string values.
        """
        result: dict[str, str] = {}

        for line in content.splitlines():
            key, sep, value = line.strip().partition("=")
            if not sep:
                continue
            result[key.strip().casefold()] = value.strip()

        return result


def parse_settings(content: str) -> dict[str, str]:
    """Parse settings file content.

    Args:
        content: Settings file content.

    Returns:
        Mapping of case-folded keys to raw string values.
    """
    return KeyValueParser().parse(content)


def load_settings_file(path: Path) -> dict[str, str] | None:
    """Load and parse a settings file.

    Args:
        path: Path to the settings file.

    Returns:
        Parsed mapping, or None if the file does not exist or cannot be read.
    """
    try:
        content = path.read_text(encoding="utf-8-sig", errors="replace")
    except FileNotFoundError:
        return None
    except OSError as e:
        logger.warning("Could not read settings file %s: %s", path, e)
        return None
    return parse_settings(content)
