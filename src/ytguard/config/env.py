"""Environment overrides for ytguard.

ytguard is usually launched by another program that passes only yt-dlp
arguments, so the environment is the one channel for relocating the
settings/log directory or forcing the debug log without editing
``yt-dlp.ini``.

Recognized variables:
- YTGUARD_HOME: directory used instead of the executable's directory
- YTGUARD_CONFIG_PATH: settings file path
- YTGUARD_DEBUG: force the debug log on (true/1/yes/on) or off
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

TRUE_VALUES = frozenset({"true", "1", "yes", "on"})


class EnvReader:
    """Typed access to environment variables.

    Pass ``env`` to read from a plain mapping instead of ``os.environ``;
    tests use ``EnvReader(env={})`` to ignore the real environment.
    Variables set to an empty string count as unset.
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env: Mapping[str, str] = os.environ if env is None else env

    def _value(self, var: str) -> str | None:
        value = self._env.get(var)
        return value or None

    def get_str(self, var: str, default: str | None = None) -> str | None:
        """Return the variable's value, or default when unset or empty."""
        value = self._value(var)
        return default if value is None else value

    def get_bool(self, var: str, default: bool | None = None) -> bool | None:
        """Read a flag.

        Args:
            var: Environment variable name.
            default: Returned when the variable is unset or empty.

        Returns:
            True for true/1/yes/on (any case), False for any other value.
        """
        value = self._value(var)
        if value is None:
            return default
        return value.strip().casefold() in TRUE_VALUES

    def get_path(
        self, var: str, must_exist: bool = True, default: Path | None = None
    ) -> Path | None:
        """Read a path, expanding ``~``.

        Args:
            var: Environment variable name.
            must_exist: Ignore (with a warning) a path that does not exist.
            default: Returned when the variable is unset, empty or ignored.

        Returns:
            The path, or default.
        """
        value = self._value(var)
        if value is None:
            return default

        path = Path(value).expanduser()
        if must_exist and not path.exists():
            logger.warning("Ignoring %s, path does not exist: %s", var, value)
            return default
        return path
