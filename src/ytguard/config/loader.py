"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. Environment variables (YTGUARD_*)
2. Settings file (yt-dlp.ini next to the executable)
3. Default values

Environment variables:
- YTGUARD_HOME: Directory used instead of the executable's directory
- YTGUARD_CONFIG_PATH: Path to the settings file
- YTGUARD_DEBUG: Force the debug log on or off
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ytguard.config.env import EnvReader
from ytguard.config.models import LoggingConfig, WrapperConfig
from ytguard.config.parser import load_settings_file
from ytguard.exceptions import ConfigResolutionError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "yt-dlp.ini"
LOG_FILE_NAME = "yt-dlp.log"


def get_app_dir(env_reader: EnvReader | None = None) -> Path:
    """Get the directory that holds the settings and log files.

    This is the directory of the running executable: ``sys.executable`` for
    frozen builds, otherwise the resolved ``sys.argv[0]``. YTGUARD_HOME
    overrides it.

    Args:
        env_reader: Optional EnvReader for testing.

    Returns:
        Absolute path to the application directory.

    Raises:
        ConfigResolutionError: If the executable location cannot be determined.
    """
    reader = env_reader or EnvReader()
    override = reader.get_path("YTGUARD_HOME", must_exist=False)
    if override is not None:
        return override.resolve()

    if getattr(sys, "frozen", False):
        executable = sys.executable
    else:
        executable = sys.argv[0] if sys.argv else ""

    if not executable:
        raise ConfigResolutionError("Failed to resolve executable path")

    try:
        return Path(executable).resolve().parent
    except (OSError, RuntimeError) as e:
        raise ConfigResolutionError(f"Failed to resolve executable path: {e}") from e


def get_default_config_path(
    app_dir: Path, env_reader: EnvReader | None = None
) -> Path:
    """Get the settings file path.

    Args:
        app_dir: Application directory.
        env_reader: Optional EnvReader for testing.

    Returns:
        YTGUARD_CONFIG_PATH if set, otherwise ``<app_dir>/yt-dlp.ini``.
    """
    reader = env_reader or EnvReader()
    env_path = reader.get_path("YTGUARD_CONFIG_PATH", must_exist=False)
    if env_path is not None:
        return env_path
    return app_dir / CONFIG_FILE_NAME


def get_log_path(app_dir: Path) -> Path:
    """Get the debug log path for an application directory."""
    return app_dir / LOG_FILE_NAME


def load_config_file(path: Path) -> dict[str, str]:
    """Load raw settings from a file.

    Args:
        path: Path to the settings file.

    Returns:
        Parsed settings. Empty dict if the file doesn't exist.
    """
    settings = load_settings_file(path)
    if settings is None:
        return {}
    return settings


def get_config(
    config_path: Path,
    env_reader: EnvReader | None = None,
) -> WrapperConfig:
    """Get wrapper configuration with full precedence handling.

    Args:
        config_path: Path to the settings file.
        env_reader: Optional EnvReader for testing (uses os.environ if None).

    Returns:
        WrapperConfig with merged configuration.
    """
    reader = env_reader or EnvReader()

    settings = load_config_file(config_path)

    debug_override = reader.get_bool("YTGUARD_DEBUG")
    if debug_override is not None:
        settings["debug"] = "true" if debug_override else "false"

    return WrapperConfig.from_mapping(settings)


def build_logging_config(config: WrapperConfig, app_dir: Path) -> LoggingConfig:
    """Build the logging configuration for a wrapper run.

    Args:
        config: Effective wrapper configuration.
        app_dir: Application directory (log file location).

    Returns:
        LoggingConfig writing to ``<app_dir>/yt-dlp.log``.
    """
    return LoggingConfig(
        enabled=config.debug,
        file=get_log_path(app_dir),
        format=config.log_format,
    )
