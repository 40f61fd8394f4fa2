"""Configuration management for ytguard.

Settings are loaded with this precedence:
1. Environment variables (YTGUARD_*)
2. Settings file (yt-dlp.ini next to the executable)
3. Default values (lowest priority)

- KeyValueParser/parse_settings: flat ``key = value`` parsing
- EnvReader: Testable environment variable reading with DI support
- WrapperConfig: Typed configuration produced by one normalization step
"""

from ytguard.config.env import EnvReader
from ytguard.config.loader import (
    CONFIG_FILE_NAME,
    LOG_FILE_NAME,
    build_logging_config,
    get_app_dir,
    get_config,
    get_default_config_path,
    get_log_path,
    load_config_file,
)
from ytguard.config.models import (
    DEFAULT_SETTINGS,
    EncoderSlot,
    LoggingConfig,
    WrapperConfig,
)
from ytguard.config.parser import KeyValueParser, load_settings_file, parse_settings

__all__ = [
    # Models
    "DEFAULT_SETTINGS",
    "EncoderSlot",
    "LoggingConfig",
    "WrapperConfig",
    # Loader
    "CONFIG_FILE_NAME",
    "LOG_FILE_NAME",
    "build_logging_config",
    "get_app_dir",
    "get_config",
    "get_default_config_path",
    "get_log_path",
    "load_config_file",
    # Parsing
    "EnvReader",
    "KeyValueParser",
    "load_settings_file",
    "parse_settings",
]
