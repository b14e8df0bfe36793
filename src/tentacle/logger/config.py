"""Default logging settings resolved from the environment."""

import os
from pathlib import Path

from tentacle.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_DIR,
    ENV_LOG_LEVEL,
    LOG_FILE_NAME,
)

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_log_settings() -> tuple[str, str, Path]:
    """Load default console level, file level, and file path.

    Environment Variable Override:
        TENTACLE_LOG_DIR: Directory for the log file. Tests point this at a
            temporary directory so they never write to the user's home.
        TENTACLE_LOG_LEVEL: Console log level (DEBUG, INFO, WARNING, ...).
            Unknown values are ignored.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    console_level = DEFAULT_CONSOLE_LOG_LEVEL
    env_level = os.getenv(ENV_LOG_LEVEL, "").strip().upper()
    if env_level in _VALID_LEVELS:
        console_level = env_level

    env_log_dir = os.getenv(ENV_LOG_DIR)
    if env_log_dir:
        log_dir = Path(env_log_dir).expanduser()
    else:
        log_dir = Path.home() / ".cache" / "tentacle" / "logs"

    return console_level, DEFAULT_LOG_LEVEL, log_dir / LOG_FILE_NAME
