"""Centralized constants module for tentacle.

This module serves as the single source of truth for all shared constants
across the tentacle codebase. Constants are organized by logical categories
and use typing.Final annotations to ensure immutability.

Usage:
    from tentacle.constants import GITHUB_MEDIA_TYPE
"""

from typing import Final

# =============================================================================
# GitHub API Constants
# =============================================================================

# Endpoint of the public GitHub API
DOTCOM_API_ENDPOINT: Final[str] = "https://api.github.com"

# Web URL of github.com (used for display only)
DOTCOM_WEB_URL: Final[str] = "https://github.com"

# API path suffix appended to GitHub Enterprise base URLs
ENTERPRISE_API_PATH: Final[str] = "/api/v3"

# Media type requested for every API call
GITHUB_MEDIA_TYPE: Final[str] = "application/vnd.github.v3+json"

HEADER_ACCEPT: Final[str] = "Accept"
HEADER_AUTHORIZATION: Final[str] = "Authorization"
HEADER_USER_AGENT: Final[str] = "User-Agent"

HTTP_NOT_FOUND: Final[int] = 404
HTTP_ERROR_MIN: Final[int] = 400
HTTP_ERROR_MAX: Final[int] = 600

# =============================================================================
# Configuration Constants
# =============================================================================

ENV_TIMEOUT_SECONDS: Final[str] = "TENTACLE_TIMEOUT_SECONDS"
ENV_USER_AGENT: Final[str] = "TENTACLE_USER_AGENT"
ENV_MAX_CONNECTIONS: Final[str] = "TENTACLE_MAX_CONNECTIONS"
ENV_GITHUB_TOKEN: Final[str] = "GITHUB_TOKEN"
ENV_LOG_DIR: Final[str] = "TENTACLE_LOG_DIR"
ENV_LOG_LEVEL: Final[str] = "TENTACLE_LOG_LEVEL"

DEFAULT_TIMEOUT_SECONDS: Final[int] = 10
DEFAULT_MAX_CONNECTIONS: Final[int] = 10

# Keyring service used by the token store
KEYRING_SERVICE: Final[str] = "tentacle-github-token"
KEYRING_USERNAME: Final[str] = "token"

# =============================================================================
# Logging Constants
# =============================================================================

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"

# Maximum size for rotated log files (bytes)
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB

# Number of rotated log files to keep
LOG_BACKUP_COUNT: Final[int] = 3

LOG_FILE_NAME: Final[str] = "tentacle.log"

# Console and file format strings used by the logger
LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Color mapping for console output levels
LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
