"""Client configuration loaded from the environment."""

import os
from typing import TypedDict

from tentacle.constants import (
    DEFAULT_MAX_CONNECTIONS,
    DEFAULT_TIMEOUT_SECONDS,
    ENV_MAX_CONNECTIONS,
    ENV_TIMEOUT_SECONDS,
    ENV_USER_AGENT,
)
from tentacle.exceptions import ConfigurationError


class ClientConfig(TypedDict):
    """Network and identification options for a client."""

    timeout_seconds: int
    max_connections: int
    user_agent: str | None


def default_client_config() -> ClientConfig:
    """Return the built-in defaults, ignoring the environment."""
    return ClientConfig(
        timeout_seconds=DEFAULT_TIMEOUT_SECONDS,
        max_connections=DEFAULT_MAX_CONNECTIONS,
        user_agent=None,
    )


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ConfigurationError(msg) from None
    if value <= 0:
        msg = f"{name} must be positive, got {value}"
        raise ConfigurationError(msg)
    return value


def load_client_config() -> ClientConfig:
    """Build a ClientConfig from environment variables.

    Environment Variables:
        TENTACLE_TIMEOUT_SECONDS: Base network timeout in seconds
        TENTACLE_MAX_CONNECTIONS: Connection pool size
        TENTACLE_USER_AGENT: User-Agent header for every request

    Returns:
        ClientConfig with defaults for unset variables

    Raises:
        ConfigurationError: If a numeric variable is not a positive integer

    """
    user_agent = os.getenv(ENV_USER_AGENT, "").strip() or None
    return ClientConfig(
        timeout_seconds=_positive_int(
            ENV_TIMEOUT_SECONDS, DEFAULT_TIMEOUT_SECONDS
        ),
        max_connections=_positive_int(
            ENV_MAX_CONNECTIONS, DEFAULT_MAX_CONNECTIONS
        ),
        user_agent=user_agent,
    )
