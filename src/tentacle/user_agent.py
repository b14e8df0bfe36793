"""Process-wide default user agent.

Applications set the user agent once during start-up, before any client
is created. It is the fallback for every request; a client uses the first
value found in this order:

1. the ``user_agent`` argument of ``Client``
2. ``user_agent`` in its ``ClientConfig`` (``TENTACLE_USER_AGENT`` when the
   configuration is loaded from the environment)
3. the value set here with ``set_user_agent()``

Without any of them no User-Agent header is added.
"""

import threading

from tentacle.logger import get_logger

logger = get_logger(__name__)


class _UserAgentState:
    """Container for the write-once user agent value."""

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.value: str | None = None


_state = _UserAgentState()


def set_user_agent(value: str) -> None:
    """Set the process-wide user agent.

    Args:
        value: User-Agent header value, e.g. ``my-app/1.0``

    Raises:
        ValueError: If the value is empty
        RuntimeError: If a user agent was already set

    """
    if not value.strip():
        msg = "User agent must not be empty"
        raise ValueError(msg)
    with _state.lock:
        if _state.value is not None:
            msg = "User agent has already been set for this process"
            raise RuntimeError(msg)
        _state.value = value
    logger.debug("Process user agent set to %s", value)


def get_user_agent() -> str | None:
    """Return the process-wide user agent, or None if unset."""
    return _state.value


def reset_user_agent() -> None:
    """Clear the process-wide user agent.

    Warning:
        Intended for tests only.

    """
    with _state.lock:
        _state.value = None
