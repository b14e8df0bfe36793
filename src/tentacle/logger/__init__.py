"""Logging utilities for tentacle.

Records from every ``tentacle.*`` logger propagate to the root ``tentacle``
logger, whose only handler is a QueueHandler. A QueueListener thread feeds
the console handler (and, when enabled, a rotating file handler), so async
code never blocks on logging I/O.

Usage:
    >>> from tentacle.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("GET %s", url)  # %-style formatting only

Environment Variables:
    TENTACLE_LOG_LEVEL: Console log level override
    TENTACLE_LOG_DIR: Directory for the log file

Never log credentials or Authorization header values.
"""

from tentacle.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
)
from tentacle.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    set_console_level,
    setup_logging,
)
from tentacle.logger.state import get_state

__all__ = [
    "ColoredConsoleFormatter",
    "HybridConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "get_state",
    "set_console_level",
    "setup_logging",
]
