"""Public logging API.

- setup_logging(): Configure the root logger (once, or again with force)
- get_logger(): Module logger, initializing the root on first use
- set_console_level(): Change the console level at runtime
- flush_all_handlers(): Drain the queue and flush handlers
- clear_logger_state(): Reset everything (tests only)
"""

import atexit
import contextlib
import logging
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path

from tentacle.logger.config import load_log_settings
from tentacle.logger.handlers import ROOT_LOGGER_NAME, setup_root_logger
from tentacle.logger.state import get_state


def flush_all_handlers() -> None:
    """Wait for queued records to be handled, then flush every handler."""
    state = get_state()
    if state.queue_listener is None or state.log_queue is None:
        return

    # QueueListener doesn't use task_done(), so poll the queue
    deadline = time.monotonic() + 5.0
    while not state.log_queue.empty() and time.monotonic() < deadline:
        time.sleep(0.01)
    time.sleep(0.05)

    for handler in state.queue_listener.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _cleanup_logging() -> None:
    """Stop the QueueListener on interpreter exit."""
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = False,  # noqa: FBT001, FBT002
    force: bool = False,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Configure logging and return the named logger.

    The root ``tentacle`` logger is set up once per process; pass
    ``force=True`` to replace an existing setup (the CLI does this after
    parsing its options).

    Args:
        name: Logger name, typically __name__
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level ("DEBUG", "INFO")
        log_file: Path to log file (default from load_log_settings())
        enable_file_logging: Whether to write a rotating log file
        force: Re-create handlers even if logging is already set up

    Returns:
        Logger instance

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if force or not state.root_initialized:
            cfg_console, cfg_file, cfg_path = load_log_settings()
            setup_root_logger(
                state,
                console_level or cfg_console,
                file_level or cfg_file,
                log_file or cfg_path,
                enable_file_logging,
            )

    return logging.getLogger(name)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger, initializing the root logger on first use.

    Always use it as ``logger = get_logger(__name__)`` and log with
    %-style arguments, never f-strings.
    """
    return setup_logging(name=name)


def set_console_level(level: str) -> None:
    """Set the level of the console handler.

    Args:
        level: Level name such as "DEBUG" or "WARNING"

    """
    state = get_state()
    if state.queue_listener is None:
        return
    for handler in state.queue_listener.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(
            handler, RotatingFileHandler
        ):
            handler.setLevel(getattr(logging, level.upper(), logging.WARNING))


def clear_logger_state() -> None:
    """Clear global logger state.

    Warning:
        This function is intended for testing only.

    """
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            state.queue_listener.stop()
            state.queue_listener = None
        state.log_queue = None
        state.root_initialized = False

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)
