"""Tests for logging setup."""

import logging
from logging.handlers import QueueHandler, RotatingFileHandler

import pytest

from tentacle.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    get_state,
    set_console_level,
    setup_logging,
)


@pytest.fixture
def fresh_logging():
    clear_logger_state()
    yield
    clear_logger_state()


def test_get_logger_initializes_root(fresh_logging):
    logger = get_logger("tentacle.example")

    root = logging.getLogger("tentacle")
    assert logger.name == "tentacle.example"
    assert get_state().root_initialized is True
    assert root.propagate is False
    assert [type(h) for h in root.handlers] == [QueueHandler]


def test_setup_is_idempotent_without_force(fresh_logging):
    setup_logging()
    listener = get_state().queue_listener
    setup_logging(console_level="DEBUG")
    assert get_state().queue_listener is listener


def test_force_replaces_handlers(fresh_logging):
    setup_logging()
    listener = get_state().queue_listener
    setup_logging(force=True)
    assert get_state().queue_listener is not listener
    assert len(logging.getLogger("tentacle").handlers) == 1


def test_file_logging(fresh_logging, tmp_path):
    log_file = tmp_path / "logs" / "tentacle.log"
    logger = setup_logging(
        "tentacle.example",
        log_file=log_file,
        enable_file_logging=True,
        force=True,
    )
    logger.info("written %d", 1)
    flush_all_handlers()

    handlers = get_state().queue_listener.handlers
    assert any(isinstance(h, RotatingFileHandler) for h in handlers)
    assert "written 1" in log_file.read_text(encoding="utf-8")


def test_set_console_level(fresh_logging):
    setup_logging(console_level="WARNING", force=True)
    set_console_level("debug")
    console = get_state().queue_listener.handlers[0]
    assert console.level == logging.DEBUG
