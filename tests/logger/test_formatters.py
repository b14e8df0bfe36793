"""Tests for console formatters."""

import logging

from tentacle.constants import LOG_COLORS
from tentacle.logger import ColoredConsoleFormatter, HybridConsoleFormatter

FORMAT = "%(name)s - %(levelname)s - %(message)s"


def _record(level, message="hello %s", args=("world",)):
    return logging.LogRecord(
        name="tentacle.client",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=args,
        exc_info=None,
    )


def test_info_is_message_only():
    formatter = HybridConsoleFormatter(FORMAT)
    assert formatter.format(_record(logging.INFO)) == "hello world"


def test_warning_is_structured_and_colored():
    formatter = HybridConsoleFormatter(FORMAT)
    output = formatter.format(_record(logging.WARNING))
    assert output.startswith("tentacle.client - ")
    assert LOG_COLORS["WARNING"] in output
    assert output.endswith(" - hello world")


def test_colored_formatter_restores_level_name():
    record = _record(logging.ERROR)
    ColoredConsoleFormatter("%(levelname)s").format(record)
    assert record.levelname == "ERROR"
