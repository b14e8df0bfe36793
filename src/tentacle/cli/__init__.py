"""Command-line interface for tentacle."""

from tentacle.cli.parser import create_parser
from tentacle.cli.runner import CLIRunner

__all__ = ["CLIRunner", "create_parser"]
