"""Main CLI entry point for tentacle."""

import sys

import uvloop

from tentacle.cli import CLIRunner
from tentacle.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Run the CLI application with uvloop.

    Exits with the code returned by the command.
    """
    try:
        exit_code = uvloop.run(CLIRunner().run())
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        sys.exit(130)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
