"""CLI argument parser for tentacle."""

import argparse

from tentacle import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands.

    Returns:
        The configured ArgumentParser instance.

    """
    parser = argparse.ArgumentParser(
        prog="tentacle",
        description="Fetch GitHub releases from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show a release
  %(prog)s release octocat/Hello-World v1.0.0

  # Same, as JSON, from a GitHub Enterprise server
  %(prog)s release --server https://ghe.example.com team/app v2.1 --json

  # Token management (keyring)
  %(prog)s token --save
  %(prog)s token --status
        """,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug output",
    )
    parser.add_argument(
        "--log-file",
        action="store_true",
        help="Also write logs to the rotating log file",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_release_command(subparsers)
    _add_token_command(subparsers)
    return parser


def _add_release_command(subparsers: argparse._SubParsersAction) -> None:
    release = subparsers.add_parser(
        "release", help="Show the release for a tag"
    )
    release.add_argument("repository", help="Repository as OWNER/NAME")
    release.add_argument("tag", help="Tag name")
    release.add_argument(
        "--server",
        metavar="URL",
        help="GitHub Enterprise base URL (default: github.com)",
    )
    auth = release.add_mutually_exclusive_group()
    auth.add_argument(
        "--token", help="Access token (default: GITHUB_TOKEN or keyring)"
    )
    auth.add_argument(
        "--username",
        help="Authenticate with username and password (prompted)",
    )
    auth.add_argument(
        "--anonymous",
        action="store_true",
        help="Do not send any credentials",
    )
    release.add_argument(
        "--json", action="store_true", help="Print the release as JSON"
    )


def _add_token_command(subparsers: argparse._SubParsersAction) -> None:
    token = subparsers.add_parser(
        "token", help="Manage the GitHub token stored in the keyring"
    )
    action = token.add_mutually_exclusive_group(required=True)
    action.add_argument("--save", action="store_true", help="Save a token")
    action.add_argument(
        "--remove", action="store_true", help="Remove the stored token"
    )
    action.add_argument(
        "--status", action="store_true", help="Show whether a token is stored"
    )
