"""CLI runner executing parsed commands."""

from __future__ import annotations

import getpass
from argparse import Namespace
from collections.abc import Sequence

import aiohttp
import keyring.errors
import orjson

from tentacle.cli.parser import create_parser
from tentacle.client import Client
from tentacle.exceptions import (
    APIError,
    ClientError,
    ConfigurationError,
    DoesNotExist,
)
from tentacle.logger import get_logger, setup_logging
from tentacle.models.release import Release
from tentacle.models.repository import Repository
from tentacle.models.server import Server
from tentacle.token import (
    KeyringTokenStore,
    KeyringUnavailableError,
    resolve_token,
)

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NOT_FOUND = 3


def format_release(release: Release) -> str:
    """Render a release for terminal output."""
    title = f"{release.tag}"
    if release.name and release.name != release.tag:
        title = f"{release.tag}  {release.name}"
    flags = [
        flag
        for flag, enabled in (
            ("draft", release.draft),
            ("prerelease", release.prerelease),
        )
        if enabled
    ]
    if flags:
        title = f"{title}  [{', '.join(flags)}]"

    lines = [title, f"  {release.url}"]
    if release.assets:
        lines.append("  Assets:")
        lines.extend(
            f"    {asset.name} ({asset.content_type})  {asset.url}"
            for asset in release.assets
        )
    else:
        lines.append("  No assets")
    return "\n".join(lines)


class CLIRunner:
    """Parse arguments and dispatch to the command handlers."""

    def __init__(
        self,
        token_store: KeyringTokenStore | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            token_store: Keyring token store (default store when omitted)
            session: aiohttp session to use for API requests

        """
        self.token_store = token_store or KeyringTokenStore()
        self.session = session

    async def run(self, argv: Sequence[str] | None = None) -> int:
        """Run the command given on the command line.

        Returns:
            Process exit code

        """
        args = create_parser().parse_args(argv)
        setup_logging(
            console_level="DEBUG" if args.verbose else None,
            enable_file_logging=args.log_file,
            force=True,
        )

        if args.command == "release":
            return await self._release(args)
        return self._token(args)

    def _credentials(self, args: Namespace) -> dict[str, str]:
        if args.anonymous:
            return {}
        if args.username:
            password = getpass.getpass(f"Password for {args.username}: ")
            return {"username": args.username, "password": password}
        token = args.token or resolve_token(self.token_store)
        return {"token": token} if token else {}

    async def _release(self, args: Namespace) -> int:
        try:
            server = (
                Server.enterprise(args.server)
                if args.server
                else Server.dotcom()
            )
            repository = Repository.parse(args.repository, server)
        except ValueError as e:
            logger.error("%s", e)
            return EXIT_FAILURE

        try:
            client = Client(
                server, session=self.session, **self._credentials(args)
            )
        except ConfigurationError as e:
            logger.error("%s", e)
            return EXIT_FAILURE

        try:
            async with client:
                response, release = await client.release_for_tag(
                    args.tag, repository
                )
        except DoesNotExist:
            logger.error(
                "No release found for tag '%s' in %s", args.tag, repository
            )
            return EXIT_NOT_FOUND
        except APIError as e:
            logger.error(
                "GitHub returned %d: %s", e.status_code, e.error.message
            )
            return EXIT_FAILURE
        except ClientError as e:
            logger.error("%s", e)
            return EXIT_FAILURE

        remaining = response.get("X-RateLimit-Remaining")
        if remaining is not None:
            logger.debug("Rate limit remaining: %s", remaining)

        if args.json:
            output = orjson.dumps(
                release.to_dict(), option=orjson.OPT_INDENT_2
            )
            print(output.decode())
        else:
            print(format_release(release))
        return EXIT_OK

    def _token(self, args: Namespace) -> int:
        if args.status:
            stored = self.token_store.get() is not None
            print("Token stored in keyring" if stored else "No token stored")
            return EXIT_OK

        if args.remove:
            try:
                self.token_store.delete()
            except keyring.errors.PasswordDeleteError:
                logger.error("No token stored in keyring")
                return EXIT_FAILURE
            print("Token removed")
            return EXIT_OK

        token = getpass.getpass("GitHub token: ")
        try:
            self.token_store.set(token)
        except (ValueError, KeyringUnavailableError) as e:
            logger.error("%s", e)
            return EXIT_FAILURE
        print("Token saved")
        return EXIT_OK
