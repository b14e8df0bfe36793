"""HTTP session utilities for tentacle.

Creates aiohttp sessions with timeouts and connection limits derived from
the client configuration.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from tentacle.config import ClientConfig


def create_client_timeout(config: ClientConfig) -> aiohttp.ClientTimeout:
    """Derive the request timeout from the configured base seconds."""
    timeout_seconds = config["timeout_seconds"]
    return aiohttp.ClientTimeout(
        total=timeout_seconds * 3,
        sock_read=timeout_seconds * 2,
        sock_connect=timeout_seconds,
    )


def open_http_session(config: ClientConfig) -> aiohttp.ClientSession:
    """Open a configured session; the caller must close it.

    Must be called from a running event loop.
    """
    connector = aiohttp.TCPConnector(limit=config["max_connections"])
    return aiohttp.ClientSession(
        timeout=create_client_timeout(config),
        connector=connector,
    )


@asynccontextmanager
async def create_http_session(
    config: ClientConfig,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Create configured HTTP session.

    Args:
        config: Client configuration

    Yields:
        Configured aiohttp.ClientSession

    """
    async with open_http_session(config) as session:
        yield session
