"""Pytest configuration and fixtures for tentacle tests."""

import logging
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import orjson
import pytest

from tentacle.config import ClientConfig, default_client_config
from tentacle.user_agent import reset_user_agent


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation so caplog sees records from tentacle loggers.

    The root ``tentacle`` logger is created with propagate=False in
    production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("tentacle"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logging.getLogger(name).propagate = propagate_value


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep tests away from the user's environment and log directory."""
    monkeypatch.setenv("TENTACLE_LOG_DIR", str(tmp_path / "logs"))
    for name in (
        "GITHUB_TOKEN",
        "TENTACLE_USER_AGENT",
        "TENTACLE_TIMEOUT_SECONDS",
        "TENTACLE_MAX_CONNECTIONS",
        "TENTACLE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_user_agent()
    yield
    reset_user_agent()


@pytest.fixture
def client_config() -> ClientConfig:
    """Provide the built-in client configuration."""
    return default_client_config()


@pytest.fixture
def release_payload() -> dict[str, Any]:
    """Provide a release document as returned by the releases API."""
    return {
        "id": 2420953,
        "tag_name": "v1.0.0",
        "html_url": (
            "https://github.com/octocat/Hello-World/releases/tag/v1.0.0"
        ),
        "name": "First release",
        "draft": False,
        "prerelease": False,
        "assets": [
            {
                "id": 1125,
                "name": "hello.zip",
                "content_type": "application/zip",
                "browser_download_url": (
                    "https://github.com/octocat/Hello-World/releases/"
                    "download/v1.0.0/hello.zip"
                ),
            }
        ],
    }


def _make_http_response(
    status: int = 200,
    body: bytes | Any = b"",
    headers: dict[str, str] | None = None,
) -> AsyncMock:
    """Build a mock aiohttp response usable with ``async with``.

    Non-bytes bodies are serialized with orjson.
    """
    if not isinstance(body, bytes):
        body = orjson.dumps(body)
    response = AsyncMock()
    response.__aenter__.return_value = response
    response.status = status
    response.headers = headers or {}
    response.read = AsyncMock(return_value=body)
    return response


def _make_session(response: AsyncMock | None = None) -> MagicMock:
    """Build a mock aiohttp.ClientSession whose request() yields response."""
    session = MagicMock()
    session.request.return_value = response or _make_http_response()
    return session


@pytest.fixture
def make_http_response():
    """Provide a factory for mock aiohttp responses."""
    return _make_http_response


@pytest.fixture
def make_session():
    """Provide a factory for mock aiohttp sessions."""
    return _make_session
