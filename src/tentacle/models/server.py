"""GitHub server model."""

from __future__ import annotations

from dataclasses import dataclass

from tentacle.constants import (
    DOTCOM_API_ENDPOINT,
    DOTCOM_WEB_URL,
    ENTERPRISE_API_PATH,
)


@dataclass(slots=True, frozen=True)
class Server:
    """A GitHub instance that hosts repositories.

    Use ``Server.dotcom()`` for github.com and ``Server.enterprise(url)`` for
    a GitHub Enterprise installation. Two servers are equal when they are the
    same kind and point at the same (normalized) URL.

    Attributes:
        url: Web URL of the instance without a trailing slash, or None for
            github.com

    """

    url: str | None = None

    def __post_init__(self) -> None:
        if self.url is not None:
            object.__setattr__(self, "url", self.url.rstrip("/"))

    @classmethod
    def dotcom(cls) -> Server:
        """Return the server for github.com."""
        return cls()

    @classmethod
    def enterprise(cls, url: str) -> Server:
        """Return the server for a GitHub Enterprise instance.

        Args:
            url: Base web URL of the instance, e.g. ``https://ghe.example.com``

        Raises:
            ValueError: If the URL is empty

        """
        normalized = url.strip().rstrip("/")
        if not normalized:
            msg = "Enterprise server URL must not be empty"
            raise ValueError(msg)
        return cls(url=normalized)

    @property
    def is_enterprise(self) -> bool:
        """Whether this server is a GitHub Enterprise instance."""
        return self.url is not None

    @property
    def endpoint(self) -> str:
        """Base address of the REST API on this server."""
        if self.url is None:
            return DOTCOM_API_ENDPOINT
        return f"{self.url}{ENTERPRISE_API_PATH}"

    def __str__(self) -> str:
        return self.url if self.url is not None else DOTCOM_WEB_URL
