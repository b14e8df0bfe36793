"""Credentials for authenticating against the GitHub API.

A client is either anonymous (no credentials at all) or holds exactly one
of the credential types below. Each renders itself into the value of the
``Authorization`` header; secrets never appear in ``repr()``.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class TokenCredentials:
    """OAuth or personal access token."""

    token: str = field(repr=False)

    def authorization_header_value(self) -> str:
        """Return ``token <t>``."""
        return f"token {self.token}"


@dataclass(slots=True, frozen=True)
class BasicCredentials:
    """Username and password for HTTP basic authentication."""

    username: str
    password: str = field(repr=False)

    def authorization_header_value(self) -> str:
        """Return ``Basic <base64(username:password)>``.

        The pair is encoded as UTF-8 so any Unicode text is accepted.
        """
        pair = f"{self.username}:{self.password}".encode()
        return f"Basic {base64.b64encode(pair).decode('ascii')}"


Credentials = TokenCredentials | BasicCredentials
