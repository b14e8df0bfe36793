"""GitHub API error payload model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tentacle.decoding import expect_object, optional, required


@dataclass(slots=True, frozen=True)
class GitHubError:
    """Error document returned by the API alongside a 4xx/5xx status.

    Attributes:
        message: Human readable error message
        documentation_url: Link to the relevant API documentation, if sent

    """

    message: str
    documentation_url: str | None = None

    @classmethod
    def decode(cls, value: Any, path: str = "") -> GitHubError:
        """Decode an error document.

        Args:
            value: Parsed JSON value
            path: Location of the value inside the enclosing document

        Returns:
            GitHubError instance

        Raises:
            DecodeError: If the value does not match the error schema

        """
        obj = expect_object(value, path)
        return cls(
            message=required(obj, "message", str, path),
            documentation_url=optional(obj, "documentation_url", str, path),
        )
