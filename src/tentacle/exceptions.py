"""Exception classes for tentacle operations.

Every failed fetch raises exactly one ``ClientError`` subclass. The
subclasses form a closed set and compare structurally: two errors are equal
when they are of the same class and carry equal payloads. Underlying
exceptions (network, JSON parsing) compare by identity.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tentacle.decoding import DecodeError
    from tentacle.models.github_error import GitHubError
    from tentacle.models.response import Response


class ClientError(Exception):
    """Base exception for failed API fetches."""

    error_prefix: str = "GitHub request failed"

    def __init__(self, message: str) -> None:
        """Initialize error with message.

        Args:
            message: Error message describing the failure.

        """
        super().__init__(message)
        self.message = message

    def _fields(self) -> tuple[Any, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._fields() == other._fields()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._fields()))

    def __str__(self) -> str:
        """Return formatted error message."""
        return f"{self.error_prefix}: {self.message}"


class NetworkError(ClientError):
    """Raised when the request fails at the transport level."""

    error_prefix = "Network error"

    def __init__(self, cause: BaseException) -> None:
        super().__init__(str(cause) or type(cause).__name__)
        self.cause = cause

    def _fields(self) -> tuple[Any, ...]:
        return (self.cause,)


class JSONDeserializationError(ClientError):
    """Raised when the response body is not valid JSON."""

    error_prefix = "Invalid JSON in response"

    def __init__(self, cause: Exception) -> None:
        super().__init__(str(cause))
        self.cause = cause

    def _fields(self) -> tuple[Any, ...]:
        return (self.cause,)


class JSONDecodingError(ClientError):
    """Raised when valid JSON does not match the expected schema."""

    error_prefix = "Unexpected JSON in response"

    def __init__(self, cause: DecodeError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    def _fields(self) -> tuple[Any, ...]:
        return (self.cause,)


class APIError(ClientError):
    """Raised when the API answers with an error status and payload.

    Attributes:
        status_code: HTTP status of the response (400-599, never 404)
        response: Header envelope of the response
        error: Decoded error document

    """

    error_prefix = "GitHub API error"

    def __init__(
        self, status_code: int, response: Response, error: GitHubError
    ) -> None:
        super().__init__(f"{status_code} {error.message}")
        self.status_code = status_code
        self.response = response
        self.error = error

    def _fields(self) -> tuple[Any, ...]:
        return (self.status_code, self.response, self.error)


class DoesNotExist(ClientError):
    """Raised when the requested object does not exist (HTTP 404).

    For releases this also covers a tag that exists without a release; the
    API does not distinguish the two cases.
    """

    error_prefix = "Not found"

    def __init__(self) -> None:
        super().__init__("the requested object does not exist")


class PreconditionError(AssertionError):
    """Raised when a caller violates an API contract.

    This signals a programming error and is deliberately not a
    ``ClientError``.
    """


class ConfigurationError(Exception):
    """Raised when configuration values are invalid."""
