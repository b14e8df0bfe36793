"""Request builder turning an endpoint into an outbound HTTP request."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import quote

from yarl import URL

from tentacle.constants import (
    GITHUB_MEDIA_TYPE,
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_USER_AGENT,
)
from tentacle.credentials import Credentials
from tentacle.endpoint import Endpoint
from tentacle.models.server import Server
from tentacle.user_agent import get_user_agent


@dataclass(slots=True, frozen=True)
class Request:
    """A fully formed GET request.

    Attributes:
        url: Absolute, encoded request URL
        headers: Header fields to send
        method: HTTP method

    """

    url: URL
    headers: dict[str, str] = field(repr=False)
    method: str = "GET"


# Characters a path segment may carry unescaped (RFC 3986 pchar)
_SEGMENT_SAFE = "!$&'()*+,;=:@"

_DOT_SEGMENTS = {".": "%2E", "..": "%2E%2E"}


def _encode_segment(segment: str) -> str:
    if segment in _DOT_SEGMENTS:
        return _DOT_SEGMENTS[segment]
    return quote(segment, safe=_SEGMENT_SAFE)


def build_url(base_address: str, endpoint: Endpoint) -> URL:
    """Append the endpoint path to an API base address.

    Works whether or not the base address ends with a slash. Every segment
    of the endpoint path is percent-encoded, ``.`` and ``..`` included, so
    no component can step outside the base path.
    """
    base = URL(base_address)
    path = "/".join(_encode_segment(s) for s in endpoint.path.split("/"))
    return base.with_path(base.raw_path.rstrip("/") + path, encoded=True)


def build_request(
    server: Server,
    endpoint: Endpoint,
    credentials: Credentials | None = None,
    user_agent: str | None = None,
) -> Request:
    """Build the request for ``endpoint`` on ``server``.

    Args:
        server: Server whose API is addressed
        endpoint: API operation to request
        credentials: Credentials to sign the request with, if any
        user_agent: User agent override; falls back to the process-wide value

    Returns:
        Request carrying the Accept, User-Agent and Authorization headers

    """
    headers = {HEADER_ACCEPT: GITHUB_MEDIA_TYPE}

    agent = user_agent if user_agent is not None else get_user_agent()
    if agent is not None:
        headers[HEADER_USER_AGENT] = agent

    if credentials is not None:
        headers[HEADER_AUTHORIZATION] = (
            credentials.authorization_header_value()
        )

    return Request(url=build_url(server.endpoint, endpoint), headers=headers)
