"""GitHub API client.

The client turns an endpoint into a signed request, sends it with aiohttp
and classifies the answer. Each fetch either returns ``(Response, resource)``
or raises exactly one ``ClientError``:

    transport failure            -> NetworkError
    404                          -> DoesNotExist
    body is not JSON             -> JSONDeserializationError
    4xx/5xx with error document  -> APIError
    JSON of an unexpected shape  -> JSONDecodingError

Cancelling the awaiting task propagates ``asyncio.CancelledError``
unchanged; no parsing happens after a cancellation.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from types import TracebackType
from typing import Any, TypeVar

import aiohttp
import orjson

from tentacle.config import ClientConfig, load_client_config
from tentacle.constants import HTTP_ERROR_MAX, HTTP_ERROR_MIN, HTTP_NOT_FOUND
from tentacle.credentials import (
    BasicCredentials,
    Credentials,
    TokenCredentials,
)
from tentacle.decoding import Decodable, DecodeError
from tentacle.endpoint import Endpoint, ReleaseByTagName
from tentacle.exceptions import (
    APIError,
    DoesNotExist,
    JSONDecodingError,
    JSONDeserializationError,
    NetworkError,
    PreconditionError,
)
from tentacle.http_session import create_http_session, open_http_session
from tentacle.logger import get_logger
from tentacle.models.github_error import GitHubError
from tentacle.models.release import Release
from tentacle.models.repository import Repository
from tentacle.models.response import Response
from tentacle.models.server import Server
from tentacle.request import build_request

logger = get_logger(__name__)

_R = TypeVar("_R", bound=Decodable)


def classify_response(
    status: int,
    response: Response,
    body: bytes,
    resource_type: type[_R],
) -> tuple[Response, _R]:
    """Turn a completed HTTP exchange into a decoded resource.

    A 404 is reported before the body is looked at, so its content never
    matters: a 404 with a non-JSON body is ``DoesNotExist``, not
    ``JSONDeserializationError``. Every other status is parsed first.

    Args:
        status: HTTP status code
        response: Header envelope of the exchange
        body: Raw response body
        resource_type: Decodable type expected on success

    Returns:
        Tuple of (response, decoded resource)

    Raises:
        DoesNotExist: On status 404
        JSONDeserializationError: If the body is not valid JSON
        APIError: On 4xx/5xx with a decodable error document
        JSONDecodingError: If the JSON does not match the expected schema

    """
    if status == HTTP_NOT_FOUND:
        raise DoesNotExist

    try:
        payload: Any = orjson.loads(body)
    except orjson.JSONDecodeError as e:
        raise JSONDeserializationError(e) from e

    if HTTP_ERROR_MIN <= status < HTTP_ERROR_MAX:
        try:
            error = GitHubError.decode(payload)
        except DecodeError as e:
            raise JSONDecodingError(e) from e
        raise APIError(status, response, error)

    try:
        resource = resource_type.decode(payload)
    except DecodeError as e:
        raise JSONDecodingError(e) from e
    return response, resource


class Client:
    """Client for the GitHub API of one server.

    The client is anonymous unless created with a ``token`` or with a
    ``username`` and ``password``. Server and credentials are fixed for the
    client's lifetime, so one client can serve any number of concurrent
    fetches.

    Usage:
        # Injected session (the caller owns it):
        async with aiohttp.ClientSession() as session:
            client = Client(Server.dotcom(), token=token, session=session)
            response, release = await client.release_for_tag(
                "v1.0", Repository("owner", "repo")
            )

        # Client-owned session:
        async with Client(Server.dotcom()) as client:
            response, release = await client.release_for_tag(
                "v1.0", Repository("owner", "repo")
            )

    Without an injected session and outside ``async with``, every fetch
    opens and closes its own session.
    """

    def __init__(
        self,
        server: Server,
        *,
        token: str | None = None,
        username: str | None = None,
        password: str | None = None,
        session: aiohttp.ClientSession | None = None,
        user_agent: str | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            server: Server to talk to
            token: OAuth or personal access token
            username: Username for basic authentication
            password: Password for basic authentication
            session: aiohttp session to send requests with (not closed by
                the client)
            user_agent: User-Agent header value, overriding the configured
                and process-wide ones
            config: Client configuration (loaded from the environment when
                omitted)

        Raises:
            ValueError: If token and username are both given, or only one
                of username and password is given

        """
        self._server = server
        self._credentials = self._make_credentials(token, username, password)
        self._config = config if config is not None else load_client_config()
        self._user_agent = (
            user_agent
            if user_agent is not None
            else self._config.get("user_agent")
        )
        self._session = session
        self._owned_session: aiohttp.ClientSession | None = None

    @staticmethod
    def _make_credentials(
        token: str | None, username: str | None, password: str | None
    ) -> Credentials | None:
        if token is not None:
            if username is not None or password is not None:
                msg = "Use either a token or username/password, not both"
                raise ValueError(msg)
            return TokenCredentials(token)
        if username is not None or password is not None:
            if username is None or password is None:
                msg = "Basic authentication needs both username and password"
                raise ValueError(msg)
            return BasicCredentials(username, password)
        return None

    @classmethod
    def with_token(cls, server: Server, token: str, **kwargs: Any) -> Client:
        """Create a client authenticating with an access token."""
        return cls(server, token=token, **kwargs)

    @classmethod
    def with_basic_auth(
        cls, server: Server, username: str, password: str, **kwargs: Any
    ) -> Client:
        """Create a client authenticating with username and password."""
        return cls(server, username=username, password=password, **kwargs)

    @property
    def server(self) -> Server:
        """The server this client talks to."""
        return self._server

    @property
    def credentials(self) -> Credentials | None:
        """Credentials used to sign requests, or None when anonymous."""
        return self._credentials

    @property
    def is_authenticated(self) -> bool:
        return self._credentials is not None

    def __repr__(self) -> str:
        return (
            f"Client(server={self._server!r}, "
            f"authenticated={self.is_authenticated})"
        )

    async def __aenter__(self) -> Client:
        if self._session is None and self._owned_session is None:
            self._owned_session = open_http_session(self._config)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the session opened by ``async with``, if any."""
        if self._owned_session is not None:
            await self._owned_session.close()
            self._owned_session = None

    @asynccontextmanager
    async def _session_scope(self) -> AsyncIterator[aiohttp.ClientSession]:
        session = self._session or self._owned_session
        if session is not None:
            yield session
            return
        async with create_http_session(self._config) as temporary:
            yield temporary

    async def fetch_one(
        self, endpoint: Endpoint, resource_type: type[_R]
    ) -> tuple[Response, _R]:
        """Fetch and decode a single object from the API.

        Args:
            endpoint: API operation to perform
            resource_type: Decodable type of the expected object

        Returns:
            Tuple of (response envelope, decoded object)

        Raises:
            NetworkError: If the request could not be completed
            DoesNotExist: If the API answered 404
            JSONDeserializationError: If the body is not valid JSON
            APIError: If the API answered with an error document
            JSONDecodingError: If the JSON does not match the schema

        """
        request = build_request(
            self._server,
            endpoint,
            self._credentials,
            self._user_agent,
        )
        logger.debug("%s %s", request.method, request.url)

        try:
            async with self._session_scope() as session:
                async with session.request(
                    request.method, request.url, headers=request.headers
                ) as http_response:
                    status = http_response.status
                    response = Response(http_response.headers)
                    body = await http_response.read()
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.debug("Request to %s failed: %s", request.url, e)
            raise NetworkError(e) from e

        logger.debug("%s %s -> %d", request.method, request.url, status)
        return classify_response(status, response, body, resource_type)

    async def release_for_tag(
        self, tag: str, repository: Repository
    ) -> tuple[Response, Release]:
        """Fetch the release for a tag in a repository.

        If the tag exists but has no GitHub release, ``DoesNotExist`` is
        raised, exactly as for a tag that does not exist. The two cases
        cannot be told apart through this method.

        Args:
            tag: Name of the tag
            repository: Repository on this client's server

        Returns:
            Tuple of (response envelope, release)

        Raises:
            PreconditionError: If the repository is on another server
            ClientError: If the fetch fails (see ``fetch_one``)

        """
        if repository.server != self._server:
            msg = (
                f"Repository {repository} is on {repository.server}, "
                f"but this client talks to {self._server}"
            )
            raise PreconditionError(msg)

        endpoint = ReleaseByTagName(
            owner=repository.owner, repository=repository.name, tag=tag
        )
        return await self.fetch_one(endpoint, Release)
