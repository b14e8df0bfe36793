"""Typed asyncio client for fetching GitHub releases.

Example:
    >>> async with Client(Server.dotcom(), token=token) as client:
    ...     response, release = await client.release_for_tag(
    ...         "v1.0.0", Repository("octocat", "Hello-World")
    ...     )

"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("tentacle")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"

from tentacle.client import Client  # noqa: E402
from tentacle.credentials import (  # noqa: E402
    BasicCredentials,
    TokenCredentials,
)
from tentacle.decoding import (  # noqa: E402
    DecodeError,
    MissingKey,
    TypeMismatch,
)
from tentacle.endpoint import ReleaseByTagName  # noqa: E402
from tentacle.exceptions import (  # noqa: E402
    APIError,
    ClientError,
    DoesNotExist,
    JSONDecodingError,
    JSONDeserializationError,
    NetworkError,
    PreconditionError,
)
from tentacle.models import (  # noqa: E402
    Asset,
    GitHubError,
    Release,
    Repository,
    Response,
    Server,
)
from tentacle.user_agent import set_user_agent  # noqa: E402

__all__ = [
    "APIError",
    "Asset",
    "BasicCredentials",
    "Client",
    "ClientError",
    "DecodeError",
    "DoesNotExist",
    "GitHubError",
    "JSONDecodingError",
    "JSONDeserializationError",
    "MissingKey",
    "NetworkError",
    "PreconditionError",
    "Release",
    "ReleaseByTagName",
    "Repository",
    "Response",
    "Server",
    "TokenCredentials",
    "TypeMismatch",
    "__version__",
    "set_user_agent",
]
