"""Value objects and decodable GitHub API models."""

from tentacle.models.github_error import GitHubError
from tentacle.models.release import Asset, Release
from tentacle.models.repository import Repository
from tentacle.models.response import Response
from tentacle.models.server import Server

__all__ = [
    "Asset",
    "GitHubError",
    "Release",
    "Repository",
    "Response",
    "Server",
]
