"""GitHub repository model."""

from __future__ import annotations

from dataclasses import dataclass, field

from tentacle.models.server import Server


@dataclass(slots=True, frozen=True, eq=False)
class Repository:
    """A repository identified by owner and name on a server.

    GitHub treats owner and repository names case-insensitively, so equality
    and hashing ignore case for both. The server must match exactly.

    Attributes:
        owner: User or organization that owns the repository
        name: Repository name
        server: Server hosting the repository

    """

    owner: str
    name: str
    server: Server = field(default_factory=Server.dotcom)

    @classmethod
    def parse(cls, slug: str, server: Server | None = None) -> Repository:
        """Build a repository from an ``owner/name`` string.

        Args:
            slug: Repository in ``owner/name`` form
            server: Hosting server (github.com when omitted)

        Returns:
            Repository instance

        Raises:
            ValueError: If the slug is not exactly two non-empty parts

        """
        parts = slug.strip().strip("/").split("/")
        if len(parts) != 2 or not all(parts):  # noqa: PLR2004
            msg = f"Invalid repository '{slug}', expected OWNER/NAME"
            raise ValueError(msg)
        owner, name = parts
        return cls(owner, name, server if server is not None else Server())

    def _key(self) -> tuple[str, str, Server]:
        return (self.owner.lower(), self.name.lower(), self.server)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Repository):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"
