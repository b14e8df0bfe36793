"""Logical GitHub API operations and their request paths."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ReleaseByTagName:
    """The release attached to a tag in a repository.

    Path components are used literally; escaping happens when the request
    URL is built.
    """

    owner: str
    repository: str
    tag: str

    @property
    def path(self) -> str:
        return (
            f"/repos/{self.owner}/{self.repository}"
            f"/releases/tags/{self.tag}"
        )


Endpoint = ReleaseByTagName
