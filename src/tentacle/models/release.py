"""GitHub release and asset models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tentacle.decoding import (
    expect_object,
    optional,
    required,
    required_list,
)


@dataclass(slots=True, frozen=True)
class Asset:
    """A file attached to a release.

    Attributes:
        id: Asset ID
        name: Asset filename
        content_type: MIME type reported by GitHub
        url: Direct download URL for the asset

    """

    id: int
    name: str
    content_type: str
    url: str

    @classmethod
    def decode(cls, value: Any, path: str = "") -> Asset:
        """Decode an asset object from the releases API."""
        obj = expect_object(value, path)
        return cls(
            id=required(obj, "id", int, path),
            name=required(obj, "name", str, path),
            content_type=required(obj, "content_type", str, path),
            url=required(obj, "browser_download_url", str, path),
        )


@dataclass(slots=True, frozen=True)
class Release:
    """A GitHub release with its metadata and assets.

    Attributes:
        id: Release ID
        tag: Name of the git tag the release points at
        url: Web URL of the release page
        name: Release title (None when the release has no title)
        draft: Whether this is an unpublished draft
        prerelease: Whether this is a prerelease
        assets: Files attached to the release

    """

    id: int
    tag: str
    url: str
    name: str | None
    draft: bool
    prerelease: bool
    assets: tuple[Asset, ...] = ()

    @classmethod
    def decode(cls, value: Any, path: str = "") -> Release:
        """Decode a release object from the releases API.

        Args:
            value: Parsed JSON value
            path: Location of the value inside the enclosing document

        Returns:
            Release instance

        Raises:
            DecodeError: If the value does not match the release schema

        """
        obj = expect_object(value, path)
        return cls(
            id=required(obj, "id", int, path),
            tag=required(obj, "tag_name", str, path),
            url=required(obj, "html_url", str, path),
            name=optional(obj, "name", str, path),
            draft=required(obj, "draft", bool, path),
            prerelease=required(obj, "prerelease", bool, path),
            assets=required_list(obj, "assets", Asset, path),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert Release to a JSON-serializable dictionary.

        Keys follow the API's naming so the output can be decoded again.
        """
        return {
            "id": self.id,
            "tag_name": self.tag,
            "html_url": self.url,
            "name": self.name,
            "draft": self.draft,
            "prerelease": self.prerelease,
            "assets": [
                {
                    "id": asset.id,
                    "name": asset.name,
                    "content_type": asset.content_type,
                    "browser_download_url": asset.url,
                }
                for asset in self.assets
            ],
        }
