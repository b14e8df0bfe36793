"""Response envelope carrying HTTP metadata separately from the payload."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from multidict import CIMultiDict, CIMultiDictProxy


class Response(Mapping[str, str]):
    """Header fields of a completed API exchange.

    Lookups are case-insensitive, as HTTP header names are. The envelope is
    read-only and hashable so it can take part in error equality; two
    envelopes are equal when they hold the same fields regardless of the
    case of their names.

    Example:
        >>> response = Response({"X-RateLimit-Remaining": "59"})
        >>> response["x-ratelimit-remaining"]
        '59'

    """

    __slots__ = ("_headers",)

    def __init__(
        self,
        headers: Mapping[str, str] | Iterable[tuple[str, str]] = (),
    ) -> None:
        """Copy the given header fields into a read-only mapping.

        Args:
            headers: Header fields, e.g. ``aiohttp.ClientResponse.headers``

        """
        self._headers: CIMultiDictProxy[str] = CIMultiDictProxy(
            CIMultiDict(headers)
        )

    @property
    def headers(self) -> CIMultiDictProxy[str]:
        """All header fields, duplicates included."""
        return self._headers

    def get_all(self, name: str) -> list[str]:
        """Return every value sent for ``name`` (empty if absent)."""
        return self._headers.getall(name, [])

    def __getitem__(self, name: str) -> str:
        return self._headers[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def _key(self) -> tuple[tuple[str, str], ...]:
        return tuple(
            sorted(
                (name.lower(), value) for name, value in self._headers.items()
            )
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Response):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Response({dict(self._headers.items())!r})"
