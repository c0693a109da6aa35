"""Search Port - interface for the upstream meme search provider."""

from typing import Literal, Protocol

from pydantic import BaseModel, ConfigDict


class RawMemeImage(BaseModel):
    """Image renditions attached to an upstream meme."""

    medium: str

    model_config = ConfigDict(extra="ignore")


class RawMeme(BaseModel):
    """Meme payload as returned by the provider."""

    name: str
    url: str
    image: RawMemeImage | None = None

    model_config = ConfigDict(extra="ignore")


class RawSearchItem(BaseModel):
    """Single upstream search hit. Untrusted until validated."""

    id: str
    meme: RawMeme

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class UpstreamAbsent(BaseModel):
    """Provider returned no body, null, or a non-array body."""

    kind: Literal["absent"] = "absent"


class UpstreamEmpty(BaseModel):
    """Provider returned an empty array."""

    kind: Literal["empty"] = "empty"


class UpstreamItems(BaseModel):
    """Provider returned a non-empty array (after dropping malformed entries)."""

    kind: Literal["items"] = "items"
    items: list[RawSearchItem]


UpstreamResult = UpstreamAbsent | UpstreamEmpty | UpstreamItems


class SearchUpstreamError(Exception):
    """Transport-level failure talking to the search provider.

    Raised for network errors, timeouts, non-2xx responses and bodies that
    are not valid JSON.
    """

    def __init__(self, message: str, url: str = "", status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class SearchClientPort(Protocol):
    """Interface for meme search providers."""

    async def search(self, term: str) -> UpstreamResult:
        """Query the provider for `term` and return the parsed result."""
        ...
