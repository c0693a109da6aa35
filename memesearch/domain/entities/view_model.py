"""View-model entities handed from the resolver to the presentation layer."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SearchStatus(str, Enum):
    """Mutually exclusive render states of the search page."""

    EMPTY_SEARCH = "emptySearch"
    NO_RESULTS = "noResults"
    RESULTS_FOUND = "resultsFound"


class ViewItem(BaseModel):
    """Normalized search hit ready for rendering."""

    id: str
    name: str
    image: str
    url: str


class ViewModel(BaseModel):
    """What the page should render for one request."""

    status: SearchStatus
    search_term: str = Field("", alias="searchTerm")
    items: list[ViewItem] = []

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def _items_only_with_results(self) -> "ViewModel":
        if self.items and self.status is not SearchStatus.RESULTS_FOUND:
            raise ValueError(f"items must be empty for status {self.status.value}")
        return self

    def to_json(self) -> dict:
        """Serialize with camelCase keys and status strings."""
        return self.model_dump(mode="json", by_alias=True)


class ResponseMetadata(BaseModel):
    """Headers to attach to the rendered response."""

    cache_control: str | None = None

    @property
    def headers(self) -> dict[str, str]:
        """HTTP headers derived from the metadata."""
        if self.cache_control is None:
            return {}
        return {"Cache-Control": self.cache_control}
