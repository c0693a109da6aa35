"""ViewModel entity tests."""

import pytest
from pydantic import ValidationError

from memesearch.domain.entities.view_model import ResponseMetadata, SearchStatus, ViewItem, ViewModel


def test_json_uses_camel_case_and_status_strings():
    view = ViewModel(status=SearchStatus.NO_RESULTS, search_term="zzz")
    assert view.to_json() == {"status": "noResults", "searchTerm": "zzz", "items": []}


def test_accepts_alias_on_input():
    view = ViewModel(status=SearchStatus.EMPTY_SEARCH, searchTerm="")
    assert view.search_term == ""


def test_items_rejected_outside_results_found():
    item = ViewItem(id="1", name="n", image="i", url="u")
    with pytest.raises(ValidationError):
        ViewModel(status=SearchStatus.NO_RESULTS, search_term="x", items=[item])


def test_metadata_headers():
    assert ResponseMetadata().headers == {}
    meta = ResponseMetadata(cache_control="max-age=1")
    assert meta.headers == {"Cache-Control": "max-age=1"}
