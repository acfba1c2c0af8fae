from __future__ import annotations

import pytest

from unsplash_connector.domain.models import SearchRequest
from unsplash_connector.services.exceptions import ValidationError
from unsplash_connector.services.query_builder import build_query


def test_build_query_sets_fixed_parameters():
    params = build_query(SearchRequest(q="mountains"), "key")

    assert params == {
        "query": "mountains",
        "sort": "relevance",
        "per_page": 50,
        "client_id": "key",
    }


def test_build_query_keeps_non_empty_filters_only():
    request = SearchRequest(q="sea", orientation="landscape", color="", page=3)

    params = build_query(request, "key")

    assert params["orientation"] == "landscape"
    assert params["page"] == 3
    assert "color" not in params


@pytest.mark.parametrize("query", ["", "   "])
def test_build_query_rejects_empty_text(query):
    with pytest.raises(ValidationError):
        build_query(SearchRequest(q=query), "key")


def test_build_query_drops_missing_access_key():
    params = build_query(SearchRequest(q="sea"), "")
    assert "client_id" not in params


def test_search_request_from_params_ignores_unknown_keys():
    request = SearchRequest.from_params(
        {"q": " forest ", "color": None, "page": "2", "foo": "bar"}
    )

    assert request.q == "forest"
    assert request.color == ""
    assert request.page == 2


@pytest.mark.parametrize("page", [0, -1, "abc", ""])
def test_search_request_drops_invalid_page(page):
    assert SearchRequest.from_params({"q": "x", "page": page}).page is None
