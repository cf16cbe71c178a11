import httpx
import pytest

from jeopardy.data.http_source import HttpTriviaSource, clean_text
from jeopardy.errors import SourceUnavailable

API = "https://trivia.test/api"


def _source(handler) -> HttpTriviaSource:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpTriviaSource(API, client=client)


def test_list_categories_hits_count_endpoint():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["count"] = request.url.params.get("count")
        return httpx.Response(200, json=[
            {"id": 2, "title": "baseball", "clues_count": 5},
            {"id": 3, "title": "odd jobs", "clues_count": 5},
        ])

    categories = _source(handler).list_categories(100)

    assert seen == {"path": "/api/categories", "count": "100"}
    assert [(c.id, c.title) for c in categories] == [(2, "baseball"), (3, "odd jobs")]


def test_category_detail_parses_and_cleans_clues():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/category"
        assert request.url.params.get("id") == "2"
        return httpx.Response(200, json={
            "id": 2,
            "title": "baseball",
            "clues": [
                {"question": "Who wrote &quot;Hamlet&quot;?", "answer": "<i>Shakespeare</i>", "value": 200},
                {"question": "2+2", "answer": 4, "value": 400},
            ],
        })

    detail = _source(handler).get_category_detail(2)

    assert detail.title == "baseball"
    assert [(c.question, c.answer) for c in detail.clues] == [
        ('Who wrote "Hamlet"?', "Shakespeare"),
        ("2+2", "4"),
    ]


def test_http_error_status_becomes_source_unavailable():
    source = _source(lambda request: httpx.Response(503))
    with pytest.raises(SourceUnavailable) as excinfo:
        source.list_categories(10)
    assert excinfo.value.operation == "list_categories"
    assert "503" in str(excinfo.value)


def test_transport_error_becomes_source_unavailable():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(SourceUnavailable) as excinfo:
        _source(handler).get_category_detail(9)
    assert excinfo.value.operation == "get_category_detail"


def test_invalid_json_becomes_source_unavailable():
    source = _source(lambda request: httpx.Response(200, content=b"<html>oops</html>"))
    with pytest.raises(SourceUnavailable):
        source.list_categories(10)


def test_malformed_payloads_become_source_unavailable():
    listing = _source(lambda request: httpx.Response(200, json=[{"title": "no id"}]))
    with pytest.raises(SourceUnavailable):
        listing.list_categories(10)

    detail = _source(lambda request: httpx.Response(200, json={"title": "x", "clues": [{"question": "q"}]}))
    with pytest.raises(SourceUnavailable):
        detail.get_category_detail(1)

    not_a_list = _source(lambda request: httpx.Response(200, json={"categories": []}))
    with pytest.raises(SourceUnavailable):
        not_a_list.list_categories(10)


def test_injected_client_is_left_open():
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200, json=[])))
    with HttpTriviaSource(API, client=client) as source:
        assert source.list_categories(1) == []
    assert not client.is_closed


@pytest.mark.parametrize("raw, expected", [
    (None, ""),
    (42, "42"),
    ("<i>the</i> Bard", "the Bard"),
    ("AT&amp;T", "AT&T"),
    ("Is 3 < 5 and 7 > 4?", "Is 3 < 5 and 7 > 4?"),
    ("x &lt; y <b>true</b>", "x < y true"),
    ("<a href=\"#\">link</a><br/>", "link"),
    ("  spaced \n out ", "spaced out"),
])
def test_clean_text(raw, expected):
    assert clean_text(raw) == expected
