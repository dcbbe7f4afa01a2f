"""Tests for the Wikipedia extracts client (httpx MockTransport, no network)."""

from __future__ import annotations

import httpx
import pytest

from elementsgrid.errors import FetchError
from elementsgrid.wiki.client import build_query_params
from tests.conftest import wiki_payload


def test_query_params():
    params = build_query_params(["Hydrogen", "Mercury (element)"])
    assert params == {
        "action": "query",
        "prop": "extracts",
        "exintro": "true",
        "exsentences": "5",
        "explaintext": "true",
        "format": "json",
        "formatversion": "2",
        "titles": "Hydrogen|Mercury (element)",
    }


def test_query_extracts_parses_pages(make_client, fake_wiki):
    with make_client(fake_wiki) as client:
        pages = client.query_extracts(["Hydrogen", "Helium"])

    assert [p.title for p in pages] == ["Hydrogen", "Helium"]
    assert pages[0].extract.startswith("Hydrogen is")
    assert isinstance(pages[0].pageid, int)

    request = fake_wiki.requests[0]
    assert request.method == "GET"
    assert request.url.host == "wiki.test"
    assert request.url.params["titles"] == "Hydrogen|Helium"
    assert request.headers["User-Agent"].startswith("elementsgrid/")


def test_http_error_status_raises(make_client):
    client = make_client(lambda req: httpx.Response(503, text="busy"))
    with pytest.raises(FetchError, match="HTTP 503") as exc_info:
        client.query_extracts(["Hydrogen"])
    assert exc_info.value.titles == ["Hydrogen"]


def test_transport_error_raises(make_client):
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(refuse)
    with pytest.raises(FetchError, match="failed"):
        client.query_extracts(["Hydrogen"])


def test_invalid_json_raises(make_client):
    client = make_client(lambda req: httpx.Response(200, text="<html>oops</html>"))
    with pytest.raises(FetchError, match="Malformed"):
        client.query_extracts(["Hydrogen"])


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"query": {}},
        {"query": {"pages": {"123": {"pageid": 123, "title": "Hydrogen", "extract": "x"}}}},
        {"query": {"pages": [{"pageid": 1, "title": "Hydrogen"}]}},
        {"query": {"pages": [{"pageid": "1", "title": "Hydrogen", "extract": "x"}]}},
        {"query": {"pages": [{"ns": 0, "title": "Nope", "missing": True}]}},
    ],
    ids=["empty", "no-pages", "legacy-dict-pages", "no-extract", "string-pageid", "missing-page"],
)
def test_unexpected_shape_raises(make_client, body):
    client = make_client(lambda req: httpx.Response(200, json=body))
    with pytest.raises(FetchError):
        client.query_extracts(["Hydrogen"])


def test_extra_fields_are_ignored(make_client):
    client = make_client(lambda req: httpx.Response(200, json=wiki_payload(["Neon"])))
    pages = client.query_extracts(["Neon"])
    assert pages[0].title == "Neon"
