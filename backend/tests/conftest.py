"""Shared test fixtures. Nothing here touches the network."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from elementsgrid.catalog.elements import ELEMENTS
from elementsgrid.catalog.lookup import title_of
from elementsgrid.config import Settings
from elementsgrid.wiki.client import WikiClient


ALL_EXTRACTS = {
    title_of(e.name): f"{e.name} is a chemical element with the symbol {e.symbol}."
    for e in ELEMENTS
}


def wiki_payload(titles: list[str]) -> dict:
    """A formatversion=2 response with one page per requested title."""
    return {
        "batchcomplete": True,
        "query": {
            "pages": [
                {"pageid": 1000 + i, "ns": 0, "title": t, "extract": ALL_EXTRACTS.get(t, f"{t}.")}
                for i, t in enumerate(titles)
            ],
        },
    }


class FakeWiki:
    """Records requests and answers them like the extracts API."""

    def __init__(self, fail_on_call: int | None = None, status_code: int = 500) -> None:
        self.requests: list[httpx.Request] = []
        self.fail_on_call = fail_on_call
        self.status_code = status_code

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_on_call is not None and len(self.requests) == self.fail_on_call:
            return httpx.Response(self.status_code, text="upstream error")
        titles = request.url.params["titles"].split("|")
        return httpx.Response(200, json=wiki_payload(titles))

    @property
    def batches(self) -> list[list[str]]:
        return [r.url.params["titles"].split("|") for r in self.requests]


@pytest.fixture
def all_extracts() -> dict[str, str]:
    return dict(ALL_EXTRACTS)


@pytest.fixture
def build_settings(tmp_path) -> Settings:
    return Settings(
        output_path=str(tmp_path / "assets" / "elementsGrid.json"),
        batch_delay_seconds=0.5,
        wiki_api_url="https://wiki.test/w/api.php",
    )


@pytest.fixture
def fake_wiki() -> FakeWiki:
    return FakeWiki()


@pytest.fixture
def make_client(build_settings) -> Callable[..., WikiClient]:
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> WikiClient:
        return WikiClient(build_settings, transport=httpx.MockTransport(handler))

    return _make
