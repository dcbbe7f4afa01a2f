"""Thin httpx wrapper around the Wikipedia extracts query."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import httpx
from pydantic import ValidationError

from elementsgrid.config import Settings, settings as default_settings
from elementsgrid.errors import FetchError
from elementsgrid.models.wiki import QueryResponse, WikiPage

logger = logging.getLogger(__name__)

EXTRACT_SENTENCES = 5


def build_query_params(titles: Sequence[str]) -> dict[str, str]:
    """Query parameters for intro extracts of every title in one request."""
    return {
        "action": "query",
        "prop": "extracts",
        "exintro": "true",
        "exsentences": str(EXTRACT_SENTENCES),
        "explaintext": "true",
        "format": "json",
        "formatversion": "2",
        "titles": "|".join(titles),
    }


class WikiClient:
    """Issues extract queries. One call, one HTTP request; no retries."""

    def __init__(
        self,
        config: Settings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config or default_settings
        kwargs: dict = {
            "headers": {"User-Agent": self.config.wiki_user_agent},
            "transport": transport,
        }
        if self.config.request_timeout is not None:
            kwargs["timeout"] = httpx.Timeout(self.config.request_timeout)
        self._http = httpx.Client(**kwargs)

    def query_extracts(self, titles: Sequence[str]) -> list[WikiPage]:
        titles = list(titles)
        params = build_query_params(titles)
        try:
            response = self._http.get(self.config.wiki_api_url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"Extract query returned HTTP {e.response.status_code}", titles
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(f"Extract query failed: {e}", titles) from e

        try:
            payload = QueryResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise FetchError(
                f"Malformed extract response ({e.error_count()} problem(s))", titles
            ) from e

        logger.debug("Received %d page(s) for %d title(s)", len(payload.query.pages), len(titles))
        return payload.query.pages

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> WikiClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
