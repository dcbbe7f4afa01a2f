"""Response shapes of the Wikipedia extracts query (formatversion=2)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class WikiPage(BaseModel):
    model_config = ConfigDict(strict=True)

    pageid: int
    title: str
    extract: str


class QueryResult(BaseModel):
    pages: list[WikiPage]


class QueryResponse(BaseModel):
    query: QueryResult
