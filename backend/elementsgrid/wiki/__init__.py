"""Wikipedia enrichment: extract queries and the batched fetcher."""

from elementsgrid.wiki.client import WikiClient, build_query_params
from elementsgrid.wiki.fetcher import batched, fetch_extracts

__all__ = [
    "WikiClient",
    "batched",
    "build_query_params",
    "fetch_extracts",
]
