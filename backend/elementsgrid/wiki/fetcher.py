"""Batched, throttled extract fetching.

Batches run strictly one after another with a fixed pause in between. The
first failure aborts the whole fetch; nothing partial is returned.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator, Sequence

from elementsgrid.catalog.elements import CatalogEntry
from elementsgrid.catalog.lookup import title_of
from elementsgrid.wiki.client import WikiClient

logger = logging.getLogger(__name__)


def batched(entries: Sequence[CatalogEntry], size: int) -> Iterator[list[CatalogEntry]]:
    """Consecutive batches of at most ``size`` entries, in catalog order."""
    if size < 1:
        raise ValueError(f"Batch size must be positive, got {size}")
    for start in range(0, len(entries), size):
        yield list(entries[start:start + size])


def fetch_extracts(
    entries: Sequence[CatalogEntry],
    batch_size: int,
    inter_batch_delay: float,
    client: WikiClient,
    sleep: Callable[[float], None] = time.sleep,
) -> dict[str, str]:
    """Map each entry's Wikipedia title to its intro extract.

    Issues ceil(len(entries) / batch_size) requests and sleeps
    ``inter_batch_delay`` seconds between consecutive ones.
    """
    extracts: dict[str, str] = {}
    batches = list(batched(entries, batch_size))

    for i, batch in enumerate(batches):
        logger.info("Obtaining extracts for %s - %s", batch[0].symbol, batch[-1].symbol)

        pages = client.query_extracts([title_of(e.name) for e in batch])
        for page in pages:
            extracts[page.title] = page.extract

        if i < len(batches) - 1 and inter_batch_delay > 0:
            sleep(inter_batch_delay)

    logger.info("Fetched %d extract(s) in %d request(s)", len(extracts), len(batches))
    return extracts
