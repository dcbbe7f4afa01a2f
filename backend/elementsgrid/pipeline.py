"""Build orchestrator: validate -> fetch -> assemble -> write.

Stages run in order and the first error aborts the run, so a failed build
never leaves a new asset behind.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from elementsgrid.catalog.elements import ELEMENTS, CatalogEntry
from elementsgrid.catalog.lookup import validate_catalog
from elementsgrid.config import Settings, settings as default_settings
from elementsgrid.errors import CatalogError
from elementsgrid.grid.assembler import GridCells, assemble
from elementsgrid.grid.serializer import write_asset
from elementsgrid.wiki.client import WikiClient
from elementsgrid.wiki.fetcher import fetch_extracts

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Everything a finished build produced."""

    cells: GridCells = field(default_factory=list)
    output_path: Path | None = None
    requests_issued: int = 0
    element_count: int = 0
    timings_ms: dict[str, float] = field(default_factory=dict)


class BuildPipeline:
    """Runs the asset build once per call to run()."""

    def __init__(
        self,
        config: Settings | None = None,
        client: WikiClient | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config or default_settings
        self.client = client
        self.sleep = sleep

    def run(self, entries: Sequence[CatalogEntry] = ELEMENTS) -> BuildResult:
        cfg = self.config
        result = BuildResult()
        start = time.perf_counter()

        with _stage("validate", result):
            issues = validate_catalog(entries, rows=cfg.grid_rows, columns=cfg.grid_columns)
            if issues:
                raise CatalogError(issues)

        with _stage("fetch", result):
            client = self.client or WikiClient(cfg)
            try:
                extracts = fetch_extracts(
                    entries,
                    batch_size=cfg.batch_size,
                    inter_batch_delay=cfg.batch_delay_seconds,
                    client=client,
                    sleep=self.sleep,
                )
            finally:
                if self.client is None:
                    client.close()
            result.requests_issued = math.ceil(len(entries) / cfg.batch_size)

        with _stage("assemble", result):
            result.cells = assemble(entries, extracts, cfg.grid_rows, cfg.grid_columns)
            result.element_count = sum(1 for c in result.cells if c is not None)

        with _stage("write", result):
            result.output_path = write_asset(result.cells, cfg.output_path)

        logger.info(
            "Build complete: %d elements in %d cells in %.0fms",
            result.element_count,
            len(result.cells),
            (time.perf_counter() - start) * 1000,
        )
        return result


@contextmanager
def _stage(name: str, result: BuildResult) -> Iterator[None]:
    """Record a stage's elapsed time; log and re-raise on failure."""
    t0 = time.perf_counter()
    try:
        yield
    except Exception as e:
        logger.error("  %s FAILED: %s", name, e)
        raise
    else:
        logger.debug("  %s completed in %.1fms", name, (time.perf_counter() - t0) * 1000)
    finally:
        result.timings_ms[name] = round((time.perf_counter() - t0) * 1000, 1)


def create_pipeline(config: Settings | None = None, client: WikiClient | None = None) -> BuildPipeline:
    """Factory function for creating a build pipeline."""
    return BuildPipeline(config=config, client=client)
