"""Tests for the build pipeline."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from elementsgrid.catalog.elements import CatalogEntry
from elementsgrid.errors import CatalogError, FetchError
from elementsgrid.pipeline import BuildPipeline, BuildResult, create_pipeline
from tests.conftest import FakeWiki


def _pipeline(build_settings, client, sleeps=None) -> BuildPipeline:
    sleeps = sleeps if sleeps is not None else []
    return BuildPipeline(config=build_settings, client=client, sleep=sleeps.append)


def test_create_pipeline(build_settings):
    pipeline = create_pipeline(build_settings)
    assert isinstance(pipeline, BuildPipeline)
    assert pipeline.config is build_settings


def test_build_writes_asset(build_settings, make_client, fake_wiki):
    sleeps: list[float] = []
    result = _pipeline(build_settings, make_client(fake_wiki), sleeps).run()

    assert isinstance(result, BuildResult)
    assert result.output_path == Path(build_settings.output_path)
    assert result.requests_issued == len(fake_wiki.requests) == 6
    assert result.element_count == 118
    assert len(result.cells) == 180
    assert set(result.timings_ms) == {"validate", "fetch", "assemble", "write"}
    assert sleeps == [0.5] * 5

    data = json.loads(result.output_path.read_text(encoding="utf-8"))
    assert len(data["elements"]) == 180
    assert sum(e is not None for e in data["elements"]) == 118


def test_fetch_failure_writes_nothing(build_settings, make_client):
    wiki = FakeWiki(fail_on_call=3)
    with pytest.raises(FetchError):
        _pipeline(build_settings, make_client(wiki)).run()
    assert not Path(build_settings.output_path).exists()


def test_invalid_catalog_stops_before_fetching(build_settings, make_client, fake_wiki):
    entries = [
        CatalogEntry(1, "H", "Hydrogen", column=0, row=0),
        CatalogEntry(2, "He", "Helium", column=0, row=0),
    ]
    with pytest.raises(CatalogError) as exc_info:
        _pipeline(build_settings, make_client(fake_wiki)).run(entries)

    assert any("already taken" in i for i in exc_info.value.issues)
    assert fake_wiki.requests == []
    assert not Path(build_settings.output_path).exists()


def test_failed_build_keeps_previous_asset(build_settings, make_client, fake_wiki):
    _pipeline(build_settings, make_client(fake_wiki)).run()
    before = Path(build_settings.output_path).read_bytes()

    with pytest.raises(FetchError):
        _pipeline(build_settings, make_client(FakeWiki(fail_on_call=1))).run()
    assert Path(build_settings.output_path).read_bytes() == before
