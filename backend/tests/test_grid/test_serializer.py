"""Tests for writing and reading the grid asset."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from elementsgrid.catalog.elements import ELEMENTS
from elementsgrid.grid.assembler import assemble
from elementsgrid.grid.serializer import decode_asset, load_asset, serialize_grid, write_asset


@pytest.fixture
def cells(all_extracts):
    return assemble(ELEMENTS, all_extracts, 10, 18)


def test_serialize_keeps_empty_cells(cells):
    data = serialize_grid(cells)
    assert list(data) == ["elements"]
    assert len(data["elements"]) == 180
    assert data["elements"][1]["symbol"] == "Li"
    assert data["elements"][1 * 10 + 0] is None
    assert data["elements"][0]["symbol"] == "H"
    assert data["elements"][0]["colors"] == [0xFF536DFE, 0xFF8E99F3]


def test_write_asset(cells, tmp_path):
    path = write_asset(cells, tmp_path / "assets" / "elementsGrid.json")

    text = path.read_text(encoding="utf-8")
    assert text.startswith('{\n  "elements": [\n')
    assert "u(±)" in text  # not escaped
    assert json.loads(text) == serialize_grid(cells)
    assert [p.name for p in path.parent.iterdir()] == ["elementsGrid.json"]


def test_load_asset_round_trip(cells, tmp_path):
    path = write_asset(cells, tmp_path / "elementsGrid.json")
    assert load_asset(path) == cells


def test_decode_accepts_parsed_and_raw(cells):
    data = serialize_grid(cells)
    assert decode_asset(data) == cells
    assert decode_asset(json.dumps(data)) == cells


def test_decode_rejects_bad_colors(cells):
    data = serialize_grid(cells)
    data["elements"][0]["colors"] = [1, 2, 3]
    with pytest.raises(ValidationError):
        decode_asset(data)


def test_load_missing_asset(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_asset(tmp_path / "nope.json")
