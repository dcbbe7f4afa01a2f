"""Tests for the read-only asset API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from elementsgrid.catalog.elements import ELEMENTS
from elementsgrid.dependencies import get_settings
from elementsgrid.grid.assembler import assemble
from elementsgrid.grid.serializer import write_asset
from elementsgrid.main import app


@pytest.fixture
def client(build_settings):
    app.dependency_overrides[get_settings] = lambda: build_settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def built(build_settings, all_extracts):
    write_asset(assemble(ELEMENTS, all_extracts, 10, 18), build_settings.output_path)


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["elements_in_catalog"] == 118


def test_elements(client, built):
    response = client.get("/api/elements")
    assert response.status_code == 200
    elements = response.json()["elements"]
    assert len(elements) == 180
    assert elements[0]["symbol"] == "H"
    assert elements[1]["symbol"] == "Li"
    assert elements[1 * 10 + 0] is None


@pytest.mark.parametrize("key", ["26", "Fe", "fe"])
def test_element_by_number_or_symbol(client, built, key):
    response = client.get(f"/api/elements/{key}")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Iron"
    assert data["category"] == "Transition Metal"


def test_unknown_element(client, built):
    assert client.get("/api/elements/Xx").status_code == 404
    assert client.get("/api/elements/119").status_code == 404


def test_asset_not_built(client):
    response = client.get("/api/elements")
    assert response.status_code == 503
    assert "elementsgrid build" in response.json()["detail"]


def test_categories(client):
    response = client.get("/api/categories")
    assert response.status_code == 200
    legend = response.json()
    assert len(legend) == 10
    assert sum(len(c["symbols"]) for c in legend) == 118
    nonmetal = next(c for c in legend if c["label"] == "Reactive Nonmetal")
    assert nonmetal["colors"] == [0xFF536DFE, 0xFF8E99F3]


@pytest.mark.parametrize("key", ["²", "٣", "Ⅻ"])
def test_non_ascii_numeric_key_is_not_found(client, built, key):
    assert client.get(f"/api/elements/{key}").status_code == 404


def test_health_reports_package_version(client):
    from elementsgrid import __version__

    assert client.get("/api/health").json()["version"] == __version__
