"""
Tests for the catalog accessor and its sources.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Any

import httpx
import pytest

from luxe_salon.application.exceptions import LoadError
from luxe_salon.application.ports.catalog_source import CatalogSourcePort
from luxe_salon.application.use_cases.catalog import CatalogAccessor
from luxe_salon.infrastructure.catalog.file_catalog_source import FileCatalogSource
from luxe_salon.infrastructure.catalog.http_catalog_source import HttpCatalogSource

CATALOG = {
    "women": {
        "hair-cut": [
            {"id": 1, "name": "Haircut & Blow Dry", "description": "Precision cut", "price": 800, "duration": "45 min", "popular": True},
            {"id": 2, "name": "Layered Cut", "description": "Soft layers for volume", "price": 1200, "duration": "60 min"},
        ],
        "facials": [
            {"id": 3, "name": "Hydrating Facial", "description": "Deep hydration for dry skin", "price": 2500, "duration": "60 min"},
        ],
    },
    "men": {
        "hair-cut": [
            {"id": 10, "name": "Classic Haircut", "description": "Clipper and scissor cut", "price": 400, "duration": "30 min"},
        ],
        "beard-grooming": [
            {"id": 11, "name": "Beard Trim", "description": "Trim and hot towel finish", "price": 300, "duration": "20 min"},
        ],
    },
}


class CountingSource(CatalogSourcePort):
    def __init__(self, document: Any) -> None:
        self.document = document
        self.calls = 0

    def fetch(self) -> Any:
        self.calls += 1
        return self.document


class FailingSource(CatalogSourcePort):
    def __init__(self) -> None:
        self.calls = 0

    def fetch(self) -> Any:
        self.calls += 1
        raise LoadError("Failed to load services data: 503 Service Unavailable")


def test_load_fetches_once():
    source = CountingSource(CATALOG)
    catalog = CatalogAccessor(source)

    first = catalog.load()
    second = catalog.load()

    assert source.calls == 1
    assert first is second
    assert catalog.is_loaded


def test_all_services_for_flattens_in_order():
    """Length equals the sum of the category lengths; order is category then insertion."""
    catalog = CatalogAccessor(CountingSource(CATALOG))
    catalog.load()

    women = catalog.all_services_for("women")

    assert len(women) == sum(len(v) for v in CATALOG["women"].values())
    assert [s.id for s in women] == [1, 2, 3]
    assert women[0].gender == "women"
    assert women[0].category == "hair-cut"


def test_find_by_id_scans_both_genders():
    catalog = CatalogAccessor(CountingSource(CATALOG))
    catalog.load()

    assert catalog.find_by_id(11).name == "Beard Trim"
    assert catalog.find_by_id(3).gender == "women"
    assert catalog.find_by_id(999) is None


def test_search_matches_name_or_description_case_insensitively():
    catalog = CatalogAccessor(CountingSource(CATALOG))
    catalog.load()

    assert [s.id for s in catalog.search("HAIRCUT", "women")] == [1]
    assert [s.id for s in catalog.search("volume", "women")] == [2]
    assert [s.id for s in catalog.search("cut", "women")] == [1, 2]
    # Scoped to one gender
    assert catalog.search("beard", "women") == []
    assert [s.id for s in catalog.search("beard", "men")] == [11]


def test_by_category():
    catalog = CatalogAccessor(CountingSource(CATALOG))
    catalog.load()

    assert [s.id for s in catalog.by_category("men", "hair-cut")] == [10]
    assert catalog.by_category("men", "facials") == []
    assert catalog.categories_for("men") == ["hair-cut", "beard-grooming"]


def test_invalid_document_caches_empty_fallback():
    """A document missing a gender key fails the load but leaves an empty catalog."""
    source = CountingSource({"women": CATALOG["women"]})
    catalog = CatalogAccessor(source)

    with pytest.raises(LoadError):
        catalog.load()

    assert catalog.is_loaded
    assert catalog.all_services_for("women") == []
    # Later loads return the cached fallback without fetching again
    assert catalog.load() == {"women": {}, "men": {}}
    assert source.calls == 1


def test_source_failure_propagates_and_reset_allows_retry():
    source = FailingSource()
    catalog = CatalogAccessor(source)

    with pytest.raises(LoadError):
        catalog.load()

    catalog.reset()
    assert not catalog.is_loaded
    with pytest.raises(LoadError):
        catalog.load()
    assert source.calls == 2


def test_entry_without_id_is_a_load_error():
    catalog = CatalogAccessor(CountingSource({"women": {"nails": [{"name": "No id"}]}, "men": {}}))

    with pytest.raises(LoadError):
        catalog.load()


def test_accessors_before_load_are_empty():
    catalog = CatalogAccessor(CountingSource(CATALOG))
    assert catalog.all_services_for("women") == []
    assert catalog.find_by_id(1) is None


def test_http_source_fetches_services_json():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/services.json"
        return httpx.Response(200, json=CATALOG)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    source = HttpCatalogSource(base_url="http://salon.test/", client=client)

    assert source.fetch() == CATALOG


def test_http_source_non_2xx_is_load_error():
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(404)))
    source = HttpCatalogSource(base_url="http://salon.test", client=client)

    with pytest.raises(LoadError) as exc_info:
        source.fetch()
    assert "404" in str(exc_info.value)


def test_http_source_bad_json_is_load_error():
    client = httpx.Client(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, content=b"<html>oops</html>"))
    )
    source = HttpCatalogSource(base_url="http://salon.test", client=client)

    with pytest.raises(LoadError):
        source.fetch()


def test_http_source_connection_error_is_load_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    source = HttpCatalogSource(base_url="http://salon.test", client=client)

    with pytest.raises(LoadError):
        source.fetch()


def test_file_source_reads_catalog():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "services.json"
        path.write_text(json.dumps(CATALOG), encoding="utf-8")

        catalog = CatalogAccessor(FileCatalogSource(path))
        catalog.load()

        assert len(catalog.all_services_for("men")) == 2


def test_file_source_missing_file_is_load_error():
    with tempfile.TemporaryDirectory() as tmpdir:
        source = FileCatalogSource(Path(tmpdir) / "missing.json")
        with pytest.raises(LoadError):
            source.fetch()
