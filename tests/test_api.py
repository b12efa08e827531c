"""
Tests for the REST API routes.
"""

from __future__ import annotations

import json
import tempfile
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from fastapi.testclient import TestClient

from luxe_salon.application.exceptions import StorageError
from luxe_salon.application.use_cases.loyalty import LoyaltyUseCase
from luxe_salon.application.use_cases.services import ServiceAdminUseCase
from luxe_salon.infrastructure.catalog.file_catalog_source import FileCatalogSource
from luxe_salon.infrastructure.store.json_store import JsonSalonStore
from luxe_salon.infrastructure.store.memory_store import MemorySalonStore
from luxe_salon.main import app
from luxe_salon.wiring.dependencies import (
    get_catalog_file_source,
    get_loyalty_use_case,
    get_service_admin_use_case,
)

HAIRCUT = {
    "name": "Haircut",
    "category": "hair",
    "subcategory": "cut",
    "gender": "women",
    "price": 500,
    "duration": "30 min",
    "popular": True,
}


class BrokenStore(MemorySalonStore):
    def list_services(self):
        raise StorageError("Error reading data: disk on fire")


def _client(store=None) -> TestClient:
    store = store or MemorySalonStore()
    app.dependency_overrides.clear()
    app.dependency_overrides[get_service_admin_use_case] = lambda: ServiceAdminUseCase(store=store)
    app.dependency_overrides[get_loyalty_use_case] = lambda: LoyaltyUseCase(store=store)
    return TestClient(app)


def teardown_function():
    app.dependency_overrides.clear()


def _create(client: TestClient, **overrides) -> dict:
    resp = client.post("/api/services", json={**HAIRCUT, **overrides})
    assert resp.status_code == 201
    return resp.json()["data"]


def test_health():
    assert _client().get("/health").json() == {"status": "ok"}


def test_create_first_service_gets_id_1():
    client = _client()

    resp = client.post("/api/services", json=HAIRCUT)

    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert body["data"]["id"] == 1
    assert body["data"]["name"] == "Haircut"
    assert body["data"]["price"] == 500
    assert body["data"]["popular"] is True
    assert body["data"]["image"] == "images/default.jpg"


def test_ids_are_max_plus_one_and_not_reused():
    client = _client()
    for _ in range(3):
        _create(client)

    client.delete("/api/services/2")
    assert _create(client)["id"] == 4


def test_list_filters_are_anded():
    client = _client()
    _create(client)
    _create(client, name="Beard Trim", category="grooming", subcategory="beard", gender="men", popular=True)
    _create(client, name="Layered Cut", popular=False)

    resp = client.get("/api/services", params={"gender": "women", "popular": "true"})
    body = resp.json()
    assert body["count"] == 1
    assert [s["name"] for s in body["data"]] == ["Haircut"]

    resp = client.get("/api/services", params={"category": "hair", "subcategory": "cut"})
    assert resp.json()["count"] == 2

    # popular only filters when it is "true"
    resp = client.get("/api/services", params={"popular": "false"})
    assert resp.json()["count"] == 3


def test_get_service_and_not_found():
    client = _client()
    created = _create(client)

    assert client.get(f"/api/services/{created['id']}").json()["data"]["name"] == "Haircut"

    resp = client.get("/api/services/42")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Service not found"}


def test_update_is_partial_and_id_is_immutable():
    client = _client()
    created = _create(client)

    resp = client.put(f"/api/services/{created['id']}", json={"id": 99, "price": 650})

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["id"] == created["id"]
    assert data["price"] == 650
    assert data["name"] == "Haircut"
    assert client.get("/api/services/99").status_code == 404


def test_update_rejects_null_and_keeps_stored_service():
    client = _client()
    created = _create(client)

    for field in ("name", "category", "subcategory", "gender", "description", "price", "duration", "popular"):
        resp = client.put(f"/api/services/{created['id']}", json={field: None})
        assert resp.status_code == 422, field
        assert resp.json()["success"] is False
        assert field in resp.json()["error"]

    assert client.get(f"/api/services/{created['id']}").json()["data"] == created


def test_update_can_clear_image():
    client = _client()
    created = _create(client, image="images/cut.jpg")

    resp = client.put(f"/api/services/{created['id']}", json={"image": None})

    assert resp.status_code == 200
    assert resp.json()["data"]["image"] is None


def test_update_rejects_unknown_gender():
    client = _client()
    created = _create(client)

    resp = client.put(f"/api/services/{created['id']}", json={"gender": "kids", "price": 1})

    assert resp.status_code == 422
    assert "gender" in resp.json()["error"]
    assert client.get(f"/api/services/{created['id']}").json()["data"]["price"] == 500


def test_concurrent_creates_get_unique_ids():
    with tempfile.TemporaryDirectory() as tmpdir:
        client = _client(JsonSalonStore(data_file=Path(tmpdir) / "services.json"))
        barrier = threading.Barrier(8)

        def create(_: int) -> int:
            barrier.wait()
            return _create(client)["id"]

        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(create, range(8)))

        assert sorted(ids) == list(range(1, 9))
        assert client.get("/api/services").json()["count"] == 8


def test_concurrent_registration_creates_one_card():
    client = _client()
    barrier = threading.Barrier(6)

    def register(i: int) -> int:
        barrier.wait()
        return client.post("/api/loyalty-cards", json={"name": f"A{i}", "email": "a@b.com"}).status_code

    with ThreadPoolExecutor(max_workers=6) as pool:
        statuses = list(pool.map(register, range(6)))

    assert sorted(statuses) == [201, 400, 400, 400, 400, 400]
    assert client.get("/api/loyalty-cards").json()["count"] == 1


def test_update_missing_service():
    resp = _client().put("/api/services/5", json={"price": 1})
    assert resp.status_code == 404


def test_delete_missing_service_leaves_list_unchanged():
    client = _client()
    _create(client)
    _create(client)

    resp = client.delete("/api/services/77")

    assert resp.status_code == 404
    assert resp.json()["success"] is False
    assert client.get("/api/services").json()["count"] == 2


def test_delete_service():
    client = _client()
    created = _create(client)

    resp = client.delete(f"/api/services/{created['id']}")

    assert resp.json() == {"success": True, "message": "Service deleted"}
    assert client.get("/api/services").json()["count"] == 0


def test_invalid_service_payload():
    resp = _client().post("/api/services", json={"category": "hair", "gender": "women", "price": 10})

    assert resp.status_code == 422
    assert resp.json()["success"] is False
    assert "name" in resp.json()["error"]


def test_storage_failure_is_500():
    resp = _client(BrokenStore()).get("/api/services")

    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Error reading data: disk on fire"}


def test_categories_are_distinct_in_first_seen_order():
    client = _client()
    _create(client)
    _create(client, name="Balayage", category="color", subcategory="highlights")
    _create(client, name="Fringe", category="hair", subcategory="fringe")
    _create(client, name="Beard Trim", category="grooming", subcategory="beard", gender="men")
    _create(client, name="Men's Cut", category="hair", subcategory="clipper", gender="men")

    assert client.get("/api/categories").json()["data"] == ["hair", "color", "grooming"]
    assert client.get("/api/categories", params={"gender": "men"}).json()["data"] == ["grooming", "hair"]

    resp = client.get("/api/categories/hair/subcategories")
    assert resp.json()["data"] == ["cut", "fringe", "clipper"]
    resp = client.get("/api/categories/hair/subcategories", params={"gender": "women"})
    assert resp.json()["data"] == ["cut", "fringe"]


def test_loyalty_card_lifecycle():
    client = _client()

    resp = client.post("/api/loyalty-cards", json={"name": "A", "email": "a@b.com", "phone": "9876543210"})
    assert resp.status_code == 201
    card = resp.json()["data"]
    assert card["points"] == 0
    assert card["visits"] == 0
    assert card["totalSpent"] == 0
    assert card["tier"] == "Bronze"
    assert card["createdAt"]

    resp = client.put("/api/loyalty-cards/a@b.com", json={"addPoints": 250})
    assert resp.status_code == 200
    card = resp.json()["data"]
    assert card["points"] == 250
    assert card["tier"] == "Silver"
    assert card["lastUpdated"]

    resp = client.put("/api/loyalty-cards/a@b.com", json={"addPoints": 800, "addVisits": 3, "addSpent": 12000})
    card = resp.json()["data"]
    assert (card["points"], card["visits"], card["totalSpent"], card["tier"]) == (1050, 3, 12000, "Platinum")

    assert client.get("/api/loyalty-cards/a@b.com").json()["data"]["points"] == 1050


def test_duplicate_loyalty_email_is_rejected():
    client = _client()
    client.post("/api/loyalty-cards", json={"name": "A", "email": "a@b.com"})

    resp = client.post("/api/loyalty-cards", json={"name": "Other", "email": "a@b.com"})

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Card already exists"}
    listing = client.get("/api/loyalty-cards").json()
    assert listing["count"] == 1
    assert listing["data"][0]["name"] == "A"


def test_loyalty_not_found_and_validation():
    client = _client()

    assert client.get("/api/loyalty-cards/ghost@example.com").status_code == 404
    assert client.put("/api/loyalty-cards/ghost@example.com", json={"addPoints": 5}).status_code == 404
    assert client.post("/api/loyalty-cards", json={"name": "A", "email": "not-an-email"}).status_code == 422

    client.post("/api/loyalty-cards", json={"name": "A", "email": "a@b.com"})
    resp = client.put("/api/loyalty-cards/a@b.com", json={"addPoints": -10})
    assert resp.status_code == 422


def test_json_file_backend_round_trip():
    """The same flow against the file store persists to disk."""
    with tempfile.TemporaryDirectory() as tmpdir:
        data_file = Path(tmpdir) / "services.json"
        client = _client(JsonSalonStore(data_file=data_file))

        _create(client)
        client.post("/api/loyalty-cards", json={"name": "A", "email": "a@b.com"})

        saved = json.loads(data_file.read_text(encoding="utf-8"))
        assert [s["id"] for s in saved["services"]] == [1]
        assert saved["loyaltyCards"][0]["email"] == "a@b.com"


def test_shell_and_static_catalog():
    with tempfile.TemporaryDirectory() as tmpdir:
        catalog_file = Path(tmpdir) / "services.json"
        catalog_file.write_text(
            json.dumps({"women": {"hair-cut": [{"id": 1, "name": "Cut", "description": "", "price": 1, "duration": "1 min"}]}, "men": {}}),
            encoding="utf-8",
        )
        app.dependency_overrides[get_catalog_file_source] = lambda: FileCatalogSource(catalog_file)
        client = TestClient(app)

        try:
            resp = client.get("/")
            assert resp.status_code == 200
            assert "text/html" in resp.headers["content-type"]
            assert 'data-service="hair-cut"' in resp.text

            resp = client.get("/services.json")
            assert resp.status_code == 200
            assert resp.json()["women"]["hair-cut"][0]["name"] == "Cut"
        finally:
            app.dependency_overrides.pop(get_catalog_file_source, None)


def test_static_catalog_missing():
    with tempfile.TemporaryDirectory() as tmpdir:
        app.dependency_overrides[get_catalog_file_source] = lambda: FileCatalogSource(Path(tmpdir) / "none.json")
        try:
            resp = TestClient(app).get("/services.json")
            assert resp.status_code == 404
            # Shell still renders without a catalog
            assert TestClient(app).get("/").status_code == 200
        finally:
            app.dependency_overrides.pop(get_catalog_file_source, None)
