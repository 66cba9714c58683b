"""
End-to-end tests against the fully assembled application.
"""
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from crudstore.app import create_app
from crudstore.config import Settings
from crudstore.dependencies.services import reset_services
from crudstore.monitoring import UNMATCHED_ENDPOINT, http_requests_total

API = "/api/v1"


def parse_time(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@pytest.fixture
def client():
    """Create a test client over a fresh application and empty stores."""
    reset_services()
    app = create_app(Settings())
    with TestClient(app) as client:
        yield client
    reset_services()


class TestItemLifecycle:

    def test_create_update_delete(self, client):
        """Create, update and delete an item through the API."""
        created = client.post(f"{API}/items", json={"name": "Laptop"})
        assert created.status_code == 201
        item = created.json()
        assert item["id"]
        assert item["created_at"] == item["updated_at"]

        updated = client.put(f"{API}/items/{item['id']}", json={"name": "Laptop Pro"})
        assert updated.status_code == 200
        new = updated.json()
        assert new["id"] == item["id"]
        assert new["created_at"] == item["created_at"]
        assert parse_time(new["updated_at"]) > parse_time(item["updated_at"])
        assert new["name"] == "Laptop Pro"

        deleted = client.delete(f"{API}/items/{item['id']}")
        assert deleted.status_code == 204

        missing = client.get(f"{API}/items/{item['id']}")
        assert missing.status_code == 404
        assert missing.json() == {"error": "Item not found"}

    def test_timestamps_are_rfc3339_utc(self, client):
        item = client.post(f"{API}/items", json={"name": "Laptop"}).json()

        created_at = parse_time(item["created_at"])
        assert item["created_at"].endswith("Z")
        assert created_at.utcoffset().total_seconds() == 0


class TestResourceIsolation:

    def test_items_and_clients_are_independent(self, client):
        item = client.post(f"{API}/items", json={"name": "iPhone 15"}).json()
        person = client.post(
            f"{API}/clients", json={"name": "Bob Johnson", "email": "bob@example.com"}
        ).json()

        assert client.get(f"{API}/clients/{item['id']}").status_code == 404
        assert client.get(f"{API}/items/{person['id']}").status_code == 404
        assert [i["id"] for i in client.get(f"{API}/items").json()] == [item["id"]]
        assert [c["id"] for c in client.get(f"{API}/clients").json()] == [person["id"]]


class TestConcurrentRequests:

    def test_parallel_creates(self, client):
        """Test 100 parallel POSTs produce 100 distinct records."""
        def create(i):
            return client.post(f"{API}/items", json={"name": f"item-{i}"})

        with ThreadPoolExecutor(max_workers=10) as pool:
            responses = list(pool.map(create, range(100)))

        assert all(r.status_code == 201 for r in responses)
        ids = {r.json()["id"] for r in responses}
        assert len(ids) == 100
        assert len(client.get(f"{API}/items").json()) == 100


class TestCrossCutting:

    def test_health(self, client):
        response = client.get(f"{API}/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_request_id_header(self, client):
        response = client.get(f"{API}/items")

        assert response.status_code == 200
        assert len(response.headers["X-Request-ID"]) == 8

    def test_cors_preflight(self, client):
        response = client.options(
            f"{API}/items",
            headers={
                "Origin": "http://example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert "POST" in response.headers["access-control-allow-methods"]

    def test_cors_simple_request(self, client):
        response = client.get(f"{API}/items", headers={"Origin": "http://example.com"})

        assert response.headers["access-control-allow-origin"] == "*"

    def test_unknown_route(self, client):
        response = client.get(f"{API}/widgets")

        assert response.status_code == 404
        assert "error" in response.json()

    def test_metrics_count_requests(self, client):
        client.get(f"{API}/items")

        response = client.get("/metrics")

        assert response.status_code == 200
        assert b"http_requests_total" in response.content


def request_endpoint_labels():
    """Distinct endpoint labels recorded by the request counter."""
    return {
        sample.labels["endpoint"]
        for family in http_requests_total.collect()
        for sample in family.samples
        if sample.name == "http_requests_total"
    }


class TestMetricsLabels:

    def test_record_ids_do_not_create_new_series(self, client):
        """Test requests on many arbitrary IDs share one endpoint label."""
        client.get(f"{API}/items/warm-up")
        before = request_endpoint_labels()

        for i in range(20):
            client.get(f"{API}/items/not-a-uuid-{i}")
            client.put(f"{API}/items/other-id-{i}", json={"name": "x"})
            client.delete(f"{API}/items/third-id-{i}")

        after = request_endpoint_labels()
        assert after == before
        assert f"{API}/items/{{record_id}}" in after
        assert not any("not-a-uuid" in label for label in after)

    def test_unmatched_paths_share_one_label(self, client):
        for i in range(10):
            assert client.get(f"/no-such-route-{i}").status_code == 404

        labels = request_endpoint_labels()
        assert UNMATCHED_ENDPOINT in labels
        assert not any("no-such-route" in label for label in labels)
