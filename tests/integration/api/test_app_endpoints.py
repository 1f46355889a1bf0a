"""Integration tests for health, info and unknown routes."""

from fastapi.testclient import TestClient


def test_health(test_client: TestClient):
    response = test_client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"
    assert body["environment"] == "test"


def test_root(test_client: TestClient):
    response = test_client.get("/")

    assert response.status_code == 200
    assert response.json()["endpoints"] == {"users": "/users", "todos": "/todos"}


def test_unknown_route(test_client: TestClient):
    response = test_client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "message": "Endpoint not found",
        "code": "ENDPOINT_NOT_FOUND",
    }


def test_docs_enabled_in_debug(test_client: TestClient):
    assert test_client.get("/openapi.json").status_code == 200
