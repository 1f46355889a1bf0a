"""Integration tests for /todos endpoints."""

from uuid import uuid4

from fastapi.testclient import TestClient


def _create(client: TestClient, headers: dict, **payload) -> dict:
    response = client.post("/todos", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestCreateTodo:
    def test_create(self, test_client, alice):
        user, headers = alice

        response = test_client.post(
            "/todos",
            json={"title": "  Buy milk ", "content": "2 litres"},
            headers=headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Todo created successfully"
        todo = body["data"]
        assert todo["title"] == "Buy milk"
        assert todo["content"] == "2 litres"
        assert todo["completed"] is False
        assert todo["ownerId"] == user["id"]
        assert {"id", "createdAt", "updatedAt"} <= set(todo)

    def test_owner_in_payload_is_ignored(self, test_client, alice, bob):
        alice_user, alice_headers = alice
        bob_user, _ = bob

        todo = _create(
            test_client,
            alice_headers,
            title="Spoofed",
            ownerId=bob_user["id"],
        )

        assert todo["ownerId"] == alice_user["id"]

    def test_missing_title(self, test_client, alice):
        _, headers = alice

        response = test_client.post("/todos", json={"content": "x"}, headers=headers)

        assert response.status_code == 400
        assert response.json()["message"] == "Title is required."

    def test_requires_auth(self, test_client: TestClient):
        assert test_client.post("/todos", json={"title": "x"}).status_code == 401


class TestListAndGetTodos:
    def test_list_only_own_todos(self, test_client, alice, bob):
        _, alice_headers = alice
        _, bob_headers = bob
        _create(test_client, alice_headers, title="First")
        _create(test_client, alice_headers, title="Second")
        _create(test_client, bob_headers, title="Bob's")

        response = test_client.get("/todos", headers=alice_headers)

        assert response.status_code == 200
        titles = [t["title"] for t in response.json()["data"]]
        assert sorted(titles) == ["First", "Second"]

    def test_get_own(self, test_client, alice):
        _, headers = alice
        todo = _create(test_client, headers, title="Mine")

        response = test_client.get(f"/todos/{todo['id']}", headers=headers)

        assert response.status_code == 200
        assert response.json()["data"]["title"] == "Mine"

    def test_foreign_todo_is_not_found(self, test_client, alice, bob):
        _, alice_headers = alice
        _, bob_headers = bob
        todo = _create(test_client, alice_headers, title="Private")

        foreign = test_client.get(f"/todos/{todo['id']}", headers=bob_headers)
        missing = test_client.get(f"/todos/{uuid4()}", headers=bob_headers)

        assert foreign.status_code == missing.status_code == 404
        assert foreign.json() == missing.json()


class TestUpdateTodo:
    def test_partial_update(self, test_client, alice):
        _, headers = alice
        todo = _create(test_client, headers, title="Draft", content="notes")

        response = test_client.put(
            f"/todos/{todo['id']}",
            json={"completed": True},
            headers=headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["completed"] is True
        assert data["title"] == "Draft"
        assert data["content"] == "notes"

    def test_empty_content_clears(self, test_client, alice):
        _, headers = alice
        todo = _create(test_client, headers, title="Draft", content="notes")

        response = test_client.put(
            f"/todos/{todo['id']}",
            json={"content": ""},
            headers=headers,
        )

        assert response.json()["data"]["content"] is None

    def test_other_user_cannot_update(self, test_client, alice, bob):
        _, alice_headers = alice
        _, bob_headers = bob
        todo = _create(test_client, alice_headers, title="Original")

        response = test_client.put(
            f"/todos/{todo['id']}",
            json={"title": "Hacked"},
            headers=bob_headers,
        )

        assert response.status_code == 404
        assert response.json()["message"] == (
            "Todo not found or you do not have permission to update this todo."
        )
        current = test_client.get(f"/todos/{todo['id']}", headers=alice_headers)
        assert current.json()["data"]["title"] == "Original"

    def test_invalid_title(self, test_client, alice):
        _, headers = alice
        todo = _create(test_client, headers, title="Draft")

        response = test_client.put(
            f"/todos/{todo['id']}",
            json={"title": "t" * 256},
            headers=headers,
        )

        assert response.status_code == 400


class TestDeleteTodo:
    def test_delete_returns_todo(self, test_client, alice):
        _, headers = alice
        todo = _create(test_client, headers, title="Bye")

        response = test_client.delete(f"/todos/{todo['id']}", headers=headers)

        assert response.status_code == 200
        assert response.json()["message"] == "Todo deleted successfully"
        assert response.json()["data"]["id"] == todo["id"]
        assert test_client.get(f"/todos/{todo['id']}", headers=headers).status_code == 404

    def test_other_user_cannot_delete(self, test_client, alice, bob):
        _, alice_headers = alice
        _, bob_headers = bob
        todo = _create(test_client, alice_headers, title="Keep")

        response = test_client.delete(f"/todos/{todo['id']}", headers=bob_headers)

        assert response.status_code == 404
        assert test_client.get(f"/todos/{todo['id']}", headers=alice_headers).status_code == 200
