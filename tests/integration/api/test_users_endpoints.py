"""Integration tests for /users endpoints."""

from fastapi.testclient import TestClient

from tests.integration.api.conftest import DEFAULT_PASSWORD


class TestRegister:
    """Tests for POST /users/register."""

    def test_register_success(self, test_client: TestClient):
        response = test_client.post(
            "/users/register",
            json={
                "email": "newuser@example.com",
                "password": "password1",
                "name": "New User",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "User registered successfully"
        assert set(body["data"]) == {"id", "email", "name", "createdAt"}
        assert body["data"]["email"] == "newuser@example.com"

    def test_register_normalizes_email_and_login_works(self, test_client, login):
        response = test_client.post(
            "/users/register",
            json={"email": "U@Test.com", "password": "password1", "name": "U"},
        )
        # Name too short: nothing stored
        assert response.status_code == 400

        response = test_client.post(
            "/users/register",
            json={"email": "U@Test.com", "password": "password1", "name": "Uma"},
        )
        assert response.status_code == 201
        assert response.json()["data"]["email"] == "u@test.com"

        headers = login("u@test.com")
        profile = test_client.get("/users/profile", headers=headers)
        assert profile.json()["data"]["email"] == "u@test.com"

    def test_register_duplicate_email(self, test_client, register_user):
        register_user("dup@example.com")

        response = test_client.post(
            "/users/register",
            json={"email": "DUP@example.com ", "password": "password1", "name": "Dup"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "A user with this email already exists.",
            "code": "EMAIL_ALREADY_EXISTS",
        }

    def test_register_weak_password(self, test_client: TestClient):
        response = test_client.post(
            "/users/register",
            json={"email": "weak@example.com", "password": "short", "name": "Weak"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == (
            "Password must be at least 8 characters long."
        )

    def test_register_invalid_email(self, test_client: TestClient):
        response = test_client.post(
            "/users/register",
            json={"email": "not-an-email", "password": "password1", "name": "Bad"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_EMAIL"

    def test_register_overlong_email(self, test_client: TestClient):
        response = test_client.post(
            "/users/register",
            json={
                "email": "a" * 300 + "@example.com",
                "password": "password1",
                "name": "Long",
            },
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_EMAIL"

    def test_register_missing_fields(self, test_client: TestClient):
        response = test_client.post("/users/register", json={"email": "a@b.co"})

        assert response.status_code == 400
        assert response.json()["message"] == "Email, password, and name are required."


class TestLogin:
    """Tests for POST /users/login."""

    def test_login_returns_token_and_user(self, test_client, register_user):
        register_user("login@example.com")

        response = test_client.post(
            "/users/login",
            json={"email": "login@example.com", "password": DEFAULT_PASSWORD},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login successful"
        assert body["data"]["token"]
        assert body["data"]["expiresIn"] == 24 * 3600
        assert body["data"]["user"]["email"] == "login@example.com"
        assert "passwordHash" not in body["data"]["user"]

    def test_unknown_email_and_wrong_password_identical(
        self,
        test_client,
        register_user,
    ):
        register_user("known@example.com")

        wrong_password = test_client.post(
            "/users/login",
            json={"email": "known@example.com", "password": "wrong-password"},
        )
        unknown_email = test_client.post(
            "/users/login",
            json={"email": "unknown@example.com", "password": "wrong-password"},
        )

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()
        assert wrong_password.json()["message"] == "Invalid credentials."

    def test_long_password_with_wrong_tail_is_rejected(
        self,
        test_client,
        register_user,
    ):
        register_user("long@example.com", password="A" * 72 + "correct1")

        response = test_client.post(
            "/users/login",
            json={"email": "long@example.com", "password": "A" * 72 + "WRONG-xyz"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"


class TestProfile:
    def test_requires_token(self, test_client: TestClient):
        response = test_client.get("/users/profile")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
        assert response.json()["success"] is False

    def test_rejects_garbage_token(self, test_client: TestClient):
        response = test_client.get(
            "/users/profile",
            headers={"Authorization": "Bearer garbage"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_TOKEN"

    def test_get_own_profile_by_id(self, test_client, alice):
        user, headers = alice

        response = test_client.get(f"/users/{user['id']}", headers=headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Alice"
        assert "updatedAt" in data

    def test_get_other_profile_is_401(self, test_client, alice, bob):
        _, alice_headers = alice
        bob_user, _ = bob

        response = test_client.get(f"/users/{bob_user['id']}", headers=alice_headers)

        assert response.status_code == 401
        assert response.json()["message"] == "You can only view your own profile."

    def test_invalid_user_id_is_400(self, test_client, alice):
        _, headers = alice

        response = test_client.get("/users/not-a-uuid", headers=headers)

        assert response.status_code == 400


class TestUpdateUser:
    def test_update_name(self, test_client, alice):
        user, headers = alice

        response = test_client.put(
            f"/users/{user['id']}",
            json={"name": "Alice Cooper"},
            headers=headers,
        )

        assert response.status_code == 200
        assert response.json()["message"] == "User updated successfully"
        assert response.json()["data"]["name"] == "Alice Cooper"

    def test_update_other_user_is_401(self, test_client, alice, bob):
        _, alice_headers = alice
        bob_user, _ = bob

        response = test_client.put(
            f"/users/{bob_user['id']}",
            json={"name": "Hijacked"},
            headers=alice_headers,
        )

        assert response.status_code == 401
        assert response.json()["message"] == "You can only update your own profile."

    def test_update_to_taken_email(self, test_client, alice, bob):
        alice_user, alice_headers = alice

        response = test_client.put(
            f"/users/{alice_user['id']}",
            json={"email": "BOB@example.com"},
            headers=alice_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "EMAIL_ALREADY_EXISTS"


class TestChangePassword:
    def test_change_password(self, test_client, alice, login):
        user, headers = alice

        response = test_client.put(
            f"/users/{user['id']}/password",
            json={"currentPassword": DEFAULT_PASSWORD, "password": "brand-new-pass"},
            headers=headers,
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Password updated successfully.",
        }
        login("alice@example.com", "brand-new-pass")

    def test_wrong_current_password_leaves_password_unchanged(
        self,
        test_client,
        alice,
        login,
    ):
        user, headers = alice

        response = test_client.put(
            f"/users/{user['id']}/password",
            json={"currentPassword": "not-my-password", "password": "brand-new-pass"},
            headers=headers,
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Current password is incorrect."
        login("alice@example.com", DEFAULT_PASSWORD)

    def test_missing_current_password_is_400(self, test_client, alice):
        user, headers = alice

        response = test_client.put(
            f"/users/{user['id']}/password",
            json={"password": "brand-new-pass"},
            headers=headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_INPUT"


class TestChangeEmail:
    def test_change_email(self, test_client, alice, login):
        user, headers = alice

        response = test_client.put(
            f"/users/{user['id']}/email",
            json={"newEmail": "Alice.New@Example.com", "currentPassword": "password1"},
            headers=headers,
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Email updated successfully"
        assert response.json()["data"]["email"] == "alice.new@example.com"
        login("alice.new@example.com")

    def test_wrong_current_password(self, test_client, alice):
        user, headers = alice

        response = test_client.put(
            f"/users/{user['id']}/email",
            json={"newEmail": "other@example.com", "currentPassword": "nope-nope"},
            headers=headers,
        )

        assert response.status_code == 401


class TestDeleteUser:
    def test_delete_account_removes_todos(self, test_client, alice):
        user, headers = alice
        test_client.post("/todos", json={"title": "Doomed"}, headers=headers)

        response = test_client.delete(f"/users/{user['id']}", headers=headers)

        assert response.status_code == 200
        assert response.json()["message"] == "User deleted successfully."
        # The token now points at a vanished user
        assert test_client.get("/todos", headers=headers).status_code == 401

    def test_delete_other_account_is_401(self, test_client, alice, bob):
        _, alice_headers = alice
        bob_user, bob_headers = bob

        response = test_client.delete(f"/users/{bob_user['id']}", headers=alice_headers)

        assert response.status_code == 401
        assert test_client.get("/users/profile", headers=bob_headers).status_code == 200
