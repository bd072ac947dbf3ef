"""
Integration tests for account registration.
"""

from petadopt.utils.security import check_password
from petadopt.utils.validators import is_valid_object_id


class TestRegister:
    """Tests for POST /api/sessions/register."""

    def test_register(self, client, user_data):
        response = client.post("/api/sessions/register", json=user_data)

        assert response.status_code == 200
        user_id = response.json()["payload"]
        assert is_valid_object_id(user_id)

        user = client.get(f"/api/users/{user_id}").json()["payload"]
        assert user["email"] == user_data["email"]
        assert user["password"].startswith("$2b$")
        assert check_password(user_data["password"], user["password"])

    def test_register_admin(self, client, user_data):
        user_data["role"] = "admin"
        user_id = client.post("/api/sessions/register", json=user_data).json()["payload"]

        assert client.get(f"/api/users/{user_id}").json()["payload"]["role"] == "admin"

    def test_duplicate_email(self, client, user_data):
        client.post("/api/sessions/register", json=user_data)

        response = client.post("/api/sessions/register", json=user_data)

        assert response.status_code == 400
        assert response.json()["error"] == "User already exists"
        assert len(client.get("/api/users").json()["payload"]) == 1

    def test_incomplete(self, client, user_data):
        del user_data["last_name"]

        response = client.post("/api/sessions/register", json=user_data)

        assert response.status_code == 400
        assert response.json()["error"] == "Incomplete values"

    def test_invalid_email(self, client, user_data):
        user_data["email"] = "ana.garcia"

        response = client.post("/api/sessions/register", json=user_data)

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid email format"

    def test_client_id_must_be_well_formed(self, client, user_data):
        user_data["_id"] = "zzz"

        response = client.post("/api/sessions/register", json=user_data)

        assert response.status_code == 400
        assert "_id" in response.json()["error"]
        assert client.get("/api/users").json()["payload"] == []

    def test_supplied_pets_are_ignored(self, client, user_data):
        user_data["pets"] = ["b" * 24]

        user_id = client.post("/api/sessions/register", json=user_data).json()["payload"]

        assert client.get(f"/api/users/{user_id}").json()["payload"]["pets"] == []
