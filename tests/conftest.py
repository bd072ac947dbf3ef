"""
Shared fixtures for PetAdopt API tests.

Every test gets a fresh application over its own in-memory store.
"""

from typing import Any, Dict
import pytest
from fastapi.testclient import TestClient

from petadopt.api import create_app
from petadopt.config import Settings
from petadopt.services import AdoptionWorkflow, PetsService, UsersService
from petadopt.utils.store_clients import InMemoryStore


def make_settings(tmp_path, **overrides) -> Settings:
    """Test settings: low bcrypt cost, reproducible mock data, uploads under tmp_path."""
    values = {
        "environment": "development",
        "log_level": "WARNING",
        "store_backend": "memory",
        "bcrypt_rounds": 4,
        "mock_seed": 1234,
        "upload_dir": str(tmp_path / "img"),
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings_factory(tmp_path):
    """Build test settings with overrides."""

    def _factory(**overrides) -> Settings:
        return make_settings(tmp_path, **overrides)

    return _factory


@pytest.fixture
def test_settings(settings_factory):
    return settings_factory()


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def app(test_settings, store):
    return create_app(test_settings, store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def users_service(store):
    return UsersService(store, bcrypt_rounds=4)


@pytest.fixture
def pets_service(store):
    return PetsService(store)


@pytest.fixture
def workflow(store, users_service, pets_service):
    return AdoptionWorkflow(store, users_service, pets_service)


@pytest.fixture
def user_data() -> Dict[str, Any]:
    return {
        "first_name": "Ana",
        "last_name": "Garcia",
        "email": "ana.garcia@example.com",
        "password": "secret123"
    }


@pytest.fixture
def pet_data() -> Dict[str, Any]:
    return {"name": "Firulais", "specie": "dog", "birthDate": "2020-01-15"}


@pytest.fixture
def register_user(client):
    """Register a user through the API and return its ID."""
    counter = {"n": 0}

    def _register(**fields) -> str:
        counter["n"] += 1
        body = {
            "first_name": "User",
            "last_name": f"Number{counter['n']}",
            "email": f"user{counter['n']}@example.com",
            "password": "secret123",
            **fields
        }
        response = client.post("/api/sessions/register", json=body)
        assert response.status_code == 200, response.json()
        return response.json()["payload"]

    return _register


@pytest.fixture
def create_pet(client):
    """Create a pet through the API and return its ID."""

    def _create(**fields) -> str:
        body = {"name": "Firulais", "specie": "dog", "birthDate": "2020-01-15", **fields}
        response = client.post("/api/pets", json=body)
        assert response.status_code == 200, response.json()
        return response.json()["payload"]["_id"]

    return _create
