"""
Unit tests for the mock data generator.
"""

from datetime import date
import pytest

from petadopt.schemas.pet_data import Species
from petadopt.schemas.user_profile import UserRole
from petadopt.services.mock_generator import MockDataGenerator
from petadopt.utils.security import check_password, hash_password
from petadopt.utils.validators import is_valid_object_id, validate_email


class TestMockDataGenerator:
    """Tests for MockDataGenerator."""

    @pytest.fixture
    def password_hash(self):
        return hash_password("coder123", rounds=4)

    @pytest.fixture
    def generator(self, password_hash):
        return MockDataGenerator(password_hash=password_hash, seed=42)

    def test_generated_users(self, generator, password_hash):
        users = generator.generate_users(5)

        assert len(users) == 5
        for user in users:
            assert is_valid_object_id(user["_id"])
            assert user["first_name"] and user["last_name"]
            assert validate_email(user["email"])
            assert user["password"] == password_hash
            assert user["role"] in {role.value for role in UserRole}
            assert user["pets"] == []

    def test_generated_user_password_is_shared_hash(self, generator):
        user = generator.generate_user()
        assert check_password("coder123", user["password"])

    def test_generated_pets(self, generator):
        pets = generator.generate_pets(5)
        species = {s.value for s in Species}

        assert len(pets) == 5
        for pet in pets:
            assert is_valid_object_id(pet["_id"])
            assert pet["name"]
            assert pet["specie"] in species
            assert date.fromisoformat(pet["birthDate"]) <= date.today()
            assert pet["adopted"] is False
            assert pet["owner"] is None
            assert pet["image"]

    def test_non_positive_quantities(self, generator):
        assert generator.generate_pets(0) == []
        assert generator.generate_users(-4) == []

    def test_seed_makes_names_reproducible(self, password_hash):
        first = MockDataGenerator(password_hash, seed=7).generate_users(3)
        second = MockDataGenerator(password_hash, seed=7).generate_users(3)

        assert [u["email"] for u in first] == [u["email"] for u in second]
        assert [u["_id"] for u in first] != [u["_id"] for u in second]

    @pytest.mark.asyncio
    async def test_insert_generated(self, generator, users_service, pets_service, store):
        results = await generator.insert_generated(users_service, pets_service, users=3, pets=4)

        assert results == {"usersCreated": 3, "petsCreated": 4}
        assert len(await store.find_all("users")) == 3
        assert len(await store.find_all("pets")) == 4

    @pytest.mark.asyncio
    async def test_insert_nothing(self, generator, users_service, pets_service, store):
        results = await generator.insert_generated(users_service, pets_service)

        assert results == {"usersCreated": 0, "petsCreated": 0}
        assert await store.find_all("users") == []
