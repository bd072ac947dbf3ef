"""
Unit tests for document store clients.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from google.api_core.exceptions import AlreadyExists, NotFound

from petadopt.errors import DuplicateKeyError
from petadopt.utils.store_clients import FirestoreStore, InMemoryStore, create_store


class TestInMemoryStore:
    """Tests for the process-local store."""

    @pytest.mark.asyncio
    async def test_insert_assigns_id(self, store):
        created = await store.insert("pets", {"name": "Rex"})

        assert len(created["_id"]) == 24
        assert await store.find_by_id("pets", created["_id"]) == created

    @pytest.mark.asyncio
    async def test_duplicate_id_rejected(self, store):
        await store.insert("pets", {"_id": "a" * 24, "name": "Rex"})

        with pytest.raises(DuplicateKeyError):
            await store.insert("pets", {"_id": "a" * 24, "name": "Max"})

    @pytest.mark.asyncio
    async def test_returned_documents_are_copies(self, store):
        created = await store.insert("users", {"pets": []})
        fetched = await store.find_by_id("users", created["_id"])
        fetched["pets"].append("x")

        assert (await store.find_by_id("users", created["_id"]))["pets"] == []

    @pytest.mark.asyncio
    async def test_find_one(self, store):
        await store.insert("users", {"email": "a@example.com"})
        await store.insert("users", {"email": "b@example.com"})

        found = await store.find_one("users", "email", "b@example.com")

        assert found["email"] == "b@example.com"
        assert await store.find_one("users", "email", "c@example.com") is None

    @pytest.mark.asyncio
    async def test_update_and_delete_missing(self, store):
        assert await store.update("pets", "b" * 24, {"name": "x"}) is False
        assert await store.delete("pets", "b" * 24) is False

    @pytest.mark.asyncio
    async def test_update_merges(self, store):
        created = await store.insert("pets", {"name": "Rex", "specie": "dog"})

        assert await store.update("pets", created["_id"], {"name": "Max"})
        assert await store.find_by_id("pets", created["_id"]) == {
            "_id": created["_id"], "name": "Max", "specie": "dog"
        }

    @pytest.mark.asyncio
    async def test_update_if_applies_only_on_match(self, store):
        created = await store.insert("pets", {"adopted": False, "owner": None})

        first = await store.update_if("pets", created["_id"], {"adopted": False}, {"adopted": True, "owner": "u1"})
        second = await store.update_if("pets", created["_id"], {"adopted": False}, {"adopted": True, "owner": "u2"})

        assert first is True
        assert second is False
        assert (await store.find_by_id("pets", created["_id"]))["owner"] == "u1"

    @pytest.mark.asyncio
    async def test_add_to_set_deduplicates(self, store):
        created = await store.insert("users", {"pets": []})

        assert await store.add_to_set("users", created["_id"], "pets", "p1")
        assert await store.add_to_set("users", created["_id"], "pets", "p1")
        assert (await store.find_by_id("users", created["_id"]))["pets"] == ["p1"]
        assert await store.add_to_set("users", "c" * 24, "pets", "p1") is False


class TestFirestoreStore:
    """Tests for the Firestore backend with a mocked client."""

    @pytest.fixture
    def firestore_store(self):
        firestore_store = FirestoreStore(project_id="test-project")
        firestore_store._client = MagicMock()
        return firestore_store

    def _document_ref(self, firestore_store):
        return firestore_store._client.collection.return_value.document.return_value

    @pytest.mark.asyncio
    async def test_insert_strips_id_from_body(self, firestore_store):
        ref = self._document_ref(firestore_store)
        ref.create = AsyncMock()

        created = await firestore_store.insert("pets", {"_id": "a" * 24, "name": "Rex"})

        ref.create.assert_awaited_once_with({"name": "Rex"})
        firestore_store._client.collection.return_value.document.assert_called_with("a" * 24)
        assert created == {"_id": "a" * 24, "name": "Rex"}

    @pytest.mark.asyncio
    async def test_insert_maps_already_exists(self, firestore_store):
        self._document_ref(firestore_store).create = AsyncMock(side_effect=AlreadyExists("exists"))

        with pytest.raises(DuplicateKeyError):
            await firestore_store.insert("pets", {"_id": "a" * 24, "name": "Rex"})

    @pytest.mark.asyncio
    async def test_find_by_id(self, firestore_store):
        snapshot = MagicMock(exists=True, id="a" * 24)
        snapshot.to_dict.return_value = {"name": "Rex"}
        self._document_ref(firestore_store).get = AsyncMock(return_value=snapshot)

        assert await firestore_store.find_by_id("pets", "a" * 24) == {"_id": "a" * 24, "name": "Rex"}

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self, firestore_store):
        self._document_ref(firestore_store).get = AsyncMock(return_value=MagicMock(exists=False))

        assert await firestore_store.find_by_id("pets", "a" * 24) is None

    @pytest.mark.asyncio
    async def test_update_missing_document(self, firestore_store):
        self._document_ref(firestore_store).update = AsyncMock(side_effect=NotFound("missing"))

        assert await firestore_store.update("pets", "a" * 24, {"name": "Max"}) is False

    @pytest.mark.asyncio
    async def test_add_to_set_missing_document(self, firestore_store):
        self._document_ref(firestore_store).update = AsyncMock(side_effect=NotFound("missing"))

        assert await firestore_store.add_to_set("users", "a" * 24, "pets", "p1") is False


class TestCreateStore:

    def test_memory_backend(self, settings_factory):
        assert isinstance(create_store(settings_factory()), InMemoryStore)

    def test_firestore_backend_is_lazy(self, settings_factory):
        config = settings_factory(store_backend="firestore", gcp_project_id="demo")
        created = create_store(config)

        assert isinstance(created, FirestoreStore)
        assert created.project_id == "demo"
        assert created._client is None

    def test_unknown_backend(self, settings_factory):
        with pytest.raises(ValueError):
            create_store(settings_factory(store_backend="mongo"))
