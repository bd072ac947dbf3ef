"""
Document store clients.

Users, pets and adoption records live in independent collections of
JSON-compatible documents keyed by ``_id``. Two backends share one
interface: an in-process store used for tests and local runs, and
Google Cloud Firestore.
"""

import asyncio
import copy
from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Any, Dict, List, Optional
from loguru import logger

from ..config import Settings, settings as default_settings
from ..errors import DuplicateKeyError
from ..schemas.identifiers import generate_object_id


class DocumentStore(ABC):
    """Single-document operations over named collections."""

    @abstractmethod
    async def insert(self, collection: str, document: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a document, assigning ``_id`` when absent. Returns the stored document."""

    @abstractmethod
    async def find_by_id(self, collection: str, document_id: str) -> Optional[Dict[str, Any]]:
        """Fetch one document by identifier, or None."""

    @abstractmethod
    async def find_all(self, collection: str) -> List[Dict[str, Any]]:
        """Fetch every document in a collection."""

    @abstractmethod
    async def find_one(self, collection: str, field: str, value: Any) -> Optional[Dict[str, Any]]:
        """Fetch the first document whose ``field`` equals ``value``, or None."""

    @abstractmethod
    async def update(self, collection: str, document_id: str, changes: Dict[str, Any]) -> bool:
        """Merge ``changes`` into a document. Returns False if it does not exist."""

    @abstractmethod
    async def delete(self, collection: str, document_id: str) -> bool:
        """Delete a document. Returns False if it does not exist."""

    @abstractmethod
    async def update_if(
        self,
        collection: str,
        document_id: str,
        expected: Dict[str, Any],
        changes: Dict[str, Any]
    ) -> bool:
        """
        Conditional update.

        Applies ``changes`` only if every field in ``expected`` currently
        holds the given value, as one atomic step. Returns whether the
        update was applied.
        """

    @abstractmethod
    async def add_to_set(self, collection: str, document_id: str, field: str, value: Any) -> bool:
        """Append ``value`` to the list ``field`` unless already present. Returns False if missing."""


class InMemoryStore(DocumentStore):
    """
    Process-local document store.

    Documents are deep-copied on the way in and out so callers never share
    state with the store.
    """

    def __init__(self):
        self._collections: Dict[str, Dict[str, Dict[str, Any]]] = defaultdict(dict)
        self._lock = asyncio.Lock()

    async def insert(self, collection: str, document: Dict[str, Any]) -> Dict[str, Any]:
        stored = copy.deepcopy(document)
        stored["_id"] = stored.get("_id") or generate_object_id()
        async with self._lock:
            if stored["_id"] in self._collections[collection]:
                raise DuplicateKeyError(collection, stored["_id"])
            self._collections[collection][stored["_id"]] = stored
        return copy.deepcopy(stored)

    async def find_by_id(self, collection: str, document_id: str) -> Optional[Dict[str, Any]]:
        document = self._collections[collection].get(document_id)
        return copy.deepcopy(document) if document is not None else None

    async def find_all(self, collection: str) -> List[Dict[str, Any]]:
        return [copy.deepcopy(doc) for doc in self._collections[collection].values()]

    async def find_one(self, collection: str, field: str, value: Any) -> Optional[Dict[str, Any]]:
        for document in self._collections[collection].values():
            if document.get(field) == value:
                return copy.deepcopy(document)
        return None

    async def update(self, collection: str, document_id: str, changes: Dict[str, Any]) -> bool:
        async with self._lock:
            document = self._collections[collection].get(document_id)
            if document is None:
                return False
            document.update(copy.deepcopy(changes))
        return True

    async def delete(self, collection: str, document_id: str) -> bool:
        async with self._lock:
            return self._collections[collection].pop(document_id, None) is not None

    async def update_if(
        self,
        collection: str,
        document_id: str,
        expected: Dict[str, Any],
        changes: Dict[str, Any]
    ) -> bool:
        async with self._lock:
            document = self._collections[collection].get(document_id)
            if document is None:
                return False
            if any(document.get(key) != value for key, value in expected.items()):
                return False
            document.update(copy.deepcopy(changes))
        return True

    async def add_to_set(self, collection: str, document_id: str, field: str, value: Any) -> bool:
        async with self._lock:
            document = self._collections[collection].get(document_id)
            if document is None:
                return False
            items = document.setdefault(field, [])
            if value not in items:
                items.append(copy.deepcopy(value))
        return True


class FirestoreStore(DocumentStore):
    """
    Google Cloud Firestore backend using the async client.

    The document ``_id`` is the Firestore document ID and is not stored
    inside the document body.
    """

    def __init__(
        self,
        project_id: str,
        database: str = "(default)",
        credentials_path: Optional[str] = None
    ):
        self.project_id = project_id
        self.database = database
        self.credentials_path = credentials_path
        self._client = None

    @property
    def client(self):
        """Lazy-load the Firestore async client."""
        if self._client is None:
            from google.cloud import firestore

            kwargs: Dict[str, Any] = {"project": self.project_id, "database": self.database}
            if self.credentials_path:
                from google.oauth2 import service_account
                kwargs["credentials"] = service_account.Credentials.from_service_account_file(
                    self.credentials_path
                )
            self._client = firestore.AsyncClient(**kwargs)
            logger.info(f"Firestore client initialized for project {self.project_id}")
        return self._client

    @staticmethod
    def _to_record(snapshot) -> Dict[str, Any]:
        return {"_id": snapshot.id, **(snapshot.to_dict() or {})}

    def _ref(self, collection: str, document_id: str):
        return self.client.collection(collection).document(document_id)

    async def insert(self, collection: str, document: Dict[str, Any]) -> Dict[str, Any]:
        from google.api_core.exceptions import AlreadyExists

        data = dict(document)
        document_id = data.pop("_id", None) or generate_object_id()
        try:
            await self._ref(collection, document_id).create(data)
        except AlreadyExists as e:
            raise DuplicateKeyError(collection, document_id) from e
        return {"_id": document_id, **data}

    async def find_by_id(self, collection: str, document_id: str) -> Optional[Dict[str, Any]]:
        snapshot = await self._ref(collection, document_id).get()
        return self._to_record(snapshot) if snapshot.exists else None

    async def find_all(self, collection: str) -> List[Dict[str, Any]]:
        return [
            self._to_record(snapshot)
            async for snapshot in self.client.collection(collection).stream()
        ]

    async def find_one(self, collection: str, field: str, value: Any) -> Optional[Dict[str, Any]]:
        from google.cloud import firestore

        query = (
            self.client.collection(collection)
            .where(filter=firestore.FieldFilter(field, "==", value))
            .limit(1)
        )
        async for snapshot in query.stream():
            return self._to_record(snapshot)
        return None

    async def update(self, collection: str, document_id: str, changes: Dict[str, Any]) -> bool:
        from google.api_core.exceptions import NotFound

        ref = self._ref(collection, document_id)
        if not changes:
            return (await ref.get()).exists
        try:
            await ref.update(changes)
        except NotFound:
            return False
        return True

    async def delete(self, collection: str, document_id: str) -> bool:
        ref = self._ref(collection, document_id)
        snapshot = await ref.get()
        if not snapshot.exists:
            return False
        await ref.delete()
        return True

    async def update_if(
        self,
        collection: str,
        document_id: str,
        expected: Dict[str, Any],
        changes: Dict[str, Any]
    ) -> bool:
        from google.cloud import firestore

        ref = self._ref(collection, document_id)
        transaction = self.client.transaction()

        @firestore.async_transactional
        async def _apply_in_transaction(transaction) -> bool:
            snapshot = await ref.get(transaction=transaction)
            if not snapshot.exists:
                return False
            current = snapshot.to_dict() or {}
            if any(current.get(key) != value for key, value in expected.items()):
                return False
            transaction.update(ref, changes)
            return True

        return await _apply_in_transaction(transaction)

    async def add_to_set(self, collection: str, document_id: str, field: str, value: Any) -> bool:
        from google.api_core.exceptions import NotFound
        from google.cloud import firestore

        try:
            await self._ref(collection, document_id).update({field: firestore.ArrayUnion([value])})
        except NotFound:
            return False
        return True


def create_store(config: Optional[Settings] = None) -> DocumentStore:
    """
    Build the document store selected by configuration.

    Args:
        config: Settings to read; defaults to the global settings

    Returns:
        A DocumentStore instance
    """
    config = config or default_settings
    backend = config.store_backend.lower()

    if backend == "firestore":
        logger.info(f"Using Firestore document store (project={config.gcp_project_id})")
        return FirestoreStore(
            project_id=config.gcp_project_id,
            database=config.firestore_database,
            credentials_path=config.gcp_credentials_path
        )
    if backend == "memory":
        logger.info("Using in-memory document store")
        return InMemoryStore()

    raise ValueError(f"Unknown store backend: {config.store_backend}")
